"""Chat session endpoints.

Thin HTTP surface over the session registry: create a conversation,
submit messages, reset, and read the current snapshot.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.chat.controller import ConversationController
from src.chat.sessions import SessionNotFoundError, SessionRegistry, get_session_registry
from src.models.schemas import ChatRequest, ConversationSnapshot, SubmitResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_controller(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> ConversationController:
    """Look up the controller for a session.

    Raises:
        HTTPException: 404 if the session does not exist.
    """
    try:
        return registry.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        ) from e


@router.post("", response_model=ConversationSnapshot, status_code=status.HTTP_201_CREATED)
async def create_session(
    registry: SessionRegistry = Depends(get_session_registry),
) -> ConversationSnapshot:
    """Start a new conversation seeded with the welcome message."""
    return registry.create().snapshot()


@router.get("/{session_id}", response_model=ConversationSnapshot)
async def get_session(
    controller: ConversationController = Depends(_get_controller),
) -> ConversationSnapshot:
    """Return the current state of a conversation."""
    return controller.snapshot()


@router.post("/{session_id}/messages", response_model=SubmitResponse)
async def submit_message(
    request: ChatRequest,
    controller: ConversationController = Depends(_get_controller),
) -> SubmitResponse:
    """Submit a user message and wait for the bot reply.

    Remote failures come back as an error-flagged bot message, not as an
    HTTP error. A message sent while another is in flight is not queued:
    the response has accepted=false.

    Raises:
        404: Unknown session.
        422: Blank or missing message.
    """
    accepted = await controller.submit(request.message)
    return SubmitResponse(accepted=accepted, snapshot=controller.snapshot())


@router.post("/{session_id}/reset", response_model=ConversationSnapshot)
async def reset_session(
    controller: ConversationController = Depends(_get_controller),
) -> ConversationSnapshot:
    """Clear the conversation back to the welcome-back message."""
    controller.reset()
    return controller.snapshot()


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    """Discard a conversation."""
    try:
        registry.discard(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        ) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
