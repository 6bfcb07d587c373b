"""Pydantic models for chat state and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: A displayed chat message (user or bot)
    - HistoryEntry: A role-tagged context fragment sent to the model
    - AnimationState: Typing animation progress
    - ChatRequest: Incoming message payload
    - ConversationSnapshot: Rendering view of one conversation
    - SubmitResponse: Result of a submitted message
"""

from src.models.schemas import (
    AnimationState,
    ChatRequest,
    ConversationSnapshot,
    HistoryEntry,
    Message,
    Role,
    Sender,
    SubmitResponse,
)

__all__ = [
    "AnimationState",
    "ChatRequest",
    "ConversationSnapshot",
    "HistoryEntry",
    "Message",
    "Role",
    "Sender",
    "SubmitResponse",
]
