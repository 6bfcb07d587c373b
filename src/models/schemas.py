from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Who produced a displayed chat message."""

    USER = "user"
    BOT = "bot"


class Role(str, Enum):
    """Role tags understood by the remote model."""

    USER = "user"
    MODEL = "model"


class Message(BaseModel):
    """A single message shown in the chat window.

    Attributes:
        text: The message body (Markdown for bot messages).
        sender: Who produced the message.
        is_error: Whether this is a fallback message for a failed request.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    sender: Sender
    is_error: bool = False


class HistoryEntry(BaseModel):
    """A role-tagged fragment of the context sent to the model."""

    model_config = ConfigDict(frozen=True)

    role: Role
    text: str


class AnimationState(BaseModel):
    """Progress of the typing animation.

    Attributes:
        active_index: Index of the bot message being revealed, None when idle.
        revealed_length: Number of characters revealed so far.
    """

    active_index: int | None = None
    revealed_length: int = Field(default=0, ge=0)


class ChatRequest(BaseModel):
    """Request payload for submitting a message to a session.

    Attributes:
        message: User's question or prompt.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ConversationSnapshot(BaseModel):
    """Everything the presentation layer needs to draw one conversation.

    Attributes:
        session_id: Session identifier.
        messages: Displayed messages in chronological order.
        is_loading: Whether a request is in flight.
        error: Banner text for the last failed request, if any.
        animation: Typing animation progress.
    """

    session_id: str
    messages: list[Message]
    is_loading: bool
    error: str | None = None
    animation: AnimationState


class SubmitResponse(BaseModel):
    """Result of submitting a message.

    Attributes:
        accepted: False when the message was blank or a request was in flight.
        snapshot: Conversation state after the turn.
    """

    accepted: bool
    snapshot: ConversationSnapshot
