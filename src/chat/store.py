"""Ordered list of messages shown in the chat window."""

from src.models.schemas import Message, Sender

_CAPABILITIES = (
    "I can help with:\n"
    "- Answering questions\n"
    "- Writing content\n"
    "- Code examples\n"
    "- Problem solving"
)

WELCOME_TEXT = f"Hello! I am powered by Google Gemini AI. How can I help you today?\n\n{_CAPABILITIES}"
WELCOME_BACK_TEXT = f"Chat history has been reset. How can I help you today?\n\n{_CAPABILITIES}"


class ConversationStore:
    """In-memory, append-only message list.

    Starts with the welcome message. reset() swaps the whole list for the
    welcome-back message.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = [Message(text=WELCOME_TEXT, sender=Sender.BOT)]

    def append(self, message: Message) -> int:
        """Append a message and return its index."""
        self._messages.append(message)
        return len(self._messages) - 1

    def reset(self) -> None:
        self._messages = [Message(text=WELCOME_BACK_TEXT, sender=Sender.BOT)]

    def all(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]
