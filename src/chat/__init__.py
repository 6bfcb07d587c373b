"""Conversation state management.

Responsibilities:
    - Ordered message list shown to the user
    - Typing animation for bot replies
    - One in-flight request per conversation
    - Reset semantics across store, history and animation
    - Registry of concurrent sessions

Framework-free: the UI and API layers only call into the controller.
"""

from src.chat.animator import TypingAnimator
from src.chat.controller import ConversationController
from src.chat.sessions import SessionNotFoundError, SessionRegistry, get_session_registry
from src.chat.store import ConversationStore

__all__ = [
    "ConversationController",
    "ConversationStore",
    "SessionNotFoundError",
    "SessionRegistry",
    "TypingAnimator",
    "get_session_registry",
]
