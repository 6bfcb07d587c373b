"""In-memory registry of conversations keyed by session id."""

import logging
from collections.abc import Callable

from src.agent.chat_client import RemoteChatClient, create_chat_client
from src.agent.config import ChatConfig, get_chat_config
from src.chat.controller import ConversationController

logger = logging.getLogger(__name__)

MAX_SESSIONS = 1000


class SessionNotFoundError(KeyError):
    """Raised when a session id is unknown."""

    pass


class SessionRegistry:
    """Creates and tracks one ConversationController per session.

    Every session gets its own RemoteChatClient and therefore its own
    history. Nothing is persisted; sessions vanish with the process.
    At most max_sessions are kept; creating one more closes and drops
    the session that was used least recently.
    """

    def __init__(
        self,
        client_factory: Callable[[], RemoteChatClient] | None = None,
        config: ChatConfig | None = None,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        """Initialize an empty registry.

        Args:
            client_factory: Builds the client for a new session.
                            Defaults to a Gemini client sharing one config.
            config: Configuration for the default client factory.
            max_sessions: Number of live sessions kept before eviction.
        """
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        if client_factory is None:
            shared_config = config or get_chat_config()
            client_factory = lambda: create_chat_client(shared_config)  # noqa: E731
        self._client_factory = client_factory
        self._max_sessions = max_sessions
        self._sessions: dict[str, ConversationController] = {}

    def create(self) -> ConversationController:
        while len(self._sessions) >= self._max_sessions:
            self._evict_oldest()
        controller = ConversationController(client=self._client_factory())
        self._sessions[controller.session_id] = controller
        logger.info(f"Created chat session {controller.session_id}")
        return controller

    def get(self, session_id: str) -> ConversationController:
        try:
            controller = self._sessions.pop(session_id)
        except KeyError:
            raise SessionNotFoundError(session_id) from None
        # Re-insert to keep dict order least to most recently used
        self._sessions[session_id] = controller
        return controller

    def discard(self, session_id: str) -> None:
        controller = self._sessions.pop(session_id, None)
        if controller is None:
            raise SessionNotFoundError(session_id)
        controller.close()
        logger.info(f"Discarded chat session {session_id}")

    def _evict_oldest(self) -> None:
        session_id, controller = next(iter(self._sessions.items()))
        del self._sessions[session_id]
        controller.close()
        logger.warning(f"Session limit {self._max_sessions} reached; evicted {session_id}")

    def clear(self) -> None:
        """Close and forget every session."""
        for controller in self._sessions.values():
            controller.close()
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions


# Module-level singleton instance
_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    """Get or create the global session registry.

    Returns:
        The SessionRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
    return _registry
