"""Conversation controller: sequences a user turn end to end.

The controller is the only component that mutates the store, the
client's history, or the animator. Remote failures stop here and become
a visible error message; they never propagate to the UI or API layers.
"""

import logging
import uuid
from collections.abc import Callable

from src.agent.chat_client import RemoteChatClient, RemoteError, StaleReplyError
from src.chat.animator import TypingAnimator
from src.chat.store import ConversationStore
from src.models.schemas import ConversationSnapshot, Message, Sender

logger = logging.getLogger(__name__)

ERROR_REPLY_TEXT = "Sorry, I encountered an error. Please try again later."
ERROR_BANNER_TEXT = "Failed to get a response. Please try again."


class ConversationController:
    """Owns one conversation: store, remote client and typing animator.

    Attributes:
        session_id: Identifier of this conversation.
        is_loading: True while a remote request is in flight.
        error: Banner text for the last failed request, cleared on the next submit.
        on_change: Optional listener called after every visible state change.
    """

    def __init__(
        self,
        client: RemoteChatClient,
        store: ConversationStore | None = None,
        animator: TypingAnimator | None = None,
        session_id: str | None = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.is_loading = False
        self.error: str | None = None
        self.on_change: Callable[[], None] | None = None
        self._client = client
        self._store = store or ConversationStore()
        self._animator = animator or TypingAnimator()
        self._turn = 0

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def animator(self) -> TypingAnimator:
        return self._animator

    @property
    def client(self) -> RemoteChatClient:
        return self._client

    def messages(self) -> tuple[Message, ...]:
        return self._store.all()

    async def submit(self, user_text: str) -> bool:
        """Run one user turn.

        Blank input and submissions while a request is in flight are
        ignored. The in-flight flag is checked and set before the first
        await, so it acts as a gate on the event loop. A reply that arrives
        after reset() is dropped without touching the store or the animator.

        Args:
            user_text: Raw text from the input box.

        Returns:
            True if the message was accepted and a turn was run.
        """
        if not user_text or not user_text.strip():
            logger.debug("Ignoring blank message")
            return False
        if self.is_loading:
            logger.debug(f"Ignoring message for session {self.session_id}: request in flight")
            return False

        self._animator.cancel()
        self._store.append(Message(text=user_text, sender=Sender.USER))
        self.is_loading = True
        self.error = None
        self._notify()

        turn = self._turn
        try:
            reply = await self._client.send(user_text.strip())
        except RemoteError as e:
            if isinstance(e, StaleReplyError) or turn != self._turn:
                logger.info(f"Discarded result for session {self.session_id}: conversation was reset")
            else:
                logger.error(f"Failed to get response for session {self.session_id}: {e}")
                self.error = ERROR_BANNER_TEXT
                self._store.append(
                    Message(text=ERROR_REPLY_TEXT, sender=Sender.BOT, is_error=True)
                )
        else:
            if turn != self._turn:
                logger.info(f"Discarded reply for session {self.session_id}: conversation was reset")
            else:
                index = self._store.append(Message(text=reply, sender=Sender.BOT))
                self._animator.animate(index, reply)
        finally:
            self.is_loading = False

        self._notify()
        return True

    def reset(self) -> None:
        """Start the conversation over with the welcome-back message."""
        self._turn += 1
        self._animator.cancel()
        self._client.reset_history()
        self._store.reset()
        self.error = None
        logger.info(f"Reset conversation {self.session_id}")
        self._notify()

    def close(self) -> None:
        """Stop any running animation; called on session teardown."""
        self._animator.cancel()

    def snapshot(self) -> ConversationSnapshot:
        return ConversationSnapshot(
            session_id=self.session_id,
            messages=list(self._store.all()),
            is_loading=self.is_loading,
            error=self.error,
            animation=self._animator.state,
        )

    def _notify(self) -> None:
        if self.on_change:
            self.on_change()
