"""Gemini chat client built on an Agno agent.

The remote model is stateless per request, so the client owns the
conversation context and threads the full history through every call.

Layering notes:

1. **No Agno storage or Agno-managed history** - the agent runs without a db
   and with add_history_to_context off. The history object here is the single
   source of truth, which keeps "history sent" and "messages shown" in step.

2. **Injectable history** - each client holds its own ConversationHistory, so
   several conversations can live in one process and tests build isolated
   instances.

3. **Fixed generation parameters** - temperature, top_p, top_k and max output
   tokens come from ChatConfig when the model is built; send() takes only text.

4. **Failures raise, never fabricate** - any transport or API failure surfaces
   as RemoteError. Turning that into a visible fallback message is the
   controller's job.
"""

import logging

from agno.agent import Agent
from agno.models.google import Gemini
from agno.models.message import Message as AgnoMessage

from src.agent.config import ChatConfig, get_chat_config
from src.agent.history import ConversationHistory
from src.models.schemas import HistoryEntry, Role

logger = logging.getLogger(__name__)

# Agno speaks OpenAI-style roles; its Gemini adapter maps assistant back to model
_AGNO_ROLES = {
    Role.USER: "user",
    Role.MODEL: "assistant",
}


class RemoteError(Exception):
    """Raised when the remote model call fails or returns no text."""

    pass


class StaleReplyError(RemoteError):
    """Raised when the history was reset while the request was in flight."""

    pass


class RemoteChatClient:
    """Client for the remote Gemini model.

    Wraps an Agno Agent with:
    - Client-owned conversation history seeded with formatting instructions
    - Fixed generation configuration
    - A single error type for every remote failure
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        history: ConversationHistory | None = None,
    ) -> None:
        """Initialize the chat client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            history: Optional history to use instead of a fresh seeded one.
        """
        self._config = config or get_chat_config()
        self._history = history if history is not None else ConversationHistory()
        self._epoch = 0
        self._agent = self._create_agent() if self._config.is_configured else None

    @property
    def is_configured(self) -> bool:
        return self._agent is not None

    def _create_agent(self) -> Agent:
        """Create the Agno agent instance.

        Returns:
            Configured Agent with the Gemini model and no storage.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            top_p=self._config.top_p,
            top_k=self._config.top_k,
            max_output_tokens=self._config.max_output_tokens,
        )

        return Agent(
            model=model,
            # Context is supplied explicitly on every run
            add_history_to_context=False,
            # Formatting comes from the seed entries in the history
            markdown=False,
        )

    def _to_agno_messages(self) -> list[AgnoMessage]:
        return [
            AgnoMessage(role=_AGNO_ROLES[entry.role], content=entry.text)
            for entry in self._history
        ]

    async def send(self, user_text: str) -> str:
        """Send a user message with the full history and return the reply.

        The user entry is appended before the call; the model entry only
        after a successful reply.

        Args:
            user_text: The user's message. Must not be blank.

        Returns:
            The model's reply text.

        Raises:
            ValueError: If user_text is blank.
            RemoteError: If the request fails or the reply is empty.
            StaleReplyError: If reset_history() ran before the reply arrived.
        """
        if not user_text or not user_text.strip():
            raise ValueError("user_text must not be blank")

        epoch = self._epoch
        self._history.append(Role.USER, user_text)

        if self._agent is None:
            raise RemoteError("Gemini API key is not configured")

        try:
            response = await self._agent.arun(self._to_agno_messages())
        except Exception as e:
            logger.error(f"Error getting response from Gemini: {e}")
            raise RemoteError(str(e)) from e

        status = getattr(response, "status", None)
        if str(getattr(status, "value", status)).lower() == "error":
            logger.error(f"Gemini run failed: {response.content}")
            raise RemoteError(str(response.content or "Gemini run failed"))

        text = response.content if isinstance(response.content, str) else None
        if not text:
            logger.error("Gemini returned an empty response")
            raise RemoteError("Empty response from Gemini")

        if epoch != self._epoch:
            logger.info("Dropping Gemini reply: history was reset during the request")
            raise StaleReplyError("History was reset before the reply arrived")

        self._history.append(Role.MODEL, text)
        return text

    def reset_history(self) -> None:
        """Truncate the history back to the seed entries.

        Replies to requests sent before the reset are discarded.
        """
        self._epoch += 1
        self._history.reset()

    def current_history(self) -> tuple[HistoryEntry, ...]:
        """Return the full history, seed entries included."""
        return self._history.entries()


def create_chat_client(config: ChatConfig | None = None) -> RemoteChatClient:
    """Create a chat client with its own fresh history.

    Args:
        config: Optional shared configuration.

    Returns:
        A new RemoteChatClient.
    """
    return RemoteChatClient(config=config)
