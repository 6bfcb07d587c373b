"""Remote model access through the Agno agent framework.

Responsibilities:
    - Gemini model initialization with fixed generation parameters
    - Ownership of the conversation context sent on each request
    - Conversion of every remote failure into RemoteError

Leverages Agno for the model adapter only; history is kept here.
Maintains clean separation from the UI and HTTP layers.
"""

from src.agent.chat_client import (
    RemoteChatClient,
    RemoteError,
    StaleReplyError,
    create_chat_client,
)
from src.agent.config import ChatConfig, get_chat_config
from src.agent.history import ConversationHistory

__all__ = [
    "ChatConfig",
    "ConversationHistory",
    "RemoteChatClient",
    "RemoteError",
    "StaleReplyError",
    "create_chat_client",
    "get_chat_config",
]
