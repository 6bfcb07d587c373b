"""Chat client configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat client.
A missing API key is not fatal: the client stays in a warning state
and every request fails with a visible error message instead.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Value shipped in .env.example; treated the same as no key at all
PLACEHOLDER_API_KEY = "your_gemini_api_key_here"


class ChatConfig(BaseModel):
    """Configuration for the Gemini chat client.

    Generation parameters are fixed per deployment; callers of the
    client cannot tune them per request.

    Attributes:
        api_key: Google AI API key (empty when not configured).
        model_name: Gemini model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        top_p: Nucleus-sampling cutoff.
        top_k: Number of highest-probability tokens considered.
        max_output_tokens: Maximum tokens in generated response.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-1.5-pro"),
        description="Model to use",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    top_p: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Nucleus-sampling probability cutoff",
    )
    top_k: int = Field(
        default=40,
        ge=1,
        description="Top-k sampling cutoff",
    )
    max_output_tokens: int = Field(
        default=1024,
        ge=1,
        le=65536,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def normalize_api_key(cls, v: str) -> str:
        """Strip the key and blank out the placeholder value."""
        v = (v or "").strip()
        if v == PLACEHOLDER_API_KEY:
            return ""
        return v

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.api_key)


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Logs a warning instead of failing when no API key is set.

    Returns:
        Configured ChatConfig instance.
    """
    config = ChatConfig()
    if not config.is_configured:
        logger.warning("GEMINI_API_KEY is not set; chat requests will fail until it is added to .env")
    return config
