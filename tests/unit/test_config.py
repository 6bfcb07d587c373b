"""Unit tests for ChatConfig and get_chat_config."""

import logging
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.agent.config import PLACEHOLDER_API_KEY, ChatConfig, get_chat_config


class TestChatConfig:
    """Tests for ChatConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all fields."""
        config = ChatConfig(
            api_key="key-12345",
            model_name="gemini-1.5-flash",
            temperature=0.5,
            top_p=0.9,
            top_k=20,
            max_output_tokens=2048,
        )

        assert config.api_key == "key-12345"
        assert config.model_name == "gemini-1.5-flash"
        assert config.temperature == 0.5
        assert config.top_p == 0.9
        assert config.top_k == 20
        assert config.max_output_tokens == 2048

    def test_config_with_default_generation_values(self) -> None:
        """Generation parameters default to the fixed chat settings."""
        config = ChatConfig(api_key="key")

        assert config.temperature == 0.7
        assert config.top_p == 0.95
        assert config.top_k == 40
        assert config.max_output_tokens == 1024

    def test_missing_api_key_is_not_an_error(self) -> None:
        """An empty key leaves the config unconfigured instead of failing."""
        config = ChatConfig(api_key="")

        assert config.api_key == ""
        assert config.is_configured is False

    def test_whitespace_api_key_is_unconfigured(self) -> None:
        config = ChatConfig(api_key="   ")

        assert config.is_configured is False

    def test_placeholder_api_key_is_unconfigured(self) -> None:
        """The .env.example placeholder counts as no key."""
        config = ChatConfig(api_key=PLACEHOLDER_API_KEY)

        assert config.is_configured is False

    def test_config_strips_api_key_whitespace(self) -> None:
        config = ChatConfig(api_key="  key-123  ")

        assert config.api_key == "key-123"
        assert config.is_configured is True

    def test_config_fails_with_temperature_too_high(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(api_key="key", temperature=2.5)

        assert "temperature" in str(exc_info.value).lower()

    def test_config_fails_with_top_p_above_one(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(api_key="key", top_p=1.5)

        assert "top_p" in str(exc_info.value).lower()

    def test_config_fails_with_top_k_zero(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(api_key="key", top_k=0)

        assert "top_k" in str(exc_info.value).lower()

    def test_config_fails_with_max_output_tokens_too_low(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(api_key="key", max_output_tokens=0)

        assert "max_output_tokens" in str(exc_info.value).lower()


class TestGetChatConfig:
    """Tests for get_chat_config factory function."""

    def test_get_config_from_environment(self) -> None:
        """get_chat_config loads key and model from environment."""
        with patch.dict(
            "os.environ",
            {"GEMINI_API_KEY": "env-key", "GEMINI_MODEL": "gemini-1.5-flash"},
        ):
            config = get_chat_config()

        assert config.api_key == "env-key"
        assert config.model_name == "gemini-1.5-flash"

    def test_falls_back_to_google_api_key(self) -> None:
        with patch.dict("os.environ", {"GOOGLE_API_KEY": "google-key"}, clear=True):
            config = get_chat_config()

        assert config.api_key == "google-key"

    def test_empty_gemini_key_falls_back_to_google_api_key(self) -> None:
        """A blank GEMINI_API_KEY= line in .env does not hide GOOGLE_API_KEY."""
        with patch.dict(
            "os.environ", {"GEMINI_API_KEY": "", "GOOGLE_API_KEY": "google-key"}, clear=True
        ):
            config = get_chat_config()

        assert config.api_key == "google-key"
        assert config.is_configured is True

    def test_warns_without_api_key(self, caplog: pytest.LogCaptureFixture) -> None:
        """Missing key logs a warning instead of raising."""
        with (
            patch.dict("os.environ", {}, clear=True),
            caplog.at_level(logging.WARNING, logger="src.agent.config"),
        ):
            config = get_chat_config()

        assert config.is_configured is False
        assert "GEMINI_API_KEY is not set" in caplog.text
