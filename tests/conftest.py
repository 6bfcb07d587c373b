"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - chat_config: Configuration with a dummy API key
    - mock_agent: Stand-in for the Agno agent with a scripted reply
    - chat_client: RemoteChatClient wired to mock_agent
    - controller: ConversationController with instant typing animation
    - registry: SessionRegistry whose sessions all use mock agents
    - async_client: HTTPX client for API testing

The Agno agent is the only mocked collaborator; history, store,
animator and controller are the real implementations.
"""

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.chat_client import RemoteChatClient
from src.agent.config import ChatConfig
from src.api.app import app
from src.chat.animator import TypingAnimator
from src.chat.controller import ConversationController
from src.chat.sessions import SessionRegistry, get_session_registry

DEFAULT_REPLY = "Hi there!"


def make_run_output(content: str | None, status: str | None = None) -> SimpleNamespace:
    """Build an object shaped like an Agno run output."""
    return SimpleNamespace(
        content=content,
        status=SimpleNamespace(value=status) if status else None,
    )


def make_mock_agent(reply: str = DEFAULT_REPLY) -> MagicMock:
    """Create a mock Agno agent whose arun returns reply."""
    agent = MagicMock()
    agent.arun = AsyncMock(return_value=make_run_output(reply))
    return agent


def build_client(config: ChatConfig, agent: MagicMock) -> RemoteChatClient:
    """Create a RemoteChatClient that talks to the given mock agent."""
    with (
        patch("src.agent.chat_client.Gemini"),
        patch("src.agent.chat_client.Agent", return_value=agent),
    ):
        return RemoteChatClient(config=config)


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return configuration with a dummy API key.

    Returns:
        ChatConfig that reports itself as configured.
    """
    return ChatConfig(api_key="test-key-12345", model_name="gemini-1.5-pro")


@pytest.fixture
def mock_agent() -> MagicMock:
    """Return a mock agent that replies with DEFAULT_REPLY."""
    return make_mock_agent()


@pytest.fixture
def chat_client(chat_config: ChatConfig, mock_agent: MagicMock) -> RemoteChatClient:
    """Return a chat client backed by mock_agent."""
    return build_client(chat_config, mock_agent)


@pytest.fixture
async def controller(chat_client: RemoteChatClient) -> AsyncGenerator[ConversationController]:
    """Return a controller whose animation advances without delay.

    Yields:
        ConversationController; its animation is cancelled on teardown.
    """
    ctrl = ConversationController(
        client=chat_client,
        animator=TypingAnimator(delay_range=(0.0, 0.0)),
    )
    yield ctrl
    ctrl.close()


@pytest.fixture
async def registry(chat_config: ChatConfig) -> AsyncGenerator[SessionRegistry]:
    """Return a registry where every new session gets its own mock agent.

    Yields:
        SessionRegistry; all sessions are closed on teardown.
    """
    reg = SessionRegistry(client_factory=lambda: build_client(chat_config, make_mock_agent()))
    yield reg
    reg.clear()


@pytest.fixture
async def async_client(registry: SessionRegistry) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_session_registry] = lambda: registry
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
