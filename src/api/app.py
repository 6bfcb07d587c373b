"""FastAPI application for the Gemini chat service.

Serves the session API under /sessions and a health check. The NiceGUI
chat page is mounted onto this same app by src.main.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.agent.config import get_chat_config
from src.api.routes import router as sessions_router
from src.chat.sessions import get_session_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Report the Gemini setup on startup and close every session on shutdown.

    A missing API key is logged as a warning; the service still starts so
    the chat page can explain what to configure.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_chat_config()
    logger.info(
        f"Gemini chat ready: model={config.model_name}, "
        f"api_key={'configured' if config.is_configured else 'missing'}"
    )
    yield
    registry = get_session_registry()
    logger.info(f"Closing {len(registry)} chat session(s)")
    registry.clear()


def create_app() -> FastAPI:
    """Build the app with CORS, the session routes and /health.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini Chat API",
        description=(
            "Chat with Google Gemini through a browser interface. Keeps an in-memory "
            "conversation per session, allows one request in flight at a time, and "
            "reports remote failures as chat messages."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(sessions_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "gemini-chat"}

    return application


app = create_app()
