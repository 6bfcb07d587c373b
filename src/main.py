"""Entry point for the Gemini chat application.

By default the chat page at / and the session API at /sessions share one
uvicorn server (PORT, default 8000). RUN_MODE=ui serves only the chat
page on port 8080. Settings are read from .env before anything else.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Serve the chat page and the session API from one process.

    The NiceGUI page drives its conversation in-process; the JSON API
    keeps its own sessions in the registry.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Gemini AI Chatbot",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Gemini chat page on http://localhost:{port}/")
    logger.info(f"Session API on http://localhost:{port}/sessions (docs at /docs)")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_ui_only() -> None:
    """Run the NiceGUI chat page on its own server (port 8080)."""
    from src.ui.chat_page import main as run_chat_page

    logger.info("Gemini chat page only (no session API) on http://localhost:8080/")
    run_chat_page()


def main() -> None:
    """Pick the run mode from RUN_MODE and start serving."""
    mode = os.getenv("RUN_MODE", "integrated").lower()

    if mode == "ui":
        run_ui_only()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
