"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the assistant interface.
Environment variables are loaded from .env file.
"""

import asyncio
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


def main() -> None:
    """Select the backend once, then serve FastAPI with NiceGUI mounted."""
    import uvicorn
    from nicegui import ui

    from henry.api.app import create_app
    from henry.backend.selection import select_backend
    from henry.config import get_settings
    from henry.storage.store import NiceGUIStore
    from henry.ui import chat_page

    settings = get_settings()
    backend = asyncio.run(select_backend(settings))
    chat_page.configure(backend=backend, store=NiceGUIStore())

    app = create_app(backend=backend)

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title="Henry AI",
        favicon="🤖",
        storage_secret=settings.storage_secret,
    )

    logger.info(f"Starting Henry AI on http://localhost:{settings.port}")
    logger.info(f"API docs available at http://localhost:{settings.port}/docs")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
