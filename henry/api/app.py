"""FastAPI application factory and configuration.

Hosts the health and stats endpoints; main mounts the NiceGUI chat page on
the same application.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from henry import __version__
from henry.api.routes import router as stats_router
from henry.backend.base import BackendAdapter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application startup and shutdown."""
    logger.info("Starting Henry AI...")
    yield
    logger.info("Shutting down Henry AI...")


def create_app(backend: BackendAdapter | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        backend: The adapter selected at startup, reported by /health.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Henry AI",
        description=(
            "Desktop assistant shell with chat, connected apps, and automations. "
            "Chat replies come from a backend bridge when one is available, "
            "otherwise from built-in mock replies."
        ),
        version=__version__,
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
    )

    application.include_router(stats_router)

    backend_name = backend.name if backend is not None else "none"

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "henry-ai", "backend": backend_name}

    return application
