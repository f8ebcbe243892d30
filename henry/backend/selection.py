"""One-time backend variant selection at startup."""

import logging

import httpx

from henry.backend.base import BackendAdapter
from henry.backend.bridge import HttpBackend, probe_backend
from henry.backend.mock import MockBackend
from henry.config import AppSettings

logger = logging.getLogger(__name__)


async def select_backend(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BackendAdapter:
    """Choose the real bridge if it is configured and healthy, else the mock.

    A missing bridge is the normal web/dev setup and is not treated as an
    error. The choice is made once; callers keep the returned adapter for the
    life of the process.

    Args:
        settings: Application settings.
        transport: Optional httpx transport shared by probe and adapter.

    Returns:
        The selected backend adapter.
    """
    if settings.backend_url is None:
        logger.info("No backend bridge configured - using mock replies")
        return MockBackend()

    if not await probe_backend(settings.backend_url, settings.probe_timeout, transport):
        logger.warning("Falling back to mock replies")
        return MockBackend()

    logger.info(f"Using backend bridge at {settings.backend_url}")
    return HttpBackend(
        settings.backend_url,
        timeout=settings.request_timeout,
        transport=transport,
    )
