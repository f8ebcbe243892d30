"""Backend bridge reached over HTTP with httpx.

The bridge exposes a single chat call:

    POST {base_url}/chat   {"message": str, "sessionId": str | null}
                        -> {"response": str, "sessionId": str}

and a GET {base_url}/health endpoint used only by the startup probe.
"""

import logging

import httpx
from pydantic import ValidationError

from henry.backend.base import BackendError
from henry.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class HttpBackend:
    """Real backend variant. Every failure surfaces as BackendError."""

    name = "http"

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the bridge client settings.

        Args:
            base_url: Bridge base URL without trailing slash.
            timeout: Seconds to wait for a reply; None waits indefinitely.
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def send(self, message: str, session_id: str | None) -> ChatResponse:
        """Perform one chat round trip against the bridge.

        Args:
            message: The user's message.
            session_id: Session to continue, or None to start one.

        Returns:
            The parsed reply.

        Raises:
            BackendError: On connection failure, non-2xx status, or a
                malformed reply body.
        """
        payload = ChatRequest(message=message, session_id=session_id).model_dump(by_alias=True)

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post("/chat", json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise BackendError(f"Backend returned HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise BackendError(f"Backend request failed: {e}") from e

        try:
            return ChatResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise BackendError(f"Malformed backend reply: {e}") from e


async def probe_backend(
    base_url: str,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Check whether the bridge answers its health endpoint.

    Args:
        base_url: Bridge base URL.
        timeout: Seconds to wait for the probe.
        transport: Optional httpx transport (used by tests).

    Returns:
        True if GET /health returned a 2xx status.
    """
    async with httpx.AsyncClient(
        base_url=base_url, timeout=timeout, transport=transport
    ) as client:
        try:
            response = await client.get("/health")
        except httpx.RequestError as e:
            logger.warning(f"Backend bridge at {base_url} unreachable: {e}")
            return False

    if not response.is_success:
        logger.warning(f"Backend bridge at {base_url} unhealthy: HTTP {response.status_code}")
        return False
    return True
