"""Unit tests for the HTTP backend bridge and startup selection."""

import json

import httpx
import pytest
import pytest_check as check

from henry.backend.base import BackendError
from henry.backend.bridge import HttpBackend, probe_backend
from henry.backend.mock import MockBackend
from henry.backend.selection import select_backend
from henry.config import AppSettings

BASE_URL = "http://bridge.test"


def make_transport(requests: list[httpx.Request], reply: httpx.Response) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return reply

    return httpx.MockTransport(handler)


def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)


class TestHttpBackend:
    """Tests for the real backend variant."""

    async def test_sends_message_and_null_session(self) -> None:
        """First call posts the message with sessionId null."""
        requests: list[httpx.Request] = []
        transport = make_transport(
            requests, httpx.Response(200, json={"response": "hi", "sessionId": "s-1"})
        )

        response = await HttpBackend(BASE_URL, transport=transport).send("hello", None)

        check.equal(len(requests), 1)
        check.equal(requests[0].method, "POST")
        check.equal(requests[0].url.path, "/chat")
        check.equal(json.loads(requests[0].content), {"message": "hello", "sessionId": None})
        check.equal(response.response, "hi")
        check.equal(response.session_id, "s-1")

    async def test_echoes_existing_session(self, mock_session_id: str) -> None:
        requests: list[httpx.Request] = []
        transport = make_transport(
            requests,
            httpx.Response(200, json={"response": "ok", "sessionId": mock_session_id}),
        )

        await HttpBackend(BASE_URL, transport=transport).send("again", mock_session_id)

        assert json.loads(requests[0].content)["sessionId"] == mock_session_id

    async def test_http_error_raises_backend_error(self) -> None:
        transport = make_transport([], httpx.Response(500, text="boom"))

        with pytest.raises(BackendError, match="HTTP 500"):
            await HttpBackend(BASE_URL, transport=transport).send("hello", None)

    async def test_connection_error_raises_backend_error(self) -> None:
        with pytest.raises(BackendError, match="request failed"):
            await HttpBackend(BASE_URL, transport=failing_transport()).send("hello", None)

    async def test_malformed_reply_raises_backend_error(self) -> None:
        transport = make_transport([], httpx.Response(200, json={"text": "missing fields"}))

        with pytest.raises(BackendError, match="Malformed"):
            await HttpBackend(BASE_URL, transport=transport).send("hello", None)

    async def test_non_json_reply_raises_backend_error(self) -> None:
        transport = make_transport([], httpx.Response(200, text="<html>"))

        with pytest.raises(BackendError):
            await HttpBackend(BASE_URL, transport=transport).send("hello", None)

    def test_trailing_slash_dropped(self) -> None:
        assert HttpBackend(BASE_URL + "/").base_url == BASE_URL


class TestProbeBackend:
    """Tests for the startup health probe."""

    async def test_healthy_bridge(self) -> None:
        requests: list[httpx.Request] = []
        transport = make_transport(requests, httpx.Response(200, json={"status": "healthy"}))

        assert await probe_backend(BASE_URL, 1.0, transport) is True
        assert requests[0].url.path == "/health"

    async def test_unhealthy_bridge(self) -> None:
        transport = make_transport([], httpx.Response(503))

        assert await probe_backend(BASE_URL, 1.0, transport) is False

    async def test_unreachable_bridge(self) -> None:
        assert await probe_backend(BASE_URL, 1.0, failing_transport()) is False


class TestSelectBackend:
    """Tests for one-time backend variant selection."""

    async def test_no_url_selects_mock(self) -> None:
        backend = await select_backend(AppSettings(backend_url=None))

        assert isinstance(backend, MockBackend)

    async def test_healthy_bridge_selects_http(self) -> None:
        transport = make_transport([], httpx.Response(200, json={"status": "healthy"}))
        settings = AppSettings(backend_url=BASE_URL, request_timeout=5.0)

        backend = await select_backend(settings, transport)

        check.is_instance(backend, HttpBackend)
        check.equal(backend.name, "http")

    async def test_unreachable_bridge_selects_mock(self) -> None:
        backend = await select_backend(AppSettings(backend_url=BASE_URL), failing_transport())

        assert isinstance(backend, MockBackend)
