"""Pytest fixtures and shared test configuration.

Fixtures:
    - memory_store: Empty in-memory key/value store
    - stats_tracker / conversation_log: Storage records over memory_store
    - recording_view: ChatView that records every call
    - scripted_backend: Backend adapter with queued replies or failures
    - async_client: HTTPX client for API testing
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from henry.api.app import create_app
from henry.api.routes import get_stats_tracker
from henry.backend.base import BackendError
from henry.models.schemas import ChatResponse, Message, UsageStats
from henry.storage.conversations import ConversationLog
from henry.storage.stats import StatsTracker
from henry.storage.store import MemoryStore


class RecordingView:
    """ChatView that keeps a log of calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.messages: list[Message] = []
        self.errors: list[str] = []
        self.loading_states: list[bool] = []
        self.statuses: list[str] = []
        self.stats: UsageStats | None = None
        self.title: str | None = None
        self.welcome_shown = 0
        self.inputs_cleared = 0

    def set_loading(self, loading: bool) -> None:
        self.calls.append(("set_loading", loading))
        self.loading_states.append(loading)

    def set_status(self, text: str) -> None:
        self.calls.append(("set_status", text))
        self.statuses.append(text)

    def append_message(self, message: Message) -> None:
        self.calls.append(("append_message", message))
        self.messages.append(message)

    def show_welcome(self) -> None:
        self.calls.append(("show_welcome", None))
        self.messages.clear()
        self.welcome_shown += 1

    def clear_input(self) -> None:
        self.calls.append(("clear_input", None))
        self.inputs_cleared += 1

    def show_error(self, text: str) -> None:
        self.calls.append(("show_error", text))
        self.errors.append(text)

    def set_title(self, title: str) -> None:
        self.calls.append(("set_title", title))
        self.title = title

    def update_stats(self, stats: UsageStats) -> None:
        self.calls.append(("update_stats", stats))
        self.stats = stats


class ScriptedBackend:
    """Backend adapter that replays queued outcomes.

    Each queued item is either a reply string or an exception instance. When
    the queue is empty the adapter echoes the message. Setting ``gate`` makes
    every call wait until the event is set.
    """

    name = "scripted"

    def __init__(self, session_token: str = "scripted-session") -> None:
        self.calls: list[tuple[str, str | None]] = []
        self.outcomes: list[str | Exception] = []
        self.session_token = session_token
        self.gate: asyncio.Event | None = None

    async def send(self, message: str, session_id: str | None) -> ChatResponse:
        self.calls.append((message, session_id))
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0) if self.outcomes else f"echo: {message}"
        if isinstance(outcome, Exception):
            raise outcome
        return ChatResponse(response=outcome, session_id=session_id or self.session_token)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def stats_tracker(memory_store: MemoryStore) -> StatsTracker:
    return StatsTracker(memory_store)


@pytest.fixture
def conversation_log(memory_store: MemoryStore) -> ConversationLog:
    return ConversationLog(memory_store)


@pytest.fixture
def recording_view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def scripted_backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture
def backend_failure() -> BackendError:
    return BackendError("Backend returned HTTP 502")


@pytest.fixture
def mock_session_id() -> str:
    """Predictable session ID for test assertions."""
    return "test-session-12345"


@pytest.fixture
async def async_client(stats_tracker: StatsTracker) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    The stats endpoint is pointed at the in-memory tracker.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app = create_app()
    app.dependency_overrides[get_stats_tracker] = lambda: stats_tracker
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
