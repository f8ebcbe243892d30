"""Chat session controller.

Owns the conversation identity, the loading flag, and the transcript, and
runs one backend round trip per accepted message. Presentation goes through
the ChatView protocol so the controller runs the same under NiceGUI and in
tests.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from henry.backend.base import BackendAdapter
from henry.models.schemas import Message, Role, UsageStats
from henry.storage.conversations import ConversationLog
from henry.storage.stats import StatsTracker

logger = logging.getLogger(__name__)

STATUS_READY = "Ready"
STATUS_PROCESSING = "Processing your request..."
SEND_FAILED_MESSAGE = "Failed to send message. Please try again."
DEFAULT_TITLE = "Henry AI Assistant"


class ChatView(Protocol):
    def set_loading(self, loading: bool) -> None: ...

    def set_status(self, text: str) -> None: ...

    def append_message(self, message: Message) -> None: ...

    def show_welcome(self) -> None: ...

    def clear_input(self) -> None: ...

    def show_error(self, text: str) -> None: ...

    def set_title(self, title: str) -> None: ...

    def update_stats(self, stats: UsageStats) -> None: ...


class NullView:
    """ChatView that displays nothing."""

    def set_loading(self, loading: bool) -> None:
        pass

    def set_status(self, text: str) -> None:
        pass

    def append_message(self, message: Message) -> None:
        pass

    def show_welcome(self) -> None:
        pass

    def clear_input(self) -> None:
        pass

    def show_error(self, text: str) -> None:
        pass

    def set_title(self, title: str) -> None:
        pass

    def update_stats(self, stats: UsageStats) -> None:
        pass


class SessionController:
    """Runs chat round trips for one chat panel.

    At most one round trip is in flight per controller. Sends made while one
    is running are dropped, not queued.
    """

    def __init__(
        self,
        backend: BackendAdapter,
        stats: StatsTracker,
        conversations: ConversationLog | None = None,
        view: ChatView | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            backend: Adapter selected at startup.
            stats: Usage counters updated after each round trip.
            conversations: Optional log that receives each completed exchange.
            view: Presentation target; NullView when omitted.
        """
        self._backend = backend
        self._stats = stats
        self._conversations = conversations
        self.view: ChatView = view or NullView()
        self.session_id: str | None = None
        self.is_loading = False
        self.status = STATUS_READY
        self.transcript: list[Message] = []
        # Bumped on every reset; replies started under an older value are dropped.
        self._generation = 0

    @property
    def backend(self) -> BackendAdapter:
        return self._backend

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        self.view.set_loading(loading)

    def _set_status(self, text: str) -> None:
        self.status = text
        self.view.set_status(text)

    def _append(self, message: Message) -> Message:
        self.transcript.append(message)
        self.view.append_message(message)
        return message

    @contextmanager
    def _round_trip(self) -> Iterator[None]:
        self._set_loading(True)
        self._set_status(STATUS_PROCESSING)
        try:
            yield
        finally:
            self._set_loading(False)
            self._set_status(STATUS_READY)

    async def send_message(self, raw_text: str) -> bool:
        """Send one user message and append the reply.

        Args:
            raw_text: Text as typed; surrounding whitespace is dropped.

        Returns:
            True if an assistant reply was appended. False when the message
            was skipped (empty, or a round trip already running), the
            backend failed, or the chat was reset while waiting for the reply.
        """
        if self.is_loading:
            return False
        text = raw_text.strip()
        if not text:
            return False

        with self._round_trip():
            user_message = self._append(Message(role=Role.USER, content=text))
            generation = self._generation

            try:
                reply = await self._backend.send(text, self.session_id)
            except Exception:
                logger.exception("Failed to send message")
                self.view.show_error(SEND_FAILED_MESSAGE)
                return False

            if generation != self._generation:
                logger.info("Discarding reply that arrived after the chat was reset")
                return False

            self.session_id = reply.session_id
            assistant_message = self._append(
                Message(role=Role.ASSISTANT, content=reply.response)
            )

            if self._conversations is not None:
                self._conversations.append(user_message, assistant_message)
            self.view.update_stats(self._stats.increment("tasks_today"))
            self.view.clear_input()

        return True

    def new_chat(self) -> None:
        """Forget the session and show an empty transcript. Stats are kept."""
        self._generation += 1
        self.session_id = None
        self.transcript.clear()
        self.view.show_welcome()
        self.view.set_title(DEFAULT_TITLE)
        logger.info("Started new chat")

    def clear_chat(self) -> None:
        """Empty the visible transcript but continue the same session."""
        self._generation += 1
        self.transcript.clear()
        self.view.show_welcome()
