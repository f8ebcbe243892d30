"""Backend adapter contract shared by the real bridge and the mock."""

from typing import Protocol

from henry.models.schemas import ChatResponse


class BackendError(Exception):
    """Raised when the backend round trip did not complete."""

    pass


class BackendAdapter(Protocol):
    """Produces one assistant reply per user message.

    Implementations receive the current session id (None before the first
    reply) and return the id the conversation continues under.
    """

    name: str

    async def send(self, message: str, session_id: str | None) -> ChatResponse: ...
