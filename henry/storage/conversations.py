"""Append-only log of chat exchanges kept in the key/value store."""

import logging

from pydantic import TypeAdapter, ValidationError

from henry.models.schemas import Message
from henry.storage.store import KeyValueStore

logger = logging.getLogger(__name__)

CONVERSATIONS_KEY = "henryConversations"

_messages_adapter = TypeAdapter(list[Message])


class ConversationLog:
    """Stores every completed exchange, regardless of role."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def entries(self) -> list[Message]:
        raw = self._store.get(CONVERSATIONS_KEY)
        if raw is None:
            return []
        try:
            return _messages_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Discarding unreadable conversation log: {e}")
            return []

    def append(self, *messages: Message) -> None:
        entries = self.entries()
        entries.extend(messages)
        self._store.set(CONVERSATIONS_KEY, _messages_adapter.dump_json(entries).decode())
