"""Key/value storage port.

The shell keeps its small amount of durable state (usage counters, the
conversation log) as JSON strings under fixed keys. NiceGUIStore backs this
with NiceGUI's process-wide general storage, which NiceGUI persists to disk;
MemoryStore keeps everything in a dict for tests.
"""

from collections.abc import MutableMapping
from typing import Any, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """In-process store with no durability."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class NiceGUIStore:
    """Store backed by ``nicegui.app.storage.general``.

    The mapping is resolved lazily so the store can be built before NiceGUI
    has started; pass ``storage`` to back it with any mutable mapping.
    """

    def __init__(self, storage: MutableMapping[str, Any] | None = None) -> None:
        self._storage = storage

    @property
    def _mapping(self) -> MutableMapping[str, Any]:
        if self._storage is not None:
            return self._storage
        from nicegui import app

        return app.storage.general

    def get(self, key: str) -> str | None:
        value = self._mapping.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value
