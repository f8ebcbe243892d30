"""Usage statistics kept in the key/value store.

Every increment is a full read-modify-write of the stored record. All
callers run on the UI event loop, so no locking is needed.
"""

import logging
from typing import Literal

from pydantic import ValidationError

from henry.models.schemas import UsageStats
from henry.storage.store import KeyValueStore

logger = logging.getLogger(__name__)

STATS_KEY = "henryStats"

StatCounter = Literal["tasks_today", "files_processed", "commands_run"]


class StatsTracker:
    """Reads and increments the UsageStats record."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load(self) -> UsageStats:
        """Read the stored counters.

        Returns:
            The stored stats, or all-zero stats when nothing is stored or the
            stored record is unreadable.
        """
        raw = self._store.get(STATS_KEY)
        if raw is None:
            return UsageStats()
        try:
            return UsageStats.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Failed to load stats, starting from zero: {e}")
            return UsageStats()

    def increment(self, counter: StatCounter = "tasks_today") -> UsageStats:
        """Add one to a counter and write the whole record back.

        Args:
            counter: Which counter to bump.

        Returns:
            The updated stats.

        Raises:
            ValueError: If counter is not a UsageStats field.
        """
        if counter not in UsageStats.model_fields:
            raise ValueError(f"Unknown stats counter: {counter}")

        stats = self.load()
        updated = stats.model_copy(update={counter: getattr(stats, counter) + 1})
        self._store.set(STATS_KEY, updated.model_dump_json(by_alias=True))
        return updated
