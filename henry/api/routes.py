"""Usage statistics endpoint.

Exposes the same counters the sidebar shows, read from the durable store.
"""

import logging

from fastapi import APIRouter, Depends

from henry.models.schemas import UsageStats
from henry.storage.stats import StatsTracker
from henry.storage.store import NiceGUIStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["stats"])


def get_stats_tracker() -> StatsTracker:
    """Build a tracker over NiceGUI's general storage."""
    return StatsTracker(NiceGUIStore())


@router.get("", response_model=UsageStats)
async def read_stats(tracker: StatsTracker = Depends(get_stats_tracker)) -> UsageStats:
    """Return the current usage counters.

    Returns:
        UsageStats serialized with camelCase keys.
    """
    return tracker.load()
