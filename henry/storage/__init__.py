"""Durable key/value storage and the records kept in it.

Responsibilities:
    - KeyValueStore port with NiceGUI-backed and in-memory implementations
    - Usage statistics (tasks, files, commands) under a fixed key
    - Conversation log of completed exchanges
"""

from henry.storage.conversations import CONVERSATIONS_KEY, ConversationLog
from henry.storage.stats import STATS_KEY, StatsTracker
from henry.storage.store import KeyValueStore, MemoryStore, NiceGUIStore

__all__ = [
    "CONVERSATIONS_KEY",
    "STATS_KEY",
    "ConversationLog",
    "KeyValueStore",
    "MemoryStore",
    "NiceGUIStore",
    "StatsTracker",
]
