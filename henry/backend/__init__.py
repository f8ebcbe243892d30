"""Backend adapters for producing assistant replies.

Two variants behind one async contract:
    - HttpBackend: the real backend bridge, reached over HTTP
    - MockBackend: deterministic keyword-based replies, never fails

select_backend probes the host once at startup and returns one of them.
"""

from henry.backend.base import BackendAdapter, BackendError
from henry.backend.bridge import HttpBackend, probe_backend
from henry.backend.mock import MockBackend, generate_mock_reply
from henry.backend.selection import select_backend

__all__ = [
    "BackendAdapter",
    "BackendError",
    "HttpBackend",
    "MockBackend",
    "generate_mock_reply",
    "probe_backend",
    "select_backend",
]
