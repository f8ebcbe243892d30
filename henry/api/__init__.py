"""FastAPI host for the assistant shell.

Endpoints:
    - GET /health: Service health status and selected backend
    - GET /stats: Current usage counters

The NiceGUI chat page is mounted onto the same application by henry.main.
"""

from henry.api.app import create_app

__all__ = ["create_app"]
