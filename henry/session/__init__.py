"""Chat session control.

Responsibilities:
    - Conversation identity across round trips
    - Single in-flight request guard
    - Transcript ownership and view updates
"""

from henry.session.controller import (
    DEFAULT_TITLE,
    SEND_FAILED_MESSAGE,
    STATUS_PROCESSING,
    STATUS_READY,
    ChatView,
    NullView,
    SessionController,
)

__all__ = [
    "DEFAULT_TITLE",
    "SEND_FAILED_MESSAGE",
    "STATUS_PROCESSING",
    "STATUS_READY",
    "ChatView",
    "NullView",
    "SessionController",
]
