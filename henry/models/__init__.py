"""Pydantic models for transcript messages, backend payloads, and usage stats.

Models:
    - Role: Message speaker (user or assistant)
    - Message: Immutable transcript entry
    - ChatRequest: Payload sent to the backend bridge
    - ChatResponse: Reply from either backend variant
    - UsageStats: Locally stored usage counters
"""

from henry.models.schemas import ChatRequest, ChatResponse, Message, Role, UsageStats

__all__ = ["ChatRequest", "ChatResponse", "Message", "Role", "UsageStats"]
