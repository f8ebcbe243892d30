from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single transcript message. Immutable once created.

    Attributes:
        role: Who wrote the message.
        content: Raw message text (markup is applied at render time).
        timestamp: When the message was created.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ChatRequest(BaseModel):
    """Request payload sent to the real backend.

    Attributes:
        message: User's message text.
        session_id: Session to continue, or None to start one.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1)
    session_id: str | None = Field(None, alias="sessionId")

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Reply returned by either backend variant.

    Attributes:
        response: The assistant's reply text.
        session_id: Session the reply belongs to.
    """

    model_config = ConfigDict(populate_by_name=True)

    response: str
    session_id: str = Field(..., min_length=1, alias="sessionId")


class UsageStats(BaseModel):
    """Local usage counters, stored as camelCase JSON.

    Attributes:
        tasks_today: Completed chat round trips and automations.
        files_processed: Completed file actions.
        commands_run: Terminal commands entered.
    """

    model_config = ConfigDict(populate_by_name=True)

    tasks_today: int = Field(0, ge=0, alias="tasksToday")
    files_processed: int = Field(0, ge=0, alias="filesProcessed")
    commands_run: int = Field(0, ge=0, alias="commandsRun")
