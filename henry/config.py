"""Application configuration with environment variable loading.

Pydantic-based settings for the assistant shell. The backend bridge is
optional: leaving HENRY_BACKEND_URL unset runs the shell against the
built-in mock replies.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class AppSettings(BaseModel):
    """Configuration for the assistant shell.

    Environment values arrive as raw strings and go through the same
    coercion and validation as explicit arguments.

    Attributes:
        backend_url: Base URL of the real backend bridge (None selects the mock).
        request_timeout: Seconds to wait for a chat reply (None waits forever).
        probe_timeout: Seconds to wait for the startup health probe.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        storage_secret: Secret NiceGUI uses to sign browser storage.
        log_level: Root logging level name.
    """

    model_config = ConfigDict(validate_default=True)

    backend_url: str | None = Field(
        default_factory=lambda: os.getenv("HENRY_BACKEND_URL") or None,
        description="Backend bridge base URL (None for mock replies)",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: (os.getenv("HENRY_REQUEST_TIMEOUT") or "").strip() or None,
        description="Chat request timeout in seconds (None disables it)",
    )
    probe_timeout: float = Field(
        default_factory=lambda: os.getenv("HENRY_PROBE_TIMEOUT", "2.0"),
        gt=0,
        description="Startup health probe timeout in seconds",
    )
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "8000"),
        ge=1,
        le=65535,
    )
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "henry-ai-secret"),
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    @field_validator("backend_url")
    @classmethod
    def validate_backend_url(cls, v: str | None) -> str | None:
        """Require an http(s) scheme and drop any trailing slash."""
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if not v.startswith(("http://", "https://")):
            raise ValueError("HENRY_BACKEND_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float | None) -> float | None:
        """Reject zero or negative timeouts; None disables the timeout."""
        if v is not None and v <= 0:
            raise ValueError("request_timeout must be greater than 0")
        return v


def get_settings() -> AppSettings:
    """Create application settings from environment.

    Returns:
        Configured AppSettings instance.

    Raises:
        ValidationError: If an environment value is out of range.
    """
    return AppSettings()
