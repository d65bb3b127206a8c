"""Client configuration settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client configuration values loaded from ``SEHRA_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEHRA_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the Sehra HTTP API",
        min_length=1,
    )
    realtime_url: str = Field(
        default="ws://localhost:8000/ws",
        description="URL of the realtime websocket endpoint",
        min_length=1,
    )
    session_file: Path = Field(
        default_factory=lambda: Path.home() / ".sehra" / "session.json",
        description="Where the persisted session document lives",
    )
    toast_duration_seconds: float = Field(
        default=5.0,
        description="Seconds before a toast dismisses itself",
        gt=0,
    )
    max_notifications: int | None = Field(
        default=None,
        description="Upper bound on retained chat notifications; unbounded when unset",
        gt=0,
    )


@lru_cache
def get_client_settings() -> ClientSettings:
    """Return cached client settings instance."""

    return ClientSettings()


__all__ = ["ClientSettings", "get_client_settings"]
