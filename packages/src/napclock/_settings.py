"""Configuration via pydantic-settings.

Configuration is loaded from ``NAPCLOCK_``-prefixed environment
variables and/or a ``.env`` file.  It only affects the pytest
fixtures in :mod:`napclock.testing`; clocks built directly are never
influenced by the environment.

Example ``.env``::

    NAPCLOCK_START=2020-04-01T12:12:12+00:00
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClockSettings(BaseSettings):
    """Settings for the napclock pytest fixtures."""

    model_config = SettingsConfigDict(
        env_prefix="NAPCLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start: datetime | None = Field(
        default=None,
        description=(
            "Instant the fake_clock fixture starts at (ISO 8601). "
            "None means the real current time. "
            "Naive values are interpreted as UTC."
        ),
    )

    @field_validator("start")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
