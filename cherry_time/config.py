"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Only services/ and setup_logging read settings; core/ never does
    - get_settings() is cached (lru_cache) — single instance per process
    - default_time_zone is a resolvable IANA identifier

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - CHERRY_TIME_ prefix keeps the variables from colliding with the host application's
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cherry_time.core.errors import UnknownTimeZoneError
from cherry_time.core.iso_calendar import resolve_zone


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHERRY_TIME_", env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Calendar
    default_time_zone: str = "UTC"
    upcoming_weeks: int = Field(default=4, ge=0)

    @field_validator("default_time_zone")
    @classmethod
    def check_time_zone(cls, v: str) -> str:
        """Fail at load time rather than on the first query."""
        try:
            resolve_zone(v)
        except UnknownTimeZoneError as exc:
            raise ValueError(exc.message) from exc
        return v

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
