"""Engine configuration via environment variables with DATEFMT_ prefix."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datefmt.locales.tables import LOCALE_TABLES
from datefmt.normalize.zones import resolve_zone


class Settings(BaseSettings):
    """Formatting engine configuration.

    All settings are read from environment variables prefixed with ``DATEFMT_``.
    ``timezone`` names the zone used as "local" for absent dates, epoch numbers
    and offset-less text; leave it unset to use the host's local zone.
    """

    model_config = SettingsConfigDict(env_prefix="DATEFMT_")

    # ── Locale ─────────────────────────────────────────────────────────────
    default_language: str = "en"

    # ── Time zone (IANA name, e.g. "Europe/Warsaw"; None = host local) ─────
    timezone: str | None = None

    # ── Pattern compilation ────────────────────────────────────────────────
    pattern_cache_size: int = Field(default=256, ge=0)

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "WARNING"

    @field_validator("default_language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        if value not in LOCALE_TABLES:
            raise ValueError(
                f"default_language must be one of {sorted(LOCALE_TABLES)}, got {value!r}"
            )
        return value

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str | None) -> str | None:
        try:
            resolve_zone(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
            raise ValueError(f"timezone is not a known IANA zone: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level is not a standard logging level: {value!r}")
        return level
