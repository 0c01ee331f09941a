"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class LogConfig(BaseModel):
    """Logging setup used by the command-line entry point."""

    level: str = "INFO"
    file: Path | None = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            msg = f"LOG__LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level


class SerializationConfig(BaseModel):
    """Defaults for the serialized form."""

    indent: int | None = None
    ensure_ascii: bool = False


class RenderConfig(BaseModel):
    """Face name to rich style mapping for terminal rendering."""

    styles: dict[str, str] = Field(
        default_factory=lambda: {
            "STRONG": "bold",
            "EMPHASIS": "italic",
            "ERROR": "bold red",
            "STAR": "yellow",
            "PIPE": "cyan",
        }
    )


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables carry the ``ORNAMENT_`` prefix and use a
    double-underscore delimiter for nesting: ``ORNAMENT_LOG__LEVEL``,
    ``ORNAMENT_SERIALIZATION__INDENT`` and ``ORNAMENT_RENDER__STYLES``
    (a JSON object).
    """

    model_config = SettingsConfigDict(
        env_prefix="ORNAMENT_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log: LogConfig = LogConfig()
    serialization: SerializationConfig = SerializationConfig()
    render: RenderConfig = RenderConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()
    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    return settings
