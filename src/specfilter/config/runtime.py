"""Pydantic-based runtime settings for the specfilter CLI.

Loads from ``SPECFILTER_``-prefixed environment variables (with optional .env file).
The filtering core never reads settings; only the CLI does.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


class RuntimeSettings(BaseSettings):
    """All configuration for the CLI, validated at startup."""

    model_config = {"env_prefix": "SPECFILTER_", "env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = Field(default="WARNING", description="Root log level for the CLI")
    catalog_path: Path = Field(
        default=Path("data/products.json"),
        description="JSON product catalog used when --file is not given",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
