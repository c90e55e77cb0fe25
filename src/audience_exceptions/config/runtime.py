"""Pydantic-based runtime settings.

Loads from environment variables (with optional .env file).
Invalid values fail fast when settings are first built.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

# Default reference data (project root / data / reference.json)
_DEFAULT_REFERENCE_PATH = Path(__file__).resolve().parent.parent.parent.parent / "data" / "reference.json"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RuntimeSettings(BaseSettings):
    """Configuration for the service layer and entrypoints."""

    model_config = {"env_prefix": "", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # --- Reference data ---
    reference_data_path: str = Field(
        default=str(_DEFAULT_REFERENCE_PATH),
        validation_alias=AliasChoices("REFERENCE_DATA_PATH", "reference_data_path"),
        description="JSON file with countries, world_regions and usergroups",
    )

    # --- Debug ---
    debug: bool = Field(
        default=False,
        validation_alias=AliasChoices("EXCEPTIONS_DEBUG", "NX_DEBUG", "debug"),
        description="If True, resolved records are logged instead of written to the value store",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
        description="Root log level for entrypoints",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LEVELS:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
