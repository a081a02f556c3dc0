"""Build settings loaded with pydantic-settings.

Every setting has a DTK_-prefixed environment variable and may also come
from a .env file. Command-line options take precedence over both.

Examples:
    DTK_SOURCE_GLOB=design/tokens/**/*.json
    DTK_PLATFORMS='["css", "scss"]'
    DTK_BUILD_ROOT=dist
    DTK_LOG_FORMAT=json
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class Settings(BaseSettings):
    """Where tokens are read from, which platforms are built, and how the
    build reports what it did."""

    model_config = SettingsConfigDict(
        env_prefix="DTK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Token sources
    source_glob: str = Field(
        default="tokens/*.json",
        description="Glob (relative to the working directory, ** allowed) matching token files",
    )

    # Outputs
    config_file: Path | None = Field(
        default=None,
        description="JSON build configuration replacing the default web platforms",
    )
    platforms: list[str] | None = Field(
        default=None,
        description="Platforms built when none are named on the command line (default: all)",
    )
    build_root: Path = Field(
        default=Path("."),
        description="Directory that platform buildPath values are resolved against",
    )

    # Build log
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="'json' emits one JSON object per build event, for CI log collectors",
    )
    log_file: Path | None = Field(default=None, description="Also append build events to this file")

    @field_validator("source_glob")
    @classmethod
    def require_source_glob(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("source_glob must not be empty")
        return v.strip()

    @field_validator("platforms")
    @classmethod
    def normalize_platforms(cls, v: list[str] | None) -> list[str] | None:
        """Drop blanks and repeats; an empty list means every platform."""
        if v is None:
            return None
        names = list(dict.fromkeys(name.strip() for name in v if name.strip()))
        return names or None


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings; call get_settings.cache_clear() to reload."""
    return Settings()
