"""sceneparse Settings Configuration Model.

Settings are read from a TOML file and completed by ``SCENEPARSE_``
environment variables, e.g. ``SCENEPARSE_PARSER__DEFAULT_KIND=movie``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

import toml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sceneparse.shared.constants import Config, Logging

ReleaseKindName = Literal["tv", "movie", "series"]


class ParserSettings(BaseModel):
    """Release parser configuration."""

    default_kind: ReleaseKindName = Field(
        default=Config.DEFAULT_RELEASE_KIND,
        description="Release kind used when ReleaseParser() is built without one",
    )
    trace_claims: bool = Field(
        default=False,
        description="Log every claim the extraction pipeline makes at DEBUG level",
    )

    @field_validator("default_kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value


class LoggingSettings(BaseModel):
    """Logging configuration.

    Only applied when an application calls
    :func:`sceneparse.shared.logging.configure_logging`.
    """

    level: str = Field(default=Logging.DEFAULT_LEVEL, description="Logging level")
    file: Optional[Path] = Field(default=None, description="JSON-lines log file path")
    use_rich_console: bool = Field(default=True, description="Use Rich for console output")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in Logging.VALID_LEVELS:
            msg = f"Invalid log level {value!r}; expected one of {', '.join(Logging.VALID_LEVELS)}"
            raise ValueError(msg)
        return level


class Settings(BaseSettings):
    """Top-level settings with one section per concern."""

    model_config = SettingsConfigDict(
        env_prefix=Config.ENV_PREFIX,
        env_nested_delimiter=Config.ENV_NESTED_DELIMITER,
        env_ignore_empty=True,
        extra="ignore",
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_toml_file(cls, file_path: str | Path) -> Settings:
        """Load settings from a TOML file; environment variables fill in unset fields."""

        file_path = Path(file_path)
        if not file_path.exists():
            msg = f"Configuration file not found: {file_path}"
            raise FileNotFoundError(msg)

        raw_config = toml.load(file_path)
        return cls(**raw_config)


__all__ = ["LoggingSettings", "ParserSettings", "Settings"]
