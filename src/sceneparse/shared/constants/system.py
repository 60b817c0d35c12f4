"""Application, logging and configuration constants."""

from __future__ import annotations


class Application:
    """Application metadata constants."""

    NAME = "sceneparse"
    VERSION = "0.1.0"
    DESCRIPTION = "Scene release name parser"


class Logging:
    """Logging configuration constants."""

    ROOT_LOGGER = "sceneparse"
    DEFAULT_LEVEL = "INFO"
    VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    CONSOLE_TIME_FORMAT = "[%H:%M:%S]"
    FILE_ENCODING = "utf-8"


class Config:
    """Configuration system constants."""

    ENV_PREFIX = "SCENEPARSE_"
    ENV_NESTED_DELIMITER = "__"
    ENV_FILE = ".env"
    DEFAULT_PATHS = ("config/sceneparse.toml", "sceneparse.toml")
    DEFAULT_RELEASE_KIND = "tv"


__all__ = ["Application", "Config", "Logging"]
