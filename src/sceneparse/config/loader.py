"""Settings loader and singleton manager.

This module handles:
- Optional environment variable loading from a .env file
- Configuration file loading from TOML
- Thread-safe singleton pattern for the Settings instance
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from sceneparse.config.models import Settings
from sceneparse.shared.constants import Config
from sceneparse.shared.errors import (
    ErrorCode,
    SceneParseError,
    create_config_error,
    create_file_read_error,
)

logger = logging.getLogger(__name__)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking pattern to ensure thread-safety
    while minimizing lock overhead.
    """

    _instance: Settings | None = None
    _lock: threading.RLock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance, loading it on first use."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()

        return self._instance

    def reload_config(self) -> Settings:
        """Reload the global settings instance from .env, files and environment."""
        with self._lock:
            self._instance = load_settings()

        return self._instance


def _load_env_file(env_file: Path = Path(Config.ENV_FILE)) -> None:
    """Load variables from a .env file when one exists.

    Variables already set in the process environment win.

    Raises:
        InfrastructureError: If the file exists but cannot be read
    """
    if not env_file.is_file():
        return

    try:
        load_dotenv(env_file, override=False)
    except OSError as e:
        raise create_file_read_error(env_file, operation="load_env", original_error=e) from e


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML configuration file or the environment.

    Args:
        config_path: Optional path to a TOML file. When omitted the first
            existing default location is used, else the environment only.

    Returns:
        Settings instance loaded from the chosen source

    Raises:
        ApplicationError: If the file is missing, unreadable or invalid
    """
    try:
        _load_env_file()

        if config_path is None:
            config_path = next(
                (Path(candidate) for candidate in Config.DEFAULT_PATHS if Path(candidate).is_file()),
                None,
            )

        if config_path is None:
            logger.debug("No configuration file found, using environment only")
            return Settings()

        logger.debug("Loading configuration from %s", config_path)
        return Settings.from_toml_file(config_path)

    except FileNotFoundError as e:
        raise create_config_error(
            f"Configuration file not found: {config_path}",
            config_key="config_path",
            operation="load_settings",
            original_error=e,
            code=ErrorCode.CONFIG_MISSING,
        ) from e
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration: {e.error_count()} validation error(s)",
            operation="load_settings",
            original_error=e,
            code=ErrorCode.CONFIG_INVALID,
        ) from e
    except SceneParseError:
        raise
    except (OSError, ValueError) as e:
        # toml.TomlDecodeError is a ValueError.
        raise create_config_error(
            f"Failed to load configuration: {e}",
            operation="load_settings",
            original_error=e,
        ) from e


# Global loader instance
_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the global settings instance (thread-safe)."""
    return _loader.get_config()


def reload_config() -> Settings:
    """Reload the global settings instance."""
    return _loader.reload_config()


__all__ = [
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
]
