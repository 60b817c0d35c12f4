"""sceneparse Configuration Module

Settings models plus the loader functions get_config, load_settings and
reload_config.
"""

from __future__ import annotations

from .models import LoggingSettings, ParserSettings, Settings

from .loader import (
    SettingsLoader,
    get_config,
    load_settings,
    reload_config,
)

__all__ = [
    "LoggingSettings",
    "ParserSettings",
    "Settings",
    "SettingsLoader",
    "get_config",
    "load_settings",
    "reload_config",
]
