"""
Pytest configuration and shared fixtures for sceneparse tests.

This module provides common fixtures and configuration that can be used
across all test modules in the project.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from sceneparse.config import loader
from sceneparse.core.parser import ReleaseKind, ReleaseParser
from sceneparse.shared.constants import Config, Logging


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with no config file, no SCENEPARSE_ variables and a fresh loader.

    Returns:
        The temporary working directory.
    """
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith(Config.ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.setattr(loader._loader, "_instance", None)
    return tmp_path


@pytest.fixture
def tv_parser() -> ReleaseParser:
    """Create a ReleaseParser for TV episodes."""
    return ReleaseParser(ReleaseKind.TV)


@pytest.fixture
def movie_parser() -> ReleaseParser:
    """Create a ReleaseParser for movies."""
    return ReleaseParser(ReleaseKind.MOVIE)


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger after a test reconfigures it.

    Yields:
        The ``sceneparse`` logger.
    """
    logger = logging.getLogger(Logging.ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate

    yield logger

    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
