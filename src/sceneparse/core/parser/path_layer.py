"""Filesystem path handling for release parsing.

Splits a path into series/movie directory, season directory and file
segments. Backslashes and forward slashes are interchangeable, so a
Windows-style path and its Unix spelling classify identically.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sceneparse.shared.constants.lexicon import MEDIA_EXTENSIONS

_SEASON_DIRECTORY = re.compile(r"^\s*Season[ ._\-]*(\d{1,4})\s*$", re.IGNORECASE)
_SPECIALS_DIRECTORY = re.compile(r"^\s*Specials\s*$", re.IGNORECASE)
_DRIVE_ROOT = re.compile(r"^[A-Za-z]:$")


@dataclass(frozen=True)
class PathSegments:
    """A path split into the parts the parser cares about."""

    file: str
    season_directory: str | None = None
    directory: str | None = None


def parse_season_directory(name: str) -> int | None:
    """Season number of a ``Season 01`` style directory, ``Specials`` is 0.

    Examples:
        >>> parse_season_directory("Season 01")
        1
        >>> parse_season_directory("random") is None
        True
    """
    match = _SEASON_DIRECTORY.match(name)
    if match is not None:
        return int(match.group(1))
    if _SPECIALS_DIRECTORY.match(name):
        return 0
    return None


def strip_media_extension(name: str) -> str:
    """``name`` without a trailing known media extension."""
    lowered = name.lower()
    for extension in MEDIA_EXTENSIONS:
        if lowered.endswith(extension):
            return name[: -len(extension)]
    return name


def split_path(path: str) -> PathSegments | None:
    """Classify the segments of ``path``.

    Returns ``None`` for a blank path, a path ending in a separator, or a
    file segment that is empty once its extension is removed.
    """
    normalized = path.replace("\\", "/")
    if not normalized.strip() or normalized.endswith("/"):
        return None

    segments = [segment for segment in normalized.split("/") if segment.strip()]
    if not segments:
        return None

    file_name = segments[-1]
    if not strip_media_extension(file_name).strip():
        return None

    ancestors = segments[:-1]
    season_directory = None
    if ancestors and parse_season_directory(ancestors[-1]) is not None:
        season_directory = ancestors.pop()

    directory = None
    if ancestors and not _DRIVE_ROOT.match(ancestors[-1]):
        directory = ancestors[-1]

    return PathSegments(file=file_name, season_directory=season_directory, directory=directory)


__all__ = ["PathSegments", "parse_season_directory", "split_path", "strip_media_extension"]
