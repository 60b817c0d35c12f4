"""
sceneparse - Scene Release Name Parser

Turns scene-style release names, directory names and full media paths into
structured records: title, season and episode numbers, source, codec,
resolution, audio, HDR, streaming provider, languages, release group and
database identifiers.
"""

from .core.parser import (
    DirectoryInfo,
    EpisodeRange,
    ParsedRelease,
    PathInfo,
    ReleaseKind,
    ReleaseParser,
    parse_release,
)
from .shared.constants import Application
from .shared.errors import (
    OverlappingClaimError,
    ParserConfigurationError,
    SceneParseError,
)

__version__ = Application.VERSION
__author__ = "sceneparse Team"

__all__ = [
    "DirectoryInfo",
    "EpisodeRange",
    "OverlappingClaimError",
    "ParsedRelease",
    "ParserConfigurationError",
    "PathInfo",
    "ReleaseKind",
    "ReleaseParser",
    "SceneParseError",
    "parse_release",
]
