"""Parser module for scene release names.

This module provides release-name parsing built from ordered token matchers
that claim spans of a working buffer, followed by title resolution over
whatever is left unclaimed.
"""

from sceneparse.core.parser.models import (
    DirectoryInfo,
    EpisodeRange,
    ParsedRelease,
    PathInfo,
    ReleaseKind,
)
from sceneparse.core.parser.pipeline import DIRECTORY_ORDER, MATCHER_ORDER
from sceneparse.core.parser.release_parser import ReleaseParser, parse_release

__all__ = [
    "DIRECTORY_ORDER",
    "MATCHER_ORDER",
    "DirectoryInfo",
    "EpisodeRange",
    "ParsedRelease",
    "PathInfo",
    "ReleaseKind",
    "ReleaseParser",
    "parse_release",
]
