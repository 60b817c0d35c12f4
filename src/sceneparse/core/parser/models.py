"""Data models for release-name parsing results.

This module defines the records returned by :class:`ReleaseParser`. All of
them are frozen dataclasses built once per parse call.
"""

from __future__ import annotations

import datetime
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

from sceneparse.shared.errors import create_invalid_kind_error


class ReleaseKind(str, Enum):
    """Caller-declared kind of release; never inferred from the name."""

    TV = "tv"
    MOVIE = "movie"
    SERIES = "series"

    @classmethod
    def from_value(cls, value: ReleaseKind | str) -> ReleaseKind:
        """Coerce ``"tv"``/``"movie"``/``"series"`` (any case) to a member.

        Raises:
            ParserConfigurationError: If the value names no known kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise create_invalid_kind_error(value)

    @property
    def is_episodic(self) -> bool:
        return self is not ReleaseKind.MOVIE


@dataclass(frozen=True)
class EpisodeRange:
    """Inclusive multi-episode range such as ``E02-E04``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            msg = f"episode range end {self.end} precedes start {self.start}"
            raise ValueError(msg)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


Episode = Union[int, EpisodeRange]


@dataclass(frozen=True)
class ParsedRelease:
    """Structured result of parsing one release name.

    String fields are empty when absent, optional fields are ``None``.
    ``episode`` is an ``int`` for a single episode and an
    :class:`EpisodeRange` for multi-episode releases; ``episodes`` always
    lists every covered number.

    Records are immutable and hashable. ``language`` is a read-only
    mapping that compares equal to a plain ``dict``; it is left out of the
    hash.

    Example:
        >>> release = ReleaseParser("tv").parse("Show.S01E02-E03.1080p-GRP")
        >>> release.get("episode"), release.get("episodes")
        ('2-3', '2,3')
    """

    release: str
    type: ReleaseKind
    title: str = ""
    title_extra: str = ""
    episode_title: str = ""
    year: int | None = None
    date: datetime.date | None = None
    season: int | None = None
    episode: Episode | None = None
    episodes: tuple[int, ...] = ()
    disc: int | None = None
    flags: tuple[str, ...] = ()
    source: str = ""
    format: str = ""
    resolution: str = ""
    audio: str = ""
    hdr: str = ""
    streaming_provider: str = ""
    device: str = ""
    os: str = ""
    version: str = ""
    tmdb_id: str | None = None
    tvdb_id: str | None = None
    imdb_id: str | None = None
    edition: str | None = None
    language: Mapping[str, str] = field(default_factory=dict, hash=False)
    group: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", MappingProxyType(dict(self.language)))

    def get(self, field_name: str) -> str | None:
        """Return the string form of a named field.

        Unknown names and unset optional fields give ``None``; string fields
        are returned as-is, including when empty.
        """
        renderer = _FIELD_RENDERERS.get(field_name)
        if renderer is None:
            return None
        return renderer(self)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly mapping of every field."""
        return {
            "release": self.release,
            "type": self.type.value,
            "title": self.title,
            "title_extra": self.title_extra,
            "episode_title": self.episode_title,
            "year": self.year,
            "date": self.date.isoformat() if self.date else None,
            "season": self.season,
            "episode": str(self.episode) if isinstance(self.episode, EpisodeRange) else self.episode,
            "episodes": list(self.episodes),
            "disc": self.disc,
            "flags": list(self.flags),
            "source": self.source,
            "format": self.format,
            "resolution": self.resolution,
            "audio": self.audio,
            "hdr": self.hdr,
            "streaming_provider": self.streaming_provider,
            "device": self.device,
            "os": self.os,
            "version": self.version,
            "tmdb_id": self.tmdb_id,
            "tvdb_id": self.tvdb_id,
            "imdb_id": self.imdb_id,
            "edition": self.edition,
            "language": dict(self.language),
            "group": self.group,
        }


def _optional(value: Any) -> str | None:
    return None if value is None else str(value)


def _joined(values: Any) -> str | None:
    return ",".join(str(value) for value in values) or None


_FIELD_RENDERERS = {
    "release": lambda release: release.release,
    "type": lambda release: release.type.value,
    "title": lambda release: release.title,
    "title_extra": lambda release: release.title_extra,
    "episode_title": lambda release: release.episode_title,
    "group": lambda release: release.group,
    "year": lambda release: _optional(release.year),
    "date": lambda release: release.date.isoformat() if release.date else None,
    "season": lambda release: _optional(release.season),
    "episode": lambda release: _optional(release.episode),
    "episodes": lambda release: _joined(release.episodes),
    "disc": lambda release: _optional(release.disc),
    "flags": lambda release: _joined(release.flags),
    "language": lambda release: _joined(release.language),
    "source": lambda release: release.source,
    "format": lambda release: release.format,
    "resolution": lambda release: release.resolution,
    "audio": lambda release: release.audio,
    "hdr": lambda release: release.hdr,
    "streaming_provider": lambda release: release.streaming_provider,
    "device": lambda release: release.device,
    "os": lambda release: release.os,
    "version": lambda release: release.version,
    "tmdb_id": lambda release: release.tmdb_id,
    "tvdb_id": lambda release: release.tvdb_id,
    "imdb_id": lambda release: release.imdb_id,
    "edition": lambda release: release.edition,
}

# Directory names carry a structural subset of the same fields.
DirectoryInfo = ParsedRelease


@dataclass(frozen=True)
class PathInfo:
    """Directory, season directory and file parsed from one filesystem path.

    ``full_path`` keeps the path as given and takes no part in equality, so
    the same path spelled with different separators compares equal.
    """

    file: ParsedRelease
    directory: DirectoryInfo | None = None
    season: int | None = None
    full_path: str = field(default="", compare=False)


__all__ = [
    "DirectoryInfo",
    "Episode",
    "EpisodeRange",
    "ParsedRelease",
    "PathInfo",
    "ReleaseKind",
]
