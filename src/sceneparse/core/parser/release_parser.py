"""Public release-name parser.

This module provides :class:`ReleaseParser`, the entry point for parsing
scene release names, directory names and full filesystem paths into
:class:`ParsedRelease` records.
"""

from __future__ import annotations

import logging
import time

from sceneparse.config.loader import get_config
from sceneparse.core.parser import path_layer
from sceneparse.core.parser.models import DirectoryInfo, ParsedRelease, PathInfo, ReleaseKind
from sceneparse.core.parser.pipeline import (
    DIRECTORY_ORDER,
    MATCHER_ORDER,
    PipelineState,
    build_release,
    run_pipeline,
)
from sceneparse.core.parser.title_resolver import clean_title
from sceneparse.shared.errors import create_parsing_error
from sceneparse.shared.logging import log_operation_error, log_operation_start, log_operation_success

logger = logging.getLogger(__name__)


class ReleaseParser:
    """Parser for scene release names of one declared kind.

    The kind (``"tv"``, ``"movie"`` or ``"series"``) is never inferred from
    the name. It decides whether season/episode grammars run at all: a
    movie never gets an episode marker.

    Parsing is a pure function of ``(kind, name)``; one instance can be
    shared between threads.
    """

    def __init__(self, kind: ReleaseKind | str | None = None, *, trace_claims: bool | None = None) -> None:
        """Initialize the parser.

        Settings are only loaded when ``kind`` is ``None``; a parser built
        with an explicit kind touches no files and no environment.

        Args:
            kind: Release kind. ``None`` uses ``parser.default_kind`` from
                the settings.
            trace_claims: Log every pipeline claim at DEBUG level. ``None``
                uses ``parser.trace_claims`` when settings are loaded, else
                ``False``.

        Raises:
            ParserConfigurationError: If ``kind`` is not a known release kind.
        """
        if kind is None:
            settings = get_config()
            kind = settings.parser.default_kind
            if trace_claims is None:
                trace_claims = settings.parser.trace_claims
        self.kind = ReleaseKind.from_value(kind)
        self._trace_claims = bool(trace_claims)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r})"

    def parse(self, name: str) -> ParsedRelease:
        """Parse one release name.

        Never raises: if the pipeline fails unexpectedly the error is logged
        and a record whose title is the cleaned input is returned.

        Examples:
            >>> release = ReleaseParser("tv").parse("Show.Name.S01E02.720p.HDTV.x264-GRP")
            >>> release.title, release.season, release.episode, release.group
            ('Show Name', 1, 2, 'GRP')
        """
        return self._parse(name, self.kind, MATCHER_ORDER, operation="parse")

    def trace(self, name: str) -> PipelineState:
        """Run the pipeline and return its final state (claims and values)."""
        return run_pipeline(name, self.kind, MATCHER_ORDER, trace=self._trace_claims)

    def parse_series_directory(self, name: str) -> DirectoryInfo:
        """Parse a series directory such as ``Show Name (2010) {tvdb-123}``."""
        return self._parse(name, ReleaseKind.SERIES, DIRECTORY_ORDER, operation="parse_series_directory")

    def parse_movie_directory(self, name: str) -> DirectoryInfo:
        """Parse a movie directory such as ``Movie Title (2010) {imdb-tt123}``."""
        return self._parse(name, ReleaseKind.MOVIE, DIRECTORY_ORDER, operation="parse_movie_directory")

    @staticmethod
    def parse_season_directory(name: str) -> int | None:
        return path_layer.parse_season_directory(name)

    def parse_path(self, path: str) -> PathInfo | None:
        """Parse a full path into directory, season and file records.

        Returns:
            ``None`` for a blank path, a path ending in a separator, or a
            bare extension. Otherwise a :class:`PathInfo` whose ``file`` is
            always set.

        Example:
            >>> info = ReleaseParser("tv").parse_path("Show (2010)/Season 01/Show.S01E02.mkv")
            >>> info.directory.title, info.season, info.file.episode
            ('Show', 1, 2)
        """
        log_operation_start(logger, "parse_path", {"path": path})
        started = time.perf_counter()

        segments = path_layer.split_path(path)
        if segments is None:
            logger.debug("Path has no parsable file segment: %r", path)
            return None

        file_release = self.parse(segments.file)
        season = (
            path_layer.parse_season_directory(segments.season_directory)
            if segments.season_directory is not None
            else None
        )

        directory = None
        if segments.directory is not None:
            is_series = (
                season is not None
                or file_release.season is not None
                or bool(file_release.episodes)
                or file_release.date is not None
            )
            directory = (
                self.parse_series_directory(segments.directory)
                if is_series
                else self.parse_movie_directory(segments.directory)
            )

        log_operation_success(
            logger,
            "parse_path",
            (time.perf_counter() - started) * 1000,
            result_info={"directory": segments.directory, "season": season},
        )
        return PathInfo(file=file_release, directory=directory, season=season, full_path=path)

    def _parse(self, name: str, kind: ReleaseKind, order: tuple[str, ...], *, operation: str) -> ParsedRelease:
        try:
            state = run_pipeline(name, kind, order, trace=self._trace_claims)
            return build_release(state)
        except Exception as e:  # pylint: disable=broad-exception-caught
            error = create_parsing_error(
                f"Failed to parse release name: {e}",
                release=name,
                operation=operation,
                original_error=e,
            )
            log_operation_error(logger, error, additional_context={"kind": kind.value})
            return ParsedRelease(release=name, type=kind, title=clean_title(name))


def parse_release(name: str, kind: ReleaseKind | str | None = None) -> ParsedRelease:
    """Parse ``name`` with a throwaway :class:`ReleaseParser`."""
    return ReleaseParser(kind).parse(name)


__all__ = ["ReleaseParser", "parse_release"]
