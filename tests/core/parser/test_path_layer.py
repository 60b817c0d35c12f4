"""Tests for splitting filesystem paths."""

from __future__ import annotations

import pytest

from sceneparse.core.parser.path_layer import (
    PathSegments,
    parse_season_directory,
    split_path,
    strip_media_extension,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Season 01", 1),
        ("Season 1", 1),
        ("season.2", 2),
        ("Season_10", 10),
        ("Specials", 0),
        ("random", None),
        ("Season", None),
        ("Season 01 Extras", None),
    ],
)
def test_parse_season_directory(name, expected):
    assert parse_season_directory(name) == expected


def test_strip_media_extension():
    assert strip_media_extension("Show.S01E01.MKV") == "Show.S01E01"
    assert strip_media_extension("Show.S01E01") == "Show.S01E01"


@pytest.mark.parametrize("path", ["", "   ", "Show/", "Show\\Season 01\\", "Show/.mkv"])
def test_unparsable_paths(path):
    assert split_path(path) is None


def test_series_path():
    assert split_path("TV/Show (2010)/Season 01/Show.S01E02.mkv") == PathSegments(
        file="Show.S01E02.mkv",
        season_directory="Season 01",
        directory="Show (2010)",
    )


def test_backslashes_equal_slashes():
    assert split_path("C:\\TV\\Show (2010)\\Season 01/Show.S01E02.mkv") == split_path(
        "C:/TV/Show (2010)/Season 01/Show.S01E02.mkv"
    )


def test_movie_path_without_season():
    assert split_path("Movies/Movie (2010)/Movie.2010.1080p.mkv") == PathSegments(
        file="Movie.2010.1080p.mkv",
        directory="Movie (2010)",
    )


def test_drive_root_is_not_a_directory():
    assert split_path("C:\\Movie.2010.1080p.mkv") == PathSegments(file="Movie.2010.1080p.mkv")


def test_bare_file():
    assert split_path("Show.S01E02.mkv") == PathSegments(file="Show.S01E02.mkv")


def test_blank_segments_are_skipped():
    assert split_path("Show//Season 02/Show.S02E01.mkv") == PathSegments(
        file="Show.S02E01.mkv",
        season_directory="Season 02",
        directory="Show",
    )
