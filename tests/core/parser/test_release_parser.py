"""Tests for ReleaseParser (public entry point)."""

from __future__ import annotations

import datetime
import logging
import os

import pytest

from sceneparse.core.parser import release_parser
from sceneparse.core.parser.models import EpisodeRange, ReleaseKind
from sceneparse.core.parser.release_parser import ReleaseParser, parse_release
from sceneparse.shared.errors import ParserConfigurationError


class TestConstruction:
    """Test cases for building parsers."""

    def test_kind_from_string(self):
        assert ReleaseParser("movie").kind is ReleaseKind.MOVIE

    def test_unknown_kind_raises(self):
        with pytest.raises(ParserConfigurationError):
            ReleaseParser("anime")

    def test_default_kind_comes_from_settings(self, isolated_config, monkeypatch):
        monkeypatch.setenv("SCENEPARSE_PARSER__DEFAULT_KIND", "series")
        assert ReleaseParser().kind is ReleaseKind.SERIES

    def test_default_kind_is_tv(self, isolated_config):
        assert ReleaseParser().kind is ReleaseKind.TV

    def test_repr(self):
        assert repr(ReleaseParser("tv")) == "ReleaseParser(kind='tv')"

    def test_explicit_kind_skips_settings(self, mocker):
        get_config = mocker.patch.object(release_parser, "get_config")

        ReleaseParser("movie")

        get_config.assert_not_called()

    def test_explicit_kind_ignores_broken_config_file(self, isolated_config):
        (isolated_config / "sceneparse.toml").write_text("[parser\nbroken = ", encoding="utf-8")

        release = ReleaseParser("tv").parse("Show.S01E01.720p.HDTV.x264-GRP")

        assert release.episode == 1

    def test_explicit_kind_leaves_environment_alone(self, isolated_config, monkeypatch):
        (isolated_config / ".env").write_text("SCENEPARSE_DOTENV_SENTINEL=1\n", encoding="utf-8")
        monkeypatch.setenv("SCENEPARSE_DOTENV_SENTINEL", "0")
        monkeypatch.delenv("SCENEPARSE_DOTENV_SENTINEL")

        ReleaseParser("tv").parse("Show.S01E01.720p.HDTV.x264-GRP")

        assert "SCENEPARSE_DOTENV_SENTINEL" not in os.environ

    def test_trace_claims_argument(self, caplog):
        parser = ReleaseParser("tv", trace_claims=True)

        with caplog.at_level(logging.DEBUG, logger="sceneparse.core.parser.pipeline"):
            parser.parse("Show.S01E01.720p-GRP")

        assert any(record.getMessage().startswith("claim resolution") for record in caplog.records)

    def test_trace_claims_is_off_by_default(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="sceneparse.core.parser.pipeline"):
            ReleaseParser("tv").parse("Show.S01E01.720p-GRP")

        assert not any(record.getMessage().startswith("claim ") for record in caplog.records)


class TestScenarios:
    """Real-world release names."""

    def test_german_dvdrip_episode(self, tv_parser):
        release = tv_parser.parse(
            "24.S02E02.9.00.Uhr.bis.10.00.Uhr.German.DL.TV.Dubbed.DVDRip.SVCD.READ.NFO-c0nFuSed"
        )

        assert release.title == "24"
        assert release.season == 2
        assert release.episode == 2
        assert release.episode_title == "9 00 Uhr bis 10 00 Uhr"
        assert release.source == "DVDRip"
        assert release.format == "SVCD"
        assert release.group == "c0nFuSed"
        assert "READNFO" in release.flags
        assert "TV Dubbed" in release.flags
        assert release.language == {"de": "German"}

    def test_movie_with_blocks(self, movie_parser):
        release = movie_parser.parse("12.12 The Day (2023) {tmdb-919207} [Remux-1080p][TrueHD 5.1][AVC]-HBO")

        assert release.title == "12 12 The Day"
        assert release.year == 2023
        assert release.tmdb_id == "919207"
        assert release.source == "Remux"
        assert release.resolution == "1080p"
        assert release.audio == "TrueHD 5.1"
        assert release.format == "AVC"
        assert release.group == "HBO"
        assert release.streaming_provider == ""
        assert release.type is ReleaseKind.MOVIE

    def test_episode_title_and_remux_upgrade(self, tv_parser):
        release = tv_parser.parse(
            "Arrow (2012) - S05E04 - Penance [Bluray-1080p Remux][DTS-HD MA 5.1][AVC]-EPSiLON"
        )

        assert release.title == "Arrow"
        assert release.year == 2012
        assert release.season == 5
        assert release.episode == 4
        assert release.episode_title == "Penance"
        assert release.source == "Remux"
        assert release.audio == "DTS-HD MA 5.1"
        assert release.group == "EPSiLON"

    def test_hdr_and_flags_inside_blocks(self, tv_parser):
        release = tv_parser.parse(
            "Seinfeld (1989) {tvdb-79169} - S01E01 - The Seinfeld Chronicles "
            "[Bluray-2160p Remux Proper][DV HDR10][DTS-HD MA 5.1][HEVC]-NEWMAN"
        )

        assert release.tvdb_id == "79169"
        assert release.hdr == "DV HDR10"
        assert release.flags == ("PROPER",)
        assert release.resolution == "2160p"
        assert release.format == "HEVC"
        assert release.episode_title == "The Seinfeld Chronicles"
        assert release.group == "NEWMAN"

    def test_classic_scene_episode(self, tv_parser):
        release = tv_parser.parse("Show.Name.S01E02.720p.HDTV.x264-GRP")

        assert (release.title, release.season, release.episode, release.group) == ("Show Name", 1, 2, "GRP")
        assert release.source == "HDTV"
        assert release.format == "x264"
        assert release.resolution == "720p"

    def test_web_episode_with_provider(self, tv_parser):
        release = tv_parser.parse("Show.S01E01.1080p.AMZN.WEB-DL.DDP5.1.H.264-NTb")

        assert release.streaming_provider == "AMZN"
        assert release.source == "WEB-DL"
        assert release.audio == "DDP 5.1"
        assert release.format == "H.264"
        assert release.group == "NTb"

    def test_multi_episode(self, tv_parser):
        release = tv_parser.parse("Show.S01E02-E03.1080p-GRP")

        assert release.episode == EpisodeRange(2, 3)
        assert release.episodes == (2, 3)
        assert release.get("episode") == "2-3"
        assert release.get("episodes") == "2,3"
        assert release.group == "GRP"

    def test_daily_show(self, tv_parser):
        release = tv_parser.parse("The.Daily.Show.2023.05.01.Guest.Name.720p.WEB.h264-GRP")

        assert release.title == "The Daily Show"
        assert release.date == datetime.date(2023, 5, 1)
        assert release.year is None
        assert release.season is None
        assert release.episode is None
        assert release.episode_title == "Guest Name"
        assert release.format == "h264"

    def test_fansub_release(self, tv_parser):
        release = tv_parser.parse("[SubsPlease] Show - 05 (1080p) [ABCD1234].mkv")

        assert release.title == "Show"
        assert release.episode == 5
        assert release.season is None
        assert release.resolution == "1080p"
        assert release.group == "SubsPlease"

    def test_bracket_language_code(self, tv_parser):
        release = tv_parser.parse("[SubsPlease] Show - 01 [ENG][1080p].mkv")

        assert release.language == {"en": "English"}
        assert release.episode == 1
        assert release.title == "Show"

    def test_multi_language_movie(self, movie_parser):
        release = movie_parser.parse("Movie.2019.MULTi.1080p.BluRay.x264-GRP")

        assert release.title == "Movie"
        assert release.language == {"multi": "Multilingual"}

    def test_edition_and_disc(self, movie_parser):
        assert movie_parser.parse("Movie (2010) {tmdb-123} {edition-Extended}").edition == "Extended"
        assert movie_parser.parse("Movie.2010.CD1.XviD-GRP").disc == 1


class TestRealWorldNames:
    """Field-by-field checks on names collected from trackers."""

    @pytest.mark.parametrize(
        ("kind", "name", "expected"),
        [
            (
                "movie",
                "Some.Movie.1080p.WEB-DL.H264.AAC-GRP",
                {
                    "title": "Some Movie",
                    "resolution": "1080p",
                    "source": "WEB-DL",
                    "format": "H264",
                    "audio": "AAC",
                    "group": "GRP",
                    "title_extra": "",
                    "language": {},
                },
            ),
            (
                "tv",
                "Running Man E780 1080p VIU WEB-DL AAC 2.0 H.264-MMR",
                {
                    "title": "Running Man",
                    "season": None,
                    "episode": 780,
                    "episodes": (780,),
                    "resolution": "1080p",
                    "streaming_provider": "VIU",
                    "source": "WEB-DL",
                    "audio": "AAC 2.0",
                    "format": "H.264",
                    "group": "MMR",
                    "language": {},
                },
            ),
            (
                "tv",
                "Running.Man.E780.This.is.the.Romance.of.It.Continues.1080p.VIU.WEB-DL.H264.AAC-MMR",
                {
                    "title": "Running Man",
                    "episode": 780,
                    "episode_title": "This is the Romance of It Continues",
                    "streaming_provider": "VIU",
                    "source": "WEB-DL",
                    "format": "H264",
                    "audio": "AAC",
                    "group": "MMR",
                },
            ),
            (
                "tv",
                "[Erai-raws] Xian Wang de Richang Shenghuo 5 - 01 (CA) [720p CR WEB-DL AVC AAC][MultiSub][2B267646]",
                {
                    "title": "Xian Wang de Richang Shenghuo",
                    "season": 5,
                    "episode": 1,
                    "resolution": "720p",
                    "streaming_provider": "CR",
                    "source": "WEB-DL",
                    "format": "AVC",
                    "audio": "AAC",
                    "language": {"ca": "Canadian", "multi": "Multilingual"},
                    "flags": ("MultiSub",),
                    "group": "Erai-raws",
                },
            ),
            (
                "tv",
                "[ToonsHub] Pray Speak What Has Happened S01E09 1080p NF WEB-DL AAC2.0 H.264 "
                "(Multi-Subs, Moshimo Kono Yo ga Butai nara, Gakuya wa Doko ni Aru Darou)",
                {
                    "title": "Pray Speak What Has Happened",
                    "season": 1,
                    "episode": 9,
                    "resolution": "1080p",
                    "streaming_provider": "NF",
                    "source": "WEB-DL",
                    "format": "H.264",
                    "audio": "AAC 2.0",
                    "language": {"multi": "Multilingual"},
                    "flags": ("Multi-Subs",),
                    "group": "ToonsHub",
                },
            ),
            (
                "movie",
                "The.Movie.Title.2010.MA.WEBDL-2160p.TrueHD.Atmos.7.1.DV.HDR10Plus.h265-RlsGrp",
                {
                    "title": "The Movie Title",
                    "year": 2010,
                    "streaming_provider": "MA",
                    "source": "WEB-DL",
                    "resolution": "2160p",
                    "audio": "TrueHD Atmos 7.1",
                    "hdr": "DV HDR10Plus",
                    "format": "h265",
                    "group": "RlsGrp",
                },
            ),
            (
                "tv",
                "The Acolyte (2024) - S01E07 - Choice [WEBDL-2160p][DV HDR10][EAC3 Atmos 5.1][h265]",
                {
                    "title": "The Acolyte",
                    "year": 2024,
                    "season": 1,
                    "episode": 7,
                    "episode_title": "Choice",
                    "source": "WEB-DL",
                    "resolution": "2160p",
                    "hdr": "DV HDR10",
                    "audio": "EAC3 Atmos 5.1",
                    "format": "h265",
                },
            ),
            (
                "tv",
                "Show.S01E01.Amazon.Prime.Video.1080p",
                {
                    "title": "Show",
                    "streaming_provider": "AMZN",
                    "resolution": "1080p",
                    "title_extra": "",
                },
            ),
        ],
        ids=[
            "web-dl-without-year",
            "running-man-bare-episode",
            "running-man-episode-title",
            "erai-raws-region-code",
            "toonshub-multi-subs",
            "dolby-vision-hdr10plus",
            "acolyte-bracket-blocks",
            "amazon-prime-video",
        ],
    )
    def test_fields(self, kind, name, expected):
        release = ReleaseParser(kind).parse(name)

        assert {field: getattr(release, field) for field in expected} == expected

    def test_web_dl_is_not_a_dual_language_marker(self, movie_parser):
        release = movie_parser.parse("Movie.2010.1080p.BluRay.WEB-DL.x264-GRP")

        assert release.source == "BluRay"
        assert release.language == {}

    def test_loose_multi_sub_flag_implies_multi(self, tv_parser):
        release = tv_parser.parse("Show.S01E01.1080p.MultiSub.WEB-DL-GRP")

        assert "MultiSub" in release.flags
        assert release.language == {"multi": "Multilingual"}


class TestPinnedOracles:
    """Fallback assignments for ambiguous names."""

    def test_bare_channel_layout_is_not_audio(self, movie_parser):
        release = movie_parser.parse("Movie.Title.2010.5.1.1080p.BluRay.x264-GRP")

        assert release.audio == ""
        assert release.title == "Movie Title"
        assert release.title_extra == "5 1"

    def test_tv_without_marker_resolves_like_a_movie(self, tv_parser, movie_parser):
        name = "Some.Show.720p.HDTV.x264-GRP"
        as_tv = tv_parser.parse(name)
        as_movie = movie_parser.parse(name)

        assert as_tv.season is None
        assert as_tv.episode is None
        assert as_tv.title == as_movie.title == "Some Show"

    def test_movie_never_gets_an_episode(self, movie_parser):
        release = movie_parser.parse("Show.S01E01.720p.HDTV.x264-GRP")
        assert release.season is None
        assert release.episodes == ()


class TestFailureHandling:
    """Test cases for the never-raise contract."""

    @pytest.mark.parametrize("name", ["", "   ", "....", "[]()", "\x00", "日本語のタイトル"])
    def test_degenerate_inputs(self, tv_parser, name):
        release = tv_parser.parse(name)
        assert release.release == name

    def test_internal_error_falls_back_to_cleaned_title(self, tv_parser, monkeypatch, caplog):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(release_parser, "run_pipeline", broken)

        with caplog.at_level(logging.ERROR, logger="sceneparse.core.parser.release_parser"):
            release = tv_parser.parse("Show.Name.S01E01")

        assert release.title == "Show Name S01E01"
        assert release.season is None
        error_records = [record for record in caplog.records if record.levelno == logging.ERROR]
        assert error_records
        assert error_records[0].error_code == "RELEASE_PARSE_FAILED"
        assert error_records[0].context["kind"] == "tv"


class TestDirectories:
    """Test cases for directory and path parsing."""

    def test_series_directory(self, tv_parser):
        info = tv_parser.parse_series_directory("Show Name (2010) {tvdb-123}")

        assert info.title == "Show Name"
        assert info.year == 2010
        assert info.tvdb_id == "123"
        assert info.type is ReleaseKind.SERIES

    def test_movie_directory(self, tv_parser):
        info = tv_parser.parse_movie_directory("Movie Title (2010) {imdb-tt0123456}")

        assert info.title == "Movie Title"
        assert info.year == 2010
        assert info.imdb_id == "tt0123456"
        assert info.type is ReleaseKind.MOVIE

    def test_season_directory(self):
        assert ReleaseParser.parse_season_directory("Season 01") == 1
        assert ReleaseParser.parse_season_directory("random") is None

    def test_series_path(self, tv_parser):
        info = tv_parser.parse_path("Show (2010)/Season 01/Show.S01E02.mkv")

        assert info.directory.title == "Show"
        assert info.directory.year == 2010
        assert info.directory.type is ReleaseKind.SERIES
        assert info.season == 1
        assert info.file.episode == 2
        assert info.full_path == "Show (2010)/Season 01/Show.S01E02.mkv"

    def test_windows_path_equals_unix_path(self, tv_parser):
        windows = tv_parser.parse_path("C:\\TV\\Show (2010)\\Season 01\\Show.S01E02.720p.mkv")
        mixed = tv_parser.parse_path("C:\\TV/Show (2010)\\Season 01/Show.S01E02.720p.mkv")
        unix = tv_parser.parse_path("C:/TV/Show (2010)/Season 01/Show.S01E02.720p.mkv")

        assert windows == unix
        assert mixed == unix

    def test_movie_path(self, tv_parser):
        info = tv_parser.parse_path("Movies/Movie Title (2010)/Movie.Title.2010.1080p.BluRay.x264-GRP.mkv")

        assert info.season is None
        assert info.directory.type is ReleaseKind.MOVIE
        assert info.directory.title == "Movie Title"
        assert info.file.year == 2010
        assert info.file.group == "GRP"

    def test_specials_directory(self, tv_parser):
        info = tv_parser.parse_path("Show/Specials/Show.S00E01.mkv")

        assert info.season == 0
        assert info.directory.type is ReleaseKind.SERIES

    def test_bare_file_path(self, tv_parser):
        info = tv_parser.parse_path("Show.S01E02.mkv")

        assert info.directory is None
        assert info.season is None
        assert info.file.episode == 2

    @pytest.mark.parametrize("path", ["", "Show/", "Show/Season 01/.mkv"])
    def test_unparsable_path(self, tv_parser, path):
        assert tv_parser.parse_path(path) is None


def test_parse_release_helper():
    release = parse_release("Movie.2010.1080p.BluRay.x264-GRP", "movie")
    assert release.title == "Movie"
    assert release.year == 2010


def test_trace_returns_claims(tv_parser):
    state = tv_parser.trace("Show.S01E02.720p")
    assert [claim.field for claim in state.working.claims] == ["episode", "resolution"]
