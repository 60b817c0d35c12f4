"""Token matchers for release-name parsing.

Every matcher is a pure function over the working text. Claimed characters
show up as :data:`~sceneparse.core.parser.working_text.FILLER`, which no
pattern below accepts, so a matcher only ever sees unclaimed text.

Single-valued matchers (``match_*``) return the leftmost, then longest,
occurrence as a :class:`TokenMatch` or ``None``. Multi-valued matchers
(``find_*``) return every non-overlapping occurrence in order. All of them
accept ``pos``/``endpos`` with the same meaning as :meth:`re.Pattern.search`,
which is how the pipeline restricts a matcher to one bracketed block or to
the tail of a name.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from re import Match, Pattern
from typing import Any, Final

from sceneparse.core.parser.alias_table import BOUNDARY_AFTER, BOUNDARY_BEFORE, AliasHit, AliasTable
from sceneparse.shared.constants.lexicon import (
    AUDIO_CASE_SENSITIVE,
    AUDIO_CODECS,
    COUNTRY_CODES,
    DEVICES,
    DEVICES_CASE_SENSITIVE,
    DUAL_LANGUAGE_MARKER,
    FLAGS,
    FLAGS_CASE_SENSITIVE,
    FORMATS,
    FORMATS_CASE_SENSITIVE,
    HDR_CASE_SENSITIVE,
    HDR_TOKENS,
    LANGUAGE_BRACKET_CODES,
    LANGUAGES,
    LANGUAGES_CASE_SENSITIVE,
    MEDIA_EXTENSIONS,
    OPERATING_SYSTEMS,
    OPERATING_SYSTEMS_CASE_SENSITIVE,
    REMUX_UPGRADABLE_SOURCES,
    SOURCES,
    SOURCES_CASE_SENSITIVE,
)
from sceneparse.shared.constants.providers import STREAMING_PROVIDERS, UNKNOWN_PROVIDER_CODE_MAX_LENGTH

YEAR_MIN: Final[int] = 1900
YEAR_MAX: Final[int] = 2100

# Sources that a bare provider code may precede ("1080p.SKST.WEB-DL").
WEB_SOURCES: Final[frozenset[str]] = frozenset({"WEB-DL", "WEBRip", "WEB"})


@dataclass(frozen=True)
class TokenMatch:
    """A recognized token: its span, decoded value and any extra spans.

    ``extra_spans`` lists further pieces of the same token that are not
    contiguous with the main span, such as the ``Remux`` half of
    ``Bluray-1080p Remux``.
    """

    start: int
    end: int
    value: Any
    extra_spans: tuple[tuple[int, int], ...] = ()

    @property
    def spans(self) -> tuple[tuple[int, int], ...]:
        return ((self.start, self.end), *self.extra_spans)


@dataclass(frozen=True)
class EpisodeMarker:
    """Decoded season/episode marker, or a calendar date for daily shows."""

    season: int | None = None
    first: int | None = None
    last: int | None = None
    date: datetime.date | None = None

    @property
    def episodes(self) -> tuple[int, ...]:
        if self.first is None:
            return ()
        last = self.first if self.last is None else self.last
        return tuple(range(self.first, last + 1))


def _is_code_like(alias: str) -> bool:
    compact = alias.replace(" ", "")
    return len(compact) <= 5 or compact.upper() == compact


SOURCE_TABLE: Final = AliasTable(SOURCES, SOURCES_CASE_SENSITIVE)
FORMAT_TABLE: Final = AliasTable(FORMATS, FORMATS_CASE_SENSITIVE)
AUDIO_TABLE: Final = AliasTable(AUDIO_CODECS, AUDIO_CASE_SENSITIVE)
HDR_TABLE: Final = AliasTable(HDR_TOKENS, HDR_CASE_SENSITIVE)
FLAG_TABLE: Final = AliasTable(FLAGS, FLAGS_CASE_SENSITIVE)
LANGUAGE_TABLE: Final = AliasTable(
    {code: aliases for code, (_, aliases) in LANGUAGES.items()},
    LANGUAGES_CASE_SENSITIVE,
)
PROVIDER_TABLE: Final = AliasTable(STREAMING_PROVIDERS, _is_code_like)
DEVICE_TABLE: Final = AliasTable(DEVICES, DEVICES_CASE_SENSITIVE)
OS_TABLE: Final = AliasTable(OPERATING_SYSTEMS, OPERATING_SYSTEMS_CASE_SENSITIVE)

# Bracket codes match in upper case; three-letter codes also as "Eng".
_BRACKET_CODES: Final[dict[str, str]] = {
    **LANGUAGE_BRACKET_CODES,
    **{surface.capitalize(): code for surface, code in LANGUAGE_BRACKET_CODES.items() if len(surface) == 3},
}

# ---------------------------------------------------------------------------
# Compiled patterns
# ---------------------------------------------------------------------------

_EXTENSION_PATTERN = re.compile(
    r"\.(" + "|".join(re.escape(extension.lstrip(".")) for extension in MEDIA_EXTENSIONS) + r")\s*$",
    re.IGNORECASE,
)
_DATABASE_ID_PATTERN = re.compile(r"[\[{](tmdb|tvdb|imdb)(?:id)?-(tt\d+|\d+)[\]}]", re.IGNORECASE)
_EDITION_PATTERNS = (
    re.compile(r"\{edition-([^}\x00]+)\}", re.IGNORECASE),
    re.compile(r"\[([A-Za-z]+-Edition)\]"),
)
_CRC_PATTERN = re.compile(r"[\[(]([0-9A-F]{8})[\])]")
_BLOCK_PATTERN = re.compile(r"\[[^\[\]\x00]*\]|\{[^{}\x00]*\}|\([^()\x00]*\)")
_RESOLUTION_PATTERN = re.compile(
    rf"{BOUNDARY_BEFORE}(?:(\d{{3,4}})([pi])|(4K|UHD)|\d{{3,4}}x(\d{{3,4}})){BOUNDARY_AFTER}",
    re.IGNORECASE,
)
_BRACKETED_YEAR_PATTERN = re.compile(r"[(\[](\d{4})[)\]]")
_BARE_YEAR_PATTERN = re.compile(rf"{BOUNDARY_BEFORE}(\d{{4}}){BOUNDARY_AFTER}(?![-. ]\d{{2}}[-. ]\d{{2}}(?!\d))")
_REMUX_GAP_PATTERN = re.compile(r"[ ._\-\x00]*(?:\d{3,4}[pi])?[ ._\-\x00]*", re.IGNORECASE)
_GROUP_SLOT_TAIL = re.compile(r"[\s\x00]*$")
# "DL" glued to a preceding "WEB" is the second half of WEB-DL.
_DUAL_LANGUAGE_PATTERN = re.compile(rf"(?<!(?i:web)[ ._\-]){BOUNDARY_BEFORE}{DUAL_LANGUAGE_MARKER}{BOUNDARY_AFTER}")
_COUNTRY_CODE_PATTERN = re.compile(r"\(([A-Z]{2})\)")
_BRACKET_CODE_PATTERN = re.compile(
    rf"{BOUNDARY_BEFORE}(?:"
    + "|".join(sorted(_BRACKET_CODES, key=lambda code: (-len(code), code)))
    + rf"){BOUNDARY_AFTER}"
)
_UNKNOWN_PROVIDER_PATTERN = re.compile(
    rf"(?<=\x00)[ ._\-]([A-Z][A-Z0-9]{{1,{UNKNOWN_PROVIDER_CODE_MAX_LENGTH - 1}}})[ ._\-](?=\x00)"
)
_VERSION_PATTERN = re.compile(rf"{BOUNDARY_BEFORE}v(\d+(?:\.\d+)*){BOUNDARY_AFTER}", re.IGNORECASE)
_DISC_PATTERN = re.compile(rf"{BOUNDARY_BEFORE}(?:Disc|Disk|CD|DVD)[ ._\-]?(\d{{1,2}}){BOUNDARY_AFTER}", re.IGNORECASE)

_TRAILING_GROUP_PATTERN = re.compile(r"(?<=[\x00\])}])-(?P<group>[A-Za-z0-9][^\s\[\](){}\x00]*)[\s\x00]*$")
_LEADING_GROUP_PATTERN = re.compile(r"^\s*\[(?P<group>[^\[\]\x00]{2,30})\]")
_BRACKETED_TRAILING_GROUP_PATTERN = re.compile(r"\[(?P<group>[^\[\]\x00]{2,30})\][\s\x00]*$")
_DOTTED_TRAILING_GROUP_PATTERN = re.compile(r"(?<=\x00)\.(?P<group>[A-Z][A-Za-z0-9]{2,15})[\s\x00]*$")
_GROUP_ALNUM_RATIO: Final[float] = 0.7


def _audio_pattern(case_sensitive: bool) -> Pattern[str] | None:
    alternation = AUDIO_TABLE.alternation(case_sensitive=case_sensitive)
    if not alternation:
        return None
    # Only the codec follows the table's case rule; Atmos never does.
    codec = f"(?P<codec>{alternation})" if case_sensitive else f"(?i:(?P<codec>{alternation}))"
    return re.compile(
        rf"{BOUNDARY_BEFORE}{codec}"
        r"(?:[ ._\-]?(?P<atmos1>(?i:Atmos)))?"
        r"(?:[ ._\-]?(?P<channels>[1-9]\.[0-9]))?"
        r"(?:[ ._\-]?(?P<atmos2>(?i:Atmos)))?"
        rf"{BOUNDARY_AFTER}"
    )


_AUDIO_PATTERNS: Final = tuple(
    (pattern, case_sensitive)
    for pattern, case_sensitive in ((_audio_pattern(False), False), (_audio_pattern(True), True))
    if pattern is not None
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _hit_to_match(hit: AliasHit | None) -> TokenMatch | None:
    if hit is None:
        return None
    return TokenMatch(hit.start, hit.end, hit.canonical)


def _hits_to_matches(hits: Iterator[AliasHit]) -> list[TokenMatch]:
    return [TokenMatch(hit.start, hit.end, hit.canonical) for hit in hits]


def _in_range(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def _looks_like_group(candidate: str) -> bool:
    candidate = candidate.strip()
    if not candidate or not any(char.isalpha() for char in candidate):
        return False
    alnum = sum(1 for char in candidate if char.isalnum() or char in "-_ ")
    return alnum / len(candidate) > _GROUP_ALNUM_RATIO


# ---------------------------------------------------------------------------
# Container, IDs, edition and blocks
# ---------------------------------------------------------------------------


def match_container(text: str) -> TokenMatch | None:
    """Trailing media-file extension, returned lower case without the dot."""
    match = _EXTENSION_PATTERN.search(text)
    # Upper-case "TS" at the end of a scene name is the telesync source.
    if match is None or match.group(1) == "TS":
        return None
    return TokenMatch(match.start(), match.end(1), match.group(1).lower())


def find_database_ids(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    """``{tmdb-N}``, ``[tvdbid-N]``, ``[imdb-ttN]`` tags as ``(field, id)`` pairs.

    IMDb ids keep the ``tt`` prefix and require it; TMDB/TVDB ids are bare
    digits.
    """
    matches = []
    for match in _DATABASE_ID_PATTERN.finditer(text, pos, _endpos(text, endpos)):
        database = match.group(1).lower()
        identifier = match.group(2)
        has_prefix = identifier[:2].lower() == "tt"
        if (database == "imdb") != has_prefix:
            continue
        if has_prefix:
            identifier = "tt" + identifier[2:]
        matches.append(TokenMatch(match.start(), match.end(), (f"{database}_id", identifier)))
    return matches


def match_edition(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """``{edition-Director's Cut}`` or ``[U-Edition]``."""
    for pattern in _EDITION_PATTERNS:
        match = pattern.search(text, pos, _endpos(text, endpos))
        if match is not None:
            return TokenMatch(match.start(), match.end(), match.group(1).strip())
    return None


def find_crc_tags(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    """Anime CRC32 checksums such as ``[89ABCDEF]``."""
    return [
        TokenMatch(match.start(), match.end(), match.group(1))
        for match in _CRC_PATTERN.finditer(text, pos, _endpos(text, endpos))
        if any(char.isalpha() for char in match.group(1))
    ]


def find_blocks(text: str) -> list[tuple[int, int]]:
    """Unclaimed ``[...]``/``{...}``/``(...)`` blocks as (open, close) indexes."""
    return [(match.start(), match.end() - 1) for match in _BLOCK_PATTERN.finditer(text)]


# ---------------------------------------------------------------------------
# Technical specs
# ---------------------------------------------------------------------------


def find_flags(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    return _hits_to_matches(FLAG_TABLE.finditer(text, pos, endpos))


def match_hdr(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """A run of HDR tokens separated only by separators, e.g. ``DV HDR10``."""
    first = HDR_TABLE.search(text, pos, endpos)
    if first is None:
        return None

    values = [first.canonical]
    end = first.end
    while True:
        following = HDR_TABLE.search(text, end, endpos)
        if following is None or not _is_separator_gap(text, end, following.start):
            break
        if following.canonical not in values:
            values.append(following.canonical)
        end = following.end
    return TokenMatch(first.start, end, " ".join(values))


def match_audio(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """Audio codec with optional Atmos and channel layout.

    Rendered as ``"<codec>[ Atmos][ N.N]"``. A channel layout without a
    codec is not audio.

    Example:
        >>> match_audio("Movie.DDP5.1.Atmos-GRP").value
        'DDP Atmos 5.1'
    """
    endpos = _endpos(text, endpos)
    best: tuple[Match[str], bool] | None = None
    for pattern, case_sensitive in _AUDIO_PATTERNS:
        match = pattern.search(text, pos, endpos)
        if match is None:
            continue
        if best is None or (match.start(), -match.end()) < (best[0].start(), -best[0].end()):
            best = (match, case_sensitive)
    if best is None:
        return None

    match, case_sensitive = best
    codec = AUDIO_TABLE.canonical(match.group("codec"), case_sensitive=case_sensitive)
    if codec is None:
        return None
    parts = [codec]
    if match.group("atmos1") or match.group("atmos2"):
        parts.append("Atmos")
    if match.group("channels"):
        parts.append(match.group("channels"))
    return TokenMatch(match.start(), match.end(), " ".join(parts))


def match_source(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """Leftmost source; a disc source followed by ``Remux`` becomes ``Remux``."""
    hit = SOURCE_TABLE.search(text, pos, endpos)
    if hit is None:
        return None
    if hit.canonical in REMUX_UPGRADABLE_SOURCES:
        following = SOURCE_TABLE.search(text, hit.end, endpos)
        if (
            following is not None
            and following.canonical == "Remux"
            and _REMUX_GAP_PATTERN.fullmatch(text, hit.end, following.start)
        ):
            return TokenMatch(hit.start, hit.end, "Remux", ((following.start, following.end),))
    return TokenMatch(hit.start, hit.end, hit.canonical)


def match_format(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    return _hit_to_match(FORMAT_TABLE.search(text, pos, endpos))


def match_resolution(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """``1080p``/``1080i``, ``4K``/``UHD`` (2160p) or ``1920x1080`` (1080p)."""
    match = _RESOLUTION_PATTERN.search(text, pos, _endpos(text, endpos))
    if match is None:
        return None
    height, scan, alias, frame_height = match.groups()
    if alias:
        value = "2160p"
    elif frame_height:
        value = f"{int(frame_height)}p"
    else:
        value = f"{int(height)}{scan.lower()}"
    return TokenMatch(match.start(), match.end(), value)


def match_streaming_provider(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """Longest provider alias, skipping the trailing ``-GROUP`` slot.

    Example:
        >>> match_streaming_provider("Show.S01E01.1080p.Disney+.WEB-DL").value
        'DSNP'
    """
    for hit in PROVIDER_TABLE.finditer(text, pos, endpos):
        if _in_group_slot(text, hit.start, hit.end):
            continue
        return TokenMatch(hit.start, hit.end, hit.canonical)
    return None


def find_unknown_provider_codes(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    """Short upper-case tokens wedged between two claims.

    The pipeline accepts one as a provider only when the claim before it is
    a resolution and the claim after it is a WEB source.
    """
    return [
        TokenMatch(match.start(1), match.end(1), match.group(1))
        for match in _UNKNOWN_PROVIDER_PATTERN.finditer(text, pos, _endpos(text, endpos))
    ]


def find_languages(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    """Language names as ``(code, English name)`` pairs."""
    return [
        TokenMatch(hit.start, hit.end, (hit.canonical, LANGUAGES[hit.canonical][0]))
        for hit in LANGUAGE_TABLE.finditer(text, pos, endpos)
    ]


def find_language_codes(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    """Bracket language codes (``DE``, ``Eng``); only trusted inside blocks."""
    matches = []
    for match in _BRACKET_CODE_PATTERN.finditer(text, pos, _endpos(text, endpos)):
        code = _BRACKET_CODES[match.group(0)]
        matches.append(TokenMatch(match.start(), match.end(), (code, LANGUAGES[code][0])))
    return matches


def match_country_code(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """Parenthesised region code such as ``(CA)`` starting exactly at ``pos``."""
    match = _COUNTRY_CODE_PATTERN.match(text, pos, _endpos(text, endpos))
    if match is None or match.group(1) not in COUNTRY_CODES:
        return None
    return TokenMatch(match.start(), match.end(), (match.group(1).lower(), COUNTRY_CODES[match.group(1)]))


def find_dual_language_markers(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    return [
        TokenMatch(match.start(), match.end(), None)
        for match in _DUAL_LANGUAGE_PATTERN.finditer(text, pos, _endpos(text, endpos))
    ]


# ---------------------------------------------------------------------------
# Year and season/episode
# ---------------------------------------------------------------------------


def find_bare_years(text: str, pos: int = 0, endpos: int | None = None) -> list[TokenMatch]:
    """Bare in-range years that do not start a ``YYYY-MM-DD`` date."""
    return [
        TokenMatch(match.start(), match.end(), int(match.group(1)))
        for match in _BARE_YEAR_PATTERN.finditer(text, pos, _endpos(text, endpos))
        if _in_range(int(match.group(1)), YEAR_MIN, YEAR_MAX)
    ]


def match_year(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """Bracketed ``(YYYY)`` first, otherwise the last bare year not at index 0.

    Example:
        >>> match_year("2012.2009.1080p.BluRay").value
        2009
    """
    endpos = _endpos(text, endpos)
    for match in _BRACKETED_YEAR_PATTERN.finditer(text, pos, endpos):
        if _in_range(int(match.group(1)), YEAR_MIN, YEAR_MAX):
            return TokenMatch(match.start(), match.end(), int(match.group(1)))

    candidates = [candidate for candidate in find_bare_years(text, pos, endpos) if candidate.start > 0]
    return candidates[-1] if candidates else None


EpisodeBuilder = Callable[[Match[str]], "TokenMatch | None"]


def _marker_match(match: Match[str], marker: EpisodeMarker, group: int | None = None) -> TokenMatch:
    if group is None:
        return TokenMatch(match.start(), match.end(), marker)
    return TokenMatch(match.start(group), match.end(group), marker)


def _episode_span(first: int, numbers: list[int]) -> tuple[int, int]:
    last = numbers[-1] if numbers else first
    return first, max(first, last)


def _build_season_episode(match: Match[str]) -> TokenMatch:
    first, last = _episode_span(int(match.group(2)), [int(number) for number in re.findall(r"\d+", match.group(3))])
    return _marker_match(match, EpisodeMarker(int(match.group(1)), first, last))


def _build_cross(match: Match[str]) -> TokenMatch:
    following = [int(match.group(3))] if match.group(3) else []
    first, last = _episode_span(int(match.group(2)), following)
    return _marker_match(match, EpisodeMarker(int(match.group(1)), first, last))


def _build_season_word(match: Match[str]) -> TokenMatch:
    episode = int(match.group(2))
    return _marker_match(match, EpisodeMarker(int(match.group(1)), episode, episode))


def _build_episode_chain(match: Match[str]) -> TokenMatch:
    first, last = _episode_span(int(match.group(1)), [int(number) for number in re.findall(r"\d+", match.group(2))])
    return _marker_match(match, EpisodeMarker(None, first, last))


def _build_episode_only(match: Match[str]) -> TokenMatch:
    episode = int(match.group(1))
    return _marker_match(match, EpisodeMarker(None, episode, episode))


def _build_anime_season(match: Match[str]) -> TokenMatch | None:
    season, episode = int(match.group(1)), int(match.group(2))
    if not (_in_range(season, 1, 20) and _in_range(episode, 1, 200)):
        return None
    return _marker_match(match, EpisodeMarker(season, episode, episode))


def _build_hyphen_delimited(match: Match[str]) -> TokenMatch:
    following = [int(match.group(2))] if match.group(2) else []
    first, last = _episode_span(int(match.group(1)), following)
    end_group = 2 if match.group(2) else 1
    marker = EpisodeMarker(None, first, last)
    return TokenMatch(match.start(1), match.end(end_group), marker)


def _build_trailing_number(match: Match[str]) -> TokenMatch | None:
    digits = match.group(1)
    if len(digits) == 4 and _in_range(int(digits), YEAR_MIN, YEAR_MAX):
        return None
    episode = int(digits)
    return _marker_match(match, EpisodeMarker(None, episode, episode), 1)


def _build_bracketed_number(match: Match[str]) -> TokenMatch | None:
    episode = int(match.group(1))
    if _in_range(episode, YEAR_MIN, YEAR_MAX):
        return None
    return _marker_match(match, EpisodeMarker(None, episode, episode))


def _build_date(match: Match[str]) -> TokenMatch | None:
    try:
        date = datetime.date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError:
        return None
    return _marker_match(match, EpisodeMarker(date=date))


# Grammars in priority order; the first one that yields a marker wins.
EPISODE_GRAMMARS: Final[tuple[tuple[str, Pattern[str], EpisodeBuilder], ...]] = (
    (
        "season_episode",
        re.compile(r"(?<![A-Za-z0-9])S(\d{1,3})[ ._]?E(\d{1,4})((?:(?:-E?|E)\d{1,4}(?![\dpix]))*)(?!\d)", re.IGNORECASE),
        _build_season_episode,
    ),
    (
        "cross",
        re.compile(r"(?<![A-Za-z0-9])(\d{1,2})x(\d{2,3})(?:-(\d{2,3}))?(?![A-Za-z0-9])", re.IGNORECASE),
        _build_cross,
    ),
    (
        "season_word",
        re.compile(r"(?<![A-Za-z0-9])Season[ ._\-]?(\d{1,3})[ ._\-]*Episode[ ._\-]?(\d{1,4})(?!\d)", re.IGNORECASE),
        _build_season_word,
    ),
    (
        "episode_chain",
        re.compile(r"(?<![A-Za-z0-9])E(\d{1,4})((?:-?E\d{1,4})+)(?!\d)", re.IGNORECASE),
        _build_episode_chain,
    ),
    ("episode_absolute", re.compile(r"(?<![A-Za-z0-9])E(\d{3,4})(?![A-Za-z0-9])"), _build_episode_only),
    (
        "episode_word",
        re.compile(r"(?<![A-Za-z0-9])(?:Episode|Ep)[ ._]?(\d{1,4})(?!\d)", re.IGNORECASE),
        _build_episode_only,
    ),
    (
        "anime_season",
        re.compile(r"(?<![A-Za-z0-9])S(\d{1,2})\s*-\s*(\d{1,4})(?!\d)", re.IGNORECASE),
        _build_anime_season,
    ),
    (
        "hyphen_delimited",
        re.compile(r"(?<!\S)-\s*(\d{2,3})(?:-(\d{2,3}))?\s*-(?!\S)"),
        _build_hyphen_delimited,
    ),
    (
        "anime_numeric_season",
        re.compile(r"(?<![A-Za-z0-9.])(\d{1,2})\s+-\s+(\d{1,3})(?![\d.])"),
        _build_anime_season,
    ),
    (
        "trailing_number",
        re.compile(r"(?<!\S)-\s*(\d{2,4})(?=\s*(?:[\[(\x00]|$))"),
        _build_trailing_number,
    ),
    ("bracketed_number", re.compile(r"\[(\d{1,4})\]"), _build_bracketed_number),
    (
        "date",
        re.compile(r"(?<!\d)((?:19|20)\d{2})[-. ](\d{2})[-. ](\d{2})(?!\d)"),
        _build_date,
    ),
)

_SEASON_EPISODE_TAG = EPISODE_GRAMMARS[0][1]


def match_season_episode(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    """Season/episode marker or daily-show date, value :class:`EpisodeMarker`.

    Examples:
        >>> match_season_episode("Show.S01E02-E04.720p").value.episodes
        (2, 3, 4)
        >>> match_season_episode("Show - 2023-05-01 - Title").value.date
        datetime.date(2023, 5, 1)
    """
    endpos = _endpos(text, endpos)
    for _name, pattern, build in EPISODE_GRAMMARS:
        for match in pattern.finditer(text, pos, endpos):
            token = build(match)
            if token is not None:
                return token
    return None


def find_season_episode_tag(text: str) -> int | None:
    """Start of the first ``S##E##`` tag, used to anchor tail-only matchers."""
    match = _SEASON_EPISODE_TAG.search(text)
    return None if match is None else match.start()


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


def match_trailing_group(text: str) -> TokenMatch | None:
    """``-GROUP`` at the very end, right after a claim or closing bracket."""
    match = _TRAILING_GROUP_PATTERN.search(text)
    if match is None or not any(char.isalpha() for char in match.group("group")):
        return None
    return TokenMatch(match.start("group"), match.end("group"), match.group("group"))


def match_leading_group(text: str) -> TokenMatch | None:
    """``[Group]`` at the very start, as used by fansub releases."""
    return _bracketed_group(_LEADING_GROUP_PATTERN.search(text))


def match_bracketed_trailing_group(text: str) -> TokenMatch | None:
    return _bracketed_group(_BRACKETED_TRAILING_GROUP_PATTERN.search(text))


def match_dotted_trailing_group(text: str) -> TokenMatch | None:
    """Old-style ``.Group`` suffix right after a claim."""
    match = _DOTTED_TRAILING_GROUP_PATTERN.search(text)
    if match is None:
        return None
    return TokenMatch(match.start("group"), match.end("group"), match.group("group"))


def _bracketed_group(match: Match[str] | None) -> TokenMatch | None:
    if match is None or not _looks_like_group(match.group("group")):
        return None
    # The whole "[Group]" is claimed so no bracket is left for the title.
    return TokenMatch(match.start("group") - 1, match.end("group") + 1, match.group("group").strip())


# ---------------------------------------------------------------------------
# Extras
# ---------------------------------------------------------------------------


def match_version(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    match = _VERSION_PATTERN.search(text, pos, _endpos(text, endpos))
    return None if match is None else TokenMatch(match.start(), match.end(), match.group(1))


def match_disc(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    match = _DISC_PATTERN.search(text, pos, _endpos(text, endpos))
    return None if match is None else TokenMatch(match.start(), match.end(), int(match.group(1)))


def match_device(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    return _hit_to_match(DEVICE_TABLE.search(text, pos, endpos))


def match_os(text: str, pos: int = 0, endpos: int | None = None) -> TokenMatch | None:
    return _hit_to_match(OS_TABLE.search(text, pos, endpos))


# ---------------------------------------------------------------------------
# Internal utilities
# ---------------------------------------------------------------------------


def _endpos(text: str, endpos: int | None) -> int:
    return len(text) if endpos is None else endpos


def _is_separator_gap(text: str, start: int, end: int) -> bool:
    return all(char in " ._-" for char in text[start:end])


def _in_group_slot(text: str, start: int, end: int) -> bool:
    return start > 0 and text[start - 1] == "-" and _GROUP_SLOT_TAIL.match(text, end) is not None


__all__ = [
    "EPISODE_GRAMMARS",
    "WEB_SOURCES",
    "YEAR_MAX",
    "YEAR_MIN",
    "EpisodeMarker",
    "TokenMatch",
    "find_bare_years",
    "find_blocks",
    "find_crc_tags",
    "find_database_ids",
    "find_dual_language_markers",
    "find_flags",
    "find_language_codes",
    "find_languages",
    "find_season_episode_tag",
    "find_unknown_provider_codes",
    "match_audio",
    "match_bracketed_trailing_group",
    "match_container",
    "match_country_code",
    "match_device",
    "match_disc",
    "match_dotted_trailing_group",
    "match_edition",
    "match_format",
    "match_hdr",
    "match_leading_group",
    "match_os",
    "match_resolution",
    "match_season_episode",
    "match_source",
    "match_streaming_provider",
    "match_trailing_group",
    "match_version",
]
