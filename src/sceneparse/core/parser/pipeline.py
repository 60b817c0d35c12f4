"""Extraction pipeline.

Runs the token matchers over one :class:`WorkingText` in a fixed order. Each
step claims the spans it recognizes, so later steps and the title resolver
only see what earlier steps left. The order lives in :data:`MATCHER_ORDER`
and :data:`DIRECTORY_ORDER`; nothing else encodes precedence.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Final

from sceneparse.core.parser import matchers
from sceneparse.core.parser.matchers import EpisodeMarker, TokenMatch
from sceneparse.core.parser.models import EpisodeRange, ParsedRelease, ReleaseKind
from sceneparse.core.parser.title_resolver import resolve_titles
from sceneparse.core.parser.working_text import Claim, WorkingText
from sceneparse.shared.constants.lexicon import LANGUAGES, MULTILINGUAL_FLAGS
from sceneparse.shared.errors import create_invalid_matcher_order_error

logger = logging.getLogger(__name__)

MATCHER_ORDER: Final[tuple[str, ...]] = (
    "container",
    "ids",
    "blocks",
    "flags",
    "hdr",
    "audio",
    "source",
    "format",
    "resolution",
    "provider",
    "language",
    "year",
    "season_episode",
    "group",
    "extras",
)

DIRECTORY_ORDER: Final[tuple[str, ...]] = tuple(
    step for step in MATCHER_ORDER if step not in {"container", "season_episode", "group"}
)

# Sub-matchers applied to the interior of every bracketed block.
BLOCK_ORDER: Final[tuple[str, ...]] = (
    "flags",
    "hdr",
    "audio",
    "source",
    "format",
    "resolution",
    "provider",
    "language",
)

_BLOCK_LEFTOVER = re.compile(r"[\s._\-,+&/|\x00]*")

# Claims an old-style ".Group" suffix may follow.
_TECHNICAL_FIELDS: Final[frozenset[str]] = frozenset(
    {"source", "format", "resolution", "audio", "hdr", "flags", "streaming_provider", "language", "block"}
)

Finder = Callable[..., "list[TokenMatch]"]
SingleMatcher = Callable[..., "TokenMatch | None"]


@dataclass
class PipelineState:
    """Mutable state of one pipeline run: the buffer plus decoded values."""

    working: WorkingText
    kind: ReleaseKind
    trace: bool = False
    values: dict[str, Any] = field(default_factory=dict)
    flags: list[str] = field(default_factory=list)
    language: dict[str, str] = field(default_factory=dict)
    marker: Claim | None = None
    anchor: int | None = None

    def take(self, field_name: str, match: TokenMatch) -> list[Claim]:
        """Claim every span of ``match``; the first value per field wins."""
        claims = [self.working.claim(field_name, start, end, match.value) for start, end in match.spans]
        self.values.setdefault(field_name, match.value)
        if self.trace:
            logger.debug(
                "claim %s %s = %r in %r",
                field_name,
                [(claim.start, claim.end) for claim in claims],
                match.value,
                self.working.original,
            )
        return claims

    def take_flag(self, match: TokenMatch) -> None:
        self.take("flags", match)
        if match.value not in self.flags:
            self.flags.append(match.value)
        if match.value in MULTILINGUAL_FLAGS:
            self.language.setdefault("multi", LANGUAGES["multi"][0])

    def take_language(self, match: TokenMatch) -> None:
        self.take("language", match)
        if match.value is not None:
            code, name = match.value
            self.language.setdefault(code, name)

    def has(self, field_name: str) -> bool:
        return field_name in self.values

    def tail_anchor(self) -> int:
        """The run's tail anchor, fixed the first time a step asks for it."""
        if self.anchor is None:
            self.anchor = tail_anchor(self.working)
        return self.anchor


# ---------------------------------------------------------------------------
# Anchoring
# ---------------------------------------------------------------------------


def tail_anchor(working: WorkingText) -> int:
    """Earliest index at which tail-only tokens (flags, languages...) may start.

    That is the first claim other than the container extension, the first
    resolution, the first ``S##E##`` tag or the first year not at the very
    start, whichever comes first. Without any of them only index 0 is
    excluded, so a name never loses its first word.

    The pipeline computes it once per run, before the first tail-only step,
    so claims made by later steps never move it.
    """
    text = working.text
    resolution = matchers.match_resolution(text, 1)
    candidates = [
        next((claim.start for claim in working.claims if claim.field != "container"), None),
        None if resolution is None else resolution.start,
        matchers.find_season_episode_tag(text),
        next((year.start for year in matchers.find_bare_years(text) if year.start > 0), None),
    ]
    found = [candidate for candidate in candidates if candidate is not None]
    return min(found) if found else 1


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def _take_all(state: PipelineState, field_name: str, finder: Finder, pos: int = 0, endpos: int | None = None) -> None:
    for match in finder(state.working.text, pos, endpos):
        state.take(field_name, match)


def _take_first(
    state: PipelineState,
    field_name: str,
    matcher: SingleMatcher,
    pos: int = 0,
    endpos: int | None = None,
) -> None:
    match = matcher(state.working.text, pos, endpos)
    if match is not None:
        state.take(field_name, match)


def _step_container(state: PipelineState) -> None:
    match = matchers.match_container(state.working.text)
    if match is not None:
        state.take("container", match)


def _step_ids(state: PipelineState) -> None:
    for match in matchers.find_database_ids(state.working.text):
        field_name, identifier = match.value
        state.take(field_name, TokenMatch(match.start, match.end, identifier))
    _take_first(state, "edition", matchers.match_edition)
    _take_all(state, "crc", matchers.find_crc_tags)


def _take_block_family(state: PipelineState, family: str, start: int, end: int) -> None:
    text = state.working.text
    if family == "flags":
        for match in matchers.find_flags(text, start, end):
            state.take_flag(match)
    elif family == "language":
        for match in matchers.find_language_codes(text, start, end):
            state.take_language(match)
        for match in matchers.find_languages(state.working.text, start, end):
            state.take_language(match)
    else:
        field_name, matcher = _SINGLE_FAMILIES[family]
        _take_first(state, field_name, matcher, start, end)


def _step_blocks(state: PipelineState) -> None:
    """Decompose every unclaimed bracketed block.

    Recognized pieces are claimed field by field; when only separators are
    left the brackets go too, so ``[Remux-1080p]`` disappears completely
    while ``(2023)`` stays for the year step.

    A region code block such as ``(CA)`` is claimed whole as a language.
    """
    for open_index, close_index in matchers.find_blocks(state.working.text):
        country = matchers.match_country_code(state.working.text, open_index, close_index + 1)
        if country is not None:
            state.take_language(country)
            continue
        start, end = open_index + 1, close_index
        for family in BLOCK_ORDER:
            _take_block_family(state, family, start, end)
        if _BLOCK_LEFTOVER.fullmatch(state.working.text, start, end):
            state.working.claim_free("block", open_index, close_index + 1)


def _step_flags(state: PipelineState) -> None:
    for match in matchers.find_flags(state.working.text, state.tail_anchor()):
        state.take_flag(match)


def _single_step(field_name: str, matcher: SingleMatcher, *, anchored: bool = False) -> Callable[[PipelineState], None]:
    def step(state: PipelineState) -> None:
        if state.has(field_name):
            return
        pos = state.tail_anchor() if anchored else 0
        _take_first(state, field_name, matcher, pos)

    return step


def _step_provider(state: PipelineState) -> None:
    if state.has("streaming_provider"):
        return
    working = state.working
    match = matchers.match_streaming_provider(working.text, state.tail_anchor())
    if match is not None:
        state.take("streaming_provider", match)
        return

    for candidate in matchers.find_unknown_provider_codes(working.text):
        before = working.claim_at(candidate.start - 2)
        after = working.claim_at(candidate.end + 1)
        if (
            before is not None
            and before.field == "resolution"
            and after is not None
            and after.field == "source"
            and after.value in matchers.WEB_SOURCES
        ):
            state.take("streaming_provider", candidate)
            return


def _step_language(state: PipelineState) -> None:
    anchor = state.tail_anchor()
    for match in matchers.find_languages(state.working.text, anchor):
        state.take_language(match)
    for match in matchers.find_dual_language_markers(state.working.text, anchor):
        state.take_language(match)


def _step_season_episode(state: PipelineState) -> None:
    if not state.kind.is_episodic:
        return
    match = matchers.match_season_episode(state.working.text)
    if match is not None:
        state.marker = state.take("episode", match)[0]


def _step_group(state: PipelineState) -> None:
    working = state.working
    for matcher in (
        matchers.match_trailing_group,
        matchers.match_leading_group,
        matchers.match_bracketed_trailing_group,
    ):
        match = matcher(working.text)
        if match is not None:
            state.take("group", match)
            return

    match = matchers.match_dotted_trailing_group(working.text)
    if match is not None:
        previous = working.claim_at(match.start - 2)
        if previous is not None and previous.field in _TECHNICAL_FIELDS:
            state.take("group", match)


def _step_extras(state: PipelineState) -> None:
    _take_first(state, "version", matchers.match_version)
    _take_first(state, "disc", matchers.match_disc)
    _take_first(state, "device", matchers.match_device, state.tail_anchor())
    _take_first(state, "os", matchers.match_os, state.tail_anchor())


_SINGLE_FAMILIES: Final[dict[str, tuple[str, SingleMatcher]]] = {
    "hdr": ("hdr", matchers.match_hdr),
    "audio": ("audio", matchers.match_audio),
    "source": ("source", matchers.match_source),
    "format": ("format", matchers.match_format),
    "resolution": ("resolution", matchers.match_resolution),
    "provider": ("streaming_provider", matchers.match_streaming_provider),
}

STEPS: Final[dict[str, Callable[[PipelineState], None]]] = {
    "container": _step_container,
    "ids": _step_ids,
    "blocks": _step_blocks,
    "flags": _step_flags,
    "hdr": _single_step("hdr", matchers.match_hdr, anchored=True),
    "audio": _single_step("audio", matchers.match_audio, anchored=True),
    "source": _single_step("source", matchers.match_source, anchored=True),
    "format": _single_step("format", matchers.match_format, anchored=True),
    "resolution": _single_step("resolution", matchers.match_resolution),
    "provider": _step_provider,
    "language": _step_language,
    "year": _single_step("year", matchers.match_year),
    "season_episode": _step_season_episode,
    "group": _step_group,
    "extras": _step_extras,
}


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


def validate_order(order: Iterable[str]) -> tuple[str, ...]:
    """Return ``order`` as a tuple after checking every step exists.

    Raises:
        ParserConfigurationError: If a step name is unknown.
    """
    order = tuple(order)
    unknown = [step for step in order if step not in STEPS]
    if unknown:
        raise create_invalid_matcher_order_error(unknown)
    return order


def run_pipeline(
    name: str,
    kind: ReleaseKind,
    order: Iterable[str] = MATCHER_ORDER,
    *,
    trace: bool = False,
) -> PipelineState:
    """Run the steps in ``order`` over a fresh buffer for ``name``."""
    state = PipelineState(WorkingText(name), kind, trace=trace)
    for step in validate_order(order):
        STEPS[step](state)
    return state


def build_release(state: PipelineState) -> ParsedRelease:
    """Turn a finished pipeline run into a :class:`ParsedRelease`."""
    values = state.values
    titles = resolve_titles(state.working, state.marker)

    marker: EpisodeMarker | None = values.get("episode")
    season = episode = date = None
    episodes: tuple[int, ...] = ()
    if marker is not None:
        season, date, episodes = marker.season, marker.date, marker.episodes
        if len(episodes) > 1:
            episode = EpisodeRange(episodes[0], episodes[-1])
        elif episodes:
            episode = episodes[0]

    return ParsedRelease(
        release=state.working.original,
        type=state.kind,
        title=titles.title,
        title_extra=titles.title_extra,
        episode_title=titles.episode_title,
        year=values.get("year"),
        date=date,
        season=season,
        episode=episode,
        episodes=episodes,
        disc=values.get("disc"),
        flags=tuple(state.flags),
        source=values.get("source", ""),
        format=values.get("format", ""),
        resolution=values.get("resolution", ""),
        audio=values.get("audio", ""),
        hdr=values.get("hdr", ""),
        streaming_provider=values.get("streaming_provider", ""),
        device=values.get("device", ""),
        os=values.get("os", ""),
        version=values.get("version", ""),
        tmdb_id=values.get("tmdb_id"),
        tvdb_id=values.get("tvdb_id"),
        imdb_id=values.get("imdb_id"),
        edition=values.get("edition"),
        language=dict(state.language),
        group=values.get("group", ""),
    )


__all__ = [
    "BLOCK_ORDER",
    "DIRECTORY_ORDER",
    "MATCHER_ORDER",
    "STEPS",
    "PipelineState",
    "build_release",
    "run_pipeline",
    "tail_anchor",
    "validate_order",
]
