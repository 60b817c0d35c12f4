"""Title resolution over the unclaimed remainder of a release name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from sceneparse.core.parser.working_text import FILLER, Claim, WorkingText

_WORD_SEPARATORS = re.compile(r"[._]")
_EMPTY_BRACKETS = re.compile(r"\(\s*\)|\[\s*\]|\{\s*\}")
_WHITESPACE = re.compile(r"\s+")
_LEADING_GAP = re.compile(r"[\s._\-]*")

EDGE_CHARACTERS: Final[str] = " -,;:~|"
_BRACKET_PAIRS: Final[dict[str, str]] = {"(": ")", "[": "]", "{": "}"}
_CLOSING_TO_OPENING: Final[dict[str, str]] = {closing: opening for opening, closing in _BRACKET_PAIRS.items()}


@dataclass(frozen=True)
class TitleParts:
    title: str = ""
    title_extra: str = ""
    episode_title: str = ""


def _clean_once(text: str) -> str:
    text = text.replace(FILLER, " ")
    text = _WORD_SEPARATORS.sub(" ", text)
    text = _EMPTY_BRACKETS.sub(" ", text)
    text = _WHITESPACE.sub(" ", text).strip(EDGE_CHARACTERS)

    if text and text[0] in _BRACKET_PAIRS and _BRACKET_PAIRS[text[0]] not in text[1:]:
        text = text[1:]
    if text and text[-1] in _CLOSING_TO_OPENING and _CLOSING_TO_OPENING[text[-1]] not in text[:-1]:
        text = text[:-1]
    return text


def clean_title(text: str) -> str:
    """Normalize a leftover fragment into display form.

    Masked characters, dots and underscores become spaces, empty bracket
    pairs disappear, whitespace collapses and edge separators or unbalanced
    edge brackets are trimmed. The cleanup repeats until nothing changes, so
    ``clean_title(clean_title(x)) == clean_title(x)``.

    Example:
        >>> clean_title("..The.Day_(  )- ")
        'The Day'
    """
    while True:
        cleaned = _clean_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def _leading_offset(working: WorkingText) -> int:
    """Index after any claims (and separators between them) at the start."""
    text = working.text
    offset = 0
    while True:
        gap = _LEADING_GAP.match(text, offset)
        position = gap.end() if gap else offset
        claim = working.claim_at(position)
        if claim is None:
            return offset if position >= len(text) else position
        offset = claim.end


def resolve_titles(working: WorkingText, marker: Claim | None = None) -> TitleParts:
    """Split the unclaimed text into title, episode title and extras.

    With an episode marker the title is the text before it and the episode
    title is the text between it and the next claim. Without one the title
    runs up to the first claim. Whatever is left becomes ``title_extra``;
    when the title comes out empty the first leftover fragment replaces it.
    """
    text = working.text
    length = len(working)
    leading = _leading_offset(working)
    regions: list[tuple[int, int]] = []
    title = episode_title = ""

    if marker is not None and marker.start >= leading:
        title = clean_title(text[leading : marker.start])
        episode_end = working.first_claim_start(marker.end)
        episode_end = length if episode_end is None else episode_end
        episode_title = clean_title(text[marker.end : episode_end])
        regions = [(leading, marker.start), (marker.end, episode_end)]
    else:
        title_end = working.first_claim_start(leading)
        title_end = length if title_end is None else title_end
        title = clean_title(text[leading:title_end])
        regions = [(leading, title_end)]

    regions = [(start, end) for start, end in regions if start < end]
    extras = []
    for start, end in working.free_runs():
        if any(start < region_end and region_start < end for region_start, region_end in regions):
            continue
        fragment = clean_title(text[start:end])
        if fragment:
            extras.append(fragment)

    if not title and extras:
        title = extras.pop(0)
    return TitleParts(title=title, title_extra=" ".join(extras), episode_title=episode_title)


__all__ = ["EDGE_CHARACTERS", "TitleParts", "clean_title", "resolve_titles"]
