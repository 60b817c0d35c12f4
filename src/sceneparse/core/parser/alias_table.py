"""Alias lookup over the lexical tables.

An :class:`AliasTable` compiles a ``canonical -> aliases`` mapping into two
alternation regexes (case-insensitive and case-sensitive aliases) ordered
longest alias first, so the first alternative that matches at a position is
also the longest one.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from re import Pattern
from typing import Callable, Final

# Word separators that release names use interchangeably.
SEPARATOR_CLASS: Final[str] = r"[ ._\-]"
BOUNDARY_BEFORE: Final[str] = r"(?<![A-Za-z0-9])"
BOUNDARY_AFTER: Final[str] = r"(?![A-Za-z0-9])"

_SEPARATOR_RUN = re.compile(r"[ ._\-]+")
_KEY_NOISE = re.compile(r"[ ._\-']+")


def alias_key(text: str) -> str:
    """Comparison key: separators and apostrophes removed, case folded."""
    return _KEY_NOISE.sub("", text).casefold()


def alias_regex(alias: str) -> str:
    """Regex source for one alias with optional, interchangeable separators.

    Examples:
        >>> alias_regex("WEB-DL")
        'WEB[ ._\\\\-]?DL'
    """
    words = [word for word in _SEPARATOR_RUN.split(alias) if word]
    escaped = [re.escape(word).replace("'", "'?") for word in words]
    return f"{SEPARATOR_CLASS}?".join(escaped)


@dataclass(frozen=True)
class AliasHit:
    """One alias occurrence inside a text."""

    start: int
    end: int
    canonical: str
    surface: str


class AliasTable:
    """Immutable alias -> canonical lookup with leftmost-longest search."""

    def __init__(
        self,
        table: Mapping[str, Iterable[str]],
        case_sensitive: Iterable[str] | Callable[[str], bool] = (),
    ) -> None:
        if callable(case_sensitive):
            is_case_sensitive = case_sensitive
        else:
            sensitive = frozenset(case_sensitive)
            is_case_sensitive = sensitive.__contains__

        self._ci_exact: dict[str, str] = {}
        self._ci_keys: dict[str, str] = {}
        self._cs_exact: dict[str, str] = {}
        self._cs_keys: dict[str, str] = {}
        ci_aliases: list[str] = []
        cs_aliases: list[str] = []

        for canonical, aliases in table.items():
            for alias in aliases:
                if is_case_sensitive(alias):
                    self._cs_exact.setdefault(alias, canonical)
                    self._cs_keys.setdefault(_KEY_NOISE.sub("", alias), canonical)
                    cs_aliases.append(alias)
                else:
                    self._ci_exact.setdefault(alias.casefold(), canonical)
                    self._ci_keys.setdefault(alias_key(alias), canonical)
                    ci_aliases.append(alias)

        self._ci_alternation = _alternation(ci_aliases)
        self._cs_alternation = _alternation(cs_aliases)
        self._ci_pattern: Pattern[str] | None = (
            re.compile(f"{BOUNDARY_BEFORE}(?:{self._ci_alternation}){BOUNDARY_AFTER}", re.IGNORECASE)
            if self._ci_alternation
            else None
        )
        self._cs_pattern: Pattern[str] | None = (
            re.compile(f"{BOUNDARY_BEFORE}(?:{self._cs_alternation}){BOUNDARY_AFTER}")
            if self._cs_alternation
            else None
        )
        self._size = len(ci_aliases) + len(cs_aliases)

    def __len__(self) -> int:
        return self._size

    def alternation(self, *, case_sensitive: bool) -> str | None:
        """Unanchored alternation source, for embedding in larger grammars."""
        return self._cs_alternation if case_sensitive else self._ci_alternation

    def canonical(self, surface: str, *, case_sensitive: bool = False) -> str | None:
        """Canonical value for a matched surface form, or None."""
        if case_sensitive:
            return self._cs_exact.get(surface) or self._cs_keys.get(_KEY_NOISE.sub("", surface))
        return self._ci_exact.get(surface.casefold()) or self._ci_keys.get(alias_key(surface))

    def search(self, text: str, pos: int = 0, endpos: int | None = None) -> AliasHit | None:
        """Leftmost, then longest, alias occurrence in ``text[pos:endpos]``."""
        if endpos is None:
            endpos = len(text)
        best: AliasHit | None = None
        for pattern, case_sensitive in ((self._ci_pattern, False), (self._cs_pattern, True)):
            if pattern is None:
                continue
            match = pattern.search(text, pos, endpos)
            if match is None:
                continue
            surface = match.group(0)
            canonical = self.canonical(surface, case_sensitive=case_sensitive)
            if canonical is None:
                continue
            hit = AliasHit(match.start(), match.end(), canonical, surface)
            if best is None or (hit.start, -hit.end) < (best.start, -best.end):
                best = hit
        return best

    def finditer(self, text: str, pos: int = 0, endpos: int | None = None) -> Iterator[AliasHit]:
        """Every non-overlapping occurrence, left to right."""
        while True:
            hit = self.search(text, pos, endpos)
            if hit is None:
                return
            yield hit
            pos = hit.end


def _alternation(aliases: list[str]) -> str:
    ordered = sorted(set(aliases), key=lambda alias: (-len(alias), alias))
    return "|".join(alias_regex(alias) for alias in ordered)


__all__ = [
    "BOUNDARY_AFTER",
    "BOUNDARY_BEFORE",
    "SEPARATOR_CLASS",
    "AliasHit",
    "AliasTable",
    "alias_key",
    "alias_regex",
]
