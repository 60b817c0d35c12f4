"""Working-text buffer for the extraction pipeline.

The buffer never slices or shortens the input. Claimed characters are masked
with :data:`FILLER` in :attr:`WorkingText.text`, so every index a matcher
reports is also an index into the original string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from sceneparse.shared.errors import create_overlapping_claim_error

# Neither whitespace, a word character, nor a separator: regexes over the
# masked text can never match across it.
FILLER: Final[str] = "\x00"


@dataclass(frozen=True)
class Claim:
    """A span of the input attributed to one field family."""

    field: str
    start: int
    end: int
    value: Any = None

    def __len__(self) -> int:
        return self.end - self.start


class WorkingText:
    """The input string plus a mask of already-claimed characters."""

    def __init__(self, original: str) -> None:
        self.original = original
        self._chars = list(original.replace(FILLER, " "))
        self._mask = bytearray(len(original))
        self._claims: list[Claim] = []
        self._text = "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        """The input with every claimed character replaced by FILLER."""
        return self._text

    @property
    def claims(self) -> tuple[Claim, ...]:
        """All claims ordered by position."""
        return tuple(sorted(self._claims, key=lambda claim: (claim.start, claim.end)))

    def is_free(self, start: int, end: int) -> bool:
        return 0 <= start < end <= len(self) and not any(self._mask[start:end])

    def is_claimed(self, index: int) -> bool:
        return 0 <= index < len(self) and bool(self._mask[index])

    def claim(self, field: str, start: int, end: int, value: Any = None) -> Claim:
        """Mask ``[start, end)`` and record it.

        Raises:
            OverlappingClaimError: If any character in the span is already
                claimed or the span is empty or out of range.
        """
        if not self.is_free(start, end):
            raise create_overlapping_claim_error(field, start, end, self.original)

        for index in range(start, end):
            self._mask[index] = 1
            self._chars[index] = FILLER
        self._text = "".join(self._chars)

        claim = Claim(field, start, end, value)
        self._claims.append(claim)
        return claim

    def claim_free(self, field: str, start: int, end: int, value: Any = None) -> list[Claim]:
        """Claim every still-free run inside ``[start, end)``."""
        return [self.claim(field, run_start, run_end, value) for run_start, run_end in self.free_runs(start, end)]

    def free_runs(self, start: int = 0, end: int | None = None) -> list[tuple[int, int]]:
        """Maximal unclaimed ``(start, end)`` runs inside the range."""
        if end is None:
            end = len(self)
        runs: list[tuple[int, int]] = []
        run_start: int | None = None
        for index in range(max(start, 0), min(end, len(self))):
            if self._mask[index]:
                if run_start is not None:
                    runs.append((run_start, index))
                    run_start = None
            elif run_start is None:
                run_start = index
        if run_start is not None:
            runs.append((run_start, min(end, len(self))))
        return runs

    def claim_at(self, index: int) -> Claim | None:
        for claim in self._claims:
            if claim.start <= index < claim.end:
                return claim
        return None

    def first_claim_start(self, start: int = 0) -> int | None:
        """Start of the first claim at or after ``start``."""
        starts = [claim.start for claim in self._claims if claim.start >= start]
        return min(starts) if starts else None


__all__ = ["FILLER", "Claim", "WorkingText"]
