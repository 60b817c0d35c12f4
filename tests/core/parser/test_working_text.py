"""Tests for the WorkingText claim buffer."""

from __future__ import annotations

import pytest

from sceneparse.core.parser.working_text import FILLER, WorkingText
from sceneparse.shared.errors import ErrorCode, OverlappingClaimError


def test_claim_masks_characters_in_place():
    """Test that claiming keeps every index stable."""
    working = WorkingText("Show.720p.x264")
    working.claim("resolution", 5, 9, "720p")

    assert working.text == "Show." + FILLER * 4 + ".x264"
    assert len(working.text) == len(working.original)
    assert working.original == "Show.720p.x264"


def test_filler_in_input_is_neutralized():
    working = WorkingText("a\x00b")
    assert working.text == "a b"
    assert working.is_free(0, 3)


def test_overlapping_claim_raises():
    """Test that claims are disjoint."""
    working = WorkingText("Show.720p.x264")
    working.claim("resolution", 5, 9)

    with pytest.raises(OverlappingClaimError) as exc_info:
        working.claim("format", 8, 14)

    assert exc_info.value.code == ErrorCode.OVERLAPPING_CLAIM
    assert exc_info.value.context.additional_data == {"field": "format", "start": 8, "end": 14}


@pytest.mark.parametrize(("start", "end"), [(3, 3), (-1, 2), (10, 40)])
def test_empty_or_out_of_range_claim_raises(start, end):
    working = WorkingText("Show.720p.x264")
    with pytest.raises(OverlappingClaimError):
        working.claim("title", start, end)


def test_free_runs_and_claim_free():
    working = WorkingText("[AB CD]")
    working.claim("a", 1, 3)
    working.claim("b", 4, 6)

    assert working.free_runs() == [(0, 1), (3, 4), (6, 7)]
    assert working.free_runs(2, 5) == [(3, 4)]

    claims = working.claim_free("block", 0, 7)
    assert [(claim.start, claim.end) for claim in claims] == [(0, 1), (3, 4), (6, 7)]
    assert working.free_runs() == []


def test_claims_are_sorted_by_position():
    working = WorkingText("Show.S01E02.720p")
    working.claim("resolution", 12, 16)
    working.claim("episode", 5, 11)

    assert [claim.field for claim in working.claims] == ["episode", "resolution"]
    assert len(working.claims[0]) == 6


def test_claim_lookup():
    working = WorkingText("Show.S01E02.720p")
    working.claim("resolution", 12, 16, "720p")

    claim = working.claim_at(13)
    assert claim is not None
    assert claim.value == "720p"
    assert working.claim_at(4) is None
    assert working.is_claimed(12)
    assert not working.is_claimed(16)
    assert working.first_claim_start() == 12
    assert working.first_claim_start(13) is None
