"""Tests for score bands."""

import pytest

from readiness.scoring.ranges import SCORE_RANGES, ScoreRange, get_score_range


class TestGetScoreRange:
    """Tests for get_score_range function."""

    @pytest.mark.parametrize(
        "total,label",
        [
            (100, "AI Search Elite"),
            (90, "AI Search Elite"),
            (89.5, "AI Ready"),
            (70, "AI Ready"),
            (65, "Needs Optimization"),
            (30, "Poor AI Visibility"),
            (29, "AI Invisible"),
            (0, "AI Invisible"),
        ],
    )
    def test_bands(self, total: float, label: str) -> None:
        """Totals map to the band they fall in."""
        assert get_score_range(total).label == label

    def test_negative(self) -> None:
        """Out-of-scale totals land in the lowest band."""
        assert get_score_range(-5) == SCORE_RANGES[-1]

    def test_bands_cover_scale(self) -> None:
        """Bands are contiguous from 0 to 100."""
        bounds = sorted((r.min, r.max) for r in SCORE_RANGES)

        assert bounds[0][0] == 0
        assert bounds[-1][1] == 100
        for (_, upper), (lower, _) in zip(bounds, bounds[1:]):
            assert lower == upper + 1


class TestScoreRange:
    """Tests for ScoreRange."""

    def test_contains(self) -> None:
        """Bounds are inclusive."""
        band = ScoreRange(50, 69, "Needs Optimization", "")

        assert band.contains(50)
        assert band.contains(69)
        assert not band.contains(70)

    def test_to_dict(self) -> None:
        """Bands serialize to plain dicts."""
        assert get_score_range(95).to_dict()["label"] == "AI Search Elite"
