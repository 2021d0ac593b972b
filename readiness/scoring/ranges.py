"""Score bands used to label a total score."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreRange:
    """A labelled band of total scores (inclusive bounds)."""

    min: int
    max: int
    label: str
    description: str

    def contains(self, total: float) -> bool:
        return self.min <= total <= self.max

    def to_dict(self) -> dict:
        return {
            "min": self.min,
            "max": self.max,
            "label": self.label,
            "description": self.description,
        }


# Highest band first
SCORE_RANGES: tuple[ScoreRange, ...] = (
    ScoreRange(90, 100, "AI Search Elite", "Content is fully optimized for AI platforms"),
    ScoreRange(70, 89, "AI Ready", "Strong performance with minor improvements needed"),
    ScoreRange(50, 69, "Needs Optimization", "Significant room for AI search improvements"),
    ScoreRange(30, 49, "Poor AI Visibility", "Major changes needed for AI platform visibility"),
    ScoreRange(0, 29, "AI Invisible", "Content is not optimized for AI search"),
)


def get_score_range(total: float) -> ScoreRange:
    """Band for a total score; fractional totals round down into a band."""
    for score_range in SCORE_RANGES:
        if total >= score_range.min:
            return score_range
    return SCORE_RANGES[-1]
