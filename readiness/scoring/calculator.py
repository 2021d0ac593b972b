"""Pillar score calculator with optional page-type reweighting.

Sums check scores into five pillar budgets for a 0-100 total. When the page
type is known, each pillar's share of its budget is carried over to the
page type's weight profile, so a documentation page is judged mostly on
structure and a homepage mostly on retrievability.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

import structlog

from readiness.config import get_settings
from readiness.fixes.artifacts import AuditArtifacts
from readiness.fixes.generator import ResolvedRecommendation, generate_recommendations
from readiness.models import ExtractedContent, PageType, Pillar, PillarResults
from readiness.scoring.pillars import PILLAR_BUDGETS, PILLAR_ORDER, coerce_check_score
from readiness.scoring.ranges import ScoreRange, get_score_range
from readiness.scoring.weights import get_weight_profile, profile_name_for

logger = structlog.get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return math.floor(value + 0.5)


@dataclass
class PillarBreakdown:
    """Points earned by one pillar against its maximum."""

    pillar: Pillar
    earned: float
    max: float
    checks: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "pillar": self.pillar.value,
            "earned": round(self.earned, 2),
            "max": self.max,
            "checks": dict(self.checks),
        }


@dataclass
class DynamicScoring:
    """Record of a page-type reweighting, raw and weighted."""

    page_type: PageType
    applied_weights: str  # Profile name
    weights: dict[Pillar, float]
    raw_scores: dict[Pillar, float]
    weighted_scores: dict[Pillar, float]

    def to_dict(self) -> dict:
        return {
            "page_type": self.page_type.value,
            "applied_weights": self.applied_weights,
            "weights": {p.value: w for p, w in self.weights.items()},
            "raw_scores": {p.value: round(s, 2) for p, s in self.raw_scores.items()},
            "weighted_scores": {p.value: s for p, s in self.weighted_scores.items()},
        }


@dataclass
class ScoringResult:
    """Complete score for one page."""

    total: float
    breakdown: list[PillarBreakdown]
    pillar_scores: dict[Pillar, float]
    recommendations: list[ResolvedRecommendation] = field(default_factory=list)
    dynamic_scoring: DynamicScoring | None = None

    @property
    def score_range(self) -> ScoreRange:
        return get_score_range(self.total)

    def to_dict(self) -> dict:
        return {
            "total": round(self.total, 2),
            "score_range": self.score_range.to_dict(),
            "breakdown": [b.to_dict() for b in self.breakdown],
            "pillar_scores": {p.value: round(s, 2) for p, s in self.pillar_scores.items()},
            "recommendations": [r.to_dict() for r in self.recommendations],
            "dynamic_scoring": self.dynamic_scoring.to_dict() if self.dynamic_scoring else None,
        }


class PillarScorer:
    """Scores pillar check results, reweighting by page type when enabled."""

    def __init__(self, weight_profiles: Mapping[str, Mapping[str, float]] | None = None):
        self.weight_profiles = weight_profiles

    def score(
        self,
        pillar_results: PillarResults,
        extracted_content: ExtractedContent | None = None,
        enable_dynamic_scoring: bool | None = None,
        artifacts: AuditArtifacts | None = None,
    ) -> ScoringResult:
        """
        Score a page.

        Args:
            pillar_results: pillar -> metric -> score
            extracted_content: Page content; its page type drives reweighting
            enable_dynamic_scoring: Override for settings.dynamic_scoring_enabled
            artifacts: Audit artifacts for recommendation examples

        Returns:
            ScoringResult with breakdown, total and ranked recommendations
        """
        if enable_dynamic_scoring is None:
            enable_dynamic_scoring = get_settings().dynamic_scoring_enabled

        breakdown = self._raw_breakdown(pillar_results)

        dynamic_scoring = None
        if (
            enable_dynamic_scoring
            and extracted_content is not None
            and extracted_content.page_type is not None
        ):
            dynamic_scoring = self._reweight(breakdown, extracted_content.page_type)

        # Recommendations always come from the raw check scores
        recommendations = generate_recommendations(
            pillar_results,
            extracted_content=extracted_content,
            artifacts=artifacts,
        )

        total = sum(b.earned for b in breakdown)
        pillar_scores = {b.pillar: b.earned for b in breakdown}

        logger.debug(
            "page_scored",
            total=total,
            dynamic=dynamic_scoring is not None,
            recommendations=len(recommendations),
        )

        return ScoringResult(
            total=total,
            breakdown=breakdown,
            pillar_scores=pillar_scores,
            recommendations=recommendations,
            dynamic_scoring=dynamic_scoring,
        )

    def _raw_breakdown(self, pillar_results: PillarResults) -> list[PillarBreakdown]:
        known = {p.value for p in Pillar}
        for name in pillar_results:
            if name not in known:
                logger.warning("unknown_pillar_ignored", pillar=name)

        breakdown: list[PillarBreakdown] = []
        for pillar in PILLAR_ORDER:
            checks = pillar_results.get(pillar.value) or {}
            if not isinstance(checks, Mapping):
                logger.warning("malformed_pillar_checks", pillar=pillar.value)
                checks = {}

            scores = {
                metric: coerce_check_score(value, metric=metric)
                for metric, value in checks.items()
            }
            budget = PILLAR_BUDGETS[pillar]
            earned = min(max(sum(scores.values()), 0.0), float(budget))
            breakdown.append(
                PillarBreakdown(pillar=pillar, earned=earned, max=budget, checks=scores)
            )
        return breakdown

    def _reweight(self, breakdown: list[PillarBreakdown], page_type: PageType) -> DynamicScoring:
        """Carry each pillar's share of its budget over to the page-type weights."""
        weights = get_weight_profile(page_type, self.weight_profiles)
        raw_scores = {b.pillar: b.earned for b in breakdown}
        weighted_scores: dict[Pillar, float] = {}

        for entry in breakdown:
            weight = weights[entry.pillar]
            achieved = entry.earned / entry.max if entry.max else 0.0
            entry.earned = min(round_half_up(achieved * weight), weight)
            entry.max = weight
            weighted_scores[entry.pillar] = entry.earned

        logger.debug(
            "dynamic_scoring_applied",
            page_type=str(page_type),
            raw_total=sum(raw_scores.values()),
            weighted_total=sum(weighted_scores.values()),
        )

        return DynamicScoring(
            page_type=PageType(page_type),
            applied_weights=profile_name_for(page_type),
            weights=weights,
            raw_scores=raw_scores,
            weighted_scores=weighted_scores,
        )


def score(
    pillar_results: PillarResults,
    extracted_content: ExtractedContent | None = None,
    enable_dynamic_scoring: bool | None = None,
    artifacts: AuditArtifacts | None = None,
) -> ScoringResult:
    """
    Score a page from its pillar check results.

    Args:
        pillar_results: pillar -> metric -> score
        extracted_content: Page content for reweighting and personalization
        enable_dynamic_scoring: Override for settings.dynamic_scoring_enabled
        artifacts: Audit artifacts for recommendation examples

    Returns:
        ScoringResult
    """
    return PillarScorer().score(
        pillar_results,
        extracted_content=extracted_content,
        enable_dynamic_scoring=enable_dynamic_scoring,
        artifacts=artifacts,
    )
