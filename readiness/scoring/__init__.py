"""Pillar scoring package."""

# Lazy imports - use explicit imports when needed:
# from readiness.scoring.pillars import PILLAR_BUDGETS, max_score_for_metric
# from readiness.scoring.weights import DYNAMIC_SCORING_WEIGHTS, get_weight_profile
# from readiness.scoring.ranges import SCORE_RANGES, get_score_range
# from readiness.scoring.calculator import PillarScorer, ScoringResult, score

__all__ = [
    # Budgets
    "PILLAR_BUDGETS",
    "METRIC_MAX_SCORES",
    "max_score_for_metric",
    # Weight profiles
    "DYNAMIC_SCORING_WEIGHTS",
    "get_weight_profile",
    # Score ranges
    "SCORE_RANGES",
    "get_score_range",
    # Calculator
    "PillarBreakdown",
    "DynamicScoring",
    "ScoringResult",
    "PillarScorer",
    "score",
]
