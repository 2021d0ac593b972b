"""Pillar budgets and per-metric maximum scores.

Versioned reference data: changing any value here changes every score the
analyzer reports.
"""

import math

import structlog

from readiness.models import Pillar

logger = structlog.get_logger(__name__)

# Fixed point budget per pillar (sums to 100)
PILLAR_BUDGETS: dict[Pillar, int] = {
    Pillar.RETRIEVAL: 30,
    Pillar.FACT_DENSITY: 25,
    Pillar.STRUCTURE: 20,
    Pillar.TRUST: 15,
    Pillar.RECENCY: 10,
}

# Canonical order for breakdowns
PILLAR_ORDER: tuple[Pillar, ...] = tuple(PILLAR_BUDGETS)

DEFAULT_METRIC_MAX = 5

# A check counts as passed once its score reaches this value
METRIC_MAX_SCORES: dict[str, int] = {
    # RETRIEVAL
    "ttfb": 5,
    "paywall": 5,
    "mainContent": 5,
    "htmlSize": 5,
    "llmsTxtFile": 5,
    # FACT_DENSITY
    "uniqueStats": 5,
    "dataMarkup": 5,
    "citations": 5,
    "deduplication": 5,
    "directAnswers": 5,
    # STRUCTURE
    "headingFrequency": 5,
    "headingDepth": 5,
    "structuredData": 5,
    "rssFeed": 5,
    "listicleFormat": 10,
    "comparisonTables": 5,
    "semanticUrl": 5,
    # TRUST
    "authorBio": 5,
    "napConsistency": 5,
    "license": 5,
    # RECENCY
    "lastModified": 5,
    "stableCanonical": 5,
}

# Pillar each known metric is reported under
METRIC_PILLARS: dict[str, Pillar] = {
    "ttfb": Pillar.RETRIEVAL,
    "paywall": Pillar.RETRIEVAL,
    "mainContent": Pillar.RETRIEVAL,
    "htmlSize": Pillar.RETRIEVAL,
    "llmsTxtFile": Pillar.RETRIEVAL,
    "uniqueStats": Pillar.FACT_DENSITY,
    "dataMarkup": Pillar.FACT_DENSITY,
    "citations": Pillar.FACT_DENSITY,
    "deduplication": Pillar.FACT_DENSITY,
    "directAnswers": Pillar.FACT_DENSITY,
    "headingFrequency": Pillar.STRUCTURE,
    "headingDepth": Pillar.STRUCTURE,
    "structuredData": Pillar.STRUCTURE,
    "rssFeed": Pillar.STRUCTURE,
    "listicleFormat": Pillar.STRUCTURE,
    "comparisonTables": Pillar.STRUCTURE,
    "semanticUrl": Pillar.STRUCTURE,
    "authorBio": Pillar.TRUST,
    "napConsistency": Pillar.TRUST,
    "license": Pillar.TRUST,
    "lastModified": Pillar.RECENCY,
    "stableCanonical": Pillar.RECENCY,
}


def max_score_for_metric(metric: str) -> int:
    """Maximum score for a check, 5 for unknown metrics."""
    return METRIC_MAX_SCORES.get(metric, DEFAULT_METRIC_MAX)


def pillar_budget(pillar: Pillar | str) -> int:
    return PILLAR_BUDGETS[Pillar(pillar)]


def coerce_check_score(value: object, metric: str | None = None) -> float:
    """Numeric value of a check score; non-numeric values count as 0."""
    if isinstance(value, bool) or not isinstance(value, int | float) or math.isnan(value):
        logger.debug("non_numeric_check_score", metric=metric, value_type=type(value).__name__)
        return 0.0
    return float(value)
