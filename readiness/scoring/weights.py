"""Page-type weight profiles for dynamic scoring.

A profile replaces the pillar budgets when a page is reweighted. Every
profile must cover all five pillars and sum to 100 so the reweighted total
stays on the 0-100 scale; profiles that do not are rejected and the default
profile is used instead.
"""

from collections.abc import Mapping

import structlog

from readiness.exceptions import WeightProfileError
from readiness.models import PageType, Pillar
from readiness.scoring.pillars import PILLAR_BUDGETS

logger = structlog.get_logger(__name__)

DEFAULT_PROFILE = "default"
PROFILE_TOTAL = 100

DYNAMIC_SCORING_WEIGHTS: dict[str, dict[Pillar, int]] = {
    # Site identity and crawlability matter most on the front door
    "homepage": {
        Pillar.RETRIEVAL: 35,
        Pillar.FACT_DENSITY: 15,
        Pillar.STRUCTURE: 25,
        Pillar.TRUST: 20,
        Pillar.RECENCY: 5,
    },
    "blog": {
        Pillar.RETRIEVAL: 25,
        Pillar.FACT_DENSITY: 35,
        Pillar.STRUCTURE: 20,
        Pillar.TRUST: 10,
        Pillar.RECENCY: 10,
    },
    "product": {
        Pillar.RETRIEVAL: 25,
        Pillar.FACT_DENSITY: 25,
        Pillar.STRUCTURE: 30,
        Pillar.TRUST: 15,
        Pillar.RECENCY: 5,
    },
    "category": {
        Pillar.RETRIEVAL: 35,
        Pillar.FACT_DENSITY: 10,
        Pillar.STRUCTURE: 35,
        Pillar.TRUST: 10,
        Pillar.RECENCY: 10,
    },
    "documentation": {
        Pillar.RETRIEVAL: 25,
        Pillar.FACT_DENSITY: 20,
        Pillar.STRUCTURE: 35,
        Pillar.TRUST: 5,
        Pillar.RECENCY: 15,
    },
    "about": {
        Pillar.RETRIEVAL: 20,
        Pillar.FACT_DENSITY: 20,
        Pillar.STRUCTURE: 20,
        Pillar.TRUST: 35,
        Pillar.RECENCY: 5,
    },
    "contact": {
        Pillar.RETRIEVAL: 30,
        Pillar.FACT_DENSITY: 10,
        Pillar.STRUCTURE: 25,
        Pillar.TRUST: 30,
        Pillar.RECENCY: 5,
    },
    "search": {
        Pillar.RETRIEVAL: 40,
        Pillar.FACT_DENSITY: 10,
        Pillar.STRUCTURE: 30,
        Pillar.TRUST: 10,
        Pillar.RECENCY: 10,
    },
    DEFAULT_PROFILE: dict(PILLAR_BUDGETS),
}

PAGE_TYPE_WEIGHT_MAP: dict[PageType, str] = {
    PageType.HOMEPAGE: "homepage",
    PageType.ARTICLE: "blog",
    PageType.BLOG: "blog",
    PageType.PRODUCT: "product",
    PageType.CATEGORY: "category",
    PageType.DOCUMENTATION: "documentation",
    PageType.ABOUT: "about",
    PageType.CONTACT: "contact",
    PageType.SEARCH: "search",
    PageType.GENERAL: DEFAULT_PROFILE,
}


def validate_weight_profile(name: str, weights: Mapping[str, float]) -> dict[Pillar, float]:
    """
    Check that a profile covers every pillar and sums to 100.

    Raises:
        WeightProfileError: if a pillar is missing, unknown or negative, or the
            weights do not sum to 100
    """
    try:
        normalized = {Pillar(pillar): weight for pillar, weight in weights.items()}
    except ValueError as e:
        raise WeightProfileError(f"Unknown pillar in profile '{name}'", profile=name) from e

    missing = [p.value for p in Pillar if p not in normalized]
    if missing:
        raise WeightProfileError(
            f"Profile '{name}' is missing pillars: {', '.join(missing)}", profile=name
        )
    if any(weight < 0 for weight in normalized.values()):
        raise WeightProfileError(f"Profile '{name}' has negative weights", profile=name)

    total = sum(normalized.values())
    if abs(total - PROFILE_TOTAL) > 0.01:
        raise WeightProfileError(
            f"Profile '{name}' sums to {total}, expected {PROFILE_TOTAL}",
            profile=name,
            total=total,
        )
    return normalized


def profile_name_for(page_type: PageType | str) -> str:
    try:
        return PAGE_TYPE_WEIGHT_MAP.get(PageType(page_type), DEFAULT_PROFILE)
    except ValueError:
        return DEFAULT_PROFILE


def get_weight_profile(
    page_type: PageType | str,
    profiles: Mapping[str, Mapping[str, float]] | None = None,
) -> dict[Pillar, float]:
    """
    Weights for a page type, falling back to the default profile.

    Args:
        page_type: Page type to look up
        profiles: Profile table, DYNAMIC_SCORING_WEIGHTS if omitted

    Returns:
        Validated pillar -> weight mapping
    """
    profiles = profiles if profiles is not None else DYNAMIC_SCORING_WEIGHTS
    name = profile_name_for(page_type)

    for candidate in dict.fromkeys((name, DEFAULT_PROFILE)):
        weights = profiles.get(candidate)
        if weights is None:
            continue
        try:
            return validate_weight_profile(candidate, weights)
        except WeightProfileError as e:
            logger.warning(
                "invalid_weight_profile",
                profile=candidate,
                error=e.message,
                total=e.details.get("total"),
            )

    return dict(PILLAR_BUDGETS)
