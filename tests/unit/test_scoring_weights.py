"""Tests for dynamic scoring weight profiles."""

import pytest

from readiness.exceptions import WeightProfileError
from readiness.models import PageType, Pillar
from readiness.scoring.pillars import PILLAR_BUDGETS
from readiness.scoring.weights import (
    DYNAMIC_SCORING_WEIGHTS,
    get_weight_profile,
    profile_name_for,
    validate_weight_profile,
)

VALID = {"RETRIEVAL": 20, "FACT_DENSITY": 20, "STRUCTURE": 20, "TRUST": 20, "RECENCY": 20}


class TestProfiles:
    """Tests for the built-in profile table."""

    @pytest.mark.parametrize("name", sorted(DYNAMIC_SCORING_WEIGHTS))
    def test_profiles_are_valid(self, name: str) -> None:
        """Every built-in profile covers all pillars and sums to 100."""
        validate_weight_profile(name, DYNAMIC_SCORING_WEIGHTS[name])

    def test_default_matches_budgets(self) -> None:
        """The default profile is the fixed budgets."""
        assert DYNAMIC_SCORING_WEIGHTS["default"] == PILLAR_BUDGETS


class TestProfileNameFor:
    """Tests for profile_name_for function."""

    def test_article_and_blog_share_a_profile(self) -> None:
        """Articles are weighted like blog posts."""
        assert profile_name_for(PageType.ARTICLE) == "blog"
        assert profile_name_for(PageType.BLOG) == "blog"

    def test_general(self) -> None:
        """General pages use the default profile."""
        assert profile_name_for(PageType.GENERAL) == "default"

    def test_unknown_string(self) -> None:
        """Unrecognized page types use the default profile."""
        assert profile_name_for("landing") == "default"


class TestValidateWeightProfile:
    """Tests for validate_weight_profile function."""

    def test_valid(self) -> None:
        """Valid profiles are returned keyed by pillar."""
        assert validate_weight_profile("flat", VALID)[Pillar.TRUST] == 20

    def test_missing_pillar(self) -> None:
        """Every pillar must have a weight."""
        weights = {k: v for k, v in VALID.items() if k != "RECENCY"}

        with pytest.raises(WeightProfileError, match="missing pillars: RECENCY"):
            validate_weight_profile("partial", weights)

    def test_unknown_pillar(self) -> None:
        """Unknown pillar names are rejected."""
        with pytest.raises(WeightProfileError, match="Unknown pillar"):
            validate_weight_profile("odd", {**VALID, "SPEED": 0})

    def test_negative_weight(self) -> None:
        """Negative weights are rejected."""
        weights = {**VALID, "TRUST": -20, "RECENCY": 60}

        with pytest.raises(WeightProfileError, match="negative"):
            validate_weight_profile("neg", weights)

    def test_bad_total(self) -> None:
        """Profiles must sum to 100."""
        with pytest.raises(WeightProfileError) as exc_info:
            validate_weight_profile("heavy", {**VALID, "TRUST": 30})

        assert exc_info.value.details == {"profile": "heavy", "total": 110}
        assert exc_info.value.code == "invalid_weight_profile"


class TestGetWeightProfile:
    """Tests for get_weight_profile function."""

    def test_homepage(self) -> None:
        """Homepages favor retrieval and structure."""
        weights = get_weight_profile(PageType.HOMEPAGE)

        assert weights[Pillar.RETRIEVAL] == 35
        assert weights[Pillar.RECENCY] == 5

    def test_search(self) -> None:
        """Search pages weight retrieval at 40."""
        assert get_weight_profile(PageType.SEARCH)[Pillar.RETRIEVAL] == 40

    def test_invalid_profile_falls_back(self) -> None:
        """A broken profile is replaced by the default one."""
        profiles = {"homepage": {**VALID, "TRUST": 30}, "default": VALID}

        assert get_weight_profile(PageType.HOMEPAGE, profiles) == {p: 20 for p in Pillar}

    def test_missing_profiles_fall_back_to_budgets(self) -> None:
        """An empty table still yields usable weights."""
        assert get_weight_profile(PageType.PRODUCT, {}) == PILLAR_BUDGETS
