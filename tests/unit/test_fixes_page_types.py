"""Unit tests for page-type recommendation tuning."""

import pytest

from readiness.fixes.page_types import (
    PAGE_TYPE_RECOMMENDATIONS,
    get_custom_message,
    get_page_type_config,
    get_priority_multiplier,
    should_show_metric,
)
from readiness.models import PageType


class TestPageTypeConfig:
    """Tests for get_page_type_config function."""

    def test_every_page_type_configured(self):
        """Each page type has a config."""
        assert set(PAGE_TYPE_RECOMMENDATIONS) == set(PageType)

    @pytest.mark.parametrize("page_type", [None, "landing"])
    def test_fallback_to_general(self, page_type):
        """Missing or unknown page types use the general config."""
        assert get_page_type_config(page_type) is PAGE_TYPE_RECOMMENDATIONS[PageType.GENERAL]

    def test_string_lookup(self):
        """Page types can be given by value."""
        assert get_page_type_config("homepage").priority[0] == "structuredData"

    def test_to_dict(self):
        """Configs serialize with sorted skip lists."""
        data = PAGE_TYPE_RECOMMENDATIONS[PageType.SEARCH].to_dict()

        assert data["skip_metrics"] == ["authorBio", "listicleFormat"]


class TestGetPriorityMultiplier:
    """Tests for get_priority_multiplier function."""

    @pytest.mark.parametrize(
        "metric,expected",
        [
            ("structuredData", 1.5),
            ("mainContent", 1.3),
            ("uniqueStats", 1.2),
            ("ttfb", 1.1),
            ("authorBio", 1.1),
            ("rssFeed", 1.0),
        ],
    )
    def test_homepage_ranks(self, metric, expected):
        """Multipliers follow the homepage priority list."""
        assert get_priority_multiplier(PageType.HOMEPAGE, metric) == expected

    def test_blog_priority(self):
        """Blog posts put freshness first."""
        assert get_priority_multiplier(PageType.BLOG, "lastModified") == 1.5

    def test_skipped_metric(self):
        """Skipped checks are worth nothing."""
        assert get_priority_multiplier(PageType.SEARCH, "authorBio") == 0.0

    def test_general(self):
        """General pages never boost a check."""
        assert get_priority_multiplier(PageType.GENERAL, "structuredData") == 1.0


class TestCustomMessages:
    """Tests for get_custom_message function."""

    def test_homepage_structured_data(self):
        """Homepages get an Organization schema message."""
        message = get_custom_message(PageType.HOMEPAGE, "structuredData")

        assert message.startswith("Organization schema is essential for homepages")

    def test_missing(self):
        """Checks without a message return None."""
        assert get_custom_message(PageType.HOMEPAGE, "rssFeed") is None
        assert get_custom_message(None, "structuredData") is None


class TestShouldShowMetric:
    """Tests for should_show_metric function."""

    @pytest.mark.parametrize("metric", ["listicleFormat", "authorBio"])
    def test_search_skips(self, metric):
        """Search pages hide listicle and author checks."""
        assert not should_show_metric(PageType.SEARCH, metric)

    def test_other_pages_show_everything(self):
        """Only search pages skip checks."""
        assert should_show_metric(PageType.BLOG, "listicleFormat")
        assert should_show_metric(PageType.SEARCH, "ttfb")
