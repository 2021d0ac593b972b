"""Pytest configuration and fixtures."""

import os
from collections.abc import Iterator

import pytest
import structlog

# Set test environment before any analyzer code reads settings
os.environ["READINESS_ENV"] = "test"
os.environ["READINESS_DYNAMIC_SCORING_ENABLED"] = "true"


@pytest.fixture(autouse=True, scope="session")
def quiet_logging() -> None:
    """Keep log lines out of captured stdout."""
    structlog.configure(
        processors=[structlog.processors.KeyValueRenderer()],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Reload settings for every test so env overrides take effect."""
    from readiness.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def perfect_results() -> dict[str, dict[str, float]]:
    """Every check passing, summing exactly to each pillar budget."""
    return {
        "RETRIEVAL": {"ttfb": 10, "paywall": 5, "mainContent": 5, "htmlSize": 10},
        "FACT_DENSITY": {"uniqueStats": 10, "dataMarkup": 5, "citations": 5, "deduplication": 5},
        "STRUCTURE": {"headingFrequency": 5, "headingDepth": 5, "structuredData": 5, "rssFeed": 5},
        "TRUST": {"authorBio": 5, "napConsistency": 5, "license": 5},
        "RECENCY": {"lastModified": 5, "stableCanonical": 5},
    }


@pytest.fixture
def zero_results() -> dict[str, dict[str, float]]:
    """Every templated check failing."""
    return {
        "RETRIEVAL": {"ttfb": 0, "paywall": 0, "mainContent": 0, "htmlSize": 0, "llmsTxtFile": 0},
        "FACT_DENSITY": {
            "uniqueStats": 0,
            "dataMarkup": 0,
            "citations": 0,
            "deduplication": 0,
            "directAnswers": 0,
        },
        "STRUCTURE": {
            "headingFrequency": 0,
            "headingDepth": 0,
            "structuredData": 0,
            "rssFeed": 0,
            "listicleFormat": 0,
            "comparisonTables": 0,
            "semanticUrl": 0,
        },
        "TRUST": {"authorBio": 0, "napConsistency": 0, "license": 0},
        "RECENCY": {"lastModified": 0, "stableCanonical": 0},
    }


@pytest.fixture
def mixed_results() -> dict[str, dict[str, float]]:
    """Pillar scores of 25, 20, 10, 5 and 5."""
    return {
        "RETRIEVAL": {"ttfb": 10, "paywall": 5, "mainContent": 5, "htmlSize": 5},
        "FACT_DENSITY": {"uniqueStats": 10, "dataMarkup": 5, "citations": 5, "deduplication": 0},
        "STRUCTURE": {"headingFrequency": 5, "headingDepth": 5, "structuredData": 0, "rssFeed": 0},
        "TRUST": {"authorBio": 5, "napConsistency": 0, "license": 0},
        "RECENCY": {"lastModified": 5, "stableCanonical": 0},
    }
