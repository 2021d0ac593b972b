"""Unit tests for the recommendation generator."""

from unittest.mock import patch

from readiness.exceptions import PersonalizationError
from readiness.fixes.artifacts import AuditArtifacts
from readiness.fixes.generator import (
    RecommendationGenerator,
    ResolvedRecommendation,
    generate_recommendations,
)
from readiness.fixes.templates import REC_TEMPLATES
from readiness.models import BusinessType, PageType
from tests.fixtures import make_content


class TestGenerateWithoutContent:
    """Recommendations from check scores alone."""

    def test_all_failing(self, zero_results):
        """Every failed check with a template is recommended."""
        recommendations = generate_recommendations(zero_results)

        assert len(recommendations) == len(REC_TEMPLATES)

    def test_sorted_by_gain_then_declaration(self, zero_results):
        """Ties keep the order checks were reported in."""
        recommendations = generate_recommendations(zero_results)

        assert [r.metric for r in recommendations[:4]] == [
            "ttfb",
            "htmlSize",
            "uniqueStats",
            "listicleFormat",
        ]
        gains = [r.gain for r in recommendations]
        assert gains == sorted(gains, reverse=True)

    def test_general_page_has_no_boost(self, zero_results):
        """Without content gains equal the template gains."""
        for rec in generate_recommendations(zero_results):
            assert rec.gain == rec.base_gain
            assert rec.why == REC_TEMPLATES[rec.metric].why

    def test_all_passing(self, perfect_results):
        """Passing checks produce nothing."""
        assert generate_recommendations(perfect_results) == []

    def test_listicle_needs_ten(self):
        """Listicle checks pass only at 10 points."""
        recommendations = generate_recommendations({"STRUCTURE": {"listicleFormat": 5}})

        assert [r.metric for r in recommendations] == ["listicleFormat"]

    def test_unknown_metric_skipped(self):
        """Checks without a template are ignored."""
        assert generate_recommendations({"RETRIEVAL": {"mysteryCheck": 0}}) == []

    def test_non_numeric_scores_fail(self):
        """Non-numeric scores count as failures."""
        recommendations = generate_recommendations({"TRUST": {"license": "n/a"}})

        assert recommendations[0].metric == "license"
        assert recommendations[0].pillar == "TRUST"

    def test_malformed_pillar_skipped(self):
        """Pillars without a check mapping are skipped."""
        recommendations = generate_recommendations(
            {"RETRIEVAL": 5, "TRUST": {"license": 0}}  # type: ignore[dict-item]
        )

        assert [r.metric for r in recommendations] == ["license"]


class TestGenerateWithContent:
    """Recommendations shaped by extracted content."""

    def test_homepage_structured_data_first(self, perfect_results):
        """A homepage missing schema gets a boosted, custom recommendation."""
        results = {
            **perfect_results,
            "STRUCTURE": {**perfect_results["STRUCTURE"], "structuredData": 0},
        }
        content = make_content(page_type=PageType.HOMEPAGE)

        recommendations = generate_recommendations(results, extracted_content=content)

        assert len(recommendations) == 1
        first = recommendations[0]
        assert first.gain == 7.5
        assert first.base_gain == 5
        assert "Organization schema is essential for homepages" in first.why
        assert first.why.startswith("Help AI understand your other content better.")

    def test_search_page_skips(self, zero_results):
        """Search pages never get listicle or author recommendations."""
        content = make_content(page_type=PageType.SEARCH)

        recommendations = generate_recommendations(zero_results, extracted_content=content)
        metrics = {r.metric for r in recommendations}

        assert "listicleFormat" not in metrics
        assert "authorBio" not in metrics
        assert "ttfb" in metrics

    def test_blog_priorities(self, zero_results):
        """Blog posts rank freshness and authorship higher."""
        content = make_content(page_type=PageType.BLOG)

        recommendations = generate_recommendations(zero_results, extracted_content=content)
        by_metric = {r.metric: r for r in recommendations}

        assert recommendations[0].metric == "uniqueStats"
        assert by_metric["uniqueStats"].gain == 12.0
        assert by_metric["lastModified"].gain == 7.5
        assert by_metric["authorBio"].gain == 6.5

    def test_personalized_example(self):
        """Examples come from the page."""
        content = make_content(business_type=BusinessType.BLOG)

        recommendations = generate_recommendations(
            {"STRUCTURE": {"listicleFormat": 0}}, extracted_content=content
        )

        assert recommendations[0].example.after == "7 Tomato Care Strategies That Actually Work"

    def test_content_wins_over_artifacts(self):
        """Artifacts are ignored when content is available."""
        content = make_content(business_type=BusinessType.BLOG)
        artifacts = AuditArtifacts(page_title="Watering Guide")

        recommendations = generate_recommendations(
            {"STRUCTURE": {"listicleFormat": 0}}, extracted_content=content, artifacts=artifacts
        )

        assert recommendations[0].example.before == "Tomato Care Basics"

    def test_personalization_failure_falls_back(self):
        """A failed personalization keeps the template text."""
        content = make_content(page_type=PageType.HOMEPAGE)

        with patch(
            "readiness.fixes.generator.ContentAwarePersonalizer.personalize",
            side_effect=PersonalizationError("boom", metric="structuredData"),
        ):
            recommendations = generate_recommendations(
                {"STRUCTURE": {"structuredData": 0}}, extracted_content=content
            )

        rec = recommendations[0]
        assert rec.why.startswith("Organization schema is essential for homepages")
        assert rec.why.endswith(REC_TEMPLATES["structuredData"].why)
        assert rec.fix == REC_TEMPLATES["structuredData"].fix
        assert rec.gain == 7.5


class TestGenerateWithArtifacts:
    """Recommendations with audit artifacts and no content."""

    def test_artifact_example(self):
        """Artifacts replace the static example."""
        artifacts = AuditArtifacts(page_title="Watering Guide")

        recommendations = generate_recommendations(
            {"STRUCTURE": {"listicleFormat": 0}}, artifacts=artifacts
        )

        assert recommendations[0].example.before == "Watering Guide"

    def test_static_example_kept(self):
        """Checks the artifacts say nothing about keep the static example."""
        recommendations = generate_recommendations(
            {"RETRIEVAL": {"ttfb": 0}}, artifacts=AuditArtifacts(page_title="Watering Guide")
        )

        assert recommendations[0].example == REC_TEMPLATES["ttfb"].example


class TestRecommendationGenerator:
    """Tests for RecommendationGenerator options and output."""

    def test_current_year(self):
        """The year used in examples can be pinned."""
        content = make_content(business_type=BusinessType.BLOG)

        recommendations = RecommendationGenerator(current_year=2031).generate(
            {"STRUCTURE": {"semanticUrl": 0}}, extracted_content=content
        )

        assert recommendations[0].example.after == "/blog/tomato-care-2031"

    def test_templates_untouched(self, zero_results):
        """Generating never mutates the shared templates."""
        before = {name: t.why for name, t in REC_TEMPLATES.items()}

        content = make_content(page_type=PageType.HOMEPAGE)

        generate_recommendations(zero_results, extracted_content=content)

        assert {name: t.why for name, t in REC_TEMPLATES.items()} == before

    def test_to_dict(self):
        """Recommendations serialize to plain dicts."""
        rec = ResolvedRecommendation(
            metric="ttfb", pillar="RETRIEVAL", why="w", fix="f", gain=11.0, base_gain=10
        )

        assert rec.to_dict() == {
            "metric": "ttfb",
            "pillar": "RETRIEVAL",
            "why": "w",
            "fix": "f",
            "gain": 11.0,
            "base_gain": 10,
            "example": None,
        }
