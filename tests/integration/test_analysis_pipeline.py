"""Integration tests for the page analysis pipeline and CLI."""

import json

import pytest

from readiness.models import BusinessType, PageType
from readiness.pipeline import analyze_page
from scripts.analyze_page import main
from tests.fixtures import (
    CHALLENGE_PAGE_HTML,
    DOCS_PAGE_HTML,
    DOCS_PAGE_URL,
    PAYMENT_HOMEPAGE_HTML,
    PAYMENT_HOMEPAGE_URL,
    PRODUCT_PAGE_HTML,
    PRODUCT_PAGE_URL,
)


@pytest.mark.integration
@pytest.mark.parametrize(
    "html,url,page_type,business_type,profile",
    [
        (
            PAYMENT_HOMEPAGE_HTML,
            PAYMENT_HOMEPAGE_URL,
            PageType.HOMEPAGE,
            BusinessType.PAYMENT,
            "homepage",
        ),
        (PRODUCT_PAGE_HTML, PRODUCT_PAGE_URL, PageType.PRODUCT, BusinessType.ECOMMERCE, "product"),
        (
            DOCS_PAGE_HTML,
            DOCS_PAGE_URL,
            PageType.DOCUMENTATION,
            BusinessType.DOCUMENTATION,
            "documentation",
        ),
    ],
)
def test_pages_end_to_end(
    html, url, page_type, business_type, profile, zero_results, mixed_results
):
    """
    Each sample page is classified, reweighted and given recommendations.

    Failing every check must produce a zero score and one recommendation per
    check; a partly passing page must stay within its reweighted budgets.
    """
    failing = analyze_page(html, url, zero_results)

    assert failing.content.page_type == page_type
    assert failing.content.business_type == business_type
    assert failing.scoring.total == 0
    assert failing.scoring.dynamic_scoring.applied_weights == profile
    assert len(failing.scoring.recommendations) == 22

    partial = analyze_page(html, url, mixed_results)

    assert 0 < partial.scoring.total <= 100
    assert partial.scoring.total == sum(b.earned for b in partial.scoring.breakdown)
    for entry in partial.scoring.breakdown:
        assert entry.earned <= entry.max

    # Output must be JSON serializable
    json.dumps(partial.to_dict())


@pytest.mark.integration
def test_docs_page_priorities(zero_results):
    """Documentation pages put direct answers first among equal gains."""
    analysis = analyze_page(DOCS_PAGE_HTML, DOCS_PAGE_URL, zero_results)
    by_metric = {r.metric: r for r in analysis.scoring.recommendations}

    assert by_metric["directAnswers"].gain == 7.5
    assert by_metric["directAnswers"].why.startswith(
        "In documentation, Each doc section should start with what it does"
    )
    assert by_metric["structuredData"].fix.endswith(
        "Use TechArticle or HowTo schema for technical content."
    )


@pytest.mark.integration
class TestAnalyzePageCli:
    """Tests for the analyze_page script."""

    @pytest.fixture(autouse=True)
    def keep_test_logging(self, monkeypatch):
        """Leave the suite's logging configuration in place."""
        monkeypatch.setattr("scripts.analyze_page.setup_logging", lambda: None)

    def write_inputs(self, tmp_path, html, results):
        html_path = tmp_path / "page.html"
        html_path.write_text(html, encoding="utf-8")
        pillars_path = tmp_path / "pillars.json"
        pillars_path.write_text(json.dumps(results), encoding="utf-8")
        return html_path, pillars_path

    def test_json_output(self, tmp_path, capsys, mixed_results):
        """The full analysis is printed as JSON."""
        html_path, pillars_path = self.write_inputs(tmp_path, PRODUCT_PAGE_HTML, mixed_results)

        exit_code = main(html_path, pillars_path, url=PRODUCT_PAGE_URL)

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["content"]["page_type"] == "product"
        assert data["scoring"]["dynamic_scoring"]["applied_weights"] == "product"

    def test_fixed_budgets(self, tmp_path, capsys, mixed_results):
        """Reweighting can be switched off."""
        html_path, pillars_path = self.write_inputs(tmp_path, PRODUCT_PAGE_HTML, mixed_results)

        main(html_path, pillars_path, url=PRODUCT_PAGE_URL, dynamic_scoring=False)

        data = json.loads(capsys.readouterr().out)
        assert data["scoring"]["total"] == 65
        assert data["scoring"]["dynamic_scoring"] is None

    def test_artifacts(self, tmp_path, capsys, zero_results):
        """Artifacts are loaded from JSON and used for error pages."""
        html_path, pillars_path = self.write_inputs(tmp_path, CHALLENGE_PAGE_HTML, zero_results)
        artifacts_path = tmp_path / "artifacts.json"
        artifacts_path.write_text(json.dumps({"page_title": "Watering Guide"}), encoding="utf-8")

        main(html_path, pillars_path, artifacts_path=artifacts_path)

        data = json.loads(capsys.readouterr().out)
        recommendations = data["scoring"]["recommendations"]
        listicle = next(r for r in recommendations if r["metric"] == "listicleFormat")
        assert listicle["example"]["before"] == "Watering Guide"

    def test_summary(self, tmp_path, capsys, mixed_results):
        """The summary lists the score band and top fixes."""
        html_path, pillars_path = self.write_inputs(
            tmp_path, PAYMENT_HOMEPAGE_HTML, mixed_results
        )

        main(html_path, pillars_path, url=PAYMENT_HOMEPAGE_URL, summary=True)

        out = capsys.readouterr().out
        assert "Page type:     homepage" in out
        assert "structuredData (+7.5)" in out

    def test_rejects_non_object_results(self, tmp_path, capsys):
        """Pillar results must be a JSON object."""
        html_path, pillars_path = self.write_inputs(tmp_path, PRODUCT_PAGE_HTML, [1, 2])

        assert main(html_path, pillars_path) == 2
        assert "Expected a JSON object" in capsys.readouterr().err
