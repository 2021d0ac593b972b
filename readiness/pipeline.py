"""End-to-end page analysis: extract, score, recommend."""

from dataclasses import dataclass

import structlog

from readiness.extraction.extractor import extract_content
from readiness.fixes.artifacts import AuditArtifacts
from readiness.models import ExtractedContent, PillarResults
from readiness.scoring.calculator import ScoringResult, score

logger = structlog.get_logger(__name__)


@dataclass
class PageAnalysis:
    """Extracted content and score for one page."""

    content: ExtractedContent
    scoring: ScoringResult

    def to_dict(self) -> dict:
        return {
            "content": self.content.to_dict(),
            "scoring": self.scoring.to_dict(),
        }


def analyze_page(
    html: str,
    url: str | None,
    pillar_results: PillarResults,
    artifacts: AuditArtifacts | None = None,
    enable_dynamic_scoring: bool | None = None,
) -> PageAnalysis:
    """
    Analyze one page.

    Args:
        html: Raw page HTML
        url: Page URL, used for classification and examples
        pillar_results: pillar -> metric -> score from the pillar auditors
        artifacts: Audit artifacts for examples when the page is an error page
        enable_dynamic_scoring: Override for settings.dynamic_scoring_enabled

    Returns:
        PageAnalysis
    """
    content = extract_content(html, url)

    # Error pages carry no usable content to personalize from
    scoring = score(
        pillar_results,
        extracted_content=None if content.is_error_page else content,
        enable_dynamic_scoring=enable_dynamic_scoring,
        artifacts=artifacts,
    )

    logger.info(
        "page_analyzed",
        url=url,
        page_type=content.page_type.value,
        business_type=content.business_type.value,
        error_page=content.is_error_page,
        total=scoring.total,
        recommendations=len(scoring.recommendations),
    )
    return PageAnalysis(content=content, scoring=scoring)
