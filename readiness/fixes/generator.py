"""Recommendation generator for failed readiness checks.

Turns pillar check scores into a ranked list of fixes. Every check scoring
below its maximum gets a recommendation built from its template, shaped by
the page type (custom message, priority, exclusions) and, when available,
by the extracted page content or the audit artifacts.
"""

from dataclasses import dataclass, replace

import structlog

from readiness.exceptions import PersonalizationError
from readiness.fixes.artifacts import AuditArtifacts, artifact_example
from readiness.fixes.page_types import (
    get_custom_message,
    get_priority_multiplier,
    should_show_metric,
)
from readiness.fixes.personalizer import ContentAwarePersonalizer
from readiness.fixes.templates import Example, RecommendationTemplate, get_template
from readiness.models import ExtractedContent, PageType, PillarResults
from readiness.scoring.pillars import coerce_check_score, max_score_for_metric

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ResolvedRecommendation:
    """A recommendation resolved for one page."""

    metric: str
    pillar: str
    why: str
    fix: str
    gain: float  # Adjusted for page-type priority
    base_gain: float
    example: Example | None = None

    def to_dict(self) -> dict:
        return {
            "metric": self.metric,
            "pillar": self.pillar,
            "why": self.why,
            "fix": self.fix,
            "gain": self.gain,
            "base_gain": self.base_gain,
            "example": self.example.to_dict() if self.example else None,
        }


class RecommendationGenerator:
    """Generates ranked recommendations from pillar check scores."""

    def __init__(self, current_year: int | None = None):
        self.current_year = current_year

    def generate(
        self,
        pillar_results: PillarResults,
        extracted_content: ExtractedContent | None = None,
        artifacts: AuditArtifacts | None = None,
    ) -> list[ResolvedRecommendation]:
        """
        Generate recommendations for every failed check.

        Args:
            pillar_results: pillar -> metric -> score
            extracted_content: Page content for content-aware personalization
            artifacts: Audit artifacts, used only without extracted content

        Returns:
            Recommendations sorted by adjusted gain, highest first
        """
        page_type = extracted_content.page_type if extracted_content else PageType.GENERAL
        personalizer = (
            ContentAwarePersonalizer(extracted_content, current_year=self.current_year)
            if extracted_content is not None
            else None
        )

        recommendations: list[ResolvedRecommendation] = []
        for pillar, checks in pillar_results.items():
            if not hasattr(checks, "items"):
                logger.warning("malformed_pillar_checks", pillar=pillar)
                continue

            for metric, raw_score in checks.items():
                if not should_show_metric(page_type, metric):
                    continue
                score = coerce_check_score(raw_score, metric=metric)
                if score >= max_score_for_metric(metric):
                    continue
                template = get_template(metric)
                if template is None:
                    continue

                template = self._resolve_template(
                    metric, template, page_type, personalizer, artifacts
                )
                multiplier = get_priority_multiplier(page_type, metric)
                recommendations.append(
                    ResolvedRecommendation(
                        metric=metric,
                        pillar=str(pillar),
                        why=template.why,
                        fix=template.fix,
                        gain=round(template.gain * multiplier, 2),
                        base_gain=template.gain,
                        example=template.example,
                    )
                )

        # Stable sort keeps declaration order for equal gains
        recommendations.sort(key=lambda r: r.gain, reverse=True)

        logger.debug(
            "recommendations_generated",
            page_type=page_type.value,
            count=len(recommendations),
            personalized=personalizer is not None,
        )
        return recommendations

    def _resolve_template(
        self,
        metric: str,
        template: RecommendationTemplate,
        page_type: PageType,
        personalizer: ContentAwarePersonalizer | None,
        artifacts: AuditArtifacts | None,
    ) -> RecommendationTemplate:
        custom_message = get_custom_message(page_type, metric)
        if custom_message:
            template = replace(template, why=f"{custom_message} {template.why}")

        if personalizer is not None:
            try:
                return personalizer.personalize(metric, template)
            except PersonalizationError as e:
                logger.warning(
                    "recommendation_personalization_failed",
                    metric=metric,
                    error=e.message,
                )
                return template

        if artifacts is not None:
            example = artifact_example(metric, artifacts)
            if example is not None:
                return replace(template, example=example)
        return template


def generate_recommendations(
    pillar_results: PillarResults,
    extracted_content: ExtractedContent | None = None,
    artifacts: AuditArtifacts | None = None,
) -> list[ResolvedRecommendation]:
    """
    Generate ranked recommendations for failed checks.

    Args:
        pillar_results: pillar -> metric -> score
        extracted_content: Page content, enables content-aware personalization
        artifacts: Audit artifacts for the legacy example path

    Returns:
        Recommendations sorted by adjusted gain, highest first
    """
    return RecommendationGenerator().generate(
        pillar_results,
        extracted_content=extracted_content,
        artifacts=artifacts,
    )
