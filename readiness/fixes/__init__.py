"""Recommendation generation package."""

# Lazy imports to avoid importing the extractor stack at import time
# Use explicit imports when needed:
# from readiness.fixes.templates import REC_TEMPLATES, RecommendationTemplate, get_template
# from readiness.fixes.page_types import get_priority_multiplier, should_show_metric
# from readiness.fixes.artifacts import AuditArtifacts
# from readiness.fixes.personalizer import ContentAwarePersonalizer
# from readiness.fixes.generator import RecommendationGenerator, generate_recommendations

__all__ = [
    # Templates
    "Example",
    "REC_TEMPLATES",
    "RecommendationTemplate",
    "get_template",
    # Page types
    "PAGE_TYPE_RECOMMENDATIONS",
    "get_custom_message",
    "get_priority_multiplier",
    "should_show_metric",
    # Artifacts (legacy example path)
    "AuditArtifacts",
    # Personalization
    "ContentAwarePersonalizer",
    # Generator
    "RecommendationGenerator",
    "ResolvedRecommendation",
    "generate_recommendations",
]
