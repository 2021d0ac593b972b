"""Page-type recommendation priorities, messages and exclusions.

Each page type ranks the checks that matter most for it. The rank turns into
a gain multiplier, so a homepage missing structured data outranks an
equally weighted check the homepage does not care about. Some checks make no
sense for a page type at all and are skipped.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from readiness.models import PageType

# Multiplier by position in a priority list; beyond the list -> 1.0
PRIORITY_MULTIPLIERS: tuple[float, ...] = (1.5, 1.3, 1.2, 1.1, 1.1)
DEFAULT_MULTIPLIER = 1.0
SKIPPED_MULTIPLIER = 0.0


@dataclass(frozen=True)
class PageTypeRecommendationConfig:
    """Recommendation tuning for one page type."""

    priority: tuple[str, ...] = ()
    custom_messages: Mapping[str, str] = field(default_factory=dict)
    skip_metrics: frozenset[str] = frozenset()

    def to_dict(self) -> dict:
        return {
            "priority": list(self.priority),
            "custom_messages": dict(self.custom_messages),
            "skip_metrics": sorted(self.skip_metrics),
        }


_ARTICLE_PRIORITY = ("lastModified", "authorBio", "uniqueStats", "directAnswers", "structuredData")

PAGE_TYPE_RECOMMENDATIONS: dict[PageType, PageTypeRecommendationConfig] = {
    PageType.HOMEPAGE: PageTypeRecommendationConfig(
        priority=("structuredData", "mainContent", "uniqueStats", "ttfb", "authorBio"),
        custom_messages={
            "structuredData": (
                "Organization schema is essential for homepages to establish your brand "
                "identity in AI search."
            ),
            "uniqueStats": (
                "Homepages need trust signals like customer counts, years in business, or "
                "success metrics."
            ),
            "mainContent": (
                "Your homepage must clearly state what you do within the first 100 words."
            ),
            "authorBio": 'Include a brief "About Us" section to establish credibility.',
        },
    ),
    PageType.ARTICLE: PageTypeRecommendationConfig(
        priority=_ARTICLE_PRIORITY,
        custom_messages={
            "lastModified": (
                "AI prioritizes recent content. Always show publish and update dates on "
                "articles."
            ),
            "authorBio": (
                "Articles need clear author attribution with credentials for AI to trust "
                "the content."
            ),
            "uniqueStats": (
                "Back up claims with data. AI favors articles with specific statistics and "
                "sources."
            ),
            "directAnswers": (
                "Start articles with a brief answer to the main question, then elaborate."
            ),
        },
    ),
    PageType.BLOG: PageTypeRecommendationConfig(
        priority=_ARTICLE_PRIORITY,
        custom_messages={
            "lastModified": (
                "AI prioritizes recent content. Always show publish and update dates on blog "
                "posts."
            ),
            "authorBio": (
                "Blog posts need clear author attribution with credentials for AI to trust "
                "the content."
            ),
            "uniqueStats": (
                "Back up claims with data. AI favors posts with specific statistics and "
                "sources."
            ),
            "directAnswers": "Start posts with a brief answer or summary, then elaborate.",
            "structuredData": (
                "Use BlogPosting schema to help AI understand your content structure."
            ),
        },
    ),
    PageType.PRODUCT: PageTypeRecommendationConfig(
        priority=("structuredData", "uniqueStats", "comparisonTables", "dataMarkup", "mainContent"),
        custom_messages={
            "structuredData": (
                "Product schema with price, availability, and reviews is crucial for AI "
                "shopping queries."
            ),
            "uniqueStats": (
                "Include all specifications: dimensions, weight, materials, compatibility, "
                "etc."
            ),
            "comparisonTables": (
                "Add comparison tables showing how your product differs from alternatives."
            ),
            "dataMarkup": (
                "Use structured lists for features, benefits, and technical specifications."
            ),
        },
    ),
    PageType.CATEGORY: PageTypeRecommendationConfig(
        priority=("mainContent", "structuredData", "semanticUrl", "htmlSize", "listicleFormat"),
        custom_messages={
            "mainContent": (
                "Ensure product grids and filters are within <main> tags for clear content "
                "hierarchy."
            ),
            "structuredData": (
                "Use BreadcrumbList schema to help AI understand your site structure."
            ),
            "semanticUrl": (
                "Category URLs should be descriptive: /electronics/laptops not /cat/123."
            ),
            "htmlSize": (
                "Paginate or lazy-load products to keep page size manageable for AI crawlers."
            ),
        },
    ),
    PageType.DOCUMENTATION: PageTypeRecommendationConfig(
        priority=("directAnswers", "structuredData", "headingDepth", "semanticUrl", "llmsTxtFile"),
        custom_messages={
            "directAnswers": "Each doc section should start with what it does in one sentence.",
            "structuredData": "Use HowTo or TechArticle schema for step-by-step instructions.",
            "headingDepth": "Use proper heading hierarchy (h1 > h2 > h3) for navigable docs.",
            "semanticUrl": "Include version numbers in URLs: /docs/v2/api/authentication.",
            "llmsTxtFile": (
                "Especially important for docs - tell AI how to navigate your documentation."
            ),
        },
    ),
    PageType.ABOUT: PageTypeRecommendationConfig(
        priority=("authorBio", "uniqueStats", "structuredData", "napConsistency", "mainContent"),
        custom_messages={
            "authorBio": "Showcase your team with names, roles, and expertise to build trust.",
            "uniqueStats": (
                "Include founding year, team size, clients served, and key achievements."
            ),
            "napConsistency": (
                "Ensure Name, Address, Phone (NAP) data matches across all mentions."
            ),
            "mainContent": (
                "Tell your story concisely - what problem you solve and why you exist."
            ),
        },
    ),
    PageType.CONTACT: PageTypeRecommendationConfig(
        priority=("napConsistency", "structuredData", "mainContent", "semanticUrl", "ttfb"),
        custom_messages={
            "napConsistency": "Contact information must be identical everywhere it appears.",
            "structuredData": "Use ContactPoint schema to help AI direct users to you correctly.",
            "mainContent": "List all contact methods clearly: email, phone, address, hours.",
            "semanticUrl": "Use standard URLs like /contact or /contact-us for easy discovery.",
        },
    ),
    PageType.SEARCH: PageTypeRecommendationConfig(
        priority=("mainContent", "htmlSize", "semanticUrl", "structuredData", "ttfb"),
        custom_messages={
            "mainContent": "Search results must be clearly separated from navigation and ads.",
            "htmlSize": "Paginate results to avoid huge pages that AI crawlers might skip.",
            "semanticUrl": "Use clean query parameters: /search?q=term not /s?x=abc123.",
            "structuredData": "Mark up with SearchResultsPage schema when available.",
        },
        skip_metrics=frozenset({"listicleFormat", "authorBio"}),
    ),
    PageType.GENERAL: PageTypeRecommendationConfig(),
}


def get_page_type_config(page_type: PageType | str | None) -> PageTypeRecommendationConfig:
    """Config for a page type; unknown or missing types use the general config."""
    if page_type is None:
        return PAGE_TYPE_RECOMMENDATIONS[PageType.GENERAL]
    try:
        return PAGE_TYPE_RECOMMENDATIONS[PageType(page_type)]
    except (ValueError, KeyError):
        return PAGE_TYPE_RECOMMENDATIONS[PageType.GENERAL]


def get_priority_multiplier(page_type: PageType | str | None, metric: str) -> float:
    """Gain multiplier for a check on a page type; 0.0 when the check is skipped."""
    config = get_page_type_config(page_type)
    if metric in config.skip_metrics:
        return SKIPPED_MULTIPLIER
    if metric in config.priority:
        rank = config.priority.index(metric)
        if rank < len(PRIORITY_MULTIPLIERS):
            return PRIORITY_MULTIPLIERS[rank]
    return DEFAULT_MULTIPLIER


def get_custom_message(page_type: PageType | str | None, metric: str) -> str | None:
    return get_page_type_config(page_type).custom_messages.get(metric)


def should_show_metric(page_type: PageType | str | None, metric: str) -> bool:
    return metric not in get_page_type_config(page_type).skip_metrics
