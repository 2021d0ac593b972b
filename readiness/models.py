"""Shared content model for the readiness pipeline.

``ExtractedContent`` is produced once per analyzed page by the extractor and
read by the scorer and the recommendation generator. All records are frozen
and hold tuples, so a content object can be shared freely between callers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal

# pillar name -> metric name -> score, as reported by the pillar auditors
PillarResults = Mapping[str, Mapping[str, float]]


class Pillar(StrEnum):
    """The five scoring dimensions."""

    RETRIEVAL = "RETRIEVAL"
    FACT_DENSITY = "FACT_DENSITY"
    STRUCTURE = "STRUCTURE"
    TRUST = "TRUST"
    RECENCY = "RECENCY"


class PageType(StrEnum):
    """Purpose of a page, drives weighting and recommendation priority."""

    HOMEPAGE = "homepage"
    ARTICLE = "article"
    BLOG = "blog"
    PRODUCT = "product"
    CATEGORY = "category"
    DOCUMENTATION = "documentation"
    ABOUT = "about"
    CONTACT = "contact"
    SEARCH = "search"
    GENERAL = "general"


class BusinessType(StrEnum):
    """Business domain of the site, drives recommendation phrasing."""

    PAYMENT = "payment"
    ECOMMERCE = "ecommerce"
    BLOG = "blog"
    NEWS = "news"
    DOCUMENTATION = "documentation"
    CORPORATE = "corporate"
    EDUCATIONAL = "educational"
    OTHER = "other"


class Sentiment(StrEnum):
    """Tone of a competitor mention."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class BusinessAttributes:
    """Facts about the business stated in page copy."""

    industry: str | None = None
    target_audience: str | None = None
    main_product: str | None = None
    main_service: str | None = None
    unique_value: str | None = None
    mission_statement: str | None = None
    year_founded: str | None = None
    location: str | None = None
    team_size: str | None = None

    def to_dict(self) -> dict:
        return {
            "industry": self.industry,
            "target_audience": self.target_audience,
            "main_product": self.main_product,
            "main_service": self.main_service,
            "unique_value": self.unique_value,
            "mission_statement": self.mission_statement,
            "year_founded": self.year_founded,
            "location": self.location,
            "team_size": self.team_size,
        }


@dataclass(frozen=True)
class CompetitorMention:
    """A competitor named on the page."""

    name: str
    context: str
    sentiment: Sentiment = Sentiment.NEUTRAL

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "context": self.context,
            "sentiment": self.sentiment.value,
        }


@dataclass(frozen=True)
class Heading:
    """A heading and a short sample of the content that follows it."""

    level: int
    text: str
    content: str | None = None

    def to_dict(self) -> dict:
        return {"level": self.level, "text": self.text, "content": self.content}


@dataclass(frozen=True)
class ContentList:
    """A ul/ol list with its direct items."""

    type: Literal["ul", "ol"]
    items: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"type": self.type, "items": list(self.items)}


@dataclass(frozen=True)
class ContentSamples:
    """Bounded structural samples taken from the page."""

    title: str = ""
    meta_description: str = ""
    headings: tuple[Heading, ...] = ()
    paragraphs: tuple[str, ...] = ()
    lists: tuple[ContentList, ...] = ()
    statistics: tuple[str, ...] = ()
    comparisons: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "meta_description": self.meta_description,
            "headings": [h.to_dict() for h in self.headings],
            "paragraphs": list(self.paragraphs),
            "lists": [lst.to_dict() for lst in self.lists],
            "statistics": list(self.statistics),
            "comparisons": list(self.comparisons),
        }


@dataclass(frozen=True)
class DetectedFeatures:
    """Boolean content features."""

    has_payment_forms: bool = False
    has_product_listings: bool = False
    has_api_documentation: bool = False
    has_pricing_info: bool = False
    has_blog_posts: bool = False
    has_tutorials: bool = False
    has_comparisons: bool = False
    has_questions: bool = False

    def to_dict(self) -> dict:
        return {
            "has_payment_forms": self.has_payment_forms,
            "has_product_listings": self.has_product_listings,
            "has_api_documentation": self.has_api_documentation,
            "has_pricing_info": self.has_pricing_info,
            "has_blog_posts": self.has_blog_posts,
            "has_tutorials": self.has_tutorials,
            "has_comparisons": self.has_comparisons,
            "has_questions": self.has_questions,
        }


DEFAULT_PRIMARY_TOPIC = "general content"


@dataclass(frozen=True)
class ExtractedContent:
    """Typed content model for one analyzed page.

    The field defaults form the fallback content object returned when a page
    cannot be parsed or is detected as an error/blocked page.
    """

    primary_topic: str = DEFAULT_PRIMARY_TOPIC
    detected_topics: tuple[str, ...] = ()
    business_type: BusinessType = BusinessType.OTHER
    page_type: PageType = PageType.GENERAL
    business_attributes: BusinessAttributes = field(default_factory=BusinessAttributes)
    competitor_mentions: tuple[CompetitorMention, ...] = ()
    content_samples: ContentSamples = field(default_factory=ContentSamples)
    detected_features: DetectedFeatures = field(default_factory=DetectedFeatures)
    key_terms: tuple[str, ...] = ()
    product_names: tuple[str, ...] = ()
    technical_terms: tuple[str, ...] = ()
    word_count: int = 0
    language: str = "en"
    source_url: str | None = None
    is_error_page: bool = False

    def to_dict(self) -> dict:
        return {
            "primary_topic": self.primary_topic,
            "detected_topics": list(self.detected_topics),
            "business_type": self.business_type.value,
            "page_type": self.page_type.value,
            "business_attributes": self.business_attributes.to_dict(),
            "competitor_mentions": [m.to_dict() for m in self.competitor_mentions],
            "content_samples": self.content_samples.to_dict(),
            "detected_features": self.detected_features.to_dict(),
            "key_terms": list(self.key_terms),
            "product_names": list(self.product_names),
            "technical_terms": list(self.technical_terms),
            "word_count": self.word_count,
            "language": self.language,
            "source_url": self.source_url,
            "is_error_page": self.is_error_page,
        }
