"""Content extractor for analyzed pages.

Turns raw HTML into an ``ExtractedContent`` model. Each extraction step runs
in isolation: a step that fails is logged and falls back to its empty value
while the rest of the model is still filled. Only a page that cannot be
parsed at all yields the fully defaulted model.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog
from bs4 import BeautifulSoup

from readiness.config import Settings, get_settings
from readiness.exceptions import ExtractionError
from readiness.extraction.attributes import (
    extract_business_attributes,
    extract_competitor_mentions,
    extract_product_names,
)
from readiness.extraction.business_type import detect_business_type
from readiness.extraction.error_page import ErrorPageCheck, check_error_page
from readiness.extraction.features import detect_features
from readiness.extraction.page_type import classify_page_type
from readiness.extraction.parsing import (
    Topics,
    count_words,
    detect_language,
    detect_topics,
    extract_comparisons,
    extract_headings,
    extract_key_terms,
    extract_lists,
    extract_meta_description,
    extract_paragraphs,
    extract_statistics,
    extract_technical_terms,
    extract_title,
)
from readiness.extraction.signals import PageSignals, collect_page_signals
from readiness.extraction.text import flatten_text, strip_non_content
from readiness.models import (
    DEFAULT_PRIMARY_TOPIC,
    BusinessAttributes,
    BusinessType,
    ContentSamples,
    DetectedFeatures,
    ExtractedContent,
    PageType,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class ExtractorConfig:
    """Configuration for content extraction."""

    max_content_chars: int = 100_000
    max_html_chars: int | None = None
    product_scan_chars: int = 50_000
    detect_error_pages: bool = True

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ExtractorConfig":
        settings = settings or get_settings()
        return cls(
            max_content_chars=settings.max_content_chars,
            max_html_chars=settings.max_html_chars,
            product_scan_chars=settings.product_scan_chars,
        )


class ContentExtractor:
    """Extracts the typed content model from raw HTML."""

    def __init__(self, config: ExtractorConfig | None = None):
        self.config = config or ExtractorConfig()

    def extract(self, html: str, url: str | None = None) -> ExtractedContent:
        """
        Extract content from a page.

        Args:
            html: Raw HTML of the page
            url: Source URL, used for classification and URL-aware examples

        Returns:
            ExtractedContent, fully defaulted if the page cannot be parsed
        """
        try:
            return self._extract(html, url)
        except ExtractionError as e:
            logger.warning("content_extraction_failed", url=url, code=e.code, error=e.message)
        except Exception as e:
            logger.warning("content_extraction_failed", url=url, error=str(e), exc_info=True)
        return ExtractedContent(source_url=url)

    def _parse(self, html: str, url: str | None) -> BeautifulSoup:
        if not isinstance(html, str) or not html.strip():
            raise ExtractionError("Empty or non-text HTML", url=url)

        if self.config.max_html_chars and len(html) > self.config.max_html_chars:
            logger.info("html_truncated", url=url, size=len(html), limit=self.config.max_html_chars)
            html = html[: self.config.max_html_chars]

        return BeautifulSoup(html, "html.parser")

    def _step(self, name: str, default: T, func: Callable[..., T], *args: Any) -> T:
        """Run one extraction step, degrading to ``default`` on failure."""
        try:
            return func(*args)
        except Exception as e:
            logger.warning("extraction_step_failed", step=name, error=str(e))
            return default

    def _extract(self, html: str, url: str | None) -> ExtractedContent:
        soup = self._parse(html, url)

        # Signals read JSON-LD scripts, so collect them before stripping
        signals = self._step("page_signals", PageSignals(url=url), collect_page_signals, soup, url)
        strip_non_content(soup)

        text = flatten_text(soup)
        if len(text) > self.config.max_content_chars:
            logger.info(
                "content_truncated", url=url, size=len(text), limit=self.config.max_content_chars
            )
            text = text[: self.config.max_content_chars]

        language = self._step("language", "en", detect_language, soup)

        if self.config.detect_error_pages:
            check = self._step("error_page", ErrorPageCheck(False), check_error_page, soup, text)
            if check.is_error:
                logger.info("error_page_detected", url=url, reason=check.reason)
                return ExtractedContent(language=language, source_url=url, is_error_page=True)

        title = self._step("title", "", extract_title, soup)
        headings = self._step("headings", (), extract_headings, soup)
        topics = self._step(
            "topics", Topics(primary=DEFAULT_PRIMARY_TOPIC, all=()), detect_topics, title, headings
        )

        page_type_result = self._step("page_type", None, classify_page_type, signals)
        page_type = page_type_result.page_type if page_type_result else PageType.GENERAL
        business_type = self._step(
            "business_type", BusinessType.OTHER, detect_business_type, topics.all, soup, text
        )

        samples = ContentSamples(
            title=title,
            meta_description=self._step("meta_description", "", extract_meta_description, soup),
            headings=headings,
            paragraphs=self._step("paragraphs", (), extract_paragraphs, soup),
            lists=self._step("lists", (), extract_lists, soup),
            statistics=self._step("statistics", (), extract_statistics, text),
            comparisons=self._step("comparisons", (), extract_comparisons, soup, text),
        )

        content = ExtractedContent(
            primary_topic=topics.primary,
            detected_topics=topics.all,
            business_type=business_type,
            page_type=page_type,
            business_attributes=self._step(
                "business_attributes", BusinessAttributes(), extract_business_attributes, text
            ),
            competitor_mentions=self._step(
                "competitor_mentions", (), extract_competitor_mentions, text
            ),
            content_samples=samples,
            detected_features=self._step(
                "features", DetectedFeatures(), detect_features, soup, text
            ),
            key_terms=self._step("key_terms", (), extract_key_terms, text),
            product_names=self._step(
                "product_names", (), extract_product_names, text, self.config.product_scan_chars
            ),
            technical_terms=self._step("technical_terms", (), extract_technical_terms, text),
            word_count=count_words(text),
            language=language,
            source_url=url,
        )

        logger.debug(
            "content_extracted",
            url=url,
            page_type=page_type.value,
            page_type_rule=page_type_result.rule if page_type_result else None,
            business_type=business_type.value,
            word_count=content.word_count,
        )
        return content


def extract_content(html: str, url: str | None = None) -> ExtractedContent:
    """
    Convenience function to extract content with configured limits.

    Args:
        html: Raw HTML of the page
        url: Source URL

    Returns:
        ExtractedContent
    """
    return ContentExtractor(ExtractorConfig.from_settings()).extract(html, url)
