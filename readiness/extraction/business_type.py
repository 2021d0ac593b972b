"""Business type detection.

First-match cascade over page copy keywords and DOM selectors. The payment
check runs first and is deliberately broad: any transaction vocabulary marks
the site as a payment business.
"""

import re
from collections.abc import Iterable

import structlog
from bs4 import BeautifulSoup

from readiness.models import BusinessType

logger = structlog.get_logger(__name__)

PAYMENT_KEYWORDS = re.compile(r"\b(?:payment|transaction|merchant)")
COMMERCE_SELECTOR = ".product, .price, .add-to-cart, .shop"
COMMERCE_PHRASE = "buy now"
BLOG_SELECTOR = ".blog-post, .article-date, .author"
NEWS_SELECTOR = ".news-item, .press-release"
CODE_SELECTOR = "code, pre"
CODE_BLOCK_THRESHOLD = 10
# Whole words only, so "rapid" is not "api" and "accompany" is not "company".
# Payment and educational keywords stay prefix matches ("payments", "learning").
DOCUMENTATION_KEYWORDS = re.compile(r"\b(?:apis?|documentation)\b")
CORPORATE_KEYWORDS = re.compile(r"\b(?:about us|our services|compan(?:y|ies))\b")
EDUCATIONAL_KEYWORDS = re.compile(r"\b(?:course|tutorial|learn)")


def detect_business_type(
    topics: Iterable[str],
    soup: BeautifulSoup | None,
    text: str,
) -> BusinessType:
    """
    Classify the business domain of a page.

    Args:
        topics: Detected topics (primary topic first)
        soup: Parsed document, or None when only text is available
        text: Flattened page text

    Returns:
        Detected BusinessType, OTHER when nothing matches
    """
    all_topics = " ".join(topics).lower()
    body = (text or "").lower()

    if PAYMENT_KEYWORDS.search(body):
        return BusinessType.PAYMENT

    if soup is not None:
        try:
            if soup.select(COMMERCE_SELECTOR) or COMMERCE_PHRASE in body:
                return BusinessType.ECOMMERCE
            if soup.select(BLOG_SELECTOR) or "blog" in all_topics:
                return BusinessType.BLOG
            if soup.select(NEWS_SELECTOR) or "news" in all_topics:
                return BusinessType.NEWS
            if len(soup.select(CODE_SELECTOR)) > CODE_BLOCK_THRESHOLD:
                return BusinessType.DOCUMENTATION
        except Exception as e:
            # Selector failures only lose the DOM checks; keyword checks still run
            logger.warning("business_type_dom_check_failed", error=str(e))
    else:
        if COMMERCE_PHRASE in body:
            return BusinessType.ECOMMERCE
        if "blog" in all_topics:
            return BusinessType.BLOG
        if "news" in all_topics:
            return BusinessType.NEWS

    if DOCUMENTATION_KEYWORDS.search(body):
        return BusinessType.DOCUMENTATION
    if CORPORATE_KEYWORDS.search(body):
        return BusinessType.CORPORATE
    if EDUCATIONAL_KEYWORDS.search(body):
        return BusinessType.EDUCATIONAL

    return BusinessType.OTHER
