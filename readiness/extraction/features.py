"""Boolean content feature detection."""

import re

from bs4 import BeautifulSoup

from readiness.extraction.text import element_text
from readiness.models import DetectedFeatures

PAYMENT_FORM_WORDS = ("payment", "card", "checkout")
PRODUCT_LISTING_SELECTOR = ".product, .item, .listing"
PRICING_SELECTOR = ".price, .pricing"
BLOG_POST_SELECTOR = "article, .post, .article, .blog-entry"
CODE_SELECTOR = "code, pre"
API_CODE_BLOCK_THRESHOLD = 5
PRICE_PATTERN = re.compile(r"[$€£¥]\d+")
API_PATTERN = re.compile(r"\b(?:endpoint|apis?)\b")


def detect_features(soup: BeautifulSoup, text: str) -> DetectedFeatures:
    """Detect the eight content features from the DOM and page text."""
    lowered = (text or "").lower()

    has_payment_forms = any(
        any(word in element_text(form).lower() for word in PAYMENT_FORM_WORDS)
        for form in soup.find_all("form")
    )

    return DetectedFeatures(
        has_payment_forms=has_payment_forms,
        has_product_listings=bool(soup.select(PRODUCT_LISTING_SELECTOR))
        or "add to cart" in lowered,
        has_api_documentation=len(soup.select(CODE_SELECTOR)) > API_CODE_BLOCK_THRESHOLD
        or bool(API_PATTERN.search(lowered)),
        has_pricing_info=bool(soup.select(PRICING_SELECTOR)) or bool(PRICE_PATTERN.search(lowered)),
        has_blog_posts=bool(soup.select(BLOG_POST_SELECTOR)),
        has_tutorials=any(phrase in lowered for phrase in ("how to", "step by step", "tutorial")),
        has_comparisons=any(phrase in lowered for phrase in (" vs ", "versus", "comparison")),
        has_questions=any("?" in element_text(h) for h in soup.find_all(["h1", "h2", "h3", "h4"])),
    )
