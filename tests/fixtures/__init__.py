"""Shared test data."""

from tests.fixtures.content import make_content
from tests.fixtures.pages import (
    BLOG_POST_HTML,
    BLOG_POST_URL,
    CHALLENGE_PAGE_HTML,
    DOCS_PAGE_HTML,
    DOCS_PAGE_URL,
    FILLER,
    FILLER_2,
    PAYMENT_HOMEPAGE_HTML,
    PAYMENT_HOMEPAGE_URL,
    PRODUCT_PAGE_HTML,
    PRODUCT_PAGE_URL,
    build_page,
)

__all__ = [
    "FILLER",
    "FILLER_2",
    "build_page",
    "BLOG_POST_HTML",
    "BLOG_POST_URL",
    "PAYMENT_HOMEPAGE_HTML",
    "PAYMENT_HOMEPAGE_URL",
    "PRODUCT_PAGE_HTML",
    "PRODUCT_PAGE_URL",
    "DOCS_PAGE_HTML",
    "DOCS_PAGE_URL",
    "CHALLENGE_PAGE_HTML",
    "make_content",
]
