"""Page type detection.

Labels a page as homepage, blog, product, article or documentation using an
ordered rule cascade over ``PageSignals``. The first rule that matches wins;
the order is a precedence, not a vote, so a blog URL carrying an Organization
marker on a short path is still a homepage.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from bs4 import BeautifulSoup

from readiness.extraction.signals import PageSignals, collect_page_signals
from readiness.models import PageType

HOMEPAGE_PATHS = frozenset(
    {
        "",
        "/",
        "/index",
        "/index.html",
        "/index.htm",
        "/index.php",
        "/home",
        "/homepage",
        "/default.html",
        "/default.htm",
        "/default.aspx",
    }
)
LANGUAGE_ROOT_PATTERN = re.compile(r"^/[a-z]{2}(-[a-z]{2})?/$")

BLOG_URL_PATTERNS = (
    "/blog/",
    "/blogs/",
    "/post/",
    "/posts/",
    "/article/",
    "/articles/",
    "/news/",
    "/insights/",
    "/resources/",
    "/stories/",
    "/updates/",
    "/press/",
    "/media/",
    "/journal/",
    "/magazine/",
)
BLOG_SUBDOMAINS = frozenset({"blog", "news", "insights", "stories"})
DATE_PATH_PATTERNS = (
    re.compile(r"/\d{4}/\d{1,2}/"),
    re.compile(r"/\d{4}-\d{2}-\d{2}"),
)
ARTICLE_SCHEMA_TYPES = ("Article", "BlogPosting", "NewsArticle")

PRODUCT_URL_PATTERNS = (
    "/product/",
    "/products/",
    "/item/",
    "/items/",
    "/p/",
    "/shop/",
    "/store/",
    "/catalog/",
    "/catalogue/",
    "/merchandise/",
)

ARTICLE_URL_PATTERNS = ("/blog/", "/post/", "/article/", "/news/", "/story/")
ARTICLE_DATE_PATTERN = re.compile(r"/\d{4}/\d{2}/")

DOCS_URL_PATTERNS = ("/docs", "/documentation", "/api", "/guide", "/manual", "/wiki")

# Homepage fallback: more than this many nav blocks...
NAV_COUNT_THRESHOLD = 2
# ...and fewer content elements per link than this
CONTENT_LINK_RATIO_THRESHOLD = 0.2

SHORT_PATH_LENGTH = 20


@dataclass(frozen=True)
class PageTypeResult:
    """Result of page type detection."""

    page_type: PageType
    rule: str  # Name of the rule that fired

    def to_dict(self) -> dict:
        return {"page_type": self.page_type.value, "rule": self.rule}


def is_homepage_path(signals: PageSignals) -> bool:
    return signals.has_url and signals.path_lower.rstrip("/") in HOMEPAGE_PATHS


def is_language_root(signals: PageSignals) -> bool:
    return signals.has_url and bool(LANGUAGE_ROOT_PATTERN.match(signals.path_lower))


def has_organization_on_short_path(signals: PageSignals) -> bool:
    if not signals.has_url or not signals.has_schema("Organization"):
        return False
    path = signals.path
    return (
        path in ("", "/")
        or len(path) < SHORT_PATH_LENGTH
        or len(signals.path_segments) <= 1
    )


def has_blog_signals(signals: PageSignals) -> bool:
    path = signals.path_lower
    if signals.has_url:
        if any(pattern in path for pattern in BLOG_URL_PATTERNS):
            return True
        if signals.subdomain in BLOG_SUBDOMAINS:
            return True
        if any(pattern.search(path) for pattern in DATE_PATH_PATTERNS):
            return True
    if signals.has_schema(*ARTICLE_SCHEMA_TYPES):
        return True
    return signals.has_publish_date and (signals.has_author or signals.has_article_element)


def has_product_signals(signals: PageSignals) -> bool:
    path = signals.path_lower
    if signals.has_url:
        if any(pattern in path for pattern in PRODUCT_URL_PATTERNS):
            return True
        # Amazon-style product detail paths
        if "/dp/" in path:
            return True
    if signals.has_schema("Product"):
        return True
    return signals.has_price and (signals.has_add_to_cart or signals.has_product_info)


def has_article_signals(signals: PageSignals) -> bool:
    """Looser article check: any article markup or byline, no date required."""
    path = signals.path_lower
    if signals.has_url:
        if any(pattern in path for pattern in ARTICLE_URL_PATTERNS):
            return True
        if ARTICLE_DATE_PATTERN.search(path):
            return True
    return signals.has_article_element or signals.has_article_itemtype or signals.has_article_meta


def has_documentation_signals(signals: PageSignals) -> bool:
    if signals.has_url and any(p in signals.path_lower for p in DOCS_URL_PATTERNS):
        return True
    return signals.has_docs_container


def looks_like_navigation_hub(signals: PageSignals) -> bool:
    return (
        signals.nav_count > NAV_COUNT_THRESHOLD
        and signals.content_link_ratio < CONTENT_LINK_RATIO_THRESHOLD
    )


# Ordered cascade: (rule name, predicate, resulting page type)
PAGE_TYPE_RULES: list[tuple[str, Callable[[PageSignals], bool], PageType]] = [
    ("homepage_path", is_homepage_path, PageType.HOMEPAGE),
    ("language_root", is_language_root, PageType.HOMEPAGE),
    ("organization_short_path", has_organization_on_short_path, PageType.HOMEPAGE),
    ("blog_signals", has_blog_signals, PageType.BLOG),
    ("product_signals", has_product_signals, PageType.PRODUCT),
    ("article_signals", has_article_signals, PageType.ARTICLE),
    ("documentation_signals", has_documentation_signals, PageType.DOCUMENTATION),
    ("navigation_hub", looks_like_navigation_hub, PageType.HOMEPAGE),
]

DEFAULT_RULE = "default"
DEFAULT_PAGE_TYPE = PageType.BLOG


def classify_page_type(signals: PageSignals) -> PageTypeResult:
    """Run the rule cascade; first match wins."""
    for name, predicate, page_type in PAGE_TYPE_RULES:
        if predicate(signals):
            return PageTypeResult(page_type=page_type, rule=name)
    return PageTypeResult(page_type=DEFAULT_PAGE_TYPE, rule=DEFAULT_RULE)


def detect_page_type(html: str | BeautifulSoup, url: str | None = None) -> PageType:
    """
    Convenience function to detect page type.

    Args:
        html: Raw HTML or an already parsed document
        url: Page URL

    Returns:
        Detected PageType
    """
    soup = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html or "", "html.parser")
    return classify_page_type(collect_page_signals(soup, url)).page_type
