"""Pre-computed page signals for classification.

Classification rules never touch the DOM directly. Everything they need is
collected once into a ``PageSignals`` value, so each rule is a pure function
of plain data and can be tested without HTML.
"""

import json
import re
from dataclasses import dataclass
from urllib.parse import urlparse

import structlog
from bs4 import BeautifulSoup

logger = structlog.get_logger(__name__)

AUTHOR_SELECTOR = '[rel="author"], .author, .by-author, .post-author, .article-author'
PUBLISH_DATE_SELECTOR = "[datetime], .publish-date, .post-date, .article-date, time"
ARTICLE_SELECTOR = "article, .article, .post, .blog-post"
ARTICLE_META_SELECTOR = ".publish-date, .post-date, .article-date, .byline, .author-info"
ARTICLE_ITEMTYPE_SELECTOR = '[itemtype*="Article"], [itemtype*="BlogPosting"]'
PRICE_SELECTOR = '[itemprop="price"], .price, .product-price, .cost'
ADD_TO_CART_SELECTOR = (
    'button[class*="cart"], button[id*="cart"], .add-to-cart, #add-to-cart'
)
PRODUCT_INFO_SELECTOR = ".product-info, .product-details, .product-description"
DOCS_CONTAINER_SELECTOR = ".docs-content, .documentation, .api-reference"
NAVIGATION_SELECTOR = "nav, .navigation, .menu"
CONTENT_ELEMENT_SELECTOR = "p, article, section"

# Fallback for JSON-LD blocks that do not parse
_TYPE_PATTERN = re.compile(r'"@type"\s*:\s*"([^"]+)"')


@dataclass(frozen=True)
class PageSignals:
    """URL parts, structured-data types and DOM counts for one page."""

    url: str | None = None
    path: str = ""
    hostname: str = ""
    schema_types: frozenset[str] = frozenset()
    has_author: bool = False
    has_publish_date: bool = False
    has_article_element: bool = False
    has_article_meta: bool = False
    has_article_itemtype: bool = False
    has_price: bool = False
    has_add_to_cart: bool = False
    has_product_info: bool = False
    has_docs_container: bool = False
    nav_count: int = 0
    link_count: int = 0
    content_element_count: int = 0

    @property
    def has_url(self) -> bool:
        return self.url is not None

    @property
    def path_lower(self) -> str:
        return self.path.lower()

    @property
    def path_segments(self) -> list[str]:
        return [segment for segment in self.path.split("/") if segment]

    @property
    def subdomain(self) -> str:
        parts = self.hostname.split(".")
        return parts[0] if len(parts) > 2 else ""

    @property
    def content_link_ratio(self) -> float:
        return self.content_element_count / max(self.link_count, 1)

    def has_schema(self, *types: str) -> bool:
        return any(t in self.schema_types for t in types)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "path": self.path,
            "hostname": self.hostname,
            "schema_types": sorted(self.schema_types),
            "has_author": self.has_author,
            "has_publish_date": self.has_publish_date,
            "has_article_element": self.has_article_element,
            "has_article_meta": self.has_article_meta,
            "has_article_itemtype": self.has_article_itemtype,
            "has_price": self.has_price,
            "has_add_to_cart": self.has_add_to_cart,
            "has_product_info": self.has_product_info,
            "has_docs_container": self.has_docs_container,
            "nav_count": self.nav_count,
            "link_count": self.link_count,
            "content_element_count": self.content_element_count,
        }


def _collect_types(data: object, found: set[str]) -> None:
    """Walk a JSON-LD document collecting every @type value."""
    if isinstance(data, list):
        for item in data:
            _collect_types(item, found)
    elif isinstance(data, dict):
        schema_type = data.get("@type")
        if isinstance(schema_type, str):
            found.add(schema_type)
        elif isinstance(schema_type, list):
            found.update(t for t in schema_type if isinstance(t, str))
        for value in data.values():
            if isinstance(value, dict | list):
                _collect_types(value, found)


def extract_schema_types(soup: BeautifulSoup) -> frozenset[str]:
    """Schema.org types declared via JSON-LD or microdata."""
    found: set[str] = set()

    for script in soup.find_all("script", type="application/ld+json"):
        content = script.string
        if not content:
            continue
        try:
            _collect_types(json.loads(content), found)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug("json_ld_parse_error", error=str(e))
            found.update(_TYPE_PATTERN.findall(content))

    for element in soup.find_all(attrs={"itemtype": True}):
        itemtype = element.get("itemtype", "")
        if isinstance(itemtype, list):
            itemtype = " ".join(itemtype)
        for value in itemtype.split():
            found.add(value.rstrip("/").rsplit("/", 1)[-1])

    return frozenset(found)


def parse_url(url: str | None) -> tuple[str, str]:
    """Return (path, hostname) for a URL, empty strings if unparseable."""
    if not url:
        return "", ""
    try:
        parsed = urlparse(url)
    except ValueError:
        return "", ""
    return parsed.path or "", (parsed.hostname or "").lower()


def collect_page_signals(soup: BeautifulSoup, url: str | None = None) -> PageSignals:
    """Compute the classification signals for a parsed page."""
    path, hostname = parse_url(url)

    return PageSignals(
        url=url or None,
        path=path,
        hostname=hostname,
        schema_types=extract_schema_types(soup),
        has_author=bool(soup.select(AUTHOR_SELECTOR)),
        has_publish_date=bool(soup.select(PUBLISH_DATE_SELECTOR)),
        has_article_element=bool(soup.select(ARTICLE_SELECTOR)),
        has_article_meta=bool(soup.select(ARTICLE_META_SELECTOR)),
        has_article_itemtype=bool(soup.select(ARTICLE_ITEMTYPE_SELECTOR)),
        has_price=bool(soup.select(PRICE_SELECTOR)),
        has_add_to_cart=bool(soup.select(ADD_TO_CART_SELECTOR)),
        has_product_info=bool(soup.select(PRODUCT_INFO_SELECTOR)),
        has_docs_container=bool(soup.select(DOCS_CONTAINER_SELECTOR)),
        nav_count=len(soup.select(NAVIGATION_SELECTOR)),
        link_count=len(soup.find_all("a")),
        content_element_count=len(soup.select(CONTENT_ELEMENT_SELECTOR)),
    )
