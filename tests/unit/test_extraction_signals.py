"""Tests for page signal collection."""

from bs4 import BeautifulSoup

from readiness.extraction.signals import (
    PageSignals,
    collect_page_signals,
    extract_schema_types,
    parse_url,
)


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


class TestExtractSchemaTypes:
    """Tests for schema type extraction."""

    def test_json_ld_type(self) -> None:
        """Reads @type from JSON-LD."""
        soup = soup_of(
            '<script type="application/ld+json">{"@type": "Organization", "name": "Acme"}</script>'
        )

        assert extract_schema_types(soup) == frozenset({"Organization"})

    def test_json_ld_graph_and_nested(self) -> None:
        """Walks @graph entries and nested objects."""
        soup = soup_of(
            '<script type="application/ld+json">'
            '{"@graph": [{"@type": "WebPage"}, {"@type": ["Article", "NewsArticle"],'
            ' "author": {"@type": "Person"}}]}'
            "</script>"
        )

        assert extract_schema_types(soup) == frozenset(
            {"WebPage", "Article", "NewsArticle", "Person"}
        )

    def test_malformed_json_ld_falls_back_to_pattern(self) -> None:
        """Broken JSON still yields its declared types."""
        soup = soup_of('<script type="application/ld+json">{"@type": "Product",}</script>')

        assert "Product" in extract_schema_types(soup)

    def test_microdata_itemtype(self) -> None:
        """Reads microdata itemtype URLs."""
        soup = soup_of('<div itemscope itemtype="https://schema.org/Product"></div>')

        assert extract_schema_types(soup) == frozenset({"Product"})

    def test_no_structured_data(self) -> None:
        """Pages without structured data have no types."""
        assert extract_schema_types(soup_of("<p>Hello</p>")) == frozenset()


class TestParseUrl:
    """Tests for parse_url function."""

    def test_path_and_hostname(self) -> None:
        """Splits path and lowercased hostname."""
        assert parse_url("https://Blog.Example.com/a/b") == ("/a/b", "blog.example.com")

    def test_missing_url(self) -> None:
        """Missing URLs give empty parts."""
        assert parse_url(None) == ("", "")
        assert parse_url("") == ("", "")


class TestPageSignals:
    """Tests for PageSignals properties."""

    def test_subdomain(self) -> None:
        """First label of a three-part hostname is the subdomain."""
        assert PageSignals(hostname="blog.example.com").subdomain == "blog"
        assert PageSignals(hostname="example.com").subdomain == ""

    def test_path_segments(self) -> None:
        """Empty segments are dropped."""
        assert PageSignals(path="/docs//api/").path_segments == ["docs", "api"]

    def test_content_link_ratio_without_links(self) -> None:
        """No links does not divide by zero."""
        assert PageSignals(content_element_count=4).content_link_ratio == 4.0

    def test_to_dict_sorts_schema_types(self) -> None:
        """Serialized schema types are sorted."""
        d = PageSignals(schema_types=frozenset({"b", "a"})).to_dict()

        assert d["schema_types"] == ["a", "b"]


class TestCollectPageSignals:
    """Tests for collect_page_signals function."""

    def test_collects_dom_signals(self) -> None:
        """Detects author, date, price, cart and counts."""
        soup = soup_of(
            """
            <nav><a href="/">Home</a></nav>
            <div class="menu"><a href="/shop">Shop</a></div>
            <article>
                <span class="author">Jane</span>
                <time datetime="2024-05-01">May 1</time>
                <p>Text</p>
            </article>
            <span class="price">$20</span>
            <button class="add-to-cart">Add</button>
            """
        )
        signals = collect_page_signals(soup, "https://example.com/item")

        assert signals.has_author
        assert signals.has_publish_date
        assert signals.has_article_element
        assert signals.has_price
        assert signals.has_add_to_cart
        assert signals.nav_count == 2
        assert signals.link_count == 2
        assert signals.content_element_count == 2
        assert signals.path == "/item"

    def test_collects_article_markers(self) -> None:
        """Detects bylines and article itemtypes."""
        soup = soup_of(
            '<div itemscope itemtype="https://schema.org/TechArticle">'
            '<span class="byline">By Dana</span></div>'
        )
        signals = collect_page_signals(soup, "https://example.com/a")

        assert signals.has_article_meta
        assert signals.has_article_itemtype
        assert not signals.has_article_element

    def test_empty_url_becomes_none(self) -> None:
        """An empty URL is treated as no URL."""
        signals = collect_page_signals(soup_of("<p>x</p>"), "")

        assert signals.url is None
        assert not signals.has_url
