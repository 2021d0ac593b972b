"""Structural content sampling.

Pulls bounded samples out of a parsed page: title, meta description,
headings with the text that follows them, paragraphs, lists, statistics,
comparisons, key terms, technical terms and topics. Every limit here keeps
the content model small enough to reuse in recommendation text.
"""

import re
from collections import Counter
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from readiness.extraction.text import collapse_whitespace, element_text, is_common_word, unique
from readiness.models import DEFAULT_PRIMARY_TOPIC, ContentList, Heading

HEADING_TAGS = ["h1", "h2", "h3", "h4"]
MAX_HEADINGS = 20
HEADING_CONTENT_CHARS = 200
HEADING_SIBLING_LIMIT = 10

MIN_PARAGRAPH_CHARS = 50
MAX_PARAGRAPHS = 10

MAX_LISTS = 5
MAX_LIST_ITEMS = 10
MAX_LIST_ITEM_CHARS = 100

# Title text from these words onwards is usually widget/nav noise
TITLE_UI_PATTERN = re.compile(
    r"\b(?:logo|icon|navigation|menu|close|open|toggle|button|click|tap|swipe)\b",
    re.IGNORECASE,
)

PERCENTAGE_PATTERN = re.compile(r"(\w+\s+)?(\d+(?:\.\d+)?%)")
MEASUREMENT_PATTERN = re.compile(
    r"\d+(?:,\d+)*(?:\.\d+)?\s*(?:million|billion|thousand|users|customers|transactions|"
    r"requests|visitors|downloads|installs)",
    re.IGNORECASE,
)
CURRENCY_PATTERN = re.compile(r"[$€£¥]\d+(?:,\d+)*(?:\.\d+)?(?:\s*(?:million|billion|k|K|M|B))?")
STATISTICS_PER_KIND = 5
MAX_STATISTICS = 10

COMPARISON_HEADING_PATTERN = re.compile(
    r"\b(vs|versus|compared to|comparison|differences?|better than|alternative)\b",
    re.IGNORECASE,
)
COMPARISON_PHRASE_PATTERN = re.compile(r"\b\w+\s+(?:vs|versus|compared to)\s+\w+\b", re.IGNORECASE)
MAX_COMPARISONS = 5

KEY_TERM_PAIR_WORDS = 1000
KEY_TERM_FREQUENCY_WORDS = 5000
KEY_TERM_MIN_COUNT = 4
MAX_FREQUENT_TERMS = 10
MAX_KEY_TERMS = 15

TECHNICAL_PATTERNS = [
    re.compile(r"\b[A-Z]{2,}(?:\s+[A-Z]{2,})*\b"),  # Acronyms like API, REST API
    re.compile(r"\b\w+(?:js|JS|py|\.io|\.ai|\.com)\b"),  # Tech names
    re.compile(r"\b(?:API|SDK|REST|JSON|XML|HTML|CSS|SQL)\b", re.IGNORECASE),
]
TECHNICAL_SCAN_CHARS = 50_000
TECHNICAL_PER_PATTERN = 20
MAX_TECHNICAL_TERMS = 10

TITLE_SPLIT_PATTERN = re.compile(r"[\s\-–—:|]+")
DOMAIN_TOPICS = [
    (
        re.compile(r"\b(payment|transaction|checkout|billing|invoice)", re.IGNORECASE),
        "payment processing",
    ),
    (re.compile(r"\b(product|shop|cart|buy|price|sale)", re.IGNORECASE), "e-commerce"),
    (
        re.compile(r"\b(api|endpoint|integration|sdk|documentation)", re.IGNORECASE),
        "technical documentation",
    ),
    (re.compile(r"\b(blog|article|post|story|news)", re.IGNORECASE), "content publishing"),
]
MAX_TOPICS = 5


@dataclass(frozen=True)
class Topics:
    """Primary topic plus the small topic set it belongs to."""

    primary: str
    all: tuple[str, ...]


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    content = tag.get("content") or ""
    return content.strip() if isinstance(content, str) else ""


def extract_title(soup: BeautifulSoup) -> str:
    """Page title from <title>, og:title or the first h1, minus UI noise."""
    title_tag = soup.find("title")
    title = element_text(title_tag) if title_tag else ""
    if not title:
        title = _meta_content(soup, property="og:title")
    if not title:
        h1 = soup.find("h1")
        title = element_text(h1) if h1 else ""

    match = TITLE_UI_PATTERN.search(title)
    if match and match.start() > 0:
        title = title[: match.start()].strip()

    return title


def extract_meta_description(soup: BeautifulSoup) -> str:
    return (
        _meta_content(soup, name="description")
        or _meta_content(soup, property="og:description")
        or _meta_content(soup, name="twitter:description")
    )


def _content_after(heading: Tag) -> str:
    """Text of the siblings following a heading, up to the next heading."""
    collected = ""
    sibling = heading.find_next_sibling()
    steps = 0
    while (
        sibling is not None
        and sibling.name not in HEADING_TAGS
        and len(collected) < HEADING_CONTENT_CHARS
        and steps < HEADING_SIBLING_LIMIT
    ):
        collected += " " + element_text(sibling)
        sibling = sibling.find_next_sibling()
        steps += 1
    return collected.strip()[:HEADING_CONTENT_CHARS]


def extract_headings(soup: BeautifulSoup) -> tuple[Heading, ...]:
    headings: list[Heading] = []
    for tag in soup.find_all(HEADING_TAGS):
        text = element_text(tag)
        if not text:
            continue
        headings.append(Heading(level=int(tag.name[1]), text=text, content=_content_after(tag)))
        if len(headings) >= MAX_HEADINGS:
            break
    return tuple(headings)


def extract_paragraphs(soup: BeautifulSoup) -> tuple[str, ...]:
    paragraphs: list[str] = []
    for tag in soup.find_all("p"):
        text = element_text(tag)
        if len(text) > MIN_PARAGRAPH_CHARS:
            paragraphs.append(text)
            if len(paragraphs) >= MAX_PARAGRAPHS:
                break
    return tuple(paragraphs)


def extract_lists(soup: BeautifulSoup) -> tuple[ContentList, ...]:
    lists: list[ContentList] = []
    for tag in soup.find_all(["ul", "ol"]):
        items = [
            element_text(li)[:MAX_LIST_ITEM_CHARS]
            for li in tag.find_all("li", recursive=False)
        ]
        items = [item for item in items if item][:MAX_LIST_ITEMS]
        if items:
            lists.append(ContentList(type=tag.name, items=tuple(items)))
            if len(lists) >= MAX_LISTS:
                break
    return tuple(lists)


def extract_statistics(text: str) -> tuple[str, ...]:
    """Percentages, unit-suffixed numbers and currency amounts."""
    found: list[str] = []
    for pattern in (PERCENTAGE_PATTERN, MEASUREMENT_PATTERN, CURRENCY_PATTERN):
        matches = [m.group(0).strip() for m in pattern.finditer(text)]
        found.extend(matches[:STATISTICS_PER_KIND])
    return unique(found, MAX_STATISTICS)


def extract_comparisons(soup: BeautifulSoup, text: str) -> tuple[str, ...]:
    comparisons: list[str] = []
    for tag in soup.find_all(HEADING_TAGS):
        heading_text = element_text(tag)
        if heading_text and COMPARISON_HEADING_PATTERN.search(heading_text):
            comparisons.append(heading_text)
    comparisons.extend(m.group(0) for m in COMPARISON_PHRASE_PATTERN.finditer(text))
    return unique(comparisons, MAX_COMPARISONS)


def extract_key_terms(text: str) -> tuple[str, ...]:
    """Capitalized word pairs plus frequently repeated long words."""
    words = text.split()
    terms: list[str] = []

    for first, second in zip(words[:KEY_TERM_PAIR_WORDS], words[1 : KEY_TERM_PAIR_WORDS + 1]):
        if first[:1].isupper() and second[:1].isupper():
            terms.append(f"{first} {second}")

    counts: Counter[str] = Counter()
    for word in words[:KEY_TERM_FREQUENCY_WORDS]:
        cleaned = re.sub(r"[^a-z0-9]", "", word.lower())
        if len(cleaned) > 4 and not is_common_word(cleaned):
            counts[cleaned] += 1

    frequent = [word for word, count in counts.most_common() if count >= KEY_TERM_MIN_COUNT]
    terms.extend(frequent[:MAX_FREQUENT_TERMS])

    return unique(terms, MAX_KEY_TERMS)


def extract_technical_terms(text: str) -> tuple[str, ...]:
    sample = text[:TECHNICAL_SCAN_CHARS]
    terms: list[str] = []
    for pattern in TECHNICAL_PATTERNS:
        matches = [m.group(0) for m in pattern.finditer(sample)]
        terms.extend(matches[:TECHNICAL_PER_PATTERN])
    return unique(terms, MAX_TECHNICAL_TERMS)


def detect_topics(title: str, headings: tuple[Heading, ...]) -> Topics:
    """Primary topic from the title, topic set from domain vocabulary."""
    all_text = " ".join([title or ""] + [h.text for h in headings])
    words = [w for w in all_text.lower().split() if len(w) > 3 and not is_common_word(w)]
    top_words = [word for word, _ in Counter(words).most_common(10)]

    title_words = [w for w in TITLE_SPLIT_PATTERN.split(title or "") if len(w) > 2]
    primary = " ".join(title_words[:3]) or (top_words[0] if top_words else DEFAULT_PRIMARY_TOPIC)

    topics = [primary]
    for pattern, topic in DOMAIN_TOPICS:
        if pattern.search(all_text):
            topics.append(topic)

    return Topics(primary=primary, all=unique(topics, MAX_TOPICS))


def detect_language(soup: BeautifulSoup) -> str:
    html = soup.find("html")
    lang = html.get("lang") if html is not None else None
    if isinstance(lang, str) and lang.strip():
        return collapse_whitespace(lang).split("-")[0].lower()
    return "en"


def count_words(text: str) -> int:
    return len(text.split())
