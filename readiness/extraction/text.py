"""Text helpers shared by the extraction modules."""

import re
from collections.abc import Iterable

from bs4 import BeautifulSoup, Tag

# Containers that hold the primary content of a page, in priority order
MAIN_CONTENT_SELECTOR = 'main, article, [role="main"], .content, #content'

NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]

# Frequent English words that never make a useful topic, term or name
COMMON_WORDS = frozenset(
    {
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
        "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
        "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
        "or", "an", "will", "my", "one", "all", "would", "there", "their", "what",
        "so", "up", "out", "if", "about", "who", "get", "which", "go", "me",
        "when", "make", "can", "like", "time", "no", "just", "him", "know", "take",
        "people", "into", "year", "your", "good", "some", "could", "them", "see", "other",
        "than", "then", "now", "look", "only", "come", "its", "over",
    }
)  # fmt: skip

_WHITESPACE = re.compile(r"\s+")


def is_common_word(word: str) -> bool:
    return word.lower() in COMMON_WORDS


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def unique(values: Iterable[str], limit: int | None = None) -> tuple[str, ...]:
    """Deduplicate preserving first-seen order, optionally capped."""
    seen: dict[str, None] = {}
    for value in values:
        if value not in seen:
            seen[value] = None
    result = tuple(seen)
    return result[:limit] if limit is not None else result


def strip_non_content(soup: BeautifulSoup) -> None:
    """Remove script-like elements in place."""
    for tag in soup.find_all(NON_CONTENT_TAGS):
        tag.decompose()


def outermost(elements: list[Tag]) -> list[Tag]:
    """Drop elements nested inside another element of the same list."""
    ids = {id(el) for el in elements}
    return [el for el in elements if not any(id(parent) in ids for parent in el.parents)]


def main_content_elements(soup: BeautifulSoup) -> list[Tag]:
    return outermost(soup.select(MAIN_CONTENT_SELECTOR))


def element_text(element: Tag) -> str:
    return collapse_whitespace(element.get_text(" ", strip=True))


def flatten_text(soup: BeautifulSoup) -> str:
    """Flattened page text from the main containers, else the body."""
    containers = main_content_elements(soup)
    text = " ".join(element_text(el) for el in containers)
    if text.strip():
        return text.strip()

    body = soup.body or soup
    return element_text(body)
