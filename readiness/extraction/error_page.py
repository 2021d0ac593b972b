"""Error, block and CAPTCHA page detection.

Pages that are really an error screen or a bot challenge must not be scored
as content. Checks are cheap and ordered; the first that fires names the
reason.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from readiness.extraction.text import element_text, main_content_elements, outermost

MIN_CONTENT_CHARS = 200
EMPTY_MAIN_MAX_CHARS = 1000
SHORT_CONTENT_CHARS = 500
# Indicator phrases also count when main/article hold less text than this
THIN_ARTICLE_CHARS = 100
ARTICLE_BODY_SELECTOR = "main, article"
REPETITIVE_MAX_CHARS = 1000
REPETITION_RATIO_THRESHOLD = 5

ERROR_INDICATORS = (
    "error",
    "404",
    "403",
    "500",
    "502",
    "503",
    "page not found",
    "access denied",
    "forbidden",
    "blocked",
    "rate limit",
    "too many requests",
    "captcha",
    "verify you are human",
    "robot check",
    "cloudflare",
    "security check",
    "javascript is required",
    "enable javascript",
    "browser not supported",
    "please wait while we check",
    "checking your browser",
    "ddos protection",
    "one more step",
    "please complete the security check",
)


@dataclass(frozen=True)
class ErrorPageCheck:
    """Outcome of error page detection."""

    is_error: bool
    reason: str | None = None

    def to_dict(self) -> dict:
        return {"is_error": self.is_error, "reason": self.reason}


def repetition_ratio(text: str) -> float:
    """Words per distinct word; high values mean boilerplate repeated."""
    words = text.lower().split()
    if not words:
        return 0.0
    return len(words) / len(set(words))


def check_error_page(soup: BeautifulSoup, text: str) -> ErrorPageCheck:
    """
    Decide whether a page is an error or block page.

    Args:
        soup: Parsed document
        text: Flattened page text

    Returns:
        ErrorPageCheck with the first matching reason
    """
    content = (text or "").strip()
    length = len(content)

    if length < MIN_CONTENT_CHARS:
        return ErrorPageCheck(True, "too_short")

    main_text = " ".join(element_text(el) for el in main_content_elements(soup))
    if not main_text.strip() and length < EMPTY_MAIN_MAX_CHARS:
        return ErrorPageCheck(True, "empty_main_content")

    article_text = " ".join(
        element_text(el) for el in outermost(soup.select(ARTICLE_BODY_SELECTOR))
    )
    if length < SHORT_CONTENT_CHARS or len(article_text.strip()) < THIN_ARTICLE_CHARS:
        title_tag = soup.find("title")
        title = title_tag.get_text(strip=True).lower() if title_tag else ""
        lowered = content.lower()
        for indicator in ERROR_INDICATORS:
            if indicator in lowered or indicator in title:
                return ErrorPageCheck(True, f"indicator:{indicator}")

    if length < REPETITIVE_MAX_CHARS and repetition_ratio(content) > REPETITION_RATIO_THRESHOLD:
        return ErrorPageCheck(True, "repetitive_content")

    return ErrorPageCheck(False)


def is_error_page(soup: BeautifulSoup, text: str) -> bool:
    """True when the page is an error, block or challenge screen."""
    return check_error_page(soup, text).is_error
