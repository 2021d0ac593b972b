"""Business attribute, competitor and product name extraction.

Attribute extraction is table driven. For each field the patterns are tried
in order against the flattened page text and the first hit wins; later
patterns are never consulted once a field is set, so the order in
``ATTRIBUTE_PATTERNS`` is the priority.
"""

import re
from dataclasses import dataclass

from readiness.extraction.text import collapse_whitespace, is_common_word, unique
from readiness.models import BusinessAttributes, CompetitorMention, Sentiment


@dataclass(frozen=True)
class AttributePattern:
    """One candidate pattern for a business attribute field."""

    field: str
    pattern: re.Pattern[str]
    max_length: int | None = None


def _p(expression: str) -> re.Pattern[str]:
    return re.compile(expression, re.IGNORECASE)


# Ordered: within a field, earlier patterns take priority
ATTRIBUTE_PATTERNS: list[AttributePattern] = [
    # Industry
    AttributePattern(
        "industry",
        _p(
            r"(?:we are|we're|company is|business is)\s+(?:a|an)?\s*([\w\s]+)\s+"
            r"(?:company|business|startup|agency|firm)"
        ),
    ),
    AttributePattern(
        "industry", _p(r"(?:leading|premier|top)\s+([\w\s]+)\s+(?:provider|solution|platform|service)")
    ),
    AttributePattern("industry", _p(r"in the\s+([\w\s]+)\s+(?:industry|sector|space|market)")),
    # Target audience
    AttributePattern(
        "target_audience", _p(r"(?:built for|designed for|made for|created for)\s+([\w\s,]+)"), 100
    ),
    AttributePattern(
        "target_audience",
        _p(r"(?:help|helps|helping|serve|serves|serving)\s+([\w\s,]+)\s+(?:to|with|by)"),
        100,
    ),
    AttributePattern(
        "target_audience",
        _p(
            r"for\s+(businesses|companies|enterprises|startups|developers|teams|professionals|"
            r"individuals)\s+(?:who|that)"
        ),
        100,
    ),
    # Services
    AttributePattern(
        "main_service", _p(r"we\s+(?:provide|offer|deliver)\s+([\w\s]+)\s+(?:services|solutions)")
    ),
    AttributePattern("main_service", _p(r"our\s+([\w\s]+)\s+(?:service|solution|platform|software)")),
    # Unique value proposition
    AttributePattern("unique_value", _p(r"(?:only|first|unique)\s+([^.]+)\s+(?:that|to|in the)"), 200),
    AttributePattern(
        "unique_value", _p(r"unlike\s+(?:other|traditional)\s+[\w\s]+,\s+(?:we|our)\s+([^.]+)"), 200
    ),
    AttributePattern("unique_value", _p(r"what makes us different[:\s]+([^.]+)"), 200),
    # Mission
    AttributePattern(
        "mission_statement", _p(r"(?:our mission|mission is|we believe)\s*[:\s]+([^.]+)"), 200
    ),
    AttributePattern("mission_statement", _p(r"(?:committed to|dedicated to)\s+([^.]+)"), 200),
    # Founding year
    AttributePattern(
        "year_founded", _p(r"(?:founded|established|started|since)\s+(?:in\s+)?(\d{4})")
    ),
    # Location
    AttributePattern(
        "location", _p(r"(?:based in|located in|headquarters in)\s+([\w\s,]+)"), 100
    ),
    AttributePattern("location", _p(r"(?:offices in|presence in)\s+([\w\s,]+)"), 100),
    # Team size
    AttributePattern("team_size", _p(r"(\d+[\+]?)\s*(?:employees|team members|people)")),
]

# Captures are bounded to the name length limit so matching stays linear.
# A name must end at punctuation; longer runs are not names.
MAX_COMPETITOR_NAME = 50
_NAME = r"([A-Z][\w\s]{1,48})(?![\w\s])"

COMPETITOR_PATTERNS = [
    _p(r"(?:unlike|compared to|vs\.?|versus)\s+" + _NAME),
    _p(r"\b([A-Z][\w\s]{1,48}?)\s+(?:alternative|competitor)"),
    _p(r"better than\s+" + _NAME),
    _p(r"(?:compete with|competing with)\s+" + _NAME),
]
POSITIVE_CUES = ("better than", "superior to", "outperform", "advantage over")
NEGATIVE_CUES = ("worse than", "inferior", "lacking", "behind")
CONTEXT_WINDOW = 100
MAX_COMPETITORS = 10

PRODUCT_NAME_PATTERN = re.compile(
    r"\b[A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+){0,2}"
    r"(?:\s+(?:Pro|Plus|Premium|Enterprise|Basic|Standard|v?\d+(?:\.\d+)?))?"
)
PRODUCT_SCAN_CHARS = 50_000
PRODUCT_CANDIDATES = 50
MAX_PRODUCT_NAMES = 10


def extract_business_attributes(text: str) -> BusinessAttributes:
    """Fill business attribute fields from page copy, first match wins."""
    values: dict[str, str] = {}

    for rule in ATTRIBUTE_PATTERNS:
        if rule.field in values:
            continue
        match = rule.pattern.search(text)
        if not match:
            continue
        value = match.group(1).strip()
        if rule.max_length is not None:
            value = value[: rule.max_length]
        values[rule.field] = value

    return BusinessAttributes(**values)


def infer_sentiment(context: str) -> Sentiment:
    lowered = context.lower()
    if any(cue in lowered for cue in POSITIVE_CUES):
        return Sentiment.POSITIVE
    if any(cue in lowered for cue in NEGATIVE_CUES):
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def extract_competitor_mentions(text: str) -> tuple[CompetitorMention, ...]:
    """Find competitors named in comparative phrases."""
    mentions: list[CompetitorMention] = []
    seen: set[str] = set()

    for pattern in COMPETITOR_PATTERNS:
        for match in pattern.finditer(text):
            name = match.group(1).strip()
            if not (2 < len(name) < MAX_COMPETITOR_NAME) or is_common_word(name):
                continue

            normalized = collapse_whitespace(name)
            key = normalized.lower()
            if key in seen:
                continue
            seen.add(key)

            start = max(0, match.start() - CONTEXT_WINDOW)
            end = min(len(text), match.end() + CONTEXT_WINDOW)
            context = text[start:end].strip()

            mentions.append(
                CompetitorMention(
                    name=normalized,
                    context=context,
                    sentiment=infer_sentiment(context),
                )
            )

    return tuple(mentions[:MAX_COMPETITORS])


def extract_product_names(text: str, scan_chars: int = PRODUCT_SCAN_CHARS) -> tuple[str, ...]:
    """Capitalized names, optionally with a tier or version suffix."""
    names: list[str] = []
    for index, match in enumerate(PRODUCT_NAME_PATTERN.finditer(text[:scan_chars])):
        if index >= PRODUCT_CANDIDATES:
            break
        name = match.group(0)
        if len(name) > 3 and not is_common_word(name):
            names.append(name)

    return unique(names, MAX_PRODUCT_NAMES)
