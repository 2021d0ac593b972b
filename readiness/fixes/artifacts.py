"""Audit artifacts and the examples built from them.

Pillar auditors can hand over what they saw on the page (title, URL,
comparison headings, heading sections, domain, HTML size) as an explicit
``AuditArtifacts`` value. When no extracted content is available, the
generator uses these artifacts to turn generic template examples into
examples drawn from the audited page.
"""

import hashlib
import re
from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import urlparse

from readiness.fixes.templates import Example
from readiness.models import Heading

LISTICLE_NUMBERS: tuple[str, ...] = ("10", "7", "5", "15", "12")
FALLBACK_SEMANTIC_URL = "/blog/optimize-for-ai-search-2025"
MAX_SLUG_LENGTH = 60
LARGE_HTML_BYTES = 2 * 1024 * 1024


@dataclass(frozen=True)
class AuditArtifacts:
    """Side information captured by the pillar auditors for one page."""

    page_title: str | None = None
    page_url: str | None = None
    comparison_headings: tuple[str, ...] = ()
    heading_sections: tuple[Heading, ...] = ()
    domain: str | None = None
    html_size: int | None = None  # bytes

    @classmethod
    def from_dict(cls, data: dict) -> "AuditArtifacts":
        """Build artifacts from a JSON-style dict (snake_case keys)."""
        sections = tuple(
            Heading(
                level=int(section.get("level", 2)),
                text=str(section.get("text", "")),
                content=section.get("content"),
            )
            for section in data.get("heading_sections", [])
            if section.get("text")
        )
        html_size = data.get("html_size")
        return cls(
            page_title=data.get("page_title"),
            page_url=data.get("page_url"),
            comparison_headings=tuple(data.get("comparison_headings", [])),
            heading_sections=sections,
            domain=data.get("domain"),
            html_size=int(html_size) if html_size is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            "page_title": self.page_title,
            "page_url": self.page_url,
            "comparison_headings": list(self.comparison_headings),
            "heading_sections": [s.to_dict() for s in self.heading_sections],
            "domain": self.domain,
            "html_size": self.html_size,
        }


def stable_choice(options: Sequence[str], seed: str) -> str:
    """Pick an option from a seed string, the same one every run."""
    hash_value = int(hashlib.sha256(seed.encode("utf-8")).hexdigest(), 16)
    return options[hash_value % len(options)]


def slugify(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    slug = re.sub(r"[^a-z0-9\s-]", "", text.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug[:max_length]


def generate_listicle_title(title: str) -> str:
    """Rewrite a title as a numbered listicle title."""
    clean = re.sub(r"^\d+\s+", "", title)
    clean = re.sub(r"[\s\-–—]\d+\s+", " ", clean, count=1)
    number = stable_choice(LISTICLE_NUMBERS, clean)
    lowered = clean.lower()

    if "guide" in lowered:
        return f"{number} Essential {clean}"
    if "tips" in lowered or "ways" in lowered:
        return f"{number} {clean}"
    if "best" in lowered:
        return f"Top {number} {clean}"
    return f"{number} Key {clean} Strategies"


def generate_semantic_url(current_url: str, title: str) -> str:
    """
    Build a descriptive URL for a page from its title.

    Keeps the parent path of the current URL (numeric segments and segments
    of two characters or fewer removed) and replaces the last segment with
    a slug of the title.
    """
    parsed = urlparse(current_url)
    if not parsed.scheme or not parsed.netloc:
        return FALLBACK_SEMANTIC_URL

    parts = [
        part
        for part in parsed.path.split("/")
        if part and not part.isdigit() and len(part) > 2
    ]
    base_path = "/".join(parts[:-1])
    path = re.sub(r"/+", "/", f"/{base_path}/{slugify(title)}").rstrip("/")
    return f"{parsed.scheme}://{parsed.netloc}{path}"


def generate_direct_answer(heading: str, content: str) -> str:
    """Rewrite the start of a section as a direct answer to its heading."""
    lowered = heading.lower()

    if "what is" in lowered:
        subject = re.sub(r"what is", "", heading, count=1, flags=re.IGNORECASE)
        subject = subject.replace("?", "").strip()
        return f"{subject} is {content[:100]}..."
    if "how to" in lowered:
        task = re.sub(r"how to", "", heading, count=1, flags=re.IGNORECASE).strip()
        return f"To {task}, start by {content[:80]}..."
    if "why" in lowered:
        return f"This is important because {content[:100]}..."
    return f"{heading.replace('?', '')} can be understood as {content[:80]}..."


def format_html_size(size: int) -> str:
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.1f}MB"
    return f"{max(1, round(size / 1024))}KB"


def artifact_example(metric: str, artifacts: AuditArtifacts) -> Example | None:
    """
    Example for a check built from audit artifacts.

    Returns:
        The page-specific example, or None when the artifacts hold nothing
        for this check
    """
    if metric == "listicleFormat" and artifacts.page_title:
        return Example(
            before=artifacts.page_title,
            after=generate_listicle_title(artifacts.page_title),
        )

    if metric == "semanticUrl" and artifacts.page_url and artifacts.page_title:
        return Example(
            before=artifacts.page_url,
            after=generate_semantic_url(artifacts.page_url, artifacts.page_title),
        )

    if metric == "directAnswers" and artifacts.heading_sections:
        section = artifacts.heading_sections[0]
        content = section.content or ""
        return Example(
            before=f"<h2>{section.text}</h2>\n<p>{content[:100]}...</p>",
            after=(
                f"<h2>{section.text}</h2>\n"
                f"<p>{generate_direct_answer(section.text, content)}</p>"
            ),
        )

    if metric == "llmsTxtFile" and artifacts.domain:
        return Example(
            before=f"No llms.txt file found at {artifacts.domain}",
            after=(
                f"# llms.txt for {artifacts.domain}\n# AI Crawler Instructions\n\n"
                "Sitemap: /sitemap.xml\nContent-Type: article\n"
                "Update-Frequency: weekly\nPrimary-Language: en"
            ),
        )

    if metric == "comparisonTables" and artifacts.comparison_headings:
        heading = artifacts.comparison_headings[0]
        return Example(
            before=f"<h2>{heading}</h2>\n<p>Detailed comparison text...</p>",
            after=(
                f"<h2>{heading}</h2>\n<table>\n"
                "  <tr><th>Feature</th><th>Option A</th><th>Option B</th></tr>\n"
                "  <tr><td>Speed</td><td>Fast</td><td>Faster</td></tr>\n</table>"
            ),
        )

    if metric == "htmlSize" and artifacts.html_size and artifacts.html_size > LARGE_HTML_BYTES:
        return Example(
            before=f"Page size: {format_html_size(artifacts.html_size)}",
            after="Page size: under 2MB (comments and widgets load on demand)",
        )

    return None
