"""Content-aware recommendation personalization.

Rewrites a recommendation template using what was extracted from the page:
the page type frames the "why", the business type and topic shape the
examples, and page-type guidance is appended to the fix.
"""

import re
from dataclasses import dataclass, replace
from datetime import date
from urllib.parse import urlparse

from readiness.exceptions import PersonalizationError
from readiness.fixes.artifacts import generate_semantic_url, slugify, stable_choice
from readiness.fixes.templates import Example, RecommendationTemplate
from readiness.models import BusinessType, ExtractedContent, PageType

PAYMENT_LISTICLE_NUMBERS: tuple[str, ...] = ("7", "10", "12")
DEFAULT_SEMANTIC_URL_BEFORE = "/blog/post-123"
DEFAULT_LLMS_DOMAIN = "yoursite.com"


@dataclass(frozen=True)
class PageTypeContext:
    """Framing added around the "why" of every recommendation."""

    prefix: str
    suffix: str


_ARTICLE_CONTEXT = PageTypeContext(
    prefix="For blog content,",
    suffix="This increases chances of being cited as a source by AI.",
)

PAGE_TYPE_CONTEXTS: dict[PageType, PageTypeContext] = {
    PageType.HOMEPAGE: PageTypeContext(
        prefix="As your homepage,",
        suffix="This helps AI understand your entire site's purpose and structure.",
    ),
    PageType.ARTICLE: _ARTICLE_CONTEXT,
    PageType.BLOG: _ARTICLE_CONTEXT,
    PageType.PRODUCT: PageTypeContext(
        prefix="On product pages,",
        suffix="This helps AI recommend your products in shopping queries.",
    ),
    PageType.CATEGORY: PageTypeContext(
        prefix="For category pages,",
        suffix="This helps AI understand your product organization.",
    ),
    PageType.DOCUMENTATION: PageTypeContext(
        prefix="In documentation,",
        suffix="This makes your docs the go-to reference for AI coding assistance.",
    ),
    PageType.ABOUT: PageTypeContext(
        prefix="On your about page,",
        suffix="This establishes credibility and expertise for AI.",
    ),
    PageType.CONTACT: PageTypeContext(
        prefix="For contact pages,",
        suffix="This ensures AI can accurately direct users to you.",
    ),
    PageType.SEARCH: PageTypeContext(
        prefix="On search results,",
        suffix="This helps AI understand your content organization.",
    ),
}
GENERAL_CONTEXT = PageTypeContext(
    prefix="",
    suffix="This improves overall AI comprehension of your content.",
)

_ARTICLE_UNIQUE_STATS_FIX = (
    "Include research data, survey results, or case study metrics to boost credibility."
)
_ARTICLE_STRUCTURED_DATA_FIX = "Add Article or BlogPosting schema with author and datePublished."

PAGE_TYPE_FIXES: dict[str, dict[PageType, str]] = {
    "uniqueStats": {
        PageType.HOMEPAGE: (
            'For homepages, include company metrics like "serving 10,000+ customers" or '
            '"99.9% uptime".'
        ),
        PageType.PRODUCT: (
            "For products, add specifications like dimensions, weight, materials, and "
            "performance metrics."
        ),
        PageType.ARTICLE: _ARTICLE_UNIQUE_STATS_FIX,
        PageType.BLOG: _ARTICLE_UNIQUE_STATS_FIX,
        PageType.DOCUMENTATION: (
            "Add performance benchmarks, version numbers, and compatibility statistics."
        ),
    },
    "structuredData": {
        PageType.HOMEPAGE: "Use Organization schema with complete NAP (Name, Address, Phone) data.",
        PageType.PRODUCT: "Implement Product schema with price, availability, and review data.",
        PageType.ARTICLE: _ARTICLE_STRUCTURED_DATA_FIX,
        PageType.BLOG: _ARTICLE_STRUCTURED_DATA_FIX,
        PageType.DOCUMENTATION: "Use TechArticle or HowTo schema for technical content.",
    },
    "mainContent": {
        PageType.HOMEPAGE: (
            "Ensure your value proposition and key services are inside <main> tags."
        ),
        PageType.CATEGORY: "Place product listings and filters within <main> tags.",
        PageType.SEARCH: "Wrap search results in <main> tags, exclude sidebars and ads.",
    },
    "directAnswers": {
        PageType.HOMEPAGE: 'Answer "What does [company] do?" in the first paragraph.',
        PageType.PRODUCT: 'Start with "This product is..." or "[Product] helps you...".',
        PageType.DOCUMENTATION: (
            "Begin each section with a one-sentence summary of what it covers."
        ),
    },
}

SCHEMA_TYPES: dict[BusinessType, str] = {
    BusinessType.PAYMENT: "FinancialService",
    BusinessType.ECOMMERCE: "Product",
    BusinessType.BLOG: "BlogPosting",
    BusinessType.NEWS: "NewsArticle",
    BusinessType.DOCUMENTATION: "TechArticle",
    BusinessType.CORPORATE: "Organization",
    BusinessType.EDUCATIONAL: "Course",
    BusinessType.OTHER: "Article",
}


def capitalize_words(text: str) -> str:
    """Capitalize each space-separated word and lowercase the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def create_direct_answer(question: str, content: str) -> str:
    lowered = question.lower()

    if "what is" in lowered:
        subject = re.sub(r"what is", "", question, count=1, flags=re.IGNORECASE)
        return f"{subject.replace('?', '').strip()} is {content[:100]}..."
    if "how" in lowered:
        task = re.sub(r"how (to|do|does)", "", question, count=1, flags=re.IGNORECASE)
        return f"To {task.replace('?', '').strip()}, {content[:80]}..."
    return content[:120] + "..."


class ContentAwarePersonalizer:
    """Personalizes recommendation templates for one extracted page."""

    def __init__(self, content: ExtractedContent, current_year: int | None = None):
        self.content = content
        self.current_year = current_year or date.today().year

    @property
    def topic(self) -> str:
        return self.content.primary_topic

    @property
    def business_type(self) -> BusinessType:
        return self.content.business_type

    @property
    def page_context(self) -> PageTypeContext:
        return PAGE_TYPE_CONTEXTS.get(self.content.page_type, GENERAL_CONTEXT)

    @property
    def schema_type(self) -> str:
        return SCHEMA_TYPES.get(self.business_type, "Article")

    def personalize(self, metric: str, template: RecommendationTemplate) -> RecommendationTemplate:
        """
        Return a personalized copy of a template.

        Raises:
            PersonalizationError: if the template cannot be personalized
        """
        try:
            example = template.example
            if example is not None:
                example = self.dynamic_example(metric) or example
            return replace(
                template,
                why=self.personalize_why(metric, template.why),
                fix=self.personalize_fix(metric, template.fix),
                example=example,
            )
        except Exception as e:
            raise PersonalizationError(
                f"Failed to personalize '{metric}': {e}", metric=metric
            ) from e

    def personalize_why(self, metric: str, why: str) -> str:
        context = self.page_context
        contextual = f"{context.prefix} {why}" if context.prefix else why
        lead = ""

        if metric == "listicleFormat" and self.business_type == BusinessType.PAYMENT:
            lead = "Payment-related content performs 40% better in listicle format. "
        elif metric == "uniqueStats":
            if self.content.content_samples.statistics:
                lead = (
                    "You have some statistics, but adding more will strengthen your "
                    f"{self.topic} content. "
                )
            else:
                lead = f"Your {self.topic} content lacks specific data points. "
        elif metric == "structuredData":
            lead = f"Help AI understand your {self.business_type.value} content better. "
        elif metric == "directAnswers" and self.content.detected_features.has_questions:
            lead = "Your questions need immediate answers for AI comprehension. "

        message = lead + contextual
        return f"{message} {context.suffix}" if context.suffix else message

    def personalize_fix(self, metric: str, fix: str) -> str:
        if metric == "structuredData":
            fix = fix.replace("Article schema", f"{self.schema_type} schema")

        guidance = PAGE_TYPE_FIXES.get(metric, {}).get(self.content.page_type)
        if guidance:
            fix = f"{fix} {guidance}"
        return fix

    def dynamic_example(self, metric: str) -> Example | None:
        """Example regenerated from page content, or None to keep the static one."""
        builders = {
            "listicleFormat": self._listicle_example,
            "semanticUrl": self._semantic_url_example,
            "directAnswers": self._direct_answer_example,
            "comparisonTables": self._comparison_table_example,
            "uniqueStats": self._unique_stats_example,
            "headingFrequency": self._heading_example,
            "structuredData": self._structured_data_example,
            "authorBio": self._author_bio_example,
            "dataMarkup": self._data_markup_example,
            "llmsTxtFile": self._llms_txt_example,
        }
        builder = builders.get(metric)
        return builder() if builder else None

    def _listicle_example(self) -> Example:
        title = self.content.content_samples.title or "Your Guide"
        topic = capitalize_words(self.topic or "content")

        if self.business_type == BusinessType.PAYMENT:
            number = stable_choice(PAYMENT_LISTICLE_NUMBERS, title)
            improved = f"{number} Essential {topic} Features Every Business Needs"
        elif self.business_type == BusinessType.ECOMMERCE:
            improved = f"15 {topic} Tips to Boost Your Sales"
        elif self.business_type == BusinessType.DOCUMENTATION:
            improved = f"10 {topic} Best Practices for Developers"
        elif self.business_type == BusinessType.BLOG:
            improved = f"7 {topic} Strategies That Actually Work"
        elif re.match(r"^\d+", title):
            improved = title
        else:
            improved = f"10 Essential {topic} Insights"

        return Example(before=title, after=improved)

    def _semantic_url_example(self) -> Example:
        source_url = self.content.source_url
        title = self.content.content_samples.title
        if source_url and title:
            return Example(before=source_url, after=generate_semantic_url(source_url, title))

        slug = slugify(self.topic, max_length=40)
        paths = {
            BusinessType.PAYMENT: f"/resources/{slug}-payment-guide",
            BusinessType.ECOMMERCE: f"/shop/{slug}",
            BusinessType.DOCUMENTATION: f"/docs/{slug}-reference",
            BusinessType.BLOG: f"/blog/{slug}-{self.current_year}",
        }
        return Example(
            before=DEFAULT_SEMANTIC_URL_BEFORE,
            after=paths.get(self.business_type, f"/{slug}"),
        )

    def _direct_answer_example(self) -> Example:
        samples = self.content.content_samples
        question = next(
            (h for h in samples.headings if "?" in h.text and h.content), None
        )
        if question is not None:
            answer = create_direct_answer(question.text, question.content)
            return Example(
                before=f"<h2>{question.text}</h2>\n<p>{question.content[:100]}...</p>",
                after=f"<h2>{question.text}</h2>\n<p>{answer}</p>",
            )

        example_question = f"What is {self.topic}?"
        paragraph = samples.paragraphs[0] if samples.paragraphs else "Content about the topic..."
        return Example(
            before=f"<h2>{example_question}</h2>\n<p>{paragraph[:100]}...</p>",
            after=(
                f"<h2>{example_question}</h2>\n"
                f"<p>{capitalize_words(self.topic)} is {paragraph[:80]}...</p>"
            ),
        )

    def _comparison_table_example(self) -> Example:
        comparisons = self.content.content_samples.comparisons
        if comparisons:
            comparison = comparisons[0]
            match = re.search(r"(\w+)\s+(?:vs|versus)\s+(\w+)", comparison, re.IGNORECASE)
            first, second = match.groups() if match else ("Option A", "Option B")
            return Example(
                before=(
                    f"<h2>{comparison}</h2>\n<p>{first} offers better performance while "
                    f"{second} has more features...</p>"
                ),
                after=(
                    f"<h2>{comparison}</h2>\n<table>\n"
                    f"  <tr><th>Feature</th><th>{first}</th><th>{second}</th></tr>\n"
                    "  <tr><td>Performance</td><td>Excellent</td><td>Good</td></tr>\n"
                    "  <tr><td>Features</td><td>Standard</td><td>Advanced</td></tr>\n"
                    "</table>"
                ),
            )

        if self.business_type == BusinessType.PAYMENT:
            return Example(
                before=(
                    "<h2>Payment Methods</h2>\n"
                    "<p>We support credit cards, debit cards, and digital wallets...</p>"
                ),
                after=(
                    "<h2>Payment Methods Comparison</h2>\n<table>\n"
                    "  <tr><th>Method</th><th>Processing Time</th><th>Fees</th></tr>\n"
                    "  <tr><td>Credit Card</td><td>Instant</td><td>2.9%</td></tr>\n"
                    "  <tr><td>Bank Transfer</td><td>1-3 days</td><td>$0.50</td></tr>\n"
                    "</table>"
                ),
            )

        return Example(
            before=f"<h2>{self.topic} Options</h2>\n<p>There are several options available...</p>",
            after=(
                f"<h2>{self.topic} Options Comparison</h2>\n<table>\n"
                "  <tr><th>Option</th><th>Benefits</th><th>Best For</th></tr>\n"
                "  <tr><td>Basic</td><td>Easy to start</td><td>Beginners</td></tr>\n"
                "  <tr><td>Pro</td><td>Advanced features</td><td>Professionals</td></tr>\n"
                "</table>"
            ),
        )

    def _unique_stats_example(self) -> Example:
        statistics = self.content.content_samples.statistics
        if statistics:
            stat = statistics[0]
            vague = re.sub(r"\d+(?:\.\d+)?", "many", stat, count=1).replace("$", "", 1)
            return Example(
                before=f"Our solution helps {vague} users",
                after=f"Our solution helps {stat} users ({self.current_year} data)",
            )

        if self.business_type == BusinessType.PAYMENT:
            return Example(
                before="Fast payment processing",
                after="Payment processing in under 2.3 seconds (98.5% success rate)",
            )
        if self.business_type == BusinessType.ECOMMERCE:
            return Example(
                before="Many satisfied customers",
                after="Over 50,000 satisfied customers with 4.8/5 average rating",
            )
        return Example(
            before=f"Popular {self.topic} solution",
            after="Trusted by 10,000+ users with 95% satisfaction rate (2024 survey)",
        )

    def _heading_example(self) -> Example:
        if any(len(p) > 500 for p in self.content.content_samples.paragraphs):
            return Example(
                before="<h2>Overview</h2>\n[500+ words without subheadings]",
                after=(
                    f"<h2>What is {self.topic}?</h2>\n[150 words]\n"
                    "<h3>Key Benefits</h3>\n[150 words]\n<h3>How It Works</h3>\n[200 words]"
                ),
            )
        return Example(
            before=f"<h2>{self.topic}</h2>\n[Long content block]",
            after=(
                f"<h2>Understanding {self.topic}</h2>\n[Content]\n"
                "<h3>Core Features</h3>\n[Content]\n<h3>Implementation Guide</h3>\n[Content]"
            ),
        )

    def _structured_data_example(self) -> Example:
        title = self.content.content_samples.title
        return Example(
            before=(
                f'<div class="content">\n  <h1>{title}</h1>\n'
                f"  <p>Content about {self.topic}...</p>\n</div>"
            ),
            after=(
                '<script type="application/ld+json">\n{\n'
                '  "@context": "https://schema.org",\n'
                f'  "@type": "{self.schema_type}",\n'
                f'  "name": "{title}",\n'
                f'  "description": "{self.topic}",\n'
                '  "author": {\n    "@type": "Organization",\n'
                '    "name": "Your Company"\n  }\n}</script>'
            ),
        )

    def _author_bio_example(self) -> Example:
        expertise = {
            BusinessType.PAYMENT: "payment systems",
            BusinessType.ECOMMERCE: "e-commerce",
            BusinessType.DOCUMENTATION: "technical documentation",
        }.get(self.business_type, self.topic)
        return Example(
            before="By Admin",
            after=(
                f"By Sarah Johnson, Senior {capitalize_words(expertise)} Specialist "
                "with 8 years experience"
            ),
        )

    def _data_markup_example(self) -> Example:
        lists = self.content.content_samples.lists
        if lists:
            content_list = lists[0]
            items = content_list.items[:3]
            rendered = "\n".join(f"  <li>{item}</li>" for item in items)
            return Example(
                before=". ".join(items) + ".",
                after=f"<{content_list.type}>\n{rendered}\n</{content_list.type}>",
            )

        if self.business_type == BusinessType.PAYMENT:
            return Example(
                before="We accept Visa, Mastercard, and PayPal",
                after=(
                    "<ul>\n  <li>Visa - Instant processing</li>\n"
                    "  <li>Mastercard - Instant processing</li>\n"
                    "  <li>PayPal - Secure checkout</li>\n</ul>"
                ),
            )
        return Example(
            before=f"{self.topic} includes feature A, feature B, and feature C",
            after=(
                f"<ul>\n  <li>Feature A - {self.topic}</li>\n"
                "  <li>Feature B - Enhanced performance</li>\n"
                "  <li>Feature C - Easy integration</li>\n</ul>"
            ),
        )

    def _llms_txt_example(self) -> Example:
        domain = DEFAULT_LLMS_DOMAIN
        if self.content.source_url:
            domain = urlparse(self.content.source_url).hostname or DEFAULT_LLMS_DOMAIN
        topics = ", ".join(self.content.detected_topics)
        return Example(
            before="No llms.txt file found",
            after=(
                f"# llms.txt for {domain}\n# AI Crawler Instructions\n\n"
                "Sitemap: /sitemap.xml\n"
                f"Content-Type: {self.business_type.value}\n"
                f"Content-Focus: {topics}\n"
                "Update-Frequency: weekly\n"
                f"Primary-Language: {self.content.language}"
            ),
        )
