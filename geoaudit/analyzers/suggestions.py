"""Content suggestions — keyword, blog title, outline and FAQ ideas.

The four idea lists come from a suggestion strategy:
  StaticCatalogue  — fixed catalogues, identical for every page (default)
  ContentDerived   — built from the page's own title and headings, falling
                     back to the static catalogue for any empty list
Only `ai_improvements` depends on the GEO score.
"""

import re
from dataclasses import dataclass
from typing import Protocol

from ..models import (
    AiImprovement,
    BlogTitle,
    ContentRecord,
    ContentSuggestions,
    Faq,
    Platform,
    Priority,
    VisibilityLevel,
)


MAX_IMPROVEMENTS = 6

MISSING_KEYWORDS = [
    "SEO optimization",
    "website performance",
    "search engine ranking",
    "content marketing",
    "digital marketing",
]

BLOG_TITLES = [
    BlogTitle(title="How to Improve Your Page Speed for Better Rankings in 2024",
              target="page speed optimization, Core Web Vitals"),
    BlogTitle(title="The Complete Guide to AI-Friendly Content Creation",
              target="AI optimization, content structure"),
    BlogTitle(title="SEO vs GEO: What's the Difference and Why It Matters",
              target="generative engine optimization, SEO comparison"),
    BlogTitle(title="Schema Markup: The Secret to Better AI Visibility",
              target="structured data, schema implementation"),
]

CONTENT_STRUCTURE = [
    "## What is SEO Optimization?",
    "### Definition and Core Principles",
    "### Why SEO Matters in 2024",
    "## Traditional SEO vs. AI Optimization",
    "### Search Engine Optimization Basics",
    "### Generative Engine Optimization (GEO)",
    "## Step-by-Step Implementation Guide",
    "### Technical SEO Checklist",
    "### Content Optimization Strategies",
    "## Measuring Success",
    "### Key Performance Indicators",
    "### Tools and Analytics",
]

FAQS = [
    Faq(question="What is a good page speed score?",
        answer="A good page speed score is above 90 for mobile and desktop. Core Web Vitals should meet "
               "Google's thresholds: LCP under 2.5s, FID under 100ms, and CLS under 0.1."),
    Faq(question="How can I optimize images without losing quality?",
        answer="Use modern formats like WebP or AVIF, implement lazy loading, compress images to 80-85% "
               "quality, and serve responsive images using srcset attributes."),
    Faq(question="What's the difference between SEO and GEO?",
        answer="SEO optimizes for search engines like Google, while GEO (Generative Engine Optimization) "
               "optimizes for AI platforms like ChatGPT and Perplexity that generate direct answers."),
    Faq(question="How important is schema markup for AI visibility?",
        answer="Schema markup is crucial for AI platforms to understand your content context, entity "
               "relationships, and factual information, significantly improving visibility in "
               "AI-generated responses."),
]

AI_VISIBILITY = {
    Platform.CHATGPT: VisibilityLevel.MEDIUM,
    Platform.PERPLEXITY: VisibilityLevel.LOW,
    Platform.CLAUDE: VisibilityLevel.MEDIUM,
    Platform.BARD: VisibilityLevel.LOW,
}

# (upper bound on ai_score, improvements); a band applies when score < bound.
# The last band applies from 85 up.
IMPROVEMENT_BANDS = [
    (50, [
        AiImprovement(action="Add TL;DR Summary Section",
                      description="Add a 2-3 sentence summary at the top of your page covering the main points for AI tools",
                      impact=Priority.HIGH, priority=1),
        AiImprovement(action="Create FAQ Schema Markup",
                      description="Add common questions and their answers in structured data format so AI can easily understand",
                      impact=Priority.HIGH, priority=2),
    ]),
    (75, [
        AiImprovement(action="Improve Content Structure with Clear Headings",
                      description="Use H2/H3 headings that directly answer questions (What is, How to, Why)",
                      impact=Priority.HIGH, priority=3),
        AiImprovement(action='Add "People Also Ask" Section',
                      description="Add related questions and their short answers that users commonly ask",
                      impact=Priority.MEDIUM, priority=4),
        AiImprovement(action="Include Specific Dates and Statistics",
                      description="Add current year, numbers, and specific data points that AI tools can reference",
                      impact=Priority.MEDIUM, priority=5),
    ]),
    (85, [
        AiImprovement(action="Optimize for Voice Search Queries",
                      description="Add natural language phrases that people ask voice assistants",
                      impact=Priority.MEDIUM, priority=6),
        AiImprovement(action="Add Comparison Tables",
                      description="Present options, features, and alternatives in table format",
                      impact=Priority.MEDIUM, priority=7),
    ]),
]

ADVANCED_IMPROVEMENTS = [
    AiImprovement(action="Link to Authoritative Sources",
                  description="Reference Wikipedia, government sites, and trusted sources for credibility",
                  impact=Priority.LOW, priority=8),
    AiImprovement(action="Add Step-by-Step Instructions",
                  description="Convert process-based content into numbered lists",
                  impact=Priority.LOW, priority=9),
    AiImprovement(action="Implement Article Schema",
                  description="Add structured data for publisher, author, and publication date",
                  impact=Priority.LOW, priority=10),
]


def generate_ai_improvements(ai_score: int) -> list[AiImprovement]:
    improvements = []
    for bound, band_improvements in IMPROVEMENT_BANDS:
        if ai_score < bound:
            improvements.extend(i.model_copy() for i in band_improvements)
    if ai_score >= IMPROVEMENT_BANDS[-1][0]:
        improvements.extend(i.model_copy() for i in ADVANCED_IMPROVEMENTS)
    return improvements[:MAX_IMPROVEMENTS]


# --- Strategies ---

@dataclass
class Ideas:
    missing_keywords: list[str]
    blog_titles: list[BlogTitle]
    content_structure: list[str]
    faqs: list[Faq]


class SuggestionStrategy(Protocol):
    name: str

    def ideas(self, record: ContentRecord) -> Ideas: ...


class StaticCatalogue:
    name = "static"

    def ideas(self, record: ContentRecord) -> Ideas:
        return Ideas(
            missing_keywords=list(MISSING_KEYWORDS),
            blog_titles=[t.model_copy() for t in BLOG_TITLES],
            content_structure=list(CONTENT_STRUCTURE),
            faqs=[f.model_copy() for f in FAQS],
        )


TERM = re.compile(r"[a-z][a-z0-9'-]{3,}")
STOPWORDS = {
    "about", "after", "also", "best", "from", "have", "into", "more", "most",
    "that", "their", "them", "then", "there", "these", "they", "this", "what",
    "when", "where", "which", "while", "with", "your", "guide", "page", "home",
}
MAX_IDEAS = 5


class ContentDerived:
    """Ideas built from the page itself; empty lists fall back to the catalogue."""

    name = "content"

    def ideas(self, record: ContentRecord) -> Ideas:
        fallback = StaticCatalogue().ideas(record)
        return Ideas(
            missing_keywords=self._missing_keywords(record) or fallback.missing_keywords,
            blog_titles=self._blog_titles(record) or fallback.blog_titles,
            content_structure=self._outline(record) or fallback.content_structure,
            faqs=self._faqs(record) or fallback.faqs,
        )

    def _missing_keywords(self, record: ContentRecord) -> list[str]:
        # Title terms the headings never pick up
        heading_text = " ".join(h.text.lower() for h in record.headings)
        keywords = []
        for term in TERM.findall(record.title.lower()):
            if term in STOPWORDS or term in heading_text or term in keywords:
                continue
            keywords.append(term)
        return keywords[:MAX_IDEAS]

    def _blog_titles(self, record: ContentRecord) -> list[BlogTitle]:
        topic = record.title or "this topic"
        titles = []
        for heading in record.headings:
            if heading.level != 2:
                continue
            text = heading.text.strip().rstrip("?:").strip()
            if not text:
                continue
            if heading.text.strip().endswith("?"):
                title = f"{text}? A Complete Answer"
            else:
                title = f"{text}: A Practical Guide"
            titles.append(BlogTitle(title=title, target=topic))
        return titles[:MAX_IDEAS]

    def _outline(self, record: ContentRecord) -> list[str]:
        return [
            f"{'#' * h.level} {h.text}"
            for h in record.headings
            if h.level >= 2
        ]

    def _faqs(self, record: ContentRecord) -> list[Faq]:
        return [
            Faq(question=h.text,
                answer=f'Answer "{h.text}" in 2-3 direct sentences right below the heading.')
            for h in record.headings
            if h.text.endswith("?")
        ][:MAX_IDEAS]


STRATEGIES = {s.name: s for s in (StaticCatalogue(), ContentDerived())}


def strategy_named(name: str) -> SuggestionStrategy:
    try:
        return STRATEGIES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown suggestion strategy {name!r}; expected one of {', '.join(STRATEGIES)}"
        ) from None


def generate_content_suggestions(
    record: ContentRecord,
    ai_score: int,
    strategy: SuggestionStrategy | None = None,
) -> ContentSuggestions:
    ideas = (strategy or StaticCatalogue()).ideas(record)
    return ContentSuggestions(
        missing_keywords=ideas.missing_keywords,
        blog_titles=ideas.blog_titles,
        content_structure=ideas.content_structure,
        faqs=ideas.faqs,
        ai_visibility=dict(AI_VISIBILITY),
        ai_improvements=generate_ai_improvements(ai_score),
    )


def empty_suggestions() -> ContentSuggestions:
    """Suggestions for an audit that skipped the section."""
    return ContentSuggestions()
