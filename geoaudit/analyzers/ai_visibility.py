"""AI platform visibility analyzer — 12 equally weighted factors.

Each assessor is a pure function of the ContentRecord returning 0-100.
Bases are deliberately low for most factors so pages differentiate;
the catalogue's floor is applied together with the 100 ceiling after
the raw score is computed.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Callable

from ..models import AiVisibilityAssessment, ContentRecord, Factor, FactorResult
from ..scorer import build_assessment, clamp, round_half_up, status_for
from .patterns import any_present, band, capped, count_matches, count_present, headings_at, split_paragraphs
from .recommendations import generate_recommendations


# --- 1. Crawlability ---

LOGIN_TERMS = ("login", "sign in", "register")
PAYWALL_TERMS = ("subscription", "premium", "paywall")
PUBLIC_TERMS = ("free", "public", "open access")
ERROR_TITLE_MARKERS = ("404", "error")


def assess_crawlability(record: ContentRecord) -> int:
    score = 70
    content = record.content.lower()

    if any_present(content, LOGIN_TERMS):
        score -= 30
    if any_present(content, PAYWALL_TERMS):
        score -= 20
    if any_present(content, PUBLIC_TERMS):
        score += 20

    title = record.title.lower()
    if title and not any_present(title, ERROR_TITLE_MARKERS):
        score += 15

    return score


# --- 2. HTML structure ---

def assess_html_structure(record: ContentRecord) -> int:
    score = 0

    h1_count = len(headings_at(record, 1))
    if h1_count == 1:
        score += 25
    elif h1_count > 1:
        score += 10

    if headings_at(record, 2):
        score += 25
    if headings_at(record, 3):
        score += 15

    if len(record.title) > 10:
        score += 20
    if len(record.meta_description) > 50:
        score += 15

    return score


# --- 3. Content clarity ---

INTRO_TERMS = ("what is", "introduction", "overview", "in this article", "this guide")
QUESTION_TERMS = ("how to", "why", "when", "where", "which", "who")
DEFINITION_TERMS = ("definition", "means", "refers to", "is defined as", "can be defined")


def _word_count_points(word_count: int) -> int:
    if 500 < word_count < 2000:
        return 25
    if 2000 <= word_count < 4000:
        return 20
    if 300 <= word_count <= 500:
        return 15
    if word_count < 300:
        return 5
    return 0


def assess_content_clarity(record: ContentRecord) -> int:
    score = 10
    content = record.content.lower()

    if any_present(content, INTRO_TERMS):
        score += 20
    score += capped(count_present(content, QUESTION_TERMS), 8, 25)
    if any_present(content, DEFINITION_TERMS):
        score += 15

    score += _word_count_points(record.word_count)

    # Topic consistency: share of meaningful title words found in the body
    if record.title:
        title_words = [w for w in record.title.lower().split(" ") if len(w) > 3]
        mentioned = count_present(content, title_words)
        score += round_half_up(mentioned / max(len(title_words), 1) * 15)

    return score


# --- 4. Scannability ---

LIST_MARKER = re.compile(r"[•*\-]\s")
NUMBERED_ITEM = re.compile(r"(?<!\d)\d+\.\s")
FORMATTING_PATTERNS = [
    re.compile(r"\*\*.*?\*\*"),      # bold
    re.compile(r"\*.*?\*"),          # italic
    re.compile(r":\s*$", re.M),      # lead-in lines
    re.compile(r"^[ \t]*[-•]\s", re.M),  # list items
]


def assess_scannability(record: ContentRecord) -> int:
    score = 5
    content = record.content

    paragraphs = split_paragraphs(content)
    if paragraphs:
        avg_chars = sum(len(p) for p in paragraphs) / len(paragraphs)
        if avg_chars < 200:
            score += 30
        elif avg_chars < 400:
            score += 25
        elif avg_chars < 600:
            score += 15
        else:
            score += 5

    list_items = count_matches(content, [LIST_MARKER, NUMBERED_ITEM])
    score += band(list_items, [(10, 25), (5, 20), (2, 15), (0, 10)])

    # Headings per ~200 words
    heading_ratio = len(record.headings) / max(record.word_count / 200, 1)
    score += band(heading_ratio, [(0.8, 25), (0.5, 20), (0.3, 15), (0.1, 10)])

    formatting = sum(
        capped(len(p.findall(content)), 2, 10) for p in FORMATTING_PATTERNS
    )
    score += min(formatting, 20)

    return score


# --- 5. Summary sections ---

def assess_summary_sections(record: ContentRecord) -> int:
    content = record.content.lower()
    score = 0

    if any_present(content, ("tl;dr", "tldr")):
        score += 40
    if any_present(content, ("summary", "key points", "takeaways")):
        score += 30
    if any_present(content, ("conclusion", "to summarize")):
        score += 30

    return score


# --- 6. Q&A format ---

QUESTION_HEADING_STARTS = ("how ", "what ", "why ")


def _is_question_heading(text: str) -> bool:
    text = text.lower()
    return "?" in text or text.startswith(QUESTION_HEADING_STARTS)


def assess_qa_format(record: ContentRecord) -> int:
    content = record.content.lower()
    score = 0

    if any_present(content, ("q:", "question:", "faq")):
        score += 40
    if any_present(content, ("a:", "answer:")):
        score += 30
    if any(_is_question_heading(h.text) for h in record.headings):
        score += 30

    return score


# --- 7. Schema markup ---

SCHEMA_TYPE_BONUS = {"FAQPage": 20, "Article": 15, "HowTo": 15}


def assess_schema_markup(record: ContentRecord) -> int:
    if not record.has_schema:
        return 0
    score = 50
    for schema_type, bonus in SCHEMA_TYPE_BONUS.items():
        if schema_type in record.schema_types:
            score += bonus
    return score


# --- 8. Trusted entities ---

AUTHORITY_DOMAINS = ("wikipedia", ".gov", ".edu", ".org", "reuters", "bbc", "cnn", "nytimes", "wsj")
RESEARCH_TERMS = ("research", "study", "university", "journal", "published", "peer review", "academic")
INDUSTRY_TERMS = ("according to", "expert", "specialist", "authority", "leader in", "established")
CITATION_TERMS = ("source:", "reference", "citation")
ENTITY_SUFFIXES = ("inc.", "corp.", "ltd.", "company", "organization", "institute")


def assess_trusted_entities(record: ContentRecord) -> int:
    score = 5
    content = record.content.lower()

    score += capped(count_present(content, AUTHORITY_DOMAINS), 12, 35)
    score += capped(count_present(content, RESEARCH_TERMS), 8, 25)
    score += capped(count_present(content, INDUSTRY_TERMS), 5, 20)

    external_links = sum(1 for link in record.links if not link.is_internal)
    score += capped(external_links, 3, 20)

    if any_present(content, CITATION_TERMS):
        score += 15
    score += capped(count_present(content, ENTITY_SUFFIXES), 4, 15)

    return score


# --- 9. Data extraction formats ---

BULLET_PATTERNS = [
    re.compile(r"[•*]\s"),
    re.compile(r"^[ \t]*[-*+]\s", re.M),
    re.compile(r"▪\s"),
    re.compile(r"◦\s"),
]
NUMBERED_LINE = re.compile(r"^[ \t]*\d+\.\s", re.M)
STAT_PATTERNS = [
    re.compile(r"(?<!\d)\d+%"),
    re.compile(r"\$\d+(?:,\d{3})*"),
    re.compile(r"(?<!\d)\d+,\d{3}"),
    re.compile(r"(?<!\d)\d+\.\d+"),
    re.compile(r"(?<!\d)\d+\s?(?:million|billion|thousand)", re.I),
    re.compile(r"(?<!\d)\d+\s?(?:hours?|days?|weeks?|months?|years?)", re.I),
    re.compile(r"(?<!\d)\d+\s?(?:people|users|customers|companies)", re.I),
]
TABLE_TERMS = ("table", "chart", "graph", "figure", "data shows", "statistics")
COMPARISON_PATTERNS = [
    re.compile(r"vs\.?\s", re.I),
    re.compile(r"versus", re.I),
    re.compile(r"compared to", re.I),
    re.compile(r"in contrast", re.I),
    re.compile(r"on the other hand", re.I),
]
CODE_PATTERNS = [
    re.compile(r"`[^`]+`"),
    re.compile(r"```.*?```", re.S),
    re.compile(r"<[^<>]+>"),
]


def assess_data_formats(record: ContentRecord) -> int:
    score = 5
    content = record.content

    bullets = count_matches(content, BULLET_PATTERNS)
    score += band(bullets, [(10, 25), (5, 20), (2, 15), (0, 10)])

    numbered = len(NUMBERED_LINE.findall(content))
    score += band(numbered, [(8, 20), (4, 15), (1, 10), (0, 5)])

    stats = count_matches(content, STAT_PATTERNS)
    score += band(stats, [(15, 25), (8, 20), (4, 15), (1, 10)])

    score += capped(count_present(content.lower(), TABLE_TERMS), 3, 15)
    score += capped(count_matches(content, COMPARISON_PATTERNS), 4, 15)
    score += capped(count_matches(content, CODE_PATTERNS), 2, 10)

    return score


# --- 10. Readability ---

SENTENCE_SPLIT = re.compile(r"[.!?]+")
WORD = re.compile(r"\b\w+\b")
READABILITY_TERMS = ("simply", "easy", "quick", "step by step", "in other words", "for example")


def assess_readability(record: ContentRecord) -> int:
    score = 30
    content = record.content

    sentences = [s for s in SENTENCE_SPLIT.split(content) if len(s.strip()) > 10]
    if sentences:
        words_per_sentence = record.word_count / len(sentences)
        if words_per_sentence < 15:
            score += 30
        elif words_per_sentence < 20:
            score += 20
        elif words_per_sentence < 25:
            score += 10
        else:
            score += 5

    # Words longer than 7 characters; an empty page lands in the lowest band
    words = WORD.findall(content)
    complex_ratio = sum(1 for w in words if len(w) > 7) / len(words) if words else 1.0
    if complex_ratio < 0.15:
        score += 20
    elif complex_ratio < 0.25:
        score += 15
    elif complex_ratio < 0.35:
        score += 10
    else:
        score += 5

    paragraphs = split_paragraphs(content)
    if paragraphs:
        words_per_paragraph = record.word_count / len(paragraphs)
        if words_per_paragraph < 50:
            score += 15
        elif words_per_paragraph < 100:
            score += 10
        else:
            score += 5

    score += capped(count_present(content.lower(), READABILITY_TERMS), 5, 15)

    return score


# --- 11. Freshness ---

FRESHNESS_TERMS = {
    "updated": 15,
    "revised": 12,
    "latest": 10,
    "current": 8,
    "recent": 8,
    "new": 6,
    "today": 12,
    "this year": 10,
    "recently": 8,
}
MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
VERSION_TERMS = ("version", "v.", "update", "release")
STALE_YEARS = ("2020", "2019", "2018", "2017")


def assess_freshness(record: ContentRecord, year: int | None = None) -> int:
    """Freshness signals relative to `year` (defaults to today's year)."""
    year = year or date.today().year
    score = 10
    content = record.content.lower()

    score += capped(content.count(str(year)), 15, 30)
    score += capped(content.count(str(year - 1)), 10, 20)

    keywords = sum(weight for term, weight in FRESHNESS_TERMS.items() if term in content)
    score += min(keywords, 25)

    score += capped(count_present(content, MONTHS), 3, 15)
    score += capped(count_present(content, VERSION_TERMS), 5, 15)

    score -= capped(count_present(content, STALE_YEARS), 5, 20)

    return score


# --- 12. Credibility ---

AUTHOR_TERMS = ("author:", "written by", "by:", "contributor:", "created by", "published by")
CONTACT_TERMS = ("contact us", "about us", "our team", "meet the team", "company info")
CREDENTIAL_TERMS = ("expert", "certified", "professional", "phd", "degree", "years of experience", "specialist")
TRUST_TERMS = ("award", "featured in", "recognized", "testimonial", "review", "trusted by")
DATE_TERMS = ("published", "updated", "last modified", "copyright", "2024", "2025")
SOURCE_TERMS = ("source", "reference", "study")


def assess_credibility(record: ContentRecord) -> int:
    score = 15
    content = record.content.lower()

    if any_present(content, AUTHOR_TERMS):
        score += 25
    score += capped(count_present(content, CONTACT_TERMS), 8, 20)
    score += capped(count_present(content, CREDENTIAL_TERMS), 6, 18)
    score += capped(count_present(content, TRUST_TERMS), 5, 15)
    if any_present(content, DATE_TERMS):
        score += 12
    if any_present(content, SOURCE_TERMS):
        score += 10

    return score


# --- Catalogue ---

@dataclass(frozen=True)
class FactorSpec:
    factor: Factor
    description: str
    assess: Callable[[ContentRecord], int]
    floor: int = 0

    def evaluate(self, record: ContentRecord) -> FactorResult:
        score = clamp(self.assess(record), floor=self.floor)
        return FactorResult(
            factor=self.factor,
            score=score,
            description=self.description,
            status=status_for(score),
        )


FACTOR_CATALOGUE: list[FactorSpec] = [
    FactorSpec(Factor.CRAWLABILITY,
               "Page accessibility for AI crawlers without login walls or blocking",
               assess_crawlability, floor=10),
    FactorSpec(Factor.HTML_STRUCTURE,
               "Clean semantic HTML with proper heading hierarchy",
               assess_html_structure),
    FactorSpec(Factor.CONTENT_CLARITY,
               "Clear introduction, topic definition, and direct question answers",
               assess_content_clarity),
    FactorSpec(Factor.SCANNABILITY,
               "Short paragraphs and easy-to-summarize content structure",
               assess_scannability),
    FactorSpec(Factor.SUMMARY,
               "Quick summary sections at top or bottom of content",
               assess_summary_sections),
    FactorSpec(Factor.QA_FORMAT,
               "Structured question-answer blocks that AI can easily extract",
               assess_qa_format),
    FactorSpec(Factor.SCHEMA_MARKUP,
               "FAQPage, HowTo, Article, and other relevant structured data",
               assess_schema_markup),
    FactorSpec(Factor.TRUSTED_ENTITIES,
               "References to organizations, authority sources, and credible links",
               assess_trusted_entities),
    FactorSpec(Factor.DATA_EXTRACTION,
               "Bullet lists, tables, statistics, and structured information",
               assess_data_formats),
    FactorSpec(Factor.READABILITY,
               "8th-grade reading level, minimal jargon and marketing fluff",
               assess_readability, floor=10),
    FactorSpec(Factor.FRESHNESS,
               "Updated dates, current year references, and freshness indicators",
               assess_freshness, floor=5),
    FactorSpec(Factor.CREDIBILITY,
               "Author information, contact details, and about us content",
               assess_credibility, floor=5),
]


def assess_factors(record: ContentRecord) -> list[FactorResult]:
    return [spec.evaluate(record) for spec in FACTOR_CATALOGUE]


def analyze_ai_platform_visibility(record: ContentRecord) -> AiVisibilityAssessment:
    return build_assessment(assess_factors(record), generate_recommendations)
