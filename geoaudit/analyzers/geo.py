"""GEO analyzer — how well a page suits generative AI retrieval.

  A. H2 structure        (20 pts)
  B. Summary / TL;DR     (25 pts)
  C. Question-answer     (20 pts)
  D. Schema markup       (20 pts)
  E. Entities and dates  (15 pts)
"""

import re

from ..models import CheckResult, ContentRecord, ResultType
from .patterns import any_present, headings_at
from .seo import Check, run_checks


SUMMARY_TERMS = ("tl;dr", "summary", "key takeaways")
QA_TERMS = ("what is", "how to", "why")
ENTITY_YEARS = ("2024", "2023")
PROPER_NOUN = re.compile(r"\b[A-Z][a-z]+ [A-Z][a-z]+\b")


def check_h2_structure(record: ContentRecord) -> tuple[CheckResult, int]:
    if headings_at(record, 2):
        return CheckResult(
            type=ResultType.SUCCESS,
            title="Content structured with H2 headings",
            description="Good use of heading structure that AI engines can easily parse and understand.",
        ), 20
    return CheckResult(
        type=ResultType.WARNING,
        title="Poor heading structure for AI",
        description="Add H2 and H3 headings to improve AI readability and content parsing.",
    ), 0


def check_summary(record: ContentRecord) -> tuple[CheckResult, int]:
    if any_present(record.content.lower(), SUMMARY_TERMS):
        return CheckResult(
            type=ResultType.SUCCESS,
            title="Summary content present",
            description="Content includes summary sections that AI tools can easily extract.",
        ), 25
    return CheckResult(
        type=ResultType.ERROR,
        title="No TL;DR summary found",
        description="AI tools prefer concise summaries. Add a TL;DR section to improve AI-driven content discovery.",
    ), 0


def check_question_answer(record: ContentRecord) -> tuple[CheckResult, int]:
    has_qa = (
        any_present(record.content.lower(), QA_TERMS)
        or any("?" in h.text for h in record.headings)
    )
    if has_qa:
        return CheckResult(
            type=ResultType.SUCCESS,
            title="Question-answer format detected",
            description="Content addresses user questions directly, improving AI platform visibility.",
        ), 20
    return CheckResult(
        type=ResultType.WARNING,
        title="Limited question-answer format",
        description="Content doesn't directly answer user intent queries. Consider restructuring with Q&A sections.",
    ), 0


def check_schema(record: ContentRecord) -> tuple[CheckResult, int]:
    if record.has_schema:
        return CheckResult(
            type=ResultType.SUCCESS,
            title="Schema markup enhances AI understanding",
            description="Structured data helps AI platforms understand content relationships and context.",
        ), 20
    return CheckResult(
        type=ResultType.ERROR,
        title="Missing schema markup",
        description="No structured data found. Schema markup helps AI engines understand your content context.",
    ), 0


def check_entities(record: ContentRecord) -> tuple[CheckResult, int]:
    content = record.content
    # Basic proper noun detection: two capitalized words in a row
    if any_present(content, ENTITY_YEARS) or PROPER_NOUN.search(content):
        return CheckResult(
            type=ResultType.SUCCESS,
            title="Good entity and semantic clarity",
            description="Content includes specific entities, dates, and proper nouns that improve AI understanding.",
        ), 15
    return CheckResult(
        type=ResultType.WARNING,
        title="Moderate entity and semantic clarity",
        description="Consider adding more specific dates, locations, and definitions to improve AI understanding.",
    ), 0


GEO_CHECKS: list[Check] = [
    check_h2_structure,
    check_summary,
    check_question_answer,
    check_schema,
    check_entities,
]


def analyze_geo(record: ContentRecord) -> tuple[list[CheckResult], int]:
    return run_checks(record, GEO_CHECKS)
