"""Pairwise comparison of two analyzed pages.

Diffs are second page minus first. Key differences are emitted per area
only when that area's diff crosses its threshold.
"""

from ..models import (
    AiVisibilityAssessment,
    AuditReport,
    ContentRecord,
    DifferenceCategory,
    Differences,
    Factor,
    KeyDifference,
    Side,
)
from .patterns import headings_at


SEO_DIFF_THRESHOLD = 10
VISIBILITY_DIFF_THRESHOLD = 15
GEO_DIFF_THRESHOLD = 10


def _factor_value(assessment: AiVisibilityAssessment, factor: Factor) -> str:
    result = assessment.factor(factor)
    return f"{result.score}/100" if result else "Not assessed"


def _seo_differences(record1, record2, seo_diff) -> list[KeyDifference]:
    return [
        KeyDifference(
            category=DifferenceCategory.SEO,
            aspect="Title Tag Optimization",
            url1_value=f"{len(record1.title)} characters",
            url2_value=f"{len(record2.title)} characters",
            recommendation=(
                "URL2 has better title length (50-60 chars ideal)"
                if seo_diff > 0
                else "URL1 has better title length optimization"
            ),
        ),
        KeyDifference(
            category=DifferenceCategory.SEO,
            aspect="Meta Description",
            url1_value=f"{len(record1.meta_description)} chars" if record1.meta_description else "Missing",
            url2_value=f"{len(record2.meta_description)} chars" if record2.meta_description else "Missing",
            recommendation="Meta description should be 150-160 characters for best results",
        ),
    ]


def _visibility_differences(vis1, vis2) -> list[KeyDifference]:
    return [
        KeyDifference(
            category=DifferenceCategory.VISIBILITY,
            aspect="AI Platform Summary",
            url1_value=_factor_value(vis1, Factor.SUMMARY),
            url2_value=_factor_value(vis2, Factor.SUMMARY),
            recommendation="Add TL;DR sections and clear summaries for better AI visibility",
        ),
        KeyDifference(
            category=DifferenceCategory.VISIBILITY,
            aspect="Structured Data Implementation",
            url1_value=_factor_value(vis1, Factor.SCHEMA_MARKUP),
            url2_value=_factor_value(vis2, Factor.SCHEMA_MARKUP),
            recommendation="Implement FAQPage and Article schema markup for AI platforms",
        ),
    ]


def _geo_differences(record1, record2) -> list[KeyDifference]:
    def structure(record):
        return "Has H2 structure" if headings_at(record, 2) else "Poor heading structure"

    def schema(record):
        return f"{len(record.schema_types)} types" if record.has_schema else "None"

    return [
        KeyDifference(
            category=DifferenceCategory.AI,
            aspect="Content Structure",
            url1_value=structure(record1),
            url2_value=structure(record2),
            recommendation="Use H2/H3 headings for better AI content parsing",
        ),
        KeyDifference(
            category=DifferenceCategory.AI,
            aspect="Schema Markup",
            url1_value=schema(record1),
            url2_value=schema(record2),
            recommendation="Implement FAQ and Article schema for AI platforms",
        ),
    ]


def compare_websites(
    record1: ContentRecord,
    report1: AuditReport,
    record2: ContentRecord,
    report2: AuditReport,
    ai_visibility1: AiVisibilityAssessment,
    ai_visibility2: AiVisibilityAssessment,
) -> Differences:
    seo_diff = report2.seo_score - report1.seo_score
    geo_diff = report2.ai_score - report1.ai_score
    visibility_diff = ai_visibility2.overall_score - ai_visibility1.overall_score

    # Ties go to the first page
    better = Side.URL2 if seo_diff + geo_diff + visibility_diff > 0 else Side.URL1

    key_differences = []
    if abs(seo_diff) > SEO_DIFF_THRESHOLD:
        key_differences += _seo_differences(record1, record2, seo_diff)
    if abs(visibility_diff) > VISIBILITY_DIFF_THRESHOLD:
        key_differences += _visibility_differences(ai_visibility1, ai_visibility2)
    if abs(geo_diff) > GEO_DIFF_THRESHOLD:
        key_differences += _geo_differences(record1, record2)

    return Differences(
        seo_score_diff=seo_diff,
        ai_score_diff=geo_diff,
        ai_visibility_diff=visibility_diff,
        better_performer=better,
        key_differences=key_differences,
    )
