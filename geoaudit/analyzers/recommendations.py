"""AI visibility recommendations.

Templates are keyed by factor. A factor without a template produces no
targeted recommendation; only four fail templates and three warning
templates exist today.
"""

from datetime import date

from ..models import Factor, FactorResult, FactorStatus, Priority, Recommendation


MAX_RECOMMENDATIONS = 8

FAIL_TEMPLATES: dict[Factor, Recommendation] = {
    Factor.SUMMARY: Recommendation(
        priority=Priority.HIGH,
        action="Add TL;DR Summary Section",
        description="Add a 2-3 sentence summary at the top or bottom of your page that covers the main points",
        impact="AI tools will be able to easily understand and summarize your content",
    ),
    Factor.QA_FORMAT: Recommendation(
        priority=Priority.HIGH,
        action="Create FAQ Section",
        description="Add common questions and their direct answers in a structured format",
        impact="Better visibility in ChatGPT and Perplexity search results",
    ),
    Factor.SCHEMA_MARKUP: Recommendation(
        priority=Priority.HIGH,
        action="Implement Structured Data",
        description="Add FAQPage, Article, or HowTo schema markup to your content",
        impact="AI platforms will better understand your content context and relationships",
    ),
    Factor.CONTENT_CLARITY: Recommendation(
        priority=Priority.HIGH,
        action="Improve Content Structure",
        description="Add clear introductions, definitions, and explanatory content",
        impact="AI systems will better understand and reference your content",
    ),
}

WARNING_TEMPLATES: dict[Factor, Recommendation] = {
    Factor.HTML_STRUCTURE: Recommendation(
        priority=Priority.MEDIUM,
        action="Improve Heading Structure",
        description="Use a single H1 tag and create proper H2/H3 hierarchy",
        impact="AI systems will better understand your content's logical flow",
    ),
    Factor.SCANNABILITY: Recommendation(
        priority=Priority.MEDIUM,
        action="Break Content into Short Paragraphs",
        description="Divide long paragraphs into shorter ones and use bullet points",
        impact="AI tools can more easily scan and extract information from your content",
    ),
    Factor.READABILITY: Recommendation(
        priority=Priority.MEDIUM,
        action="Simplify Language",
        description="Use shorter sentences and simpler vocabulary for better comprehension",
        impact="AI systems prefer content that's easy to understand and process",
    ),
}


def freshness_tip(year: int) -> Recommendation:
    return Recommendation(
        priority=Priority.MEDIUM,
        action="Add Current Year References",
        description=f"Include {year} dates and recent data points to show content freshness",
        impact="AI platforms prefer fresh and up-to-date content for their responses",
    )


STATISTICS_TIP = Recommendation(
    priority=Priority.HIGH,
    action="Add Statistics and Data",
    description="Include specific numbers, percentages, and data points in your content",
    impact="AI systems can extract and reference concrete data points from your content",
)


def _from_templates(factors, status, templates) -> list[Recommendation]:
    return [
        templates[f.factor].model_copy()
        for f in factors
        if f.status == status and f.factor in templates
    ]


def generate_recommendations(
    factors: list[FactorResult],
    overall_score: int,
    year: int | None = None,
) -> list[Recommendation]:
    """Fail recommendations, then warnings, then score-banded tips; top 8."""
    recommendations = _from_templates(factors, FactorStatus.FAIL, FAIL_TEMPLATES)
    recommendations += _from_templates(factors, FactorStatus.WARNING, WARNING_TEMPLATES)

    if overall_score < 70:
        recommendations.append(freshness_tip(year or date.today().year))
    if overall_score < 50:
        recommendations.append(STATISTICS_TIP.model_copy())

    return recommendations[:MAX_RECOMMENDATIONS]
