"""
Score aggregator — builds the AI visibility assessment from factor scores.

Every factor is weighted equally (1/12); the overall score is the
rounded share of the 1200-point maximum.
"""

import math

from .models import AiVisibilityAssessment, FactorResult, FactorStatus


PASS_THRESHOLD = 80
WARNING_THRESHOLD = 50
POINTS_PER_FACTOR = 100


def clamp(score: float, floor: int = 0, ceiling: int = 100) -> int:
    return int(max(floor, min(ceiling, score)))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def status_for(score: int) -> FactorStatus:
    if score >= PASS_THRESHOLD:
        return FactorStatus.PASS
    if score >= WARNING_THRESHOLD:
        return FactorStatus.WARNING
    return FactorStatus.FAIL


def overall_score(factors: list[FactorResult]) -> int:
    if not factors:
        return 0
    max_score = len(factors) * POINTS_PER_FACTOR
    total = sum(f.score for f in factors)
    return clamp(round_half_up(total / max_score * 100))


def summarize(score: int, factors: list[FactorResult]) -> str:
    failing = sum(1 for f in factors if f.status == FactorStatus.FAIL)
    warnings = sum(1 for f in factors if f.status == FactorStatus.WARNING)

    if score >= 80:
        return "Excellent AI platform visibility with strong optimization across most factors"
    if score >= 60:
        return f"Good AI visibility with {failing + warnings} areas needing improvement"
    if score >= 40:
        return f"Moderate AI visibility. {failing} critical issues and {warnings} warnings to address"
    return f"Poor AI platform visibility. Significant optimization needed across {failing} critical areas"


def build_assessment(factors: list[FactorResult], recommend) -> AiVisibilityAssessment:
    """Aggregate factor results into the final assessment.

    `recommend(factors, overall_score)` supplies the recommendation list.
    """
    score = overall_score(factors)
    return AiVisibilityAssessment(
        overall_score=score,
        summary=summarize(score, factors),
        factors=factors,
        recommendations=recommend(factors, score),
    )
