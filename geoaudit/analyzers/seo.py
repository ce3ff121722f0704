"""Traditional SEO analyzer — title, meta, headings, images, schema, speed.

Checks run in a fixed order; each one contributes exactly one result and
the points of the branch it lands in. Score is the clamped sum.
"""

from typing import Callable

from ..models import CheckResult, ContentRecord, ResultType
from ..scorer import clamp
from .patterns import headings_at


Check = Callable[[ContentRecord], tuple[CheckResult, int]]

TITLE_MIN, TITLE_MAX = 30, 60
META_MIN, META_MAX = 120, 160
SLOW_LOAD_MS = 3000


def _result(type, title, description, details=None, metrics=None) -> CheckResult:
    return CheckResult(
        type=type, title=title, description=description,
        details=details, metrics=metrics,
    )


def check_title(record: ContentRecord) -> tuple[CheckResult, int]:
    title = record.title
    if not title:
        return _result(ResultType.ERROR, "Missing title tag",
                       "The page is missing a title tag, which is crucial for SEO."), 0
    if len(title) < TITLE_MIN:
        return _result(ResultType.WARNING, "Title tag too short",
                       f"Title tag should be between {TITLE_MIN}-{TITLE_MAX} characters for optimal SEO.",
                       details=f'Current: "{title}"'), 10
    if len(title) > TITLE_MAX:
        return _result(ResultType.WARNING, "Title tag too long",
                       "Title tag may be truncated in search results.",
                       details=f"Current length: {len(title)} characters"), 10
    return _result(ResultType.SUCCESS, "Title tag length optimal",
                   "Title tag length is within the recommended range.",
                   details=f"Length: {len(title)} characters"), 20


def check_meta_description(record: ContentRecord) -> tuple[CheckResult, int]:
    meta = record.meta_description
    if not meta:
        return _result(ResultType.ERROR, "Missing meta description",
                       "Meta description is missing, which affects click-through rates."), 0
    if len(meta) < META_MIN:
        return _result(ResultType.WARNING, "Meta description too short",
                       f"Meta description should be {META_MIN}-{META_MAX} characters for best results.",
                       details=f"Current length: {len(meta)} characters"), 10
    if len(meta) > META_MAX:
        return _result(ResultType.WARNING, "Meta description too long",
                       "Meta description may be truncated in search results.",
                       details=f"Current length: {len(meta)} characters"), 10
    return _result(ResultType.SUCCESS, "Meta description length optimal",
                   "Meta description length is within the recommended range.",
                   details=f"Length: {len(meta)} characters"), 20


def check_h1(record: ContentRecord) -> tuple[CheckResult, int]:
    h1_count = len(headings_at(record, 1))
    if h1_count == 0:
        return _result(ResultType.ERROR, "Missing H1 tag",
                       "Every page should have exactly one H1 tag."), 0
    if h1_count > 1:
        return _result(ResultType.WARNING, "Multiple H1 tags found",
                       "Use only one H1 per page and structure other headings hierarchically.",
                       metrics={"H1 tags": h1_count}), 10
    return _result(ResultType.SUCCESS, "Proper H1 structure",
                   "Page has exactly one H1 tag."), 15


def check_image_alt(record: ContentRecord) -> tuple[CheckResult, int]:
    images = record.images
    missing = sum(1 for img in images if not img.has_alt)
    if missing:
        return _result(ResultType.ERROR, "Missing alt text on images",
                       f"{missing} images found without alt attributes, affecting accessibility and SEO.",
                       metrics={"Total images": len(images), "Missing alt": missing}), 0
    if not images:
        return _result(ResultType.WARNING, "No images found",
                       "The page has no images. Relevant images with alt text support image search and engagement.",
                       metrics={"Total images": 0}), 0
    return _result(ResultType.SUCCESS, "All images have alt text",
                   "Great job! All images have descriptive alt attributes.",
                   metrics={"Total images": len(images)}), 15


def check_schema(record: ContentRecord) -> tuple[CheckResult, int]:
    if not record.has_schema:
        return _result(ResultType.WARNING, "No schema markup found",
                       "Consider adding structured data to help search engines understand your content."), 0
    return _result(ResultType.SUCCESS, "Schema markup present",
                   "Structured data found on the page.",
                   details=f"Types: {', '.join(record.schema_types)}"), 15


def check_load_time(record: ContentRecord) -> tuple[CheckResult, int]:
    metrics = {"Load time": f"{record.load_time_ms}ms"}
    if record.load_time_ms > SLOW_LOAD_MS:
        return _result(ResultType.WARNING, "Slow page load time",
                       "Page took longer than 3 seconds to load, which may affect user experience.",
                       metrics=metrics), 0
    return _result(ResultType.SUCCESS, "Good page load time",
                   "Page loads within acceptable time limits.",
                   metrics=metrics), 15


SEO_CHECKS: list[Check] = [
    check_title,
    check_meta_description,
    check_h1,
    check_image_alt,
    check_schema,
    check_load_time,
]


def run_checks(record: ContentRecord, checks: list[Check]) -> tuple[list[CheckResult], int]:
    results = []
    score = 0
    for check in checks:
        result, points = check(record)
        results.append(result)
        score += points
    return results, clamp(score)


def analyze_traditional_seo(record: ContentRecord) -> tuple[list[CheckResult], int]:
    return run_checks(record, SEO_CHECKS)
