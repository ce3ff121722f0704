"""
Main audit engine — orchestrates fetch, parse, analyze, score.

`build_report` and the analyzers are pure; only the `run_*` coroutines
touch the network, and the store is the only state they change.
"""

import asyncio
import logging
import time

from . import config
from .analyzers.ai_visibility import analyze_ai_platform_visibility
from .analyzers.comparison import compare_websites
from .analyzers.geo import analyze_geo
from .analyzers.seo import analyze_traditional_seo
from .analyzers.suggestions import (
    SuggestionStrategy,
    empty_suggestions,
    generate_content_suggestions,
    strategy_named,
)
from .errors import FetchError
from .fetcher import fetch_page
from .models import (
    AiVisibilityAssessment,
    AuditOptions,
    AuditReport,
    ComparisonResult,
    ContentRecord,
)
from .parser import parse_html
from .storage import ReportStore

logger = logging.getLogger(__name__)


def build_report(
    url: str,
    record: ContentRecord,
    options: AuditOptions | None = None,
    strategy: SuggestionStrategy | None = None,
) -> AuditReport:
    """Run the enabled analyzers on a record. The report is not stored."""
    options = options or AuditOptions()

    seo_results, seo_score = (
        analyze_traditional_seo(record) if options.include_traditional_seo else ([], 0)
    )
    geo_results, geo_score = (
        analyze_geo(record) if options.include_geo else ([], 0)
    )

    if options.include_content_suggestions:
        strategy = strategy or strategy_named(config.SUGGESTION_STRATEGY)
        suggestions = generate_content_suggestions(record, geo_score, strategy)
    else:
        suggestions = empty_suggestions()

    return AuditReport(
        url=url,
        seo_score=seo_score,
        ai_score=geo_score,
        traditional_seo_results=seo_results,
        geo_results=geo_results,
        content_suggestions=suggestions,
    )


async def fetch_record(url: str) -> ContentRecord:
    fetch_result = await fetch_page(url)
    if fetch_result.get("error"):
        raise FetchError(f"Failed to scrape website: {fetch_result['error']}")

    return parse_html(
        fetch_result["html"],
        base_url=fetch_result.get("final_url", url),
        load_time_ms=fetch_result["load_time_ms"],
    )


async def run_audit(
    url: str,
    store: ReportStore,
    options: AuditOptions | None = None,
) -> tuple[ContentRecord, AuditReport]:
    start = time.time()

    record = await fetch_record(url)
    report = store.create(build_report(url, record, options))

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "Audited %s in %dms (seo=%d, geo=%d)",
        url, duration_ms, report.seo_score, report.ai_score,
        extra={"url": url, "duration_ms": duration_ms,
               "seo_score": report.seo_score, "geo_score": report.ai_score},
    )
    return record, report


async def run_visibility(url: str) -> AiVisibilityAssessment:
    record = await fetch_record(url)
    assessment = analyze_ai_platform_visibility(record)
    logger.info(
        "AI visibility for %s: %d/100", url, assessment.overall_score,
        extra={"url": url, "visibility_score": assessment.overall_score},
    )
    return assessment


async def run_comparison(
    url1: str,
    url2: str,
    store: ReportStore,
    options: AuditOptions | None = None,
) -> ComparisonResult:
    start = time.time()

    # Both pages are fetched in parallel
    record1, record2 = await asyncio.gather(fetch_record(url1), fetch_record(url2))

    report1 = store.create(build_report(url1, record1, options))
    report2 = store.create(build_report(url2, record2, options))
    visibility1 = analyze_ai_platform_visibility(record1)
    visibility2 = analyze_ai_platform_visibility(record2)

    differences = compare_websites(
        record1, report1,
        record2, report2,
        visibility1, visibility2,
    )

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "Compared %s vs %s in %dms (better: %s)",
        url1, url2, duration_ms, differences.better_performer.value,
        extra={"duration_ms": duration_ms},
    )
    return ComparisonResult(
        url1_report=report1,
        url2_report=report2,
        url1_ai_visibility=visibility1,
        url2_ai_visibility=visibility2,
        differences=differences,
    )
