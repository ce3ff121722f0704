"""Tests for the AI platform visibility factors and their aggregation."""

import time

import pytest

from geoaudit.analyzers.ai_visibility import (
    FACTOR_CATALOGUE,
    analyze_ai_platform_visibility,
    assess_content_clarity,
    assess_credibility,
    assess_crawlability,
    assess_data_formats,
    assess_factors,
    assess_freshness,
    assess_html_structure,
    assess_qa_format,
    assess_readability,
    assess_scannability,
    assess_schema_markup,
    assess_summary_sections,
    assess_trusted_entities,
)
from geoaudit.engine import build_report
from geoaudit.models import ContentRecord, Factor, FactorStatus, Heading, Link


class TestCatalogue:
    def test_order_matches_factor_enum(self):
        assert [spec.factor for spec in FACTOR_CATALOGUE] == list(Factor)

    def test_twelve_factors(self, article_record):
        assert len(assess_factors(article_record)) == 12

    def test_floors(self):
        floors = {spec.factor: spec.floor for spec in FACTOR_CATALOGUE}
        assert floors[Factor.CRAWLABILITY] == 10
        assert floors[Factor.READABILITY] == 10
        assert floors[Factor.FRESHNESS] == 5
        assert floors[Factor.CREDIBILITY] == 5
        assert floors[Factor.SCHEMA_MARKUP] == 0


class TestEmptyRecord:
    def test_factor_scores(self, empty_record):
        scores = {f.factor: f.score for f in assess_factors(empty_record)}
        assert scores == {
            Factor.CRAWLABILITY: 70,
            Factor.HTML_STRUCTURE: 0,
            Factor.CONTENT_CLARITY: 15,
            Factor.SCANNABILITY: 5,
            Factor.SUMMARY: 0,
            Factor.QA_FORMAT: 0,
            Factor.SCHEMA_MARKUP: 0,
            Factor.TRUSTED_ENTITIES: 5,
            Factor.DATA_EXTRACTION: 5,
            Factor.READABILITY: 35,
            Factor.FRESHNESS: 10,
            Factor.CREDIBILITY: 15,
        }

    def test_assessment(self, empty_record):
        assessment = analyze_ai_platform_visibility(empty_record)
        # 160 / 1200 * 100 = 13.33
        assert assessment.overall_score == 13
        assert assessment.summary == (
            "Poor AI platform visibility. Significant optimization needed across 11 critical areas"
        )
        assert [r.action for r in assessment.recommendations] == [
            "Improve Content Structure",
            "Add TL;DR Summary Section",
            "Create FAQ Section",
            "Implement Structured Data",
            "Add Current Year References",
            "Add Statistics and Data",
        ]


class TestCrawlability:
    def test_login_and_paywall_penalties(self):
        record = ContentRecord(title="Members", content="Please login. Premium subscription required.")
        assert assess_crawlability(record) == 35

    def test_public_content_with_error_title(self):
        record = ContentRecord(title="Page Not Found 404", content="free public resources")
        assert assess_crawlability(record) == 90


class TestHtmlStructure:
    def test_complete_structure(self, article_record):
        assert assess_html_structure(article_record) == 100

    def test_multiple_h1_only(self):
        record = ContentRecord(headings=[Heading(level=1, text="A"), Heading(level=1, text="B")])
        assert assess_html_structure(record) == 10


class TestContentClarity:
    def test_clear_content(self):
        record = ContentRecord(
            title="Unit Testing Basics",
            content="What is unit testing? Testing means checking code. "
                    "Learn how to test and why it matters.",
            word_count=400,
        )
        # 10 + intro 20 + 2 question words 16 + definition 15 + 300-500 words 15 + 2/3 title words 10
        assert assess_content_clarity(record) == 86

    def test_long_content_band(self):
        assert assess_content_clarity(ContentRecord(word_count=1000)) == 35
        assert assess_content_clarity(ContentRecord(word_count=5000)) == 10


class TestScannability:
    def test_bullet_list(self):
        content = "\n".join(f"- item {i}" for i in range(12))
        record = ContentRecord(content=content, word_count=24)
        # 5 + short paragraph 30 + >10 list markers 25 + list-item formatting 10
        assert assess_scannability(record) == 70

    def test_heading_density(self):
        record = ContentRecord(headings=[Heading(level=2, text="A")], word_count=100)
        assert assess_scannability(record) == 30


class TestSummaryAndQa:
    def test_all_summary_signals(self):
        record = ContentRecord(content="TL;DR: yes. In summary, fine. Conclusion: done.")
        assert assess_summary_sections(record) == 100

    def test_tldr_only(self):
        assert assess_summary_sections(ContentRecord(content="tldr")) == 40

    def test_full_qa(self):
        record = ContentRecord(
            content="FAQ\nQ: Does it work? A: Yes.",
            headings=[Heading(level=2, text="How does it work")],
        )
        assert assess_qa_format(record) == 100


class TestSchemaMarkup:
    def test_typed_schema(self):
        record = ContentRecord(has_schema=True, schema_types=["FAQPage", "Article"])
        assert assess_schema_markup(record) == 85

    def test_all_bonus_types_capped(self):
        record = ContentRecord(has_schema=True, schema_types=["FAQPage", "Article", "HowTo"])
        assert assess_schema_markup(record) == 100

    def test_types_without_schema_flag(self):
        assert assess_schema_markup(ContentRecord(schema_types=["Article"])) == 0


class TestTrustedEntities:
    def test_authority_signals(self):
        record = ContentRecord(
            content="According to Wikipedia and a university study published by the BBC",
            links=[
                Link(href="https://a.example", text="A", is_internal=False),
                Link(href="https://b.example", text="B", is_internal=False),
                Link(href="/about", text="About", is_internal=True),
            ],
        )
        # 5 + 2 domains 24 + 3 research terms 24 + "according to" 5 + 2 external links 6
        assert assess_trusted_entities(record) == 64


class TestDataFormats:
    def test_statistics(self):
        record = ContentRecord(content="Revenue grew 25% to $1,000 in 2 years.")
        assert assess_data_formats(record) == 15


class TestReadability:
    def test_simple_text(self):
        content = "The cat sat on the mat today. The dog ran in the park fast."
        record = ContentRecord(content=content, word_count=14)
        assert assess_readability(record) == 95


class TestFreshness:
    def test_current_signals(self):
        record = ContentRecord(content="Updated March 2026. Latest release notes for 2026 and 2025.")
        # 10 + current year x2 30 + prior year 10 + keywords 25 + month 3 + version words 10
        assert assess_freshness(record, year=2026) == 88

    def test_stale_years_go_below_floor(self):
        record = ContentRecord(content="Back in 2017, 2018, 2019 and 2020")
        assert assess_freshness(record, year=2026) == -10

    def test_floor_applied_in_catalogue(self):
        record = ContentRecord(content="Back in 2017, 2018, 2019 and 2020")
        scores = {f.factor: f.score for f in assess_factors(record)}
        assert scores[Factor.FRESHNESS] == 5


class TestCredibility:
    def test_full_signals(self):
        record = ContentRecord(
            content="Written by Jane, a certified expert. Contact us or read about us. "
                    "Published 2024. Source: a study."
        )
        assert assess_credibility(record) == 90


class TestStatus:
    def test_status_follows_score(self, article_record):
        for result in assess_factors(article_record):
            if result.score >= 80:
                assert result.status == FactorStatus.PASS
            elif result.score >= 50:
                assert result.status == FactorStatus.WARNING
            else:
                assert result.status == FactorStatus.FAIL

    def test_schema_difference(self):
        base = dict(title="Widgets", content="All about widgets", word_count=3)
        without = analyze_ai_platform_visibility(ContentRecord(**base))
        with_schema = analyze_ai_platform_visibility(
            ContentRecord(**base, has_schema=True, schema_types=["FAQPage", "Article"])
        )
        schema_a = without.factor(Factor.SCHEMA_MARKUP)
        schema_b = with_schema.factor(Factor.SCHEMA_MARKUP)
        assert (schema_a.score, schema_a.status) == (0, FactorStatus.FAIL)
        assert (schema_b.score, schema_b.status) == (85, FactorStatus.PASS)


class TestLargeInputs:
    @pytest.mark.parametrize("content", [
        "1" * 50_000,
        "<" * 50_000,
        "\n" * 50_000 + "x",
        " " * 50_000 + ":x",
        "1," * 25_000,
    ])
    def test_long_runs_score_in_linear_time(self, content):
        record = ContentRecord(title="Long page", content=content, word_count=len(content.split()))
        start = time.perf_counter()
        assessment = analyze_ai_platform_visibility(record)
        build_report("https://example.com", record)
        assert time.perf_counter() - start < 2.0
        assert 0 <= assessment.overall_score <= 100

    def test_digit_run_counts_once(self):
        run = ContentRecord(content="Growth of " + "9" * 1_000 + "% this quarter")
        short = ContentRecord(content="Growth of 9% this quarter")
        assert assess_data_formats(run) == assess_data_formats(short)
