"""Tests for the GEO checks."""

from geoaudit.analyzers.geo import (
    GEO_CHECKS,
    analyze_geo,
    check_entities,
    check_question_answer,
    check_summary,
)
from geoaudit.models import ContentRecord, Heading, ResultType


class TestAnalyzeGeo:
    def test_empty_record(self, empty_record):
        results, score = analyze_geo(empty_record)
        assert score == 0
        assert len(results) == len(GEO_CHECKS)
        assert all(r.type in (ResultType.ERROR, ResultType.WARNING) for r in results)

    def test_tldr_h2_and_faq_schema(self):
        record = ContentRecord(
            headings=[
                Heading(level=1, text="Widgets"),
                Heading(level=2, text="Sizes"),
                Heading(level=2, text="Colours"),
            ],
            content="TL;DR: widgets come in three sizes.",
            has_schema=True,
            schema_types=["FAQPage"],
        )
        results, score = analyze_geo(record)
        # H2 (20) + summary (25) + schema (20); no Q&A, no entities
        assert score == 65
        assert [r.type for r in results] == [
            ResultType.SUCCESS,
            ResultType.SUCCESS,
            ResultType.WARNING,
            ResultType.SUCCESS,
            ResultType.WARNING,
        ]

    def test_full_marks(self, article_record):
        _, score = analyze_geo(article_record)
        assert score == 100


class TestChecks:
    def test_summary_keywords(self):
        for text in ("TL;DR", "Executive Summary", "Key takeaways below"):
            _, points = check_summary(ContentRecord(content=text))
            assert points == 25

    def test_question_heading_counts_as_qa(self):
        record = ContentRecord(headings=[Heading(level=2, text="Does it scale?")])
        result, points = check_question_answer(record)
        assert result.type == ResultType.SUCCESS
        assert points == 20

    def test_qa_phrase_in_content(self):
        _, points = check_question_answer(ContentRecord(content="Here is how to do it"))
        assert points == 20

    def test_capitalized_bigram_is_entity(self):
        _, points = check_entities(ContentRecord(content="We met in New York last week"))
        assert points == 15

    def test_year_literal_is_entity(self):
        _, points = check_entities(ContentRecord(content="released in 2023"))
        assert points == 15

    def test_lowercase_text_has_no_entities(self):
        result, points = check_entities(ContentRecord(content="nothing specific here"))
        assert result.type == ResultType.WARNING
        assert points == 0
