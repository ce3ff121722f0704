"""Tests for content suggestions and the suggestion strategies."""

import pytest

from geoaudit.analyzers.suggestions import (
    BLOG_TITLES,
    CONTENT_STRUCTURE,
    FAQS,
    MISSING_KEYWORDS,
    ContentDerived,
    StaticCatalogue,
    generate_ai_improvements,
    generate_content_suggestions,
    strategy_named,
)
from geoaudit.models import ContentRecord, Heading, Platform, Priority, VisibilityLevel


class TestAiImprovements:
    def test_low_score_truncated_to_six(self):
        improvements = generate_ai_improvements(30)
        assert [i.priority for i in improvements] == [1, 2, 3, 4, 5, 6]
        assert improvements[0].action == "Add TL;DR Summary Section"

    def test_mid_score(self):
        assert [i.priority for i in generate_ai_improvements(60)] == [3, 4, 5, 6, 7]

    def test_fine_tuning_band(self):
        improvements = generate_ai_improvements(80)
        assert [i.action for i in improvements] == [
            "Optimize for Voice Search Queries",
            "Add Comparison Tables",
        ]

    def test_advanced_band(self):
        improvements = generate_ai_improvements(85)
        assert [i.priority for i in improvements] == [8, 9, 10]
        assert all(i.impact == Priority.LOW for i in improvements)

    def test_band_edges(self):
        assert generate_ai_improvements(50)[0].priority == 3
        assert generate_ai_improvements(75)[0].priority == 6


class TestStaticCatalogue:
    def test_same_lists_for_every_page(self, empty_record, article_record):
        a = generate_content_suggestions(empty_record, 0)
        b = generate_content_suggestions(article_record, 100)
        assert a.missing_keywords == b.missing_keywords == MISSING_KEYWORDS
        assert a.blog_titles == b.blog_titles == BLOG_TITLES
        assert a.content_structure == b.content_structure == CONTENT_STRUCTURE
        assert a.faqs == b.faqs == FAQS

    def test_platform_visibility(self, empty_record):
        suggestions = generate_content_suggestions(empty_record, 0)
        assert suggestions.ai_visibility == {
            Platform.CHATGPT: VisibilityLevel.MEDIUM,
            Platform.PERPLEXITY: VisibilityLevel.LOW,
            Platform.CLAUDE: VisibilityLevel.MEDIUM,
            Platform.BARD: VisibilityLevel.LOW,
        }

    def test_catalogue_is_not_shared(self, empty_record):
        suggestions = generate_content_suggestions(empty_record, 0)
        suggestions.missing_keywords.append("mutated")
        assert "mutated" not in MISSING_KEYWORDS


class TestContentDerived:
    def test_ideas_from_headings(self):
        record = ContentRecord(
            title="Sourdough Baking for Beginners",
            headings=[
                Heading(level=1, text="Sourdough baking"),
                Heading(level=2, text="Why does dough rise?"),
                Heading(level=2, text="Choosing flour"),
                Heading(level=3, text="Rye and spelt"),
            ],
        )
        suggestions = generate_content_suggestions(record, 40, ContentDerived())

        assert suggestions.missing_keywords == ["beginners"]
        assert [t.title for t in suggestions.blog_titles] == [
            "Why does dough rise? A Complete Answer",
            "Choosing flour: A Practical Guide",
        ]
        assert suggestions.content_structure == [
            "## Why does dough rise?",
            "## Choosing flour",
            "### Rye and spelt",
        ]
        assert [f.question for f in suggestions.faqs] == ["Why does dough rise?"]

    def test_blog_titles_drop_trailing_punctuation(self):
        record = ContentRecord(
            title="Pricing",
            headings=[
                Heading(level=2, text="Pricing:"),
                Heading(level=2, text="Is it worth it ?"),
                Heading(level=2, text="?"),
            ],
        )
        titles = ContentDerived().ideas(record).blog_titles
        assert [t.title for t in titles] == [
            "Pricing: A Practical Guide",
            "Is it worth it? A Complete Answer",
        ]

    def test_empty_page_falls_back_to_catalogue(self, empty_record):
        suggestions = generate_content_suggestions(empty_record, 40, ContentDerived())
        assert suggestions.missing_keywords == MISSING_KEYWORDS
        assert suggestions.faqs == FAQS


class TestStrategyLookup:
    def test_known_names(self):
        assert isinstance(strategy_named("static"), StaticCatalogue)
        assert isinstance(strategy_named("content"), ContentDerived)

    def test_names_ignore_case_and_padding(self):
        assert isinstance(strategy_named("Static"), StaticCatalogue)
        assert isinstance(strategy_named(" CONTENT "), ContentDerived)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown suggestion strategy"):
            strategy_named("llm")
