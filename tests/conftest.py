import pytest

from geoaudit.models import ContentRecord, Heading, Image, Link


@pytest.fixture
def empty_record():
    return ContentRecord(load_time_ms=500)


@pytest.fixture
def article_record():
    """A reasonably well-optimized article page."""
    content = (
        "TL;DR: Unit testing catches bugs early and keeps refactoring safe.\n\n"
        "What is unit testing? Unit testing means checking the smallest parts of a program. "
        "According to a 2024 study published by Stanford University, teams that test ship 30% fewer bugs.\n\n"
        "FAQ\nQ: How do I start? A: Pick one module and write a test for it.\n\n"
        "- Write small tests\n- Run them on every commit\n- Keep them fast\n\n"
        "In conclusion, written by Jane Doe, a certified expert. Contact us for details."
    )
    return ContentRecord(
        title="Unit Testing Basics: A Practical Guide for Teams",
        meta_description="Learn what unit testing is, why it matters, and how to start writing fast, reliable "
                         "tests for your codebase with practical examples.",
        headings=[
            Heading(level=1, text="Unit Testing Basics"),
            Heading(level=2, text="What is unit testing?"),
            Heading(level=2, text="How to get started"),
            Heading(level=3, text="Tools"),
        ],
        images=[Image(src="/img/test.png", alt="Test pyramid", has_alt=True)],
        links=[
            Link(href="/blog", text="Blog", is_internal=True),
            Link(href="https://en.wikipedia.org/wiki/Unit_testing", text="Wikipedia", is_internal=False),
        ],
        content=content,
        has_schema=True,
        schema_types=["Article", "FAQPage"],
        load_time_ms=800,
        word_count=len(content.split()),
    )
