"""Small text-matching helpers shared by the analyzers."""

import re
from typing import Iterable


def count_present(text: str, terms: Iterable[str]) -> int:
    """Number of distinct terms that occur in text (substring match)."""
    return sum(1 for term in terms if term in text)


def any_present(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)


def count_matches(text: str, patterns: Iterable[re.Pattern]) -> int:
    """Total number of matches of all patterns in text."""
    return sum(len(p.findall(text)) for p in patterns)


def capped(hits: int, per_hit: int, cap: int) -> int:
    return min(hits * per_hit, cap)


def band(value: float, bands: Iterable[tuple[float, int]], default: int = 0) -> int:
    """Points for the first (threshold, points) band with value > threshold."""
    for threshold, points in bands:
        if value > threshold:
            return points
    return default


def headings_at(record, level: int) -> list:
    return [h for h in record.headings if h.level == level]


def split_paragraphs(content: str, min_length: int = 50) -> list[str]:
    return [p for p in content.split("\n\n") if len(p.strip()) > min_length]
