"""Shared fixtures."""

from typing import List

import pytest

from artalloc.models import ParsedArticle, PriorityField

MONTH = "December"
DATE = "05/12/2025"


def articles(*specs) -> List[ParsedArticle]:
    """Build articles from (id, pages) tuples."""
    return [ParsedArticle(article_id=article_id, pages=pages) for article_id, pages in specs]


def requesters(*specs) -> List[PriorityField]:
    """Build priority fields from (label, value) tuples."""
    return [
        PriorityField(id=str(index), label=label, value=value)
        for index, (label, value) in enumerate(specs, 1)
    ]


@pytest.fixture
def abc_articles() -> List[ParsedArticle]:
    return articles(("A", 5), ("B", 3), ("C", 8))
