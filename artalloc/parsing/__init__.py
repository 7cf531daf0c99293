"""Article text parsing."""

from .filters import filter_allocated_articles
from .parser import (
    format_article_line,
    normalize_article_id,
    parse_article_line,
    parse_articles,
    parse_pasted_allocation,
)

__all__ = [
    "filter_allocated_articles",
    "format_article_line",
    "normalize_article_id",
    "parse_article_line",
    "parse_articles",
    "parse_pasted_allocation",
]
