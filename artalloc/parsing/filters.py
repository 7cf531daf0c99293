"""Filtering of articles that were already allocated on earlier days."""

from typing import Iterable, List

from ..models import FilteredArticlesResult, ParsedArticle


def filter_allocated_articles(
    articles: List[ParsedArticle],
    allocated_ids: Iterable[str],
) -> FilteredArticlesResult:
    """Drop articles whose id (case-insensitive) is already allocated."""
    allocated = {article_id.strip().upper() for article_id in allocated_ids}

    kept = []
    removed = []
    for article in articles:
        if article.article_id.upper() in allocated:
            removed.append(article.article_id)
        else:
            kept.append(article)

    return FilteredArticlesResult(
        parsed_articles=kept,
        filtered_out_count=len(removed),
        filtered_out_articles=removed,
    )
