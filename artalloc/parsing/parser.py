"""Parsers that turn raw article text into ParsedArticle records."""

from typing import Dict, Iterable, List, Optional

from ..models import ParsedArticle
from .patterns import (
    ARTICLE_ID_PATTERN,
    ARTICLE_ID_TOKEN_PATTERN,
    ARTICLE_WITH_PAGES_PATTERN,
    MAX_PAGE_COUNT,
    PAGE_COUNT_PATTERN,
    is_date_token,
)

# How far past an article id to look for a date, and for a bare number
DATE_LOOKAHEAD = 10
NUMBER_LOOKAHEAD = 6


def normalize_article_id(article_id: str) -> str:
    """Trim and upper-case an article id."""
    return article_id.strip().upper()


def parse_article_line(line: str) -> Optional[ParsedArticle]:
    """
    Parse a single "ID [PAGES]" or bare "ID" line.

    Malformed or missing brackets give pages=0. Blank lines give None.
    """
    entry = line.strip()
    if not entry:
        return None

    match = ARTICLE_WITH_PAGES_PATTERN.match(entry)
    if match:
        return ParsedArticle(
            article_id=normalize_article_id(match.group(1)),
            pages=int(match.group(2)),
        )

    token = ARTICLE_ID_TOKEN_PATTERN.match(entry)
    article_id = token.group(1) if token else entry
    return ParsedArticle(article_id=normalize_article_id(article_id), pages=0)


def parse_articles(raw_lines: Optional[Iterable[str]]) -> List[ParsedArticle]:
    """
    Parse article lines into structured records.

    Args:
        raw_lines: Strings like "CDC101217 [24]" or "CDC101217", or None

    Returns:
        One ParsedArticle per non-empty line, in input order. Duplicates
        are kept; later stages key by article id.
    """
    if not raw_lines:
        return []

    articles = []
    for line in raw_lines:
        parsed = parse_article_line(line)
        if parsed is not None:
            articles.append(parsed)
    return articles


def format_article_line(article: ParsedArticle) -> str:
    """Render an article back to the "ID [PAGES]" line format."""
    return f"{article.article_id} [{article.pages}]"


def _page_count(token: str) -> Optional[int]:
    if not PAGE_COUNT_PATTERN.match(token):
        return None
    value = int(token)
    if 0 <= value <= MAX_PAGE_COUNT:
        return value
    return None


def _pages_before_date(tokens: List[str], start: int) -> Optional[int]:
    end = min(len(tokens), start + DATE_LOOKAHEAD)
    for j in range(start + 1, end):
        if is_date_token(tokens[j]):
            pages = _page_count(tokens[j - 1])
            if pages is not None:
                return pages
    return None


def _next_number(tokens: List[str], start: int) -> Optional[int]:
    end = min(len(tokens), start + NUMBER_LOOKAHEAD)
    for j in range(start + 1, end):
        pages = _page_count(tokens[j])
        if pages is not None:
            return pages
    return None


def parse_pasted_allocation(text: Optional[str]) -> List[ParsedArticle]:
    """
    Pull article ids and page counts out of text pasted from a spreadsheet.

    Page count is the number right before the first date following the id;
    without a date, the next bare number after the id. Later occurrences of
    the same id replace earlier ones but keep the first position.
    """
    if not text or not text.strip():
        return []

    tokens = text.split()
    entries: Dict[str, ParsedArticle] = {}

    for i, token in enumerate(tokens):
        article_id = normalize_article_id(token)
        if not ARTICLE_ID_PATTERN.match(article_id):
            continue

        pages = _pages_before_date(tokens, i)
        if pages is None:
            pages = _next_number(tokens, i)

        entries[article_id] = ParsedArticle(article_id=article_id, pages=pages or 0)

    return list(entries.values())
