"""Distribution of articles to requesters."""

from typing import Iterable, List, Optional, Set, Tuple

from ..models import DDN_NAME, AllocatedArticle, ParsedArticle, PriorityField
from .strategies import get_strategy


def normalize_ddn_ids(ddn_ids: Optional[Iterable[str]]) -> Set[str]:
    """Upper-cased set of DDN ids."""
    return {article_id.strip().upper() for article_id in ddn_ids or []}


def split_ddn(
    articles: List[ParsedArticle],
    ddn_set: Set[str],
) -> Tuple[List[ParsedArticle], List[ParsedArticle]]:
    """Split articles into (ddn, pool), both in input order."""
    ddn = [article for article in articles if article.article_id in ddn_set]
    pool = [article for article in articles if article.article_id not in ddn_set]
    return ddn, pool


def _stamp(article: ParsedArticle, name: str, month: str, date: str) -> AllocatedArticle:
    return AllocatedArticle(
        name=name,
        article_id=article.article_id,
        pages=article.pages,
        month=month,
        date=date,
    )


def claim_articles(
    pool: List[ParsedArticle],
    assigned: Set[str],
    name: str,
    count: int,
    month: str,
    date: str,
) -> List[AllocatedArticle]:
    """
    Claim up to ``count`` unassigned articles from an ordered pool.

    ``assigned`` is updated in place with every claimed id. A short pool
    simply yields fewer rows.
    """
    claimed: List[AllocatedArticle] = []
    if count <= 0:
        return claimed

    for article in pool:
        if article.article_id in assigned:
            continue
        claimed.append(_stamp(article, name, month, date))
        assigned.add(article.article_id)
        if len(claimed) >= count:
            break

    return claimed


def distribute_articles(
    requesters: List[PriorityField],
    articles: List[ParsedArticle],
    ddn_ids: Optional[Iterable[str]],
    method: Optional[str],
    month: str,
    date: str,
) -> List[AllocatedArticle]:
    """
    Distribute articles to requesters in priority order.

    DDN articles are set aside first and never reach the pool. The rest is
    ordered by the allocation method ("allocate by pages" puts the largest
    articles first, anything else keeps input order) and each requester,
    in list order, claims up to ``value`` articles nobody has claimed yet.

    Args:
        requesters: Priority-ordered fields; value 0 skips the requester
        articles: Parsed articles for this run
        ddn_ids: Article ids reserved for DDN
        method: Allocation method string
        month: Month name stamped on every row
        date: Date stamped on every row

    Returns:
        DDN rows followed by requester rows in claim order
    """
    if not articles:
        return []

    ddn_set = normalize_ddn_ids(ddn_ids)
    ddn, pool = split_ddn(articles, ddn_set)
    ddn_rows = [_stamp(article, DDN_NAME, month, date) for article in ddn]

    ordered_pool = get_strategy(method).order_pool(pool)

    # Local to this call so repeated previews never share claims
    assigned: Set[str] = set()
    person_rows: List[AllocatedArticle] = []
    for requester in requesters:
        person_rows.extend(
            claim_articles(
                ordered_pool,
                assigned,
                requester.label,
                requester.value or 0,
                month,
                date,
            )
        )

    return ddn_rows + person_rows
