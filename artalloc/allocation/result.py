"""Final allocation, preview rows and submission payloads."""

from typing import Dict, Iterable, List, Mapping, Optional

from rich.console import Console
from rich.table import Table

from ..models import (
    DDN_NAME,
    UNALLOCATED_NAME,
    AllocatedArticle,
    AllocationItem,
    ArticleLine,
    ArticleOverride,
    FinalAllocationResult,
    ParsedArticle,
    PersonAllocation,
    PreviewResult,
    PriorityField,
)
from .distribution import distribute_articles, normalize_ddn_ids
from .strategies import AllocationMethod, normalize_method

console = Console()


def _line(article: ParsedArticle, month: str, date: str) -> ArticleLine:
    return ArticleLine(
        article_id=article.article_id,
        pages=article.pages,
        month=month,
        date=date,
    )


def group_by_person(allocated: Iterable[AllocatedArticle]) -> List[PersonAllocation]:
    """Group non-DDN rows by name, in first-seen order."""
    groups: Dict[str, List[ArticleLine]] = {}
    for row in allocated:
        if row.name == DDN_NAME:
            continue
        groups.setdefault(row.name, []).append(row.to_line())

    return [
        PersonAllocation(person=person, articles=lines)
        for person, lines in groups.items()
    ]


def build_final_allocation(
    requesters: List[PriorityField],
    articles: List[ParsedArticle],
    ddn_ids: Optional[Iterable[str]],
    method: Optional[str],
    month: str,
    date: str,
) -> FinalAllocationResult:
    """
    Build the grouped allocation for submission.

    Runs the distribution, then splits the outcome into person groups,
    DDN articles (input order) and unallocated articles (input order).
    Over-allocation and DDN errors must be checked by the caller first.
    """
    ddn_set = normalize_ddn_ids(ddn_ids)
    allocated = distribute_articles(requesters, articles, ddn_set, method, month, date)
    allocated_ids = {row.article_id for row in allocated}

    ddn_articles = [
        _line(article, month, date)
        for article in articles
        if article.article_id in ddn_set
    ]
    unallocated_articles = [
        _line(article, month, date)
        for article in articles
        if article.article_id not in allocated_ids and article.article_id not in ddn_set
    ]

    return FinalAllocationResult(
        person_allocations=group_by_person(allocated),
        ddn_articles=ddn_articles,
        unallocated_articles=unallocated_articles,
    )


def get_unallocated_articles(
    articles: List[ParsedArticle],
    allocated_ids: Iterable[str],
    method: Optional[str],
    month: str,
    date: str,
) -> List[AllocatedArticle]:
    """Rows named NEED TO ALLOCATE; largest first when allocating by pages."""
    allocated = set(allocated_ids)
    rows = [
        AllocatedArticle(
            name=UNALLOCATED_NAME,
            article_id=article.article_id,
            pages=article.pages,
            month=month,
            date=date,
        )
        for article in articles
        if article.article_id not in allocated
    ]
    if normalize_method(method) is AllocationMethod.BY_PAGES:
        rows = sorted(rows, key=lambda row: row.pages, reverse=True)
    return rows


def apply_display_overrides(
    rows: List[AllocatedArticle],
    overrides: Optional[Mapping[str, ArticleOverride]],
) -> List[AllocatedArticle]:
    """Overwrite the fields set on each row's override, keyed by article id."""
    if not overrides:
        return list(rows)

    result = []
    for row in rows:
        override = overrides.get(row.article_id)
        if override is None:
            result.append(row)
            continue
        changes = override.model_dump(exclude_none=True)
        result.append(row.model_copy(update=changes))
    return result


def build_preview(
    requesters: List[PriorityField],
    articles: List[ParsedArticle],
    ddn_ids: Optional[Iterable[str]],
    method: Optional[str],
    month: str,
    date: str,
    overrides: Optional[Mapping[str, ArticleOverride]] = None,
) -> PreviewResult:
    """Flat preview rows: allocated then unallocated, with hand edits applied last."""
    allocated = distribute_articles(requesters, articles, ddn_ids, method, month, date)
    unallocated = get_unallocated_articles(
        articles,
        (row.article_id for row in allocated),
        method,
        month,
        date,
    )
    display = apply_display_overrides(allocated + unallocated, overrides)

    return PreviewResult(
        allocated_articles=allocated,
        unallocated_articles=unallocated,
        display_articles=display,
    )


def _item(line: ArticleLine, done_by: str) -> AllocationItem:
    return AllocationItem(
        month=line.month,
        date=line.date,
        article_number=line.article_id,
        pages=line.pages,
        done_by=done_by,
    )


def transform_allocation_to_payload(result: FinalAllocationResult) -> List[AllocationItem]:
    """Flatten an allocation into webhook rows: persons, DDN, then unallocated."""
    items = [
        _item(line, allocation.person)
        for allocation in result.person_allocations
        for line in allocation.articles
    ]
    items.extend(_item(line, DDN_NAME) for line in result.ddn_articles)
    items.extend(_item(line, UNALLOCATED_NAME) for line in result.unallocated_articles)
    return items


def format_allocation_for_copy(result: FinalAllocationResult) -> str:
    """"ARTICLE_ID NAME" lines sorted by name, then article id."""
    pairs = [
        (line.article_id, allocation.person)
        for allocation in result.person_allocations
        for line in allocation.articles
    ]
    pairs.extend((line.article_id, DDN_NAME) for line in result.ddn_articles)
    pairs.extend((line.article_id, UNALLOCATED_NAME) for line in result.unallocated_articles)

    pairs.sort(key=lambda pair: (pair[1].lower(), pair[0]))
    return "\n".join(f"{article_id} {name}" for article_id, name in pairs)


def print_allocation_summary(result: FinalAllocationResult) -> None:
    """Print allocation summary."""
    table = Table(title="Allocation Summary")
    table.add_column("Done by", style="cyan")
    table.add_column("Articles", style="green", justify="right")
    table.add_column("Pages", style="magenta", justify="right")
    table.add_column("Article IDs", style="white")

    def add_row(name: str, lines: List[ArticleLine], style: Optional[str] = None) -> None:
        table.add_row(
            name,
            str(len(lines)),
            str(sum(line.pages for line in lines)),
            ", ".join(line.article_id for line in lines),
            style=style,
        )

    for allocation in result.person_allocations:
        add_row(allocation.person, allocation.articles)
    if result.ddn_articles:
        add_row(DDN_NAME, result.ddn_articles, style="yellow")
    if result.unallocated_articles:
        add_row(UNALLOCATED_NAME, result.unallocated_articles, style="red")

    console.print(table)
