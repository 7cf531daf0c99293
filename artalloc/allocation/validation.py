"""DDN validation and over-allocation checks run before distribution."""

from typing import Iterable, List, Optional

from ..models import AllocationCheck, DdnValidationResult, PriorityField

DUPLICATE_DDN_ERROR = "DDN articles must be unique. Remove duplicate article IDs."
UNKNOWN_DDN_ERROR = "Some DDN articles are not present in the new allocation list."


def parse_ddn_lines(text: Optional[str]) -> List[str]:
    """Split DDN textarea content into trimmed, upper-cased, non-empty lines."""
    if not text:
        return []
    return [line.strip().upper() for line in text.splitlines() if line.strip()]


def validate_ddn_articles(
    text: Optional[str],
    available_article_ids: Iterable[str],
) -> DdnValidationResult:
    """
    Parse and validate DDN textarea content.

    Rules:
        - one article id per line
        - ids must be unique, otherwise the whole batch is rejected
        - each id must be among the available ids, unless none are known yet

    Ids are upper-cased on both sides so they line up with parsed articles.

    Args:
        text: Raw textarea content
        available_article_ids: Ids of the parsed articles for this run

    Returns:
        Validation result with the accepted ids or an error message
    """
    lines = parse_ddn_lines(text)
    if not lines:
        return DdnValidationResult(articles=[], error=None)

    if len(set(lines)) != len(lines):
        return DdnValidationResult(articles=[], error=DUPLICATE_DDN_ERROR)

    available = {article_id.strip().upper() for article_id in available_article_ids}
    if available and any(line not in available for line in lines):
        return DdnValidationResult(articles=[], error=UNKNOWN_DDN_ERROR)

    return DdnValidationResult(articles=lines, error=None)


def calculate_allocated_count(fields: Iterable[PriorityField]) -> int:
    """Total number of articles requested across all fields."""
    return sum(field.value or 0 for field in fields)


def calculate_remaining_articles(total_articles: int, allocated_count: int) -> int:
    """Articles left over; negative when over-allocated."""
    return total_articles - allocated_count


def calculate_new_allocated_total(
    fields: Iterable[PriorityField],
    field_id: str,
    new_value: int,
) -> int:
    """Total requested if the field with ``field_id`` changed to ``new_value``."""
    return sum(
        new_value if field.id == field_id else (field.value or 0)
        for field in fields
    )


def is_over_allocated(total_articles: int, allocated_count: int) -> bool:
    """Check if more articles are requested than exist (ignored when none exist)."""
    return allocated_count > total_articles and total_articles > 0


def get_over_allocation_message(over_by: int) -> str:
    """User-facing over-allocation warning."""
    plural = "" if over_by == 1 else "s"
    return f"You are allocating {over_by} more article{plural} than available."


def check_allocation(
    fields: List[PriorityField],
    total_articles: int,
    ddn_text: Optional[str] = None,
    available_article_ids: Optional[Iterable[str]] = None,
) -> AllocationCheck:
    """
    Run every pre-flight check for one allocation run.

    DDN articles are taken out of the pool, so the requester budget is
    ``total_articles`` minus the accepted DDN count. Only accepted DDN ids
    count; a rejected DDN batch reserves nothing.
    """
    ddn_error: Optional[str] = None
    ddn_count = 0
    if ddn_text is not None:
        ddn = validate_ddn_articles(ddn_text, available_article_ids or [])
        ddn_error = ddn.error
        ddn_count = len(ddn.articles)

    pool_size = total_articles - ddn_count
    allocated_count = calculate_allocated_count(fields)
    remaining = calculate_remaining_articles(pool_size, allocated_count)
    over = is_over_allocated(total_articles, allocated_count + ddn_count)

    errors = []
    if over:
        errors.append(get_over_allocation_message(allocated_count - pool_size))
    if ddn_error:
        errors.append(ddn_error)

    return AllocationCheck(
        is_over_allocated=over,
        remaining_articles=remaining,
        allocated_article_count=allocated_count,
        ddn_validation_error=ddn_error,
        errors=errors,
    )
