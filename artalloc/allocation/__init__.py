"""Article allocation: validation, distribution and result building."""

from .distribution import claim_articles, distribute_articles, normalize_ddn_ids, split_ddn
from .priority import (
    apply_requested_counts,
    calculate_proportional_distribution,
    create_initial_priority_fields,
    extract_priority_order,
    has_priority_fields_changed,
    move_priority_field,
    reorder_priority_fields,
)
from .result import (
    apply_display_overrides,
    build_final_allocation,
    build_preview,
    format_allocation_for_copy,
    get_unallocated_articles,
    group_by_person,
    print_allocation_summary,
    transform_allocation_to_payload,
)
from .strategies import (
    AllocationMethod,
    AllocationStrategy,
    PagesStrategy,
    PriorityStrategy,
    get_strategy,
    normalize_method,
)
from .validation import (
    DUPLICATE_DDN_ERROR,
    UNKNOWN_DDN_ERROR,
    calculate_allocated_count,
    calculate_new_allocated_total,
    calculate_remaining_articles,
    check_allocation,
    get_over_allocation_message,
    is_over_allocated,
    parse_ddn_lines,
    validate_ddn_articles,
)

__all__ = [
    "AllocationMethod",
    "AllocationStrategy",
    "DUPLICATE_DDN_ERROR",
    "PagesStrategy",
    "PriorityStrategy",
    "UNKNOWN_DDN_ERROR",
    "apply_display_overrides",
    "apply_requested_counts",
    "build_final_allocation",
    "build_preview",
    "calculate_allocated_count",
    "calculate_new_allocated_total",
    "calculate_proportional_distribution",
    "calculate_remaining_articles",
    "check_allocation",
    "claim_articles",
    "create_initial_priority_fields",
    "distribute_articles",
    "extract_priority_order",
    "format_allocation_for_copy",
    "get_over_allocation_message",
    "get_strategy",
    "get_unallocated_articles",
    "group_by_person",
    "has_priority_fields_changed",
    "is_over_allocated",
    "move_priority_field",
    "normalize_ddn_ids",
    "normalize_method",
    "parse_ddn_lines",
    "print_allocation_summary",
    "reorder_priority_fields",
    "split_ddn",
    "transform_allocation_to_payload",
    "validate_ddn_articles",
]
