"""Roster ordering and requested-count helpers for priority fields."""

from typing import Dict, Iterable, List, Mapping

from ..models import PriorityField


def create_initial_priority_fields(members: Iterable[Mapping[str, str]]) -> List[PriorityField]:
    """Priority fields for roster members, all starting at 0 articles."""
    return [
        PriorityField(id=str(member["id"]), label=member["label"], value=0)
        for member in members
    ]


def extract_priority_order(fields: Iterable[PriorityField]) -> List[str]:
    """Field ids in their current order."""
    return [field.id for field in fields]


def reorder_priority_fields(
    fields: List[PriorityField],
    saved_order: Iterable[str],
) -> List[PriorityField]:
    """
    Reorder fields to match a saved id order.

    Ids in the saved order that no longer exist are ignored; fields missing
    from the saved order (new members) keep their relative order at the end.
    """
    by_id = {field.id: field for field in fields}
    reordered: List[PriorityField] = []
    used = set()

    for field_id in saved_order:
        field = by_id.get(field_id)
        if field is not None and field_id not in used:
            reordered.append(field)
            used.add(field_id)

    reordered.extend(field for field in fields if field.id not in used)
    return reordered


def move_priority_field(
    fields: List[PriorityField],
    from_index: int,
    to_index: int,
) -> List[PriorityField]:
    """Return a new list with one field moved (drag to reorder)."""
    size = len(fields)
    if not 0 <= from_index < size or not 0 <= to_index < size:
        raise IndexError(
            f"Cannot move field {from_index} -> {to_index} in a list of {size}"
        )

    moved = list(fields)
    field = moved.pop(from_index)
    moved.insert(to_index, field)
    return moved


def apply_requested_counts(
    fields: List[PriorityField],
    counts: Mapping[str, int],
) -> List[PriorityField]:
    """Copies of ``fields`` with values taken from a label -> count mapping."""
    return [
        field.model_copy(update={"value": max(0, int(counts.get(field.label, 0)))})
        for field in fields
    ]


def has_priority_fields_changed(
    current: Iterable[PriorityField],
    new: Iterable[PriorityField],
) -> bool:
    """Check if the set of labels differs, ignoring order."""
    return sorted(f.label for f in current) != sorted(f.label for f in new)


def calculate_proportional_distribution(
    total_articles: int,
    fields: List[PriorityField],
) -> Dict[int, int]:
    """
    Spread ``total_articles`` across fields.

    With no current values the split is even and the first fields take the
    remainder; otherwise it follows the current ratios and the last field
    absorbs the rounding difference.

    Returns:
        Mapping of field index to new count
    """
    distribution: Dict[int, int] = {}
    if not fields or total_articles <= 0:
        return distribution

    current_total = sum(field.value or 0 for field in fields)

    if current_total == 0:
        per_person, remainder = divmod(total_articles, len(fields))
        for index in range(len(fields)):
            distribution[index] = per_person + (1 if index < remainder else 0)
        return distribution

    distributed = 0
    last = len(fields) - 1
    for index, field in enumerate(fields):
        if index == last:
            count = total_articles - distributed
        else:
            # Round half up, not banker's rounding
            count = int(total_articles * (field.value or 0) / current_total + 0.5)
            count = min(count, total_articles - distributed)
        distribution[index] = count
        distributed += count
    return distribution
