"""Tests for artalloc.allocation.validation."""

from artalloc.allocation import (
    DUPLICATE_DDN_ERROR,
    UNKNOWN_DDN_ERROR,
    calculate_allocated_count,
    calculate_new_allocated_total,
    calculate_remaining_articles,
    check_allocation,
    get_over_allocation_message,
    is_over_allocated,
    validate_ddn_articles,
)

from .conftest import requesters


class TestValidateDdnArticles:
    def test_empty_text_is_valid(self) -> None:
        result = validate_ddn_articles("", ["A"])
        assert result.articles == []
        assert result.error is None

    def test_blank_lines_only_is_valid(self) -> None:
        assert validate_ddn_articles("\n  \n", ["A"]).error is None

    def test_none_text_is_valid(self) -> None:
        assert validate_ddn_articles(None, []).articles == []

    def test_duplicate_rejects_whole_batch(self) -> None:
        result = validate_ddn_articles("A\nA", ["A", "B"])
        assert result.articles == []
        assert result.error == DUPLICATE_DDN_ERROR
        assert not result.is_valid

    def test_duplicate_rejected_without_available_ids(self) -> None:
        assert validate_ddn_articles("A\nB\nA", []).error == DUPLICATE_DDN_ERROR

    def test_unknown_id_rejects_batch(self) -> None:
        result = validate_ddn_articles("A\nZ", ["A", "B"])
        assert result.articles == []
        assert result.error == UNKNOWN_DDN_ERROR

    def test_membership_skipped_when_available_empty(self) -> None:
        result = validate_ddn_articles("X1\nY2", [])
        assert result.articles == ["X1", "Y2"]
        assert result.error is None

    def test_trims_lines_and_keeps_order(self) -> None:
        result = validate_ddn_articles("  B \n\nA", ["A", "B", "C"])
        assert result.articles == ["B", "A"]

    def test_normalizes_case_like_the_parser(self) -> None:
        result = validate_ddn_articles("cdc101217", ["CDC101217"])
        assert result.articles == ["CDC101217"]
        assert result.error is None

    def test_case_variants_count_as_duplicates(self) -> None:
        assert validate_ddn_articles("abc1\nABC1", []).error == DUPLICATE_DDN_ERROR


class TestAllocationCounts:
    def test_allocated_count_sums_values(self) -> None:
        assert calculate_allocated_count(requesters(("Ruchi", 5), ("Karishma", 3))) == 8

    def test_remaining_can_be_negative(self) -> None:
        assert calculate_remaining_articles(10, 7) == 3
        assert calculate_remaining_articles(10, 12) == -2

    def test_new_allocated_total_replaces_one_value(self) -> None:
        fields = requesters(("Ruchi", 5), ("Karishma", 3))
        assert calculate_new_allocated_total(fields, "1", 7) == 10

    def test_is_over_allocated(self) -> None:
        assert is_over_allocated(10, 12) is True
        assert is_over_allocated(10, 8) is False
        assert is_over_allocated(0, 5) is False

    def test_over_allocation_message(self) -> None:
        assert get_over_allocation_message(1) == "You are allocating 1 more article than available."
        assert get_over_allocation_message(5) == "You are allocating 5 more articles than available."


class TestCheckAllocation:
    def test_within_budget(self) -> None:
        check = check_allocation(requesters(("Alice", 1), ("Bob", 2)), 3)
        assert check.is_over_allocated is False
        assert check.remaining_articles == 0
        assert check.allocated_article_count == 3
        assert check.errors == []

    def test_ddn_reduces_budget(self) -> None:
        check = check_allocation(requesters(("Alice", 3)), 3, "A", ["A", "B", "C"])
        assert check.is_over_allocated is True
        assert check.remaining_articles == -1
        assert check.errors == [get_over_allocation_message(1)]

    def test_single_article_over_requested(self) -> None:
        check = check_allocation(requesters(("Alice", 3)), 1)
        assert check.is_over_allocated is True
        assert check.errors == [get_over_allocation_message(2)]

    def test_reports_ddn_error(self) -> None:
        check = check_allocation(requesters(("Alice", 1)), 2, "A\nA", ["A", "B"])
        assert check.ddn_validation_error == DUPLICATE_DDN_ERROR
        assert DUPLICATE_DDN_ERROR in check.errors
        assert check.is_over_allocated is False

    def test_serializes_with_camel_case(self) -> None:
        wire = check_allocation(requesters(("Alice", 1)), 2).to_wire()
        assert set(wire) == {
            "isOverAllocated",
            "remainingArticles",
            "allocatedArticleCount",
            "ddnValidationError",
            "errors",
        }
