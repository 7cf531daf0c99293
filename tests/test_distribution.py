"""Tests for artalloc.allocation.distribution and strategies."""

import pytest

from artalloc.allocation import (
    AllocationMethod,
    PagesStrategy,
    PriorityStrategy,
    claim_articles,
    distribute_articles,
    get_strategy,
    normalize_method,
)
from artalloc.models import DDN_NAME

from .conftest import DATE, MONTH, articles, requesters

BY_PAGES = "allocate by pages"
BY_PRIORITY = "allocate by priority"


def claimed_by(rows, name):
    return [row.article_id for row in rows if row.name == name]


class TestNormalizeMethod:
    @pytest.mark.parametrize("raw", ["allocate by pages", "  Allocate By PAGES ", AllocationMethod.BY_PAGES])
    def test_pages_variants(self, raw) -> None:
        assert normalize_method(raw) is AllocationMethod.BY_PAGES

    @pytest.mark.parametrize("raw", ["allocate by priority", "", None, "by size", "pages"])
    def test_everything_else_is_priority(self, raw) -> None:
        assert normalize_method(raw) is AllocationMethod.BY_PRIORITY

    def test_get_strategy(self) -> None:
        assert isinstance(get_strategy(BY_PAGES), PagesStrategy)
        assert isinstance(get_strategy("whatever"), PriorityStrategy)


class TestStrategies:
    def test_pages_sort_is_stable_descending(self) -> None:
        pool = articles(("A", 2), ("B", 9), ("C", 2), ("D", 9), ("E", 5))
        ordered = PagesStrategy().order_pool(pool)
        assert [a.article_id for a in ordered] == ["B", "D", "E", "A", "C"]

    def test_strategies_do_not_mutate_pool(self) -> None:
        pool = articles(("A", 1), ("B", 9))
        PagesStrategy().order_pool(pool)
        assert [a.article_id for a in pool] == ["A", "B"]
        assert PriorityStrategy().order_pool(pool) is not pool


class TestClaimArticles:
    def test_skips_assigned_and_updates_set(self) -> None:
        assigned = {"A"}
        rows = claim_articles(articles(("A", 1), ("B", 2), ("C", 3)), assigned, "Bob", 1, MONTH, DATE)
        assert [r.article_id for r in rows] == ["B"]
        assert assigned == {"A", "B"}

    def test_zero_count_claims_nothing(self) -> None:
        assigned = set()
        assert claim_articles(articles(("A", 1)), assigned, "Bob", 0, MONTH, DATE) == []
        assert assigned == set()


class TestDistributeArticles:
    def test_empty_articles(self) -> None:
        assert distribute_articles(requesters(("Alice", 3)), [], ["A"], BY_PAGES, MONTH, DATE) == []

    def test_priority_exact_fit(self, abc_articles) -> None:
        rows = distribute_articles(
            requesters(("Alice", 1), ("Bob", 2)), abc_articles, [], BY_PRIORITY, MONTH, DATE
        )
        assert claimed_by(rows, "Alice") == ["A"]
        assert claimed_by(rows, "Bob") == ["B", "C"]
        assert [row.name for row in rows] == ["Alice", "Bob", "Bob"]

    def test_pages_mode_takes_largest(self, abc_articles) -> None:
        rows = distribute_articles(requesters(("Alice", 1)), abc_articles, [], BY_PAGES, MONTH, DATE)
        assert claimed_by(rows, "Alice") == ["C"]
        assert rows[0].pages == 8

    def test_pages_mode_second_requester_gets_next_largest(self) -> None:
        pool = articles(("A", 1), ("B", 4), ("C", 4), ("D", 10))
        rows = distribute_articles(
            requesters(("Alice", 2), ("Bob", 2)), pool, [], BY_PAGES, MONTH, DATE
        )
        assert claimed_by(rows, "Alice") == ["D", "B"]
        assert claimed_by(rows, "Bob") == ["C", "A"]

    def test_ddn_rows_first_and_excluded_from_pool(self) -> None:
        pool = articles(("A", 1), ("B", 50), ("C", 3))
        for method in (BY_PAGES, BY_PRIORITY):
            rows = distribute_articles(requesters(("Alice", 5)), pool, ["B"], method, MONTH, DATE)
            assert rows[0].name == DDN_NAME
            assert rows[0].article_id == "B"
            assert "B" not in claimed_by(rows, "Alice")

    def test_ddn_rows_keep_input_order(self) -> None:
        pool = articles(("A", 1), ("B", 2), ("C", 3))
        rows = distribute_articles([], pool, ["C", "A"], BY_PRIORITY, MONTH, DATE)
        assert [row.article_id for row in rows] == ["A", "C"]
        assert all(row.name == DDN_NAME for row in rows)

    def test_ddn_ids_match_case_insensitively(self) -> None:
        rows = distribute_articles([], articles(("CDC1", 1)), ["cdc1"], BY_PRIORITY, MONTH, DATE)
        assert rows[0].name == DDN_NAME

    def test_lowercase_article_and_ddn_id_stay_out_of_pool(self) -> None:
        pool = articles(("cdc1", 4), ("B2", 1))
        rows = distribute_articles(requesters(("Alice", 5)), pool, ["cdc1"], BY_PRIORITY, MONTH, DATE)
        assert (rows[0].name, rows[0].article_id) == (DDN_NAME, "CDC1")
        assert claimed_by(rows, "Alice") == ["B2"]

    def test_zero_value_requester_is_skipped(self, abc_articles) -> None:
        rows = distribute_articles(
            requesters(("Alice", 0), ("Bob", 1)), abc_articles, [], BY_PRIORITY, MONTH, DATE
        )
        assert claimed_by(rows, "Alice") == []
        assert claimed_by(rows, "Bob") == ["A"]

    def test_under_fill_without_error(self) -> None:
        rows = distribute_articles(
            requesters(("Alice", 3), ("Bob", 2)), articles(("A", 1)), [], BY_PRIORITY, MONTH, DATE
        )
        assert claimed_by(rows, "Alice") == ["A"]
        assert claimed_by(rows, "Bob") == []

    def test_no_article_claimed_twice(self) -> None:
        pool = articles(*[(f"ART{i}", i % 4) for i in range(20)])
        rows = distribute_articles(
            requesters(("A", 7), ("B", 7), ("C", 7)), pool, ["ART3"], BY_PAGES, MONTH, DATE
        )
        ids = [row.article_id for row in rows]
        assert len(ids) == len(set(ids)) == 20

    def test_duplicate_ids_claimed_once(self) -> None:
        pool = articles(("A", 1), ("A", 2), ("B", 3))
        rows = distribute_articles(requesters(("Alice", 3)), pool, [], BY_PRIORITY, MONTH, DATE)
        assert claimed_by(rows, "Alice") == ["A", "B"]

    def test_rows_are_stamped(self, abc_articles) -> None:
        rows = distribute_articles(requesters(("Alice", 1)), abc_articles, [], BY_PRIORITY, "May", "01/05/2025")
        assert (rows[0].month, rows[0].date, rows[0].pages) == ("May", "01/05/2025", 5)

    def test_inputs_are_not_mutated(self, abc_articles) -> None:
        fields = requesters(("Alice", 2))
        before = [a.model_dump() for a in abc_articles]
        distribute_articles(fields, abc_articles, ["B"], BY_PAGES, MONTH, DATE)
        assert [a.model_dump() for a in abc_articles] == before
        assert fields[0].value == 2

    def test_unknown_method_falls_back_to_priority(self, abc_articles) -> None:
        rows = distribute_articles(requesters(("Alice", 1)), abc_articles, [], "nonsense", MONTH, DATE)
        assert claimed_by(rows, "Alice") == ["A"]
