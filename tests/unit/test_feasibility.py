"""Tests for FeasibilityChecker."""

from __future__ import annotations

import pytest

from trusses.domain import FeasibilityChecker, Inventory, aggregate, is_buildable, shortages


class TestIsBuildable:
    def test_exact_stock_is_buildable(self, stage_inventory: Inventory) -> None:
        assert is_buildable(aggregate(3000, 2500).required, stage_inventory)

    def test_one_short_is_not_buildable(self, short_inventory: Inventory) -> None:
        assert not is_buildable(aggregate(3000, 2500).required, short_inventory)

    def test_missing_size_counts_as_zero(self) -> None:
        assert not is_buildable({250: 2}, {1000: 50})

    def test_empty_requirement_is_buildable(self) -> None:
        assert is_buildable({}, {})

    def test_accepts_plain_mappings(self) -> None:
        assert FeasibilityChecker.is_buildable({1000: 4}, {1000: 4, 500: 1})

    @pytest.mark.parametrize("extra", [{1000: 1}, {500: 3}, {250: 7}])
    def test_adding_stock_keeps_frame_buildable(self, extra: dict[int, int]) -> None:
        required = aggregate(3000, 2500).required
        base = Inventory.from_mapping({1000: 10, 500: 2})
        more = base
        for length, count in extra.items():
            more = more.add(length, count)

        assert is_buildable(required, base)
        assert is_buildable(required, more)


class TestShortages:
    def test_rows_in_descending_length(self) -> None:
        rows = shortages({250: 2, 1000: 4, 500: 2}, {})

        assert [row.length for row in rows] == [1000, 500, 250]

    def test_shortage_is_required_minus_owned(self, short_inventory: Inventory) -> None:
        rows = shortages(aggregate(3000, 2500).required, short_inventory)

        assert [(r.length, r.required, r.owned, r.shortage) for r in rows] == [
            (1000, 10, 9, 1),
            (500, 2, 2, 0),
        ]

    def test_surplus_is_not_negative(self) -> None:
        (row,) = shortages({500: 2}, {500: 9})

        assert row.shortage == 0
        assert row.is_sufficient
