"""Tests for the greedy edge-by-edge inventory matcher."""

from __future__ import annotations

from trusses.domain import (
    Edge,
    Inventory,
    InventoryMatcher,
    SegmentStatus,
    aggregate,
    assign,
    assign_frame,
    is_buildable,
)

OWNED = SegmentStatus.OWNED
MISSING = SegmentStatus.MISSING


def statuses(segments) -> list[SegmentStatus]:
    return [seg.status for seg in segments]


class TestAssignSequence:
    """Tests for a single ordered sequence."""

    def test_marks_owned_until_stock_runs_out(self) -> None:
        result = assign([1000, 1000, 1000], {1000: 2})

        assert statuses(result) == [OWNED, OWNED, MISSING]

    def test_no_substitution_across_sizes(self) -> None:
        result = assign([1000, 500, 250], {500: 2})

        assert statuses(result) == [MISSING, OWNED, MISSING]

    def test_custom_piece_is_missing_without_stock(self) -> None:
        result = assign([1000, 100], {1000: 1})

        assert statuses(result) == [OWNED, MISSING]

    def test_does_not_mutate_caller_inventory(self) -> None:
        inv = Inventory.from_mapping({1000: 3})
        assign([1000, 1000, 1000], inv)

        assert inv.count(1000) == 3

    def test_is_deterministic(self) -> None:
        first = assign([1000, 500, 500, 250], {500: 1, 250: 1})
        second = assign([1000, 500, 500, 250], {500: 1, 250: 1})

        assert first == second


class TestAssignFrame:
    """Tests for whole-frame assignment in top, bottom, left, right order."""

    def test_full_stock_owns_every_piece(self, stage_inventory: Inventory) -> None:
        assignment = assign_frame(3000, 2500, stage_inventory)

        assert assignment.fully_owned
        assert assignment.owned_count == 12
        assert assignment.leftover.to_dict() == {1000: 0, 500: 0}

    def test_top_edge_consumes_first(self) -> None:
        assignment = assign_frame(3000, 2500, {1000: 3})

        assert statuses(assignment.top) == [OWNED, OWNED, OWNED]
        assert statuses(assignment.bottom) == [MISSING, MISSING, MISSING]
        assert statuses(assignment.left) == [MISSING, MISSING, MISSING]
        assert statuses(assignment.right) == [MISSING, MISSING, MISSING]

    def test_right_edge_starves_last(self) -> None:
        assignment = assign_frame(3000, 2500, {1000: 8, 500: 2})

        assert statuses(assignment.left) == [OWNED, OWNED, OWNED]
        assert statuses(assignment.right) == [MISSING, MISSING, OWNED]
        assert assignment.missing_count == 2

    def test_edge_order(self) -> None:
        assignment = assign_frame(2000, 1000, {})

        assert [edge for edge, _ in assignment.edges()] == [
            Edge.TOP,
            Edge.BOTTOM,
            Edge.LEFT,
            Edge.RIGHT,
        ]
        assert len(assignment.edge(Edge.TOP)) == 2
        assert len(assignment.edge(Edge.LEFT)) == 1

    def test_edge_owned_while_frame_not_buildable(self) -> None:
        inventory = Inventory.from_mapping({1000: 3})
        assignment = InventoryMatcher().assign_frame(3000, 2500, inventory)
        required = aggregate(3000, 2500).required

        assert all(seg.is_owned for seg in assignment.top)
        assert not is_buildable(required, inventory)

    def test_fully_owned_agrees_with_feasibility(self, short_inventory: Inventory) -> None:
        required = aggregate(3000, 2500).required

        assert not assign_frame(3000, 2500, short_inventory).fully_owned
        assert not is_buildable(required, short_inventory)

    def test_caller_inventory_untouched(self, stage_inventory: Inventory) -> None:
        assign_frame(3000, 2500, stage_inventory)

        assert stage_inventory.to_dict() == {1000: 10, 500: 2}
