"""Greedy per-position assignment of owned modules to frame edges."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ..inventory import Inventory, WorkingInventory
from ..value_objects import AssignedSegment, Edge, SegmentStatus
from .segment_decomposer import SegmentDecomposer

__all__ = ["FrameAssignment", "InventoryMatcher", "assign", "assign_frame"]


@dataclass(frozen=True)
class FrameAssignment:
    """Per-edge assignment of a whole frame.

    Attributes:
        top: Assigned pieces of the top beam.
        bottom: Assigned pieces of the bottom beam.
        left: Assigned pieces of the left column.
        right: Assigned pieces of the right column.
        leftover: Stock remaining after all four edges were assigned.
    """

    top: tuple[AssignedSegment, ...]
    bottom: tuple[AssignedSegment, ...]
    left: tuple[AssignedSegment, ...]
    right: tuple[AssignedSegment, ...]
    leftover: Inventory

    def edge(self, edge: Edge) -> tuple[AssignedSegment, ...]:
        return getattr(self, edge.value)

    def edges(self) -> list[tuple[Edge, tuple[AssignedSegment, ...]]]:
        """Edges in assignment order."""
        return [(edge, self.edge(edge)) for edge in Edge]

    @property
    def owned_count(self) -> int:
        return sum(seg.is_owned for _, segs in self.edges() for seg in segs)

    @property
    def missing_count(self) -> int:
        return sum(not seg.is_owned for _, segs in self.edges() for seg in segs)

    @property
    def fully_owned(self) -> bool:
        return self.missing_count == 0


class InventoryMatcher:
    """Marks each piece of an edge as owned or missing, first come first served.

    There is no substitution across sizes (a missing 250 is not cut from a
    spare 500) and no backtracking. When a whole frame is assigned, a single
    working copy is consumed in the order top, bottom, left, right, so a later
    edge can run short even when an earlier one was fully covered.
    """

    def __init__(self, decomposer: SegmentDecomposer | None = None) -> None:
        self.decomposer = decomposer or SegmentDecomposer()

    @staticmethod
    def assign(
        sequence: Sequence[int],
        working: WorkingInventory,
    ) -> tuple[AssignedSegment, ...]:
        """Assign one ordered piece sequence, consuming ``working``."""
        return tuple(
            AssignedSegment(
                length=length,
                status=SegmentStatus.OWNED if working.take(length) else SegmentStatus.MISSING,
            )
            for length in sequence
        )

    def assign_frame(
        self,
        width: int,
        height: int,
        inventory: Inventory,
    ) -> FrameAssignment:
        """Assign all four edges of a frame from one inventory snapshot."""
        h_list = self.decomposer.decompose_ordered(width)
        v_list = self.decomposer.decompose_ordered(height)

        working = inventory.working_copy()
        sequences = {
            Edge.TOP: h_list,
            Edge.BOTTOM: h_list,
            Edge.LEFT: v_list,
            Edge.RIGHT: v_list,
        }
        assigned = {edge: self.assign(sequences[edge], working) for edge in Edge}

        return FrameAssignment(
            top=assigned[Edge.TOP],
            bottom=assigned[Edge.BOTTOM],
            left=assigned[Edge.LEFT],
            right=assigned[Edge.RIGHT],
            leftover=working.snapshot(),
        )


def _as_inventory(inventory: Inventory | Mapping[int, int]) -> Inventory:
    if isinstance(inventory, Inventory):
        return inventory
    return Inventory.from_mapping(inventory)


def assign(
    sequence: Sequence[int],
    inventory: Inventory | Mapping[int, int],
) -> tuple[AssignedSegment, ...]:
    """Assign a single sequence against a private copy of ``inventory``."""
    return InventoryMatcher.assign(sequence, _as_inventory(inventory).working_copy())


def assign_frame(
    width: int,
    height: int,
    inventory: Inventory | Mapping[int, int],
) -> FrameAssignment:
    """Assign all four frame edges, in edge order, from ``inventory``."""
    return InventoryMatcher().assign_frame(width, height, _as_inventory(inventory))
