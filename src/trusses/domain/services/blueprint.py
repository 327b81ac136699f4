"""Positional layout of assigned pieces along each frame edge.

Offsets are in mm from the start of the edge: left to right for the beams,
top to bottom for the columns.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..inventory import Inventory
from ..value_objects import AssignedSegment, Edge, SegmentStatus
from .inventory_matcher import FrameAssignment, InventoryMatcher

__all__ = ["BlueprintPlanner", "EdgeLayout", "FrameBlueprint", "PlacedSegment"]


@dataclass(frozen=True)
class PlacedSegment:
    """An assigned piece with its span along the edge."""

    length: int
    status: SegmentStatus
    start: int
    end: int

    @property
    def is_owned(self) -> bool:
        return self.status is SegmentStatus.OWNED


@dataclass(frozen=True)
class EdgeLayout:
    """All placed pieces of one edge."""

    edge: Edge
    segments: tuple[PlacedSegment, ...]

    @property
    def length(self) -> int:
        return self.segments[-1].end if self.segments else 0

    @property
    def owned_count(self) -> int:
        return sum(seg.is_owned for seg in self.segments)

    @property
    def missing_count(self) -> int:
        return len(self.segments) - self.owned_count


@dataclass(frozen=True)
class FrameBlueprint:
    """Layouts of the four edges of a frame."""

    width: int
    height: int
    edges: tuple[EdgeLayout, ...]

    def edge(self, edge: Edge) -> EdgeLayout:
        for layout in self.edges:
            if layout.edge is edge:
                return layout
        raise KeyError(edge)

    @property
    def owned_count(self) -> int:
        return sum(layout.owned_count for layout in self.edges)

    @property
    def missing_count(self) -> int:
        return sum(layout.missing_count for layout in self.edges)


def place(edge: Edge, assigned: tuple[AssignedSegment, ...]) -> EdgeLayout:
    """Accumulate piece lengths into start/end offsets."""
    placed: list[PlacedSegment] = []
    offset = 0
    for seg in assigned:
        placed.append(
            PlacedSegment(
                length=seg.length,
                status=seg.status,
                start=offset,
                end=offset + seg.length,
            )
        )
        offset += seg.length
    return EdgeLayout(edge=edge, segments=tuple(placed))


class BlueprintPlanner:
    """Builds a FrameBlueprint from a frame size and inventory."""

    def __init__(self, matcher: InventoryMatcher | None = None) -> None:
        self.matcher = matcher or InventoryMatcher()

    def layout(self, width: int, height: int, inventory: Inventory) -> FrameBlueprint:
        assignment = self.matcher.assign_frame(width, height, inventory)
        return self.from_assignment(width, height, assignment)

    @staticmethod
    def from_assignment(
        width: int,
        height: int,
        assignment: FrameAssignment,
    ) -> FrameBlueprint:
        return FrameBlueprint(
            width=width,
            height=height,
            edges=tuple(place(edge, segs) for edge, segs in assignment.edges()),
        )
