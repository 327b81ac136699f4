"""Aggregates both frame axes into a module table and hardware counts."""

from __future__ import annotations

from ..value_objects import FrameRequirements, HardwareTally, JointTally, SegmentRun
from .segment_decomposer import SegmentDecomposer

__all__ = ["RequirementAggregator", "aggregate"]


class RequirementAggregator:
    """Computes the full module and hardware requirement for a frame.

    A frame has two beams of ``width`` and two columns of ``height``. Joints
    are counted between consecutive pieces on each of the four edges, plus a
    constant number of corner and base plate connections.
    """

    def __init__(self, decomposer: SegmentDecomposer | None = None) -> None:
        self.decomposer = decomposer or SegmentDecomposer()

    def aggregate(self, width: int, height: int) -> FrameRequirements:
        """Build the requirement for a ``width`` x ``height`` frame.

        Raises:
            InvalidDimensionError: If either dimension is not positive.
        """
        horizontal = self.decomposer.decompose(width)
        vertical = self.decomposer.decompose(height)

        required = self.required_table(horizontal, vertical)

        total_h = sum(run.count for run in horizontal)
        total_v = sum(run.count for run in vertical)
        joints = JointTally(
            internal_joints=max(0, total_h - 1) * 2 + max(0, total_v - 1) * 2
        )

        return FrameRequirements(
            width=width,
            height=height,
            horizontal=horizontal,
            vertical=vertical,
            required=required,
            joints=joints,
            hardware=HardwareTally.for_joints(joints.total_joints),
        )

    @staticmethod
    def required_table(
        horizontal: tuple[SegmentRun, ...],
        vertical: tuple[SegmentRun, ...],
    ) -> dict[int, int]:
        """Required count per module length, descending by length."""
        table: dict[int, int] = {}
        for run in (*horizontal, *vertical):
            table[run.length] = table.get(run.length, 0) + run.count * 2
        return dict(sorted(table.items(), reverse=True))


def aggregate(width: int, height: int) -> FrameRequirements:
    """Aggregate a frame over the standard catalog."""
    return RequirementAggregator().aggregate(width, height)
