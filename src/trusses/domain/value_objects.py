"""Value objects for the truss frame domain.

All lengths are integer millimetres. Every class here is a frozen dataclass
shared as-is by the planner, the exporters and the web layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Standard module lengths in mm, largest first. The order is load-bearing:
# decomposition and display both walk the catalog in this order.
TRUSS_SEGMENTS: tuple[int, ...] = (1000, 500, 250)

# Fixed fixtures of a rectangular frame
CORNER_CONNECTORS = 4
BASE_PLATES = 2

# 4 corners x 2 connections + 2 base plates x 1 connection
CONNECTION_JOINTS = CORNER_CONNECTORS * 2 + BASE_PLATES * 1

COUPLERS_PER_JOINT = 4
PINS_PER_JOINT = 8
CLIPS_PER_JOINT = 8


def is_standard_length(length: int) -> bool:
    """Check whether a length is one of the catalog module lengths."""
    return length in TRUSS_SEGMENTS


class SegmentStatus(str, Enum):
    """Whether a position on an edge is covered by an owned module."""

    OWNED = "owned"
    MISSING = "missing"


class Edge(str, Enum):
    """Frame edges, in the order inventory is consumed when assigning."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        """True for the two beams, False for the two columns."""
        return self in (Edge.TOP, Edge.BOTTOM)


@dataclass(frozen=True)
class SegmentRun:
    """A run of identical modules in the summary form of a decomposition.

    Attributes:
        length: Module length in mm.
        count: Number of consecutive modules of this length.
    """

    length: int
    count: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Segment length must be positive")
        if self.count < 1:
            raise ValueError("Segment count must be at least 1")

    @property
    def is_custom(self) -> bool:
        """True if this run is a non-catalog remainder piece."""
        return not is_standard_length(self.length)

    @property
    def total_length(self) -> int:
        """Combined length of every module in the run."""
        return self.length * self.count


@dataclass(frozen=True)
class AssignedSegment:
    """Outcome of matching one position of an edge against inventory."""

    length: int
    status: SegmentStatus

    @property
    def is_owned(self) -> bool:
        return self.status is SegmentStatus.OWNED


@dataclass(frozen=True)
class JointTally:
    """Joint counts for a frame.

    Attributes:
        internal_joints: Joints between consecutive pieces along the 4 edges.
        connection_joints: Corner and base plate connections (constant).
    """

    internal_joints: int
    connection_joints: int = CONNECTION_JOINTS

    def __post_init__(self) -> None:
        if self.internal_joints < 0:
            raise ValueError("Internal joint count must be non-negative")

    @property
    def total_joints(self) -> int:
        return self.internal_joints + self.connection_joints


@dataclass(frozen=True)
class HardwareTally:
    """Connection hardware derived from the total joint count."""

    couplers: int
    pins: int
    clips: int

    @classmethod
    def for_joints(cls, total_joints: int) -> HardwareTally:
        """Build the hardware tally for a number of joints."""
        return cls(
            couplers=total_joints * COUPLERS_PER_JOINT,
            pins=total_joints * PINS_PER_JOINT,
            clips=total_joints * CLIPS_PER_JOINT,
        )


@dataclass(frozen=True)
class FrameRequirements:
    """Everything needed to build a frame of a given width and height.

    Attributes:
        width: Frame width in mm.
        height: Frame height in mm.
        horizontal: Summary decomposition of one beam (width).
        vertical: Summary decomposition of one column (height).
        required: Module length -> required count, descending by length.
        joints: Joint tally for the frame.
        hardware: Hardware tally for the frame.
    """

    width: int
    height: int
    horizontal: tuple[SegmentRun, ...]
    vertical: tuple[SegmentRun, ...]
    required: dict[int, int] = field(hash=False)
    joints: JointTally
    hardware: HardwareTally
    corner_connectors: int = CORNER_CONNECTORS
    base_plates: int = BASE_PLATES

    @property
    def total_modules(self) -> int:
        """Total number of linear modules across all four edges."""
        return sum(self.required.values())

    @property
    def total_length(self) -> int:
        """Combined length of all modules; equals the frame perimeter."""
        return sum(length * count for length, count in self.required.items())

    @property
    def has_custom_pieces(self) -> bool:
        return any(not is_standard_length(length) for length in self.required)


@dataclass(frozen=True)
class ShortageLine:
    """One row of the required / owned / shortage comparison."""

    length: int
    required: int
    owned: int

    @property
    def shortage(self) -> int:
        return max(0, self.required - self.owned)

    @property
    def is_sufficient(self) -> bool:
        return self.shortage == 0


@dataclass(frozen=True)
class SearchBounds:
    """Inclusive grid bounds for the auto-fit search, in mm.

    Defaults follow the width and height slider ranges of the planner UI.
    """

    min_width: int = 1000
    max_width: int = 6000
    min_height: int = 1000
    max_height: int = 4000

    def __post_init__(self) -> None:
        if self.min_width <= 0 or self.min_height <= 0:
            raise ValueError("Search bounds must be positive")
        if self.min_width > self.max_width:
            raise ValueError("min_width must not exceed max_width")
        if self.min_height > self.max_height:
            raise ValueError("min_height must not exceed max_height")

    def candidate_count(self, step: int) -> int:
        """Number of (width, height) points the grid holds at ``step``."""
        widths = (self.max_width - self.min_width) // step + 1
        heights = (self.max_height - self.min_height) // step + 1
        return widths * heights


@dataclass(frozen=True)
class FitResult:
    """Result of an auto-fit search.

    Attributes:
        width: Selected width, or the fallback width.
        height: Selected height, or the fallback height.
        is_fallback: True when no candidate was feasible. The fallback size is
            not checked against inventory and may itself be unbuildable.
        candidates_evaluated: Number of grid points checked.
        feasible_candidates: Number of grid points that were buildable.
    """

    width: int
    height: int
    is_fallback: bool
    candidates_evaluated: int
    feasible_candidates: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height
