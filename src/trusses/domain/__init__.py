"""Domain layer - module decomposition, matching and search."""

from .inventory import InvalidInventoryEntryError, Inventory, WorkingInventory
from .services import (
    DEFAULT_STEP,
    FALLBACK_SIZE,
    MAX_CANDIDATES,
    AutoFitSearch,
    BlueprintPlanner,
    EdgeLayout,
    FeasibilityChecker,
    FrameAssignment,
    FrameBlueprint,
    InvalidDimensionError,
    InventoryMatcher,
    PlacedSegment,
    RequirementAggregator,
    SegmentDecomposer,
    aggregate,
    assign,
    assign_frame,
    auto_fit,
    decompose,
    decompose_ordered,
    is_buildable,
    shortages,
)
from .value_objects import (
    TRUSS_SEGMENTS,
    AssignedSegment,
    Edge,
    FitResult,
    FrameRequirements,
    HardwareTally,
    JointTally,
    SearchBounds,
    SegmentRun,
    SegmentStatus,
    ShortageLine,
    is_standard_length,
)

__all__ = [
    "DEFAULT_STEP",
    "FALLBACK_SIZE",
    "MAX_CANDIDATES",
    "TRUSS_SEGMENTS",
    "AssignedSegment",
    "AutoFitSearch",
    "BlueprintPlanner",
    "Edge",
    "EdgeLayout",
    "FeasibilityChecker",
    "FitResult",
    "FrameAssignment",
    "FrameBlueprint",
    "FrameRequirements",
    "HardwareTally",
    "InvalidDimensionError",
    "InvalidInventoryEntryError",
    "Inventory",
    "InventoryMatcher",
    "JointTally",
    "PlacedSegment",
    "RequirementAggregator",
    "SearchBounds",
    "SegmentDecomposer",
    "SegmentRun",
    "SegmentStatus",
    "ShortageLine",
    "WorkingInventory",
    "aggregate",
    "assign",
    "assign_frame",
    "auto_fit",
    "decompose",
    "decompose_ordered",
    "is_buildable",
    "is_standard_length",
    "shortages",
]
