"""Domain services for frame planning."""

from .auto_fit import (
    DEFAULT_STEP,
    FALLBACK_SIZE,
    MAX_CANDIDATES,
    AutoFitSearch,
    auto_fit,
)
from .blueprint import BlueprintPlanner, EdgeLayout, FrameBlueprint, PlacedSegment
from .feasibility import FeasibilityChecker, is_buildable, shortages
from .inventory_matcher import FrameAssignment, InventoryMatcher, assign, assign_frame
from .requirement_aggregator import RequirementAggregator, aggregate
from .segment_decomposer import (
    InvalidDimensionError,
    SegmentDecomposer,
    decompose,
    decompose_ordered,
)

__all__ = [
    "DEFAULT_STEP",
    "FALLBACK_SIZE",
    "MAX_CANDIDATES",
    "AutoFitSearch",
    "BlueprintPlanner",
    "EdgeLayout",
    "FeasibilityChecker",
    "FrameAssignment",
    "FrameBlueprint",
    "InvalidDimensionError",
    "InventoryMatcher",
    "PlacedSegment",
    "RequirementAggregator",
    "SegmentDecomposer",
    "aggregate",
    "assign",
    "assign_frame",
    "auto_fit",
    "decompose",
    "decompose_ordered",
    "is_buildable",
    "shortages",
]
