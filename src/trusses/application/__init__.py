"""Application layer - use cases and orchestration."""

from .commands import AutoFitCommand, PlanFrameCommand
from .dtos import FitInput, FrameInput, FramePlanOutput

__all__ = [
    "AutoFitCommand",
    "FitInput",
    "FrameInput",
    "FramePlanOutput",
    "PlanFrameCommand",
]
