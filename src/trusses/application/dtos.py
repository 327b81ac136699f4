"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from trusses.domain import (
    MAX_CANDIDATES,
    FrameBlueprint,
    FrameRequirements,
    SearchBounds,
    ShortageLine,
)

# Limits of the size controls in the planner UI, in mm
MAX_WIDTH = 20000
MAX_HEIGHT = 10000
MIN_DEPTH = 500
MAX_DEPTH = 2000
DEFAULT_DEPTH = 1000


@dataclass
class FrameInput:
    """Input DTO for frame dimensions in mm.

    Depth is carried through to reports but never decomposed.
    """

    width: int
    height: int
    depth: int = DEFAULT_DEPTH

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        for name, value in (("Width", self.width), ("Height", self.height), ("Depth", self.depth)):
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} must be a whole number of millimetres")
        if errors:
            return errors
        if self.width <= 0:
            errors.append("Width must be positive")
        if self.height <= 0:
            errors.append("Height must be positive")
        if self.width > MAX_WIDTH:
            errors.append(f"Width exceeds maximum ({MAX_WIDTH} mm)")
        if self.height > MAX_HEIGHT:
            errors.append(f"Height exceeds maximum ({MAX_HEIGHT} mm)")
        if not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            errors.append(f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH} mm")
        return errors


@dataclass
class FitInput:
    """Input DTO for an auto-fit search."""

    min_width: int = 1000
    max_width: int = 6000
    min_height: int = 1000
    max_height: int = 4000
    step: int = 250

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.step <= 0:
            errors.append("Step must be positive")
        if self.min_width <= 0 or self.min_height <= 0:
            errors.append("Search bounds must be positive")
        if self.min_width > self.max_width:
            errors.append("Minimum width exceeds maximum width")
        if self.min_height > self.max_height:
            errors.append("Minimum height exceeds maximum height")
        if not errors:
            count = self.to_bounds().candidate_count(self.step)
            if count > MAX_CANDIDATES:
                errors.append(
                    f"Search grid holds {count} candidates, more than the limit of "
                    f"{MAX_CANDIDATES}"
                )
        return errors

    def to_bounds(self) -> SearchBounds:
        return SearchBounds(
            min_width=self.min_width,
            max_width=self.max_width,
            min_height=self.min_height,
            max_height=self.max_height,
        )


@dataclass
class FramePlanOutput:
    """Output DTO for a planned frame."""

    frame: FrameInput
    requirements: FrameRequirements | None
    blueprint: FrameBlueprint | None
    shortages: tuple[ShortageLine, ...] = ()
    is_buildable: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the plan was produced without errors."""
        return len(self.errors) == 0

    @property
    def total_shortage(self) -> int:
        return sum(line.shortage for line in self.shortages)
