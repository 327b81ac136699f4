"""Validation results and frame planning advisories.

Schema errors are caught when the file is loaded. The checks here run on a
loaded configuration and mostly produce warnings: the frame can still be
planned, but the user should know it needs custom pieces, uses module sizes
outside the catalog, or cannot be built from the listed stock.
"""

from dataclasses import dataclass, field
from typing import Any

from trusses.application.config.schema import PlannerConfiguration
from trusses.domain import (
    TRUSS_SEGMENTS,
    FeasibilityChecker,
    InvalidInventoryEntryError,
    Inventory,
    RequirementAggregator,
    is_standard_length,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Dotted path to the invalid field (e.g., "inventory.1000")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking advisory.

    Attributes:
        path: Dotted path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


SMALLEST_MODULE = min(TRUSS_SEGMENTS)


def check_frame_advisories(config: PlannerConfiguration) -> ValidationResult:
    """Warn about dimensions that leave a custom remainder piece."""
    result = ValidationResult()
    for name in ("width", "height"):
        value = getattr(config.frame, name)
        remainder = value % SMALLEST_MODULE
        if remainder:
            result.add_warning(
                path=f"frame.{name}",
                message=f"{value}mm needs a custom {remainder}mm piece",
                suggestion=f"Use a multiple of {SMALLEST_MODULE}mm to build from standard modules only",
            )
    if config.frame.depth % SMALLEST_MODULE:
        result.add_warning(
            path="frame.depth",
            message=f"Depth {config.frame.depth}mm is not a standard base plate depth",
            suggestion=f"Base plates come in {SMALLEST_MODULE}mm steps",
        )
    return result


def check_inventory(config: PlannerConfiguration) -> ValidationResult:
    """Check inventory entries and whether they cover the configured frame."""
    result = ValidationResult()

    for length, count in config.inventory.items():
        if count < 0:
            result.add_warning(
                path=f"inventory.{length}",
                message=f"Negative stock ({count}) will be treated as 0",
            )
        if not is_standard_length(length):
            result.add_warning(
                path=f"inventory.{length}",
                message=f"{length}mm is not a standard module length",
                suggestion=f"Standard lengths are {', '.join(str(s) for s in TRUSS_SEGMENTS)}mm",
            )

    try:
        inventory = Inventory.from_mapping(config.inventory)
    except InvalidInventoryEntryError as e:
        return result.add_error(path=f"inventory.{e.key}", message=e.reason, value=e.value)

    requirements = RequirementAggregator().aggregate(config.frame.width, config.frame.height)
    for line in FeasibilityChecker.shortages(requirements.required, inventory):
        if line.shortage:
            result.add_warning(
                path=f"inventory.{line.length}",
                message=(
                    f"Short {line.shortage} x {line.length}mm "
                    f"(need {line.required}, have {line.owned})"
                ),
            )
    return result


def validate_config(config: PlannerConfiguration) -> ValidationResult:
    """Run all configuration checks."""
    result = ValidationResult()
    result.merge(check_frame_advisories(config))
    result.merge(check_inventory(config))
    return result
