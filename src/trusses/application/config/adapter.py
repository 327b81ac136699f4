"""Conversion of a PlannerConfiguration into DTOs and domain objects."""

from trusses.application.config.schema import PlannerConfiguration
from trusses.application.dtos import FitInput, FrameInput
from trusses.domain import Inventory, SearchBounds


def config_to_frame_input(config: PlannerConfiguration) -> FrameInput:
    """Frame dimensions as the input DTO for PlanFrameCommand."""
    return FrameInput(
        width=config.frame.width,
        height=config.frame.height,
        depth=config.frame.depth,
    )


def config_to_inventory(config: PlannerConfiguration) -> Inventory:
    """Normalized inventory from the configuration.

    Raises:
        InvalidInventoryEntryError: If an entry cannot be interpreted.
    """
    return Inventory.from_mapping(config.inventory)


def config_to_fit_input(config: PlannerConfiguration) -> FitInput:
    """Auto-fit bounds and step as the input DTO for AutoFitCommand."""
    fit = config.auto_fit
    return FitInput(
        min_width=fit.min_width,
        max_width=fit.max_width,
        min_height=fit.min_height,
        max_height=fit.max_height,
        step=fit.step,
    )


def config_to_search_bounds(config: PlannerConfiguration) -> SearchBounds:
    return config_to_fit_input(config).to_bounds()
