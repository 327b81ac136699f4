"""Application commands (use cases) for frame planning."""

from __future__ import annotations

import logging

from trusses.domain import (
    AutoFitSearch,
    BlueprintPlanner,
    FeasibilityChecker,
    FitResult,
    Inventory,
    RequirementAggregator,
)

from .dtos import FitInput, FrameInput, FramePlanOutput

logger = logging.getLogger(__name__)


class PlanFrameCommand:
    """Command to plan a frame against the owned inventory.

    Produces the module requirement, the per-edge blueprint, the shortage
    table and the overall buildable flag in one pass. Nothing is cached;
    every call recomputes from its inputs.
    """

    def __init__(
        self,
        aggregator: RequirementAggregator | None = None,
        checker: FeasibilityChecker | None = None,
        blueprint_planner: BlueprintPlanner | None = None,
    ) -> None:
        self.aggregator = aggregator or RequirementAggregator()
        self.checker = checker or FeasibilityChecker()
        self.blueprint_planner = blueprint_planner or BlueprintPlanner()

    def execute(
        self,
        frame_input: FrameInput,
        inventory: Inventory | None = None,
    ) -> FramePlanOutput:
        """Execute the planning command.

        Args:
            frame_input: Frame width, height and depth in mm.
            inventory: Owned modules. Treated as empty when omitted.

        Returns:
            FramePlanOutput with requirements, blueprint and shortages, or
            with ``errors`` populated if the input is invalid.
        """
        errors = frame_input.validate()
        if errors:
            return FramePlanOutput(
                frame=frame_input,
                requirements=None,
                blueprint=None,
                errors=errors,
            )

        inventory = inventory or Inventory.empty()
        requirements = self.aggregator.aggregate(frame_input.width, frame_input.height)
        blueprint = self.blueprint_planner.layout(
            frame_input.width, frame_input.height, inventory
        )
        buildable = self.checker.is_buildable(requirements.required, inventory)

        logger.debug(
            f"Planned {frame_input.width}x{frame_input.height}: "
            f"{requirements.total_modules} modules, buildable={buildable}"
        )

        return FramePlanOutput(
            frame=frame_input,
            requirements=requirements,
            blueprint=blueprint,
            shortages=self.checker.shortages(requirements.required, inventory),
            is_buildable=buildable,
        )


class AutoFitCommand:
    """Command to find the largest frame buildable from an inventory."""

    def __init__(self, search: AutoFitSearch | None = None) -> None:
        self.search = search or AutoFitSearch()

    def execute(
        self,
        inventory: Inventory,
        fit_input: FitInput | None = None,
    ) -> FitResult:
        """Run the grid search.

        Raises:
            ValueError: If the search bounds or step are invalid.
        """
        fit_input = fit_input or FitInput()
        errors = fit_input.validate()
        if errors:
            raise ValueError("; ".join(errors))
        return self.search.search(inventory, fit_input.to_bounds(), fit_input.step)
