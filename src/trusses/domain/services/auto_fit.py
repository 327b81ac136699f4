"""Grid search for the largest frame a fixed inventory can build."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..value_objects import FitResult, SearchBounds
from .feasibility import FeasibilityChecker
from .requirement_aggregator import RequirementAggregator

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_STEP", "FALLBACK_SIZE", "MAX_CANDIDATES", "AutoFitSearch", "auto_fit"]

DEFAULT_STEP = 250

# Upper bound on grid points per search. The default grid holds 273.
MAX_CANDIDATES = 10_000

# Returned as-is when nothing in the grid is buildable; never checked
# against the inventory.
FALLBACK_SIZE: tuple[int, int] = (1000, 1000)


class AutoFitSearch:
    """Bounded grid search maximizing frame area.

    Widths are the outer loop and heights the inner loop, both ascending.
    The comparison on area is strict, so among candidates of equal area the
    first one found (lowest width, then lowest height) is kept. Every
    candidate is checked against the same, unconsumed inventory.
    """

    def __init__(
        self,
        aggregator: RequirementAggregator | None = None,
        checker: FeasibilityChecker | None = None,
    ) -> None:
        self.aggregator = aggregator or RequirementAggregator()
        self.checker = checker or FeasibilityChecker()

    def search(
        self,
        inventory: Mapping[int, int],
        bounds: SearchBounds | None = None,
        step: int = DEFAULT_STEP,
    ) -> FitResult:
        """Search the grid and report the best candidate.

        Raises:
            ValueError: If ``step`` is not positive or the grid holds more
                than MAX_CANDIDATES points.
        """
        if step <= 0:
            raise ValueError("Search step must be positive")
        bounds = bounds or SearchBounds()
        count = bounds.candidate_count(step)
        if count > MAX_CANDIDATES:
            raise ValueError(
                f"Search grid holds {count} candidates, more than the limit of "
                f"{MAX_CANDIDATES}; narrow the bounds or raise the step"
            )

        best: tuple[int, int] | None = None
        evaluated = 0
        feasible = 0

        for width in range(bounds.min_width, bounds.max_width + 1, step):
            for height in range(bounds.min_height, bounds.max_height + 1, step):
                evaluated += 1
                requirements = self.aggregator.aggregate(width, height)
                if not self.checker.is_buildable(requirements.required, inventory):
                    continue
                feasible += 1
                if best is None or width * height > best[0] * best[1]:
                    best = (width, height)

        logger.debug(
            f"Auto-fit evaluated {evaluated} candidates, {feasible} feasible, best={best}"
        )

        if best is None:
            return FitResult(
                width=FALLBACK_SIZE[0],
                height=FALLBACK_SIZE[1],
                is_fallback=True,
                candidates_evaluated=evaluated,
                feasible_candidates=0,
            )
        return FitResult(
            width=best[0],
            height=best[1],
            is_fallback=False,
            candidates_evaluated=evaluated,
            feasible_candidates=feasible,
        )


def auto_fit(
    inventory: Mapping[int, int],
    bounds: SearchBounds | None = None,
    step: int = DEFAULT_STEP,
) -> tuple[int, int]:
    """Largest buildable (width, height) in the grid, or FALLBACK_SIZE."""
    return AutoFitSearch().search(inventory, bounds, step).size
