"""Auto-fit endpoint."""

from fastapi import APIRouter

from trusses.application.dtos import FitInput
from trusses.domain import Inventory
from trusses.web.dependencies import FitCommandDep
from trusses.web.exceptions import PlanningError
from trusses.web.schemas.requests import FitRequest
from trusses.web.schemas.responses import FitResultSchema

router = APIRouter(prefix="/fit", tags=["fit"])


@router.post("", response_model=FitResultSchema)
async def fit_frame(request: FitRequest, command: FitCommandDep) -> FitResultSchema:
    """Find the largest frame in the search grid the inventory can build.

    Falls back to 1000 x 1000 mm with ``is_fallback`` set when nothing fits.
    """
    fit_input = FitInput(
        min_width=request.bounds.min_width,
        max_width=request.bounds.max_width,
        min_height=request.bounds.min_height,
        max_height=request.bounds.max_height,
        step=request.step,
    )
    try:
        result = command.execute(Inventory.from_mapping(request.inventory), fit_input)
    except ValueError as e:
        raise PlanningError([str(e)]) from e
    return FitResultSchema(
        width=result.width,
        height=result.height,
        is_fallback=result.is_fallback,
        candidates_evaluated=result.candidates_evaluated,
        feasible_candidates=result.feasible_candidates,
    )
