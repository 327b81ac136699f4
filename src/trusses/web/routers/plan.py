"""Frame planning endpoints."""

from fastapi import APIRouter

from trusses.application.dtos import FrameInput, FramePlanOutput
from trusses.application.presets import PresetManager
from trusses.domain import Inventory
from trusses.web.dependencies import PlanCommandDep, PresetManagerDep
from trusses.web.exceptions import PlanningError
from trusses.web.schemas.requests import PlanRequest
from trusses.web.schemas.responses import (
    EdgeLayoutSchema,
    HardwareSchema,
    PlacedSegmentSchema,
    PlanResponseSchema,
    SegmentRunSchema,
    ShortageLineSchema,
)

router = APIRouter(prefix="/plan", tags=["plan"])


def frame_from_request(request: PlanRequest, presets: PresetManager) -> FrameInput:
    """Resolve the frame of a request.

    Raises:
        PresetNotFoundError: If the named preset does not exist.
    """
    if request.frame is not None:
        return FrameInput(
            width=request.frame.width,
            height=request.frame.height,
            depth=request.frame.depth,
        )
    preset = presets.get_preset(request.preset)
    return FrameInput(width=preset.width, height=preset.height)


def run_plan(
    request: PlanRequest, command: PlanCommandDep, presets: PresetManager
) -> FramePlanOutput:
    """Plan the requested frame, raising PlanningError on invalid input."""
    output = command.execute(
        frame_from_request(request, presets),
        Inventory.from_mapping(request.inventory),
    )
    if not output.is_valid:
        raise PlanningError(output.errors)
    return output


def plan_to_schema(output: FramePlanOutput) -> PlanResponseSchema:
    req = output.requirements
    return PlanResponseSchema(
        width=req.width,
        height=req.height,
        depth=output.frame.depth,
        horizontal=[
            SegmentRunSchema(length=r.length, count=r.count, custom=r.is_custom)
            for r in req.horizontal
        ],
        vertical=[
            SegmentRunSchema(length=r.length, count=r.count, custom=r.is_custom)
            for r in req.vertical
        ],
        required=req.required,
        shortages=[
            ShortageLineSchema(
                length=line.length,
                required=line.required,
                owned=line.owned,
                shortage=line.shortage,
            )
            for line in output.shortages
        ],
        hardware=HardwareSchema(
            internal_joints=req.joints.internal_joints,
            total_joints=req.joints.total_joints,
            couplers=req.hardware.couplers,
            pins=req.hardware.pins,
            clips=req.hardware.clips,
            corner_connectors=req.corner_connectors,
            base_plates=req.base_plates,
        ),
        blueprint=[
            EdgeLayoutSchema(
                edge=layout.edge.value,
                segments=[
                    PlacedSegmentSchema(
                        length=seg.length,
                        status=seg.status.value,
                        start=seg.start,
                        end=seg.end,
                    )
                    for seg in layout.segments
                ],
            )
            for layout in output.blueprint.edges
        ],
        is_buildable=output.is_buildable,
    )


@router.post("", response_model=PlanResponseSchema)
async def plan_frame(
    request: PlanRequest,
    command: PlanCommandDep,
    presets: PresetManagerDep,
) -> PlanResponseSchema:
    """Plan a frame against the owned inventory.

    Returns requirements, shortages, hardware and the per-edge blueprint.
    """
    return plan_to_schema(run_plan(request, command, presets))
