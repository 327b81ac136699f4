"""Export format endpoints."""

from fastapi import APIRouter, Query
from fastapi.responses import Response

from trusses.infrastructure.exporters import (
    BomGenerator,
    ExporterRegistry,
    UnsupportedFormatError,
)
from trusses.infrastructure.exporters.bom import FILE_EXTENSIONS
from trusses.web.dependencies import PlanCommandDep, PresetManagerDep
from trusses.web.routers.plan import run_plan
from trusses.web.schemas.requests import PlanRequest
from trusses.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "text": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List the registered export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/bom")
async def export_bom(
    request: PlanRequest,
    command: PlanCommandDep,
    presets: PresetManagerDep,
    format: str = Query(default="text", description="text, csv or json"),
) -> Response:
    """Export the bill of materials for a frame.

    Raises:
        UnsupportedFormatError: If ``format`` is not text, csv or json.
    """
    if format not in FILE_EXTENSIONS:
        raise UnsupportedFormatError(format, list(FILE_EXTENSIONS))

    output = run_plan(request, command, presets)
    generator = BomGenerator(output_format=format)
    filename = f"truss_bom.{generator.file_extension}"
    return Response(
        content=generator.export_string(output),
        media_type=MEDIA_TYPES[format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
