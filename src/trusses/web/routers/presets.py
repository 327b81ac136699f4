"""Preset endpoints."""

from fastapi import APIRouter

from trusses.application.presets import FramePreset
from trusses.web.dependencies import PresetManagerDep
from trusses.web.schemas.responses import PresetListSchema, PresetSchema

router = APIRouter(prefix="/presets", tags=["presets"])


def _to_schema(preset: FramePreset) -> PresetSchema:
    return PresetSchema(
        name=preset.name,
        width=preset.width,
        height=preset.height,
        description=preset.description,
    )


@router.get("", response_model=PresetListSchema)
async def list_presets(manager: PresetManagerDep) -> PresetListSchema:
    """List the standard frame sizes."""
    return PresetListSchema(presets=[_to_schema(p) for p in manager.list_presets()])


@router.get("/{name}", response_model=PresetSchema)
async def get_preset(name: str, manager: PresetManagerDep) -> PresetSchema:
    """Get one preset.

    Raises:
        PresetNotFoundError: If the preset does not exist (handled as 404).
    """
    return _to_schema(manager.get_preset(name))
