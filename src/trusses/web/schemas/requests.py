"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from trusses.domain import MAX_CANDIDATES, SearchBounds
from trusses.web.schemas.common import FrameDimensionsSchema, SearchBoundsSchema


class PlanRequest(BaseModel):
    """Request to plan a frame, by explicit dimensions or by preset name."""

    frame: FrameDimensionsSchema | None = Field(default=None, description="Frame dimensions")
    preset: str | None = Field(default=None, description="Preset name, e.g. 3x2.5m")
    inventory: dict[int, int] = Field(
        default_factory=dict, description="Owned modules: length in mm -> count"
    )

    @model_validator(mode="after")
    def require_one_frame_source(self) -> "PlanRequest":
        if (self.frame is None) == (self.preset is None):
            raise ValueError("Provide exactly one of 'frame' or 'preset'")
        return self


class FitRequest(BaseModel):
    """Request to find the largest buildable frame."""

    inventory: dict[int, int] = Field(
        default_factory=dict, description="Owned modules: length in mm -> count"
    )
    bounds: SearchBoundsSchema = Field(default_factory=SearchBoundsSchema)
    step: int = Field(default=250, gt=0, description="Grid step in mm")

    @model_validator(mode="after")
    def limit_grid_size(self) -> "FitRequest":
        bounds = SearchBounds(**self.bounds.model_dump())
        count = bounds.candidate_count(self.step)
        if count > MAX_CANDIDATES:
            raise ValueError(
                f"Search grid holds {count} candidates, more than the limit of {MAX_CANDIDATES}"
            )
        return self


class ConfigValidateRequest(BaseModel):
    """Request to validate a planning configuration."""

    config: dict[str, Any] = Field(..., description="Configuration to validate")
