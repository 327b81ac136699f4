"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class SegmentRunSchema(BaseModel):
    """Consecutive pieces of one length along a beam or column."""

    length: int = Field(..., description="Piece length in mm")
    count: int = Field(..., description="Pieces on one beam or column")
    custom: bool = Field(default=False, description="Cut-to-size remainder piece")


class ShortageLineSchema(BaseModel):
    length: int
    required: int
    owned: int
    shortage: int


class HardwareSchema(BaseModel):
    """Joints and connection hardware of a frame."""

    internal_joints: int
    total_joints: int
    couplers: int
    pins: int
    clips: int
    corner_connectors: int
    base_plates: int


class PlacedSegmentSchema(BaseModel):
    length: int
    status: str = Field(..., description="owned or missing")
    start: int = Field(..., description="Offset from the start of the edge in mm")
    end: int


class EdgeLayoutSchema(BaseModel):
    edge: str = Field(..., description="top, bottom, left or right")
    segments: list[PlacedSegmentSchema]


class PlanResponseSchema(BaseModel):
    """Response for frame planning."""

    width: int
    height: int
    depth: int
    horizontal: list[SegmentRunSchema] = Field(..., description="Pieces of one beam")
    vertical: list[SegmentRunSchema] = Field(..., description="Pieces of one column")
    required: dict[int, int] = Field(..., description="Length in mm -> pieces needed")
    shortages: list[ShortageLineSchema]
    hardware: HardwareSchema
    blueprint: list[EdgeLayoutSchema]
    is_buildable: bool


class FitResultSchema(BaseModel):
    """Response for the auto-fit search."""

    width: int
    height: int
    is_fallback: bool = Field(..., description="No candidate was buildable")
    candidates_evaluated: int
    feasible_candidates: int


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 clean, 1 errors, 2 warnings only")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class PresetSchema(BaseModel):
    name: str
    width: int
    height: int
    description: str


class PresetListSchema(BaseModel):
    presets: list[PresetSchema]


class ExportFormatsSchema(BaseModel):
    formats: list[str] = Field(..., description="Registered export formats")


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
