"""Pydantic schemas for the REST API."""

from trusses.web.schemas.common import (
    FrameDimensionsSchema,
    SearchBoundsSchema,
)
from trusses.web.schemas.requests import (
    ConfigValidateRequest,
    FitRequest,
    PlanRequest,
)
from trusses.web.schemas.responses import (
    EdgeLayoutSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    FitResultSchema,
    HardwareSchema,
    PlacedSegmentSchema,
    PlanResponseSchema,
    PresetListSchema,
    PresetSchema,
    SegmentRunSchema,
    ShortageLineSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "FrameDimensionsSchema",
    "SearchBoundsSchema",
    # Requests
    "ConfigValidateRequest",
    "FitRequest",
    "PlanRequest",
    # Responses
    "EdgeLayoutSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "FitResultSchema",
    "HardwareSchema",
    "PlacedSegmentSchema",
    "PlanResponseSchema",
    "PresetListSchema",
    "PresetSchema",
    "SegmentRunSchema",
    "ShortageLineSchema",
    "ValidationResultSchema",
]
