"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field, model_validator


class FrameDimensionsSchema(BaseModel):
    """Frame dimensions in mm."""

    width: int = Field(..., gt=0, le=20000, description="Width in mm")
    height: int = Field(..., gt=0, le=10000, description="Height in mm")
    depth: int = Field(default=1000, ge=500, le=2000, description="Depth in mm")


class SearchBoundsSchema(BaseModel):
    """Auto-fit grid bounds in mm."""

    min_width: int = Field(default=1000, gt=0, le=20000)
    max_width: int = Field(default=6000, gt=0, le=20000)
    min_height: int = Field(default=1000, gt=0, le=10000)
    max_height: int = Field(default=4000, gt=0, le=10000)

    @model_validator(mode="after")
    def validate_ranges(self) -> "SearchBoundsSchema":
        if self.min_width > self.max_width:
            raise ValueError("min_width must not exceed max_width")
        if self.min_height > self.max_height:
            raise ValueError("min_height must not exceed max_height")
        return self
