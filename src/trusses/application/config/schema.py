"""Pydantic models for JSON frame planning configuration files."""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from trusses.domain import MAX_CANDIDATES, SearchBounds

# Supported schema versions for configuration files
# Version 1.0: Frame, inventory, auto-fit bounds and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class FrameConfig(BaseModel):
    """Frame dimensions in mm.

    Attributes:
        width: Outer frame width (250 to 20000)
        height: Outer frame height (250 to 10000)
        depth: Base plate depth (500 to 2000), metadata only
    """

    model_config = ConfigDict(extra="forbid")

    width: int = Field(..., ge=250, le=20000)
    height: int = Field(..., ge=250, le=10000)
    depth: int = Field(default=1000, ge=500, le=2000)


class AutoFitConfig(BaseModel):
    """Grid bounds for the auto-fit search, in mm."""

    model_config = ConfigDict(extra="forbid")

    min_width: int = Field(default=1000, gt=0, le=20000)
    max_width: int = Field(default=6000, gt=0, le=20000)
    min_height: int = Field(default=1000, gt=0, le=10000)
    max_height: int = Field(default=4000, gt=0, le=10000)
    step: int = Field(default=250, gt=0)

    @model_validator(mode="after")
    def validate_ranges(self) -> "AutoFitConfig":
        """Ensure each minimum does not exceed its maximum and the grid stays bounded."""
        if self.min_width > self.max_width:
            raise ValueError("min_width must not exceed max_width")
        if self.min_height > self.max_height:
            raise ValueError("min_height must not exceed max_height")
        count = SearchBounds(
            min_width=self.min_width,
            max_width=self.max_width,
            min_height=self.min_height,
            max_height=self.max_height,
        ).candidate_count(self.step)
        if count > MAX_CANDIDATES:
            raise ValueError(
                f"search grid holds {count} candidates, more than the limit of {MAX_CANDIDATES}"
            )
        return self


class OutputConfig(BaseModel):
    """Output options for reports and exported files."""

    model_config = ConfigDict(extra="forbid")

    bom_format: Literal["text", "csv", "json"] = "text"
    project_name: str = Field(default="truss", min_length=1, max_length=100)


class PlannerConfiguration(BaseModel):
    """Root configuration model for a frame planning file.

    Example:
        >>> config = PlannerConfiguration(
        ...     schema_version="1.0",
        ...     frame=FrameConfig(width=3000, height=2500),
        ...     inventory={1000: 10, 500: 2},
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    frame: FrameConfig
    inventory: dict[int, int] = Field(
        default_factory=dict, description="Owned modules: length in mm -> count"
    )
    auto_fit: AutoFitConfig = Field(default_factory=AutoFitConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("inventory")
    @classmethod
    def validate_inventory_sizes(cls, v: dict[int, int]) -> dict[int, int]:
        """Module sizes must be positive. Negative counts are left for the
        domain to clamp so the validator can warn about them."""
        for length in v:
            if length <= 0:
                raise ValueError(f"Module size must be positive, got {length}")
        return v
