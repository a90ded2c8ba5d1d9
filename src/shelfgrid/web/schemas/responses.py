"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DimensionsSchema(BaseModel):
    """Exterior dimensions of the unit."""

    ext_width: float = Field(..., description="Exterior width in inches")
    ext_height: float = Field(..., description="Exterior height in inches")
    ext_depth: float = Field(..., description="Exterior depth in inches")


class HorizontalSegmentSchema(BaseModel):
    row: int
    col_start: int
    col_end: int


class VerticalSegmentSchema(BaseModel):
    column: int
    row_start: int
    row_end: int
    length_in: float


class LayoutSchema(BaseModel):
    """Resolved dividers and shelf spans."""

    present_verticals: list[int] = Field(
        ..., description="Column boundaries with a physical panel"
    )
    horizontal_segments: list[HorizontalSegmentSchema]
    vertical_segments: list[VerticalSegmentSchema]


class PartSchema(BaseModel):
    """Single part in the parts list."""

    id: str = Field(..., description="Stable part id")
    role: str = Field(..., description="Structural role")
    qty: int = Field(..., description="Number of pieces")
    length_in: float = Field(..., description="Length in inches")
    width_in: float = Field(..., description="Width in inches")
    thickness_in: float = Field(..., description="Thickness in inches")
    label: str = Field(..., description='Size as 1/32" fractions')
    notes: str | None = Field(default=None, description="Description of the part")


class MaterialEstimateSchema(BaseModel):
    """Material totals."""

    frame_board_feet: float
    back_square_feet: float
    door_square_feet: float
    total_frame_parts: int
    total_doors: int
    has_back: bool


class WarningSchema(BaseModel):
    """Advisory design warning."""

    type: str
    message: str
    severity: str
    merge_index: int | None = None


class HardwareSchema(BaseModel):
    """Door hardware hole location."""

    part_id: str
    x: float = Field(..., description="Distance from the door's left edge")
    y: float = Field(..., description="Distance from the door's top edge")
    diameter: float
    type: str


class RipCutSchema(BaseModel):
    position: float
    width: float
    label: str


class PlacedPartSchema(BaseModel):
    part_id: str
    x: float
    y: float
    width: float
    length: float
    rotated: bool


class SheetLayoutSchema(BaseModel):
    """Parts placed on one stock sheet."""

    sheet_id: str
    thickness: float
    utilization: float = Field(..., description="Percentage of sheet area used")
    rip_cuts: list[RipCutSchema]
    parts: list[PlacedPartSchema]


class OversizedPartSchema(BaseModel):
    part_id: str
    reason: str


class AnalysisSchema(BaseModel):
    """Response for design analysis."""

    dimensions: DimensionsSchema
    layout: LayoutSchema
    parts: list[PartSchema]
    material_estimate: MaterialEstimateSchema
    warnings: list[WarningSchema] = Field(default_factory=list)
    hardware: list[HardwareSchema] = Field(default_factory=list)
    sheets: list[SheetLayoutSchema] | None = Field(
        default=None, description="Sheet layouts, when requested"
    )
    oversized_parts: list[OversizedPartSchema] | None = Field(
        default=None, description="Parts too large for stock sheets"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether the design is valid")
    exit_code: int = Field(..., description="0 valid, 1 errors, 2 warnings")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: list[dict[str, Any]] | None = None
