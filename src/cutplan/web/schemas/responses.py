"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class MaterialResponseSchema(BaseModel):
    """A sheet material."""

    id: str = Field(..., description="Catalog identifier")
    name: str = Field(..., description="Display name")
    width_mm: float = Field(..., description="Sheet width in mm")
    height_mm: float = Field(..., description="Sheet height in mm")
    thickness_mm: float = Field(..., description="Thickness in mm")
    material_type: str = Field(..., description="Material type")


class MaterialListSchema(BaseModel):
    """Response for material listing."""

    materials: list[MaterialResponseSchema] = Field(
        ..., description="Available materials"
    )


class PlacementSchema(BaseModel):
    """One placed piece on a sheet."""

    id: str = Field(..., description="Unit identifier, e.g. D1")
    detail_number: int = Field(..., description="Numeric part of the unit id")
    source_index: int = Field(..., description="Index of the originating part")
    x: float = Field(..., description="Left edge in mm")
    y: float = Field(..., description="Top edge in mm")
    width: float = Field(..., description="Placed width in mm")
    height: float = Field(..., description="Placed height in mm")
    rotated: bool = Field(..., description="Whether the piece is turned 90 degrees")
    color: str | None = Field(default=None, description="Size group color")


class RectSchema(BaseModel):
    """An axis-aligned rectangle in mm."""

    x: float
    y: float
    width: float
    height: float


class SheetLayoutSchema(BaseModel):
    """Layout of a single sheet."""

    sheet_index: int = Field(..., description="Zero-based sheet index")
    material: MaterialResponseSchema = Field(..., description="Sheet material")
    placements: list[PlacementSchema] = Field(..., description="Placed pieces")
    waste_areas: list[RectSchema] = Field(..., description="Unused strips")
    size_color_map: dict[str, str] = Field(
        ..., description="Size key to display color"
    )
    used_percentage: float = Field(..., description="Share of this sheet used")


class OptimizationResultSchema(BaseModel):
    """Response for a cut optimization."""

    sheets_required: int = Field(..., description="Number of sheets used")
    waste_percentage: float = Field(..., description="Overall waste percentage")
    used_percentage: float = Field(..., description="Overall used percentage")
    used_area_mm2: float = Field(..., description="Total part area in mm2")
    total_sheet_area_mm2: float = Field(..., description="Total sheet area in mm2")
    kerf_mm: float = Field(..., description="Saw kerf used in mm")
    sheets: list[SheetLayoutSchema] = Field(..., description="Sheet layouts")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
