"""Pydantic models for cutting job configuration files.

A job file names the sheet material (a catalog id or an inline material),
the parts to cut, and nesting options:

    {
        "schema_version": "1.0",
        "material": "ldsp-16",
        "parts": [{"width_mm": 600, "height_mm": 400, "quantity": 2}],
        "nesting": {"kerf_mm": 3}
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cutplan.domain.value_objects import MaterialType
from cutplan.infrastructure.bin_packing import MAX_UNITS

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class MaterialConfigSchema(BaseModel):
    """An inline sheet material definition."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    id: str = Field(default="", description="Catalog identifier")
    name: str = Field(default="", description="Display name")
    width_mm: float = Field(..., gt=0, description="Sheet width in mm")
    height_mm: float = Field(..., gt=0, description="Sheet height in mm")
    thickness_mm: float = Field(default=16.0, gt=0, description="Thickness in mm")
    material_type: MaterialType = Field(
        default=MaterialType.LDSP, description="Material type"
    )


class PartConfigSchema(BaseModel):
    """A rectangular part with the number of copies needed."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    width_mm: float = Field(..., gt=0, description="Part width in mm")
    height_mm: float = Field(..., gt=0, description="Part height in mm")
    quantity: int = Field(
        default=1, ge=1, le=MAX_UNITS, description="Number of copies"
    )
    label: str | None = Field(default=None, description="Optional part label")


class NestingConfigSchema(BaseModel):
    """Nesting options."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    kerf_mm: float = Field(
        default=3.0, ge=0, le=20, description="Saw kerf width in mm"
    )


class JobConfiguration(BaseModel):
    """Root model of a cutting job file.

    Attributes:
        schema_version: Configuration schema version.
        material: Catalog id of the material, or an inline material.
        parts: Parts to cut.
        nesting: Nesting options.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(default="1.0", description="Schema version")
    material: str | MaterialConfigSchema = Field(
        ..., description="Material catalog id or inline material"
    )
    parts: list[PartConfigSchema] = Field(
        default_factory=list, description="Parts to cut"
    )
    nesting: NestingConfigSchema = Field(
        default_factory=NestingConfigSchema, description="Nesting options"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject schema versions this release cannot read."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
