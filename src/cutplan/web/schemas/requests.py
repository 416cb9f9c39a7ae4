"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from cutplan.application.config import MaterialConfigSchema, PartConfigSchema


class OptimizeRequest(BaseModel):
    """Request for nesting a parts list onto one material.

    Exactly one of ``material_id`` (a catalog id) or ``material`` (an
    inline sheet definition) must be given.
    """

    parts: list[PartConfigSchema] = Field(
        default_factory=list, description="Parts to cut"
    )
    material_id: str | None = Field(default=None, description="Material catalog id")
    material: MaterialConfigSchema | None = Field(
        default=None, description="Inline sheet material"
    )
    kerf_mm: float = Field(
        default=3.0, ge=0, le=20, allow_inf_nan=False, description="Saw kerf in mm"
    )

    @model_validator(mode="after")
    def check_material(self) -> "OptimizeRequest":
        if (self.material_id is None) == (self.material is None):
            raise ValueError("Give exactly one of 'material_id' or 'material'")
        return self


class OptimizeFromConfigRequest(BaseModel):
    """Request for optimizing a full job configuration."""

    config: dict[str, Any] = Field(..., description="Cutting job configuration JSON")
