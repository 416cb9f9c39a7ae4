"""Pydantic schemas for the REST API."""

from cutplan.web.schemas.requests import OptimizeFromConfigRequest, OptimizeRequest
from cutplan.web.schemas.responses import (
    ErrorResponseSchema,
    MaterialListSchema,
    MaterialResponseSchema,
    OptimizationResultSchema,
    PlacementSchema,
    RectSchema,
    SheetLayoutSchema,
)

__all__ = [
    # Requests
    "OptimizeFromConfigRequest",
    "OptimizeRequest",
    # Responses
    "ErrorResponseSchema",
    "MaterialListSchema",
    "MaterialResponseSchema",
    "OptimizationResultSchema",
    "PlacementSchema",
    "RectSchema",
    "SheetLayoutSchema",
]
