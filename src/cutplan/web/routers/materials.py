"""Material catalog endpoints."""

from fastapi import APIRouter

from cutplan.infrastructure.formatters import material_to_dict
from cutplan.web.dependencies import MaterialCatalogDep
from cutplan.web.schemas.responses import MaterialListSchema, MaterialResponseSchema

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=MaterialListSchema)
async def list_materials(catalog: MaterialCatalogDep) -> MaterialListSchema:
    """List all catalog materials."""
    return MaterialListSchema(
        materials=[
            MaterialResponseSchema(**material_to_dict(material))
            for material in catalog.list_materials()
        ]
    )


@router.get("/{material_id}", response_model=MaterialResponseSchema)
async def get_material(
    material_id: str,
    catalog: MaterialCatalogDep,
) -> MaterialResponseSchema:
    """Get a single material.

    Raises:
        MaterialNotFoundError: If the id is unknown (handled by exception handler).
    """
    return MaterialResponseSchema(**material_to_dict(catalog.get(material_id)))
