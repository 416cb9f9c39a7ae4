"""Adapters from configuration schemas to domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cutplan.application.config.schema import (
    JobConfiguration,
    MaterialConfigSchema,
    NestingConfigSchema,
    PartConfigSchema,
)
from cutplan.domain.value_objects import Material, PartSpec

if TYPE_CHECKING:
    from cutplan.application.materials import MaterialCatalog
    from cutplan.infrastructure.bin_packing import NestingConfig


def schema_to_material(schema: MaterialConfigSchema) -> Material:
    """Convert an inline material schema to a Material."""
    return Material(
        width_mm=schema.width_mm,
        height_mm=schema.height_mm,
        thickness_mm=schema.thickness_mm,
        material_type=schema.material_type,
        name=schema.name,
        id=schema.id,
    )


def config_to_parts(parts: list[PartConfigSchema]) -> list[PartSpec]:
    return [
        PartSpec(
            width_mm=part.width_mm,
            height_mm=part.height_mm,
            quantity=part.quantity,
            label=part.label,
        )
        for part in parts
    ]


def config_to_material(
    config: JobConfiguration,
    catalog: MaterialCatalog,
) -> Material:
    """Resolve the job material, looking catalog ids up in the catalog.

    Raises:
        MaterialNotFoundError: If the material id is not in the catalog.
    """
    if isinstance(config.material, str):
        return catalog.get(config.material)
    return schema_to_material(config.material)


def config_to_nesting(config: NestingConfigSchema | None) -> NestingConfig:
    """Convert nesting options to the engine's NestingConfig."""
    from cutplan.infrastructure.bin_packing import NestingConfig

    if config is None:
        return NestingConfig()
    return NestingConfig(kerf_mm=config.kerf_mm)
