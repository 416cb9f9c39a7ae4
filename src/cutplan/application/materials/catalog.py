"""Material catalog for sheet goods.

This module provides the MaterialCatalog class, the lookup/list service
that supplies Material records to the optimizer. Standard materials ship
as bundled package data; more can be loaded from JSON files.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cutplan.application.config.adapter import schema_to_material
from cutplan.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    read_json_file,
)
from cutplan.application.config.schema import MaterialConfigSchema
from cutplan.domain.value_objects import Material

logger = logging.getLogger(__name__)

_MATERIAL_LIST = TypeAdapter(list[MaterialConfigSchema])


class MaterialNotFoundError(Exception):
    """Raised when a requested material does not exist in the catalog."""

    def __init__(self, material_id: str) -> None:
        self.material_id = material_id
        super().__init__(f"Material not found: {material_id}")


class MaterialCatalog:
    """Lookup and listing of sheet materials by id.

    Example:
        catalog = MaterialCatalog()
        for material in catalog.list_materials():
            print(f"{material.id}: {material.description}")

        ldsp = catalog.get("ldsp-16")
    """

    def __init__(self, include_standard: bool = True) -> None:
        """Initialize the catalog.

        Args:
            include_standard: Whether to load the bundled standard materials.
        """
        self._data_package = "cutplan.application.materials.data"
        self._materials: dict[str, Material] = {}
        if include_standard:
            self._load_standard()

    def _load_standard(self) -> None:
        content = (
            resources.files(self._data_package)
            .joinpath("standard_materials.json")
            .read_text(encoding="utf-8")
        )
        self.add_records(json.loads(content))

    def add(self, material: Material) -> None:
        """Add a material, replacing any existing entry with the same id.

        Raises:
            ValueError: If the material has no id.
        """
        if not material.id:
            raise ValueError("Catalog materials must have an id")
        if material.id in self._materials:
            logger.debug("Replacing catalog material '%s'", material.id)
        self._materials[material.id] = material

    def add_records(self, records: Any, path: Path | None = None) -> list[Material]:
        """Validate raw material records and add them to the catalog.

        Raises:
            ConfigError: If the records fail schema validation.
        """
        try:
            schemas = _MATERIAL_LIST.validate_python(records)
        except PydanticValidationError as e:
            details = extract_validation_errors(e)
            raise ConfigError(
                message="Invalid material catalog: "
                + "; ".join(f"{d['path']}: {d['message']}" for d in details),
                error_type="validation",
                path=path,
                details=details,
            )

        added: list[Material] = []
        for index, schema in enumerate(schemas):
            if not schema.id:
                raise ConfigError(
                    message=f"Invalid material catalog: [{index}].id is required",
                    error_type="validation",
                    path=path,
                    details=[{"path": f"[{index}].id", "message": "Field required"}],
                )
            material = schema_to_material(schema)
            self.add(material)
            added.append(material)
        return added

    def load_file(self, path: Path) -> list[Material]:
        """Add materials from a JSON file holding a list of material objects.

        Returns:
            The materials added.

        Raises:
            ConfigError: If the file cannot be read, parsed, or validated.
        """
        added = self.add_records(read_json_file(path), path=path)
        logger.info("Loaded %d materials from %s", len(added), path)
        return added

    def get(self, material_id: str) -> Material:
        """Get a material by id.

        Raises:
            MaterialNotFoundError: If the material does not exist.
        """
        try:
            return self._materials[material_id]
        except KeyError:
            raise MaterialNotFoundError(material_id) from None

    def list_materials(self) -> list[Material]:
        """All materials sorted by name."""
        return sorted(self._materials.values(), key=lambda m: (m.name, m.id))

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._materials

    def __len__(self) -> int:
        return len(self._materials)
