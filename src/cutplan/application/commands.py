"""Application commands (use cases) for cutting optimization."""

from __future__ import annotations

import logging
from typing import Sequence

from cutplan.application.config import (
    JobConfiguration,
    config_to_material,
    config_to_nesting,
    config_to_parts,
)
from cutplan.application.materials import MaterialCatalog
from cutplan.domain.value_objects import Material, PartSpec
from cutplan.infrastructure.bin_packing import (
    DEFAULT_KERF_MM,
    CuttingOptimizer,
    NestingConfig,
    OptimizationOutcome,
)

logger = logging.getLogger(__name__)


class OptimizeCuttingCommand:
    """Command to nest a parts list onto sheets of one material.

    Holds no per-run state; the same instance can serve many requests.
    """

    def __init__(self, catalog: MaterialCatalog | None = None) -> None:
        self.catalog = catalog or MaterialCatalog()

    def execute(
        self,
        parts: Sequence[PartSpec],
        material: Material | str,
        kerf_mm: float = DEFAULT_KERF_MM,
    ) -> OptimizationOutcome:
        """Run the optimizer.

        Args:
            parts: Parts to cut.
            material: A Material, or the catalog id of one.
            kerf_mm: Saw kerf width in mm.

        Returns:
            OptimizationOutcome with sheet layouts and metrics.

        Raises:
            MaterialNotFoundError: If a material id is unknown.
            NestingError: If the parts cannot be nested.
        """
        if isinstance(material, str):
            material = self.catalog.get(material)
        return self._run(parts, material, NestingConfig(kerf_mm=kerf_mm))

    def execute_config(self, config: JobConfiguration) -> OptimizationOutcome:
        """Run the optimizer for a validated job configuration."""
        material = config_to_material(config, self.catalog)
        return self._run(
            config_to_parts(config.parts),
            material,
            config_to_nesting(config.nesting),
        )

    def _run(
        self,
        parts: Sequence[PartSpec],
        material: Material,
        nesting: NestingConfig,
    ) -> OptimizationOutcome:
        logger.debug("Optimizing %d parts on %s", len(parts), material.description)
        return CuttingOptimizer(nesting).optimize(parts, material)
