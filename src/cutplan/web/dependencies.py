"""FastAPI dependency injection for cut optimization services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cutplan.application.commands import OptimizeCuttingCommand
from cutplan.application.materials import MaterialCatalog


@lru_cache(maxsize=1)
def get_material_catalog() -> MaterialCatalog:
    """Get the cached MaterialCatalog instance."""
    return MaterialCatalog()


def get_optimize_command(
    catalog: Annotated[MaterialCatalog, Depends(get_material_catalog)],
) -> OptimizeCuttingCommand:
    """Dependency for OptimizeCuttingCommand."""
    return OptimizeCuttingCommand(catalog)


# Type aliases for cleaner endpoint signatures
MaterialCatalogDep = Annotated[MaterialCatalog, Depends(get_material_catalog)]
OptimizeCommandDep = Annotated[OptimizeCuttingCommand, Depends(get_optimize_command)]
