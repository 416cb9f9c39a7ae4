"""Application layer - use cases, configuration, and material catalog."""

from cutplan.application.commands import OptimizeCuttingCommand
from cutplan.application.materials import MaterialCatalog, MaterialNotFoundError

__all__ = [
    "MaterialCatalog",
    "MaterialNotFoundError",
    "OptimizeCuttingCommand",
]
