"""Sheet material catalog.

This package provides bundled standard sheet materials and the
MaterialCatalog class for looking them up.
"""

from cutplan.application.materials.catalog import (
    MaterialCatalog,
    MaterialNotFoundError,
)

__all__ = [
    "MaterialCatalog",
    "MaterialNotFoundError",
]
