"""API routers for the REST API."""

from cutplan.web.routers.materials import router as materials_router
from cutplan.web.routers.optimize import router as optimize_router

__all__ = [
    "materials_router",
    "optimize_router",
]
