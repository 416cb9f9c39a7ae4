"""REST API for the cut optimization service."""

from cutplan.web.app import app, create_app

__all__ = ["app", "create_app"]
