"""Error handlers for the REST API.

Every error response has the shape ``{error, error_type, details}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cutplan.application.config import ConfigError
from cutplan.application.materials import MaterialNotFoundError
from cutplan.domain.errors import NestingError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(NestingError)
    async def nesting_error_handler(
        request: Request, exc: NestingError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": exc.details() or None,
            },
        )

    @app.exception_handler(MaterialNotFoundError)
    async def material_not_found_handler(
        request: Request, exc: MaterialNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"material_id": exc.material_id},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(
        request: Request, exc: ConfigError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )
