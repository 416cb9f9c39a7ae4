"""Cut optimization endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from cutplan.application.config import (
    config_to_parts,
    load_config_from_dict,
    schema_to_material,
)
from cutplan.infrastructure import CutDiagramRenderer, JsonExporter
from cutplan.infrastructure.bin_packing import OptimizationOutcome
from cutplan.web.dependencies import OptimizeCommandDep
from cutplan.web.schemas.requests import OptimizeFromConfigRequest, OptimizeRequest
from cutplan.web.schemas.responses import OptimizationResultSchema

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _run(command: OptimizeCommandDep, request: OptimizeRequest) -> OptimizationOutcome:
    material = (
        request.material_id
        if request.material_id is not None
        else schema_to_material(request.material)
    )
    return command.execute(config_to_parts(request.parts), material, request.kerf_mm)


def _to_schema(outcome: OptimizationOutcome) -> OptimizationResultSchema:
    return OptimizationResultSchema.model_validate(JsonExporter().to_dict(outcome))


@router.post("", response_model=OptimizationResultSchema)
def optimize(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> OptimizationResultSchema:
    """Nest the requested parts onto sheets.

    Args:
        request: Parts, material and kerf.
        command: Injected OptimizeCuttingCommand.

    Returns:
        Sheet layouts with placements, waste areas, and usage metrics.

    Raises:
        NestingError: If a part can never be placed (handled by exception handler).
        MaterialNotFoundError: If the material id is unknown.
    """
    return _to_schema(_run(command, request))


@router.post("/svg")
def optimize_svg(
    request: OptimizeRequest,
    command: OptimizeCommandDep,
) -> Response:
    """Nest the requested parts and return all sheets as one SVG diagram."""
    outcome = _run(command, request)
    svg = CutDiagramRenderer().render_combined_svg(outcome)
    return Response(content=svg, media_type="image/svg+xml")


@router.post("/from-config", response_model=OptimizationResultSchema)
def optimize_from_config(
    request: OptimizeFromConfigRequest,
    command: OptimizeCommandDep,
) -> OptimizationResultSchema:
    """Optimize a full cutting job configuration (same format as job files).

    Raises:
        ConfigError: If the configuration is invalid (handled by exception handler).
    """
    config = load_config_from_dict(request.config)
    return _to_schema(command.execute_config(config))
