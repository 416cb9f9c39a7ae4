"""Materials command for listing the sheet material catalog."""

from pathlib import Path
from typing import Annotated

import typer

from cutplan.application.config import ConfigError
from cutplan.application.materials import MaterialCatalog


def materials_command(
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Additional materials JSON file"),
    ] = None,
) -> None:
    """List available sheet materials.

    Example:
        cutplan materials --catalog workshop-materials.json
    """
    catalog = MaterialCatalog()
    if catalog_file is not None:
        try:
            catalog.load_file(catalog_file)
        except ConfigError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    typer.echo(
        f"{'ID':<20} {'Name':<22} {'Type':<15} {'Size (mm)':<12} {'Thickness'}"
    )
    typer.echo("-" * 80)
    for material in catalog.list_materials():
        size = f"{material.width_mm:g}x{material.height_mm:g}"
        typer.echo(
            f"{material.id:<20} {material.name:<22} "
            f"{material.material_type.value:<15} {size:<12} "
            f"{material.thickness_mm:g} mm"
        )
