"""Typer CLI for sheet cutting optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutplan.application import (
    MaterialCatalog,
    MaterialNotFoundError,
    OptimizeCuttingCommand,
)
from cutplan.application.config import (
    ConfigError,
    config_to_material,
    config_to_parts,
    load_config,
)
from cutplan.cli.commands import materials_command, validate_command
from cutplan.domain import Material, PartSpec
from cutplan.infrastructure import (
    CsvExporter,
    CutDiagramRenderer,
    JsonExporter,
    OutcomeSummaryFormatter,
)
from cutplan.infrastructure.bin_packing import DEFAULT_KERF_MM

OUTPUT_FORMATS = ("text", "json", "csv")


def parse_part(value: str) -> PartSpec:
    """Parse a ``WIDTHxHEIGHT[xQTY]`` part option, e.g. ``600x400x2``.

    Raises:
        typer.BadParameter: If the value is malformed.
    """
    pieces = value.lower().replace("*", "x").split("x")
    if len(pieces) not in (2, 3):
        raise typer.BadParameter(
            f"Invalid part '{value}'. Expected WIDTHxHEIGHT or WIDTHxHEIGHTxQTY"
        )
    try:
        width = float(pieces[0])
        height = float(pieces[1])
        quantity = int(pieces[2]) if len(pieces) == 3 else 1
    except ValueError:
        raise typer.BadParameter(
            f"Invalid part '{value}'. Dimensions must be numbers and quantity an integer"
        )
    return PartSpec(width_mm=width, height_mm=height, quantity=quantity)


def _resolve_material(
    catalog: MaterialCatalog,
    material_id: str | None,
    sheet_width: float | None,
    sheet_height: float | None,
    thickness: float,
) -> Material:
    if sheet_width is not None or sheet_height is not None:
        if sheet_width is None or sheet_height is None:
            typer.echo(
                "Error: --sheet-width and --sheet-height must be given together",
                err=True,
            )
            raise typer.Exit(code=1)
        return Material(
            width_mm=sheet_width,
            height_mm=sheet_height,
            thickness_mm=thickness,
            name=f"Custom {thickness:g}mm",
            id="custom",
        )
    return catalog.get(material_id or "ldsp-16")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app = typer.Typer(
    name="cutplan",
    help="Nest rectangular furniture parts onto material sheets with minimal waste.",
    no_args_is_help=True,
)

app.command(name="validate")(validate_command)
app.command(name="materials")(materials_command)


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON job file"),
    ] = None,
    part: Annotated[
        list[str] | None,
        typer.Option("--part", "-p", help="Part as WIDTHxHEIGHT[xQTY] in mm (repeatable)"),
    ] = None,
    material_id: Annotated[
        str | None,
        typer.Option("--material", "-m", help="Material catalog id (default ldsp-16)"),
    ] = None,
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", help="Custom sheet width in mm"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", help="Custom sheet height in mm"),
    ] = None,
    thickness: Annotated[
        float,
        typer.Option("--thickness", "-t", help="Custom sheet thickness in mm"),
    ] = 16.0,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw kerf width in mm (default 3)"),
    ] = None,
    catalog_file: Annotated[
        Path | None,
        typer.Option("--catalog", help="Additional materials JSON file"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, csv"),
    ] = "text",
    svg_dir: Annotated[
        Path | None,
        typer.Option("--svg-dir", help="Write one SVG cut diagram per sheet to this directory"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Compute a sheet layout for a list of parts.

    Parts come from a job file (--config) or repeated --part options; the
    command line overrides the job file's material and kerf.

    Examples:
        cutplan optimize --part 600x400x4 --part 720x560x2 --material ldsp-18
        cutplan optimize --config kitchen.json --format json
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Available formats: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    catalog = MaterialCatalog()
    command = OptimizeCuttingCommand(catalog)

    try:
        if catalog_file is not None:
            catalog.load_file(catalog_file)

        parts: list[PartSpec] = []
        material: Material | None = None
        kerf_mm = DEFAULT_KERF_MM

        if config_file is not None:
            config = load_config(config_file)
            parts = config_to_parts(config.parts)
            kerf_mm = config.nesting.kerf_mm
            if material_id is None and sheet_width is None and sheet_height is None:
                material = config_to_material(config, catalog)

        parts.extend(parse_part(value) for value in part or [])
        if not parts:
            typer.echo("Error: No parts given. Use --part or --config.", err=True)
            raise typer.Exit(code=1)

        if material is None:
            material = _resolve_material(
                catalog, material_id, sheet_width, sheet_height, thickness
            )
        if kerf is not None:
            kerf_mm = kerf

        outcome = command.execute(parts, material, kerf_mm)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except MaterialNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Run 'cutplan materials' to list available materials.", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        typer.echo(JsonExporter().format(outcome))
    elif output_format == "csv":
        typer.echo(CsvExporter().format(parts, outcome, material), nl=False)
    else:
        typer.echo(OutcomeSummaryFormatter().format(outcome, parts))

    if svg_dir is not None:
        svg_dir.mkdir(parents=True, exist_ok=True)
        renderer = CutDiagramRenderer()
        for index, svg in enumerate(renderer.render_all_svg(outcome), start=1):
            svg_path = svg_dir / f"sheet_{index}.svg"
            svg_path.write_text(svg, encoding="utf-8")
            typer.echo(f"SVG exported to: {svg_path}", err=output_format != "text")


if __name__ == "__main__":
    app()
