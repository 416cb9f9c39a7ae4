"""Validate command for checking cutting job files.

This module provides the `validate` command that checks a JSON job file
for syntax and schema errors and that its material can be resolved.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutplan.application.config import ConfigError, config_to_material, load_config
from cutplan.application.materials import MaterialCatalog, MaterialNotFoundError


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a cutting job file.

    Checks the job file for:
    - JSON syntax errors
    - Schema validation errors (missing required fields, invalid values, etc.)
    - Unknown material ids

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors

    Example:
        cutplan validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    try:
        material = config_to_material(config, MaterialCatalog())
    except MaterialNotFoundError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  material: {e}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    total = sum(part.quantity for part in config.parts)
    typer.echo(f"Material: {material.description}")
    typer.echo(f"Parts: {len(config.parts)} ({total} pieces)")
    typer.echo(f"Kerf: {config.nesting.kerf_mm:g} mm")
    typer.echo()
    typer.echo("Configuration is valid.")


def _display_load_error(error: ConfigError) -> None:
    """Display a job file loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
