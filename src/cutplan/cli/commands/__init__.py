"""CLI command implementations for the cutplan application.

This package contains subcommands for the cutplan CLI, including:
- validate: Validate a cutting job file
- materials: List the material catalog
"""

from cutplan.cli.commands.materials import materials_command
from cutplan.cli.commands.validate import validate_command

__all__ = ["materials_command", "validate_command"]
