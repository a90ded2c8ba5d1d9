"""CLI command implementations for the shelfgrid application.

This package contains subcommands for the shelfgrid CLI, including:
- validate: Validate a design file
"""

from shelfgrid.cli.commands.validate import validate_command

__all__ = ["validate_command"]
