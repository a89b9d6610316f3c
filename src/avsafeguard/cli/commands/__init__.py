"""CLI command implementations for the avsafeguard application.

This package contains subcommands for the avsafeguard CLI, including:
- validate: Validate a project configuration file
"""

from avsafeguard.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
