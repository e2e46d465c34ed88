"""CLI command implementations for the packlista application.

This package contains subcommands for the packlista CLI, including:
- validate: Validate a booth configuration file
"""

from packlista.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
