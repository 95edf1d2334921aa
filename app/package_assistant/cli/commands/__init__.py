"""CLI commands for package-assistant.

This package contains all subcommand implementations.
"""

from package_assistant.cli.commands import changelog, check, init, update

__all__ = ["changelog", "check", "init", "update"]
