"""CLI package for package-assistant.

This package contains the Typer application and all subcommands.
"""

from package_assistant.cli.main import app

__all__ = ["app"]
