"""Shared helpers for CLI commands.

This module provides the error reporting and backend loading used by
every command module.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer

from package_assistant.configs import load_settings
from package_assistant.core.errors import PackageAssistantError
from package_assistant.packages import PackageManager, get_package_manager
from package_assistant.utils.formatting import print_error


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Print package-assistant errors and exit with status 1."""
    try:
        yield
    except PackageAssistantError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def load_package_manager(settings_path: Path | None = None) -> PackageManager:
    """Load settings and create the configured package manager backend.

    Raises:
        typer.Exit: If settings cannot be loaded or the backend is unsupported.
    """
    with exit_on_error():
        settings = load_settings(settings_path)
        return get_package_manager(settings.package)
