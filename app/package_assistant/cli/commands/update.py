"""Update command implementation.

Applies pending updates and records the update time so that the
changelog command only shows newer entries afterwards.
"""

import logging
from typing import Annotated

import typer

from package_assistant.cli.types import exit_on_error, load_package_manager
from package_assistant.configs import mark_updated
from package_assistant.utils.formatting import print_success

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Apply available updates.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def update(
    ctx: typer.Context,
    interactive: Annotated[
        bool,
        typer.Option(
            "--interactive/--noconfirm",
            help="Let the package manager prompt for confirmation.",
        ),
    ] = True,
) -> None:
    """Apply updates with the configured update command.

    Examples:
        package-assistant update              # Interactive update
        package-assistant update --noconfirm  # Unattended update
    """
    if ctx.invoked_subcommand is not None:
        return

    manager = load_package_manager()

    with exit_on_error():
        manager.do_update(interactive)
        data = mark_updated()

    logger.debug("Recorded update timestamp %d", data.update_timestamp)
    print_success("Update complete.")
