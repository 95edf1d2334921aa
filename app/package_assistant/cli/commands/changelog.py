"""Changelog command implementation.

Shows changelog entries of downloaded packages that are newer than the
last applied update.
"""

from typing import Annotated

import typer

from package_assistant.cli.types import exit_on_error, load_package_manager
from package_assistant.configs import load_data
from package_assistant.models.package import ChangelogQuery
from package_assistant.utils.formatting import console

app = typer.Typer(
    help="Show unseen changelogs of downloaded packages.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def changelog(
    ctx: typer.Context,
    query: Annotated[
        str | None,
        typer.Option(
            "--query",
            "-q",
            help="Only show packages whose name starts with this prefix.",
        ),
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Show every entry, including those seen before the last update.",
        ),
    ] = False,
) -> None:
    """Show changelogs of cached packages.

    Examples:
        package-assistant changelog             # All unseen entries
        package-assistant changelog -q kernel   # Packages starting with 'kernel'
        package-assistant changelog --all       # Ignore the last update time
    """
    if ctx.invoked_subcommand is not None:
        return

    manager = load_package_manager()

    with exit_on_error():
        threshold = 0 if show_all else load_data().update_timestamp
        output = manager.get_cached_changelogs(ChangelogQuery(name=query), threshold)

    console.print(output, markup=False, highlight=False)
