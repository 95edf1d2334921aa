"""package-assistant command line.

The root app only handles ``--version`` and ``--verbose``; each command
lives in its own module under ``cli.commands``:

- ``init``: write the settings and data files
- ``check-update``: list, and optionally download, pending updates
- ``update``: apply updates and remember when that happened
- ``changelog``: show cached package changelogs newer than the last update
"""

from typing import Annotated

import typer

from package_assistant import __version__
from package_assistant.cli.commands import changelog, check, init, update
from package_assistant.utils.formatting import configure_logging

app = typer.Typer(
    name="package-assistant",
    help=(
        "Check, download, and apply zypper or dnf updates, then read the "
        "changelogs of downloaded packages you have not seen yet."
    ),
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"package-assistant version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log executed commands and skipped cache entries to stderr.",
        ),
    ] = False,
) -> None:
    """One interface for zypper and dnf updates.

    Typical cycle: [bold]check-update --download[/], read what changed with
    [bold]changelog[/], then [bold]update[/]. Settings are read from
    $XDG_CONFIG_HOME/package-assistant/settings.toml.
    """
    configure_logging(verbose)


app.add_typer(init.app, name="init")
app.add_typer(check.app, name="check-update")
app.add_typer(update.app, name="update")
app.add_typer(changelog.app, name="changelog")


if __name__ == "__main__":
    app()
