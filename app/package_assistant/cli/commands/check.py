"""Check-update command implementation.

Lists available updates and optionally downloads them.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from package_assistant.cli.types import exit_on_error, load_package_manager
from package_assistant.utils.formatting import (
    console,
    create_update_table,
    format_update_row,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Check for available updates.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


@app.callback(invoke_without_command=True)
def check_update(
    ctx: typer.Context,
    download: Annotated[
        bool,
        typer.Option(
            "--download",
            "-d",
            help="Download available updates after checking.",
        ),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Check for available package updates.

    Examples:
        package-assistant check-update              # Show updates in a table
        package-assistant check-update --download   # Also download them
        package-assistant check-update -f json      # Output as JSON
    """
    if ctx.invoked_subcommand is not None:
        return

    manager = load_package_manager()

    with exit_on_error():
        items = manager.check_update()

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([item.to_dict() for item in items]))
    elif not items:
        print_info("No updates available.")
    else:
        table = create_update_table(f"Available Updates ({manager.package_manager.value})")
        for item in items:
            table.add_row(*format_update_row(item))
        console.print(table)

    if download and items:
        print_info("Downloading available packages...")
        with exit_on_error():
            manager.download_update()
        print_success("Download complete.")
