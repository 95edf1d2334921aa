"""Init command implementation.

Creates the settings and data files.
"""

from pathlib import Path
from typing import Annotated

import typer

from package_assistant.cli.types import exit_on_error
from package_assistant.configs import StorageExistsError, init_data, init_settings
from package_assistant.core.paths import ensure_config_dir, ensure_data_dir
from package_assistant.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Create the settings and data files.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Settings file to install. Replaces existing settings.",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Initialize package-assistant.

    Without --config, default settings are written unless a settings file
    already exists.

    Examples:
        package-assistant init
        package-assistant init --config settings.toml
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        ensure_config_dir()
        ensure_data_dir()
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    with exit_on_error():
        settings_path = init_settings(config)
        print_success(f"Wrote configuration to {settings_path}")

        try:
            data_path = init_data()
            print_info(f"Created data file {data_path}")
        except StorageExistsError:
            print_info("Data file already exists, keeping it")
