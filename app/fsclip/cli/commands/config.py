"""Config commands.

Provides commands to show the effective engine settings and to write a
settings file with the defaults.
"""

from typing import Annotated

import typer
from rich.table import Table

from fsclip.core.paths import get_settings_path
from fsclip.core.settings import (
    EngineSettings,
    SettingsError,
    load_settings,
    save_settings,
)
from fsclip.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Show or initialize the engine settings.",
    no_args_is_help=True,
)

_OCTAL_FIELDS = {"directory_mode", "file_mode"}


@app.command()
def show() -> None:
    """Show the effective settings and where they are loaded from."""
    path = get_settings_path()
    try:
        settings = load_settings(path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Engine Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="header", no_wrap=True)
    table.add_column("Value", style="text")
    table.add_column("Description", style="muted")

    for name, field in EngineSettings.model_fields.items():
        value = getattr(settings, name)
        shown = f"0o{value:o}" if name in _OCTAL_FIELDS else str(value)
        table.add_row(name, shown, field.description or "")

    console.print(table)
    if path.exists():
        print_info(f"Loaded from {path}")
    else:
        print_info(f"No settings file at {path}, using defaults.")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    path = get_settings_path()
    if path.exists() and not force:
        print_warning(f"Settings file already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(EngineSettings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
