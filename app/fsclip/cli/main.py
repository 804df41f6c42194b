"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from fsclip import __version__
from fsclip.cli.commands import (
    clipboard,
    config,
    copy,
    create,
    delete,
    move,
    rename,
    rename_many,
    stats,
)
from fsclip.core.logging import setup_logging
from fsclip.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="fsclip",
    help="Copy, move, delete and rename files with a clipboard workflow.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fsclip version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
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
            help="Log every filesystem operation.",
        ),
    ] = False,
) -> None:
    """fsclip - file actions with conflict prompts and editor-driven renames.

    Every invocation starts with an empty clipboard holding the paths
    given on the command line.
    """
    setup_logging(verbose=verbose, console=err_console)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.command(name="copy")(copy.copy)
app.command(name="move")(move.move)
app.command(name="delete")(delete.delete)
app.command(name="rename")(rename.rename)
app.command(name="rename-many")(rename_many.rename_many)
app.command(name="clipboard")(clipboard.clipboard)
app.command(name="create")(create.create)
app.command(name="stats")(stats.stats)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
