"""Stats command.

This module provides the `fsclip stats` command, which prints size,
permissions and timestamps of a path.
"""

from typing import Annotated

import typer

from fsclip.cli.display import create_metadata_panel
from fsclip.cli.types import to_absolute
from fsclip.core.errors import MetadataUnavailableError
from fsclip.engine.metadata import describe
from fsclip.utils.formatting import console, print_error


def stats(
    path: Annotated[str, typer.Argument(help="File or directory to inspect.")],
) -> None:
    """Show size, permissions and timestamps of PATH."""
    target = to_absolute(path)
    try:
        report = describe(target)
    except MetadataUnavailableError as e:
        print_error(f"Could not read details for '{target}': {e.message}")
        raise typer.Exit(code=1) from e

    console.print(create_metadata_panel(report))
