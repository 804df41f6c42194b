"""Create command.

This module provides the `fsclip create` command for creating files and
directories together with any missing parents.
"""

from typing import Annotated

import typer

from fsclip.cli.types import open_session, to_absolute
from fsclip.models.action import ItemStatus
from fsclip.utils.formatting import print_info, print_success


def create(
    path: Annotated[
        str,
        typer.Argument(help="File to create, or directory when it ends with a separator."),
    ],
) -> None:
    """Create PATH and its missing parent directories.

    A path ending with a separator creates directories only. An existing
    file is truncated after confirmation.

    Examples:
        fsclip create src/pkg/__init__.py
        fsclip create build/cache/
    """
    session = open_session()
    result = session.executor.create(to_absolute(path))

    if result.status == ItemStatus.DONE:
        print_success(f"Created {path}")
    elif result.status == ItemStatus.SKIPPED:
        print_info("Kept existing file.")
    else:
        raise typer.Exit(code=1)
