"""Delete command.

This module provides the `fsclip delete` command for recursively
deleting files and directories.
"""

from typing import Annotated

import typer

from fsclip.cli.types import finish_batch, open_session, to_absolute


def delete(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files and directories to delete."),
    ],
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip the confirmation prompt.",
        ),
    ] = False,
) -> None:
    """Delete PATHS recursively.

    Targets are deleted in descending path order. After a failure you are
    asked whether to continue with the remaining targets.

    Examples:
        fsclip delete build/ dist/
        fsclip delete -y tmp.log
    """
    session = open_session()
    session.clipboard.replace(to_absolute(p) for p in paths)

    result = session.executor.delete(confirm=False if yes else None)
    finish_batch(result, "Delete Results")
