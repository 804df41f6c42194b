"""Move command.

This module provides the `fsclip move` command and the paste helper it
shares with `fsclip copy`.
"""

import os
from typing import Annotated

import typer

from fsclip.cli.types import finish_batch, open_session, to_absolute
from fsclip.models.action import BatchMode
from fsclip.utils.formatting import print_error, print_info


def move(
    paths: Annotated[
        list[str],
        typer.Argument(help="Sources followed by the destination directory."),
    ],
    choose: Annotated[
        bool,
        typer.Option(
            "--choose",
            "-c",
            help="Ask whether to paste next to or inside the destination.",
        ),
    ] = False,
) -> None:
    """Move SOURCES... into DEST.

    Each source is renamed atomically; a move the operating system refuses
    (for example across file systems) is reported as a failure.

    Examples:
        fsclip move draft.md ~/archive
    """
    paste(BatchMode.MOVE, paths, choose)


def paste(mode: BatchMode, paths: list[str], choose: bool) -> None:
    """Mark the sources in a fresh session and paste them into the destination.

    Args:
        mode: COPY or MOVE.
        paths: Sources followed by the destination.
        choose: Let the user pick between the destination and its parent.

    Raises:
        typer.Exit: On invalid arguments or if any item failed.
    """
    if len(paths) < 2:
        print_error("Expected at least one source and a destination.")
        raise typer.Exit(code=1)

    *sources, raw_destination = paths
    session = open_session()
    session.clipboard.replace(to_absolute(p) for p in sources)

    destination: str | None = to_absolute(raw_destination)
    if choose:
        destination = session.executor.pick_destination(destination)
        if destination is None:
            print_info("Cancelled.")
            return
    elif not os.path.isdir(destination):
        print_error(f"Destination is not a directory: {destination}")
        raise typer.Exit(code=1)

    if mode == BatchMode.COPY:
        result = session.executor.copy(destination)
    else:
        result = session.executor.move(destination)

    finish_batch(result, f"{mode.value.capitalize()} Results")
