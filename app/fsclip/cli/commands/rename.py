"""Rename command.

This module provides the `fsclip rename` command for renaming a single
file or directory.
"""

import os
from typing import Annotated

import typer

from fsclip.cli.types import open_session, to_absolute
from fsclip.models.action import ItemStatus
from fsclip.utils.formatting import print_info, print_success


def rename(
    old: Annotated[str, typer.Argument(help="Path to rename.")],
    new: Annotated[
        str | None,
        typer.Argument(help="New path. A bare name stays in the same directory."),
    ] = None,
) -> None:
    """Rename OLD to NEW.

    Missing directories of NEW are created. Prompts for NEW when it is
    omitted. A non-empty directory is never overwritten.

    Examples:
        fsclip rename draft.md final.md
        fsclip rename notes.txt archive/2024/notes.txt
    """
    session = open_session()
    source = os.path.abspath(os.path.expanduser(old))

    if new is None:
        new = session.prompter.input("New name: ", source)
        if not new:
            print_info("Cancelled.")
            return

    if os.sep in new or new.startswith("~"):
        target = to_absolute(new)
    else:
        target = os.path.join(os.path.dirname(source), new)

    result = session.executor.rename(source, target)
    if result.status == ItemStatus.DONE:
        print_success(f"Renamed '{result.source}' to '{result.destination}'")
    elif result.status == ItemStatus.UNCHANGED:
        print_info("Nothing to rename.")
    elif result.status == ItemStatus.SKIPPED:
        print_info("Skipped.")
    else:
        raise typer.Exit(code=1)
