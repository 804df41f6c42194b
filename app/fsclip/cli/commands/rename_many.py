"""Bulk rename command.

This module provides the `fsclip rename-many` command, which opens the
given paths in $EDITOR and renames them line by line.
"""

from typing import Annotated

import typer

from fsclip.cli.types import finish_batch, open_session, to_absolute
from fsclip.engine.editor import CommitStatus
from fsclip.utils.formatting import print_info


def rename_many(
    paths: Annotated[
        list[str],
        typer.Argument(help="Files and directories to rename."),
    ],
) -> None:
    """Rename PATHS by editing them in $EDITOR.

    Each line of the editor is the new path of the line that was there
    when the editor opened. Renames run top to bottom, so dependent renames
    can be ordered by hand. Lines must not be added or removed.

    Examples:
        fsclip rename-many *.JPG
    """
    session = open_session()
    edit = session.editor.open_multi_rename([to_absolute(p) for p in paths])
    if edit is None:
        print_info("Nothing to rename.")
        return

    text = typer.edit(edit.initial_text(), extension=".txt")
    if text is None:
        session.editor.registry.close(edit.handle)
        print_info("No changes made.")
        return

    outcome = session.editor.commit(edit.handle, text)
    if outcome is None or outcome.status == CommitStatus.UNCHANGED:
        print_info("No changes made.")
    elif outcome.status == CommitStatus.DECLINED:
        print_info("Cancelled.")
    elif outcome.status == CommitStatus.INVALID:
        raise typer.Exit(code=1)
    elif outcome.result is not None:
        finish_batch(outcome.result, "Rename Results")
