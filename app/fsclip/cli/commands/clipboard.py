"""Clipboard review command.

This module provides the `fsclip clipboard` command, which marks the
given paths and lets the user revise the list in $EDITOR.
"""

from typing import Annotated

import typer

from fsclip.cli.display import create_clipboard_table
from fsclip.cli.types import open_session, to_absolute
from fsclip.engine.clipboard import SortOrder
from fsclip.engine.editor import CommitStatus
from fsclip.utils.formatting import console, print_info


def clipboard(
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Paths to mark before reviewing."),
    ] = None,
    no_edit: Annotated[
        bool,
        typer.Option(
            "--no-edit",
            help="Only list the marked paths, do not open the editor.",
        ),
    ] = False,
) -> None:
    """Mark PATHS and review the clipboard in $EDITOR.

    Empty lines, comment lines and paths that do not exist are dropped
    from the clipboard. The revised clipboard is printed afterwards.

    Examples:
        fsclip clipboard src/*.py
        fsclip clipboard --no-edit a.txt b.txt
    """
    session = open_session()
    session.clipboard.replace(to_absolute(p) for p in paths or [])

    if not no_edit:
        edit = session.editor.open_clipboard_review()
        text = typer.edit(edit.initial_text(), extension=".txt")
        if text is None:
            session.editor.registry.close(edit.handle)
        else:
            outcome = session.editor.commit(edit.handle, text)
            if outcome is not None and outcome.status == CommitStatus.DECLINED:
                print_info("Clipboard left unchanged.")

    entries = session.clipboard.entries(SortOrder.ASCENDING)
    if not entries:
        print_info("The clipboard is empty.")
        return
    console.print(create_clipboard_table(entries))
