"""Copy command.

This module provides the `fsclip copy` command, which marks the given
sources and pastes copies of them into a destination directory.
"""

from typing import Annotated

import typer

from fsclip.cli.commands.move import paste
from fsclip.models.action import BatchMode


def copy(
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
    """Copy SOURCES... into DEST.

    Sources are processed in descending path order, so a file nested in a
    selected directory is copied before that directory. Existing entries
    trigger an Overwrite / Skip / Rename prompt.

    Examples:
        fsclip copy notes.txt src/ ~/backup
        fsclip copy -c report.pdf ~/docs
    """
    paste(BatchMode.COPY, paths, choose)
