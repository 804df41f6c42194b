"""Shared helpers for CLI commands.

Each command builds one fresh engine session from the user's settings,
turns its path arguments into absolute paths, and reports batch results
the same way.
"""

import os

import typer

from fsclip.cli.display import print_batch_result
from fsclip.cli.prompts import ConsolePrompter, ConsoleReporter
from fsclip.core.settings import SettingsError, load_settings
from fsclip.engine.session import Session
from fsclip.models.action import BatchResult
from fsclip.utils.formatting import print_error


def to_absolute(raw: str) -> str:
    """Make a command-line path absolute, keeping a trailing separator.

    Args:
        raw: Path as typed by the user (``~`` is expanded).

    Returns:
        Absolute, normalized path. A trailing separator on ``raw`` is kept
        because it marks the path as a directory.
    """
    absolute = os.path.abspath(os.path.expanduser(raw))
    if raw.endswith(os.sep) and absolute != os.sep:
        absolute += os.sep
    return absolute


def open_session() -> Session:
    """Create an engine session wired to the terminal.

    Raises:
        typer.Exit: If the settings file cannot be loaded.
    """
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    return Session.create(ConsolePrompter(), ConsoleReporter(), settings=settings)


def finish_batch(result: BatchResult, title: str) -> None:
    """Print a batch result and exit non-zero if anything failed.

    Raises:
        typer.Exit: If an item failed or the batch was aborted.
    """
    if result.items:
        print_batch_result(result, title)
    if result.failed_count or result.aborted:
        raise typer.Exit(code=1)
