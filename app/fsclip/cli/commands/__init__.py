"""CLI commands for fsclip.

This package contains all subcommand implementations.
"""

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

__all__ = [
    "clipboard",
    "config",
    "copy",
    "create",
    "delete",
    "move",
    "rename",
    "rename_many",
    "stats",
]
