"""Logging setup for the command line entry point.

Library modules only create loggers; handlers are attached here, once,
on the ``fsclip`` package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "fsclip"


def setup_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this again only adjusts the level; handlers are never duplicated.

    Args:
        verbose: Log DEBUG messages when True, WARNING and above otherwise.
        console: Console to render to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    for handler in root.handlers:
        handler.setLevel(level)

    return root
