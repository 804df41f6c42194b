"""Path string helpers shared by the engine.

Paths travel through the engine as absolute, normalized strings without
a trailing separator. The separator is only reintroduced when a child
name is joined onto a directory.
"""

import os

from fsclip.core.errors import StructuralError


def normalize_path(path: str) -> str:
    """Return the canonical clipboard representation of an absolute path.

    Collapses duplicate separators and ``.``/``..`` segments and drops any
    trailing separator (except for the filesystem root itself).

    Args:
        path: Absolute path string.

    Returns:
        Normalized absolute path.

    Raises:
        StructuralError: If the path is empty or not absolute.
    """
    if not path or not os.path.isabs(path):
        msg = "path is not absolute"
        raise StructuralError(path, msg)
    return os.path.normpath(path)


def has_trailing_separator(path: str) -> bool:
    """Check whether a raw path string ends with a separator."""
    return path.endswith(os.sep) or (os.altsep is not None and path.endswith(os.altsep))


def is_within(path: str, ancestor: str) -> bool:
    """Check if ``path`` equals ``ancestor`` or lies underneath it.

    Matching is separator-aware: ``/a/foo`` is not within ``/a/fo``.
    """
    if path == ancestor:
        return True
    prefix = ancestor if ancestor.endswith(os.sep) else ancestor + os.sep
    return path.startswith(prefix)


def relocate(path: str, old: str, new: str) -> str:
    """Map ``path`` from under ``old`` to the same place under ``new``.

    Args:
        path: A path for which ``is_within(path, old)`` holds.
        old: Previous location of the moved entry.
        new: New location of the moved entry.

    Returns:
        The corresponding path under ``new``.
    """
    suffix = path[len(old) :].lstrip(os.sep)
    return os.path.join(new, suffix) if suffix else new


def basename(path: str) -> str:
    """Return the final component of a path, ignoring a trailing separator."""
    return os.path.basename(path.rstrip(os.sep)) or path


def join_child(directory: str, name: str) -> str:
    """Join a child name onto a directory path."""
    return os.path.join(directory, name)
