"""Recursive copy and delete of file and directory trees.

Both walks are depth-first and strictly sequential. Neither is atomic: a
walk that fails midway leaves whatever it already wrote or removed in
place.
"""

import logging
import os
import shutil
import stat

from fsclip.core.errors import FsIOError, StructuralError
from fsclip.engine.paths import is_within, join_child

logger = logging.getLogger(__name__)


def copy_tree(source: str, destination: str) -> None:
    """Copy a file or a directory tree to ``destination``.

    A regular file is copied with its permission bits (the destination is
    created or truncated; a symlink in its place is replaced, not followed).
    A directory is recreated at ``destination`` (an existing directory
    there is merged into), every entry is copied recursively, and the
    source's permission bits are applied once its content is in place.
    Symbolic links are recreated as links.

    A failure to list ``source`` itself aborts immediately. A failure on
    a single nested entry is logged and the walk continues with its
    siblings; the collected failures are raised as one error at the end.

    Args:
        source: Absolute path of the entry to copy.
        destination: Absolute path of the copy.

    Raises:
        StructuralError: If ``destination`` lies inside ``source``.
        FsIOError: If ``source`` cannot be read, or if any nested entry
            failed to copy.
    """
    if destination != source and is_within(destination, source):
        msg = f"cannot copy a directory into itself ({destination})"
        raise StructuralError(source, msg)

    failures: list[FsIOError] = []
    _copy_entry(source, destination, failures)

    if failures:
        noun = "entry" if len(failures) == 1 else "entries"
        msg = f"{len(failures)} nested {noun} could not be copied (first: {failures[0]})"
        raise FsIOError(source, msg)


def _copy_entry(source: str, destination: str, failures: list[FsIOError]) -> None:
    try:
        source_stat = os.lstat(source)
    except OSError as e:
        raise FsIOError.from_os_error(source, e) from e

    if stat.S_ISLNK(source_stat.st_mode):
        _copy_symlink(source, destination)
    elif stat.S_ISDIR(source_stat.st_mode):
        _copy_directory(source, destination, source_stat, failures)
    else:
        try:
            if os.path.islink(destination):
                os.unlink(destination)
            shutil.copyfile(source, destination)
            shutil.copymode(source, destination)
        except OSError as e:
            raise FsIOError.from_os_error(source, e) from e
        logger.debug("Copied file %s -> %s", source, destination)


def _copy_symlink(source: str, destination: str) -> None:
    try:
        target = os.readlink(source)
        if os.path.lexists(destination) and not os.path.isdir(destination):
            os.unlink(destination)
        os.symlink(target, destination)
    except OSError as e:
        raise FsIOError.from_os_error(source, e) from e
    logger.debug("Copied symlink %s -> %s", source, destination)


def _copy_directory(
    source: str,
    destination: str,
    source_stat: os.stat_result,
    failures: list[FsIOError],
) -> None:
    try:
        os.mkdir(destination, 0o700)
    except FileExistsError as e:
        if not os.path.isdir(destination):
            raise FsIOError.from_os_error(destination, e) from e
    except OSError as e:
        raise FsIOError.from_os_error(destination, e) from e

    try:
        with os.scandir(source) as it:
            for entry in it:
                try:
                    _copy_entry(entry.path, join_child(destination, entry.name), failures)
                except FsIOError as e:
                    logger.warning("Could not copy %s: %s", entry.path, e.message)
                    failures.append(e)
    except OSError as e:
        raise FsIOError.from_os_error(source, e) from e

    try:
        os.chmod(destination, stat.S_IMODE(source_stat.st_mode))
    except OSError as e:
        raise FsIOError.from_os_error(destination, e) from e
    logger.debug("Copied directory %s -> %s", source, destination)


def delete_tree(path: str) -> None:
    """Delete a file, a symlink or a whole directory tree.

    Directory contents are removed depth-first: every subdirectory is
    emptied and removed before its parent. Symbolic links are removed,
    never followed. The first error aborts the walk.

    Args:
        path: Absolute path to delete.

    Raises:
        FsIOError: On the first failing stat, scandir, unlink or rmdir.
    """
    try:
        path_stat = os.lstat(path)
    except OSError as e:
        raise FsIOError.from_os_error(path, e) from e

    if stat.S_ISDIR(path_stat.st_mode):
        _delete_directory(path)
    else:
        _unlink(path)


def _delete_directory(path: str) -> None:
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as e:
        raise FsIOError.from_os_error(path, e) from e

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            raise FsIOError.from_os_error(entry.path, e) from e
        if is_dir:
            _delete_directory(entry.path)
        else:
            _unlink(entry.path)

    try:
        os.rmdir(path)
    except OSError as e:
        raise FsIOError.from_os_error(path, e) from e
    logger.debug("Removed directory %s", path)


def _unlink(path: str) -> None:
    try:
        os.unlink(path)
    except OSError as e:
        raise FsIOError.from_os_error(path, e) from e
    logger.debug("Removed %s", path)
