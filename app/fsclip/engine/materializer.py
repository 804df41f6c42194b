"""Creation of missing ancestor directories."""

import logging
import os
from dataclasses import dataclass
from pathlib import PurePath

from fsclip.core.errors import FsIOError
from fsclip.engine.paths import has_trailing_separator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreatedPathInfo:
    """Which part of a requested directory existed and which was created.

    Attributes:
        existing_prefix: Deepest directory that already existed.
        created_suffix: Path relative to ``existing_prefix`` that was
            created, or None when nothing needed creating.
    """

    existing_prefix: str
    created_suffix: str | None = None

    @property
    def requested_directory(self) -> str:
        """The full directory that was requested (prefix joined with suffix)."""
        if self.created_suffix is None:
            return self.existing_prefix
        return os.path.join(self.existing_prefix, self.created_suffix)


def ensure_parent_dirs(target_path: str, mode: int = 0o755) -> CreatedPathInfo | None:
    """Create every missing directory above ``target_path``.

    The final segment (the file or directory name itself) is not created,
    unless ``target_path`` ends with a separator, in which case the whole
    path names a directory and is created too. Directories are created
    left to right with ``mode`` (subject to the umask). Calling this again
    on the same target creates nothing.

    Args:
        target_path: Absolute path whose ancestors must exist.
        mode: Permission bits for new directories.

    Returns:
        CreatedPathInfo describing the existing and created parts, or None
        if ``target_path`` is not absolute (nothing is done in that case).

    Raises:
        FsIOError: If a directory cannot be created or a segment exists
            as something other than a directory.
    """
    if not target_path or not os.path.isabs(target_path):
        logger.warning("Not creating directories for non-absolute path %r", target_path)
        return None

    normalized = os.path.normpath(target_path)
    directory = normalized if has_trailing_separator(target_path) else os.path.dirname(normalized)

    parts = PurePath(directory).parts
    current = parts[0]
    existing_prefix: str | None = None

    for segment in parts[1:]:
        parent = current
        current = os.path.join(current, segment)
        try:
            os.mkdir(current, mode)
        except FileExistsError as e:
            if not os.path.isdir(current):
                raise FsIOError(current, "exists and is not a directory") from e
            continue
        except OSError as e:
            raise FsIOError.from_os_error(current, e) from e

        logger.debug("Created directory %s", current)
        if existing_prefix is None:
            existing_prefix = parent

    if existing_prefix is None:
        return CreatedPathInfo(existing_prefix=directory)
    return CreatedPathInfo(
        existing_prefix=existing_prefix,
        created_suffix=os.path.relpath(directory, existing_prefix),
    )
