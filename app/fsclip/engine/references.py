"""Secondary references: open handles that track a filesystem path.

An editor buffer showing a file is the typical secondary reference.
After a move or rename the engine asks the notifier to repoint every
handle at or below the old path; after a delete it asks it to discard
them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from fsclip.engine.paths import is_within, normalize_path, relocate

logger = logging.getLogger(__name__)


class ReferenceNotifier(Protocol):
    """Collaborator that keeps open handles consistent with the filesystem."""

    def repoint(self, old_path: str, new_path: str) -> None:
        """Repoint handles at or below ``old_path`` to the same place under ``new_path``.

        Called after the move is done on disk. May raise FsIOError; the
        move still counts as done.
        """
        ...

    def discard(self, path: str) -> None:
        """Drop handles at or below ``path``."""
        ...


class NullReferences:
    """Notifier for front ends without open handles."""

    def repoint(self, old_path: str, new_path: str) -> None:
        """Do nothing."""

    def discard(self, path: str) -> None:
        """Do nothing."""


@dataclass(slots=True)
class OpenReference:
    """An open handle on a path.

    Attributes:
        path: Absolute path the handle points at.
        pending: Unsaved content, written to the new location on repoint.
    """

    path: str
    pending: str | None = None


class ReferenceRegistry:
    """In-memory registry of open handles keyed by an integer id."""

    def __init__(self) -> None:
        self._handles: dict[int, OpenReference] = {}
        self._next_id = 1

    def open(self, path: str, pending: str | None = None) -> int:
        """Register a handle and return its id."""
        handle = self._next_id
        self._next_id += 1
        self._handles[handle] = OpenReference(path=normalize_path(path), pending=pending)
        return handle

    def get(self, handle: int) -> OpenReference | None:
        """Look up a handle, or None if it was discarded."""
        return self._handles.get(handle)

    def paths(self) -> list[str]:
        """Paths of all open handles, sorted."""
        return sorted(ref.path for ref in self._handles.values())

    def repoint(self, old_path: str, new_path: str) -> None:
        """Repoint matching handles, then persist their pending content.

        Every matching handle is repointed before any content is written.
        Content that cannot be written is logged and stays pending on its
        (already repointed) handle.
        """
        moved = [ref for ref in self._handles.values() if is_within(ref.path, old_path)]
        for ref in moved:
            ref.path = relocate(ref.path, old_path, new_path)
            logger.debug("Repointed handle to %s", ref.path)

        for ref in moved:
            if ref.pending is None:
                continue
            try:
                Path(ref.path).write_text(ref.pending, encoding="utf-8")
            except OSError as e:
                logger.warning("Could not write pending content to %s: %s", ref.path, e)
                continue
            ref.pending = None

    def discard(self, path: str) -> None:
        """Drop every handle at or below ``path``."""
        stale = [h for h, ref in self._handles.items() if is_within(ref.path, path)]
        for handle in stale:
            del self._handles[handle]
        if stale:
            logger.debug("Discarded %d handle(s) under %s", len(stale), path)
