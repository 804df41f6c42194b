"""The clipboard: the set of marked paths awaiting a batch action.

The clipboard is an ordinary object owned by a session. Every mutation
notifies the registered listeners (the tree view uses this to redraw
marked state).
"""

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from enum import Enum

from fsclip.engine.paths import is_within, normalize_path, relocate

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class SortOrder(str, Enum):
    """Iteration order for clipboard entries.

    Attributes:
        ASCENDING: Lexicographic order, for display.
        DESCENDING: Reverse lexicographic order, for destructive batches.
            Nested paths come before their ancestors.
    """

    ASCENDING = "asc"
    DESCENDING = "desc"


class Clipboard:
    """Set of absolute, normalized paths.

    Uniqueness is enforced by the container. Order is not meaningful at
    rest; use :meth:`entries` with a :class:`SortOrder` when it is.

    Args:
        paths: Initial entries.
        on_change: Optional listener called after every mutation.
    """

    def __init__(
        self,
        paths: Iterable[str] = (),
        on_change: ChangeListener | None = None,
    ) -> None:
        self._entries: set[str] = {normalize_path(p) for p in paths}
        self._listeners: list[ChangeListener] = []
        if on_change is not None:
            self._listeners.append(on_change)

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a listener called after every mutation."""
        self._listeners.append(listener)

    def add(self, path: str) -> None:
        """Mark a path."""
        self._entries.add(normalize_path(path))
        self._changed()

    def remove(self, path: str) -> None:
        """Unmark a path. Unmarking an unmarked path is a no-op."""
        self._entries.discard(normalize_path(path))
        self._changed()

    def contains(self, path: str) -> bool:
        """Check whether a path is marked."""
        return normalize_path(path) in self._entries

    def toggle(self, path: str) -> None:
        """Mark an unmarked path or unmark a marked one."""
        normalized = normalize_path(path)
        if normalized in self._entries:
            self._entries.remove(normalized)
        else:
            self._entries.add(normalized)
        self._changed()

    def clear(self) -> None:
        """Unmark everything."""
        self._entries.clear()
        self._changed()

    def replace(self, paths: Iterable[str]) -> None:
        """Replace the whole content with ``paths``."""
        self._entries = {normalize_path(p) for p in paths}
        self._changed()

    def rewrite(self, old: str, new: str) -> None:
        """Repoint entries at ``old`` (or nested under it) to ``new``.

        Used after a successful move or rename. Entries are rewritten,
        never dropped or duplicated.
        """
        old = normalize_path(old)
        new = normalize_path(new)
        affected = {p for p in self._entries if is_within(p, old)}
        if affected:
            self._entries -= affected
            self._entries |= {relocate(p, old, new) for p in affected}
            logger.debug("Rewrote %d clipboard entries %s -> %s", len(affected), old, new)
        self._changed()

    def purge(self, path: str) -> None:
        """Drop ``path`` and every entry nested under it (after a delete)."""
        path = normalize_path(path)
        self._entries = {p for p in self._entries if not is_within(p, path)}
        self._changed()

    def entries(self, order: SortOrder | None = None) -> list[str]:
        """Return the entries, optionally sorted.

        Args:
            order: Sort order; None returns the entries in arbitrary order.

        Returns:
            List of paths.
        """
        if order is None:
            return list(self._entries)
        return sorted(self._entries, reverse=order == SortOrder.DESCENDING)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and os.path.isabs(path) and self.contains(path)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries(SortOrder.ASCENDING))

    def _changed(self) -> None:
        for listener in self._listeners:
            listener()
