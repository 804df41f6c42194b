"""Batch execution of copy, move, delete, rename and create.

Batches drawn from the clipboard (or any unordered selection) are
processed in descending lexicographic order, so a path nested inside a
directory is handled before that directory. Bulk renames keep the order
they were given in.

Items are processed strictly one after another. A failed item is
reported immediately and the user decides whether the rest of the batch
runs; nothing that already completed is rolled back.
"""

import logging
import os
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from fsclip.core.errors import FsIOError, StructuralError, UserCancelled
from fsclip.core.settings import EngineSettings
from fsclip.engine.clipboard import Clipboard, SortOrder
from fsclip.engine.conflict import ConflictResolver, Resolution
from fsclip.engine.interaction import Prompter, Reporter, ask_yes_no
from fsclip.engine.materializer import ensure_parent_dirs
from fsclip.engine.paths import (
    basename,
    has_trailing_separator,
    join_child,
    normalize_path,
)
from fsclip.engine.references import NullReferences, ReferenceNotifier
from fsclip.engine.walker import copy_tree, delete_tree
from fsclip.models.action import BatchMode, BatchResult, ItemResult, ItemStatus
from fsclip.models.choices import DestinationChoice

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


def _plural(count: int) -> str:
    return "element" if count == 1 else "elements"


class BatchExecutor:
    """Applies file actions to lists of paths.

    Args:
        clipboard: Session clipboard, kept in step with every move, rename
            and delete.
        prompter: Source of user decisions (conflicts, continuation).
        reporter: Sink for user-facing messages.
        references: Notifier for open handles on moved or deleted paths.
        settings: Engine settings. Defaults to EngineSettings().
        on_refresh: Called after every completed batch so views can redraw.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        prompter: Prompter,
        reporter: Reporter,
        *,
        references: ReferenceNotifier | None = None,
        settings: EngineSettings | None = None,
        on_refresh: Callable[[], None] | None = None,
    ) -> None:
        self._clipboard = clipboard
        self._prompter = prompter
        self._reporter = reporter
        self._references: ReferenceNotifier = references or NullReferences()
        self._settings = settings or EngineSettings()
        self._on_refresh = on_refresh
        self._resolver = ConflictResolver(prompter)

    # =========================================================================
    # Copy / move
    # =========================================================================

    def copy(self, destination: str, sources: Iterable[str] | None = None) -> BatchResult:
        """Copy every source into ``destination``.

        The clipboard is left untouched, so the same entries can be pasted
        elsewhere again.

        Args:
            destination: Absolute destination directory.
            sources: Paths to copy. Defaults to the clipboard entries.

        Returns:
            BatchResult with one item per source.
        """
        return self._paste(BatchMode.COPY, destination, sources)

    def move(self, destination: str, sources: Iterable[str] | None = None) -> BatchResult:
        """Move every source into ``destination`` with an atomic rename.

        A rename the operating system refuses (for example across devices)
        is reported as a failure; the engine never falls back to
        copy-and-delete. Clipboard entries and open references follow the
        moved paths.

        Args:
            destination: Absolute destination directory.
            sources: Paths to move. Defaults to the clipboard entries.

        Returns:
            BatchResult with one item per source.
        """
        return self._paste(BatchMode.MOVE, destination, sources)

    def _paste(
        self,
        mode: BatchMode,
        destination: str,
        sources: Iterable[str] | None,
    ) -> BatchResult:
        ordered = self._ordered(sources)
        if not ordered:
            action = "move" if mode == BatchMode.MOVE else "paste"
            self._reporter.info(f"The clipboard is empty! There is nothing to {action}...")
            return BatchResult(mode=mode)

        target_dir = normalize_path(destination)

        def step(source: str) -> ItemResult:
            return self._paste_item(mode, source, join_child(target_dir, basename(source)))

        result = self._run_batch(mode, ordered, step, self._settings.paste_continue_default)
        self._refresh()
        return result

    def _paste_item(self, mode: BatchMode, source: str, target: str) -> ItemResult:
        try:
            resolution = self._resolver.resolve(target)
            if mode == BatchMode.COPY:
                if resolution.overwrite:
                    _clear_mismatched(source, resolution.destination)
                copy_tree(source, resolution.destination)
            else:
                self._relocate(source, resolution)
        except UserCancelled:
            return ItemResult(source=source, status=ItemStatus.SKIPPED, destination=target)
        except (FsIOError, StructuralError) as e:
            self._reporter.error(f"Could not {mode.value} '{source}':\n{e}")
            return ItemResult(
                source=source,
                status=ItemStatus.FAILED,
                destination=target,
                error=str(e),
            )

        logger.info("%s %s -> %s", mode.value, source, resolution.destination)
        return ItemResult(
            source=source,
            status=ItemStatus.DONE,
            destination=resolution.destination,
        )

    def _relocate(self, source: str, resolution: Resolution) -> None:
        destination = resolution.destination
        if resolution.overwrite:
            _clear_destination(source, destination)
        rename = os.replace if resolution.overwrite else os.rename
        try:
            rename(source, destination)
        except OSError as e:
            raise FsIOError.from_os_error(source, e) from e

        self._clipboard.rewrite(source, destination)
        self._repoint(source, destination)

    # =========================================================================
    # Delete
    # =========================================================================

    def delete(
        self,
        sources: Iterable[str] | None = None,
        *,
        confirm: bool | None = None,
    ) -> BatchResult:
        """Recursively delete every source.

        The user first confirms the (alphabetical) list of targets. Targets
        are then deleted in descending order. After a failure the user is
        asked whether to continue; declining aborts the batch.
        Deleted paths are purged from the clipboard and open references.

        Args:
            sources: Paths to delete. Defaults to the clipboard entries.
            confirm: Ask before deleting. Defaults to the ``confirm_delete``
                setting.

        Returns:
            BatchResult; ``aborted`` is set if the user declined to start
            or to continue.
        """
        ordered = self._ordered(sources)
        if not ordered:
            self._reporter.info("The clipboard is empty! There is nothing to delete...")
            return BatchResult(mode=BatchMode.DELETE)

        should_confirm = self._settings.confirm_delete if confirm is None else confirm
        if should_confirm:
            listing = "\n".join(sorted(ordered))
            prompt = f"Should the following elements really be deleted?\n{listing}"
            if not ask_yes_no(self._prompter, prompt, default=False):
                return BatchResult(mode=BatchMode.DELETE, aborted=True)

        result = self._run_batch(
            BatchMode.DELETE,
            ordered,
            self._delete_item,
            self._settings.delete_continue_default,
        )

        if result.done_count:
            self._reporter.info(f"Deleted {result.done_count} {_plural(result.done_count)}")
        self._refresh()
        return result

    def _delete_item(self, path: str) -> ItemResult:
        try:
            delete_tree(path)
        except FsIOError as e:
            self._reporter.error(f"Could not delete '{path}':\n{e.message}")
            return ItemResult(source=path, status=ItemStatus.FAILED, error=str(e))

        logger.info("deleted %s", path)
        self._clipboard.purge(path)
        self._references.discard(path)
        return ItemResult(source=path, status=ItemStatus.DONE)

    # =========================================================================
    # Rename
    # =========================================================================

    def rename(self, old: str, new: str) -> ItemResult:
        """Rename a single path.

        Renaming a path to itself is a no-op. Missing directories of the
        new path are created before the rename and are left in place if the
        rename then fails. An existing destination goes through the
        conflict protocol, except that a non-empty directory is always
        refused.

        Args:
            old: Absolute path to rename.
            new: Absolute new path.

        Returns:
            ItemResult for the rename.

        Raises:
            StructuralError: If ``old`` is not an absolute path.
        """
        result = self._rename_item(old, new)
        if result.failed:
            self._reporter.error(f"Could not rename '{old}':\n{result.error}")
        self._refresh()
        return result

    def rename_many(self, pairs: Sequence[tuple[str, str]]) -> BatchResult:
        """Rename several paths, in the given order.

        The order is kept as given so that dependent renames (``a`` to ``b``
        before ``b`` to ``c``) work. Unchanged pairs are ignored. After a
        failure the user is asked whether to continue.

        Args:
            pairs: ``(old, new)`` absolute path pairs.

        Returns:
            BatchResult with one item per changed pair.
        """
        changed = [(old, new) for old, new in pairs if old != new]

        def step(pair: tuple[str, str]) -> ItemResult:
            old, new = pair
            result = self._rename_item(old, new)
            if result.failed:
                self._reporter.error(f"Could not rename '{old}':\n{result.error}")
            return result

        result = self._run_batch(
            BatchMode.RENAME,
            changed,
            step,
            self._settings.rename_continue_default,
        )

        if result.done_count:
            self._reporter.info(f"Renamed {result.done_count} {_plural(result.done_count)}")
        self._refresh()
        return result

    def _rename_item(self, old: str, new: str) -> ItemResult:
        source = normalize_path(old)
        try:
            target = normalize_path(new)
        except StructuralError as e:
            return ItemResult(
                source=source, status=ItemStatus.FAILED, destination=new, error=str(e)
            )

        if source == target:
            return ItemResult(source=source, status=ItemStatus.UNCHANGED, destination=target)

        try:
            resolution = self._resolver.resolve(target, refuse_nonempty_dir=True)
            destination = resolution.destination
            ensure_parent_dirs(destination, mode=self._settings.directory_mode)
            if resolution.overwrite:
                _clear_destination(source, destination)
            try:
                os.replace(source, destination)
            except OSError as e:
                raise FsIOError.from_os_error(source, e) from e
            self._clipboard.rewrite(source, destination)
            self._repoint(source, destination)
        except UserCancelled:
            return ItemResult(source=source, status=ItemStatus.SKIPPED, destination=target)
        except (FsIOError, StructuralError) as e:
            return ItemResult(
                source=source,
                status=ItemStatus.FAILED,
                destination=target,
                error=str(e),
            )

        logger.info("renamed %s -> %s", source, destination)
        return ItemResult(source=source, status=ItemStatus.DONE, destination=destination)

    # =========================================================================
    # Create
    # =========================================================================

    def create(self, path: str) -> ItemResult:
        """Create a file, or only directories when ``path`` ends with a separator.

        Missing parent directories are always created. An existing file is
        truncated only after the user confirms.

        Args:
            path: Absolute path of the new file or directory.

        Returns:
            ItemResult for the creation.
        """
        try:
            target = normalize_path(path)
        except StructuralError as e:
            self._reporter.error(str(e))
            return ItemResult(source=path or "?", status=ItemStatus.FAILED, error=str(e))

        try:
            ensure_parent_dirs(path, mode=self._settings.directory_mode)
            if not has_trailing_separator(path):
                self._create_file(target)
        except UserCancelled:
            return ItemResult(source=target, status=ItemStatus.SKIPPED)
        except FsIOError as e:
            self._reporter.error(f"Could not create '{target}':\n{e.message}")
            return ItemResult(source=target, status=ItemStatus.FAILED, error=str(e))

        self._refresh()
        return ItemResult(source=target, status=ItemStatus.DONE, destination=target)

    def _create_file(self, target: str) -> None:
        if os.path.lexists(target):
            prompt = f"{target} already exists. Overwrite?"
            if not ask_yes_no(self._prompter, prompt, default=False):
                raise UserCancelled(f"Kept existing {target}")
        try:
            with open(target, "w", encoding="utf-8"):
                pass
            os.chmod(target, self._settings.file_mode)
        except OSError as e:
            raise FsIOError.from_os_error(target, e) from e
        logger.info("created %s", target)

    def pick_destination(self, element: str) -> str | None:
        """Turn a selected element into a paste destination directory.

        A file (or a path written with a trailing separator) resolves
        directly. For a directory the user chooses between pasting next to
        it and pasting inside it.

        Args:
            element: Selected absolute path.

        Returns:
            Destination directory, or None if the user cancelled.
        """
        path = normalize_path(element)
        if has_trailing_separator(element):
            return path
        if not os.path.isdir(path):
            return os.path.dirname(path)

        options = {
            DestinationChoice.SAME_LEVEL: os.path.dirname(path),
            DestinationChoice.INSIDE: path,
        }
        members = list(options)
        index = self._prompter.confirm(
            "Please choose the specific destination:",
            [f"{options[m]} ({m.value})" for m in members],
            members.index(DestinationChoice.INSIDE),
        )
        if not 0 <= index < len(members):
            return None
        return options[members[index]]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _ordered(self, sources: Iterable[str] | None) -> list[str]:
        if sources is None:
            return self._clipboard.entries(SortOrder.DESCENDING)
        return sorted({normalize_path(p) for p in sources}, reverse=True)

    def _run_batch(
        self,
        mode: BatchMode,
        items: Sequence[ItemT],
        step: Callable[[ItemT], ItemResult],
        continue_default: bool,
    ) -> BatchResult:
        result = BatchResult(mode=mode)
        for index, item in enumerate(items):
            outcome = step(item)
            result.items.append(outcome)
            if outcome.failed and index < len(items) - 1:
                if not ask_yes_no(self._prompter, "Continue?", default=continue_default):
                    result.aborted = True
                    break
        return result

    def _repoint(self, source: str, destination: str) -> None:
        # The entry is already at its destination: report, never fail the item.
        try:
            self._references.repoint(source, destination)
        except FsIOError as e:
            logger.warning("Could not update references to %s: %s", source, e)
            self._reporter.error(
                f"Moved '{source}' but could not update open references:\n{e}"
            )

    def _refresh(self) -> None:
        if self._on_refresh is not None:
            self._on_refresh()


def _clear_destination(source: str, destination: str) -> None:
    """Remove an (empty directory or non-directory) entry about to be replaced.

    ``os.replace`` can swap a file for a file, but not a file for a
    directory or vice versa, so mismatched entries are removed first.
    """
    try:
        if os.path.isdir(destination) and not os.path.islink(destination):
            os.rmdir(destination)
        elif os.path.isdir(source) and not os.path.islink(source):
            os.unlink(destination)
    except OSError as e:
        raise FsIOError.from_os_error(destination, e) from e


def _clear_mismatched(source: str, destination: str) -> None:
    """Remove a destination whose type (directory or not) differs from the source.

    A directory copied onto a directory is merged, so same-type entries
    are left alone. A non-empty directory in the way is not removed.
    """
    source_is_dir = os.path.isdir(source) and not os.path.islink(source)
    destination_is_dir = os.path.isdir(destination) and not os.path.islink(destination)
    if source_is_dir == destination_is_dir:
        return
    try:
        if destination_is_dir:
            os.rmdir(destination)
        else:
            os.unlink(destination)
    except OSError as e:
        raise FsIOError.from_os_error(destination, e) from e
