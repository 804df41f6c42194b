"""Editable path lists: clipboard review and bulk rename.

A list of paths is captured as an immutable snapshot and handed to an
editing surface as text, one path per line. When the surface reports its
final text, the edited list is compared with the snapshot:

- clipboard review: the clipboard is replaced by the surviving lines that
  still exist on disk;
- bulk rename: edited lines are paired positionally with the snapshot and
  renamed top to bottom.

Surfaces are tracked by opaque integer handles in a :class:`SurfaceRegistry`.
A handle commits at most once.
"""

import logging
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import partial

from fsclip.core.errors import StructuralError
from fsclip.core.settings import EngineSettings
from fsclip.engine.clipboard import Clipboard, SortOrder
from fsclip.engine.executor import BatchExecutor
from fsclip.engine.interaction import Prompter, Reporter, ask, ask_yes_no
from fsclip.engine.paths import normalize_path
from fsclip.models.action import BatchResult
from fsclip.models.choices import ApplyChoice

logger = logging.getLogger(__name__)

APPLY_PROMPT = "Should your changes be applied?"


class EditMode(str, Enum):
    """What a committed surface does with its text."""

    CLIPBOARD = "clipboard"
    RENAME = "rename"


class CommitStatus(str, Enum):
    """How a commit ended.

    Attributes:
        UNCHANGED: Edited list equals the snapshot; nothing was done.
        APPLIED: The user confirmed and the changes were applied.
        DECLINED: The user declined the changes.
        INVALID: The edited text could not be paired with the snapshot.
    """

    UNCHANGED = "unchanged"
    APPLIED = "applied"
    DECLINED = "declined"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class CommitOutcome:
    """Result of committing an editing surface.

    Attributes:
        status: How the commit ended.
        result: Rename batch result (bulk rename only, when applied).
        entries: New clipboard entries (clipboard review only, when applied).
    """

    status: CommitStatus
    result: BatchResult | None = None
    entries: tuple[str, ...] = ()


def _header(mode: EditMode, marker: str) -> tuple[str, ...]:
    if mode == EditMode.CLIPBOARD:
        return (
            f"{marker} FSCLIP CLIPBOARD",
            "",
            f"{marker} Confirm changes by saving and closing the editor and approve the",
            f"{marker} confirmation (only if changes exist). Empty lines, comments starting",
            f"{marker} with '{marker}' and non-existing elements are not added to the clipboard",
            "",
        )
    return (
        f"{marker} Confirm changes by saving and closing the editor and approve the",
        f"{marker} confirmation (only if changes exist). Renaming is processed line by line",
        f"{marker} from top to bottom. Comment lines starting with '{marker}' are ignored",
    )


@dataclass(frozen=True, slots=True)
class EditSession:
    """An open editing surface.

    Attributes:
        handle: Registry handle used to commit the surface.
        mode: Clipboard review or bulk rename.
        snapshot: Paths as they were when the surface was opened.
        header: Leading comment lines shown above the paths.
    """

    handle: int
    mode: EditMode
    snapshot: tuple[str, ...]
    header: tuple[str, ...] = ()

    def initial_text(self) -> str:
        """Text the editing surface starts with."""
        return "\n".join([*self.header, *self.snapshot]) + "\n"


CommitHandler = Callable[[str], CommitOutcome]


class SurfaceRegistry:
    """Maps open surface handles to their pending commit handlers."""

    def __init__(self) -> None:
        self._handlers: dict[int, CommitHandler] = {}
        self._next_handle = 1

    def register(self, handler: CommitHandler) -> int:
        """Register a commit handler and return its new handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._handlers[handle] = handler
        return handle

    def fire(self, handle: int, text: str) -> CommitOutcome | None:
        """Commit a surface with its final text.

        The handler is removed before it runs, so a second commit signal
        for the same handle does nothing.

        Args:
            handle: Surface handle.
            text: Final text of the surface.

        Returns:
            The commit outcome, or None if the handle is not open.
        """
        handler = self._handlers.pop(handle, None)
        if handler is None:
            logger.debug("Ignoring commit for closed surface %d", handle)
            return None
        return handler(text)

    def is_open(self, handle: int) -> bool:
        """Check if ``handle`` is registered and not yet committed or closed."""
        return handle in self._handlers

    def close(self, handle: int) -> None:
        """Drop a surface without committing it."""
        self._handlers.pop(handle, None)


def parse_edited_lines(text: str, comment_marker: str = "#") -> list[str]:
    """Extract the path lines from edited text.

    Lines are trimmed; blank lines and lines starting with
    ``comment_marker`` are skipped, and a trailing separator is removed.

    Args:
        text: Edited text.
        comment_marker: Prefix of comment lines.

    Returns:
        Remaining lines, in order.
    """
    lines = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(comment_marker):
            continue
        lines.append(line.rstrip(os.sep) or os.sep)
    return lines


class SnapshotDiffEditor:
    """Opens editable path lists and applies them on commit.

    Args:
        clipboard: Session clipboard.
        executor: Executor used for bulk renames.
        prompter: Source of user decisions.
        reporter: Sink for user-facing messages.
        settings: Engine settings. Defaults to EngineSettings().
        registry: Surface registry. A private one is created if omitted.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        executor: BatchExecutor,
        prompter: Prompter,
        reporter: Reporter,
        settings: EngineSettings | None = None,
        registry: SurfaceRegistry | None = None,
    ) -> None:
        self._clipboard = clipboard
        self._executor = executor
        self._prompter = prompter
        self._reporter = reporter
        self._settings = settings or EngineSettings()
        self.registry = registry or SurfaceRegistry()

    def open_clipboard_review(self) -> EditSession:
        """Open the clipboard, in ascending order, for review."""
        snapshot = tuple(self._clipboard.entries(SortOrder.ASCENDING))
        return self._open(EditMode.CLIPBOARD, snapshot)

    def open_multi_rename(self, paths: Sequence[str] | None = None) -> EditSession | None:
        """Open a list of paths for bulk renaming.

        Args:
            paths: Paths to rename. Several paths are sorted in descending
                order; a single path is used as is. Defaults to the
                clipboard entries in descending order.

        Returns:
            The open session, or None if there is nothing to rename.
        """
        if paths is None:
            snapshot = tuple(self._clipboard.entries(SortOrder.DESCENDING))
            if not snapshot:
                self._reporter.info("The clipboard is empty! There is nothing to rename...")
                return None
        else:
            normalized = [normalize_path(p) for p in paths]
            if len(normalized) > 1:
                normalized.sort(reverse=True)
            snapshot = tuple(normalized)
            if not snapshot:
                return None
        return self._open(EditMode.RENAME, snapshot)

    def commit(self, handle: int, text: str) -> CommitOutcome | None:
        """Commit the surface ``handle`` with its final ``text``.

        Returns:
            The outcome, or None if the surface was already committed or closed.
        """
        return self.registry.fire(handle, text)

    def _open(self, mode: EditMode, snapshot: tuple[str, ...]) -> EditSession:
        commit = self._commit_clipboard if mode == EditMode.CLIPBOARD else self._commit_rename
        handle = self.registry.register(partial(commit, snapshot))
        logger.debug("Opened %s surface %d with %d paths", mode.value, handle, len(snapshot))
        return EditSession(
            handle=handle,
            mode=mode,
            snapshot=snapshot,
            header=_header(mode, self._settings.comment_marker),
        )

    def _commit_clipboard(self, snapshot: tuple[str, ...], text: str) -> CommitOutcome:
        edited = parse_edited_lines(text, self._settings.comment_marker)
        entries = tuple(sorted({normalize_path(p) for p in edited if _readable(p)}))

        if entries == snapshot:
            return CommitOutcome(status=CommitStatus.UNCHANGED)

        default = self._settings.clipboard_apply_default
        if not ask_yes_no(self._prompter, APPLY_PROMPT, default=default):
            return CommitOutcome(status=CommitStatus.DECLINED)

        self._clipboard.replace(entries)
        logger.info("Clipboard replaced with %d entries", len(entries))
        return CommitOutcome(status=CommitStatus.APPLIED, entries=entries)

    def _commit_rename(self, snapshot: tuple[str, ...], text: str) -> CommitOutcome:
        edited = parse_edited_lines(text, self._settings.comment_marker)
        if tuple(edited) == snapshot:
            return CommitOutcome(status=CommitStatus.UNCHANGED)

        if len(edited) != len(snapshot):
            error = StructuralError(
                "",
                f"Expected {len(snapshot)} lines but got {len(edited)}. "
                "Lines must not be added or removed when renaming",
            )
            self._reporter.error(str(error))
            return CommitOutcome(status=CommitStatus.INVALID)

        pairs = [
            (old, new if os.path.isabs(new) else os.path.join(os.path.dirname(old), new))
            for old, new in zip(snapshot, edited, strict=True)
        ]

        default = ApplyChoice.YES if self._settings.rename_apply_default else ApplyChoice.NO
        choice = ask(
            self._prompter, APPLY_PROMPT, ApplyChoice, default=default, cancel=ApplyChoice.NO
        )
        if choice == ApplyChoice.DIFF:
            self._reporter.show([f"{old} --> {new}" for old, new in pairs if old != new])
            confirmed = ask_yes_no(
                self._prompter, APPLY_PROMPT, default=self._settings.rename_apply_default
            )
        else:
            confirmed = choice == ApplyChoice.YES

        if not confirmed:
            return CommitOutcome(status=CommitStatus.DECLINED)

        result = self._executor.rename_many(pairs)
        return CommitOutcome(status=CommitStatus.APPLIED, result=result)


def _readable(path: str) -> bool:
    return os.path.isabs(path) and os.access(path, os.R_OK)
