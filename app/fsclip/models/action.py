"""Result models for batch file actions.

A batch (copy, move, delete or rename over one or more paths) produces
one :class:`ItemResult` per processed path, collected in a
:class:`BatchResult`.
"""

from dataclasses import dataclass, field
from enum import Enum


class BatchMode(str, Enum):
    """Kind of batch operation.

    Attributes:
        COPY: Copy sources into a destination directory.
        MOVE: Rename sources into a destination directory.
        DELETE: Recursively delete sources.
        RENAME: Rename each source to a new absolute path.
        CREATE: Create a file or directories.
    """

    COPY = "copy"
    MOVE = "move"
    DELETE = "delete"
    RENAME = "rename"
    CREATE = "create"


class ItemStatus(str, Enum):
    """Outcome of a single item in a batch.

    Attributes:
        DONE: The operation was applied.
        SKIPPED: The user skipped or cancelled this item.
        FAILED: The operation raised an I/O or structural error.
        UNCHANGED: Nothing to do (e.g. renaming a path to itself).
    """

    DONE = "done"
    SKIPPED = "skipped"
    FAILED = "failed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True, slots=True)
class ItemResult:
    """Outcome of one path within a batch.

    Attributes:
        source: Absolute source path.
        status: What happened to this item.
        destination: Final destination path, if the operation has one.
        error: Error message when status is FAILED.
    """

    source: str
    status: ItemStatus
    destination: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.source:
            msg = "Source path cannot be empty"
            raise ValueError(msg)
        if self.status == ItemStatus.FAILED and not self.error:
            msg = "Failed results must carry an error message"
            raise ValueError(msg)

    @property
    def done(self) -> bool:
        """Check if the operation was applied."""
        return self.status == ItemStatus.DONE

    @property
    def failed(self) -> bool:
        """Check if the operation failed."""
        return self.status == ItemStatus.FAILED


@dataclass(slots=True)
class BatchResult:
    """Collected outcome of a batch.

    Attributes:
        mode: The batch operation.
        items: Per-item results in processing order.
        aborted: True if the user stopped the batch (declined a confirmation
            or a "Continue?" prompt). Items processed before that remain applied.
    """

    mode: BatchMode
    items: list[ItemResult] = field(default_factory=lambda: [])
    aborted: bool = False

    @property
    def success(self) -> bool:
        """The batch ran to completion (individual items may still have failed)."""
        return not self.aborted

    @property
    def done_count(self) -> int:
        """Number of applied items."""
        return sum(1 for r in self.items if r.done)

    @property
    def failed_count(self) -> int:
        """Number of failed items."""
        return sum(1 for r in self.items if r.failed)

    @property
    def skipped_count(self) -> int:
        """Number of skipped items."""
        return sum(1 for r in self.items if r.status == ItemStatus.SKIPPED)
