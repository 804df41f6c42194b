"""Human-readable size, permission and timestamp summaries of a path.

Everything here is read-only. Metadata is read fresh on every call.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from fsclip.core.errors import MetadataUnavailableError

SI_PREFIXES = ("k", "M", "G", "T", "P", "E")


class PathKind(str, Enum):
    """Type of a filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class MetadataSnapshot:
    """Raw metadata of a path at one point in time.

    Attributes:
        path: The inspected path.
        kind: File, directory or other.
        size: Size in bytes.
        mode: Permission bits (file type bits masked off).
        created: Birth time (POSIX timestamp), or None if the platform
            does not report it.
        accessed: Last access time (POSIX timestamp).
        modified: Last modification time (POSIX timestamp).
    """

    path: str
    kind: PathKind
    size: int
    mode: int
    created: float | None
    accessed: float
    modified: float


def read_metadata(path: str) -> MetadataSnapshot:
    """Stat ``path`` (following symlinks).

    Raises:
        MetadataUnavailableError: If the path vanished or cannot be stat'ed.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise MetadataUnavailableError(path, e.strerror or str(e)) from e

    if stat.S_ISDIR(st.st_mode):
        kind = PathKind.DIRECTORY
    elif stat.S_ISREG(st.st_mode):
        kind = PathKind.FILE
    else:
        kind = PathKind.OTHER

    return MetadataSnapshot(
        path=path,
        kind=kind,
        size=st.st_size,
        mode=stat.S_IMODE(st.st_mode),
        created=getattr(st, "st_birthtime", None),
        accessed=st.st_atime,
        modified=st.st_mtime,
    )


def format_size(size: int) -> str:
    """Format a byte count with SI prefixes and one decimal place.

    Examples:
        >>> format_size(999)
        '999B'
        >>> format_size(1000)
        '1.0kB'
        >>> format_size(999950)
        '1.0MB'
    """
    if -1000 < size < 1000:
        return f"{size}B"

    value = float(size)
    index = 0
    while abs(value) >= 999_950 and index < len(SI_PREFIXES) - 1:
        value /= 1000
        index += 1
    return f"{value / 1000:.1f}{SI_PREFIXES[index]}B"


def format_byte_count(size: int) -> str:
    """Format a byte count with thousands separators (``123,456,789``)."""
    return f"{size:,}"


def format_permissions(mode: int) -> tuple[str, str]:
    """Format permission bits.

    Args:
        mode: Permission bits.

    Returns:
        Tuple of (octal string, symbolic ``rwxrwxrwx`` string), e.g.
        ``("664", "rw-rw-r--")``.
    """
    octal = f"{mode & 0o7777:o}"
    symbolic = ""
    for shift in (6, 3, 0):
        bits = (mode >> shift) & 0o7
        symbolic += "r" if bits & 4 else "-"
        symbolic += "w" if bits & 2 else "-"
        symbolic += "x" if bits & 1 else "-"
    return octal, symbolic


def format_timestamp(timestamp: float | None) -> str:
    """Format a POSIX timestamp in the locale's date and time representation."""
    if timestamp is None:
        return "unknown"
    return datetime.fromtimestamp(timestamp).strftime("%c")


@dataclass(frozen=True, slots=True)
class MetadataReport:
    """Display-ready metadata of one path."""

    path: str
    kind: PathKind
    size: str
    byte_count: str
    permissions: str
    octal_mode: str
    created: str
    accessed: str
    modified: str

    @classmethod
    def from_snapshot(cls, snapshot: MetadataSnapshot) -> "MetadataReport":
        octal, symbolic = format_permissions(snapshot.mode)
        return cls(
            path=snapshot.path,
            kind=snapshot.kind,
            size=format_size(snapshot.size),
            byte_count=format_byte_count(snapshot.size),
            permissions=symbolic,
            octal_mode=octal,
            created=format_timestamp(snapshot.created),
            accessed=format_timestamp(snapshot.accessed),
            modified=format_timestamp(snapshot.modified),
        )

    def lines(self) -> list[str]:
        """Plain-text rendering, one detail per line."""
        return [
            f"Details for {self.kind.value} '{self.path}'",
            "",
            f"Size:         {self.size} ({self.byte_count} bytes)",
            f"Permissions:  {self.permissions} ({self.octal_mode})",
            f"Created:      {self.created}",
            f"Accessed:     {self.accessed}",
            f"Modified:     {self.modified}",
        ]


def describe(path: str) -> MetadataReport:
    """Read and format the metadata of ``path``.

    Raises:
        MetadataUnavailableError: If the path vanished or cannot be stat'ed.
    """
    return MetadataReport.from_snapshot(read_metadata(path))
