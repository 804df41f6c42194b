"""Exception types raised by the fsclip engine.

All engine exceptions derive from :class:`FsclipError` so callers can
catch the whole family at the CLI boundary.
"""


class FsclipError(Exception):
    """Base exception for all fsclip errors."""


class FsIOError(FsclipError):
    """A filesystem call (stat, scandir, open, rename, unlink, mkdir) failed.

    Attributes:
        path: The path the failing call operated on.
        message: Operating system error message.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "FsIOError":
        """Build an error from an OSError, preferring its strerror text.

        Args:
            path: The path the failing call operated on.
            exc: The original OSError.

        Returns:
            New error instance (the caller raises it ``from exc``).
        """
        return cls(path, exc.strerror or str(exc))


class MetadataUnavailableError(FsIOError):
    """Metadata could not be read because the path vanished or is unreadable."""


class StructuralError(FsclipError):
    """An operation was refused because of the shape of its input.

    Raised for non-absolute paths, overwriting a non-empty directory,
    and line-count mismatches in bulk renames.

    Attributes:
        path: The offending path (may be empty when not path-specific).
        message: Human-readable description.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class UserCancelled(FsclipError):
    """The user skipped or cancelled the current item.

    Not a failure: the batch records the item as skipped and moves on.
    """
