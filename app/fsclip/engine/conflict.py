"""Interactive resolution of destination collisions.

Invoked once per destination that a copy, move or rename is about to
write. If the destination is free the operation proceeds without a
prompt. Otherwise the user chooses between Overwrite, Skip, and Rename
(which asks for a new destination and checks it again).
"""

import logging
import os
from dataclasses import dataclass

from fsclip.core.errors import FsIOError, StructuralError, UserCancelled
from fsclip.engine.interaction import Prompter, ask
from fsclip.engine.paths import normalize_path
from fsclip.models.choices import OverwriteChoice

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Resolution:
    """Where to write, and whether an existing entry will be replaced.

    Attributes:
        destination: Final destination path (may differ from the requested
            one after a Rename).
        overwrite: True if the destination exists and the user chose Overwrite.
    """

    destination: str
    overwrite: bool = False


class ConflictResolver:
    """Runs the Overwrite / Skip / Rename protocol for one destination at a time.

    The resolver keeps no state between calls, so a Skip on one item of a
    batch has no effect on the next.

    Args:
        prompter: Source of user decisions.
    """

    def __init__(self, prompter: Prompter) -> None:
        self._prompter = prompter

    def resolve(self, destination: str, *, refuse_nonempty_dir: bool = False) -> Resolution:
        """Decide where (and whether) to write ``destination``.

        Args:
            destination: Absolute destination path.
            refuse_nonempty_dir: Refuse, without prompting, when the
                destination is a non-empty directory (used by rename).

        Returns:
            Resolution with the destination to use.

        Raises:
            UserCancelled: If the user chose Skip or cancelled the new name.
            StructuralError: If a non-empty directory is in the way and
                ``refuse_nonempty_dir`` is set, or a new name is malformed.
            FsIOError: If the existing directory cannot be listed.
        """
        candidate = normalize_path(destination)

        while True:
            if not os.path.lexists(candidate):
                return Resolution(destination=candidate)

            if refuse_nonempty_dir:
                _refuse_nonempty_directory(candidate)

            choice = ask(
                self._prompter,
                f"{candidate} already exists. Overwrite?",
                OverwriteChoice,
                default=OverwriteChoice.SKIP,
                cancel=OverwriteChoice.SKIP,
            )
            if choice == OverwriteChoice.OVERWRITE:
                logger.debug("Overwriting %s", candidate)
                return Resolution(destination=candidate, overwrite=True)
            if choice == OverwriteChoice.SKIP:
                raise UserCancelled(f"Skipped {candidate}")

            new_name = self._prompter.input("New name: ", candidate).strip()
            if not new_name:
                raise UserCancelled(f"Cancelled renaming {candidate}")
            if not os.path.isabs(new_name):
                new_name = os.path.join(os.path.dirname(candidate), new_name)
            candidate = normalize_path(new_name)


def _refuse_nonempty_directory(path: str) -> None:
    if os.path.islink(path) or not os.path.isdir(path):
        return
    try:
        with os.scandir(path) as it:
            occupied = next(it, None) is not None
    except OSError as e:
        raise FsIOError.from_os_error(path, e) from e
    if occupied:
        msg = "is a non-empty directory. You have to manually check this!"
        raise StructuralError(path, msg)
