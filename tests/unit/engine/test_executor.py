"""Unit tests for BatchExecutor.

Tests for copy, move, delete, rename and create batches, including
ordering, conflict handling and the continuation policy.
"""

# pyright: reportPrivateUsage=false

import os
import stat
from pathlib import Path

import pytest
from fakes import RecordingReporter, ScriptedPrompter
from fsclip.core.errors import FsIOError
from fsclip.core.settings import EngineSettings
from fsclip.engine.clipboard import Clipboard, SortOrder
from fsclip.engine.executor import BatchExecutor
from fsclip.engine.references import ReferenceRegistry
from fsclip.engine.session import Session
from fsclip.models.action import BatchMode, ItemStatus


@pytest.fixture
def references() -> ReferenceRegistry:
    """Registry of open handles."""
    return ReferenceRegistry()


@pytest.fixture
def refreshes() -> list[str]:
    """Collected refresh signals."""
    return []


@pytest.fixture
def executor(
    prompter: ScriptedPrompter,
    reporter: RecordingReporter,
    references: ReferenceRegistry,
    refreshes: list[str],
) -> BatchExecutor:
    """Executor on an empty clipboard."""
    return BatchExecutor(
        Clipboard(),
        prompter,
        reporter,
        references=references,
        on_refresh=lambda: refreshes.append("refresh"),
    )


def _clipboard(executor: BatchExecutor) -> Clipboard:
    return executor._clipboard


class TestCopy:
    """Tests for BatchExecutor.copy."""

    def test_nested_clipboard_entries(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """A file and its parent directory are both copied, the file first."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "x.txt").write_text("x")
        (tmp_path / "b").mkdir()
        _clipboard(executor).replace([str(tmp_path / "a" / "x.txt"), str(tmp_path / "a")])

        result = executor.copy(str(tmp_path / "b") + os.sep)

        assert [item.source for item in result.items] == [
            str(tmp_path / "a" / "x.txt"),
            str(tmp_path / "a"),
        ]
        assert (tmp_path / "b" / "x.txt").read_text() == "x"
        assert (tmp_path / "b" / "a" / "x.txt").read_text() == "x"
        assert result.success
        assert result.done_count == 2

    def test_clipboard_untouched(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """Copying leaves the clipboard as it was."""
        (tmp_path / "f.txt").write_text("x")
        (tmp_path / "dst").mkdir()
        _clipboard(executor).add(str(tmp_path / "f.txt"))

        executor.copy(str(tmp_path / "dst"))

        assert _clipboard(executor).entries() == [str(tmp_path / "f.txt")]

    def test_skip_on_conflict(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """A skipped conflict leaves the destination alone and continues."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.txt").write_text("new a")
        (tmp_path / "src" / "b.txt").write_text("new b")
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "b.txt").write_text("old b")
        prompter.answers.append("No")

        result = executor.copy(
            str(tmp_path / "dst"),
            [str(tmp_path / "src" / "a.txt"), str(tmp_path / "src" / "b.txt")],
        )

        assert [item.status for item in result.items] == [ItemStatus.SKIPPED, ItemStatus.DONE]
        assert (tmp_path / "dst" / "b.txt").read_text() == "old b"
        assert (tmp_path / "dst" / "a.txt").read_text() == "new a"

    def test_rename_on_conflict(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Rename on conflict copies to the new name."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.txt").write_text("new")
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "a.txt").write_text("old")
        prompter.answers.append("Rename")
        prompter.inputs.append("a (copy).txt")

        result = executor.copy(str(tmp_path / "dst"), [str(tmp_path / "src" / "a.txt")])

        assert result.items[0].destination == str(tmp_path / "dst" / "a (copy).txt")
        assert (tmp_path / "dst" / "a.txt").read_text() == "old"
        assert (tmp_path / "dst" / "a (copy).txt").read_text() == "new"

    def test_empty_clipboard(self, executor: BatchExecutor, reporter: RecordingReporter) -> None:
        """An empty clipboard is reported and nothing happens."""
        result = executor.copy("/tmp")

        assert result.items == []
        assert reporter.infos == ["The clipboard is empty! There is nothing to paste..."]

    def test_refresh_after_batch(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        refreshes: list[str],
    ) -> None:
        """A completed batch fires the refresh signal."""
        (tmp_path / "f").write_text("x")
        (tmp_path / "dst").mkdir()

        executor.copy(str(tmp_path / "dst"), [str(tmp_path / "f")])

        assert refreshes == ["refresh"]

    def test_overwrite_empty_directory_with_file(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Overwrite replaces an empty directory with a copied file."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "x").write_text("file")
        (tmp_path / "dst" / "x").mkdir(parents=True)
        prompter.answers.append("Yes")

        result = executor.copy(str(tmp_path / "dst"), [str(tmp_path / "src" / "x")])

        assert result.items[0].status == ItemStatus.DONE
        assert (tmp_path / "dst" / "x").read_text() == "file"

    def test_overwrite_file_with_directory(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Overwrite replaces a file with a copied directory."""
        (tmp_path / "src" / "x").mkdir(parents=True)
        (tmp_path / "src" / "x" / "inner.txt").write_text("inner")
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "x").write_text("old")
        prompter.answers.append("Yes")

        result = executor.copy(str(tmp_path / "dst"), [str(tmp_path / "src" / "x")])

        assert result.items[0].status == ItemStatus.DONE
        assert (tmp_path / "dst" / "x" / "inner.txt").read_text() == "inner"

    def test_overwrite_nonempty_directory_with_file_fails(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """A non-empty directory is never removed to make room for a file."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "x").write_text("file")
        (tmp_path / "dst" / "x").mkdir(parents=True)
        (tmp_path / "dst" / "x" / "keep.txt").write_text("keep")
        prompter.answers.append("Yes")

        result = executor.copy(str(tmp_path / "dst"), [str(tmp_path / "src" / "x")])

        assert result.items[0].status == ItemStatus.FAILED
        assert (tmp_path / "dst" / "x" / "keep.txt").read_text() == "keep"


class TestMove:
    """Tests for BatchExecutor.move."""

    def test_move_updates_clipboard_and_references(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        references: ReferenceRegistry,
    ) -> None:
        """A moved entry is rewritten in the clipboard and open handles follow it."""
        (tmp_path / "old.txt").write_text("x")
        (tmp_path / "dst").mkdir()
        _clipboard(executor).add(str(tmp_path / "old.txt"))
        handle = references.open(str(tmp_path / "old.txt"))

        result = executor.move(str(tmp_path / "dst"))

        moved = str(tmp_path / "dst" / "old.txt")
        assert result.done_count == 1
        assert _clipboard(executor).entries() == [moved]
        assert references.get(handle).path == moved  # type: ignore[union-attr]
        assert not (tmp_path / "old.txt").exists()

    def test_move_with_overwrite(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Overwrite replaces an existing destination file."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "f.txt").write_text("new")
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "f.txt").write_text("old")
        prompter.answers.append("Yes")

        result = executor.move(str(tmp_path / "dst"), [str(tmp_path / "src" / "f.txt")])

        assert result.items[0].status == ItemStatus.DONE
        assert (tmp_path / "dst" / "f.txt").read_text() == "new"
        assert not (tmp_path / "src" / "f.txt").exists()

    def test_failure_is_reported(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        reporter: RecordingReporter,
    ) -> None:
        """A failing move is reported and recorded as FAILED."""
        (tmp_path / "dst").mkdir()
        missing = str(tmp_path / "missing.txt")

        result = executor.move(str(tmp_path / "dst"), [missing])

        assert result.items[0].status == ItemStatus.FAILED
        assert reporter.errors[0].startswith(f"Could not move '{missing}':")

    def test_empty_clipboard(self, executor: BatchExecutor, reporter: RecordingReporter) -> None:
        """An empty clipboard is reported with the move wording."""
        executor.move("/tmp")

        assert reporter.infos == ["The clipboard is empty! There is nothing to move..."]

    def test_overwrite_empty_directory_with_file(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Overwrite replaces an empty directory with the moved file."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "x").write_text("file")
        (tmp_path / "dst" / "x").mkdir(parents=True)
        prompter.answers.append("Yes")

        result = executor.move(str(tmp_path / "dst"), [str(tmp_path / "src" / "x")])

        assert result.items[0].status == ItemStatus.DONE
        assert (tmp_path / "dst" / "x").read_text() == "file"
        assert not (tmp_path / "src" / "x").exists()

    def test_overwrite_file_with_directory(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Overwrite replaces a file with the moved directory."""
        (tmp_path / "src" / "x").mkdir(parents=True)
        (tmp_path / "src" / "x" / "inner.txt").write_text("inner")
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "x").write_text("old")
        prompter.answers.append("Yes")

        result = executor.move(str(tmp_path / "dst"), [str(tmp_path / "src" / "x")])

        assert result.items[0].status == ItemStatus.DONE
        assert (tmp_path / "dst" / "x" / "inner.txt").read_text() == "inner"
        assert not (tmp_path / "src" / "x").exists()

    def test_overwrite_nonempty_directory_fails(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """A non-empty directory in the way makes the move fail."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "x").write_text("file")
        (tmp_path / "dst" / "x").mkdir(parents=True)
        (tmp_path / "dst" / "x" / "keep.txt").write_text("keep")
        prompter.answers.append("Yes")

        result = executor.move(str(tmp_path / "dst"), [str(tmp_path / "src" / "x")])

        assert result.items[0].status == ItemStatus.FAILED
        assert (tmp_path / "src" / "x").read_text() == "file"
        assert (tmp_path / "dst" / "x" / "keep.txt").exists()

    def test_pending_write_failure_keeps_move_done(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        references: ReferenceRegistry,
        reporter: RecordingReporter,
    ) -> None:
        """Unwritable pending content does not turn a completed move into a failure."""
        (tmp_path / "d").mkdir()
        (tmp_path / "dst").mkdir()
        _clipboard(executor).add(str(tmp_path / "d"))
        on_dir = references.open(str(tmp_path / "d"), pending="unsaved")
        nested = references.open(str(tmp_path / "d" / "a.txt"))

        result = executor.move(str(tmp_path / "dst"))

        moved = str(tmp_path / "dst" / "d")
        assert result.items[0].status == ItemStatus.DONE
        assert _clipboard(executor).entries() == [moved]
        assert references.get(on_dir).path == moved  # type: ignore[union-attr]
        nested_ref = references.get(nested)
        assert nested_ref is not None
        assert nested_ref.path == os.path.join(moved, "a.txt")
        assert not reporter.errors

    def test_failing_notifier_is_reported(
        self,
        tmp_path: Path,
        prompter: ScriptedPrompter,
        reporter: RecordingReporter,
    ) -> None:
        """A notifier error is reported while the item stays DONE."""

        class FailingReferences:
            def repoint(self, old_path: str, new_path: str) -> None:
                raise FsIOError(new_path, "Read-only file system")

            def discard(self, path: str) -> None:
                pass

        executor = BatchExecutor(
            Clipboard(), prompter, reporter, references=FailingReferences()
        )
        (tmp_path / "a.txt").write_text("x")
        (tmp_path / "dst").mkdir()

        result = executor.move(str(tmp_path / "dst"), [str(tmp_path / "a.txt")])

        assert result.items[0].status == ItemStatus.DONE
        assert (tmp_path / "dst" / "a.txt").exists()
        assert "could not update open references" in reporter.errors[0]
        assert not prompter.asked


class TestDelete:
    """Tests for BatchExecutor.delete."""

    def test_confirm_lists_targets(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
        reporter: RecordingReporter,
    ) -> None:
        """The user confirms the ascending target list before deletion."""
        (tmp_path / "a").write_text("x")
        (tmp_path / "b").mkdir()
        _clipboard(executor).replace([str(tmp_path / "b"), str(tmp_path / "a")])
        prompter.answers.append("Yes")

        result = executor.delete()

        assert prompter.asked[0] == (
            "Should the following elements really be deleted?\n"
            f"{tmp_path / 'a'}\n{tmp_path / 'b'}"
        )
        assert result.done_count == 2
        assert not (tmp_path / "a").exists()
        assert not (tmp_path / "b").exists()
        assert len(_clipboard(executor)) == 0
        assert reporter.infos == ["Deleted 2 elements"]

    def test_declined_confirmation(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Declining (the default) deletes nothing."""
        (tmp_path / "a").write_text("x")
        _clipboard(executor).add(str(tmp_path / "a"))

        result = executor.delete()

        assert result.aborted
        assert (tmp_path / "a").exists()
        assert _clipboard(executor).entries() == [str(tmp_path / "a")]

    def test_continue_after_failure_by_default(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
        reporter: RecordingReporter,
    ) -> None:
        """After a failed item the batch continues when the default is accepted."""
        (tmp_path / "a").write_text("x")
        missing = str(tmp_path / "zz-missing")

        result = executor.delete([str(tmp_path / "a"), missing], confirm=False)

        assert prompter.asked == ["Continue?"]
        assert [item.status for item in result.items] == [ItemStatus.FAILED, ItemStatus.DONE]
        assert not result.aborted
        assert not (tmp_path / "a").exists()
        assert reporter.errors[0].startswith(f"Could not delete '{missing}':")
        assert reporter.infos == ["Deleted 1 element"]

    def test_abort_after_failure(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Declining to continue stops the batch and keeps the rest."""
        (tmp_path / "a").write_text("x")
        prompter.answers.append("No")

        result = executor.delete([str(tmp_path / "a"), str(tmp_path / "zz-missing")], confirm=False)

        assert result.aborted
        assert not result.success
        assert len(result.items) == 1
        assert (tmp_path / "a").exists()

    def test_no_continue_prompt_after_last_item(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """A failure on the last item does not ask to continue."""
        result = executor.delete([str(tmp_path / "missing")], confirm=False)

        assert result.failed_count == 1
        assert prompter.asked == []

    def test_purges_nested_clipboard_entries_and_references(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        references: ReferenceRegistry,
    ) -> None:
        """Deleted paths and their descendants leave the clipboard and references."""
        (tmp_path / "dir").mkdir()
        (tmp_path / "dir" / "f").write_text("x")
        (tmp_path / "keep").write_text("x")
        _clipboard(executor).replace([str(tmp_path / "dir" / "f"), str(tmp_path / "keep")])
        handle = references.open(str(tmp_path / "dir" / "f"))

        executor.delete([str(tmp_path / "dir")], confirm=False)

        assert _clipboard(executor).entries() == [str(tmp_path / "keep")]
        assert references.get(handle) is None

    def test_continue_default_follows_settings(
        self,
        tmp_path: Path,
        prompter: ScriptedPrompter,
        reporter: RecordingReporter,
    ) -> None:
        """delete_continue_default=False stops after a failure by default."""
        (tmp_path / "a").write_text("x")
        executor = BatchExecutor(
            Clipboard(),
            prompter,
            reporter,
            settings=EngineSettings(delete_continue_default=False),
        )

        result = executor.delete([str(tmp_path / "a"), str(tmp_path / "zz")], confirm=False)

        assert result.aborted
        assert (tmp_path / "a").exists()


class TestRename:
    """Tests for BatchExecutor.rename."""

    def test_identical_paths_are_noop(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """Renaming a path to itself does nothing."""
        (tmp_path / "a").write_text("x")

        result = executor.rename(str(tmp_path / "a"), str(tmp_path / "a") + os.sep)

        assert result.status == ItemStatus.UNCHANGED

    def test_creates_missing_parents(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """Missing directories of the new path are created first."""
        (tmp_path / "a.txt").write_text("x")

        result = executor.rename(str(tmp_path / "a.txt"), str(tmp_path / "x" / "y" / "b.txt"))

        assert result.status == ItemStatus.DONE
        assert (tmp_path / "x" / "y" / "b.txt").read_text() == "x"

    def test_overwrite_updates_clipboard_and_references(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
        references: ReferenceRegistry,
    ) -> None:
        """Overwriting an existing file rewrites the clipboard and references."""
        (tmp_path / "old.txt").write_text("old")
        (tmp_path / "new.txt").write_text("existing")
        _clipboard(executor).add(str(tmp_path / "old.txt"))
        handle = references.open(str(tmp_path / "old.txt"))
        prompter.answers.append("Yes")

        result = executor.rename(str(tmp_path / "old.txt"), str(tmp_path / "new.txt"))

        assert result.status == ItemStatus.DONE
        assert (tmp_path / "new.txt").read_text() == "old"
        assert _clipboard(executor).entries() == [str(tmp_path / "new.txt")]
        assert references.get(handle).path == str(tmp_path / "new.txt")  # type: ignore[union-attr]

    @pytest.mark.parametrize("answer", ["Yes", "No", "Rename"])
    def test_nonempty_directory_always_refused(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
        reporter: RecordingReporter,
        answer: str,
    ) -> None:
        """A non-empty directory destination fails whatever the user would answer."""
        (tmp_path / "src").mkdir()
        (tmp_path / "dst").mkdir()
        (tmp_path / "dst" / "f").write_text("x")
        prompter.answers.append(answer)

        result = executor.rename(str(tmp_path / "src"), str(tmp_path / "dst"))

        assert result.status == ItemStatus.FAILED
        assert "non-empty directory" in (result.error or "")
        assert (tmp_path / "src").is_dir()
        assert reporter.errors

    def test_failed_rename_keeps_created_parents(
        self, tmp_path: Path, executor: BatchExecutor
    ) -> None:
        """Parents created for a rename that then fails are left in place."""
        result = executor.rename(
            str(tmp_path / "missing.txt"), str(tmp_path / "a" / "b" / "missing.txt")
        )

        assert result.status == ItemStatus.FAILED
        assert (tmp_path / "a" / "b").is_dir()

    def test_overwrite_empty_directory(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """A file may replace an empty directory under Overwrite."""
        (tmp_path / "f.txt").write_text("x")
        (tmp_path / "empty").mkdir()
        prompter.answers.append("Yes")

        result = executor.rename(str(tmp_path / "f.txt"), str(tmp_path / "empty"))

        assert result.status == ItemStatus.DONE
        assert (tmp_path / "empty").is_file()


class TestRenameMany:
    """Tests for BatchExecutor.rename_many."""

    def test_keeps_given_order(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        reporter: RecordingReporter,
    ) -> None:
        """Dependent renames run top to bottom."""
        (tmp_path / "a").write_text("A")
        (tmp_path / "b").write_text("B")

        result = executor.rename_many(
            [
                (str(tmp_path / "b"), str(tmp_path / "c")),
                (str(tmp_path / "a"), str(tmp_path / "b")),
            ]
        )

        assert result.done_count == 2
        assert (tmp_path / "c").read_text() == "B"
        assert (tmp_path / "b").read_text() == "A"
        assert not (tmp_path / "a").exists()
        assert reporter.infos == ["Renamed 2 elements"]

    def test_unchanged_pairs_ignored(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """Pairs with identical paths produce no items."""
        result = executor.rename_many([(str(tmp_path / "a"), str(tmp_path / "a"))])

        assert result.items == []

    def test_stops_after_failure_by_default(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """The rename continuation prompt defaults to No."""
        (tmp_path / "b").write_text("B")

        result = executor.rename_many(
            [
                (str(tmp_path / "missing"), str(tmp_path / "x")),
                (str(tmp_path / "b"), str(tmp_path / "c")),
            ]
        )

        assert prompter.asked == ["Continue?"]
        assert result.aborted
        assert (tmp_path / "b").exists()


class TestCreate:
    """Tests for BatchExecutor.create."""

    def test_creates_file_with_parents(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """A file is created with its parents and the configured mode."""
        target = tmp_path / "x" / "y" / "new.txt"

        result = executor.create(str(target))

        assert result.status == ItemStatus.DONE
        assert target.is_file()
        assert stat.S_IMODE(os.stat(target).st_mode) == 0o644

    def test_trailing_separator_creates_directories(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
    ) -> None:
        """A path ending with a separator only creates directories."""
        result = executor.create(str(tmp_path / "d1" / "d2") + os.sep)

        assert result.status == ItemStatus.DONE
        assert (tmp_path / "d1" / "d2").is_dir()

    def test_existing_file_kept_by_default(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """An existing file is not truncated unless confirmed."""
        target = tmp_path / "f.txt"
        target.write_text("content")

        result = executor.create(str(target))

        assert result.status == ItemStatus.SKIPPED
        assert target.read_text() == "content"

    def test_existing_file_truncated_when_confirmed(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Confirming the overwrite truncates the file."""
        target = tmp_path / "f.txt"
        target.write_text("content")
        prompter.answers.append("Yes")

        executor.create(str(target))

        assert target.read_text() == ""


class TestPickDestination:
    """Tests for BatchExecutor.pick_destination."""

    def test_file_resolves_to_parent(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """A file element resolves to its directory."""
        (tmp_path / "f").write_text("x")

        assert executor.pick_destination(str(tmp_path / "f")) == str(tmp_path)

    def test_trailing_separator_is_inside(self, tmp_path: Path, executor: BatchExecutor) -> None:
        """A path written as a directory resolves to itself without asking."""
        assert executor.pick_destination(str(tmp_path) + os.sep) == str(tmp_path)

    def test_directory_defaults_to_inside(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """For a directory the default choice is inside it."""
        (tmp_path / "d").mkdir()

        assert executor.pick_destination(str(tmp_path / "d")) == str(tmp_path / "d")
        assert prompter.choices == [[f"{tmp_path} (same level)", f"{tmp_path / 'd'} (inside)"]]

    def test_directory_same_level(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """Choosing same level resolves to the parent."""
        (tmp_path / "d").mkdir()
        prompter.answers.append(0)

        assert executor.pick_destination(str(tmp_path / "d")) == str(tmp_path)

    def test_cancel_returns_none(
        self,
        tmp_path: Path,
        executor: BatchExecutor,
        prompter: ScriptedPrompter,
    ) -> None:
        """A cancelled choice returns None."""
        (tmp_path / "d").mkdir()
        prompter.answers.append(-1)

        assert executor.pick_destination(str(tmp_path / "d")) is None


class TestSession:
    """Tests for Session wiring."""

    def test_session_shares_clipboard(self, tmp_path: Path, session: Session) -> None:
        """The executor of a session acts on the session clipboard."""
        (tmp_path / "f").write_text("x")
        (tmp_path / "dst").mkdir()
        session.clipboard.add(str(tmp_path / "f"))

        result = session.executor.move(str(tmp_path / "dst"))

        assert result.mode == BatchMode.MOVE
        assert session.clipboard.entries(SortOrder.ASCENDING) == [str(tmp_path / "dst" / "f")]

    def test_sessions_are_independent(
        self,
        prompter: ScriptedPrompter,
        reporter: RecordingReporter,
    ) -> None:
        """Two sessions never share a clipboard."""
        first = Session.create(prompter, reporter)
        second = Session.create(prompter, reporter)
        first.clipboard.add("/tmp/a")

        assert len(second.clipboard) == 0
