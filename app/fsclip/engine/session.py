"""Wiring of one engine session.

A session owns the clipboard and the components that act on it. Tests
and front ends create as many independent sessions as they need.
"""

from collections.abc import Callable
from dataclasses import dataclass

from fsclip.core.settings import EngineSettings
from fsclip.engine.clipboard import Clipboard
from fsclip.engine.editor import SnapshotDiffEditor
from fsclip.engine.executor import BatchExecutor
from fsclip.engine.interaction import Prompter, Reporter
from fsclip.engine.references import ReferenceNotifier, ReferenceRegistry


@dataclass(slots=True)
class Session:
    """Clipboard, executor and editor sharing one set of collaborators."""

    settings: EngineSettings
    prompter: Prompter
    reporter: Reporter
    clipboard: Clipboard
    executor: BatchExecutor
    editor: SnapshotDiffEditor
    references: ReferenceNotifier

    @classmethod
    def create(
        cls,
        prompter: Prompter,
        reporter: Reporter,
        *,
        settings: EngineSettings | None = None,
        references: ReferenceNotifier | None = None,
        on_refresh: Callable[[], None] | None = None,
    ) -> "Session":
        """Build a session with an empty clipboard.

        Args:
            prompter: Source of user decisions.
            reporter: Sink for user-facing messages.
            settings: Engine settings. Defaults to EngineSettings().
            references: Notifier for open handles. Defaults to a fresh
                ReferenceRegistry.
            on_refresh: View refresh signal, fired after every clipboard
                mutation and every completed batch.

        Returns:
            New Session.
        """
        settings = settings or EngineSettings()
        refs: ReferenceNotifier = references if references is not None else ReferenceRegistry()
        clipboard = Clipboard(on_change=on_refresh)
        executor = BatchExecutor(
            clipboard,
            prompter,
            reporter,
            references=refs,
            settings=settings,
            on_refresh=on_refresh,
        )
        editor = SnapshotDiffEditor(clipboard, executor, prompter, reporter, settings=settings)
        return cls(
            settings=settings,
            prompter=prompter,
            reporter=reporter,
            clipboard=clipboard,
            executor=executor,
            editor=editor,
            references=refs,
        )
