"""Blocking user-interaction protocols used by the engine.

The engine never talks to a terminal or editor directly. It asks a
:class:`Prompter` for decisions and tells a :class:`Reporter` what
happened; the CLI (or any other front end) supplies both.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Protocol, TypeVar

from fsclip.models.choices import ConfirmChoice

ChoiceT = TypeVar("ChoiceT", bound=Enum)


class Prompter(Protocol):
    """Source of user decisions."""

    def confirm(self, prompt: str, choices: Sequence[str], default_index: int) -> int:
        """Ask the user to pick one of 2-3 labelled choices.

        Args:
            prompt: Question to display.
            choices: Ordered choice labels.
            default_index: Index chosen when the user just accepts.

        Returns:
            Index of the chosen label, or -1 if the prompt was cancelled.
        """
        ...

    def input(self, prompt: str, prefill: str) -> str:
        """Ask the user for a line of text.

        Args:
            prompt: Prompt to display.
            prefill: Initial value the user can edit.

        Returns:
            The entered text; an empty string means cancellation.
        """
        ...


class Reporter(Protocol):
    """Sink for user-facing messages."""

    def info(self, message: str) -> None:
        """Show an informational message."""
        ...

    def error(self, message: str) -> None:
        """Show an error message."""
        ...

    def show(self, lines: Sequence[str]) -> None:
        """Show a block of lines (e.g. a rename diff)."""
        ...


def ask(
    prompter: Prompter,
    prompt: str,
    choice_type: type[ChoiceT],
    default: ChoiceT,
    cancel: ChoiceT,
) -> ChoiceT:
    """Ask a question whose answers are the members of an enum.

    Labels are the enum values, presented in member order.

    Args:
        prompter: Prompter to ask.
        prompt: Question to display.
        choice_type: Enum listing the possible answers.
        default: Answer preselected for the user.
        cancel: Answer assumed when the prompt is cancelled.

    Returns:
        The chosen enum member.
    """
    members = list(choice_type)
    index = prompter.confirm(prompt, [str(m.value) for m in members], members.index(default))
    if 0 <= index < len(members):
        return members[index]
    return cancel


def ask_yes_no(prompter: Prompter, prompt: str, default: bool) -> bool:
    """Ask a Yes/No question. A cancelled prompt counts as No."""
    preselected = ConfirmChoice.YES if default else ConfirmChoice.NO
    return ask(prompter, prompt, ConfirmChoice, preselected, ConfirmChoice.NO) == ConfirmChoice.YES
