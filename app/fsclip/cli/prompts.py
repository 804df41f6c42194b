"""Terminal implementations of the engine's interaction protocols."""

from collections.abc import Sequence

import typer
from rich.markup import escape

from fsclip.utils.formatting import console, print_block, print_error, print_info, print_warning


def match_choice(answer: str, choices: Sequence[str]) -> int:
    """Map a typed answer to a choice index.

    An answer matches a choice by its 1-based number or, case-insensitively,
    by a prefix of its label. A prefix shared by several labels does not match.

    Args:
        answer: Text typed by the user.
        choices: Ordered choice labels.

    Returns:
        Index of the matching choice, or -1 if nothing (or more than one
        choice) matches.
    """
    text = answer.strip().lower()
    if not text:
        return -1
    if text.isdigit():
        index = int(text) - 1
        return index if 0 <= index < len(choices) else -1

    matches = [i for i, label in enumerate(choices) if label.lower().startswith(text)]
    return matches[0] if len(matches) == 1 else -1


class ConsolePrompter:
    """Asks questions on the terminal with ``typer.prompt``."""

    def confirm(self, prompt: str, choices: Sequence[str], default_index: int) -> int:
        console.print(escape(prompt), style="bold_header")
        for number, label in enumerate(choices, start=1):
            marker = "*" if number - 1 == default_index else " "
            console.print(f" {marker} {number}) {escape(label)}")

        while True:
            try:
                answer = typer.prompt("Choice", default=choices[default_index])
            except typer.Abort:
                return -1
            index = match_choice(answer, choices)
            if index >= 0:
                return index
            print_warning(f"Please answer with one of: {', '.join(escape(c) for c in choices)}")

    def input(self, prompt: str, prefill: str) -> str:
        try:
            return typer.prompt(prompt.rstrip().rstrip(":"), default=prefill)
        except typer.Abort:
            return ""


class ConsoleReporter:
    """Prints engine messages with the shared Rich consoles."""

    def info(self, message: str) -> None:
        print_info(escape(message))

    def error(self, message: str) -> None:
        print_error(escape(message))

    def show(self, lines: Sequence[str]) -> None:
        print_block(list(lines), style="added")
