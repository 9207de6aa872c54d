"""Interactive selection prompts."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

import click

from ignix.cli.output import user_output


@dataclass(frozen=True)
class Choice:
    """One selectable option: the label shown to the user and the value returned."""

    title: str
    value: str


class Prompter(ABC):
    """Asks the user to pick from a list of choices."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice]) -> str | None:
        """Return the value of the chosen option, or None if nothing was chosen."""
        ...


class ClickPrompter(Prompter):
    """Numbered-menu prompt on the terminal.

    Writes the menu to stderr so stdout stays clean. An empty answer cancels
    the selection.
    """

    def select(self, message: str, choices: Sequence[Choice]) -> str | None:
        if not choices:
            return None

        user_output(click.style(message, fg="green"))
        for index, choice in enumerate(choices, start=1):
            user_output(f"  {index:>3}. {choice.title}")

        answer = click.prompt(
            "Enter a number (blank to cancel)",
            default="",
            show_default=False,
            type=str,
            err=True,
        ).strip()
        if not answer:
            return None

        if not answer.isdigit() or not 1 <= int(answer) <= len(choices):
            user_output(click.style(f"Invalid selection: {answer}", fg="red"))
            return None

        return choices[int(answer) - 1].value
