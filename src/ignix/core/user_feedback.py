"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager, nullcontext
from typing import Any

import click
from rich.console import Console

from ignix.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's mode-aware.

    Built once per command from the output mode and handed to every layer
    (registry client, dependency installer, asset installers). Lower layers
    never check for ``--json`` themselves; they just call the feedback methods.

    Two modes:
    - Interactive: show everything on stderr, with a spinner for fetches
    - JSON: suppress everything, the command's single JSON document is the
      only output

    Usage:
        with ctx.feedback.status("Fetching component registry..."):
            manifest = fetch()
        ctx.feedback.success("Component registry fetched.")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""

    @abstractmethod
    def status(self, message: str) -> AbstractContextManager[Any]:
        """Return a context manager that shows a spinner while the block runs."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(stderr=True)

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        """Show warning message in yellow."""
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))

    def status(self, message: str) -> AbstractContextManager[Any]:
        return self._console.status(message, spinner="dots")


class SuppressedFeedback(UserFeedback):
    """Feedback for ``--json`` mode: nothing is written anywhere.

    Errors are suppressed too; in JSON mode they are reported through the
    ``error`` field of the command's JSON document.
    """

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def status(self, message: str) -> AbstractContextManager[Any]:
        return nullcontext()


def feedback_for_mode(*, json_mode: bool) -> UserFeedback:
    """Create the feedback sink for one command run."""
    if json_mode:
        return SuppressedFeedback()
    return InteractiveFeedback()
