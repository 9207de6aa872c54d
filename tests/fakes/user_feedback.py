"""Fake implementation of UserFeedback for testing."""

from contextlib import AbstractContextManager, nullcontext
from typing import Any

from ignix.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures messages instead of printing them.

    Messages are stored as (level, message) tuples in call order; status()
    records its message under the "status" level.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))

    def status(self, message: str) -> AbstractContextManager[Any]:
        self._messages.append(("status", message))
        return nullcontext()

    @property
    def messages(self) -> list[tuple[str, str]]:
        return self._messages.copy()

    def messages_at(self, level: str) -> list[str]:
        """Messages logged at the given level, for test assertions."""
        return [message for msg_level, message in self._messages if msg_level == level]
