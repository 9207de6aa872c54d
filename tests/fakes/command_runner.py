"""Fake implementation of CommandRunner for testing."""

from collections.abc import Sequence
from pathlib import Path

from ignix.core.command_runner import CommandRunner


class FakeCommandRunner(CommandRunner):
    """Records commands instead of spawning processes.

    Examples:
        # Every command succeeds
        >>> runner = FakeCommandRunner()

        # Package manager fails
        >>> runner = FakeCommandRunner(exit_code=1)

        # Package manager binary is not installed
        >>> runner = FakeCommandRunner(missing_programs={"pnpm"})
    """

    def __init__(
        self,
        *,
        exit_code: int = 0,
        missing_programs: set[str] | None = None,
    ) -> None:
        self._exit_code = exit_code
        self._missing_programs = missing_programs or set()
        self._calls: list[tuple[list[str], Path, bool]] = []

    def run(self, command: Sequence[str], *, cwd: Path, silent: bool) -> int:
        if command[0] in self._missing_programs:
            raise FileNotFoundError(f"No such file or directory: '{command[0]}'")
        self._calls.append((list(command), cwd, silent))
        return self._exit_code

    @property
    def calls(self) -> list[tuple[list[str], Path, bool]]:
        """Get the list of run() calls that were made.

        Returns list of (command, cwd, silent) tuples.

        This property is for test assertions only.
        """
        return self._calls.copy()

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _, _ in self._calls]
