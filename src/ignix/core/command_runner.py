"""Child-process execution for package manager commands."""

import logging
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Runs an external command and reports its exit code.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def run(self, command: Sequence[str], *, cwd: Path, silent: bool) -> int:
        """Run command in cwd and return its exit code.

        Args:
            command: Program and arguments
            cwd: Working directory for the child process
            silent: If True, the child's stdout and stderr are discarded entirely.
                If False, they are inherited from this process.

        Raises:
            FileNotFoundError: If the program is not installed
        """
        ...


class RealCommandRunner(CommandRunner):
    """Production implementation using subprocess.run()."""

    def run(self, command: Sequence[str], *, cwd: Path, silent: bool) -> int:
        logger.debug("Running %s in %s (silent=%s)", " ".join(command), cwd, silent)
        sink = subprocess.DEVNULL if silent else None
        result = subprocess.run(
            list(command),
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=sink,
            stderr=sink,
            check=False,
        )
        logger.debug("Exit code %d", result.returncode)
        return result.returncode
