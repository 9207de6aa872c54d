"""Scoped ownership of the process working directory."""

import logging
import os
from pathlib import Path
from types import TracebackType

logger = logging.getLogger(__name__)


class ScopedCwd:
    """Change the process working directory for the duration of a ``with`` block.

    The working directory is the one piece of global mutable state a command
    touches. Entering records the original directory and changes to ``target``;
    exiting always restores the original, whether the block returns normally,
    raises, or exits early via SystemExit.

    A ScopedCwd can only be entered once.

    Example:
        >>> with ScopedCwd(Path("/path/to/project")) as project_dir:
        ...     config = load_config(project_dir)
    """

    def __init__(self, target: Path) -> None:
        self._target = target.resolve()
        self._original: Path | None = None
        self._used = False

    def __enter__(self) -> Path:
        if self._used:
            raise RuntimeError("ScopedCwd cannot be entered more than once")
        self._used = True

        if not self._target.is_dir():
            raise NotADirectoryError(f"Working directory does not exist: {self._target}")

        self._original = Path.cwd()
        logger.debug("Entering %s (from %s)", self._target, self._original)
        os.chdir(self._target)
        return self._target

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._original is not None:
            logger.debug("Restoring working directory %s", self._original)
            os.chdir(self._original)
            self._original = None
