"""Installation of external packages through the host project's package manager."""

import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from ignix.core.command_runner import CommandRunner
from ignix.core.errors import DependencyInstallError
from ignix.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class PackageManager(Enum):
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


# Checked in order; the first lock file present wins.
_LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
)


def detect_package_manager(project_dir: Path) -> PackageManager:
    """Detect the package manager from lock files, defaulting to npm."""
    for lockfile, manager in _LOCKFILES:
        if (project_dir / lockfile).exists():
            return manager
    return PackageManager.NPM


def build_install_command(
    manager: PackageManager, packages: Sequence[str], *, is_dev: bool
) -> list[str]:
    """Build the install command line for manager.

    npm uses ``install`` with ``--save-dev``; pnpm, yarn and bun use ``add``
    with ``-D``. Callers never branch on the manager themselves.

    Example:
        >>> build_install_command(PackageManager.NPM, ["clsx"], is_dev=True)
        ['npm', 'install', '--save-dev', 'clsx']
        >>> build_install_command(PackageManager.PNPM, ["clsx"], is_dev=True)
        ['pnpm', 'add', '-D', 'clsx']
    """
    if manager is PackageManager.NPM:
        args = ["install"]
        if is_dev:
            args.append("--save-dev")
    else:
        args = ["add"]
        if is_dev:
            args.append("-D")
    return [manager.value, *args, *packages]


class DependencyInstaller:
    """Installs package lists with the project's package manager.

    The manager is detected once, on first use, and reused for every later
    call. In silent mode the child process output is discarded so the
    caller's stdout stays clean for JSON output.
    """

    def __init__(
        self,
        runner: CommandRunner,
        project_dir: Path,
        feedback: UserFeedback,
        *,
        silent: bool,
        manager: PackageManager | None = None,
    ) -> None:
        self._runner = runner
        self._project_dir = project_dir
        self._feedback = feedback
        self._silent = silent
        self._manager = manager

    @property
    def manager(self) -> PackageManager:
        if self._manager is None:
            self._manager = detect_package_manager(self._project_dir)
            logger.debug("Detected package manager: %s", self._manager.value)
        return self._manager

    def install(self, packages: Sequence[str], *, is_dev: bool = False) -> None:
        """Install packages (as dev dependencies when is_dev).

        Does nothing for an empty list.

        Raises:
            DependencyInstallError: If the package manager exits non-zero or
                is not installed
        """
        if not packages:
            return

        command = build_install_command(self.manager, packages, is_dev=is_dev)
        self._feedback.info(f"Installing dependencies: {' '.join(command)}")

        try:
            exit_code = self._runner.run(command, cwd=self._project_dir, silent=self._silent)
        except FileNotFoundError as e:
            raise DependencyInstallError(packages, f"{command[0]} not found") from e

        if exit_code != 0:
            self._feedback.error(f"{command[0]} exited with code {exit_code}")
            raise DependencyInstallError(packages, f"exit code {exit_code}")

        self._feedback.success(f"Successfully installed: {', '.join(packages)}")
