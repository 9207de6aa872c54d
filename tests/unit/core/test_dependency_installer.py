"""Tests for package manager detection and dependency installation."""

from pathlib import Path

import pytest

from ignix.core.dependency_installer import (
    DependencyInstaller,
    PackageManager,
    build_install_command,
    detect_package_manager,
)
from ignix.core.errors import DependencyInstallError
from tests.fakes.command_runner import FakeCommandRunner
from tests.fakes.user_feedback import FakeUserFeedback


@pytest.mark.parametrize(
    ("lockfile", "expected"),
    [
        ("pnpm-lock.yaml", PackageManager.PNPM),
        ("yarn.lock", PackageManager.YARN),
        ("bun.lockb", PackageManager.BUN),
        ("bun.lock", PackageManager.BUN),
        ("package-lock.json", PackageManager.NPM),
    ],
)
def test_detects_manager_from_lockfile(
    tmp_path: Path, lockfile: str, expected: PackageManager
) -> None:
    (tmp_path / lockfile).touch()

    assert detect_package_manager(tmp_path) is expected


def test_defaults_to_npm_without_lockfile(tmp_path: Path) -> None:
    assert detect_package_manager(tmp_path) is PackageManager.NPM


def test_pnpm_lockfile_wins_over_yarn(tmp_path: Path) -> None:
    """When several lock files exist, the first in detection order wins."""
    (tmp_path / "yarn.lock").touch()
    (tmp_path / "pnpm-lock.yaml").touch()

    assert detect_package_manager(tmp_path) is PackageManager.PNPM


@pytest.mark.parametrize(
    ("manager", "is_dev", "expected"),
    [
        (PackageManager.NPM, False, ["npm", "install", "clsx", "tailwind-merge"]),
        (PackageManager.NPM, True, ["npm", "install", "--save-dev", "clsx", "tailwind-merge"]),
        (PackageManager.PNPM, False, ["pnpm", "add", "clsx", "tailwind-merge"]),
        (PackageManager.PNPM, True, ["pnpm", "add", "-D", "clsx", "tailwind-merge"]),
        (PackageManager.YARN, True, ["yarn", "add", "-D", "clsx", "tailwind-merge"]),
        (PackageManager.BUN, False, ["bun", "add", "clsx", "tailwind-merge"]),
    ],
)
def test_build_install_command(
    manager: PackageManager, is_dev: bool, expected: list[str]
) -> None:
    assert build_install_command(manager, ["clsx", "tailwind-merge"], is_dev=is_dev) == expected


def test_install_empty_list_is_a_no_op(tmp_path: Path) -> None:
    """No command is spawned and no output is produced for an empty list."""
    runner = FakeCommandRunner()
    feedback = FakeUserFeedback()
    installer = DependencyInstaller(runner, tmp_path, feedback, silent=False)

    installer.install([])
    installer.install([], is_dev=True)

    assert runner.calls == []
    assert feedback.messages == []


def test_install_runs_in_project_dir(tmp_path: Path) -> None:
    runner = FakeCommandRunner()
    feedback = FakeUserFeedback()
    installer = DependencyInstaller(runner, tmp_path, feedback, silent=False)

    installer.install(["clsx"])

    assert runner.calls == [(["npm", "install", "clsx"], tmp_path, False)]
    assert feedback.messages_at("success") == ["Successfully installed: clsx"]


def test_silent_mode_is_passed_to_runner(tmp_path: Path) -> None:
    """In silent mode child process output is discarded."""
    runner = FakeCommandRunner()
    installer = DependencyInstaller(runner, tmp_path, FakeUserFeedback(), silent=True)

    installer.install(["@types/react"], is_dev=True)

    assert runner.calls == [(["npm", "install", "--save-dev", "@types/react"], tmp_path, True)]


def test_manager_is_detected_once(tmp_path: Path) -> None:
    """A lock file appearing after the first install does not change the manager."""
    runner = FakeCommandRunner()
    installer = DependencyInstaller(runner, tmp_path, FakeUserFeedback(), silent=False)

    installer.install(["clsx"])
    (tmp_path / "pnpm-lock.yaml").touch()
    installer.install(["tailwind-merge"])

    assert [command[0] for command in runner.commands] == ["npm", "npm"]


def test_explicit_manager_skips_detection(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").touch()
    runner = FakeCommandRunner()
    installer = DependencyInstaller(
        runner, tmp_path, FakeUserFeedback(), silent=False, manager=PackageManager.BUN
    )

    installer.install(["clsx"])

    assert runner.commands == [["bun", "add", "clsx"]]


def test_non_zero_exit_raises_with_package_names(tmp_path: Path) -> None:
    runner = FakeCommandRunner(exit_code=1)
    feedback = FakeUserFeedback()
    installer = DependencyInstaller(runner, tmp_path, feedback, silent=False)

    with pytest.raises(DependencyInstallError, match="clsx, tailwind-merge") as exc_info:
        installer.install(["clsx", "tailwind-merge"])

    assert exc_info.value.packages == ["clsx", "tailwind-merge"]
    assert "exit code 1" in str(exc_info.value)
    assert feedback.messages_at("success") == []


def test_missing_package_manager_raises(tmp_path: Path) -> None:
    (tmp_path / "pnpm-lock.yaml").touch()
    runner = FakeCommandRunner(missing_programs={"pnpm"})
    installer = DependencyInstaller(runner, tmp_path, FakeUserFeedback(), silent=False)

    with pytest.raises(DependencyInstallError, match="pnpm not found"):
        installer.install(["clsx"])
