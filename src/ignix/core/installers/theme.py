"""Theme installation."""

from pathlib import Path

from ignix.core.dependency_installer import DependencyInstaller
from ignix.core.http.abc import HttpClient
from ignix.core.installers.base import AssetInstaller
from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import AssetKind, RegistryEntry
from ignix.core.user_feedback import UserFeedback


class ThemeInstaller(AssetInstaller):
    """Installs a theme preset flat into the configured themes directory."""

    kind = AssetKind.THEME

    def __init__(
        self,
        registry: RegistryClient,
        http: HttpClient,
        dependencies: DependencyInstaller,
        feedback: UserFeedback,
        *,
        themes_dir: Path,
    ) -> None:
        super().__init__(registry, http, dependencies, feedback)
        self._themes_dir = themes_dir

    def install(self, identifier: str) -> list[str]:
        return self.install_entry(self._resolve(identifier))

    def install_entry(self, entry: RegistryEntry) -> list[str]:
        packages = self._install_packages(entry)
        written = self._download_files(entry, self._themes_dir)
        self._feedback.success(f"Installed theme {entry.name} ({written} file(s) written)")
        return packages
