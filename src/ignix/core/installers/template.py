"""Template installation."""

from pathlib import Path

from ignix.core.dependency_installer import DependencyInstaller
from ignix.core.http.abc import HttpClient
from ignix.core.installers.base import AssetInstaller, merge_packages
from ignix.core.installers.component import ComponentInstaller
from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import AssetKind, RegistryEntry
from ignix.core.user_feedback import UserFeedback


class TemplateInstaller(AssetInstaller):
    """Installs a template from the template registry into ``template_dir/<id>/``.

    Templates live in their own manifest, separate from components. Their
    componentDependencies are installed through the ComponentInstaller.
    """

    kind = AssetKind.TEMPLATE

    def __init__(
        self,
        registry: RegistryClient,
        http: HttpClient,
        dependencies: DependencyInstaller,
        feedback: UserFeedback,
        *,
        components: ComponentInstaller,
        template_dir: Path,
    ) -> None:
        super().__init__(registry, http, dependencies, feedback)
        self._components = components
        self._template_dir = template_dir

    def install(self, identifier: str) -> list[str]:
        """Resolve identifier in the template manifest and install it.

        Raises:
            AssetNotFoundError: If the template isn't in the registry
        """
        return self.install_entry(self._resolve(identifier))

    def install_entry(self, entry: RegistryEntry) -> list[str]:
        """Install an already-resolved template entry.

        Steps, in order: own packages, component dependencies (sequentially,
        in declaration order), target directory, files.

        Returns:
            The template's own packages followed by the packages its
            component dependencies pulled in, deduplicated

        Raises:
            AssetNotFoundError: If one of its components is missing
        """
        own_packages = self._install_packages(entry)

        component_packages: list[list[str]] = []
        for dependency in entry.component_dependencies:
            self._feedback.info(f"Installing component dependency: {dependency}")
            component_packages.append(self._components.install(dependency))

        target_dir = self._template_dir / entry.identifier
        target_dir.mkdir(parents=True, exist_ok=True)

        written = self._download_files(entry, target_dir)
        self._feedback.success(f"Installed template {entry.name} ({written} file(s) written)")

        return merge_packages(own_packages, *component_packages)
