"""Component installation."""

from pathlib import Path

from ignix.core.dependency_installer import DependencyInstaller
from ignix.core.errors import CyclicDependencyError
from ignix.core.http.abc import HttpClient
from ignix.core.installers.base import AssetInstaller, merge_packages
from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import AssetKind, RegistryEntry
from ignix.core.user_feedback import UserFeedback


class ComponentInstaller(AssetInstaller):
    """Installs a component and, first, its component dependency closure.

    Component files land flat in the configured components directory.
    There is no memoization: a component reached twice in one run is
    installed twice, and the second pass skips files that already exist.
    """

    kind = AssetKind.COMPONENT

    def __init__(
        self,
        registry: RegistryClient,
        http: HttpClient,
        dependencies: DependencyInstaller,
        feedback: UserFeedback,
        *,
        components_dir: Path,
    ) -> None:
        super().__init__(registry, http, dependencies, feedback)
        self._components_dir = components_dir

    def install(self, identifier: str, *, resolving: tuple[str, ...] = ()) -> list[str]:
        """Resolve identifier in the component manifest and install it.

        Args:
            identifier: Component id or name (case-insensitive)
            resolving: Components currently being installed further up the
                recursion, outermost first

        Raises:
            AssetNotFoundError: If the component isn't in the registry
        """
        return self.install_entry(self._resolve(identifier), resolving=resolving)

    def install_entry(
        self, entry: RegistryEntry, *, resolving: tuple[str, ...] = ()
    ) -> list[str]:
        """Install an already-resolved component entry.

        Returns:
            Package names pulled in by this component and its closure,
            deduplicated, own packages first

        Raises:
            AssetNotFoundError: If one of its component dependencies isn't in
                the registry
            CyclicDependencyError: If the component depends on itself
                transitively
        """
        if entry.identifier in resolving:
            raise CyclicDependencyError([*resolving, entry.identifier])

        chain = (*resolving, entry.identifier)
        closure_packages: list[list[str]] = []
        for dependency in entry.component_dependencies:
            self._feedback.info(f"Installing component dependency: {dependency}")
            closure_packages.append(self.install(dependency, resolving=chain))

        own_packages = self._install_packages(entry)
        written = self._download_files(entry, self._components_dir)
        self._feedback.success(f"Installed component {entry.name} ({written} file(s) written)")

        return merge_packages(own_packages, *closure_packages)
