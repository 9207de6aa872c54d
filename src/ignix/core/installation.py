"""Per-invocation request and result types for ``ignix add``."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ignix.core.errors import UnknownNamespaceError
from ignix.core.registry.types import AssetKind

NAMESPACES: dict[str, AssetKind] = {
    "component": AssetKind.COMPONENT,
    "components": AssetKind.COMPONENT,
    "template": AssetKind.TEMPLATE,
    "templates": AssetKind.TEMPLATE,
    "theme": AssetKind.THEME,
    "themes": AssetKind.THEME,
}


def parse_namespace(namespace: str) -> AssetKind:
    """Map a CLI namespace (singular or plural) to its asset kind.

    Raises:
        UnknownNamespaceError: If the namespace isn't recognized
    """
    kind = NAMESPACES.get(namespace)
    if kind is None:
        raise UnknownNamespaceError(namespace)
    return kind


@dataclass(frozen=True)
class InstallationRequest:
    """One ``add`` invocation, built from CLI arguments and consumed once."""

    kind: AssetKind
    identifiers: tuple[str, ...]  # lowercased
    yes: bool
    json: bool
    cwd: Path

    @property
    def interactive(self) -> bool:
        return not (self.yes or self.json)


@dataclass
class InstallationResult:
    """Outcome of one ``add`` run, owned and mutated by the command only."""

    requested: list[str] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    _dependencies: dict[str, None] = field(default_factory=dict)

    @property
    def dependencies(self) -> list[str]:
        """Deduplicated package names, in the order they were first pulled in."""
        return list(self._dependencies)

    def add_dependencies(self, packages: Iterable[str], *, exclude: Iterable[str] = ()) -> None:
        excluded = set(exclude)
        for package in packages:
            if package not in excluded:
                self._dependencies.setdefault(package, None)
