"""Domain errors raised by the registry and installation layers.

Resolution misses (an identifier that isn't in the registry) are never raised;
the orchestrator records them as skipped. Everything here is an execution-time
failure that propagates to the command's error boundary.
"""

from collections.abc import Sequence


class IgnixError(Exception):
    """Base class for all well-known ignix failures."""


class RegistryUnavailableError(IgnixError):
    """A registry manifest could not be fetched or parsed."""

    def __init__(self, kind: str, url: str, reason: str) -> None:
        self.kind = kind
        self.url = url
        self.reason = reason
        super().__init__(
            f"Could not connect to the {kind} registry. Please check your connection. "
            f"({url}: {reason})"
        )


class RegistryFormatError(IgnixError):
    """A registry document does not have the expected shape."""


class HttpFetchError(IgnixError):
    """An HTTP GET failed (network error or non-success status)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class AssetNotFoundError(IgnixError):
    """An installer was asked for an entry its manifest does not contain."""

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind.capitalize()} '{identifier}' not found in the registry.")


class CyclicDependencyError(IgnixError):
    """A component depends on itself through its componentDependencies chain."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = list(chain)
        super().__init__(f"Cyclic component dependency: {' -> '.join(self.chain)}")


class DependencyInstallError(IgnixError):
    """The host package manager failed to install packages."""

    def __init__(self, packages: Sequence[str], detail: str | None = None) -> None:
        self.packages = list(packages)
        message = f"Failed to install dependencies: {', '.join(self.packages)}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class UnknownNamespaceError(IgnixError):
    """The namespace argument is not component(s), template(s) or theme(s)."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            f"Unknown namespace: '{namespace}'. Please use 'component', 'template' or 'theme'."
        )
