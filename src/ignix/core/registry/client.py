"""Registry client: the single source of truth for what can be installed."""

import logging

from ignix.core.config import IgnixConfig
from ignix.core.errors import HttpFetchError, RegistryFormatError, RegistryUnavailableError
from ignix.core.http.abc import HttpClient
from ignix.core.registry.types import AssetKind, RegistryEntry, RegistryManifest, parse_manifest
from ignix.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class RegistryClient:
    """Fetches and caches the component, template and theme manifests.

    Each manifest is fetched at most once per client; there is no refresh.
    A fetch failure is fatal: it raises RegistryUnavailableError and is
    never retried.
    """

    def __init__(self, http: HttpClient, config: IgnixConfig, feedback: UserFeedback) -> None:
        self._http = http
        self._config = config
        self._feedback = feedback
        self._manifests: dict[AssetKind, RegistryManifest] = {}

    def manifest_url(self, kind: AssetKind) -> str:
        return getattr(self._config, kind.url_config_key)

    def fetch_manifest(self, kind: AssetKind) -> RegistryManifest:
        """Return the manifest for kind, fetching it on first use.

        Raises:
            RegistryUnavailableError: If the manifest can't be fetched or parsed
        """
        cached = self._manifests.get(kind)
        if cached is not None:
            return cached

        url = self.manifest_url(kind)
        logger.debug("Fetching %s registry from %s", kind.value, url)
        try:
            with self._feedback.status(f"Fetching {kind.value} registry..."):
                document = self._http.get_json(url)
                manifest = parse_manifest(kind, document, url)
        except (HttpFetchError, RegistryFormatError) as e:
            self._feedback.error(f"Failed to fetch {kind.value} registry.")
            reason = e.reason if isinstance(e, HttpFetchError) else str(e)
            raise RegistryUnavailableError(kind.value, url, reason) from e

        self._feedback.success(f"{kind.value.capitalize()} registry fetched.")
        self._manifests[kind] = manifest
        return manifest

    def fetch_component_manifest(self) -> RegistryManifest:
        return self.fetch_manifest(AssetKind.COMPONENT)

    def fetch_template_manifest(self) -> RegistryManifest:
        return self.fetch_manifest(AssetKind.TEMPLATE)

    def fetch_theme_manifest(self) -> RegistryManifest:
        return self.fetch_manifest(AssetKind.THEME)

    def get_entry(self, kind: AssetKind, identifier: str) -> RegistryEntry | None:
        """Case-insensitive lookup by id or name. Returns None when absent."""
        return self.fetch_manifest(kind).find(identifier)

    def list_entries(self, kind: AssetKind) -> list[RegistryEntry]:
        """All entries of the kind's manifest, from the cache."""
        return self.fetch_manifest(kind).list_entries()

    def get_component(self, identifier: str) -> RegistryEntry | None:
        return self.get_entry(AssetKind.COMPONENT, identifier)

    def get_template(self, identifier: str) -> RegistryEntry | None:
        return self.get_entry(AssetKind.TEMPLATE, identifier)

    def get_theme(self, identifier: str) -> RegistryEntry | None:
        return self.get_entry(AssetKind.THEME, identifier)

    def list_components(self) -> list[RegistryEntry]:
        return self.list_entries(AssetKind.COMPONENT)

    def list_templates(self) -> list[RegistryEntry]:
        return self.list_entries(AssetKind.TEMPLATE)

    def list_themes(self) -> list[RegistryEntry]:
        return self.list_entries(AssetKind.THEME)
