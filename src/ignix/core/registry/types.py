"""Registry document types and parsing."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ignix.core.errors import RegistryFormatError


class AssetKind(Enum):
    """Category of installable asset. Each kind has its own manifest."""

    COMPONENT = "component"
    TEMPLATE = "template"
    THEME = "theme"

    @property
    def collection_key(self) -> str:
        """Root key of the manifest document for this kind."""
        return f"{self.value}s"

    @property
    def url_config_key(self) -> str:
        """IgnixConfig attribute holding this kind's manifest URL."""
        if self is AssetKind.COMPONENT:
            return "registry_url"
        return f"{self.value}_url"


@dataclass(frozen=True)
class RegistryFile:
    """One file of an entry, relative to the manifest's base URL."""

    path: str
    type: str


@dataclass(frozen=True)
class RegistryEntry:
    """A named installable asset."""

    key: str  # Key of the entry in the manifest collection
    name: str
    files: Mapping[str, RegistryFile]
    id: str | None = None
    description: str = ""
    category: str | None = None
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    component_dependencies: tuple[str, ...] = ()

    @property
    def identifier(self) -> str:
        """Lowercased id, or name when the entry has no id."""
        return (self.id or self.name).lower()

    @property
    def main_type(self) -> str | None:
        main = self.files.get("main")
        if main is None:
            return None
        return main.type


@dataclass(frozen=True)
class RegistryManifest:
    """Parsed form of one registry document. Immutable once fetched."""

    kind: AssetKind
    base_url: str
    entries: Mapping[str, RegistryEntry] = field(default_factory=dict)

    def find(self, identifier: str) -> RegistryEntry | None:
        """Look up an entry by id or name, case-insensitively.

        An id or name match wins over a collection-key match. Returns None
        when nothing matches.
        """
        wanted = identifier.lower()
        for entry in self.entries.values():
            if (entry.id is not None and entry.id.lower() == wanted) or (
                entry.name.lower() == wanted
            ):
                return entry
        for entry in self.entries.values():
            if entry.key.lower() == wanted:
                return entry
        return None

    def list_entries(self) -> list[RegistryEntry]:
        """Return every entry, in document order, as a new list."""
        return list(self.entries.values())


def base_url_of(manifest_url: str) -> str:
    """Return the parent URL of a manifest URL (everything before the last '/')."""
    head, sep, _ = manifest_url.rpartition("/")
    if not sep:
        return manifest_url
    return head


def _string_list(data: dict[str, Any], field_name: str, entry_key: str) -> tuple[str, ...]:
    value = data.get(field_name)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RegistryFormatError(f"Entry '{entry_key}': '{field_name}' must be a list of strings")
    return tuple(value)


def _parse_files(data: Any, entry_key: str) -> dict[str, RegistryFile]:
    if not isinstance(data, dict):
        raise RegistryFormatError(f"Entry '{entry_key}': 'files' must be an object")

    files: dict[str, RegistryFile] = {}
    for file_key, file_data in data.items():
        if not isinstance(file_data, dict) or not isinstance(file_data.get("path"), str):
            raise RegistryFormatError(f"Entry '{entry_key}': file '{file_key}' has no 'path'")
        files[file_key] = RegistryFile(
            path=file_data["path"],
            type=str(file_data.get("type", "")),
        )
    return files


def parse_entry(key: str, data: Any) -> RegistryEntry:
    """Parse one entry of a manifest collection.

    Raises:
        RegistryFormatError: If the entry lacks a name or files
    """
    if not isinstance(data, dict):
        raise RegistryFormatError(f"Entry '{key}' must be an object")
    if not isinstance(data.get("name"), str):
        raise RegistryFormatError(f"Entry '{key}' has no 'name'")
    if "files" not in data:
        raise RegistryFormatError(f"Entry '{key}' has no 'files'")

    entry_id = data.get("id")
    category = data.get("category")
    return RegistryEntry(
        key=key,
        id=entry_id if isinstance(entry_id, str) else None,
        name=data["name"],
        description=str(data.get("description", "")),
        category=category if isinstance(category, str) else None,
        dependencies=_string_list(data, "dependencies", key),
        dev_dependencies=_string_list(data, "devDependencies", key),
        component_dependencies=_string_list(data, "componentDependencies", key),
        files=_parse_files(data["files"], key),
    )


def parse_manifest(kind: AssetKind, document: Any, manifest_url: str) -> RegistryManifest:
    """Parse a registry document of the given kind.

    Template registries are also accepted under a ``components`` root key,
    which is how the upstream template registry is published.

    Raises:
        RegistryFormatError: If the document does not have the expected shape
    """
    if not isinstance(document, dict):
        raise RegistryFormatError(f"{kind.value} registry must be a JSON object")

    collection = document.get(kind.collection_key)
    if collection is None and kind is AssetKind.TEMPLATE:
        collection = document.get(AssetKind.COMPONENT.collection_key)
    if not isinstance(collection, dict):
        raise RegistryFormatError(
            f"{kind.value} registry is missing the '{kind.collection_key}' object"
        )

    entries = {key: parse_entry(key, data) for key, data in collection.items()}
    return RegistryManifest(kind=kind, base_url=base_url_of(manifest_url), entries=entries)
