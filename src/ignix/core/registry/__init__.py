from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import (
    AssetKind,
    RegistryEntry,
    RegistryFile,
    RegistryManifest,
    parse_manifest,
)

__all__ = [
    "AssetKind",
    "RegistryClient",
    "RegistryEntry",
    "RegistryFile",
    "RegistryManifest",
    "parse_manifest",
]
