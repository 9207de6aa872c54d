"""Shared pipeline steps for asset installers."""

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from ignix.core.dependency_installer import DependencyInstaller
from ignix.core.errors import AssetNotFoundError
from ignix.core.http.abc import HttpClient
from ignix.core.installers.writer import write_if_absent
from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import AssetKind, RegistryEntry, RegistryFile
from ignix.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


def merge_packages(*groups: Iterable[str]) -> list[str]:
    """Concatenate package lists, dropping duplicates but keeping first-seen order."""
    merged: dict[str, None] = {}
    for group in groups:
        for package in group:
            merged.setdefault(package, None)
    return list(merged)


def file_url(base_url: str, file: RegistryFile) -> str:
    """URL of a registry file: the manifest's parent URL joined with the file path."""
    return f"{base_url.rstrip('/')}/{file.path.lstrip('/')}"


def file_basename(file: RegistryFile) -> str:
    return PurePosixPath(file.path).name


class AssetInstaller:
    """Base for installers that turn one registry entry into files on disk.

    Subclasses set ``kind`` and implement ``install``. Nothing here catches
    errors: a failed download, package install or write aborts the asset and
    propagates to the caller.
    """

    kind: AssetKind

    def __init__(
        self,
        registry: RegistryClient,
        http: HttpClient,
        dependencies: DependencyInstaller,
        feedback: UserFeedback,
    ) -> None:
        self._registry = registry
        self._http = http
        self._dependencies = dependencies
        self._feedback = feedback

    def _resolve(self, identifier: str) -> RegistryEntry:
        entry = self._registry.get_entry(self.kind, identifier)
        if entry is None:
            raise AssetNotFoundError(self.kind.value, identifier)
        return entry

    def _install_packages(self, entry: RegistryEntry) -> list[str]:
        """Install the entry's own runtime and dev packages; return their names."""
        self._dependencies.install(list(entry.dependencies), is_dev=False)
        self._dependencies.install(list(entry.dev_dependencies), is_dev=True)
        return merge_packages(entry.dependencies, entry.dev_dependencies)

    def _download_files(self, entry: RegistryEntry, target_dir: Path) -> int:
        """Fetch every file of entry and write it flat into target_dir.

        Files are fetched and written one at a time, in declaration order.
        Returns the number of files actually written (existing files are skipped).
        """
        base_url = self._registry.fetch_manifest(self.kind).base_url
        written = 0
        for file_key, file in entry.files.items():
            url = file_url(base_url, file)
            logger.debug("Downloading %s file %r from %s", entry.identifier, file_key, url)
            content = self._http.get_text(url)
            if write_if_absent(target_dir / file_basename(file), content, self._feedback):
                written += 1
        return written
