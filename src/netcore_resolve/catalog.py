# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalogs listing the dependency versions a buildpack can install."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml

from .errors import ManifestError
from .versioning import VersionResolver


class CatalogProvider(Protocol):
    """Source of available versions per dependency name."""

    def all_dependency_versions(self, name: str) -> list[str]:
        """Return every version of ``name`` the catalog can supply.

        Args:
            name: Dependency name such as ``dotnet-framework``.

        Returns:
            list[str]: Known versions; empty when ``name`` is unknown.
        """

        raise NotImplementedError("CatalogProvider.all_dependency_versions must be implemented")


class StaticCatalog:
    """In-memory catalog built from a mapping of name to versions."""

    def __init__(self, versions: Mapping[str, Iterable[str]]) -> None:
        self._versions = {name: list(dict.fromkeys(entries)) for name, entries in versions.items()}

    def all_dependency_versions(self, name: str) -> list[str]:
        return list(self._versions.get(name, ()))


class ManifestCatalog(StaticCatalog):
    """Catalog backed by a buildpack ``manifest.yml``."""

    @classmethod
    def load(cls, path: Path) -> "ManifestCatalog":
        """Read the ``dependencies`` list from the manifest at ``path``.

        Raises:
            ManifestError: If the file is missing, not YAML, or mis-shaped.
        """

        try:
            # BaseLoader keeps scalars as strings so "2.10" never becomes 2.1.
            document: Any = yaml.load(path.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
        except FileNotFoundError as exc:
            raise ManifestError(f"manifest not found: {path}") from exc
        except yaml.YAMLError as exc:
            raise ManifestError(f"manifest {path} is not valid YAML: {exc}") from exc

        if not isinstance(document, dict):
            raise ManifestError(f"manifest {path} must be a mapping")
        entries = document.get("dependencies") or []
        if not isinstance(entries, list):
            raise ManifestError(f"manifest {path}: 'dependencies' must be a list")

        versions: dict[str, list[str]] = {}
        for entry in entries:
            if not isinstance(entry, dict) or "name" not in entry or "version" not in entry:
                raise ManifestError(f"manifest {path}: dependency entries need 'name' and 'version'")
            versions.setdefault(str(entry["name"]), []).append(str(entry["version"]))
        return cls(versions)


def first_of_version_line(
    catalog: CatalogProvider,
    dependency: str,
    line: str,
    *,
    resolver: VersionResolver | None = None,
) -> str:
    """Return the newest ``dependency`` release on version ``line`` (e.g. ``2.1.x``)."""

    versions = catalog.all_dependency_versions(dependency)
    return (resolver or VersionResolver()).find_matching_versions(line, versions)[0]


__all__ = ["CatalogProvider", "ManifestCatalog", "StaticCatalog", "first_of_version_line"]
