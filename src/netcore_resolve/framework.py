# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Detect and install the shared .NET Core framework versions an application needs."""

from __future__ import annotations

from pathlib import Path

from .catalog import CatalogProvider
from .constants import (
    DOTNET_SUBDIR,
    FRAMEWORK_DEPENDENCY,
    NUGET_PACKAGES_PARTS,
    RESTORED_FRAMEWORK_PACKAGE,
    SHARED_FRAMEWORK_NAME,
    SHARED_SUBDIR,
)
from .errors import InstallFailureError, ManifestError
from .installers import Installer
from .logging import ConsoleLogger, Logger
from .models import Dependency, InstallSummary, RuntimeConfig
from .project import find_runtime_config
from .versioning import VersionResolver, wildcard_patch


class DotnetFramework:
    """Install the ``Microsoft.NETCore.App`` versions required by a build."""

    def __init__(
        self,
        dep_dir: Path,
        build_dir: Path,
        installer: Installer | None,
        catalog: CatalogProvider,
        logger: Logger | None = None,
        *,
        versions: VersionResolver | None = None,
    ) -> None:
        self.dep_dir = Path(dep_dir)
        self.build_dir = Path(build_dir)
        self._installer = installer
        self._catalog = catalog
        self._logger: Logger = logger or ConsoleLogger()
        self._versions = versions or VersionResolver()

    @property
    def install_root(self) -> Path:
        """Return the directory dotnet dependencies are unpacked into."""

        return self.dep_dir / DOTNET_SUBDIR

    @property
    def framework_dir(self) -> Path:
        return self.install_root / SHARED_SUBDIR / SHARED_FRAMEWORK_NAME

    @property
    def restored_versions_dir(self) -> Path:
        return self.dep_dir.joinpath(*NUGET_PACKAGES_PARTS, RESTORED_FRAMEWORK_PACKAGE)

    def required_versions(self) -> list[str]:
        """Return the framework versions the application needs.

        Published trees declare their framework in the runtime config; other
        trees list one directory per version in the restored NuGet cache.

        Raises:
            AmbiguousRuntimeConfigError: If several runtime configs are present.
            MalformedRuntimeConfigError: If the runtime config cannot be parsed.
            ManifestError: If patches apply but the catalog lists no framework versions.
            NoMatchingVersionError: If no catalog version satisfies a patch constraint.
        """

        runtime_config = find_runtime_config(self.build_dir)
        if runtime_config is not None:
            return self._versions_from_runtime_config(RuntimeConfig.load(runtime_config))
        return self._restored_versions()

    def _versions_from_runtime_config(self, config: RuntimeConfig) -> list[str]:
        version = config.framework_version
        if not version:
            return []
        available = self._catalog.all_dependency_versions(FRAMEWORK_DEPENDENCY)
        if config.apply_patches:
            constraint = wildcard_patch(version)
            if not available:
                raise ManifestError(
                    f"resolving {FRAMEWORK_DEPENDENCY} {constraint} requires a manifest listing "
                    f"{FRAMEWORK_DEPENDENCY} versions, but none are available",
                )
            return [self._versions.find_matching_version(constraint, available)]
        if version not in available:
            self._logger.warn(
                f"{FRAMEWORK_DEPENDENCY} {version} is pinned by the runtime config but not listed in the manifest",
            )
        return [version]

    def _restored_versions(self) -> list[str]:
        restored = self.restored_versions_dir
        if not restored.is_dir():
            return []
        return sorted(entry.name for entry in restored.iterdir() if entry.is_dir())

    def is_installed(self, version: str) -> bool:
        framework_path = self.framework_dir / version
        if framework_path.is_dir():
            self._logger.info(f"Using dotnet framework installed in {framework_path}")
            return True
        return False

    def install(self) -> InstallSummary:
        """Install every required framework version that is not already present.

        Installer failures propagate unchanged; nothing is retried. Without an
        installer, any missing version raises :class:`InstallFailureError`.

        Returns:
            InstallSummary: Required, newly installed, and already present versions.
        """

        summary = InstallSummary(required=self.required_versions())
        if not summary.required:
            return summary
        self._logger.info(f"Required dotnetframework versions: {summary.required}")

        for version in summary.required:
            if self.is_installed(version):
                summary.skipped.append(version)
                continue
            dependency = Dependency(name=FRAMEWORK_DEPENDENCY, version=version)
            if self._installer is None:
                raise InstallFailureError(f"no installer configured for {dependency.name} {dependency.version}")
            self._installer.install_dependency(dependency, self.install_root)
            summary.installed.append(version)
        return summary


__all__ = ["DotnetFramework"]
