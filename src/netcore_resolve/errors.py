# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while resolving the application and its runtimes."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class ResolutionError(RuntimeError):
    """Base class for failures surfaced by the resolution engine."""


class AmbiguousRuntimeConfigError(ResolutionError):
    """Raised when more than one runtime config file sits at the build root."""

    def __init__(self, paths: Sequence[Path]) -> None:
        self.paths = tuple(paths)
        super().__init__(
            f"Multiple .runtimeconfig.json files present: {[str(path) for path in self.paths]}",
        )


class AmbiguousProjectError(ResolutionError):
    """Raised when several project files exist and no deployment hint picks one."""

    def __init__(self, candidates: Sequence[Path]) -> None:
        self.candidates = tuple(sorted(candidates))
        super().__init__(
            f"Multiple paths: {[str(path) for path in self.candidates]} contain a project file, "
            "but no .deployment file was used",
        )


class NoMatchingVersionError(ResolutionError):
    """Raised when a version constraint has no candidate in the catalog."""

    def __init__(self, constraint: str, catalog_size: int) -> None:
        self.constraint = constraint
        self.catalog_size = catalog_size
        super().__init__(
            f"no match found for {constraint} in {catalog_size} available versions",
        )


class MalformedDescriptorError(ResolutionError):
    """Raised when a project file cannot be parsed for its metadata."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to parse project file {path}: {reason}")


class MalformedRuntimeConfigError(ResolutionError):
    """Raised when a runtime config file is not valid JSON of the expected shape."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unable to parse runtime config {path}: {reason}")


class DeploymentHintError(ResolutionError):
    """Raised when a ``.deployment`` file exists but cannot name a project."""


class InstallFailureError(ResolutionError):
    """Raised by installer capabilities when a dependency cannot be installed."""


class ManifestError(ResolutionError):
    """Raised when a dependency manifest cannot be loaded."""


class ConfigError(ResolutionError):
    """Raised when resolver settings are incomplete or invalid."""


__all__ = [
    "AmbiguousProjectError",
    "AmbiguousRuntimeConfigError",
    "ConfigError",
    "DeploymentHintError",
    "InstallFailureError",
    "MalformedDescriptorError",
    "MalformedRuntimeConfigError",
    "ManifestError",
    "NoMatchingVersionError",
    "ResolutionError",
]
