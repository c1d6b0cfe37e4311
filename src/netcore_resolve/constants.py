# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem names and tokens shared by the resolution engine."""

from __future__ import annotations

from typing import Final

PROJECT_FILE_SUFFIXES: Final[tuple[str, ...]] = (".csproj", ".vbproj", ".fsproj")
FSHARP_PROJECT_SUFFIX: Final[str] = ".fsproj"

# Engine bookkeeping lives here; never treated as application source.
RESERVED_DIR_NAME: Final[str] = ".cloudfoundry"

RUNTIME_CONFIG_SUFFIX: Final[str] = ".runtimeconfig.json"
RUNTIME_CONFIG_GLOB: Final[str] = f"*{RUNTIME_CONFIG_SUFFIX}"
LIBRARY_SUFFIX: Final[str] = ".dll"

DEPLOYMENT_FILENAME: Final[str] = ".deployment"
DEPLOYMENT_SECTION: Final[str] = "config"
DEPLOYMENT_PROJECT_KEY: Final[str] = "project"

PUBLISH_SUBDIR: Final[str] = "dotnet_publish"
NUGET_PACKAGES_PARTS: Final[tuple[str, ...]] = (".nuget", "packages")
RESTORED_FRAMEWORK_PACKAGE: Final[str] = "microsoft.netcore.app"

DOTNET_SUBDIR: Final[str] = "dotnet"
SHARED_SUBDIR: Final[str] = "shared"
SHARED_FRAMEWORK_NAME: Final[str] = "Microsoft.NETCore.App"

FRAMEWORK_DEPENDENCY: Final[str] = "dotnet-framework"

HOME_TOKEN: Final[str] = "${HOME}"
DEPS_DIR_TOKEN: Final[str] = "${DEPS_DIR}"

WILDCARD_MARKERS: Final[frozenset[str]] = frozenset({"x", "X", "*"})
WILDCARD: Final[str] = "x"

__all__ = [
    "DEPLOYMENT_FILENAME",
    "DEPLOYMENT_PROJECT_KEY",
    "DEPLOYMENT_SECTION",
    "DEPS_DIR_TOKEN",
    "DOTNET_SUBDIR",
    "FRAMEWORK_DEPENDENCY",
    "FSHARP_PROJECT_SUFFIX",
    "HOME_TOKEN",
    "LIBRARY_SUFFIX",
    "NUGET_PACKAGES_PARTS",
    "PROJECT_FILE_SUFFIXES",
    "PUBLISH_SUBDIR",
    "RESERVED_DIR_NAME",
    "RESTORED_FRAMEWORK_PACKAGE",
    "RUNTIME_CONFIG_GLOB",
    "RUNTIME_CONFIG_SUFFIX",
    "SHARED_FRAMEWORK_NAME",
    "SHARED_SUBDIR",
    "WILDCARD",
    "WILDCARD_MARKERS",
]
