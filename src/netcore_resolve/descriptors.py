# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Readers for project files and the ``.deployment`` hint."""

from __future__ import annotations

import configparser
from pathlib import Path
from xml.etree import ElementTree

from .constants import DEPLOYMENT_PROJECT_KEY, DEPLOYMENT_SECTION
from .errors import DeploymentHintError, MalformedDescriptorError


def _local_name(tag: str) -> str:
    # MSBuild files may declare a default namespace: ``{ns}PropertyGroup``.
    return tag.rsplit("}", 1)[-1]


def read_assembly_name(path: Path) -> str:
    """Return the ``AssemblyName`` declared by the project file at ``path``.

    Only ``Project/PropertyGroup/AssemblyName`` is inspected; when several
    property groups declare one, the last declaration wins, as MSBuild
    evaluates them in order.

    Args:
        path: Project file (``.csproj``, ``.vbproj`` or ``.fsproj``).

    Returns:
        str: Declared assembly name, or ``""`` when the project has none.

    Raises:
        MalformedDescriptorError: If the file is not well-formed XML.
    """

    content = path.read_bytes()
    if not content.strip():
        return ""
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        raise MalformedDescriptorError(path, str(exc)) from exc

    assembly_name = ""
    for group in root:
        if _local_name(group.tag) != "PropertyGroup":
            continue
        for prop in group:
            if _local_name(prop.tag) == "AssemblyName" and prop.text and prop.text.strip():
                assembly_name = prop.text.strip()
    return assembly_name


def read_deployment_project(path: Path) -> str:
    """Return the relative project path named by the deployment hint at ``path``.

    Raises:
        DeploymentHintError: If the file cannot be parsed or lacks ``[config] project``.
    """

    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read_string(path.read_text(encoding="utf-8"), source=str(path))
    except configparser.Error as exc:
        raise DeploymentHintError(f"Unable to parse {path}: {exc}") from exc

    if not parser.has_section(DEPLOYMENT_SECTION):
        raise DeploymentHintError(f"section '{DEPLOYMENT_SECTION}' does not exist in {path}")
    project = parser.get(DEPLOYMENT_SECTION, DEPLOYMENT_PROJECT_KEY, fallback=None)
    if project is None:
        raise DeploymentHintError(
            f"key '{DEPLOYMENT_PROJECT_KEY}' not found in section '{DEPLOYMENT_SECTION}' of {path}",
        )
    return project.strip()


__all__ = ["read_assembly_name", "read_deployment_project"]
