# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for project file and deployment hint readers."""

from __future__ import annotations

from pathlib import Path

import pytest

from netcore_resolve.descriptors import read_assembly_name, read_deployment_project
from netcore_resolve.errors import DeploymentHintError, MalformedDescriptorError


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_assembly_name_absent(tmp_path: Path) -> None:
    path = _write(tmp_path / "app.csproj", "<Project><PropertyGroup><TargetFramework>net6.0</TargetFramework></PropertyGroup></Project>")

    assert read_assembly_name(path) == ""


def test_assembly_name_ignores_namespace_and_whitespace(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "legacy.vbproj",
        """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <AssemblyName>
      Legacy.App
    </AssemblyName>
  </PropertyGroup>
</Project>""",
    )

    assert read_assembly_name(path) == "Legacy.App"


def test_last_property_group_declaration_wins(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "app.fsproj",
        "<Project>"
        "<PropertyGroup><AssemblyName>first</AssemblyName></PropertyGroup>"
        "<ItemGroup><AssemblyName>ignored</AssemblyName></ItemGroup>"
        "<PropertyGroup><AssemblyName>second</AssemblyName></PropertyGroup>"
        "</Project>",
    )

    assert read_assembly_name(path) == "second"


def test_empty_project_file_has_no_assembly_name(tmp_path: Path) -> None:
    assert read_assembly_name(_write(tmp_path / "empty.csproj", "")) == ""


def test_malformed_project_file(tmp_path: Path) -> None:
    path = _write(tmp_path / "broken.csproj", "<Project><AssemblyName>")

    with pytest.raises(MalformedDescriptorError, match="broken.csproj"):
        read_assembly_name(path)


def test_read_deployment_project(tmp_path: Path) -> None:
    path = _write(tmp_path / ".deployment", "[config]\nproject = ./src/App/App.csproj\n")

    assert read_deployment_project(path) == "./src/App/App.csproj"


@pytest.mark.parametrize(
    "content",
    [
        "project = a.csproj\n",
        "[config]\nother = value\n",
        "[deploy]\nproject = a.csproj\n",
    ],
)
def test_unusable_deployment_hint(tmp_path: Path, content: str) -> None:
    with pytest.raises(DeploymentHintError):
        read_deployment_project(_write(tmp_path / ".deployment", content))
