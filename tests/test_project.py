# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for locating the application project and its start command."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from netcore_resolve.errors import (
    AmbiguousProjectError,
    AmbiguousRuntimeConfigError,
    DeploymentHintError,
    MalformedDescriptorError,
)
from netcore_resolve.project import Project

MIXED_TREE = [
    "first.csproj",
    "other.txt",
    "dir/second.csproj",
    ".cloudfoundry/other.csproj",
    "dir/other.txt",
    "a/b/first.vbproj",
    "b/c/first.fsproj",
    "c/d/other.txt",
]


def test_proj_file_paths_skips_cloudfoundry_dir(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, [*MIXED_TREE, ".cloudfoundry/0/deep/nested.fsproj"])

    paths = project.proj_file_paths()

    assert set(paths) == {
        build_dir / "first.csproj",
        build_dir / "dir" / "second.csproj",
        build_dir / "a" / "b" / "first.vbproj",
        build_dir / "b" / "c" / "first.fsproj",
    }
    assert all(".cloudfoundry" not in path.parts for path in paths)


def test_is_published_follows_runtime_config(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, ["first.csproj", "c/d/other.txt"])
    assert project.is_published() is False

    make_files(build_dir, ["fred.runtimeconfig.json"])
    assert project.is_published() is True


def test_runtime_config_is_not_searched_recursively(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, ["nested/fred.runtimeconfig.json"])

    assert project.runtime_config_file() is None


def test_multiple_runtime_configs_are_an_error(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, ["fred.runtimeconfig.json", "barney.runtimeconfig.json"])

    with pytest.raises(AmbiguousRuntimeConfigError, match="Multiple .runtimeconfig.json"):
        project.main_path()


def test_is_fsharp(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, ["first.csproj", ".cloudfoundry/0/a/b/something.fsproj"])
    assert project.is_fsharp() is False

    make_files(build_dir, ["a/c/something.fsproj"])
    assert project.is_fsharp() is True


def test_main_path_prefers_runtime_config(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, ["fred.runtimeconfig.json", *MIXED_TREE])

    assert project.main_path() == build_dir / "fred.runtimeconfig.json"


def test_main_path_without_projects_is_none(project: Project) -> None:
    assert project.main_path() is None


def test_main_path_with_single_project(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, ["other.txt", "dir/second.csproj", "dir/other.txt", ".cloudfoundry/x.csproj"])

    assert project.main_path() == build_dir / "dir" / "second.csproj"


def test_main_path_uses_deployment_hint(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, MIXED_TREE)
    (build_dir / ".deployment").write_text("[config]\nproject = ./a/b/first.vbproj", encoding="utf-8")

    assert project.main_path() == build_dir / "a" / "b" / "first.vbproj"


def test_main_path_without_hint_lists_candidates(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, MIXED_TREE)

    with pytest.raises(AmbiguousProjectError) as excinfo:
        project.main_path()

    assert len(excinfo.value.candidates) == 4
    for name in ("first.csproj", "second.csproj", "first.vbproj", "first.fsproj"):
        assert name in str(excinfo.value)


def test_main_path_with_unusable_hint(project: Project, build_dir: Path, make_files) -> None:
    make_files(build_dir, MIXED_TREE)
    (build_dir / ".deployment").write_text("[other]\nproject = a.csproj\n", encoding="utf-8")

    with pytest.raises(DeploymentHintError, match="config"):
        project.main_path()


class TestPublishedStartCommand:
    @pytest.fixture(autouse=True)
    def _runtime_config(self, build_dir: Path, make_files) -> None:
        make_files(build_dir, ["fred.runtimeconfig.json"])

    def test_executable(self, project: Project, build_dir: Path, make_files) -> None:
        make_files(build_dir, ["fred"], mode=0o644)

        assert project.start_command() == "${HOME}/fred"
        mode = (build_dir / "fred").stat().st_mode
        assert mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH) == stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

    def test_dll(self, project: Project, build_dir: Path, make_files) -> None:
        make_files(build_dir, ["fred.dll"])

        assert project.start_command() == "${HOME}/fred.dll"

    def test_nothing_runnable(self, project: Project) -> None:
        assert project.start_command() == ""


class TestUnpublishedStartCommand:
    @pytest.fixture
    def publish_dir(self, dep_dir: Path) -> Path:
        path = dep_dir / "dotnet_publish"
        path.mkdir()
        return path

    def test_executable(self, project: Project, build_dir: Path, publish_dir: Path, make_files) -> None:
        make_files(build_dir, ["subdir/fred.csproj"], content="<Project></Project>")
        make_files(publish_dir, ["fred"], mode=0o755)

        assert project.start_command() == "${DEPS_DIR}/9/dotnet_publish/fred"

    def test_dll(self, project: Project, build_dir: Path, publish_dir: Path, make_files) -> None:
        make_files(build_dir, ["subdir/fred.csproj"], content="<Project></Project>")
        make_files(publish_dir, ["fred.dll"])

        assert project.start_command() == "${DEPS_DIR}/9/dotnet_publish/fred.dll"

    def test_nothing_runnable(self, project: Project, build_dir: Path, publish_dir: Path, make_files) -> None:
        make_files(build_dir, ["subdir/fred.csproj"], content="<Project></Project>")

        assert project.start_command() == ""

    def test_assembly_name_overrides_file_name(
        self,
        project: Project,
        build_dir: Path,
        publish_dir: Path,
        make_files,
    ) -> None:
        csproj = """
<Project Sdk="Microsoft.NET.Sdk.Web">
	<PropertyGroup>
		<AssemblyName>f.red.csproj</AssemblyName>
	</PropertyGroup>
</Project>"""
        make_files(build_dir, ["subdir/fred.csproj"], content=csproj)
        make_files(publish_dir, ["f.red", "fred"], mode=0o755)

        assert project.start_command() == "${DEPS_DIR}/9/dotnet_publish/f.red"

    def test_malformed_project_file_is_an_error(
        self,
        project: Project,
        build_dir: Path,
        publish_dir: Path,
        make_files,
    ) -> None:
        make_files(build_dir, ["subdir/fred.csproj"], content="<Project><PropertyGroup>")
        make_files(publish_dir, ["fred"], mode=0o755)

        with pytest.raises(MalformedDescriptorError):
            project.start_command()

    def test_no_project_found(self, project: Project, publish_dir: Path) -> None:
        assert project.start_command() == ""
