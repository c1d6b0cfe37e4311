# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from netcore_resolve.models import Dependency
from netcore_resolve.project import Project

DEPS_IDX = "9"


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    path = tmp_path / "build"
    path.mkdir()
    return path


@pytest.fixture
def deps_dir(tmp_path: Path) -> Path:
    path = tmp_path / "deps"
    (path / DEPS_IDX).mkdir(parents=True)
    return path


@pytest.fixture
def dep_dir(deps_dir: Path) -> Path:
    return deps_dir / DEPS_IDX


@pytest.fixture
def project(build_dir: Path, dep_dir: Path) -> Project:
    return Project(build_dir, dep_dir, DEPS_IDX)


def write_files(root: Path, names: Iterable[str], content: str = "", mode: int = 0o644) -> None:
    """Create ``names`` beneath ``root`` with ``content`` and permission ``mode``."""

    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        path.chmod(mode)


class RecordingInstaller:
    """Installer double that records calls and creates the framework directory."""

    def __init__(self, *, create_shared_dir: bool = True) -> None:
        self.calls: list[tuple[Dependency, Path]] = []
        self.create_shared_dir = create_shared_dir

    def install_dependency(self, dependency: Dependency, out_dir: Path) -> None:
        self.calls.append((dependency, out_dir))
        if self.create_shared_dir:
            (out_dir / "shared" / "Microsoft.NETCore.App" / dependency.version).mkdir(parents=True)


class RecordingLogger:
    """Logger double capturing messages per level."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture
def deps_idx() -> str:
    return DEPS_IDX


@pytest.fixture
def make_files():
    return write_files


@pytest.fixture
def installer() -> RecordingInstaller:
    return RecordingInstaller()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()
