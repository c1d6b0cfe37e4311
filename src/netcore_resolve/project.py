# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the application project in a build tree and derive its start command."""

from __future__ import annotations

import os
import re
import stat
from collections.abc import Iterator
from pathlib import Path, PurePosixPath
from typing import Final

from .constants import (
    DEPLOYMENT_FILENAME,
    DEPS_DIR_TOKEN,
    FSHARP_PROJECT_SUFFIX,
    HOME_TOKEN,
    LIBRARY_SUFFIX,
    PROJECT_FILE_SUFFIXES,
    PUBLISH_SUBDIR,
    RESERVED_DIR_NAME,
    RUNTIME_CONFIG_GLOB,
    RUNTIME_CONFIG_SUFFIX,
)
from .descriptors import read_assembly_name, read_deployment_project
from .errors import AmbiguousProjectError, AmbiguousRuntimeConfigError

_PROJECT_SUFFIX_RE: Final[re.Pattern[str]] = re.compile(r"\.([a-z]+proj)$")
_EXECUTABLE_BITS: Final[int] = stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH


def find_runtime_config(build_dir: Path) -> Path | None:
    """Return the single ``*.runtimeconfig.json`` at the root of ``build_dir``.

    Args:
        build_dir: Application build root; subdirectories are not searched.

    Returns:
        Path | None: The runtime config, or ``None`` when the tree has none.

    Raises:
        AmbiguousRuntimeConfigError: If more than one runtime config is present.
    """

    matches = sorted(path for path in build_dir.glob(RUNTIME_CONFIG_GLOB) if path.is_file())
    if len(matches) > 1:
        raise AmbiguousRuntimeConfigError(matches)
    return matches[0] if matches else None


def _walk_project_files(build_dir: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(build_dir):
        dirnames[:] = [name for name in dirnames if name != RESERVED_DIR_NAME]
        current = Path(dirpath)
        for filename in filenames:
            if filename.endswith(PROJECT_FILE_SUFFIXES):
                yield current / filename


class Project:
    """Application tree being staged, plus the dependency directory it builds into."""

    def __init__(self, build_dir: Path, dep_dir: Path, deps_idx: str) -> None:
        self.build_dir = Path(build_dir)
        self.dep_dir = Path(dep_dir)
        self.deps_idx = str(deps_idx)

    def proj_file_paths(self) -> list[Path]:
        """Return every project file under the build root, sorted.

        Anything below a ``.cloudfoundry`` directory is skipped.
        """

        return sorted(_walk_project_files(self.build_dir))

    def is_fsharp(self) -> bool:
        return any(path.name.endswith(FSHARP_PROJECT_SUFFIX) for path in self.proj_file_paths())

    def runtime_config_file(self) -> Path | None:
        return find_runtime_config(self.build_dir)

    def is_published(self) -> bool:
        """Return whether the tree already holds published output."""

        return self.runtime_config_file() is not None

    def main_path(self) -> Path | None:
        """Return the file that identifies the application.

        A runtime config wins over project files. With several project files
        the ``.deployment`` hint decides.

        Returns:
            Path | None: The main runtime config or project file, or ``None``
            when the tree contains neither.

        Raises:
            AmbiguousRuntimeConfigError: If several runtime configs are present.
            AmbiguousProjectError: If several project files exist without a hint.
            DeploymentHintError: If the hint exists but names no project.
        """

        runtime_config = self.runtime_config_file()
        if runtime_config is not None:
            return runtime_config

        paths = self.proj_file_paths()
        if not paths:
            return None
        if len(paths) == 1:
            return paths[0]

        hint = self.build_dir / DEPLOYMENT_FILENAME
        if not hint.is_file():
            raise AmbiguousProjectError(paths)
        project = read_deployment_project(hint)
        return self.build_dir / project.strip(".").lstrip("/\\")

    def assembly_basename(self, main_path: Path) -> str:
        """Return the file name, without suffix, that the build emits for ``main_path``."""

        name = main_path.name
        if name.endswith(RUNTIME_CONFIG_SUFFIX):
            return name[: -len(RUNTIME_CONFIG_SUFFIX)]
        if _PROJECT_SUFFIX_RE.search(name):
            assembly_name = read_assembly_name(main_path)
            if assembly_name:
                return _PROJECT_SUFFIX_RE.sub("", assembly_name)
            return _PROJECT_SUFFIX_RE.sub("", name)
        return name

    def start_command(self) -> str:
        """Return the command that launches the built application.

        Returns:
            str: ``${HOME}/<name>`` for published trees, otherwise
            ``${DEPS_DIR}/<idx>/dotnet_publish/<name>``; ``<name>`` is the
            executable when present, else the ``.dll``. Empty when nothing
            runnable exists yet.
        """

        main_path = self.main_path()
        if main_path is None:
            return ""
        return self._published_start_command(self.assembly_basename(main_path))

    def _published_start_command(self, basename: str) -> str:
        if self.is_published():
            published_dir = self.build_dir
            runtime_dir = PurePosixPath(HOME_TOKEN)
        else:
            published_dir = self.dep_dir / PUBLISH_SUBDIR
            runtime_dir = PurePosixPath(DEPS_DIR_TOKEN, self.deps_idx, PUBLISH_SUBDIR)

        executable = published_dir / basename
        if executable.is_file():
            # Archive extraction can drop the execute bit.
            executable.chmod(executable.stat().st_mode | _EXECUTABLE_BITS)
            return str(runtime_dir / basename)

        library = f"{basename}{LIBRARY_SUFFIX}"
        if (published_dir / library).is_file():
            return str(runtime_dir / library)
        return ""


__all__ = ["Project", "find_runtime_config"]
