# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Installer capabilities that fetch and unpack dependencies."""

from __future__ import annotations

import shlex
import shutil

# Bandit: installer commands are passed as argument lists without a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from .errors import InstallFailureError
from .models import Dependency


class Installer(Protocol):
    """Capability that installs one dependency into a directory."""

    def install_dependency(self, dependency: Dependency, out_dir: Path) -> None:
        """Install ``dependency`` beneath ``out_dir``.

        Args:
            dependency: Name and exact version to install.
            out_dir: Destination root; created when absent.
        """

        raise NotImplementedError("Installer.install_dependency must be implemented")


def run_command(args: Sequence[str]) -> subprocess.CompletedProcess[str]:
    """Run an installer command, capturing its output.

    Raises:
        FileNotFoundError: If the executable is not on ``PATH``.
        subprocess.CalledProcessError: If the command exits non-zero.
    """

    head, *rest = args
    executable = head if Path(head).is_absolute() else shutil.which(head)
    if executable is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    completed = subprocess.run(  # nosec B603
        [executable, *rest],
        check=False,
        capture_output=True,
        text=True,
    )
    completed.check_returncode()
    return completed


class CommandInstaller:
    """Delegate installation to an external command.

    The command template is split like a shell line and the placeholders
    ``{name}``, ``{version}`` and ``{out_dir}`` are substituted per argument,
    e.g. ``buildpack-install {name} {version} {out_dir}``.
    """

    def __init__(self, template: str | Sequence[str]) -> None:
        parts = shlex.split(template) if isinstance(template, str) else list(template)
        if not parts:
            raise ValueError("installer command template must not be empty")
        self.template = tuple(parts)

    def command_for(self, dependency: Dependency, out_dir: Path) -> list[str]:
        values = {"name": dependency.name, "version": dependency.version, "out_dir": str(out_dir)}
        return [part.format(**values) for part in self.template]

    def install_dependency(self, dependency: Dependency, out_dir: Path) -> None:
        out_dir.mkdir(parents=True, exist_ok=True)
        command = self.command_for(dependency, out_dir)
        label = f"installing {dependency.name} {dependency.version}"
        try:
            run_command(command)
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip() or "<no stderr>"
            raise InstallFailureError(
                f"{label}: '{command[0]}' exited with status {exc.returncode}: {stderr}",
            ) from exc
        except OSError as exc:
            raise InstallFailureError(f"{label}: {exc}") from exc


__all__ = ["CommandInstaller", "Installer", "run_command"]
