# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Implementation of the project inspection commands."""

from __future__ import annotations

from pathlib import Path

import typer

from ..catalog import CatalogProvider, ManifestCatalog, StaticCatalog
from ..config import ResolverSettings
from ..framework import DotnetFramework
from ..installers import CommandInstaller, Installer
from ..logging import ConsoleLogger
from ..project import Project
from .shared import BUILD_DIR_OPTION, DEPS_DIR_OPTION, DEPS_IDX_OPTION, EMOJI_OPTION, cli_errors, load_settings

MANIFEST_OPTION = typer.Option(None, "--manifest", "-m", help="Buildpack manifest.yml listing installable versions.")


def build_project(settings: ResolverSettings) -> Project:
    return Project(settings.build_dir, settings.dep_dir, settings.deps_idx)


def build_catalog(settings: ResolverSettings) -> CatalogProvider:
    if settings.manifest is None:
        return StaticCatalog({})
    return ManifestCatalog.load(settings.manifest)


def build_framework(settings: ResolverSettings, installer: Installer | None = None) -> DotnetFramework:
    return DotnetFramework(
        settings.dep_dir,
        settings.build_dir,
        installer,
        build_catalog(settings),
        ConsoleLogger(use_emoji=settings.use_emoji, use_color=settings.use_color),
    )


def main_path_command(
    build_dir: Path | None = BUILD_DIR_OPTION,
    deps_dir: Path | None = DEPS_DIR_OPTION,
    deps_idx: str | None = DEPS_IDX_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the runtime config or project file that identifies the application."""
    settings = load_settings(build_dir=build_dir, deps_dir=deps_dir, deps_idx=deps_idx, use_emoji=emoji)
    with cli_errors(use_emoji=emoji):
        main_path = build_project(settings).main_path()
    typer.echo("" if main_path is None else str(main_path))


def start_command_command(
    build_dir: Path | None = BUILD_DIR_OPTION,
    deps_dir: Path | None = DEPS_DIR_OPTION,
    deps_idx: str | None = DEPS_IDX_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the start command for the built application (empty when none yet)."""
    settings = load_settings(build_dir=build_dir, deps_dir=deps_dir, deps_idx=deps_idx, use_emoji=emoji)
    with cli_errors(use_emoji=emoji):
        command = build_project(settings).start_command()
    typer.echo(command)


def frameworks_command(
    build_dir: Path | None = BUILD_DIR_OPTION,
    deps_dir: Path | None = DEPS_DIR_OPTION,
    deps_idx: str | None = DEPS_IDX_OPTION,
    manifest: Path | None = MANIFEST_OPTION,
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Print the framework versions the application requires, one per line."""
    settings = load_settings(
        build_dir=build_dir,
        deps_dir=deps_dir,
        deps_idx=deps_idx,
        use_emoji=emoji,
        manifest=manifest,
    )
    with cli_errors(use_emoji=emoji):
        versions = build_framework(settings).required_versions()
    for version in versions:
        typer.echo(version)


def install_command(
    build_dir: Path | None = BUILD_DIR_OPTION,
    deps_dir: Path | None = DEPS_DIR_OPTION,
    deps_idx: str | None = DEPS_IDX_OPTION,
    manifest: Path | None = MANIFEST_OPTION,
    installer: str | None = typer.Option(
        None,
        "--installer",
        help="Command template run per missing version, e.g. 'fetch {name} {version} {out_dir}'.",
    ),
    emoji: bool = EMOJI_OPTION,
) -> None:
    """Install the required framework versions that are not already present."""
    settings = load_settings(
        build_dir=build_dir,
        deps_dir=deps_dir,
        deps_idx=deps_idx,
        use_emoji=emoji,
        manifest=manifest,
        installer_command=installer,
    )
    logger = ConsoleLogger(use_emoji=emoji, use_color=settings.use_color)
    if not settings.installer_command:
        logger.fail("No installer configured; pass --installer or set NETCORE_RESOLVE_INSTALLER.")
        raise typer.Exit(code=1)

    with cli_errors(use_emoji=emoji):
        summary = build_framework(settings, CommandInstaller(settings.installer_command)).install()

    if not summary.required:
        logger.info("No dotnet framework required.")
    else:
        logger.ok(
            f"Framework installation complete ({len(summary.installed)} installed, "
            f"{len(summary.skipped)} already present).",
        )


__all__ = [
    "build_catalog",
    "build_framework",
    "build_project",
    "frameworks_command",
    "install_command",
    "main_path_command",
    "start_command_command",
]
