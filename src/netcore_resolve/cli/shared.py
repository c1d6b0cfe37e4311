# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Options and error handling shared by CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer

from ..config import ResolverSettings
from ..errors import ResolutionError
from ..logging import fail

BUILD_DIR_OPTION = typer.Option(None, "--build-dir", "-b", help="Application build root (defaults to $BUILD_DIR).")
DEPS_DIR_OPTION = typer.Option(None, "--deps-dir", "-d", help="Dependency staging root (defaults to $DEPS_DIR).")
DEPS_IDX_OPTION = typer.Option(None, "--deps-idx", "-i", help="Index of this buildpack's dependency directory.")
EMOJI_OPTION = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in CLI output.")


def load_settings(
    *,
    build_dir: Path | None,
    deps_dir: Path | None,
    deps_idx: str | None,
    use_emoji: bool,
    **extra: object,
) -> ResolverSettings:
    """Merge CLI options over the buildpack environment."""

    with cli_errors(use_emoji=use_emoji):
        return ResolverSettings.from_env(
            build_dir=build_dir,
            deps_dir=deps_dir,
            deps_idx=deps_idx,
            use_emoji=use_emoji,
            **extra,
        )


@contextmanager
def cli_errors(*, use_emoji: bool) -> Iterator[None]:
    """Report resolution failures and exit with status ``1``."""

    try:
        yield
    except ResolutionError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc


__all__ = [
    "BUILD_DIR_OPTION",
    "DEPS_DIR_OPTION",
    "DEPS_IDX_OPTION",
    "EMOJI_OPTION",
    "cli_errors",
    "load_settings",
]
