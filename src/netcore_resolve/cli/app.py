# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .project import frameworks_command, install_command, main_path_command, start_command_command

app = typer.Typer(
    help="Resolve the .NET Core application, its runtimes and start command.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("main-path")(main_path_command)
app.command("start-command")(start_command_command)
app.command("frameworks")(frameworks_command)
app.command("install")(install_command)

__all__ = ["app"]
