# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings describing the build, dependency and manifest locations."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigError

BUILD_DIR_ENV: Final[str] = "BUILD_DIR"
DEPS_DIR_ENV: Final[str] = "DEPS_DIR"
DEPS_IDX_ENV: Final[str] = "DEPS_IDX"
MANIFEST_ENV: Final[str] = "NETCORE_RESOLVE_MANIFEST"
INSTALLER_ENV: Final[str] = "NETCORE_RESOLVE_INSTALLER"


class ResolverSettings(BaseModel):
    """Locations a single staging run operates on."""

    model_config = ConfigDict(validate_assignment=True)

    build_dir: Path
    deps_dir: Path
    deps_idx: str = "0"
    manifest: Path | None = None
    installer_command: str | None = None
    use_emoji: bool = True
    use_color: bool | None = Field(default=None)

    @field_validator("deps_idx")
    @classmethod
    def _validate_deps_idx(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned or "/" in cleaned or cleaned in {".", ".."}:
            raise ValueError("deps index must be a single path segment")
        return cleaned

    @property
    def dep_dir(self) -> Path:
        """Return the dependency directory owned by this buildpack."""

        return self.deps_dir / self.deps_idx

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "ResolverSettings":
        """Build settings from buildpack environment variables.

        Explicit ``overrides`` that are not ``None`` take precedence.

        Raises:
            ConfigError: If a required location is neither given nor set in ``env``.
        """

        source = os.environ if env is None else env
        values: dict[str, object] = {}
        for field_name, variable in (
            ("build_dir", BUILD_DIR_ENV),
            ("deps_dir", DEPS_DIR_ENV),
            ("deps_idx", DEPS_IDX_ENV),
            ("manifest", MANIFEST_ENV),
            ("installer_command", INSTALLER_ENV),
        ):
            if source.get(variable):
                values[field_name] = source[variable]
        values.update({key: value for key, value in overrides.items() if value is not None})

        missing = [name for name in ("build_dir", "deps_dir") if name not in values]
        if missing:
            raise ConfigError(
                f"missing required setting(s) {', '.join(missing)}; "
                f"set {BUILD_DIR_ENV}/{DEPS_DIR_ENV} or pass them explicitly",
            )
        try:
            return cls.model_validate(values)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc


__all__ = [
    "BUILD_DIR_ENV",
    "DEPS_DIR_ENV",
    "DEPS_IDX_ENV",
    "INSTALLER_ENV",
    "MANIFEST_ENV",
    "ResolverSettings",
]
