# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models exchanged between the resolution components."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import MalformedRuntimeConfigError


class FrameworkReference(BaseModel):
    """Framework requirement declared by a runtime config."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    version: str = ""


class RuntimeOptions(BaseModel):
    """``runtimeOptions`` block of a ``*.runtimeconfig.json`` file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    framework: FrameworkReference = Field(default_factory=FrameworkReference)
    apply_patches: bool | None = Field(default=None, alias="applyPatches")


class RuntimeConfig(BaseModel):
    """Subset of a runtime config file the engine relies on."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    runtime_options: RuntimeOptions = Field(default_factory=RuntimeOptions, alias="runtimeOptions")

    @property
    def framework_name(self) -> str:
        return self.runtime_options.framework.name

    @property
    def framework_version(self) -> str:
        return self.runtime_options.framework.version

    @property
    def apply_patches(self) -> bool:
        """Return whether patch releases may replace the declared version.

        An absent ``applyPatches`` key means patches apply.
        """

        return self.runtime_options.apply_patches is not False

    @classmethod
    def load(cls, path: Path) -> "RuntimeConfig":
        """Parse the runtime config stored at ``path``.

        Raises:
            MalformedRuntimeConfigError: If the file is not JSON of the expected shape.
        """

        try:
            return cls.model_validate_json(path.read_bytes())
        except ValidationError as exc:
            raise MalformedRuntimeConfigError(path, str(exc)) from exc


class Dependency(BaseModel):
    """Named, versioned dependency handed to an installer."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str


class InstallSummary(BaseModel):
    """Outcome of a framework installation pass."""

    required: list[str] = Field(default_factory=list)
    installed: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


__all__ = [
    "Dependency",
    "FrameworkReference",
    "InstallSummary",
    "RuntimeConfig",
    "RuntimeOptions",
]
