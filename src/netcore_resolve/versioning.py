# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for solving wildcard version constraints against a catalog."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from .constants import WILDCARD, WILDCARD_MARKERS
from .errors import NoMatchingVersionError

_PATCH_INDEX: Final[int] = 2
_SEGMENT_PATTERN = re.compile(r"^(\d*)(.*)$")
_CHUNK_PATTERN = re.compile(r"\d+|\D+")

_ChunkKey = tuple[int, str]
_SegmentKey = tuple[int, bool, tuple[_ChunkKey, ...]]


def _segments(version: str) -> list[str]:
    return [segment.strip() for segment in version.strip().split(".")]


def _segment_matches(expected: str, actual: str) -> bool:
    if expected in WILDCARD_MARKERS:
        return True
    if expected.isdigit() and actual.isdigit():
        return int(expected) == int(actual)
    return expected == actual


def _chunk_key(chunk: str) -> _ChunkKey:
    return (int(chunk), "") if chunk.isdigit() else (-1, chunk)


def _segment_key(segment: str) -> _SegmentKey:
    match = _SEGMENT_PATTERN.match(segment)
    number, suffix = (match.group(1), match.group(2)) if match else ("", segment)
    # A bare release segment outranks the same number carrying a pre-release suffix.
    return (
        int(number) if number else -1,
        not suffix,
        tuple(_chunk_key(chunk) for chunk in _CHUNK_PATTERN.findall(suffix)),
    )


def _precedence(version: str) -> tuple[_SegmentKey, ...]:
    """Return a sort key ordering ``version`` by semantic precedence.

    Every dot-separated segment compares by its leading number first, so
    ``2.1.10-preview1-final`` outranks ``2.1.3`` whatever the suffix spelling.
    For equal numbers a release ranks above any pre-release suffix, and
    suffixes compare with their embedded numbers read numerically
    (``preview10`` above ``preview9``).
    """

    return tuple(_segment_key(segment) for segment in _segments(version))


class VersionResolver:
    """Solve and compare dotted version strings using standardized semantics."""

    def matches(self, constraint: str, candidate: str) -> bool:
        """Return whether ``candidate`` satisfies ``constraint``.

        Segments missing from ``constraint`` behave as wildcards, while segments
        missing from ``candidate`` are read as ``0``.
        """

        expected = _segments(constraint)
        actual = _segments(candidate)
        if len(actual) < len(expected):
            actual = [*actual, *(["0"] * (len(expected) - len(actual)))]
        return all(_segment_matches(want, have) for want, have in zip(expected, actual))

    def find_matching_versions(self, constraint: str, versions: Iterable[str]) -> list[str]:
        """Return every version satisfying ``constraint``, highest first.

        Args:
            constraint: Dotted version that may contain ``x`` wildcard segments.
            versions: Catalog of candidate versions in any order.

        Returns:
            list[str]: Matching versions sorted by descending precedence.

        Raises:
            NoMatchingVersionError: If no candidate satisfies ``constraint``.
        """

        catalog = list(versions)
        matched = [candidate for candidate in catalog if self.matches(constraint, candidate)]
        if not matched:
            raise NoMatchingVersionError(constraint, len(catalog))
        return sorted(matched, key=_precedence, reverse=True)

    def find_matching_version(self, constraint: str, versions: Iterable[str]) -> str:
        """Return the highest version satisfying ``constraint``."""

        return self.find_matching_versions(constraint, versions)[0]


def wildcard_patch(version: str) -> str:
    """Return ``version`` with its patch segment replaced by the wildcard marker.

    Args:
        version: Concrete version such as ``2.1.4``.

    Returns:
        str: Constraint such as ``2.1.x``; short versions are padded with ``0``.
    """

    parts = _segments(version)
    while len(parts) < _PATCH_INDEX:
        parts.append("0")
    return ".".join([*parts[:_PATCH_INDEX], WILDCARD, *parts[_PATCH_INDEX + 1 :]])


__all__ = ["VersionResolver", "wildcard_patch"]
