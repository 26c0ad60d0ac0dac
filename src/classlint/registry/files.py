# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve stylesheet glob patterns into files with modification times."""

from __future__ import annotations

import glob
import logging
import os
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from ..constants import ALWAYS_EXCLUDE_DIRS, FILE_RESOLUTION_TTL_SECONDS

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True, slots=True)
class ResolvedFile:
    """Stylesheet path paired with its modification time.

    Attributes:
        path: Absolute path of the file.
        mtime: Modification time in seconds with sub-second precision.
    """

    path: str
    mtime: float


def is_excluded(path: str) -> bool:
    """Return whether ``path`` sits inside an always-excluded directory."""

    return any(part in ALWAYS_EXCLUDE_DIRS for part in Path(path).parts[:-1])


def _expand_patterns(patterns: Sequence[str], cwd: str) -> Iterator[str]:
    """Yield absolute paths matched by ``patterns``.

    Args:
        patterns: Glob patterns; ``**`` matches nested directories.
        cwd: Base directory for relative patterns.

    Yields:
        str: Absolute paths of matched regular files.
    """

    anchored = any(os.path.isabs(pattern) for pattern in patterns)
    for pattern in patterns:
        matches = glob.glob(pattern, recursive=True) if anchored else glob.glob(pattern, root_dir=cwd, recursive=True)
        for match in matches:
            # Exclusions apply to the matched portion, not to ``cwd`` itself.
            if is_excluded(match):
                continue
            absolute = os.path.abspath(match if anchored else os.path.join(cwd, match))
            if os.path.isfile(absolute):
                yield absolute


def resolve_files_with_mtimes(patterns: Sequence[str], cwd: str) -> tuple[ResolvedFile, ...]:
    """Expand ``patterns`` and stat every matched file.

    Args:
        patterns: Stylesheet glob patterns.
        cwd: Base directory used for relative patterns.

    Returns:
        tuple[ResolvedFile, ...]: Files sorted by path. Files that cannot be
        stat'ed are skipped; a failing expansion yields an empty tuple. Both
        cases are logged as warnings.
    """

    try:
        paths = sorted(set(_expand_patterns(patterns, cwd)))
    except (OSError, ValueError) as exc:
        LOGGER.warning("Failed to find stylesheet files for %s: %s", list(patterns), exc)
        return ()

    resolved: list[ResolvedFile] = []
    for path in paths:
        try:
            stat = os.stat(path)
        except OSError as exc:
            LOGGER.warning('Failed to stat file "%s": %s', path, exc)
            continue
        resolved.append(ResolvedFile(path=path, mtime=stat.st_mtime_ns / 1_000_000_000))
    return tuple(resolved)


@dataclass(frozen=True, slots=True)
class _ResolutionEntry:
    patterns: tuple[str, ...]
    cwd: str
    files: tuple[ResolvedFile, ...]
    resolved_at: float


class FileResolutionCache:
    """Time-bounded memo of the most recent glob resolution.

    Repeated resolutions of the same ``(patterns, cwd)`` within the TTL window
    return the previous tuple object without touching the filesystem. The TTL
    bounds staleness only: files added or removed become visible once it
    elapses.
    """

    _DEFAULT_TTL: Final[float] = FILE_RESOLUTION_TTL_SECONDS

    def __init__(self, ttl_seconds: float = _DEFAULT_TTL, *, clock: Clock = time.monotonic) -> None:
        """Create an empty cache.

        Args:
            ttl_seconds: Window during which a resolution is reused.
            clock: Monotonic time source, replaceable in tests.
        """

        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: _ResolutionEntry | None = None

    @property
    def ttl_seconds(self) -> float:
        """Return the reuse window in seconds."""

        return self._ttl_seconds

    def get_or_resolve(self, patterns: Sequence[str], cwd: str) -> tuple[ResolvedFile, ...]:
        """Return resolved files for ``patterns`` reusing a fresh prior result.

        Args:
            patterns: Stylesheet glob patterns.
            cwd: Base directory for relative patterns.

        Returns:
            tuple[ResolvedFile, ...]: Resolved files; empty without touching
            the cache when ``patterns`` is empty.
        """

        if not patterns:
            return ()
        key = tuple(patterns)
        now = self._clock()
        entry = self._entry
        if (
            entry is not None
            and entry.patterns == key
            and entry.cwd == cwd
            and now - entry.resolved_at < self._ttl_seconds
        ):
            return entry.files
        files = resolve_files_with_mtimes(key, cwd)
        self._entry = _ResolutionEntry(patterns=key, cwd=cwd, files=files, resolved_at=now)
        return files

    def clear(self) -> None:
        """Forget the cached resolution immediately."""

        self._entry = None


__all__ = ["FileResolutionCache", "ResolvedFile", "is_excluded", "resolve_files_with_mtimes"]
