# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wildcard pattern compilation for allow, block, and ignore lists.

Patterns are literal class names in which ``*`` stands for zero or more
characters. Every other character, including regular-expression
metacharacters, matches itself. Patterns that could produce pathological
matching behaviour are rejected at compile time rather than compiled.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from .cache.in_memory import memoize
from .constants import MAX_PATTERN_LENGTH

WILDCARD: Final[str] = "*"

_TRIPLE_WILDCARD: Final[re.Pattern[str]] = re.compile(r"\*{3,}")
_REPEATED_PLUS: Final[re.Pattern[str]] = re.compile(r"\+{2,}")
_NESTED_QUANTIFIER: Final[re.Pattern[str]] = re.compile(r"\([^)]*[+*][^)]*\)[+*]")
_WILDCARD_RUN: Final[re.Pattern[str]] = re.compile(r"\*+")


@dataclass(frozen=True, slots=True)
class WildcardPattern:
    """Compiled wildcard pattern.

    The first and last literal segments anchor the ends of the candidate and
    each middle segment is placed at its leftmost occurrence after the
    previous one. Matching never backtracks.

    Attributes:
        source: Pattern string exactly as configured.
        segments: Literal text between wildcards; a single segment means the
            pattern has no wildcard.
    """

    source: str
    segments: tuple[str, ...]

    def matches(self, candidate: str) -> bool:
        """Return whether ``candidate`` matches the whole pattern.

        Args:
            candidate: Class name to test.

        Returns:
            bool: ``True`` when the pattern matches ``candidate`` entirely.
        """

        segments = self.segments
        if len(segments) == 1:
            return candidate == segments[0]
        head, *middle, tail = segments
        if len(candidate) < len(head) + len(tail):
            return False
        if not candidate.startswith(head) or not candidate.endswith(tail):
            return False
        offset = len(head)
        limit = len(candidate) - len(tail)
        for segment in middle:
            found = candidate.find(segment, offset, limit)
            if found == -1:
                return False
            offset = found + len(segment)
        return True


def is_wildcard(pattern: str) -> bool:
    """Return whether ``pattern`` contains a wildcard."""

    return WILDCARD in pattern


def validate_pattern(pattern: str) -> bool:
    """Return whether ``pattern`` is safe to compile.

    Args:
        pattern: Raw pattern string from configuration.

    Returns:
        bool: ``False`` for over-long patterns, runs of three or more ``*``,
        repeated ``+`` and quantified groups such as ``(a+)+``.
    """

    if len(pattern) > MAX_PATTERN_LENGTH:
        return False
    if _TRIPLE_WILDCARD.search(pattern):
        return False
    if _REPEATED_PLUS.search(pattern):
        return False
    return _NESTED_QUANTIFIER.search(pattern) is None


@memoize(maxsize=1024)
def compile_pattern(pattern: str) -> WildcardPattern | None:
    """Compile ``pattern`` into a :class:`WildcardPattern`.

    Args:
        pattern: Raw pattern string from configuration.

    Returns:
        WildcardPattern | None: Compiled matcher, or ``None`` when the pattern
        is rejected by :func:`validate_pattern`.
    """

    if not validate_pattern(pattern):
        return None
    return WildcardPattern(source=pattern, segments=tuple(_WILDCARD_RUN.split(pattern)))


def matches_pattern(candidate: str, pattern: str) -> bool:
    """Return whether ``candidate`` matches ``pattern``; unsafe patterns never match."""

    compiled = compile_pattern(pattern)
    return compiled is not None and compiled.matches(candidate)


def matches_any(candidate: str, patterns: Iterable[str]) -> bool:
    """Return whether any of ``patterns`` matches ``candidate``.

    Args:
        candidate: Class name to test.
        patterns: Pattern strings tried in order.

    Returns:
        bool: ``True`` on the first matching pattern.
    """

    return any(matches_pattern(candidate, pattern) for pattern in patterns)


def split_patterns(patterns: Iterable[str]) -> tuple[frozenset[str], tuple[str, ...]]:
    """Partition ``patterns`` into literal names and wildcard patterns.

    Args:
        patterns: Configured list entries.

    Returns:
        tuple[frozenset[str], tuple[str, ...]]: Literal names and the wildcard
        patterns in their original order.
    """

    literals: set[str] = set()
    wildcards: list[str] = []
    for pattern in patterns:
        if is_wildcard(pattern):
            wildcards.append(pattern)
        else:
            literals.add(pattern)
    return frozenset(literals), tuple(wildcards)


class PatternSet:
    """Ordered collection of compiled wildcard patterns."""

    __slots__ = ("_compiled",)

    def __init__(self, patterns: Sequence[str] = ()) -> None:
        """Compile ``patterns`` dropping any that fail validation.

        Args:
            patterns: Pattern strings in priority order.
        """

        compiled = (compile_pattern(pattern) for pattern in patterns)
        self._compiled: tuple[WildcardPattern, ...] = tuple(item for item in compiled if item is not None)

    def __len__(self) -> int:
        return len(self._compiled)

    def __bool__(self) -> bool:
        return bool(self._compiled)

    @property
    def sources(self) -> tuple[str, ...]:
        """Return the source strings of the patterns that compiled."""

        return tuple(item.source for item in self._compiled)

    def matches(self, candidate: str) -> bool:
        """Return whether any compiled pattern matches ``candidate``."""

        return any(item.matches(candidate) for item in self._compiled)


__all__ = [
    "PatternSet",
    "WILDCARD",
    "WildcardPattern",
    "compile_pattern",
    "is_wildcard",
    "matches_any",
    "matches_pattern",
    "split_patterns",
    "validate_pattern",
]
