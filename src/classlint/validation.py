# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validate class tokens against a registry and report diagnostics."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Protocol

from .grammar import is_empty_arbitrary_value, parse_class_name
from .patterns import matches_any


class MessageKind(str, Enum):
    """Enumerate the diagnostic kinds produced by validation."""

    INVALID_CLASS_NAME = "invalidClassName"
    INVALID_VARIANT = "invalidVariant"


MESSAGES: Final[Mapping[MessageKind, str]] = MappingProxyType(
    {
        MessageKind.INVALID_CLASS_NAME: 'Class name "{class_name}" is not defined in any CSS files or configuration',
        MessageKind.INVALID_VARIANT: 'Variant "{variant}" in class "{class_name}" is not a valid Tailwind variant',
    },
)


class RegistryLookup(Protocol):
    """Registry queries required by :func:`validate_class_names`."""

    def is_valid(self, class_name: str) -> bool:
        """Return whether ``class_name`` is known to any source."""
        raise NotImplementedError

    def is_css_class(self, class_name: str) -> bool:
        """Return whether ``class_name`` comes from a stylesheet only."""
        raise NotImplementedError

    def is_tailwind_only(self, class_name: str) -> bool:
        """Return whether ``class_name`` comes from the catalogue only."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Single validation finding.

    Attributes:
        kind: Diagnostic kind.
        class_name: Offending base name, or the full token for variant findings.
        variant: Reported variant for :attr:`MessageKind.INVALID_VARIANT`.
        report_at: Opaque location handle supplied by the caller.
    """

    kind: MessageKind
    class_name: str
    variant: str | None = None
    report_at: object | None = None

    @property
    def message(self) -> str:
        """Return the rendered human-readable message."""

        return MESSAGES[self.kind].format(class_name=self.class_name, variant=self.variant)


def is_class_name_ignored(class_name: str, ignore_patterns: Iterable[str]) -> bool:
    """Return whether ``class_name`` matches any ignore pattern."""

    return matches_any(class_name, ignore_patterns)


def _validate_token(
    token: str,
    registry: RegistryLookup,
    ignore_patterns: Sequence[str],
    report_at: object | None,
) -> Diagnostic | None:
    parsed = parse_class_name(token)
    base = parsed.base
    if is_class_name_ignored(base, ignore_patterns):
        return None
    if is_empty_arbitrary_value(base):
        return Diagnostic(MessageKind.INVALID_CLASS_NAME, base, report_at=report_at)
    if not parsed.variants:
        if registry.is_valid(base):
            return None
        return Diagnostic(MessageKind.INVALID_CLASS_NAME, base, report_at=report_at)

    if not registry.is_valid(base) or registry.is_css_class(base):
        # Stylesheet classes cannot carry variant prefixes.
        return Diagnostic(MessageKind.INVALID_CLASS_NAME, base, report_at=report_at)
    if registry.is_tailwind_only(base) and not registry.is_valid(token):
        return Diagnostic(
            MessageKind.INVALID_VARIANT,
            token,
            variant=parsed.variants[0],
            report_at=report_at,
        )
    return None


def validate_class_names(
    class_names: Iterable[str],
    registry: RegistryLookup,
    ignore_patterns: Sequence[str] = (),
    *,
    report_at: object | None = None,
) -> list[Diagnostic]:
    """Validate class tokens and return their diagnostics.

    For each token the first applicable rule wins: a base matching an ignore
    pattern is skipped; an empty arbitrary value is an invalid class name; a
    token with variants needs a valid, non-stylesheet base, and a
    catalogue-only base must also be valid together with its variants; a
    token without variants only needs a valid base.

    Args:
        class_names: Candidate tokens, already deduplicated, in source order.
        registry: Registry to consult.
        ignore_patterns: Literal or wildcard patterns exempt from validation.
        report_at: Opaque handle attached to each diagnostic.

    Returns:
        list[Diagnostic]: At most one diagnostic per token, in input order.
    """

    diagnostics: list[Diagnostic] = []
    for token in class_names:
        diagnostic = _validate_token(token, registry, ignore_patterns, report_at)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
    return diagnostics


__all__ = [
    "Diagnostic",
    "MESSAGES",
    "MessageKind",
    "RegistryLookup",
    "is_class_name_ignored",
    "validate_class_names",
]
