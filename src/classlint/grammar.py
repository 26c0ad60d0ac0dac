# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Grammar for compound utility class tokens.

A token such as ``md:hover:bg-[#0af]`` is read as an ordered list of variants
(``md``, ``hover``) followed by a base utility (``bg-[#0af]``). Variants may be
bracketed arbitrary selectors (``[&:nth-child(3)]``), and a base may carry a
bracketed arbitrary value attached to a utility prefix.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Set
from dataclasses import dataclass
from typing import Final

from .cache.in_memory import memoize
from .constants import ARBITRARY_VALUE_PREFIXES

VARIANT_SEPARATOR: Final[str] = ":"
_GROUP_PREFIX: Final[str] = "group-"
_PEER_PREFIX: Final[str] = "peer-"
_ARBITRARY_OPEN: Final[str] = "-["

_ARBITRARY_VALUE_SHAPE: Final[re.Pattern[str]] = re.compile(r"[\w-]+-\[.+\]", re.DOTALL)
_EMPTY_ARBITRARY_VALUE_SHAPE: Final[re.Pattern[str]] = re.compile(r"[\w-]+-\[\]")

DEFAULT_VARIANTS: Final[frozenset[str]] = frozenset(
    {
        # interactive pseudo-classes
        "hover",
        "focus",
        "focus-within",
        "focus-visible",
        "active",
        "visited",
        "target",
        # form state
        "disabled",
        "enabled",
        "checked",
        "indeterminate",
        "default",
        "required",
        "valid",
        "invalid",
        "in-range",
        "out-of-range",
        "placeholder-shown",
        "autofill",
        "read-only",
        # structural
        "first",
        "last",
        "only",
        "odd",
        "even",
        "first-of-type",
        "last-of-type",
        "only-of-type",
        "empty",
        "open",
        # pseudo-elements
        "before",
        "after",
        "first-letter",
        "first-line",
        "marker",
        "selection",
        "file",
        "backdrop",
        "placeholder",
        # breakpoints
        "sm",
        "md",
        "lg",
        "xl",
        "2xl",
        # media and preference
        "dark",
        "print",
        "motion-safe",
        "motion-reduce",
        "contrast-more",
        "contrast-less",
        "ltr",
        "rtl",
        "portrait",
        "landscape",
    },
)


@dataclass(frozen=True, slots=True)
class ParsedClassName:
    """Variants and base utility of a class token.

    Attributes:
        variants: Variant prefixes in declaration order.
        base: Remaining utility after every variant was stripped.
    """

    variants: tuple[str, ...]
    base: str


@dataclass(frozen=True, slots=True)
class ParsedArbitraryValue:
    """Prefix and bracketed value of an arbitrary-value utility."""

    prefix: str
    value: str


@dataclass(frozen=True, slots=True)
class VariantValidationResult:
    """Outcome of validating a variant sequence.

    Attributes:
        valid: ``True`` when every variant is known.
        invalid_variant: First unknown variant in declaration order.
    """

    valid: bool
    invalid_variant: str | None = None


@memoize(maxsize=10_000)
def parse_class_name(token: str) -> ParsedClassName:
    """Split ``token`` into its variants and base utility.

    Args:
        token: Raw class token, for example ``hover:first:mt-2``.

    Returns:
        ParsedClassName: Parsed structure. Repeated calls with the same token
        return the same instance.

    Examples:
        >>> parse_class_name("[&:nth-child(3)]:mt-2")
        ParsedClassName(variants=('[&:nth-child(3)]',), base='mt-2')
    """

    variants: list[str] = []
    remaining = token
    while VARIANT_SEPARATOR in remaining:
        if remaining.startswith("["):
            closing = remaining.find("]")
            if closing == -1:
                break
            separator = remaining.find(VARIANT_SEPARATOR, closing)
            if separator == -1:
                break
            variants.append(remaining[: closing + 1])
            remaining = remaining[separator + 1 :]
            continue
        variant, _, remaining = remaining.partition(VARIANT_SEPARATOR)
        variants.append(variant)
    return ParsedClassName(variants=tuple(variants), base=remaining)


def is_arbitrary_variant(variant: str) -> bool:
    """Return whether ``variant`` is a bracketed arbitrary selector."""

    return len(variant) >= 2 and variant.startswith("[") and variant.endswith("]")


def is_valid_variant(variant: str, known_variants: Set[str]) -> bool:
    """Return whether ``variant`` is acceptable.

    Args:
        variant: Single variant, e.g. ``hover``, ``group-focus`` or ``[&>*]``.
        known_variants: Variant vocabulary of the active catalogue.

    Returns:
        bool: ``True`` for arbitrary variants, for ``group-``/``peer-``
        variants whose suffix is known, and for known variants.
    """

    if not variant:
        return False
    if is_arbitrary_variant(variant):
        return True
    for prefix in (_GROUP_PREFIX, _PEER_PREFIX):
        if variant.startswith(prefix):
            return variant[len(prefix) :] in known_variants
    return variant in known_variants


def validate_variants(variants: Iterable[str], known_variants: Set[str]) -> VariantValidationResult:
    """Validate ``variants`` in order, reporting the first invalid entry.

    Args:
        variants: Variants in declaration order.
        known_variants: Variant vocabulary of the active catalogue.

    Returns:
        VariantValidationResult: Overall validity and the first invalid variant.
    """

    for variant in variants:
        if not is_valid_variant(variant, known_variants):
            return VariantValidationResult(valid=False, invalid_variant=variant)
    return VariantValidationResult(valid=True)


def is_arbitrary_value(base: str) -> bool:
    """Return whether ``base`` has the ``prefix-[value]`` shape with a non-empty value."""

    return _ARBITRARY_VALUE_SHAPE.fullmatch(base) is not None


def is_empty_arbitrary_value(base: str) -> bool:
    """Return whether ``base`` is an arbitrary value with nothing between the brackets."""

    return _EMPTY_ARBITRARY_VALUE_SHAPE.fullmatch(base) is not None


@memoize(maxsize=10_000)
def parse_arbitrary_value(base: str) -> ParsedArbitraryValue | None:
    """Split an arbitrary-value utility into prefix and value.

    The last ``-[`` is used as the split point so multi-segment prefixes such
    as ``grid-cols-[200px_1fr]`` keep their full prefix.

    Args:
        base: Base utility without variants.

    Returns:
        ParsedArbitraryValue | None: Parsed value, or ``None`` when ``base`` is
        not an arbitrary value, its brackets are unbalanced, or the value is
        empty.
    """

    if not base.endswith("]"):
        return None
    split_at = base.rfind(_ARBITRARY_OPEN)
    if split_at <= 0:
        return None
    prefix = base[:split_at]
    value = base[split_at + len(_ARBITRARY_OPEN) : -1]
    if not value or not _brackets_balanced(value):
        return None
    return ParsedArbitraryValue(prefix=prefix, value=value)


def is_valid_arbitrary_value(base: str) -> bool:
    """Return whether ``base`` is an arbitrary value for a utility that accepts one.

    Args:
        base: Base utility without variants.

    Returns:
        bool: ``True`` when the prefix accepts arbitrary values and the value
        is not blank.
    """

    if not is_arbitrary_value(base):
        return False
    parsed = parse_arbitrary_value(base)
    if parsed is None:
        return False
    return parsed.prefix in ARBITRARY_VALUE_PREFIXES and bool(parsed.value.strip())


def _brackets_balanced(value: str) -> bool:
    depth = 0
    for char in value:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


__all__ = [
    "DEFAULT_VARIANTS",
    "ParsedArbitraryValue",
    "ParsedClassName",
    "VARIANT_SEPARATOR",
    "VariantValidationResult",
    "is_arbitrary_value",
    "is_arbitrary_variant",
    "is_empty_arbitrary_value",
    "is_valid_arbitrary_value",
    "is_valid_variant",
    "parse_arbitrary_value",
    "parse_class_name",
    "validate_variants",
]
