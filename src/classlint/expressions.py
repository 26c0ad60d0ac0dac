# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static extraction of class strings from normalised expression trees.

Markup adapters translate their dialect-specific attribute values into the
small node vocabulary defined here. Extraction is purely structural: it
follows branches whose string content is known at analysis time and never
evaluates tests, callees, or identifiers. Anything it does not recognise
contributes nothing, so dynamic values are skipped rather than guessed.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Literal as LiteralType, TypeAlias

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Literal:
    """Primitive literal; only string values carry class names."""

    value: str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class TemplateElement:
    """Static chunk of a template literal."""

    raw: str
    cooked: str | None


@dataclass(frozen=True, slots=True)
class TemplateLiteral:
    """Template string with interleaved static chunks and interpolations."""

    quasis: tuple[TemplateElement, ...]
    expressions: tuple[ExpressionNode, ...] = ()


@dataclass(frozen=True, slots=True)
class Conditional:
    """Ternary expression ``test ? consequent : alternate``."""

    test: ExpressionNode
    consequent: ExpressionNode
    alternate: ExpressionNode


@dataclass(frozen=True, slots=True)
class Logical:
    """Short-circuit expression using ``&&``, ``||`` or ``??``."""

    operator: LiteralType["&&", "||", "??"]
    left: ExpressionNode
    right: ExpressionNode


@dataclass(frozen=True, slots=True)
class Call:
    """Function call such as ``clsx("a", cond && "b")``."""

    callee: ExpressionNode
    arguments: tuple[ExpressionNode, ...] = ()


@dataclass(frozen=True, slots=True)
class ArrayLit:
    """Array literal; ``None`` entries represent holes."""

    elements: tuple[ExpressionNode | None, ...] = ()


@dataclass(frozen=True, slots=True)
class Identifier:
    """Reference to a binding whose value is unknown statically."""

    name: str


@dataclass(frozen=True, slots=True)
class Property:
    """Object property ``key: value``."""

    key: Literal | Identifier | ExpressionNode
    value: ExpressionNode
    computed: bool = False
    shorthand: bool = False


@dataclass(frozen=True, slots=True)
class Spread:
    """Spread entry ``...argument`` inside an object literal."""

    argument: ExpressionNode


@dataclass(frozen=True, slots=True)
class ObjectLit:
    """Object literal whose keys or values may hold class names."""

    properties: tuple[Property | Spread, ...] = ()


@dataclass(frozen=True, slots=True)
class Unknown:
    """Any expression shape outside the supported vocabulary."""

    kind: str = field(default="unknown")


ExpressionNode: TypeAlias = (
    Literal | TemplateLiteral | Conditional | Logical | Call | ArrayLit | ObjectLit | Identifier | Unknown
)


class ExtractionMode(str, Enum):
    """Enumerate how object literals contribute class names."""

    KEYS = "keys"
    VALUES = "values"


def extract_class_strings(node: ExpressionNode) -> list[str]:
    """Return every statically known class string ``node`` can evaluate to.

    Object literals contribute their non-computed keys, which matches the
    ``clsx({"is-active": flag})`` idiom.

    Args:
        node: Root of a normalised expression tree.

    Returns:
        list[str]: Whitespace-joined class strings in tree order.
    """

    results: list[str] = []
    _collect(node, results)
    return results


def extract_class_strings_from_object_values(node: ExpressionNode) -> list[str]:
    """Return class strings held by the property values of an object literal.

    Used for object-style attributes such as ``classes={{root: "mt-2"}}``;
    each value is extracted with :func:`extract_class_strings`.

    Args:
        node: Attribute expression, expected to be an :class:`ObjectLit`.

    Returns:
        list[str]: Class strings from every non-spread property value, or an
        empty list for other node kinds.
    """

    if not isinstance(node, ObjectLit):
        return []
    results: list[str] = []
    for prop in node.properties:
        if isinstance(prop, Spread):
            continue
        _collect(prop.value, results)
    return results


def extract_with_mode(node: ExpressionNode, mode: ExtractionMode) -> list[str]:
    """Dispatch to the extractor matching ``mode``."""

    if mode is ExtractionMode.VALUES:
        return extract_class_strings_from_object_values(node)
    return extract_class_strings(node)


def extract_class_names_from_string(value: object) -> list[str]:
    """Split a class attribute string into individual class names.

    Args:
        value: Attribute string; non-string input yields no names.

    Returns:
        list[str]: Non-empty names separated by runs of whitespace.
    """

    if not isinstance(value, str) or not value:
        return []
    return [part for part in _WHITESPACE.split(value) if part]


def collect_class_names(class_strings: Iterable[str]) -> list[str]:
    """Tokenise ``class_strings`` and drop repeated names keeping first-seen order."""

    ordered: dict[str, None] = {}
    for class_string in class_strings:
        for name in extract_class_names_from_string(class_string):
            ordered.setdefault(name, None)
    return list(ordered)


def _collect(node: ExpressionNode | None, results: list[str]) -> None:
    # Conditional tests, callees and identifiers are never inspected.
    if isinstance(node, Literal):
        if isinstance(node.value, str):
            results.append(node.value)
    elif isinstance(node, TemplateLiteral):
        if not node.expressions and len(node.quasis) == 1:
            cooked = node.quasis[0].cooked
            if cooked is not None:
                results.append(cooked)
    elif isinstance(node, Conditional):
        _collect(node.consequent, results)
        _collect(node.alternate, results)
    elif isinstance(node, Logical):
        _collect(node.left, results)
        _collect(node.right, results)
    elif isinstance(node, Call):
        for argument in node.arguments:
            _collect(argument, results)
    elif isinstance(node, ArrayLit):
        for element in node.elements:
            if element is not None:
                _collect(element, results)
    elif isinstance(node, ObjectLit):
        results.extend(_object_keys(node))


def _object_keys(node: ObjectLit) -> Iterable[str]:
    for prop in node.properties:
        if isinstance(prop, Spread) or prop.computed:
            continue
        key = prop.key
        if isinstance(key, Literal):
            if isinstance(key.value, str):
                yield key.value
        elif isinstance(key, Identifier):
            yield key.name


__all__ = [
    "ArrayLit",
    "Call",
    "Conditional",
    "ExpressionNode",
    "ExtractionMode",
    "Identifier",
    "Literal",
    "Logical",
    "ObjectLit",
    "Property",
    "Spread",
    "TemplateElement",
    "TemplateLiteral",
    "Unknown",
    "collect_class_names",
    "extract_class_names_from_string",
    "extract_class_strings",
    "extract_class_strings_from_object_values",
    "extract_with_mode",
]
