# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extract class selector names from stylesheet source text."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator
from typing import Final, Protocol, cast, runtime_checkable

import sass
import tree_sitter_css
from tree_sitter import Language, Node, Parser

from ..cache.in_memory import memoize

LOGGER = logging.getLogger(__name__)

_CLASS_SELECTOR: Final[str] = "class_selector"
_CLASS_NAME: Final[str] = "class_name"
_CLASS_DOT: Final[str] = "."
_ENCODING: Final[str] = "utf-8"
_SCSS_SUFFIX: Final[str] = ".scss"


@runtime_checkable
class StylesheetExtractor(Protocol):
    """Contract for turning stylesheet text into class names."""

    def extract(self, source_text: str, file_path: str) -> set[str]:
        """Return the class selector names declared in ``source_text``.

        Args:
            source_text: Stylesheet contents.
            file_path: Origin of ``source_text`` for diagnostics.

        Returns:
            set[str]: Class names without the leading dot.
        """
        raise NotImplementedError


@memoize(maxsize=1)
def load_css_language() -> Language:
    """Return the compiled Tree-sitter language for CSS."""

    return Language(tree_sitter_css.language())


def build_css_parser() -> Parser:
    """Return a new Tree-sitter parser configured for CSS.

    Returns:
        Parser: Parser instance ready to parse stylesheet sources.
    """

    parser = Parser()
    language = load_css_language()
    if hasattr(parser, "set_language"):
        setter = cast(Callable[[Language], None], getattr(parser, "set_language"))
        setter(language)
    else:
        setattr(parser, "language", language)
    return parser


def compile_scss(source_text: str, file_path: str) -> str | None:
    """Compile SCSS to plain CSS so nested ``&`` selectors are flattened.

    Imports resolve relative to the directory holding ``file_path``.

    Args:
        source_text: SCSS contents.
        file_path: Origin of ``source_text`` for diagnostics and imports.

    Returns:
        str | None: Compiled CSS, or ``None`` when compilation fails.
    """

    include_dir = os.path.dirname(file_path) or os.curdir
    try:
        return sass.compile(string=source_text, include_paths=[include_dir], output_style="expanded")
    except sass.CompileError as exc:
        LOGGER.warning('Failed to compile SCSS "%s"; nested "&" selectors are skipped: %s', file_path, exc)
        return None


def _iter_nodes(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _node_text(node: Node) -> str:
    text = node.text
    if text is None:
        return ""
    return text.decode(_ENCODING, errors="replace")


def _selector_class_names(selector: Node) -> Iterator[str]:
    # Only ``.name`` counts; a bare ``&suffix`` fragment is not a class of its own.
    previous: Node | None = None
    for child in selector.children:
        if child.type == _CLASS_NAME and previous is not None and previous.type == _CLASS_DOT:
            name = _node_text(child)
            if name:
                yield name
        previous = child


class TreeSitterStylesheetExtractor(StylesheetExtractor):
    """Collect class names from CSS and SCSS using Tree-sitter.

    Every ``class_name`` beneath a ``class_selector`` is collected, which
    covers compound selectors, combinators, pseudo-class arguments such as
    ``:not(.hidden)``, at-rule bodies, and nested rules. Regions the grammar
    cannot parse are skipped; the rest of the file still contributes.

    ``.scss`` files are additionally compiled with libsass and the compiled
    CSS is scanned as well, so ``&-primary`` under ``.btn`` yields
    ``btn-primary``. Rules the compiler drops as empty still come from the raw
    parse.
    """

    def __init__(self) -> None:
        self._parser: Parser | None = None

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = build_css_parser()
        return self._parser

    def _parse_names(self, source_text: str, file_path: str, *, report: bool = True) -> set[str]:
        try:
            tree = self._get_parser().parse(source_text.encode(_ENCODING, errors="replace"))
        except (ValueError, RuntimeError) as exc:
            LOGGER.warning('Failed to parse stylesheet "%s": %s', file_path, exc)
            return set()

        root = tree.root_node
        if report and root.has_error:
            LOGGER.warning('Stylesheet "%s" contains syntax the CSS grammar could not parse', file_path)

        names: set[str] = set()
        for node in _iter_nodes(root):
            if node.type == _CLASS_SELECTOR:
                names.update(_selector_class_names(node))
        return names

    def extract(self, source_text: str, file_path: str) -> set[str]:
        """Return class selector names declared in ``source_text``.

        Args:
            source_text: Stylesheet contents.
            file_path: Origin of ``source_text`` for diagnostics; a ``.scss``
                suffix enables SCSS compilation.

        Returns:
            set[str]: Class names; empty when parsing fails outright.
        """

        if not file_path.lower().endswith(_SCSS_SUFFIX):
            return self._parse_names(source_text, file_path)

        compiled = compile_scss(source_text, file_path)
        if compiled is None:
            return self._parse_names(source_text, file_path)
        names = self._parse_names(compiled, file_path)
        # Raw SCSS syntax is expected to trip the CSS grammar; the compiled pass reports real errors.
        names |= self._parse_names(source_text, file_path, report=False)
        return names


__all__ = [
    "StylesheetExtractor",
    "TreeSitterStylesheetExtractor",
    "build_css_parser",
    "compile_scss",
    "load_css_language",
]
