# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build the immutable class registry consulted during validation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from ..grammar import is_valid_arbitrary_value, parse_class_name, validate_variants
from ..patterns import PatternSet, split_patterns
from .catalogue import Catalogue
from .files import ResolvedFile
from .stylesheets import StylesheetExtractor

LOGGER = logging.getLogger(__name__)


class ClassRegistry:
    """Known class names grouped by the source that contributed them.

    Sources stay separate so validation can tell stylesheet classes, which
    never accept variant prefixes, from catalogue utilities, which do. A name
    present in both a stylesheet and the catalogue counts as a catalogue
    utility.
    """

    __slots__ = (
        "_allow_literals",
        "_allow_patterns",
        "_block_literals",
        "_block_patterns",
        "_catalogue",
        "_css_classes",
        "_sources_by_file",
    )

    def __init__(
        self,
        *,
        css_classes: Iterable[str] = (),
        sources_by_file: Mapping[str, frozenset[str]] | None = None,
        catalogue: Catalogue | None = None,
        allowlist: Sequence[str] = (),
        blocklist: Sequence[str] = (),
    ) -> None:
        """Create a registry.

        Args:
            css_classes: Class names extracted from stylesheets.
            sources_by_file: Stylesheet path to the classes it declares.
            catalogue: Generated utility catalogue, ``None`` when disabled.
            allowlist: Allowlist entries; ``*`` marks a wildcard pattern.
            blocklist: Blocklist entries; ``*`` marks a wildcard pattern.
        """

        allow_literals, allow_wildcards = split_patterns(allowlist)
        block_literals, block_wildcards = split_patterns(blocklist)
        self._css_classes = frozenset(css_classes)
        self._sources_by_file: Mapping[str, frozenset[str]] = MappingProxyType(dict(sources_by_file or {}))
        self._catalogue = catalogue if catalogue is not None else Catalogue.empty()
        self._allow_literals = allow_literals
        self._allow_patterns = PatternSet(allow_wildcards)
        self._block_literals = block_literals
        self._block_patterns = PatternSet(block_wildcards)

    @property
    def css_classes(self) -> frozenset[str]:
        """Return class names contributed by stylesheets."""

        return self._css_classes

    @property
    def catalogue_classes(self) -> frozenset[str]:
        """Return literal utility names contributed by the catalogue."""

        return self._catalogue.classes

    @property
    def sources_by_file(self) -> Mapping[str, frozenset[str]]:
        """Return a read-only view of the classes declared by each stylesheet."""

        return self._sources_by_file

    def _is_blocked(self, class_name: str) -> bool:
        return class_name in self._block_literals or self._block_patterns.matches(class_name)

    def _catalogue_base(self, base: str) -> bool:
        return base in self._catalogue.classes or is_valid_arbitrary_value(base)

    def _catalogue_accepts(self, class_name: str) -> bool:
        """Return whether the catalogue generates ``class_name``, variants included."""

        if not self._catalogue.classes:
            return False
        if class_name in self._catalogue.classes:
            return True
        parsed = parse_class_name(class_name)
        if not parsed.variants:
            return is_valid_arbitrary_value(class_name)
        if not validate_variants(parsed.variants, self._catalogue.variants).valid:
            return False
        return self._catalogue_base(parsed.base)

    def is_valid(self, class_name: str) -> bool:
        """Return whether ``class_name`` is known to any source.

        Args:
            class_name: Class token, optionally carrying variant prefixes.

        Returns:
            bool: ``False`` for blocked names; otherwise ``True`` for allowlist
            literals, stylesheet classes, catalogue utilities and allowlist
            wildcard matches.
        """

        if self._is_blocked(class_name):
            return False
        if class_name in self._allow_literals or class_name in self._css_classes:
            return True
        if self._catalogue_accepts(class_name):
            return True
        return self._allow_patterns.matches(class_name)

    def is_tailwind_class(self, class_name: str) -> bool:
        """Return whether ``class_name`` may carry variants.

        Stylesheet-only names are excluded: only catalogue utilities and
        allowlist entries qualify.
        """

        if self._is_blocked(class_name):
            return False
        if class_name in self._allow_literals or self._catalogue_accepts(class_name):
            return True
        return self._allow_patterns.matches(class_name)

    def is_tailwind_only(self, class_name: str) -> bool:
        """Return whether ``class_name`` is known solely through the catalogue."""

        if self._is_blocked(class_name):
            return False
        return self._catalogue_accepts(class_name)

    def is_css_class(self, class_name: str) -> bool:
        """Return whether ``class_name`` is a stylesheet class the catalogue does not generate."""

        return class_name in self._css_classes and not self._catalogue_accepts(class_name)

    def get_all_classes(self) -> set[str]:
        """Return every literal class name that is not blocked.

        Wildcard allowlist entries are open-ended and therefore excluded.
        """

        literals = self._css_classes | self._allow_literals | self._catalogue.classes
        return {name for name in literals if not self._is_blocked(name)}

    def get_valid_variants(self) -> set[str]:
        """Return the variant vocabulary of the catalogue."""

        return set(self._catalogue.variants)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(css_classes={len(self._css_classes)}, "
            f"catalogue_classes={len(self._catalogue.classes)}, "
            f"allowlist={len(self._allow_literals) + len(self._allow_patterns)}, "
            f"blocklist={len(self._block_literals) + len(self._block_patterns)})"
        )


def extract_stylesheet_classes(
    resolved_files: Iterable[ResolvedFile],
    extractor: StylesheetExtractor,
) -> dict[str, frozenset[str]]:
    """Read each stylesheet and extract its class names.

    Args:
        resolved_files: Stylesheets to read.
        extractor: Parser turning stylesheet text into class names.

    Returns:
        dict[str, frozenset[str]]: Classes per stylesheet path. Files that
        cannot be read are logged and skipped.
    """

    sources: dict[str, frozenset[str]] = {}
    for resolved in resolved_files:
        try:
            with open(resolved.path, encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning('Failed to read stylesheet "%s": %s', resolved.path, exc)
            continue
        sources[resolved.path] = frozenset(extractor.extract(content, resolved.path))
    return sources


def build_class_registry(
    resolved_files: Iterable[ResolvedFile],
    allowlist: Sequence[str],
    blocklist: Sequence[str],
    catalogue: Catalogue | None,
    extractor: StylesheetExtractor,
) -> ClassRegistry:
    """Build a :class:`ClassRegistry` from every configured source.

    Args:
        resolved_files: Stylesheets whose class selectors are collected.
        allowlist: Allowlist entries.
        blocklist: Blocklist entries.
        catalogue: Generated utility catalogue, ``None`` when disabled.
        extractor: Stylesheet extractor.

    Returns:
        ClassRegistry: Registry over the union of all sources.
    """

    sources = extract_stylesheet_classes(resolved_files, extractor)
    css_classes: set[str] = set()
    for classes in sources.values():
        css_classes.update(classes)
    registry = ClassRegistry(
        css_classes=css_classes,
        sources_by_file=sources,
        catalogue=catalogue,
        allowlist=allowlist,
        blocklist=blocklist,
    )
    LOGGER.debug("Built %r", registry)
    return registry


__all__ = ["ClassRegistry", "build_class_registry", "extract_stylesheet_classes"]
