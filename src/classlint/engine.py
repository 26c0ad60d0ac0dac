# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Blocking façade tying resolution, registry caching and validation together."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial

from .cache.in_memory import memoize
from .config import ClassLintConfig
from .expressions import ExpressionNode, ExtractionMode, Literal, collect_class_names, extract_with_mode
from .registry.builder import ClassRegistry, build_class_registry
from .registry.cache import RegistryCache
from .registry.cache_key import build_cache_key
from .registry.catalogue import CatalogueGenerator, ThemeCatalogueGenerator, load_catalogue
from .registry.files import FileResolutionCache, ResolvedFile
from .registry.stylesheets import StylesheetExtractor, TreeSitterStylesheetExtractor
from .validation import Diagnostic, validate_class_names

LOGGER = logging.getLogger(__name__)


class ClassValidationEngine:
    """Own the file-resolution and registry caches and answer validation requests.

    Every entry point is a plain blocking call. Cached registries are keyed by
    the full configuration fingerprint, so engines may serve several
    configurations and working directories in turn.
    """

    def __init__(
        self,
        file_cache: FileResolutionCache | None = None,
        registry_cache: RegistryCache | None = None,
        stylesheet_extractor: StylesheetExtractor | None = None,
        catalogue_generator: CatalogueGenerator | None = None,
    ) -> None:
        """Create an engine.

        Args:
            file_cache: Glob resolution cache; a fresh one by default.
            registry_cache: Registry cache; a fresh one by default.
            stylesheet_extractor: Stylesheet parser; Tree-sitter by default.
            catalogue_generator: Catalogue generator; theme-driven by default.
        """

        self._file_cache = file_cache if file_cache is not None else FileResolutionCache()
        self._registry_cache = registry_cache if registry_cache is not None else RegistryCache()
        self._extractor = stylesheet_extractor if stylesheet_extractor is not None else TreeSitterStylesheetExtractor()
        self._generator = (
            catalogue_generator if catalogue_generator is not None else ThemeCatalogueGenerator(self._extractor)
        )

    @property
    def file_cache(self) -> FileResolutionCache:
        """Return the glob resolution cache."""

        return self._file_cache

    @property
    def registry_cache(self) -> RegistryCache:
        """Return the registry cache."""

        return self._registry_cache

    def registry_for(self, config: ClassLintConfig, cwd: str) -> ClassRegistry:
        """Return the registry for ``config`` resolved against ``cwd``.

        Args:
            config: Active configuration.
            cwd: Working directory used for relative patterns.

        Returns:
            ClassRegistry: Cached registry when no input changed, else a new one.
        """

        resolved = self._file_cache.get_or_resolve(config.stylesheet_patterns, cwd)
        key = build_cache_key(
            resolved,
            config.validation.allowlist,
            config.validation.blocklist,
            config.catalogue,
            cwd,
        )
        factory = partial(self._build_registry, resolved, config, cwd)
        return self._registry_cache.get_or_build(key, factory)

    def _build_registry(
        self,
        resolved: Sequence[ResolvedFile],
        config: ClassLintConfig,
        cwd: str,
    ) -> ClassRegistry:
        catalogue = None
        if config.catalogue:
            catalogue = load_catalogue(config.catalogue, cwd, generator=self._generator)
        LOGGER.debug("Building registry from %d stylesheet(s) in %s", len(resolved), cwd)
        return build_class_registry(
            resolved,
            config.validation.allowlist,
            config.validation.blocklist,
            catalogue,
            self._extractor,
        )

    @staticmethod
    def candidates_for(value: ExpressionNode | str, *, object_style: bool = False) -> list[str]:
        """Return the deduplicated class tokens of an attribute value.

        Args:
            value: Normalised attribute expression, or a plain attribute string.
            object_style: ``True`` when object property values hold the classes.

        Returns:
            list[str]: Candidate tokens in first-seen order.
        """

        node: ExpressionNode = Literal(value) if isinstance(value, str) else value
        mode = ExtractionMode.VALUES if object_style else ExtractionMode.KEYS
        return collect_class_names(extract_with_mode(node, mode))

    def validate_attribute(
        self,
        value: ExpressionNode | str,
        *,
        config: ClassLintConfig,
        cwd: str,
        attribute: str | None = None,
        report_at: object | None = None,
    ) -> list[Diagnostic]:
        """Validate one attribute occurrence.

        Args:
            value: Attribute expression or string.
            config: Active configuration.
            cwd: Working directory used for relative patterns.
            attribute: Attribute name; names listed under
                ``object_style_attributes`` are read in object-values mode.
            report_at: Opaque handle attached to each diagnostic.

        Returns:
            list[Diagnostic]: Diagnostics in token order.
        """

        object_style = attribute is not None and attribute in config.validation.object_style_attributes
        candidates = self.candidates_for(value, object_style=object_style)
        if not candidates:
            return []
        registry = self.registry_for(config, cwd)
        return validate_class_names(
            candidates,
            registry,
            config.validation.ignore_patterns,
            report_at=report_at,
        )

    def clear(self) -> None:
        """Empty both caches."""

        self._file_cache.clear()
        self._registry_cache.clear()


@memoize(maxsize=1)
def default_engine() -> ClassValidationEngine:
    """Return the process-wide engine."""

    return ClassValidationEngine()


def clear_caches() -> None:
    """Empty the caches of the process-wide engine."""

    default_engine().clear()


__all__ = ["ClassValidationEngine", "clear_caches", "default_engine"]
