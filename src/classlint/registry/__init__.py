# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registry construction: file resolution, fingerprinting, sources and caching."""

from __future__ import annotations

from .builder import ClassRegistry, build_class_registry
from .cache import RegistryCache
from .cache_key import build_cache_key
from .catalogue import Catalogue, CatalogueGenerator, ThemeCatalogueGenerator, load_catalogue
from .files import FileResolutionCache, ResolvedFile, resolve_files_with_mtimes
from .stylesheets import StylesheetExtractor, TreeSitterStylesheetExtractor

__all__ = [
    "Catalogue",
    "CatalogueGenerator",
    "ClassRegistry",
    "FileResolutionCache",
    "RegistryCache",
    "ResolvedFile",
    "StylesheetExtractor",
    "ThemeCatalogueGenerator",
    "TreeSitterStylesheetExtractor",
    "build_cache_key",
    "build_class_registry",
    "load_catalogue",
    "resolve_files_with_mtimes",
]
