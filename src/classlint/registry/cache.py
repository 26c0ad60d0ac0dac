# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry cache keyed by the configuration fingerprint."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable

from ..constants import REGISTRY_CACHE_MAX_ENTRIES
from .builder import ClassRegistry

LOGGER = logging.getLogger(__name__)

RegistryFactory = Callable[[], ClassRegistry]


class RegistryCache:
    """Bounded least-recently-used map from cache key to registry.

    Entries are never read for a different key, so several configurations can
    share one cache. The cache holds no locks; callers validate one file at a
    time.
    """

    def __init__(self, max_entries: int = REGISTRY_CACHE_MAX_ENTRIES) -> None:
        """Create an empty cache.

        Args:
            max_entries: Maximum number of registries retained.

        Raises:
            ValueError: If ``max_entries`` is smaller than one.
        """

        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._max_entries = max_entries
        self._store: OrderedDict[str, ClassRegistry] = OrderedDict()

    def get_or_build(self, key: str, factory: RegistryFactory) -> ClassRegistry:
        """Return the registry cached under ``key``, building it when absent.

        Args:
            key: Fingerprint from :func:`~classlint.registry.cache_key.build_cache_key`.
            factory: Zero-argument callable building the registry on a miss.

        Returns:
            ClassRegistry: Cached instance for an unchanged key.
        """

        cached = self._store.get(key)
        if cached is not None:
            self._store.move_to_end(key)
            return cached
        LOGGER.debug("Registry cache miss for %s", key[:12])
        registry = factory()
        self._store[key] = registry
        while len(self._store) > self._max_entries:
            self._store.popitem(last=False)
        return registry

    def clear(self) -> None:
        """Drop every cached registry."""

        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store


__all__ = ["RegistryCache", "RegistryFactory"]
