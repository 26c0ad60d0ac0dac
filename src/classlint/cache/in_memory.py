# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""In-memory memoization for pure functions of hashable arguments.

The grammar parser and the pattern compiler are pure functions that run once
per class token, so their results are memoized here. Unlike
:func:`functools.lru_cache`, ``None`` results are cached as well, which lets
"no match" answers such as an unparsable arbitrary value skip recomputation.
The engine is single-threaded by contract, so no locking is performed.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from functools import partial, update_wrapper
from typing import Final, Generic, ParamSpec, TypeVar, cast

P = ParamSpec("P")
R = TypeVar("R")

CacheKey = Hashable

_MISSING: Final[object] = object()


@dataclass(frozen=True, slots=True)
class CacheInfo:
    """Use this container to describe cache state metadata.

    Attributes:
        current_size: Number of cached entries currently stored.
        hits: Number of cache hits that have occurred.
        misses: Number of calls that had to invoke the wrapped function.
        maxsize: Configured maximum cache capacity, ``None`` when unbounded.
    """

    current_size: int
    hits: int
    misses: int
    maxsize: int | None


class _MemoizedCallable(Generic[P, R]):
    """Implement an optional-size LRU cache for callables with hashable arguments."""

    def __init__(self, func: Callable[P, R], maxsize: int | None) -> None:
        """Initialise the memoized callable wrapper.

        Args:
            func: Callable whose results should be memoized.
            maxsize: Maximum number of cache entries allowed, ``None`` for unbounded caches.
        """

        self._func = func
        self._maxsize = maxsize
        self._store: OrderedDict[CacheKey, object] = OrderedDict()
        self._hits = 0
        self._misses = 0
        update_wrapper(self, func)

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> R:
        """Invoke the wrapped callable applying memoization semantics.

        Args:
            *args: Positional arguments forwarded to the wrapped callable.
            **kwargs: Keyword arguments forwarded to the wrapped callable.

        Returns:
            R: Result produced by the wrapped callable, possibly from cache.

        Raises:
            TypeError: If an argument is not hashable.
        """

        cache_key: CacheKey = args if not kwargs else args + (tuple(sorted(kwargs.items())),)
        cached = self._store.get(cache_key, _MISSING)
        if cached is not _MISSING:
            self._store.move_to_end(cache_key)
            self._hits += 1
            return cast(R, cached)
        self._misses += 1
        result = self._func(*args, **kwargs)
        self._store[cache_key] = result
        if self._maxsize is not None and len(self._store) > self._maxsize:
            self._store.popitem(last=False)
        return result

    def cache_clear(self) -> None:
        """Reset cached entries and hit tracking."""

        self._store.clear()
        self._hits = 0
        self._misses = 0

    def cache_metadata(self) -> CacheInfo:
        """Return cache metadata in a ``CacheInfo`` payload.

        Returns:
            CacheInfo: Cache metadata including size, hits, misses, and
            configured max size.
        """

        return CacheInfo(
            current_size=len(self._store),
            hits=self._hits,
            misses=self._misses,
            maxsize=self._maxsize,
        )


def memoize(maxsize: int | None = None) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a decorator implementing an optional-size LRU cache.

    Args:
        maxsize: Maximum number of entries to retain. ``None`` disables the cap.

    Returns:
        Callable[[Callable[P, R]], Callable[P, R]]: Decorator preserving cache helpers.
    """

    decorator = partial(_apply_memoize, maxsize=maxsize)
    return cast(Callable[[Callable[P, R]], Callable[P, R]], decorator)


def _apply_memoize(func: Callable[P, R], *, maxsize: int | None) -> Callable[P, R]:
    """Return a memoized callable wrapping ``func``.

    Args:
        func: Callable receiving memoization.
        maxsize: Maximum cache capacity for the wrapped callable.

    Returns:
        Callable[P, R]: Memoized callable with cache helpers attached.
    """

    return cast(Callable[P, R], _MemoizedCallable(func, maxsize))


__all__: Final = ["CacheInfo", "memoize"]
