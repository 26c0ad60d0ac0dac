# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from classlint.cache import memoize


def test_memoize_caches_results_and_reports_metadata():
    calls = {"count": 0}

    @memoize(maxsize=4)
    def compute(value: int) -> int:
        calls["count"] += 1
        return value * 2

    assert compute(2) == 4
    assert compute(2) == 4
    assert calls["count"] == 1

    info = compute.cache_metadata()  # type: ignore[attr-defined]
    assert info.hits == 1
    assert info.misses == 1
    assert info.current_size == 1
    assert info.maxsize == 4


def test_memoize_caches_none_results():
    calls = {"count": 0}

    @memoize(maxsize=None)
    def lookup(key: str) -> None:
        calls["count"] += 1
        return None

    assert lookup("a") is None
    assert lookup("a") is None
    assert calls["count"] == 1


def test_memoize_evicts_least_recently_used():
    calls: list[int] = []

    @memoize(maxsize=2)
    def identity(value: int) -> int:
        calls.append(value)
        return value

    identity(1)
    identity(2)
    identity(1)
    identity(3)
    identity(1)
    identity(2)
    assert calls == [1, 2, 3, 2]


def test_memoize_clear():
    calls = {"count": 0}

    @memoize(maxsize=8)
    def compute(value: int) -> int:
        calls["count"] += 1
        return value

    compute(3)
    compute(3)
    compute.cache_clear()  # type: ignore[attr-defined]
    compute(3)
    assert calls["count"] == 2
    assert compute.cache_metadata().hits == 0  # type: ignore[attr-defined]
