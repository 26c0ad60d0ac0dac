# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for wildcard list patterns."""

from __future__ import annotations

import time

import pytest

from classlint.patterns import (
    PatternSet,
    compile_pattern,
    is_wildcard,
    matches_any,
    matches_pattern,
    split_patterns,
    validate_pattern,
)


def test_wildcard_matches_whole_name() -> None:
    compiled = compile_pattern("custom-*")
    assert compiled is not None
    assert compiled.matches("custom-button")
    assert compiled.matches("custom-")
    assert not compiled.matches("other")
    assert not compiled.matches("my-custom-button")
    assert compiled.matches("custom-button") is compiled.matches("custom-button")


def test_compile_pattern_is_cached() -> None:
    assert compile_pattern("btn-*") is compile_pattern("btn-*")


def test_regex_metacharacters_are_literal() -> None:
    assert matches_pattern("btn.primary", "btn.primary")
    assert not matches_pattern("btnXprimary", "btn.primary")
    assert matches_pattern("w-1/2", "w-1/2")


def test_matching_is_case_sensitive() -> None:
    assert not matches_pattern("Custom-a", "custom-*")


def test_double_wildcard_collapses() -> None:
    assert matches_pattern("a-b-c", "a-**")
    assert matches_pattern("x-middle-y", "x-*-y")


def test_empty_pattern_matches_empty_string_only() -> None:
    assert matches_pattern("", "")
    assert not matches_pattern("a", "")


@pytest.mark.parametrize(
    "pattern",
    [
        "a***",
        "a++",
        "(a+)+",
        "(ab*)*",
        "x" * 201,
    ],
)
def test_unsafe_patterns_are_rejected(pattern: str) -> None:
    assert not validate_pattern(pattern)
    assert compile_pattern(pattern) is None
    assert not matches_pattern(pattern, pattern)


def test_pattern_at_length_limit_is_accepted() -> None:
    assert validate_pattern("x" * 200)


def test_matches_any_and_is_wildcard() -> None:
    assert matches_any("icon-home", ["btn", "icon-*"])
    assert not matches_any("icon-home", [])
    assert is_wildcard("icon-*")
    assert not is_wildcard("icon")


def test_split_patterns_keeps_wildcard_order() -> None:
    literals, wildcards = split_patterns(["b-*", "alpha", "a-*", "beta"])
    assert literals == frozenset({"alpha", "beta"})
    assert wildcards == ("b-*", "a-*")


def test_pattern_set_drops_invalid_entries() -> None:
    patterns = PatternSet(["ok-*", "bad***"])
    assert len(patterns) == 1
    assert patterns.sources == ("ok-*",)
    assert patterns.matches("ok-1")
    assert not patterns.matches("bad")
    assert not PatternSet()


def test_many_wildcards_match_without_backtracking() -> None:
    compiled = compile_pattern("*a" * 12 + "*b")
    assert compiled is not None

    started = time.perf_counter()
    assert not compiled.matches("a" * 36)
    assert not compiled.matches("a" * 5000)
    assert compiled.matches("a" * 12 + "b")
    assert time.perf_counter() - started < 1.0


def test_segments_are_placed_in_order() -> None:
    assert matches_pattern("x-ab-y", "x-*a*b*-y")
    assert not matches_pattern("x-ba-y", "x-*a*b*-y")
    assert not matches_pattern("ab", "ab*ab")
    assert matches_pattern("abab", "ab*ab")
    assert matches_pattern("anything", "*")
