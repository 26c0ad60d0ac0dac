# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Provide in-process caching utilities for classlint."""

from __future__ import annotations

from .in_memory import CacheInfo, memoize

__all__ = ["CacheInfo", "memoize"]
