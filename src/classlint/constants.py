# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core configuration constants."""

from __future__ import annotations

from typing import Final

ALWAYS_EXCLUDE_DIRS: Final[frozenset[str]] = frozenset({"node_modules", "dist", "build"})

FILE_RESOLUTION_TTL_SECONDS: Final[float] = 1.0
REGISTRY_CACHE_MAX_ENTRIES: Final[int] = 8

MAX_PATTERN_LENGTH: Final[int] = 200
MAX_THEME_DEPTH: Final[int] = 10

DEFAULT_GRID_COLS_RANGE: Final[int] = 12
DEFAULT_GRID_ROWS_RANGE: Final[int] = 6
DEFAULT_GRID_COL_START_END_RANGE: Final[int] = 13
DEFAULT_GRID_ROW_START_END_RANGE: Final[int] = 7

QUIET_ENV_VAR: Final[str] = "CLASSLINT_QUIET"

# Utility prefixes that accept bracketed arbitrary values such as ``w-[100px]``.
ARBITRARY_VALUE_PREFIXES: Final[frozenset[str]] = frozenset(
    {
        # sizing
        "w",
        "h",
        "size",
        "min-w",
        "min-h",
        "max-w",
        "max-h",
        # spacing
        "m",
        "mx",
        "my",
        "mt",
        "mr",
        "mb",
        "ml",
        "ms",
        "me",
        "p",
        "px",
        "py",
        "pt",
        "pr",
        "pb",
        "pl",
        "ps",
        "pe",
        "gap",
        "gap-x",
        "gap-y",
        "space-x",
        "space-y",
        "scroll-m",
        "scroll-p",
        # layout and position
        "inset",
        "inset-x",
        "inset-y",
        "top",
        "right",
        "bottom",
        "left",
        "start",
        "end",
        "z",
        "order",
        "aspect",
        "columns",
        "basis",
        "flex",
        "grow",
        "shrink",
        "grid-cols",
        "grid-rows",
        "col",
        "row",
        "col-start",
        "col-end",
        "row-start",
        "row-end",
        "auto-cols",
        "auto-rows",
        "object",
        "origin",
        # typography
        "text",
        "font",
        "leading",
        "tracking",
        "indent",
        "decoration",
        "underline-offset",
        "line-clamp",
        "list",
        "content",
        # colours and backgrounds
        "bg",
        "from",
        "via",
        "to",
        "fill",
        "stroke",
        "accent",
        "caret",
        # borders and effects
        "border",
        "border-x",
        "border-y",
        "border-t",
        "border-r",
        "border-b",
        "border-l",
        "divide-x",
        "divide-y",
        "rounded",
        "rounded-t",
        "rounded-r",
        "rounded-b",
        "rounded-l",
        "outline",
        "outline-offset",
        "ring",
        "ring-offset",
        "shadow",
        "opacity",
        # filters
        "blur",
        "brightness",
        "contrast",
        "drop-shadow",
        "grayscale",
        "hue-rotate",
        "invert",
        "saturate",
        "sepia",
        "backdrop-blur",
        # transforms and transitions
        "rotate",
        "scale",
        "translate-x",
        "translate-y",
        "skew-x",
        "skew-y",
        "transition",
        "duration",
        "delay",
        "ease",
        "animate",
        # interactivity
        "cursor",
        "will-change",
    },
)

__all__ = [
    "ALWAYS_EXCLUDE_DIRS",
    "ARBITRARY_VALUE_PREFIXES",
    "DEFAULT_GRID_COLS_RANGE",
    "DEFAULT_GRID_COL_START_END_RANGE",
    "DEFAULT_GRID_ROWS_RANGE",
    "DEFAULT_GRID_ROW_START_END_RANGE",
    "FILE_RESOLUTION_TTL_SECONDS",
    "MAX_PATTERN_LENGTH",
    "MAX_THEME_DEPTH",
    "QUIET_ENV_VAR",
    "REGISTRY_CACHE_MAX_ENTRIES",
]
