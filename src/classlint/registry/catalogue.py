# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generated utility-class catalogue derived from a design-system config.

The catalogue is the set of utility class names a design system makes
available, plus the variants it supports. It is produced from a declarative
JSON or TOML theme file. Theme scales expand into utility names; safelisted
names and layer stylesheets contribute further classes.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import CatalogueSetting, CatalogueSettings
from ..constants import (
    DEFAULT_GRID_COL_START_END_RANGE,
    DEFAULT_GRID_COLS_RANGE,
    DEFAULT_GRID_ROW_START_END_RANGE,
    DEFAULT_GRID_ROWS_RANGE,
    MAX_THEME_DEPTH,
)
from ..grammar import DEFAULT_VARIANTS
from .stylesheets import StylesheetExtractor, TreeSitterStylesheetExtractor

LOGGER = logging.getLogger(__name__)

CONFIG_FILE_NAMES: Final[tuple[str, ...]] = (
    "tailwind.config.json",
    "tailwind.config.toml",
    "classlint.theme.json",
)

DEFAULT_KEY: Final[str] = "DEFAULT"
_EXTEND_KEY: Final[str] = "extend"

_PALETTE: Final[tuple[str, ...]] = (
    "slate",
    "gray",
    "zinc",
    "neutral",
    "stone",
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
)
_SHADES: Final[tuple[str, ...]] = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
_SPACING_SCALE: Final[tuple[str, ...]] = (
    "0", "px", "0.5", "1", "1.5", "2", "2.5", "3", "3.5", "4", "5", "6", "7", "8", "9", "10", "11", "12",
    "14", "16", "20", "24", "28", "32", "36", "40", "44", "48", "52", "56", "60", "64", "72", "80", "96",
)  # fmt: skip


def _default_colors() -> Mapping[str, Any]:
    colors: dict[str, Any] = {name: name for name in ("inherit", "current", "transparent", "black", "white")}
    for hue in _PALETTE:
        colors[hue] = MappingProxyType({shade: f"{hue}-{shade}" for shade in _SHADES})
    return MappingProxyType(colors)


def _keys(*names: str) -> Mapping[str, str]:
    return MappingProxyType({name: name for name in names})


# Read-only at every level; resolve_theme copies before merging.
DEFAULT_THEME: Final[Mapping[str, Any]] = MappingProxyType({
    "colors": _default_colors(),
    "spacing": _keys(*_SPACING_SCALE),
    "screens": _keys("sm", "md", "lg", "xl", "2xl"),
    "fontSize": _keys("xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl", "7xl", "8xl", "9xl"),
    "fontWeight": _keys(
        "thin", "extralight", "light", "normal", "medium", "semibold", "bold", "extrabold", "black"
    ),
    "borderRadius": _keys("none", "sm", DEFAULT_KEY, "md", "lg", "xl", "2xl", "3xl", "full"),
    "borderWidth": _keys(DEFAULT_KEY, "0", "2", "4", "8"),
    "boxShadow": _keys("sm", DEFAULT_KEY, "md", "lg", "xl", "2xl", "inner", "none"),
    "opacity": _keys("0", "5", "10", "20", "25", "30", "40", "50", "60", "70", "75", "80", "90", "95", "100"),
    "zIndex": _keys("0", "10", "20", "30", "40", "50", "auto"),
    "lineHeight": _keys("none", "tight", "snug", "normal", "relaxed", "loose", "3", "4", "5", "6", "7", "8", "9", "10"),
    "letterSpacing": _keys("tighter", "tight", "normal", "wide", "wider", "widest"),
    "transitionDuration": _keys("0", "75", "100", "150", "200", "300", "500", "700", "1000"),
})

COLOR_PREFIXES: Final[tuple[str, ...]] = (
    "bg", "text", "border", "ring", "ring-offset", "outline", "fill", "stroke", "from", "via", "to",
    "decoration", "divide", "placeholder", "accent", "caret", "shadow",
)  # fmt: skip
SPACING_PREFIXES: Final[tuple[str, ...]] = (
    "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
    "p", "px", "py", "pt", "pr", "pb", "pl", "ps", "pe",
    "gap", "gap-x", "gap-y", "space-x", "space-y",
    "inset", "inset-x", "inset-y", "top", "right", "bottom", "left", "start", "end",
    "w", "h", "size", "basis", "translate-x", "translate-y", "scroll-m", "scroll-p", "indent",
)  # fmt: skip
NEGATABLE_PREFIXES: Final[frozenset[str]] = frozenset(
    {
        "m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me",
        "inset", "inset-x", "inset-y", "top", "right", "bottom", "left", "start", "end",
        "space-x", "space-y", "translate-x", "translate-y", "scroll-m",
    },
)  # fmt: skip
_MARGIN_PREFIXES: Final[tuple[str, ...]] = ("m", "mx", "my", "mt", "mr", "mb", "ml", "ms", "me")
_SIZE_PREFIXES: Final[tuple[str, ...]] = ("w", "h", "size", "basis", "min-w", "min-h", "max-w", "max-h")
_SIZE_KEYWORDS: Final[tuple[str, ...]] = (
    "auto", "full", "screen", "min", "max", "fit", "1/2", "1/3", "2/3", "1/4", "2/4", "3/4", "1/5", "4/5",
)  # fmt: skip

_SCALE_PREFIXES: Final[tuple[tuple[str, str], ...]] = (
    ("fontSize", "text"),
    ("fontWeight", "font"),
    ("borderRadius", "rounded"),
    ("borderWidth", "border"),
    ("boxShadow", "shadow"),
    ("opacity", "opacity"),
    ("zIndex", "z"),
    ("lineHeight", "leading"),
    ("letterSpacing", "tracking"),
    ("transitionDuration", "duration"),
)

STATIC_UTILITIES: Final[frozenset[str]] = frozenset(
    {
        "container", "sr-only", "not-sr-only",
        "block", "inline-block", "inline", "flex", "inline-flex", "grid", "inline-grid", "table",
        "table-row", "table-cell", "contents", "flow-root", "hidden",
        "static", "fixed", "absolute", "relative", "sticky", "visible", "invisible", "collapse",
        "flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse", "flex-wrap", "flex-wrap-reverse",
        "flex-nowrap", "flex-1", "flex-auto", "flex-initial", "flex-none", "grow", "grow-0", "shrink",
        "shrink-0", "items-start", "items-end", "items-center", "items-baseline", "items-stretch",
        "justify-start", "justify-end", "justify-center", "justify-between", "justify-around",
        "justify-evenly", "content-start", "content-end", "content-center", "content-between",
        "self-auto", "self-start", "self-end", "self-center", "self-stretch", "place-items-center",
        "place-content-center", "order-first", "order-last", "order-none",
        "text-left", "text-center", "text-right", "text-justify", "text-start", "text-end",
        "uppercase", "lowercase", "capitalize", "normal-case", "italic", "not-italic", "underline",
        "overline", "line-through", "no-underline", "truncate", "text-ellipsis", "text-clip",
        "whitespace-normal", "whitespace-nowrap", "whitespace-pre", "whitespace-pre-line",
        "whitespace-pre-wrap", "break-normal", "break-words", "break-all", "antialiased",
        "subpixel-antialiased", "font-sans", "font-serif", "font-mono",
        "overflow-auto", "overflow-hidden", "overflow-clip", "overflow-visible", "overflow-scroll",
        "overflow-x-auto", "overflow-y-auto", "overflow-x-hidden", "overflow-y-hidden",
        "border-solid", "border-dashed", "border-dotted", "border-double", "border-none",
        "outline-none", "ring", "ring-0", "ring-1", "ring-2", "ring-4", "ring-8", "ring-inset",
        "object-contain", "object-cover", "object-fill", "object-none", "object-scale-down",
        "aspect-auto", "aspect-square", "aspect-video", "list-none", "list-disc", "list-decimal",
        "list-inside", "list-outside", "pointer-events-none", "pointer-events-auto", "cursor-auto",
        "cursor-default", "cursor-pointer", "cursor-wait", "cursor-text", "cursor-move",
        "cursor-not-allowed", "select-none", "select-text", "select-all", "select-auto",
        "resize", "resize-none", "resize-x", "resize-y",
        "transition", "transition-none", "transition-all", "transition-colors", "transition-opacity",
        "transition-shadow", "transition-transform", "ease-linear", "ease-in", "ease-out", "ease-in-out",
        "animate-none", "animate-spin", "animate-ping", "animate-pulse", "animate-bounce",
        "transform", "transform-none", "filter", "filter-none", "blur", "grayscale", "invert", "sepia",
        "bg-fixed", "bg-local", "bg-scroll", "bg-cover", "bg-contain", "bg-center", "bg-no-repeat",
        "bg-repeat", "bg-gradient-to-t", "bg-gradient-to-tr", "bg-gradient-to-r", "bg-gradient-to-br",
        "bg-gradient-to-b", "bg-gradient-to-bl", "bg-gradient-to-l", "bg-gradient-to-tl",
        "grid-flow-row", "grid-flow-col", "grid-flow-dense", "grid-cols-none", "grid-rows-none",
        "col-auto", "col-span-full", "row-auto", "row-span-full", "box-border", "box-content",
        "float-left", "float-right", "float-none", "clear-both", "isolate", "isolation-auto",
        "mix-blend-normal", "mix-blend-multiply", "appearance-none", "will-change-auto",
        "will-change-transform",
    },
)  # fmt: skip


class CatalogueError(Exception):
    """Raised when a design-system configuration cannot be loaded."""


@dataclass(frozen=True, slots=True)
class Catalogue:
    """Utility class names and variants made available by a design system.

    Attributes:
        classes: Literal utility class names.
        variants: Variant names usable as ``variant:`` prefixes.
    """

    classes: frozenset[str]
    variants: frozenset[str]

    @classmethod
    def empty(cls) -> Catalogue:
        """Return a catalogue with no classes and no variants."""

        return cls(classes=frozenset(), variants=frozenset())


class DesignSystemConfig(BaseModel):
    """Declarative design-system configuration read from JSON or TOML."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    theme: dict[str, Any] = Field(default_factory=dict)
    safelist: list[Any] = Field(default_factory=list)
    variants: list[str] = Field(default_factory=list)
    css: list[str] = Field(default_factory=list)


class CatalogueGenerator(Protocol):
    """Contract for expanding a design-system configuration into a catalogue."""

    def generate(self, design: DesignSystemConfig, *, base_dir: Path, include_generated: bool) -> Catalogue:
        """Return the catalogue for ``design``.

        Args:
            design: Parsed design-system configuration.
            base_dir: Directory of the configuration file, used for relative paths.
            include_generated: Whether classes from layer stylesheets are included.

        Returns:
            Catalogue: Generated classes and variants.
        """
        raise NotImplementedError


def find_catalogue_config(config_path: str | None, cwd: str) -> Path | None:
    """Locate the design-system configuration file.

    Args:
        config_path: Explicit path, absolute or relative to ``cwd``.
        cwd: Project directory searched when no explicit path is given.

    Returns:
        Path | None: Existing configuration file, or ``None`` when not found.
        A missing explicit path is logged as a warning.
    """

    if config_path:
        candidate = Path(config_path) if os.path.isabs(config_path) else Path(cwd) / config_path
        if candidate.is_file():
            return candidate
        LOGGER.warning('Design-system config file not found at "%s"', config_path)
        return None
    for name in CONFIG_FILE_NAMES:
        candidate = Path(cwd) / name
        if candidate.is_file():
            return candidate
    return None


def read_design_config(path: Path) -> DesignSystemConfig:
    """Parse a JSON or TOML design-system configuration.

    Args:
        path: Configuration file; ``.toml`` files are read as TOML, anything
            else as JSON.

    Returns:
        DesignSystemConfig: Validated configuration.

    Raises:
        CatalogueError: If the file cannot be read, decoded, or validated.
    """

    try:
        if path.suffix == ".toml":
            with path.open("rb") as handle:
                payload: Any = tomllib.load(handle)
        else:
            payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise CatalogueError(f"Unable to read {path}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise CatalogueError(f"Design-system config at {path} must be an object")
    try:
        return DesignSystemConfig.model_validate(payload)
    except ValidationError as exc:
        raise CatalogueError(f"Invalid design-system config at {path}: {exc}") from exc


def extract_safelist_classes(safelist: Iterable[object] | None) -> set[str]:
    """Return the literal class names of a safelist; pattern entries are skipped."""

    if not safelist:
        return set()
    return {entry for entry in safelist if isinstance(entry, str) and entry}


def resolve_theme(theme: Mapping[str, Any]) -> dict[str, Any]:
    """Merge a user theme over :data:`DEFAULT_THEME`.

    Top-level theme keys replace the default scale; keys under ``extend`` are
    merged into it.

    Args:
        theme: User ``theme`` mapping.

    Returns:
        dict[str, Any]: Resolved theme.
    """

    resolved: dict[str, Any] = dict(DEFAULT_THEME)
    for key, value in theme.items():
        if key != _EXTEND_KEY:
            resolved[key] = value
    extend = theme.get(_EXTEND_KEY)
    if isinstance(extend, Mapping):
        for key, value in extend.items():
            base = resolved.get(key)
            if isinstance(base, Mapping) and isinstance(value, Mapping):
                resolved[key] = {**base, **value}
            else:
                resolved[key] = value
    return resolved


def flatten_scale(scale: object, *, depth: int = 0) -> Iterator[str]:
    """Yield the utility suffixes of a (possibly nested) theme scale.

    Nested keys are joined with ``-``; a ``DEFAULT`` key names its parent.
    Nesting deeper than ``MAX_THEME_DEPTH`` is ignored.

    Args:
        scale: Theme scale mapping, or a list of keys.
        depth: Current nesting depth.

    Yields:
        str: Suffix such as ``red-500``; ``""`` for a top-level ``DEFAULT``.
    """

    if depth > MAX_THEME_DEPTH:
        return
    if isinstance(scale, Mapping):
        for key, value in scale.items():
            name = str(key)
            if isinstance(value, Mapping):
                for suffix in flatten_scale(value, depth=depth + 1):
                    if suffix == "":
                        yield name
                    else:
                        yield f"{name}-{suffix}"
            elif name == DEFAULT_KEY:
                yield ""
            else:
                yield name
    elif isinstance(scale, list):
        for item in scale:
            yield str(item)


def _join(prefix: str, suffix: str) -> str:
    return prefix if suffix == "" else f"{prefix}-{suffix}"


def generate_utility_classes(theme: Mapping[str, Any]) -> set[str]:
    """Return utility class names generated from a resolved theme.

    Args:
        theme: Theme as returned by :func:`resolve_theme`.

    Returns:
        set[str]: Static utilities plus every theme-scale utility.
    """

    classes: set[str] = set(STATIC_UTILITIES)

    colors = list(flatten_scale(theme.get("colors")))
    for prefix in COLOR_PREFIXES:
        classes.update(_join(prefix, color) for color in colors if color)

    spacing = list(flatten_scale(theme.get("spacing")))
    for prefix in SPACING_PREFIXES:
        for step in spacing:
            if not step:
                continue
            classes.add(f"{prefix}-{step}")
            if prefix in NEGATABLE_PREFIXES and step != "0":
                classes.add(f"-{prefix}-{step}")
    classes.update(f"{prefix}-auto" for prefix in _MARGIN_PREFIXES)
    for prefix in _SIZE_PREFIXES:
        classes.update(f"{prefix}-{keyword}" for keyword in _SIZE_KEYWORDS)

    for scale_name, prefix in _SCALE_PREFIXES:
        classes.update(_join(prefix, suffix) for suffix in flatten_scale(theme.get(scale_name)))

    classes.update(f"grid-cols-{index}" for index in range(1, DEFAULT_GRID_COLS_RANGE + 1))
    classes.update(f"col-span-{index}" for index in range(1, DEFAULT_GRID_COLS_RANGE + 1))
    classes.update(f"grid-rows-{index}" for index in range(1, DEFAULT_GRID_ROWS_RANGE + 1))
    classes.update(f"row-span-{index}" for index in range(1, DEFAULT_GRID_ROWS_RANGE + 1))
    for index in range(1, DEFAULT_GRID_COL_START_END_RANGE + 1):
        classes.update((f"col-start-{index}", f"col-end-{index}"))
    for index in range(1, DEFAULT_GRID_ROW_START_END_RANGE + 1):
        classes.update((f"row-start-{index}", f"row-end-{index}"))
    return classes


def extract_variants(theme: Mapping[str, Any], custom_variants: Iterable[str]) -> set[str]:
    """Return the default variants plus screen names and custom variants."""

    variants = set(DEFAULT_VARIANTS)
    variants.update(suffix for suffix in flatten_scale(theme.get("screens")) if suffix)
    variants.update(variant for variant in custom_variants if variant)
    return variants


class ThemeCatalogueGenerator(CatalogueGenerator):
    """Generate the catalogue from safelist, theme scales, and layer stylesheets."""

    def __init__(self, extractor: StylesheetExtractor | None = None) -> None:
        """Create a generator.

        Args:
            extractor: Stylesheet extractor for layer stylesheets; defaults to
                :class:`TreeSitterStylesheetExtractor`.
        """

        self._extractor = extractor

    def _get_extractor(self) -> StylesheetExtractor:
        if self._extractor is None:
            self._extractor = TreeSitterStylesheetExtractor()
        return self._extractor

    def generate(self, design: DesignSystemConfig, *, base_dir: Path, include_generated: bool) -> Catalogue:
        """Return the catalogue described by ``design``.

        Args:
            design: Parsed design-system configuration.
            base_dir: Directory that relative ``css`` entries are resolved against.
            include_generated: Whether classes from ``css`` stylesheets are included.

        Returns:
            Catalogue: Safelist, theme-derived and (optionally) layer classes.
        """

        theme = resolve_theme(design.theme)
        classes = extract_safelist_classes(design.safelist)
        classes.update(generate_utility_classes(theme))
        if include_generated:
            classes.update(self._layer_classes(design.css, base_dir))
        return Catalogue(
            classes=frozenset(classes),
            variants=frozenset(extract_variants(theme, design.variants)),
        )

    def _layer_classes(self, stylesheets: Iterable[str], base_dir: Path) -> set[str]:
        classes: set[str] = set()
        for entry in stylesheets:
            path = Path(entry) if os.path.isabs(entry) else base_dir / entry
            try:
                source = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                LOGGER.warning('Failed to read layer stylesheet "%s": %s', path, exc)
                continue
            classes.update(self._get_extractor().extract(source, str(path)))
        return classes


def load_catalogue(
    setting: CatalogueSetting,
    cwd: str,
    *,
    generator: CatalogueGenerator | None = None,
) -> Catalogue:
    """Load the catalogue selected by ``setting``.

    Args:
        setting: ``None``/``False`` to disable, ``True`` to auto-detect, or
            explicit :class:`CatalogueSettings`.
        cwd: Project directory.
        generator: Catalogue generator; defaults to :class:`ThemeCatalogueGenerator`.

    Returns:
        Catalogue: Generated catalogue, or an empty one when disabled, when no
        configuration is found, or when loading fails (logged as a warning).
    """

    if not setting:
        return Catalogue.empty()
    config_path = setting.config_path if isinstance(setting, CatalogueSettings) else None
    include_generated = setting.include_generated_classes if isinstance(setting, CatalogueSettings) else True

    path = find_catalogue_config(config_path, cwd)
    if path is None:
        LOGGER.warning("Design-system config file not found, skipping utility catalogue")
        return Catalogue.empty()
    try:
        design = read_design_config(path)
    except CatalogueError as exc:
        LOGGER.warning("Failed to load utility catalogue: %s", exc)
        return Catalogue.empty()
    active = generator if generator is not None else ThemeCatalogueGenerator()
    try:
        return active.generate(design, base_dir=path.parent, include_generated=include_generated)
    except (CatalogueError, ValueError, TypeError, OSError) as exc:
        LOGGER.warning('Failed to generate utility catalogue from "%s": %s', path, exc)
        return Catalogue.empty()


__all__ = [
    "Catalogue",
    "CatalogueError",
    "CatalogueGenerator",
    "DEFAULT_THEME",
    "DesignSystemConfig",
    "ThemeCatalogueGenerator",
    "extract_safelist_classes",
    "extract_variants",
    "find_catalogue_config",
    "flatten_scale",
    "generate_utility_classes",
    "load_catalogue",
    "read_design_config",
    "resolve_theme",
]
