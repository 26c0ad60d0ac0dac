# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for classlint."""

from __future__ import annotations

import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, TypeAlias

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
STANDALONE_FILENAME: Final[str] = "classlint.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "classlint"

_CAMEL_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogueSettings(BaseModel):
    """Settings for the generated utility-class catalogue."""

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True, frozen=True)

    config_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("config_path", "config"),
    )
    include_generated_classes: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "include_generated_classes",
            "include_plugin_classes",
            "includeGeneratedClasses",
            "includePluginClasses",
        ),
    )


CatalogueSetting: TypeAlias = bool | CatalogueSettings | None


class SourcesConfig(BaseModel):
    """Where literal and generated class names come from."""

    model_config = ConfigDict(validate_assignment=True)

    css: list[str] = Field(default_factory=list)
    scss: list[str] = Field(default_factory=list)
    tailwind: bool | CatalogueSettings | None = None


class ValidationConfig(BaseModel):
    """List patterns and attribute handling applied during validation."""

    model_config = ConfigDict(validate_assignment=True)

    allowlist: list[str] = Field(default_factory=list)
    blocklist: list[str] = Field(default_factory=list)
    ignore_patterns: list[str] = Field(default_factory=list)
    object_style_attributes: list[str] = Field(default_factory=list)


class ClassLintConfig(BaseModel):
    """Top-level configuration consumed by the validation engine."""

    model_config = ConfigDict(validate_assignment=True)

    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @property
    def stylesheet_patterns(self) -> list[str]:
        """Return CSS then SCSS glob patterns."""

        return [*self.sources.css, *self.sources.scss]

    @property
    def catalogue(self) -> CatalogueSetting:
        """Return the catalogue flag or settings."""

        return self.sources.tailwind

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ClassLintConfig:
        """Build a configuration from a raw mapping.

        Args:
            data: Mapping whose keys may be snake, kebab, or camel case.

        Returns:
            ClassLintConfig: Validated configuration.

        Raises:
            ConfigError: If the mapping fails validation.
        """

        try:
            return cls.model_validate(_normalise_keys(data))
        except ValidationError as exc:
            raise ConfigError(f"Invalid classlint configuration: {exc}") from exc


def _normalise_key(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


def _normalise_keys(value: Any) -> Any:
    """Return ``value`` with every mapping key converted to snake case."""

    if isinstance(value, Mapping):
        return {_normalise_key(str(key)): _normalise_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalise_keys(item) for item in value]
    return value


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc


def load_config(path: Path) -> ClassLintConfig:
    """Load configuration from ``path``.

    ``pyproject.toml`` files contribute their ``[tool.classlint]`` table; any
    other TOML file is read as a whole.

    Args:
        path: Path to ``pyproject.toml`` or a standalone TOML file.

    Returns:
        ClassLintConfig: Validated configuration (defaults when a pyproject
        file has no ``[tool.classlint]`` table).

    Raises:
        ConfigError: If the file is unreadable or invalid.
    """

    document = _read_toml(path)
    if path.name == PYPROJECT_FILENAME:
        tool_section = document.get(PYPROJECT_TOOL_KEY)
        section = tool_section.get(PYPROJECT_SECTION_KEY) if isinstance(tool_section, Mapping) else None
        if section is None:
            return ClassLintConfig()
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
        document = dict(section)
    return ClassLintConfig.from_mapping(document)


def discover_config(cwd: Path) -> ClassLintConfig:
    """Load the configuration governing ``cwd``.

    Args:
        cwd: Project directory.

    Returns:
        ClassLintConfig: ``classlint.toml`` when present, else
        ``pyproject.toml``, else defaults.
    """

    for filename in (STANDALONE_FILENAME, PYPROJECT_FILENAME):
        candidate = cwd / filename
        if candidate.is_file():
            return load_config(candidate)
    return ClassLintConfig()


__all__ = [
    "CatalogueSetting",
    "CatalogueSettings",
    "ClassLintConfig",
    "ConfigError",
    "SourcesConfig",
    "ValidationConfig",
    "discover_config",
    "load_config",
]
