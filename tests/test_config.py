# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models and loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from classlint.config import CatalogueSettings, ClassLintConfig, ConfigError, discover_config, load_config


def test_defaults() -> None:
    config = ClassLintConfig()
    assert config.stylesheet_patterns == []
    assert config.catalogue is None
    assert config.validation.allowlist == []


def test_from_mapping_normalises_keys() -> None:
    config = ClassLintConfig.from_mapping(
        {
            "sources": {
                "css": ["a/*.css"],
                "scss": ["b/*.scss"],
                "tailwind": {"config": "theme.json", "includePluginClasses": False},
            },
            "validation": {"ignore-patterns": ["js-*"], "objectStyleAttributes": ["classes"]},
        },
    )
    assert config.stylesheet_patterns == ["a/*.css", "b/*.scss"]
    assert config.catalogue == CatalogueSettings(config_path="theme.json", include_generated_classes=False)
    assert config.validation.ignore_patterns == ["js-*"]
    assert config.validation.object_style_attributes == ["classes"]


def test_boolean_catalogue_flag() -> None:
    assert ClassLintConfig.from_mapping({"sources": {"tailwind": True}}).catalogue is True


def test_invalid_mapping_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        ClassLintConfig.from_mapping({"validation": {"allowlist": "not-a-list"}})


def test_load_pyproject_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "demo"\n\n[tool.classlint.validation]\nallowlist = ["custom-*"]\n',
        encoding="utf-8",
    )
    assert load_config(path).validation.allowlist == ["custom-*"]


def test_pyproject_without_section_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(path) == ClassLintConfig()


def test_load_rejects_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "classlint.toml"
    path.write_text("[sources\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_discover_prefers_standalone_file(tmp_path: Path) -> None:
    assert discover_config(tmp_path) == ClassLintConfig()
    (tmp_path / "pyproject.toml").write_text('[tool.classlint.sources]\ncss = ["p.css"]\n', encoding="utf-8")
    assert discover_config(tmp_path).sources.css == ["p.css"]
    (tmp_path / "classlint.toml").write_text('[sources]\ncss = ["s.css"]\n', encoding="utf-8")
    assert discover_config(tmp_path).sources.css == ["s.css"]
