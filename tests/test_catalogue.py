# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the design-system catalogue."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from classlint.config import CatalogueSettings
from classlint.registry.catalogue import (
    DEFAULT_THEME,
    Catalogue,
    CatalogueError,
    DesignSystemConfig,
    ThemeCatalogueGenerator,
    extract_safelist_classes,
    find_catalogue_config,
    flatten_scale,
    load_catalogue,
    read_design_config,
    resolve_theme,
)


def _nested(keys: list[str]) -> dict:
    scale: dict = {keys[-1]: "value"}
    for key in reversed(keys[:-1]):
        scale = {key: scale}
    return scale


def test_find_config_auto_detect_order(tmp_path: Path, write_file) -> None:
    assert find_catalogue_config(None, str(tmp_path)) is None
    write_file("classlint.theme.json", "{}")
    assert find_catalogue_config(None, str(tmp_path)) == tmp_path / "classlint.theme.json"
    write_file("tailwind.config.json", "{}")
    assert find_catalogue_config(None, str(tmp_path)) == tmp_path / "tailwind.config.json"


def test_find_config_explicit_path(tmp_path: Path, write_file, caplog) -> None:
    target = write_file("design/theme.toml", "")
    assert find_catalogue_config("design/theme.toml", str(tmp_path)) == target
    assert find_catalogue_config(str(target), "/elsewhere") == target
    with caplog.at_level(logging.WARNING, logger="classlint"):
        assert find_catalogue_config("missing.json", str(tmp_path)) is None
    assert "missing.json" in caplog.text


def test_read_design_config_json_and_toml(tmp_path: Path, write_file) -> None:
    json_path = write_file("a.json", json.dumps({"safelist": ["x"], "unknown": 1}))
    assert read_design_config(json_path).safelist == ["x"]

    toml_path = write_file("a.toml", 'variants = ["hocus"]\n[theme.extend.colors]\nbrand = "#123456"\n')
    design = read_design_config(toml_path)
    assert design.variants == ["hocus"]
    assert design.theme["extend"]["colors"]["brand"] == "#123456"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"variants": 5}'])
def test_read_design_config_rejects_bad_input(tmp_path: Path, write_file, content: str) -> None:
    path = write_file("bad.json", content)
    with pytest.raises(CatalogueError):
        read_design_config(path)


def test_safelist_keeps_only_strings() -> None:
    assert extract_safelist_classes(["keep", {"pattern": "bg-.*"}, "", None]) == {"keep"}
    assert extract_safelist_classes(None) == set()


def test_flatten_scale_handles_default_and_depth() -> None:
    assert set(flatten_scale({"brand": {"DEFAULT": "#1", "light": "#2"}, "plain": "#3"})) == {
        "brand",
        "brand-light",
        "plain",
    }
    shallow = [f"k{index}" for index in range(6)]
    assert list(flatten_scale(_nested(shallow))) == ["-".join(shallow)]
    assert list(flatten_scale(_nested([f"k{index}" for index in range(12)]))) == []
    assert list(flatten_scale(["a", 1])) == ["a", "1"]


def test_resolve_theme_override_and_extend() -> None:
    theme = resolve_theme({"colors": {"ink": "#000"}, "extend": {"spacing": {"128": "32rem"}}})
    assert theme["colors"] == {"ink": "#000"}
    assert "128" in theme["spacing"]
    assert "4" in theme["spacing"]


def test_default_theme_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_THEME["spacing"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_THEME["spacing"]["999"] = "999"
    with pytest.raises(TypeError):
        DEFAULT_THEME["colors"]["red"]["500"] = "pink-500"

    theme = resolve_theme({"extend": {"spacing": {"128": "32rem"}, "colors": {"brand": "#123"}}})
    theme["spacing"]["256"] = "64rem"

    assert "128" not in DEFAULT_THEME["spacing"]
    assert "256" not in DEFAULT_THEME["spacing"]
    assert "brand" not in DEFAULT_THEME["colors"]
    assert DEFAULT_THEME["colors"]["red"]["500"] == "red-500"


def test_generator_builds_classes_and_variants(tmp_path: Path, write_file, fake_extractor) -> None:
    write_file("layer.css", ".from-layer {}")
    design = DesignSystemConfig(
        theme={
            "screens": {"tablet": "640px"},
            "extend": {"colors": {"brand": {"DEFAULT": "#111", "light": "#222"}}},
        },
        safelist=["keep-me", {"pattern": "x"}],
        variants=["hocus"],
        css=["layer.css"],
    )
    catalogue = ThemeCatalogueGenerator(fake_extractor).generate(design, base_dir=tmp_path, include_generated=True)

    expected = {
        "keep-me",
        "flex",
        "bg-brand",
        "text-brand-light",
        "bg-red-500",
        "border-white",
        "mt-4",
        "-mt-4",
        "mx-auto",
        "w-1/2",
        "grid-cols-12",
        "col-start-13",
        "row-end-7",
        "rounded",
        "rounded-lg",
        "shadow",
        "font-bold",
        "text-xl",
        "z-50",
        "opacity-50",
        "from-layer",
    }
    assert expected <= catalogue.classes
    assert not {"-mt-0", "-p-4", "grid-cols-13", "row-start-8", "x"} & catalogue.classes
    assert {"hover", "md", "tablet", "hocus"} <= catalogue.variants


def test_generator_skips_layer_classes_when_disabled(tmp_path: Path, write_file, fake_extractor) -> None:
    write_file("layer.css", ".from-layer {}")
    design = DesignSystemConfig(css=["layer.css", "missing.css"])
    generator = ThemeCatalogueGenerator(fake_extractor)

    assert "from-layer" not in generator.generate(design, base_dir=tmp_path, include_generated=False).classes
    assert fake_extractor.calls == []
    assert "from-layer" in generator.generate(design, base_dir=tmp_path, include_generated=True).classes


def test_load_catalogue_disabled_and_missing(tmp_path: Path, caplog) -> None:
    assert load_catalogue(None, str(tmp_path)) == Catalogue.empty()
    assert load_catalogue(False, str(tmp_path)) == Catalogue.empty()
    with caplog.at_level(logging.WARNING, logger="classlint"):
        assert load_catalogue(True, str(tmp_path)) == Catalogue.empty()
    assert "not found" in caplog.text


def test_load_catalogue_auto_detect(tmp_path: Path, write_file, fake_extractor) -> None:
    write_file("tailwind.config.json", json.dumps({"safelist": ["special"]}))
    catalogue = load_catalogue(True, str(tmp_path), generator=ThemeCatalogueGenerator(fake_extractor))
    assert "special" in catalogue.classes
    assert "hover" in catalogue.variants


def test_load_catalogue_invalid_config_degrades(tmp_path: Path, write_file, caplog) -> None:
    write_file("theme.json", "{broken")
    with caplog.at_level(logging.WARNING, logger="classlint"):
        catalogue = load_catalogue(CatalogueSettings(config_path="theme.json"), str(tmp_path))
    assert catalogue == Catalogue.empty()
    assert "Failed to load utility catalogue" in caplog.text


def test_load_catalogue_generator_failure_degrades(tmp_path: Path, write_file, caplog) -> None:
    write_file("tailwind.config.json", "{}")

    class ExplodingGenerator:
        def generate(self, design, *, base_dir, include_generated):
            raise ValueError("bad theme")

    with caplog.at_level(logging.WARNING, logger="classlint"):
        catalogue = load_catalogue(True, str(tmp_path), generator=ExplodingGenerator())
    assert catalogue == Catalogue.empty()
    assert "bad theme" in caplog.text


def test_load_catalogue_honours_include_generated(tmp_path: Path, write_file, fake_extractor) -> None:
    write_file("tailwind.config.json", json.dumps({"css": ["layer.css"]}))
    write_file("layer.css", ".layered {}")
    settings = CatalogueSettings(include_generated_classes=False)
    catalogue = load_catalogue(settings, str(tmp_path), generator=ThemeCatalogueGenerator(fake_extractor))
    assert "layered" not in catalogue.classes
