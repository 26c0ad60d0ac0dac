# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the Tree-sitter stylesheet extractor."""

from __future__ import annotations

import logging

from classlint.registry.stylesheets import StylesheetExtractor, TreeSitterStylesheetExtractor


def test_extracts_simple_selectors() -> None:
    extractor = TreeSitterStylesheetExtractor()
    assert extractor.extract(".btn{} .card{}", "inline.css") == {"btn", "card"}


def test_extracts_compound_and_complex_selectors() -> None:
    source = """
    div.panel > .panel-title, .a.b ~ .c { color: red; }
    .btn:hover { color: blue; }
    ul li:not(.hidden) { display: block; }
    """
    names = TreeSitterStylesheetExtractor().extract(source, "complex.css")
    assert {"panel", "panel-title", "a", "b", "c", "btn", "hidden"} <= names
    assert "hover" not in names
    assert "not" not in names


def test_extracts_inside_at_rules() -> None:
    source = "@media (min-width: 640px) { .responsive { display: none; } }"
    assert TreeSitterStylesheetExtractor().extract(source, "media.css") == {"responsive"}


def test_ignores_declarations_and_comments() -> None:
    source = "/* .commented {} */ .real { background: url(a.b.png); }"
    assert TreeSitterStylesheetExtractor().extract(source, "x.css") == {"real"}


def test_partial_parse_keeps_valid_rules(caplog) -> None:
    source = ".good { color: red; }\n.broken { color: "
    with caplog.at_level(logging.WARNING, logger="classlint"):
        names = TreeSitterStylesheetExtractor().extract(source, "broken.css")
    assert "good" in names
    assert "broken.css" in caplog.text


def test_satisfies_extractor_protocol() -> None:
    assert isinstance(TreeSitterStylesheetExtractor(), StylesheetExtractor)


def test_scss_ampersand_nesting_is_flattened() -> None:
    scss = """
    .btn {
      color: blue;

      &:hover {
        color: red;
      }

      &.active {
        color: green;
      }

      &-primary {
        background: blue;
      }
    }
    """
    names = TreeSitterStylesheetExtractor().extract(scss, "button.scss")
    assert {"btn", "active", "btn-primary"} <= names
    assert "hover" not in names
    assert "-primary" not in names


def test_scss_variables_and_empty_rules(caplog) -> None:
    scss = "$primary: blue;\n.btn { color: $primary; }\n.placeholder {}\n"
    with caplog.at_level(logging.WARNING, logger="classlint"):
        names = TreeSitterStylesheetExtractor().extract(scss, "vars.scss")
    assert {"btn", "placeholder"} <= names
    assert "vars.scss" not in caplog.text


def test_scss_compile_failure_falls_back_to_raw_parse(tmp_path, caplog) -> None:
    path = tmp_path / "broken.scss"
    scss = '@import "does-not-exist";\n.kept { color: red; }\n'
    with caplog.at_level(logging.WARNING, logger="classlint"):
        names = TreeSitterStylesheetExtractor().extract(scss, str(path))
    assert "kept" in names
    assert "Failed to compile SCSS" in caplog.text


def test_css_files_are_not_compiled() -> None:
    names = TreeSitterStylesheetExtractor().extract(".btn { &-primary { color: red; } }", "plain.css")
    assert "btn" in names
    assert "btn-primary" not in names
