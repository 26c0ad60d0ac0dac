# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for console helpers and warning routing."""

from __future__ import annotations

import logging

import pytest

from classlint.logging import ConsoleWarningHandler, configure_logging, fail, ok, quiet_from_env


def test_console_helpers_print_plain_text(capsys: pytest.CaptureFixture[str]) -> None:
    ok("done", use_color=False)
    fail("broken [not markup]", use_color=False)
    out = capsys.readouterr().out
    assert "done" in out
    assert "broken [not markup]" in out


def test_configure_logging_routes_warnings(capsys: pytest.CaptureFixture[str]) -> None:
    logger = configure_logging(quiet=False, use_color=False)
    logging.getLogger("classlint.registry.files").warning("stat failed for %s", "a.css")
    assert "[classlint] stat failed for a.css" in capsys.readouterr().out
    assert sum(isinstance(handler, ConsoleWarningHandler) for handler in logger.handlers) == 1

    configure_logging(quiet=False, use_color=False)
    assert sum(isinstance(handler, ConsoleWarningHandler) for handler in logger.handlers) == 1


def test_quiet_mode_from_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("CLASSLINT_QUIET", "true")
    assert quiet_from_env()
    logger = configure_logging()
    logging.getLogger("classlint.engine").warning("hidden")
    assert "hidden" not in capsys.readouterr().out
    assert not any(isinstance(handler, ConsoleWarningHandler) for handler in logger.handlers)

    monkeypatch.setenv("CLASSLINT_QUIET", "0")
    assert not quiet_from_env()
