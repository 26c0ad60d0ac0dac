# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from classlint.engine import ClassValidationEngine, default_engine
from classlint.logging import ConsoleWarningHandler

_CLASS_SELECTOR = re.compile(r"\.([A-Za-z_][\w-]*)")


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RegexStylesheetExtractor:
    """Stylesheet extractor recording calls and matching ``.name`` selectors."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def extract(self, source_text: str, file_path: str) -> set[str]:
        self.calls.append(file_path)
        return set(_CLASS_SELECTOR.findall(source_text))


@pytest.fixture(autouse=True)
def reset_classlint_logging() -> Iterator[None]:
    """Undo console handlers and levels installed by CLI invocations."""
    yield
    logger = logging.getLogger("classlint")
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleWarningHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    default_engine().clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_extractor() -> RegexStylesheetExtractor:
    return RegexStylesheetExtractor()


@pytest.fixture
def engine(fake_extractor: RegexStylesheetExtractor) -> ClassValidationEngine:
    """Return an engine with private caches and a regex stylesheet extractor."""
    return ClassValidationEngine(stylesheet_extractor=fake_extractor)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing ``content`` to ``tmp_path / relative``."""

    def _write(relative: str, content: str) -> Path:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write
