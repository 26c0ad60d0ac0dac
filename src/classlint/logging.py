# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console helpers and the bridge from library logging to them."""

from __future__ import annotations

import logging
import os
import sys
from typing import Final, Literal

from rich.console import Console
from rich.text import Text

from .cache.in_memory import memoize
from .constants import QUIET_ENV_VAR

PACKAGE_LOGGER_NAME: Final[str] = "classlint"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@memoize(maxsize=8)
def get_console(*, color: bool, emoji: bool) -> Console:
    """Return a Rich console configured for the colour and emoji preferences.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.

    Returns:
        Console: Shared console for the given preferences.
    """

    color_system: Literal["auto"] | None = "auto" if color else None
    return Console(color_system=color_system, no_color=not color, emoji=emoji, soft_wrap=True, highlight=False)


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(msg: str, *, style: str, use_emoji: bool, use_color: bool | None) -> None:
    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    _print_line(f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a success message."""

    _print_line(f"{emoji('✅ ', use_emoji)}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool = False, use_color: bool | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


def quiet_from_env() -> bool:
    """Return whether the quiet switch is set in the environment."""

    return os.environ.get(QUIET_ENV_VAR, "").strip().lower() in _TRUTHY


class ConsoleWarningHandler(logging.Handler):
    """Forward package log records of level WARNING and above to :func:`warn`."""

    def __init__(self, *, use_color: bool | None = None) -> None:
        super().__init__(level=logging.WARNING)
        self._use_color = use_color

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except (TypeError, ValueError):
            self.handleError(record)
            return
        warn(f"[classlint] {message}", use_color=self._use_color)


def configure_logging(*, quiet: bool | None = None, use_color: bool | None = None) -> logging.Logger:
    """Route package warnings to the console unless quiet mode is active.

    Args:
        quiet: Explicit quiet flag; ``None`` defers to ``CLASSLINT_QUIET``.
        use_color: Optional explicit colour flag overriding TTY detection.

    Returns:
        logging.Logger: The configured package logger.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleWarningHandler):
            logger.removeHandler(handler)
    silenced = quiet_from_env() if quiet is None else quiet
    if not silenced:
        logger.addHandler(ConsoleWarningHandler(use_color=use_color))
    logger.setLevel(logging.ERROR if silenced else logging.WARNING)
    return logger


__all__ = [
    "ConsoleWarningHandler",
    "configure_logging",
    "detect_tty",
    "fail",
    "get_console",
    "info",
    "ok",
    "quiet_from_env",
    "warn",
]
