# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for validating class attribute values."""

from __future__ import annotations

from pathlib import Path

import typer

from .config import ClassLintConfig, ConfigError, discover_config, load_config
from .engine import default_engine
from .logging import configure_logging, fail, info, ok

app = typer.Typer(
    name="classlint",
    help="Validate class names against stylesheets and a utility catalogue.",
    add_completion=False,
    no_args_is_help=True,
)


def _load(config_path: Path | None, cwd: Path) -> ClassLintConfig:
    try:
        if config_path is not None:
            return load_config(config_path.expanduser().resolve())
        return discover_config(cwd)
    except ConfigError as exc:
        fail(str(exc))
        raise typer.Exit(code=2) from exc


def _resolve_cwd(cwd: Path | None) -> Path:
    return (cwd or Path.cwd()).expanduser().resolve()


@app.command()
def check(
    values: list[str] = typer.Argument(..., metavar="VALUE...", help="Class attribute values to validate."),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Configuration file to load."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Project directory (defaults to the current one)."),
    attribute: str | None = typer.Option(None, "--attribute", "-a", help="Attribute name the values belong to."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress configuration warnings."),
) -> None:
    """Validate each VALUE as one class attribute and report unknown classes."""
    configure_logging(quiet=True if quiet else None)
    root = _resolve_cwd(cwd)
    config = _load(config_path, root)
    engine = default_engine()

    reported = 0
    for value in values:
        diagnostics = engine.validate_attribute(
            value,
            config=config,
            cwd=str(root),
            attribute=attribute,
            report_at=value,
        )
        for diagnostic in diagnostics:
            fail(f"{value!r}: {diagnostic.message}")
        reported += len(diagnostics)

    if reported:
        raise typer.Exit(code=1)
    ok("All class names are valid")


@app.command()
def classes(
    config_path: Path | None = typer.Option(None, "--config", "-c", help="Configuration file to load."),
    cwd: Path | None = typer.Option(None, "--cwd", help="Project directory (defaults to the current one)."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress configuration warnings."),
) -> None:
    """List the literal class names known to the registry."""
    configure_logging(quiet=True if quiet else None)
    root = _resolve_cwd(cwd)
    config = _load(config_path, root)
    registry = default_engine().registry_for(config, str(root))

    names = sorted(registry.get_all_classes())
    for name in names:
        typer.echo(name)
    info(f"{len(names)} classes, {len(registry.get_valid_variants())} variants")


__all__ = ["app"]
