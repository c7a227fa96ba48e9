# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (options, logging, errors, catalog context)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console
from rich.text import Text

from ..catalog import Catalog, CatalogIntegrityError, CatalogValidationError, load_catalog
from ..catalog.model import NamespaceKind
from ..config import AliasTreeConfig, ConfigError, load_config
from ..console import ConsolePreset, console_for
from ..resolution import LeafResolver, StaticResolutionEngine
from ..tree import AccessorStore, build_store

CATALOG_ERROR_EXIT: Final[int] = 1
CONFIG_ERROR_EXIT: Final[int] = 2

RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root containing pyproject.toml."),
]
CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Catalog file overriding [tool.aliastree].catalog_path."),
]
KindOption = Annotated[
    NamespaceKind | None,
    typer.Option("--kind", "-k", case_sensitive=False, help="Restrict output to one namespace."),
]
ColorOption = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Toggle ANSI colour output."),
]
EmojiOption = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji prefixes."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = CATALOG_ERROR_EXIT) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


_MESSAGE_STYLES: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


@dataclass(frozen=True, slots=True)
class CLILogger:
    """Print status lines with emoji prefixes and colours chosen by a :class:`ConsolePreset`."""

    preset: ConsolePreset

    @property
    def console(self) -> Console:
        """Return the console shared by every command using this preset."""

        return console_for(self.preset)

    def fail(self, message: str) -> None:
        """Log a failure message."""

        self._emit("fail", message)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        self._emit("warn", message)

    def ok(self, message: str) -> None:
        """Log a success message."""

        self._emit("ok", message)

    def info(self, message: str) -> None:
        """Log an informational message."""

        self._emit("info", message)

    def _emit(self, level: str, message: str) -> None:
        prefix, style = _MESSAGE_STYLES[level]
        text = Text(f"{prefix}{message}" if self.preset.emoji else message)
        if self.preset.color:
            text.stylize(style)
        self.console.print(text)


@dataclass(slots=True)
class CatalogContext:
    """Everything a command needs once the catalog has been compiled."""

    config: AliasTreeConfig
    catalog: Catalog
    store: AccessorStore
    resolver: LeafResolver
    logger: CLILogger
    console: Console


def load_settings(
    root: Path,
    *,
    catalog: Path | None,
    color: bool | None,
    emoji: bool | None,
) -> AliasTreeConfig:
    """Return configuration for ``root`` with CLI overrides applied.

    Raises:
        CLIError: If the configuration is invalid.
    """

    catalog_path = catalog.resolve() if catalog is not None else None
    overrides = {"catalog_path": catalog_path, "use_color": color, "use_emoji": emoji}
    try:
        return load_config(root.resolve(), overrides=overrides)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=CONFIG_ERROR_EXIT) from exc


def build_logger(config: AliasTreeConfig) -> CLILogger:
    """Return a :class:`CLILogger` honouring ``config`` presentation flags."""

    return CLILogger(ConsolePreset.from_config(config))


def prepare_context(config: AliasTreeConfig) -> CatalogContext:
    """Load and compile the configured catalog.

    Args:
        config: Validated configuration.

    Returns:
        CatalogContext: Compiled store, resolver, and output helpers.

    Raises:
        CLIError: If the catalog is missing, malformed, or fails validation.
    """

    path = config.catalog_path
    if not path.is_file():
        raise CLIError(f"catalog file not found: {path}")
    try:
        catalog = load_catalog(path)
        store = build_store(catalog)
    except (CatalogIntegrityError, CatalogValidationError) as exc:
        raise CLIError(str(exc)) from exc
    resolver = LeafResolver(store, StaticResolutionEngine(catalog), memoize=config.memoize)
    logger = build_logger(config)
    return CatalogContext(
        config=config,
        catalog=catalog,
        store=store,
        resolver=resolver,
        logger=logger,
        console=logger.console,
    )


def open_context(
    root: Path,
    *,
    catalog: Path | None,
    color: bool | None,
    emoji: bool | None,
) -> CatalogContext:
    """Load configuration for ``root`` and compile the configured catalog.

    Raises:
        CLIError: If configuration or catalog loading fails.
    """

    return prepare_context(load_settings(root, catalog=catalog, color=color, emoji=emoji))


def fallback_logger(*, color: bool | None, emoji: bool | None) -> CLILogger:
    """Return a logger for failures that happen before configuration is available."""

    return CLILogger(ConsolePreset.from_flags(color=color, emoji=emoji))


__all__ = [
    "CATALOG_ERROR_EXIT",
    "CONFIG_ERROR_EXIT",
    "CLIError",
    "CLILogger",
    "CatalogContext",
    "CatalogOption",
    "ColorOption",
    "EmojiOption",
    "KindOption",
    "RootOption",
    "build_logger",
    "load_settings",
    "prepare_context",
    "fallback_logger",
    "open_context",
]
