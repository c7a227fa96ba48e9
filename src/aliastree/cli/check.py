# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Validate a catalog, resolve every leaf, and report its tree checksum."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..catalog.checksum import compute_tree_checksum
from ..catalog.errors import DanglingAliasError
from ..catalog.model import NamespaceKind
from ..rendering import summary_table
from .shared import CatalogOption, CLIError, ColorOption, EmojiOption, RootOption, fallback_logger, open_context


def run_check(
    root: Path,
    *,
    catalog: Path | None = None,
    resolve: bool = True,
    color: bool | None = None,
    emoji: bool | None = None,
) -> int:
    """Compile the catalog and report problems.

    Args:
        root: Project root supplying configuration.
        catalog: Optional catalog path override.
        resolve: When ``True`` every leaf is resolved to surface dangling references.
        color: Optional colour override.
        emoji: Optional emoji override.

    Returns:
        int: ``0`` when the catalog compiles and resolves cleanly, otherwise non-zero.
    """

    try:
        context = open_context(root, catalog=catalog, color=color, emoji=emoji)
    except CLIError as exc:
        fallback_logger(color=color, emoji=emoji).fail(str(exc))
        return exc.exit_code

    context.logger.info(f"catalog: {context.config.catalog_path}")
    context.console.print(summary_table(context.store))
    problems: list[str] = []
    if not resolve:
        context.logger.warn("leaf resolution skipped; dangling references are not detected")
    else:
        for kind in NamespaceKind:
            for node in context.store.leaves(kind):
                try:
                    context.resolver.resolve(node)
                except DanglingAliasError as exc:
                    problems.append(f"{kind.value} '{node.dotted_path}': {exc}")
    for problem in problems:
        context.logger.fail(problem)
    if problems:
        return 1
    context.logger.ok(
        f"{len(context.catalog)} entries compiled into {len(context.store)} nodes "
        f"(checksum {compute_tree_checksum(context.store)})",
    )
    return 0


def check_command(
    root: RootOption = Path.cwd(),
    catalog: CatalogOption = None,
    resolve: Annotated[
        bool,
        typer.Option("--resolve/--no-resolve", help="Resolve every leaf to detect dangling references."),
    ] = True,
    color: ColorOption = None,
    emoji: EmojiOption = None,
) -> None:
    """Validate the catalog and print its structural checksum."""

    raise typer.Exit(code=run_check(root, catalog=catalog, resolve=resolve, color=color, emoji=emoji))


__all__ = ["check_command", "run_check"]
