# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render compiled namespace trees."""

from __future__ import annotations

from pathlib import Path

import typer

from ..catalog.model import NamespaceKind
from ..rendering import render_tree
from .shared import (
    CatalogOption,
    CLIError,
    ColorOption,
    EmojiOption,
    KindOption,
    RootOption,
    fallback_logger,
    open_context,
)


def run_tree(
    root: Path,
    *,
    kind: NamespaceKind | None = None,
    catalog: Path | None = None,
    color: bool | None = None,
    emoji: bool | None = None,
) -> int:
    """Print the namespace tree for ``kind`` (or every kind) and return an exit status.

    Args:
        root: Project root supplying configuration.
        kind: Optional namespace filter.
        catalog: Optional catalog path override.
        color: Optional colour override.
        emoji: Optional emoji override.

    Returns:
        int: ``0`` on success, otherwise the error's exit status.
    """

    try:
        context = open_context(root, catalog=catalog, color=color, emoji=emoji)
    except CLIError as exc:
        fallback_logger(color=color, emoji=emoji).fail(str(exc))
        return exc.exit_code

    kinds = (kind,) if kind is not None else tuple(NamespaceKind)
    for selected in kinds:
        context.console.print(render_tree(context.store, selected, catalog_name=context.config.catalog_name))
    return 0


def tree_command(
    root: RootOption = Path.cwd(),
    kind: KindOption = None,
    catalog: CatalogOption = None,
    color: ColorOption = None,
    emoji: EmojiOption = None,
) -> None:
    """Render the accessor tree compiled from the catalog."""

    raise typer.Exit(code=run_tree(root, kind=kind, catalog=catalog, color=color, emoji=emoji))


__all__ = ["run_tree", "tree_command"]
