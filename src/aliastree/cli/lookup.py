# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Look up a single alias and show its resolved leaf and children."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from ..catalog.errors import DanglingAliasError, MalformedAliasError, NotFoundError
from ..catalog.model import NamespaceKind
from ..rendering import describe_entry
from ..resolution.resolver import ResolvedLeaf
from ..tree.node import NodeShape
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


def format_resolved(value: ResolvedLeaf) -> str:
    """Return a printable form of a resolved leaf value."""

    if value is None:
        return "<not expressible as a single version>"
    if isinstance(value, tuple):
        return ", ".join(str(item) for item in value) or "<empty bundle>"
    return str(value)


def run_lookup(
    alias: str,
    root: Path,
    *,
    kind: NamespaceKind | None = None,
    catalog: Path | None = None,
    color: bool | None = None,
    emoji: bool | None = None,
) -> int:
    """Resolve ``alias`` within ``kind`` and print the result.

    Args:
        alias: Dotted alias to navigate to.
        root: Project root supplying configuration.
        kind: Namespace to search; defaults to dependencies.
        catalog: Optional catalog path override.
        color: Optional colour override.
        emoji: Optional emoji override.

    Returns:
        int: ``0`` when the alias exists and resolves, otherwise ``1``.
    """

    try:
        context = open_context(root, catalog=catalog, color=color, emoji=emoji)
    except CLIError as exc:
        fallback_logger(color=color, emoji=emoji).fail(str(exc))
        return exc.exit_code

    selected = kind or NamespaceKind.DEPENDENCY
    try:
        node = context.store.lookup(selected, alias)
    except (NotFoundError, MalformedAliasError) as exc:
        context.logger.fail(str(exc))
        return 1

    table = Table(title=f"{selected.value} {node.dotted_path}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("shape", node.shape.value)
    entry = context.store.self_leaf_of(node)
    if entry is not None:
        table.add_row("declared", Text(describe_entry(entry)))
        try:
            table.add_row("resolved", Text(format_resolved(context.resolver.resolve(node))))
        except DanglingAliasError as exc:
            context.console.print(table)
            context.logger.fail(str(exc))
            return 1
    if node.shape in (NodeShape.PURE_GROUP, NodeShape.SELF_LEAF_GROUP, NodeShape.EMPTY_ROOT):
        children = ", ".join(name for name, _ in context.store.children_of(node))
        table.add_row("children", Text(children or "<none>"))
    context.console.print(table)
    return 0


def lookup_command(
    alias: Annotated[str, typer.Argument(..., help="Dotted alias, e.g. ktor.server.auth.")],
    root: RootOption = Path.cwd(),
    kind: KindOption = None,
    catalog: CatalogOption = None,
    color: ColorOption = None,
    emoji: EmojiOption = None,
) -> None:
    """Show the entry declared at ALIAS and its resolved value."""

    raise typer.Exit(code=run_lookup(alias, root, kind=kind, catalog=catalog, color=color, emoji=emoji))


__all__ = ["format_resolved", "lookup_command", "run_lookup"]
