# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderables describing compiled namespace trees."""

from __future__ import annotations

from typing import Final

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .catalog.model import (
    BundleMembers,
    CatalogEntry,
    DependencyCoordinate,
    NamespaceKind,
    PluginReference,
    VersionConstraint,
)
from .tree.node import NamespaceNode, NodeShape
from .tree.store import AccessorStore

_SHAPE_STYLES: Final[dict[NodeShape, str]] = {
    NodeShape.PURE_GROUP: "bold cyan",
    NodeShape.PURE_LEAF: "green",
    NodeShape.SELF_LEAF_GROUP: "bold yellow",
    NodeShape.EMPTY_ROOT: "dim",
}

ROOT_LABELS: Final[dict[NamespaceKind, str]] = {
    NamespaceKind.DEPENDENCY: "libraries",
    NamespaceKind.VERSION: "versions",
    NamespaceKind.BUNDLE: "bundles",
    NamespaceKind.PLUGIN: "plugins",
}


def describe_entry(entry: CatalogEntry) -> str:
    """Return a one-line description of ``entry``'s payload."""

    payload = entry.payload
    if isinstance(payload, DependencyCoordinate):
        if payload.version_ref:
            return f"{payload.module} (version.ref={payload.version_ref})"
        if payload.version is not None:
            return f"{payload.module}:{payload.version.display()}"
        return payload.module
    if isinstance(payload, VersionConstraint):
        return payload.display()
    if isinstance(payload, BundleMembers):
        return "[" + ", ".join(payload.members) + "]"
    if isinstance(payload, PluginReference):
        if payload.version_ref:
            return f"{payload.plugin_id} (version.ref={payload.version_ref})"
        if payload.version is not None:
            return f"{payload.plugin_id}:{payload.version.display()}"
        return payload.plugin_id
    return repr(payload)  # pragma: no cover - payload union is closed


def node_label(name: str, node: NamespaceNode) -> Text:
    """Return the styled label used for ``node`` inside a tree view."""

    label = Text(name, style=_SHAPE_STYLES[node.shape])
    if node.shape is NodeShape.SELF_LEAF_GROUP:
        label.append(" (self-leaf)", style="yellow")
    if node.self_leaf is not None:
        label.append(" → ", style="dim")
        label.append(describe_entry(node.self_leaf))
    return label


def render_tree(store: AccessorStore, kind: NamespaceKind, *, catalog_name: str = "libs") -> Tree:
    """Build a :class:`rich.tree.Tree` for the ``kind`` namespace.

    Args:
        store: Compiled accessor store.
        kind: Namespace to render.
        catalog_name: Accessor root name used for the tree title.

    Returns:
        Tree: Renderable tree honouring first-introduction child order.
    """

    root = store.root(kind)
    title = catalog_name if kind is NamespaceKind.DEPENDENCY else f"{catalog_name}.{ROOT_LABELS[kind]}"
    tree = Tree(node_label(title, root))
    pending: list[tuple[Tree, NamespaceNode]] = [(tree, root)]
    while pending:
        branch, node = pending.pop()
        for name, child in store.children_of(node):
            pending.append((branch.add(node_label(name, child)), child))
    return tree


def summary_table(store: AccessorStore) -> Table:
    """Return a table counting entries and nodes per namespace."""

    table = Table(title="Catalog summary")
    table.add_column("Namespace", style="cyan")
    table.add_column("Entries", justify="right")
    table.add_column("Nodes", justify="right")
    table.add_column("Self-leaf groups", justify="right")
    for kind in NamespaceKind:
        nodes = list(store.walk(kind))
        table.add_row(
            ROOT_LABELS[kind],
            str(len(store.catalog.entries(kind))),
            str(len(nodes) - 1),
            str(sum(1 for node in nodes if node.shape is NodeShape.SELF_LEAF_GROUP)),
        )
    return table


__all__ = ["ROOT_LABELS", "describe_entry", "node_label", "render_tree", "summary_table"]
