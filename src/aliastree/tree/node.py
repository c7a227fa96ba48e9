# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Namespace node representation and shape classification."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from ..catalog.errors import CatalogIntegrityError
from ..catalog.model import CatalogEntry, NamespaceKind
from ..catalog.types import ALIAS_SEPARATOR


class NodeShape(str, Enum):
    """Enumerate the roles a namespace node can play."""

    PURE_LEAF = "leaf"
    PURE_GROUP = "group"
    SELF_LEAF_GROUP = "self-leaf group"
    EMPTY_ROOT = "empty root"


def classify_node(path: Sequence[str], *, has_leaf: bool, has_children: bool) -> NodeShape:
    """Return the shape of a node from its leaf and child state.

    Args:
        path: Segments locating the node; empty for a kind root.
        has_leaf: ``True`` when an alias ends exactly at ``path``.
        has_children: ``True`` when at least one alias extends ``path``.

    Returns:
        NodeShape: Classification used by navigation surfaces.

    Raises:
        CatalogIntegrityError: If a non-root node carries neither a leaf nor children.
    """

    if has_leaf and has_children:
        return NodeShape.SELF_LEAF_GROUP
    if has_leaf:
        return NodeShape.PURE_LEAF
    if has_children:
        return NodeShape.PURE_GROUP
    if path:
        raise CatalogIntegrityError(f"namespace node '{ALIAS_SEPARATOR.join(path)}' has no leaf and no children")
    return NodeShape.EMPTY_ROOT


@dataclass(frozen=True, slots=True, eq=False)
class NamespaceNode:
    """Immutable node stored in an :class:`~aliastree.tree.store.AccessorStore` arena.

    Nodes compare by identity: the store hands out exactly one instance per path.
    Children are referenced by arena index and materialised through the store.
    """

    kind: NamespaceKind
    path: tuple[str, ...]
    index: int
    shape: NodeShape
    self_leaf: CatalogEntry | None
    child_indices: Mapping[str, int]

    @property
    def child_names(self) -> tuple[str, ...]:
        """Return child segment names in first-introduction order."""

        return tuple(self.child_indices)

    @property
    def is_root(self) -> bool:
        """Return ``True`` for a kind root."""

        return not self.path

    @property
    def dotted_path(self) -> str:
        """Return the node path joined with dots (empty for roots)."""

        return ALIAS_SEPARATOR.join(self.path)

    def __repr__(self) -> str:
        location = self.dotted_path or "<root>"
        return f"NamespaceNode({self.kind.value}:{location}, shape={self.shape.value})"


__all__ = ("NamespaceNode", "NodeShape", "classify_node")
