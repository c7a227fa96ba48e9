# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Arena-backed accessor store serving read-only namespace navigation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass

from ..catalog.errors import NotFoundError
from ..catalog.model import Alias, Catalog, CatalogEntry, NamespaceKind
from .node import NamespaceNode


@dataclass(frozen=True, slots=True, eq=False)
class AccessorStore:
    """Own every :class:`NamespaceNode` of a built catalog and answer navigation queries.

    The store is immutable once constructed by :func:`aliastree.tree.builder.build_store`;
    concurrent readers need no synchronisation.
    """

    catalog: Catalog
    _nodes: tuple[NamespaceNode, ...]
    _roots: Mapping[NamespaceKind, int]

    def root(self, kind: NamespaceKind) -> NamespaceNode:
        """Return the root node for ``kind``.

        Args:
            kind: Namespace whose root is requested.

        Returns:
            NamespaceNode: Root node, present even when the namespace is empty.
        """

        return self._nodes[self._roots[kind]]

    def roots(self) -> tuple[NamespaceNode, ...]:
        """Return the four kind roots in :class:`NamespaceKind` declaration order."""

        return tuple(self.root(kind) for kind in NamespaceKind)

    def child_of(self, node: NamespaceNode, name: str) -> NamespaceNode:
        """Return the child of ``node`` registered under ``name``.

        Args:
            node: Node owned by this store.
            name: Raw segment name of the child.

        Returns:
            NamespaceNode: The unique child instance for that segment.

        Raises:
            NotFoundError: If ``node`` has no child named ``name``.
        """

        self._ensure_owned(node)
        try:
            index = node.child_indices[name]
        except KeyError as exc:
            raise NotFoundError(name, node.path) from exc
        return self._nodes[index]

    def self_leaf_of(self, node: NamespaceNode) -> CatalogEntry | None:
        """Return the entry whose alias equals the node path, or ``None`` for pure groups."""

        self._ensure_owned(node)
        return node.self_leaf

    def children_of(self, node: NamespaceNode) -> tuple[tuple[str, NamespaceNode], ...]:
        """Return ``(name, child)`` pairs in first-introduction order."""

        self._ensure_owned(node)
        return tuple((name, self._nodes[index]) for name, index in node.child_indices.items())

    def node_at(self, kind: NamespaceKind, path: Sequence[str]) -> NamespaceNode:
        """Walk from the ``kind`` root through ``path`` and return the node reached.

        Raises:
            NotFoundError: At the first segment that does not exist.
        """

        node = self.root(kind)
        for segment in path:
            node = self.child_of(node, segment)
        return node

    def lookup(self, kind: NamespaceKind, alias: str | Sequence[str] | Alias) -> NamespaceNode:
        """Return the node addressed by ``alias`` within ``kind``."""

        return self.node_at(kind, Alias.parse(alias).segments)

    def walk(self, kind: NamespaceKind) -> Iterator[NamespaceNode]:
        """Yield every node of ``kind`` in pre-order, honouring child ordering."""

        pending = [self._roots[kind]]
        while pending:
            node = self._nodes[pending.pop()]
            yield node
            pending.extend(reversed(tuple(node.child_indices.values())))

    def leaves(self, kind: NamespaceKind) -> Iterator[NamespaceNode]:
        """Yield nodes of ``kind`` carrying a self-leaf, in pre-order."""

        return (node for node in self.walk(kind) if node.self_leaf is not None)

    def node(self, index: int) -> NamespaceNode:
        """Return the node stored at arena ``index``."""

        return self._nodes[index]

    def owns(self, node: NamespaceNode) -> bool:
        """Return ``True`` when ``node`` is the instance held by this store."""

        return 0 <= node.index < len(self._nodes) and self._nodes[node.index] is node

    def _ensure_owned(self, node: NamespaceNode) -> None:
        if not self.owns(node):
            raise ValueError(f"{node!r} does not belong to this accessor store")

    def __len__(self) -> int:
        return len(self._nodes)


__all__ = ("AccessorStore",)
