# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Compile a validated catalog into per-kind namespace trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from ..catalog.errors import DuplicateAliasError
from ..catalog.model import Catalog, CatalogEntry, NamespaceKind
from .node import NamespaceNode, classify_node
from .store import AccessorStore

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _NodeDraft:
    """Mutable node state used only while the arena is being populated."""

    kind: NamespaceKind
    path: tuple[str, ...]
    children: dict[str, int] = field(default_factory=dict)
    self_leaf: CatalogEntry | None = None


@dataclass(slots=True)
class TreeBuilder:
    """Single-use builder that walks each alias once and freezes the result."""

    catalog: Catalog
    _drafts: list[_NodeDraft] = field(init=False, default_factory=list)
    _roots: dict[NamespaceKind, int] = field(init=False, default_factory=dict)

    def build(self) -> AccessorStore:
        """Populate the arena from catalog order and return the frozen store.

        Returns:
            AccessorStore: Store owning one node per alias prefix, plus one root per kind.

        Raises:
            DuplicateAliasError: If a leaf slot is claimed twice.
        """

        self._drafts.clear()
        self._roots.clear()
        for kind in NamespaceKind:
            self._roots[kind] = self._allocate(kind, ())
        for entry in self.catalog:
            self._insert(entry)
        store = self._freeze()
        LOGGER.debug(
            "built namespace tree: %d entries, %d nodes",
            len(self.catalog),
            len(store),
        )
        return store

    def _allocate(self, kind: NamespaceKind, path: tuple[str, ...]) -> int:
        self._drafts.append(_NodeDraft(kind=kind, path=path))
        return len(self._drafts) - 1

    def _insert(self, entry: CatalogEntry) -> None:
        index = self._roots[entry.kind]
        for depth, segment in enumerate(entry.alias.segments, start=1):
            draft = self._drafts[index]
            child = draft.children.get(segment)
            if child is None:
                child = self._allocate(entry.kind, entry.alias.segments[:depth])
                draft.children[segment] = child
            index = child
        leaf_draft = self._drafts[index]
        if leaf_draft.self_leaf is not None:
            raise DuplicateAliasError(entry.kind, entry.alias.dotted)
        leaf_draft.self_leaf = entry

    def _freeze(self) -> AccessorStore:
        nodes = tuple(
            NamespaceNode(
                kind=draft.kind,
                path=draft.path,
                index=index,
                shape=classify_node(
                    draft.path,
                    has_leaf=draft.self_leaf is not None,
                    has_children=bool(draft.children),
                ),
                self_leaf=draft.self_leaf,
                child_indices=MappingProxyType(dict(draft.children)),
            )
            for index, draft in enumerate(self._drafts)
        )
        return AccessorStore(
            catalog=self.catalog,
            _nodes=nodes,
            _roots=MappingProxyType(dict(self._roots)),
        )


def build_store(catalog: Catalog) -> AccessorStore:
    """Return the accessor store compiled from ``catalog``.

    Args:
        catalog: Validated catalog model.

    Returns:
        AccessorStore: Immutable namespace trees for all four kinds.
    """

    return TreeBuilder(catalog).build()


__all__ = ("TreeBuilder", "build_store")
