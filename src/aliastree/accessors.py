# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Attribute-style accessor facade layered over an :class:`AccessorStore`.

``libs.ktor.server.core`` resolves a pure leaf directly, while
``libs.ktor.server.auth`` yields a :class:`GroupAccessor` whose own value is
available through :meth:`GroupAccessor.as_provider`. The facade never changes
tree semantics; every lookup is delegated to the store and the leaf resolver.

Facade state lives behind underscore names so that attribute access reaches
every catalog segment. The only public names are ``as_provider`` on groups and
the namespace roots on :class:`CatalogAccessors`; a segment equal to
``as_provider`` is rejected when the facade is built. Node and naming metadata
are exposed through :func:`accessor_node` and :func:`accessor_name`.
"""

from __future__ import annotations

from typing import Final

from .catalog.errors import NotFoundError, ReservedSegmentError
from .catalog.model import NamespaceKind
from .resolution.resolver import LeafResolver, ResolvedLeaf
from .tree.node import NamespaceNode, NodeShape

RESERVED_ROOTS: Final[dict[str, NamespaceKind]] = {
    "versions": NamespaceKind.VERSION,
    "bundles": NamespaceKind.BUNDLE,
    "plugins": NamespaceKind.PLUGIN,
    "libraries": NamespaceKind.DEPENDENCY,
}
RESERVED_SEGMENTS: Final[frozenset[str]] = frozenset({"as_provider"})


class GroupAccessor:
    """Navigable view of a group node (pure group, self-leaf group, or kind root)."""

    __slots__ = ("_node", "_owner")

    def __init__(self, owner: CatalogAccessors, node: NamespaceNode) -> None:
        self._owner = owner
        self._node = node

    def as_provider(self) -> ResolvedLeaf:
        """Return the resolved value of the entry declared at this group's own path.

        Raises:
            NotFoundError: If no alias ends exactly at this group.
        """

        return self._owner._resolver.resolve(self._node)

    def __getitem__(self, segment: str) -> GroupAccessor | ResolvedLeaf:
        child = self._owner._resolver.store.child_of(self._node, segment)
        return self._owner._accessor_for(child)

    def __getattr__(self, name: str) -> GroupAccessor | ResolvedLeaf:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except NotFoundError as exc:
            raise AttributeError(f"{self._owner._name}.{_describe(self._node)} has no entry '{name}'") from exc

    def __dir__(self) -> list[str]:
        return [*self._node.child_names, "as_provider"]

    def __repr__(self) -> str:
        return f"GroupAccessor({self._owner._name}:{_describe(self._node)})"


class CatalogAccessors:
    """Root of the facade, mirroring the conventional ``libs`` extension layout.

    Attribute access navigates the dependency namespace. ``versions``,
    ``bundles`` and ``plugins`` reach the other kinds, and ``libraries``
    reaches dependencies whose first segment collides with one of those names.
    """

    __slots__ = ("_groups", "_name", "_resolver")

    def __init__(self, resolver: LeafResolver, *, name: str = "libs") -> None:
        """Bind the facade to ``resolver`` after checking for reserved segments.

        Raises:
            ReservedSegmentError: If an alias uses a segment the facade reserves.
        """

        for entry in resolver.store.catalog:
            reserved = RESERVED_SEGMENTS.intersection(entry.alias.segments)
            if reserved:
                raise ReservedSegmentError(entry.kind, entry.alias.dotted, min(reserved))
        self._resolver = resolver
        self._name = name
        self._groups: dict[int, GroupAccessor] = {}

    def _group(self, node: NamespaceNode) -> GroupAccessor:
        cached = self._groups.get(node.index)
        if cached is not None:
            return cached
        return self._groups.setdefault(node.index, GroupAccessor(self, node))

    def _accessor_for(self, node: NamespaceNode) -> GroupAccessor | ResolvedLeaf:
        if node.shape is NodeShape.PURE_LEAF:
            return self._resolver.resolve(node)
        return self._group(node)

    def _namespace(self, kind: NamespaceKind) -> GroupAccessor:
        return self._group(self._resolver.store.root(kind))

    @property
    def libraries(self) -> GroupAccessor:
        """Return the dependency namespace root."""

        return self._namespace(NamespaceKind.DEPENDENCY)

    @property
    def versions(self) -> GroupAccessor:
        """Return the version namespace root."""

        return self._namespace(NamespaceKind.VERSION)

    @property
    def bundles(self) -> GroupAccessor:
        """Return the bundle namespace root."""

        return self._namespace(NamespaceKind.BUNDLE)

    @property
    def plugins(self) -> GroupAccessor:
        """Return the plugin namespace root."""

        return self._namespace(NamespaceKind.PLUGIN)

    def __getattr__(self, name: str) -> GroupAccessor | ResolvedLeaf:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.libraries, name)

    def __getitem__(self, segment: str) -> GroupAccessor | ResolvedLeaf:
        return self.libraries[segment]

    def __dir__(self) -> list[str]:
        return [*RESERVED_ROOTS, *self._resolver.store.root(NamespaceKind.DEPENDENCY).child_names]

    def __repr__(self) -> str:
        return f"CatalogAccessors({self._name!r}, nodes={len(self._resolver.store)})"


def accessor_node(accessor: GroupAccessor) -> NamespaceNode:
    """Return the namespace node viewed by ``accessor``."""

    return accessor._node


def accessor_name(accessors: CatalogAccessors) -> str:
    """Return the root name ``accessors`` uses in messages."""

    return accessors._name


def accessor_resolver(accessors: CatalogAccessors) -> LeafResolver:
    """Return the leaf resolver backing ``accessors``."""

    return accessors._resolver


def _describe(node: NamespaceNode) -> str:
    prefix = "" if node.kind is NamespaceKind.DEPENDENCY else f"{node.kind.value}s"
    return ".".join(part for part in (prefix, node.dotted_path) if part) or "<root>"


__all__ = (
    "RESERVED_ROOTS",
    "RESERVED_SEGMENTS",
    "CatalogAccessors",
    "GroupAccessor",
    "accessor_name",
    "accessor_node",
    "accessor_resolver",
)
