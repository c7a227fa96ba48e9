# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Route catalog leaves to an external resolution engine by namespace kind."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final, Protocol, TypeAlias, cast, runtime_checkable

from ..catalog.errors import DanglingAliasError, MalformedAliasError, NotFoundError
from ..catalog.model import (
    Alias,
    BundleMembers,
    CatalogEntry,
    DependencyCoordinate,
    NamespaceKind,
    PluginReference,
    VersionConstraint,
)
from ..tree.node import NamespaceNode
from ..tree.store import AccessorStore


@runtime_checkable
class ResolutionEngine(Protocol):
    """Protocol describing the resolution hooks consumed by :class:`LeafResolver`."""

    def resolve_dependency(self, coordinate: DependencyCoordinate) -> object:
        """Return the dependency handle for ``coordinate``."""

    def resolve_version(self, constraint: VersionConstraint) -> str | None:
        """Return ``constraint`` as a single version string, or ``None`` when not expressible."""

    def resolve_plugin(self, plugin: PluginReference) -> object:
        """Return the plugin handle for ``plugin``."""


ResolvedLeaf: TypeAlias = object

_UNSET: Final = object()


@dataclass(slots=True)
class LeafResolver:
    """Resolve self-leaf entries of an :class:`AccessorStore` through a resolution engine.

    When ``memoize`` is enabled each node is resolved at most once per observable
    outcome: concurrent first accesses may both call the engine, but
    ``dict.setdefault`` guarantees every caller sees the value stored first.
    """

    store: AccessorStore
    engine: ResolutionEngine
    memoize: bool = True
    _cache: dict[int, ResolvedLeaf] = field(init=False, default_factory=dict, repr=False)

    def resolve(self, node: NamespaceNode) -> ResolvedLeaf:
        """Return the resolved value of the self-leaf carried by ``node``.

        Args:
            node: Node owned by :attr:`store`.

        Returns:
            ResolvedLeaf: Engine handle; ``None`` for versions that cannot be expressed as one string.

        Raises:
            NotFoundError: If ``node`` is a pure group without a self-leaf.
            DanglingAliasError: If a bundle member is missing from the dependency namespace.
        """

        entry = self.store.self_leaf_of(node)
        if entry is None:
            name = node.path[-1] if node.path else ""
            raise NotFoundError(name, node.path[:-1])
        if not self.memoize:
            return self._dispatch(entry)
        cached = self._cache.get(node.index, _UNSET)
        if cached is not _UNSET:
            return cached
        return self._cache.setdefault(node.index, self._dispatch(entry))

    def resolve_alias(self, kind: NamespaceKind, alias: str | Sequence[str] | Alias) -> ResolvedLeaf:
        """Navigate to ``alias`` within ``kind`` and resolve its self-leaf."""

        return self.resolve(self.store.lookup(kind, alias))

    def resolve_entry(self, entry: CatalogEntry) -> ResolvedLeaf:
        """Resolve ``entry`` through the node the store holds for it."""

        return self.resolve(self.store.lookup(entry.kind, entry.alias))

    def _dispatch(self, entry: CatalogEntry) -> ResolvedLeaf:
        payload = entry.payload
        if entry.kind is NamespaceKind.DEPENDENCY:
            return self.engine.resolve_dependency(cast(DependencyCoordinate, payload))
        if entry.kind is NamespaceKind.VERSION:
            return self.engine.resolve_version(cast(VersionConstraint, payload))
        if entry.kind is NamespaceKind.BUNDLE:
            return self._resolve_bundle(entry.alias, cast(BundleMembers, payload))
        return self.engine.resolve_plugin(cast(PluginReference, payload))

    def _resolve_bundle(self, bundle: Alias, members: BundleMembers) -> tuple[ResolvedLeaf, ...]:
        resolved: list[ResolvedLeaf] = []
        for member in members.members:
            try:
                entry = self.store.catalog.get(NamespaceKind.DEPENDENCY, member)
            except MalformedAliasError as exc:
                raise DanglingAliasError(member, bundle.dotted) from exc
            if entry is None:
                raise DanglingAliasError(member, bundle.dotted)
            resolved.append(self.engine.resolve_dependency(cast(DependencyCoordinate, entry.payload)))
        return tuple(resolved)


__all__ = ("LeafResolver", "ResolutionEngine", "ResolvedLeaf")
