# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compile flat catalog alias tables into navigable, namespace-structured accessor trees."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from .accessors import CatalogAccessors, GroupAccessor
from .catalog import (
    Alias,
    BundleMembers,
    Catalog,
    CatalogEntry,
    CatalogIntegrityError,
    CatalogValidationError,
    DanglingAliasError,
    DependencyCoordinate,
    DuplicateAliasError,
    MalformedAliasError,
    NamespaceKind,
    NotFoundError,
    PluginReference,
    ReservedSegmentError,
    VersionConstraint,
    load_catalog,
)
from .resolution import LeafResolver, ResolutionEngine, StaticResolutionEngine
from .tree import AccessorStore, NamespaceNode, NodeShape, build_store

__version__: Final[str] = "0.1.0"


def compile_catalog(
    catalog: Catalog,
    *,
    engine: ResolutionEngine | None = None,
    memoize: bool = True,
    name: str = "libs",
) -> CatalogAccessors:
    """Build the accessor store for ``catalog`` and wrap it in the attribute facade.

    Args:
        catalog: Validated catalog model.
        engine: Resolution engine; defaults to :class:`StaticResolutionEngine`.
        memoize: Whether resolved leaves are cached per node.
        name: Accessor root name used in messages.

    Returns:
        CatalogAccessors: Facade rooted at the dependency namespace.
    """

    store = build_store(catalog)
    resolver = LeafResolver(store, engine or StaticResolutionEngine(catalog), memoize=memoize)
    return CatalogAccessors(resolver, name=name)


def open_catalog(path: Path, *, name: str = "libs") -> CatalogAccessors:
    """Load the catalog file at ``path`` and return its accessor facade."""

    return compile_catalog(load_catalog(path), name=name)


__all__ = [
    "AccessorStore",
    "Alias",
    "BundleMembers",
    "Catalog",
    "CatalogAccessors",
    "CatalogEntry",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "DanglingAliasError",
    "DependencyCoordinate",
    "DuplicateAliasError",
    "GroupAccessor",
    "LeafResolver",
    "MalformedAliasError",
    "NamespaceKind",
    "NamespaceNode",
    "NodeShape",
    "NotFoundError",
    "PluginReference",
    "ReservedSegmentError",
    "ResolutionEngine",
    "StaticResolutionEngine",
    "VersionConstraint",
    "__version__",
    "build_store",
    "compile_catalog",
    "open_catalog",
]
