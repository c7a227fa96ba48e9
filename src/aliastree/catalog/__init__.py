# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the alias catalog model and its loaders."""

from __future__ import annotations

from typing import Final

from .checksum import compute_catalog_checksum, compute_tree_checksum
from .errors import (
    CatalogIntegrityError,
    CatalogValidationError,
    DanglingAliasError,
    DuplicateAliasError,
    MalformedAliasError,
    NotFoundError,
    ReservedSegmentError,
)
from .loader import CatalogLoader, load_catalog, load_json_catalog, load_toml_catalog
from .model import (
    Alias,
    BundleMembers,
    Catalog,
    CatalogEntry,
    DependencyCoordinate,
    NamespaceKind,
    PluginReference,
    VersionConstraint,
)

__all__: Final[tuple[str, ...]] = (
    "Alias",
    "BundleMembers",
    "Catalog",
    "CatalogEntry",
    "CatalogIntegrityError",
    "CatalogLoader",
    "CatalogValidationError",
    "DanglingAliasError",
    "DependencyCoordinate",
    "DuplicateAliasError",
    "MalformedAliasError",
    "NamespaceKind",
    "NotFoundError",
    "PluginReference",
    "ReservedSegmentError",
    "VersionConstraint",
    "compute_catalog_checksum",
    "compute_tree_checksum",
    "load_catalog",
    "load_json_catalog",
    "load_toml_catalog",
)
