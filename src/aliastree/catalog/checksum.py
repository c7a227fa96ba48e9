# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for catalog files and compiled namespace trees."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import TYPE_CHECKING

from .model import NamespaceKind

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..tree.store import AccessorStore


def compute_catalog_checksum(path: Path) -> str:
    """Calculate the checksum of a catalog source file.

    Args:
        path: Catalog file contributing to the checksum.

    Returns:
        str: Hex-encoded SHA-256 checksum of the file name and contents.
    """
    hasher = hashlib.sha256()
    hasher.update(path.name.encode("utf-8"))
    hasher.update(b"\0")
    hasher.update(path.read_bytes())
    return hasher.hexdigest()


def compute_tree_checksum(store: AccessorStore) -> str:
    """Calculate a structural fingerprint of a compiled namespace tree.

    The digest covers every node path in pre-order, its child ordering, its shape,
    and the ``repr`` of its self-leaf payload, so two stores share a checksum
    exactly when their structure, ordering, and leaf assignments agree.

    Args:
        store: Accessor store to fingerprint.

    Returns:
        str: Hex-encoded SHA-256 checksum.
    """
    hasher = hashlib.sha256()
    for kind in NamespaceKind:
        hasher.update(kind.value.encode("utf-8"))
        hasher.update(b"\0")
        for node in store.walk(kind):
            hasher.update(node.dotted_path.encode("utf-8"))
            hasher.update(b"\1")
            hasher.update(node.shape.value.encode("utf-8"))
            hasher.update(b"\1")
            hasher.update("\2".join(node.child_names).encode("utf-8"))
            hasher.update(b"\1")
            if node.self_leaf is not None:
                hasher.update(repr(node.self_leaf.payload).encode("utf-8"))
            hasher.update(b"\0")
    return hasher.hexdigest()


__all__ = ["compute_catalog_checksum", "compute_tree_checksum"]
