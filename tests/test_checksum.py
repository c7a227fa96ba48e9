# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for catalog and tree checksums."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from aliastree.catalog import (
    Catalog,
    DependencyCoordinate,
    NamespaceKind,
    compute_catalog_checksum,
    compute_tree_checksum,
)
from aliastree.tree import build_store


def _catalog(*aliases: str) -> Catalog:
    return Catalog.from_entries(
        (NamespaceKind.DEPENDENCY, alias, DependencyCoordinate(group="g", name=alias)) for alias in aliases
    )


def test_tree_checksum_is_stable_across_builds() -> None:
    assert compute_tree_checksum(build_store(_catalog("a.b", "c"))) == compute_tree_checksum(
        build_store(_catalog("a.b", "c")),
    )


def test_tree_checksum_tracks_child_order() -> None:
    assert compute_tree_checksum(build_store(_catalog("a.b", "c"))) != compute_tree_checksum(
        build_store(_catalog("c", "a.b")),
    )


def test_tree_checksum_tracks_leaf_payloads() -> None:
    first = Catalog.from_entries([(NamespaceKind.DEPENDENCY, "a", DependencyCoordinate(group="g", name="one"))])
    second = Catalog.from_entries([(NamespaceKind.DEPENDENCY, "a", DependencyCoordinate(group="g", name="two"))])
    assert compute_tree_checksum(build_store(first)) != compute_tree_checksum(build_store(second))


def test_catalog_checksum_depends_on_content(write_catalog: Callable[..., Path]) -> None:
    first = compute_catalog_checksum(write_catalog('[versions]\nkotlin = "2.1.10"\n'))
    again = compute_catalog_checksum(write_catalog('[versions]\nkotlin = "2.1.10"\n'))
    changed = compute_catalog_checksum(write_catalog('[versions]\nkotlin = "2.1.20"\n'))
    assert first == again
    assert first != changed
    assert len(first) == 64
