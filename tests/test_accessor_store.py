# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for accessor store navigation."""

from __future__ import annotations

import pytest

from aliastree.catalog import Catalog, MalformedAliasError, NamespaceKind, NotFoundError
from aliastree.tree import AccessorStore, NodeShape, build_store


def test_missing_child_on_empty_root_reports_name_and_path() -> None:
    store = build_store(Catalog.empty())
    with pytest.raises(NotFoundError) as excinfo:
        store.child_of(store.root(NamespaceKind.DEPENDENCY), "foo")
    assert excinfo.value.name == "foo"
    assert excinfo.value.path == ()
    assert "no entry named 'foo' under <root>" in str(excinfo.value)


def test_lookup_stops_at_first_missing_segment(ktor_store: AccessorStore) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        ktor_store.lookup(NamespaceKind.DEPENDENCY, "ktor.client.core")
    assert excinfo.value.name == "client"
    assert excinfo.value.path == ("ktor",)


def test_lookup_rejects_malformed_alias(ktor_store: AccessorStore) -> None:
    with pytest.raises(MalformedAliasError):
        ktor_store.lookup(NamespaceKind.DEPENDENCY, "ktor..server")


def test_navigation_returns_identical_nodes(ktor_store: AccessorStore) -> None:
    first = ktor_store.lookup(NamespaceKind.DEPENDENCY, "ktor.server.auth")
    second = ktor_store.child_of(ktor_store.lookup(NamespaceKind.DEPENDENCY, "ktor.server"), "auth")
    assert first is second
    assert ktor_store.node(first.index) is first


def test_self_leaf_group_exposes_leaf_and_children(ktor_store: AccessorStore) -> None:
    auth = ktor_store.lookup(NamespaceKind.DEPENDENCY, "ktor.server.auth")
    assert auth.shape is NodeShape.SELF_LEAF_GROUP
    entry = ktor_store.self_leaf_of(auth)
    assert entry is not None
    assert entry.alias.dotted == "ktor.server.auth"
    assert [name for name, _ in ktor_store.children_of(auth)] == ["jwt"]


def test_pure_group_has_no_self_leaf(ktor_store: AccessorStore) -> None:
    assert ktor_store.self_leaf_of(ktor_store.lookup(NamespaceKind.DEPENDENCY, "ktor.server")) is None


def test_walk_is_pre_order(ktor_store: AccessorStore) -> None:
    paths = [node.dotted_path for node in ktor_store.walk(NamespaceKind.PLUGIN)]
    assert paths == ["", "kotlin", "kotlin.jvm", "ktor"]


def test_leaves_yield_only_nodes_with_entries(ktor_catalog: Catalog, ktor_store: AccessorStore) -> None:
    leaves = [node.dotted_path for node in ktor_store.leaves(NamespaceKind.DEPENDENCY)]
    assert sorted(leaves) == sorted(entry.alias.dotted for entry in ktor_catalog.entries(NamespaceKind.DEPENDENCY))
    assert leaves.index("ktor.server.auth") < leaves.index("ktor.server.auth.jwt")


def test_foreign_nodes_are_rejected(ktor_catalog: Catalog, ktor_store: AccessorStore) -> None:
    other = build_store(ktor_catalog)
    foreign = other.lookup(NamespaceKind.DEPENDENCY, "ktor")
    assert not ktor_store.owns(foreign)
    with pytest.raises(ValueError):
        ktor_store.child_of(foreign, "server")


def test_node_repr_names_kind_path_and_shape(ktor_store: AccessorStore) -> None:
    node = ktor_store.lookup(NamespaceKind.VERSION, "ktor.version")
    assert repr(node) == "NamespaceNode(version:ktor.version, shape=leaf)"
    assert repr(ktor_store.root(NamespaceKind.BUNDLE)) == "NamespaceNode(bundle:<root>, shape=group)"
