# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for Rich renderables describing namespace trees."""

from __future__ import annotations

from rich.console import Console

from aliastree.catalog import NamespaceKind
from aliastree.rendering import describe_entry, render_tree, summary_table
from aliastree.tree import AccessorStore


def _render(renderable: object) -> str:
    console = Console(width=160, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_describe_entry_summarises_payloads(ktor_store: AccessorStore) -> None:
    catalog = ktor_store.catalog
    jwt = catalog.get(NamespaceKind.DEPENDENCY, "ktor.server.auth.jwt")
    bundle = catalog.get(NamespaceKind.BUNDLE, "ktor.server")
    version = catalog.get(NamespaceKind.VERSION, "ktor.version")
    assert jwt is not None and bundle is not None and version is not None
    assert describe_entry(jwt) == "io.ktor:ktor-server-auth-jwt (version.ref=ktor.version)"
    assert describe_entry(bundle) == "[ktor.server.core, ktor.server.netty, ktor.server.auth]"
    assert describe_entry(version) == "3.1.3"


def test_render_tree_marks_self_leaf_groups(ktor_store: AccessorStore) -> None:
    output = _render(render_tree(ktor_store, NamespaceKind.DEPENDENCY))
    lines = output.splitlines()
    assert lines[0].startswith("libs")
    assert any("auth (self-leaf)" in line for line in lines)
    assert output.index("core") < output.index("netty")


def test_render_tree_titles_other_namespaces(ktor_store: AccessorStore) -> None:
    output = _render(render_tree(ktor_store, NamespaceKind.PLUGIN, catalog_name="deps"))
    assert output.splitlines()[0].rstrip() == "deps.plugins"
    assert "io.ktor.plugin (version.ref=ktor.version)" in output


def test_summary_table_counts_entries(ktor_store: AccessorStore) -> None:
    output = _render(summary_table(ktor_store))
    assert "Catalog summary" in output
    libraries = next(line for line in output.splitlines() if "libraries" in line)
    assert "10" in libraries
    assert "21" in libraries
