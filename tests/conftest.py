# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from aliastree.catalog import (
    BundleMembers,
    Catalog,
    DependencyCoordinate,
    NamespaceKind,
    PluginReference,
    VersionConstraint,
    load_toml_catalog,
)
from aliastree.tree import AccessorStore, build_store

KTOR_CATALOG_TOML = """\
[versions]
kotlin-version = "2.1.10"
ktor-version = "3.1.3"
logback-version = "1.4.14"
protolite-well-known-types-version = "18.0.1"

[libraries]
ktor-server-core = { module = "io.ktor:ktor-server-core", version.ref = "ktor-version" }
ktor-server-auth = { module = "io.ktor:ktor-server-auth", version.ref = "ktor-version" }
ktor-server-auth-jwt = { module = "io.ktor:ktor-server-auth-jwt", version.ref = "ktor-version" }
ktor-server-content-negotiation = { module = "io.ktor:ktor-server-content-negotiation", version.ref = "ktor-version" }
ktor-server-netty = { module = "io.ktor:ktor-server-netty", version.ref = "ktor-version" }
logback-classic = { module = "ch.qos.logback:logback-classic", version.ref = "logback-version" }
ktor-server-config-yaml = { module = "io.ktor:ktor-server-config-yaml", version.ref = "ktor-version" }
ktor-server-test-host = { module = "io.ktor:ktor-server-test-host", version.ref = "ktor-version" }
kotlin-test-junit = { module = "org.jetbrains.kotlin:kotlin-test-junit", version.ref = "kotlin-version" }
protolite-well-known-types = { module = "com.google.firebase:protolite-well-known-types", version.ref = "protolite-well-known-types-version" }

[bundles]
ktor-server = ["ktor-server-core", "ktor-server-netty", "ktor-server-auth"]

[plugins]
kotlin-jvm = { id = "org.jetbrains.kotlin.jvm", version.ref = "kotlin-version" }
ktor = { id = "io.ktor.plugin", version.ref = "ktor-version" }
"""


def _dependency(module: str, version_ref: str | None = None) -> DependencyCoordinate:
    """Return a dependency coordinate from ``group:name`` notation."""

    group, _, name = module.partition(":")
    return DependencyCoordinate(group=group, name=name, version_ref=version_ref)


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing catalog text under ``tmp_path``."""

    def _write(text: str, name: str = "libs.versions.toml") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ktor_catalog(write_catalog: Callable[..., Path]) -> Catalog:
    """Return the Ktor server catalog parsed from TOML."""

    return load_toml_catalog(write_catalog(KTOR_CATALOG_TOML))


@pytest.fixture
def ktor_store(ktor_catalog: Catalog) -> AccessorStore:
    """Return the accessor store compiled from :func:`ktor_catalog`."""

    return build_store(ktor_catalog)


@pytest.fixture
def mixed_catalog() -> Catalog:
    """Return a small hand-built catalog covering all four namespaces."""

    return Catalog.from_entries(
        [
            (NamespaceKind.VERSION, "kotlin", VersionConstraint.of("2.1.10")),
            (NamespaceKind.DEPENDENCY, "kotlin.test.junit", _dependency("org.jetbrains.kotlin:kotlin-test-junit")),
            (NamespaceKind.DEPENDENCY, "a.b", _dependency("org.example:ab", "kotlin")),
            (NamespaceKind.DEPENDENCY, "a.b.c", _dependency("org.example:abc")),
            (NamespaceKind.BUNDLE, "testing", BundleMembers(members=("kotlin.test.junit", "a.b"))),
            (NamespaceKind.PLUGIN, "kotlin.jvm", PluginReference(plugin_id="org.jetbrains.kotlin.jvm")),
        ],
    )


@pytest.fixture
def ktor_catalog_text() -> str:
    """Return the Ktor server catalog as version-catalog TOML."""

    return KTOR_CATALOG_TOML
