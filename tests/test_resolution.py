# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for leaf resolution routing and the static resolution engine."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from aliastree.catalog import (
    BundleMembers,
    Catalog,
    DanglingAliasError,
    DependencyCoordinate,
    NamespaceKind,
    NotFoundError,
    PluginReference,
    VersionConstraint,
)
from aliastree.resolution import (
    DependencyHandle,
    LeafResolver,
    PluginHandle,
    ResolutionEngine,
    StaticResolutionEngine,
    single_version_string,
)
from aliastree.tree import AccessorStore, build_store


class CountingEngine:
    """Engine returning fresh objects and counting every call."""

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()

    def resolve_dependency(self, coordinate: DependencyCoordinate) -> object:
        self.calls[coordinate.module] += 1
        return object()

    def resolve_version(self, constraint: VersionConstraint) -> str | None:
        self.calls["version"] += 1
        return None

    def resolve_plugin(self, plugin: PluginReference) -> object:
        self.calls[plugin.plugin_id] += 1
        return object()


class FailingEngine(CountingEngine):
    """Engine raising a domain error for every dependency."""

    def __init__(self, error: Exception) -> None:
        super().__init__()
        self.error = error

    def resolve_dependency(self, coordinate: DependencyCoordinate) -> object:
        raise self.error


def _resolver(catalog: Catalog, engine: ResolutionEngine | None = None, *, memoize: bool = True) -> LeafResolver:
    return LeafResolver(build_store(catalog), engine or StaticResolutionEngine(catalog), memoize=memoize)


def test_nested_dependency_resolves_to_its_coordinate(mixed_catalog: Catalog) -> None:
    resolver = _resolver(mixed_catalog)
    store = resolver.store
    node = store.child_of(
        store.child_of(store.child_of(store.root(NamespaceKind.DEPENDENCY), "kotlin"), "test"),
        "junit",
    )
    handle = resolver.resolve(node)
    assert handle == DependencyHandle(group="org.jetbrains.kotlin", name="kotlin-test-junit")
    assert str(handle) == "org.jetbrains.kotlin:kotlin-test-junit"


def test_version_ref_is_flattened(ktor_store: AccessorStore) -> None:
    resolver = LeafResolver(ktor_store, StaticResolutionEngine(ktor_store.catalog))
    handle = resolver.resolve_alias(NamespaceKind.DEPENDENCY, "ktor.server.auth.jwt")
    assert handle == DependencyHandle(group="io.ktor", name="ktor-server-auth-jwt", version="3.1.3")
    assert resolver.resolve_alias(NamespaceKind.VERSION, "kotlin.version") == "2.1.10"


def test_plugins_resolve_through_the_engine(ktor_store: AccessorStore) -> None:
    resolver = LeafResolver(ktor_store, StaticResolutionEngine(ktor_store.catalog))
    plugin = resolver.resolve_alias(NamespaceKind.PLUGIN, "kotlin.jvm")
    assert plugin == PluginHandle(plugin_id="org.jetbrains.kotlin.jvm", version="2.1.10")
    assert str(resolver.resolve_alias(NamespaceKind.PLUGIN, "ktor")) == "io.ktor.plugin:3.1.3"


def test_bundles_resolve_members_in_order(ktor_store: AccessorStore) -> None:
    resolver = LeafResolver(ktor_store, StaticResolutionEngine(ktor_store.catalog))
    members = resolver.resolve_alias(NamespaceKind.BUNDLE, "ktor.server")
    assert [str(member) for member in members] == [
        "io.ktor:ktor-server-core:3.1.3",
        "io.ktor:ktor-server-netty:3.1.3",
        "io.ktor:ktor-server-auth:3.1.3",
    ]


def test_bundle_keeps_duplicate_members() -> None:
    catalog = Catalog.from_entries(
        [
            (NamespaceKind.DEPENDENCY, "x", DependencyCoordinate(group="g", name="x")),
            (NamespaceKind.BUNDLE, "pair", BundleMembers(members=("x", "x"))),
        ],
    )
    assert len(_resolver(catalog).resolve_alias(NamespaceKind.BUNDLE, "pair")) == 2


def test_dangling_bundle_member_fails_only_on_resolution() -> None:
    catalog = Catalog.from_entries([(NamespaceKind.BUNDLE, "web", BundleMembers(members=("missing.lib",)))])
    resolver = _resolver(catalog)
    node = resolver.store.lookup(NamespaceKind.BUNDLE, "web")
    with pytest.raises(DanglingAliasError) as excinfo:
        resolver.resolve(node)
    assert excinfo.value.alias == "missing.lib"
    assert excinfo.value.referrer == "web"


def test_dangling_version_ref_raises() -> None:
    catalog = Catalog.from_entries(
        [(NamespaceKind.DEPENDENCY, "lib", DependencyCoordinate(group="g", name="lib", version_ref="nope"))],
    )
    with pytest.raises(DanglingAliasError, match="'nope'"):
        _resolver(catalog).resolve_alias(NamespaceKind.DEPENDENCY, "lib")


def test_pure_group_has_nothing_to_resolve(ktor_store: AccessorStore) -> None:
    resolver = LeafResolver(ktor_store, StaticResolutionEngine(ktor_store.catalog))
    with pytest.raises(NotFoundError) as excinfo:
        resolver.resolve_alias(NamespaceKind.DEPENDENCY, "ktor.server")
    assert excinfo.value.name == "server"
    assert excinfo.value.path == ("ktor",)


@pytest.mark.parametrize(
    ("constraint", "expected"),
    [
        (VersionConstraint.of("2.1.10"), "2.1.10"),
        (VersionConstraint(strictly="1.0", require="1.0"), "1.0"),
        (VersionConstraint(prefer="1.4"), "1.4"),
        (VersionConstraint(require="1.+"), "1.+"),
        (VersionConstraint(strictly="1.0", prefer="1.1"), None),
        (VersionConstraint(require="1.0", reject=("0.9",)), None),
        (VersionConstraint(strictly="[1.0,2.0)"), None),
        (VersionConstraint(), None),
    ],
)
def test_single_version_string(constraint: VersionConstraint, expected: str | None) -> None:
    assert single_version_string(constraint) == expected


def test_memoized_resolution_calls_engine_once(mixed_catalog: Catalog) -> None:
    engine = CountingEngine()
    resolver = _resolver(mixed_catalog, engine)
    first = resolver.resolve_alias(NamespaceKind.DEPENDENCY, "a.b")
    second = resolver.resolve_alias(NamespaceKind.DEPENDENCY, "a.b")
    assert first is second
    assert engine.calls["org.example:ab"] == 1
    assert resolver.resolve_alias(NamespaceKind.VERSION, "kotlin") is None
    assert resolver.resolve_alias(NamespaceKind.VERSION, "kotlin") is None
    assert engine.calls["version"] == 1


def test_memoization_can_be_disabled(mixed_catalog: Catalog) -> None:
    engine = CountingEngine()
    resolver = _resolver(mixed_catalog, engine, memoize=False)
    first = resolver.resolve_alias(NamespaceKind.PLUGIN, "kotlin.jvm")
    second = resolver.resolve_alias(NamespaceKind.PLUGIN, "kotlin.jvm")
    assert first is not second
    assert engine.calls["org.jetbrains.kotlin.jvm"] == 2


def test_concurrent_first_access_observes_one_value(mixed_catalog: Catalog) -> None:
    resolver = _resolver(mixed_catalog, CountingEngine())
    node = resolver.store.lookup(NamespaceKind.DEPENDENCY, "a.b.c")
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: resolver.resolve(node), range(64)))
    assert all(result is results[0] for result in results)


def test_engine_errors_propagate_unchanged(mixed_catalog: Catalog) -> None:
    error = RuntimeError("repository offline")
    resolver = _resolver(mixed_catalog, FailingEngine(error))
    with pytest.raises(RuntimeError) as excinfo:
        resolver.resolve_alias(NamespaceKind.DEPENDENCY, "a.b")
    assert excinfo.value is error


def test_resolve_entry_uses_the_entry_node(mixed_catalog: Catalog) -> None:
    resolver = _resolver(mixed_catalog)
    entry = mixed_catalog.get(NamespaceKind.BUNDLE, "testing")
    assert entry is not None
    assert [str(item) for item in resolver.resolve_entry(entry)] == [
        "org.jetbrains.kotlin:kotlin-test-junit",
        "org.example:ab:2.1.10",
    ]


def test_engines_satisfy_protocol(mixed_catalog: Catalog) -> None:
    assert isinstance(StaticResolutionEngine(mixed_catalog), ResolutionEngine)
    assert isinstance(CountingEngine(), ResolutionEngine)
