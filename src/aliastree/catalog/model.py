# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable catalog model: namespace kinds, aliases, payloads, and entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TypeAlias

from .errors import CatalogIntegrityError, DuplicateAliasError, MalformedAliasError
from .types import ALIAS_SEPARATOR


class NamespaceKind(str, Enum):
    """Enumerate the independent alias spaces held by a catalog."""

    DEPENDENCY = "dependency"
    VERSION = "version"
    BUNDLE = "bundle"
    PLUGIN = "plugin"

    @classmethod
    def from_raw(cls, raw: str) -> NamespaceKind:
        """Return the kind matching ``raw``, accepting plural spellings.

        Args:
            raw: Kind name such as ``"dependency"`` or ``"plugins"``.

        Returns:
            NamespaceKind: Matching namespace kind.

        Raises:
            ValueError: If ``raw`` does not name a known kind.
        """

        token = raw.strip().lower()
        if token in _KIND_ALIASES:
            return _KIND_ALIASES[token]
        return cls(token)


_KIND_ALIASES: Mapping[str, NamespaceKind] = MappingProxyType(
    {
        "dependencies": NamespaceKind.DEPENDENCY,
        "libraries": NamespaceKind.DEPENDENCY,
        "library": NamespaceKind.DEPENDENCY,
        "versions": NamespaceKind.VERSION,
        "bundles": NamespaceKind.BUNDLE,
        "plugins": NamespaceKind.PLUGIN,
    },
)


@dataclass(frozen=True, slots=True)
class Alias:
    """Dot-delimited catalog alias stored as an ordered tuple of lowercase segments."""

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        """Reject aliases with no segments or with empty segments, then fold segments to lowercase."""

        if not self.segments or any(
            not isinstance(part, str) or not part or ALIAS_SEPARATOR in part for part in self.segments
        ):
            raise MalformedAliasError(ALIAS_SEPARATOR.join(str(part) for part in self.segments))
        folded = tuple(part.lower() for part in self.segments)
        if folded != self.segments:
            object.__setattr__(self, "segments", folded)

    @classmethod
    def parse(cls, raw: str | Sequence[str] | Alias) -> Alias:
        """Return an alias built from a dotted string or a segment sequence.

        Args:
            raw: Dotted alias text, an iterable of segments, or an existing alias.

        Returns:
            Alias: Validated alias instance.

        Raises:
            MalformedAliasError: If the alias has empty segments or none at all.
        """

        if isinstance(raw, Alias):
            return raw
        if isinstance(raw, str):
            if not raw:
                raise MalformedAliasError(raw)
            return cls(tuple(raw.split(ALIAS_SEPARATOR)))
        return cls(tuple(raw))

    @property
    def dotted(self) -> str:
        """Return the alias joined with dots."""

        return ALIAS_SEPARATOR.join(self.segments)

    def __str__(self) -> str:
        return self.dotted

    def __len__(self) -> int:
        return len(self.segments)


@dataclass(frozen=True, slots=True)
class VersionConstraint:
    """Rich version declaration; single-string collapse is decided by the resolution engine."""

    require: str | None = None
    strictly: str | None = None
    prefer: str | None = None
    reject: tuple[str, ...] = ()

    @classmethod
    def of(cls, version: str) -> VersionConstraint:
        """Return a constraint requiring exactly ``version``."""

        return cls(require=version)

    def display(self) -> str:
        """Return a compact human-readable rendering of the constraint."""

        parts: list[str] = []
        if self.strictly:
            parts.append(f"strictly {self.strictly}")
        if self.require:
            parts.append(self.require if not parts else f"require {self.require}")
        if self.prefer:
            parts.append(f"prefer {self.prefer}")
        if self.reject:
            parts.append("reject " + ", ".join(self.reject))
        return "; ".join(parts) or "<unspecified>"


@dataclass(frozen=True, slots=True)
class DependencyCoordinate:
    """Module coordinate referenced by a dependency alias."""

    group: str
    name: str
    version_ref: str | None = None
    version: VersionConstraint | None = None

    @property
    def module(self) -> str:
        """Return the ``group:name`` module identifier."""

        return f"{self.group}:{self.name}"


@dataclass(frozen=True, slots=True)
class BundleMembers:
    """Ordered dependency aliases grouped under a bundle alias."""

    members: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PluginReference:
    """Plugin identifier paired with an optional version reference."""

    plugin_id: str
    version_ref: str | None = None
    version: VersionConstraint | None = None


LeafPayload: TypeAlias = DependencyCoordinate | VersionConstraint | BundleMembers | PluginReference

PAYLOAD_TYPES: Mapping[NamespaceKind, type] = MappingProxyType(
    {
        NamespaceKind.DEPENDENCY: DependencyCoordinate,
        NamespaceKind.VERSION: VersionConstraint,
        NamespaceKind.BUNDLE: BundleMembers,
        NamespaceKind.PLUGIN: PluginReference,
    },
)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Single catalog declaration tagged with its namespace kind."""

    kind: NamespaceKind
    alias: Alias
    payload: LeafPayload

    def __post_init__(self) -> None:
        """Ensure the payload type agrees with the namespace kind."""

        expected = PAYLOAD_TYPES[self.kind]
        if not isinstance(self.payload, expected):
            raise CatalogIntegrityError(
                f"{self.kind.value} alias '{self.alias}': expected {expected.__name__} payload, "
                f"got {type(self.payload).__name__}",
            )

    @classmethod
    def create(
        cls,
        kind: NamespaceKind | str,
        alias: str | Sequence[str] | Alias,
        payload: LeafPayload,
    ) -> CatalogEntry:
        """Return an entry from loosely typed ``kind`` and ``alias`` values."""

        resolved_kind = kind if isinstance(kind, NamespaceKind) else NamespaceKind.from_raw(kind)
        return cls(kind=resolved_kind, alias=Alias.parse(alias), payload=payload)


EntryTriple: TypeAlias = tuple[NamespaceKind | str, str | Sequence[str] | Alias, LeafPayload]


@dataclass(frozen=True, slots=True)
class Catalog:
    """Validated, immutable, declaration-ordered collection of catalog entries."""

    _entries: tuple[CatalogEntry, ...]
    _index: Mapping[tuple[NamespaceKind, Alias], CatalogEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Index entries by ``(kind, alias)`` and reject duplicates."""

        index: dict[tuple[NamespaceKind, Alias], CatalogEntry] = {}
        for entry in self._entries:
            key = (entry.kind, entry.alias)
            if key in index:
                raise DuplicateAliasError(entry.kind, entry.alias.dotted)
            index[key] = entry
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_entries(cls, entries: Iterable[CatalogEntry | EntryTriple]) -> Catalog:
        """Validate and freeze ``entries`` in declaration order.

        Args:
            entries: Catalog entries or ``(kind, alias, payload)`` triples.

        Returns:
            Catalog: Immutable catalog.

        Raises:
            DuplicateAliasError: If two entries share a ``(kind, alias)`` pair.
            MalformedAliasError: If an alias contains empty segments.
        """

        materialised: list[CatalogEntry] = []
        for item in entries:
            if isinstance(item, CatalogEntry):
                materialised.append(item)
            else:
                kind, alias, payload = item
                materialised.append(CatalogEntry.create(kind, alias, payload))
        return cls(tuple(materialised))

    @classmethod
    def from_triples(cls, triples: Iterable[EntryTriple]) -> Catalog:
        """Validate ``(kind, alias, payload)`` triples; see :meth:`from_entries`."""

        return cls.from_entries(triples)

    @classmethod
    def empty(cls) -> Catalog:
        """Return a catalog without entries."""

        return cls(())

    def entries(self, kind: NamespaceKind | None = None) -> tuple[CatalogEntry, ...]:
        """Return entries in declaration order, optionally filtered by ``kind``."""

        if kind is None:
            return self._entries
        return tuple(entry for entry in self._entries if entry.kind is kind)

    def get(self, kind: NamespaceKind, alias: str | Sequence[str] | Alias) -> CatalogEntry | None:
        """Return the entry declared for ``alias`` in ``kind`` if present."""

        return self._index.get((kind, Alias.parse(alias)))

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = (
    "PAYLOAD_TYPES",
    "Alias",
    "BundleMembers",
    "Catalog",
    "CatalogEntry",
    "DependencyCoordinate",
    "EntryTriple",
    "LeafPayload",
    "NamespaceKind",
    "PluginReference",
    "VersionConstraint",
)
