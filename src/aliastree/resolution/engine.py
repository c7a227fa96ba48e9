# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Static resolution engine backed by the catalog's own version namespace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from ..catalog.errors import DanglingAliasError, MalformedAliasError
from ..catalog.model import (
    Catalog,
    DependencyCoordinate,
    NamespaceKind,
    PluginReference,
    VersionConstraint,
)
from ..catalog.types import VERSION_RANGE_MARKERS


@dataclass(frozen=True, slots=True)
class DependencyHandle:
    """Resolved module coordinate."""

    group: str
    name: str
    version: str | None = None

    @property
    def notation(self) -> str:
        """Return ``group:name[:version]`` notation."""

        base = f"{self.group}:{self.name}"
        return f"{base}:{self.version}" if self.version else base

    def __str__(self) -> str:
        return self.notation


@dataclass(frozen=True, slots=True)
class PluginHandle:
    """Resolved plugin identifier and optional version."""

    plugin_id: str
    version: str | None = None

    def __str__(self) -> str:
        return f"{self.plugin_id}:{self.version}" if self.version else self.plugin_id


def single_version_string(constraint: VersionConstraint) -> str | None:
    """Return ``constraint`` collapsed to one version string when it is expressible as one.

    A constraint collapses when it rejects nothing, names exactly one distinct version
    across ``strictly``, ``require`` and ``prefer``, and that version is not a range.

    Args:
        constraint: Rich version declaration.

    Returns:
        str | None: The single version, or ``None`` when the constraint cannot be flattened.
    """

    if constraint.reject:
        return None
    declared = {value for value in (constraint.strictly, constraint.require, constraint.prefer) if value}
    if len(declared) != 1:
        return None
    (version,) = declared
    if VERSION_RANGE_MARKERS.intersection(version):
        return None
    return version


@dataclass(frozen=True, slots=True)
class StaticResolutionEngine:
    """Resolve leaves without any build-tool machinery.

    Version references are looked up in the catalog's :attr:`NamespaceKind.VERSION`
    namespace; a reference that does not exist raises :class:`DanglingAliasError`.
    """

    catalog: Catalog

    def resolve_dependency(self, coordinate: DependencyCoordinate) -> DependencyHandle:
        """Return the handle for ``coordinate`` with its version flattened when possible."""

        version = self._version_for(coordinate.version_ref, coordinate.version, referrer=coordinate.module)
        return DependencyHandle(group=coordinate.group, name=coordinate.name, version=version)

    def resolve_version(self, constraint: VersionConstraint) -> str | None:
        """Return the single-string form of ``constraint`` or ``None``."""

        return single_version_string(constraint)

    def resolve_plugin(self, plugin: PluginReference) -> PluginHandle:
        """Return the handle for ``plugin`` with its version flattened when possible."""

        version = self._version_for(plugin.version_ref, plugin.version, referrer=plugin.plugin_id)
        return PluginHandle(plugin_id=plugin.plugin_id, version=version)

    def _version_for(
        self,
        version_ref: str | None,
        inline: VersionConstraint | None,
        *,
        referrer: str,
    ) -> str | None:
        if inline is not None:
            return single_version_string(inline)
        if version_ref is None:
            return None
        try:
            entry = self.catalog.get(NamespaceKind.VERSION, version_ref)
        except MalformedAliasError as exc:
            raise DanglingAliasError(version_ref, referrer) from exc
        if entry is None:
            raise DanglingAliasError(version_ref, referrer)
        return single_version_string(cast(VersionConstraint, entry.payload))


__all__ = (
    "DependencyHandle",
    "PluginHandle",
    "StaticResolutionEngine",
    "single_version_string",
)
