# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loaders that materialise catalogs from TOML and JSON documents."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Final, cast

from .errors import CatalogIntegrityError, CatalogValidationError
from .io import load_json_object, load_toml_document
from .model import (
    BundleMembers,
    Catalog,
    CatalogEntry,
    DependencyCoordinate,
    NamespaceKind,
    PluginReference,
    VersionConstraint,
)
from .schema import SchemaRepository
from .types import JSONValue
from .utils import (
    expect_mapping,
    expect_string,
    normalize_alias,
    optional_mapping,
    optional_string,
    string_array,
)

LOGGER = logging.getLogger(__name__)

jsonschema_module = importlib.import_module("jsonschema")
jsonschema_exceptions: ModuleType = cast(ModuleType, jsonschema_module.exceptions)
JsonSchemaValidationError = cast(type[Exception], getattr(jsonschema_exceptions, "ValidationError"))

TOML_SECTIONS: Final[Mapping[str, NamespaceKind]] = {
    "versions": NamespaceKind.VERSION,
    "libraries": NamespaceKind.DEPENDENCY,
    "bundles": NamespaceKind.BUNDLE,
    "plugins": NamespaceKind.PLUGIN,
}
_RICH_VERSION_KEYS: Final[frozenset[str]] = frozenset({"require", "strictly", "prefer", "reject"})
_LIBRARY_KEYS: Final[frozenset[str]] = frozenset({"module", "group", "name", "version"})
_PLUGIN_KEYS: Final[frozenset[str]] = frozenset({"id", "version"})


@dataclass(slots=True)
class CatalogLoader:
    """Loader that reads catalog files and validates JSON documents against the bundled schema."""

    schema_root: Path | None = None
    _schemas: SchemaRepository | None = field(init=False, default=None, repr=False)

    def load(self, path: Path) -> Catalog:
        """Load ``path`` choosing the parser from its suffix.

        Args:
            path: ``.toml`` version catalog or ``.json`` catalog document.

        Returns:
            Catalog: Validated catalog model.

        Raises:
            CatalogIntegrityError: If the suffix is not recognised or the document is malformed.
        """

        suffix = path.suffix.lower()
        if suffix == ".toml":
            return self.load_toml(path)
        if suffix == ".json":
            return self.load_json(path)
        raise CatalogIntegrityError(f"{path}: unsupported catalog format '{suffix or '<none>'}'")

    def load_toml(self, path: Path) -> Catalog:
        """Load a version-catalog TOML file (``[versions]``, ``[libraries]``, ``[bundles]``, ``[plugins]``).

        Aliases have ``-`` and ``_`` folded into ``.`` so that ``ktor-server-auth``
        addresses the ``ktor.server.auth`` node.
        """

        document = load_toml_document(path)
        context = str(path)
        unknown = sorted(set(document) - set(TOML_SECTIONS) - {"metadata"})
        if unknown:
            raise CatalogIntegrityError(f"{context}: unknown catalog sections {', '.join(unknown)}")
        entries: list[CatalogEntry] = []
        for section, kind in TOML_SECTIONS.items():
            table = optional_mapping(document.get(section), key=section, context=context)
            for raw_alias, value in table.items():
                entry_context = f"{context}:{section}.{raw_alias}"
                entries.append(
                    CatalogEntry.create(kind, normalize_alias(raw_alias), _toml_payload(kind, value, entry_context)),
                )
        catalog = Catalog.from_entries(entries)
        LOGGER.debug("loaded %d catalog entries from %s", len(catalog), path)
        return catalog

    def load_json(self, path: Path) -> Catalog:
        """Load a JSON catalog document after validating it against the catalog schema.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        document = load_json_object(path)
        self._validate_document(document, path=path)
        entries: list[CatalogEntry] = []
        for index, raw_entry in enumerate(cast(list[JSONValue], document["entries"])):
            context = f"{path}:entries[{index}]"
            mapping = expect_mapping(raw_entry, key="entry", context=context)
            kind = NamespaceKind.from_raw(expect_string(mapping.get("kind"), key="kind", context=context))
            alias = expect_string(mapping.get("alias"), key="alias", context=context)
            payload = expect_mapping(mapping.get("payload"), key="payload", context=context)
            entries.append(CatalogEntry.create(kind, alias, _json_payload(kind, payload, context)))
        catalog = Catalog.from_entries(entries)
        LOGGER.debug("loaded %d catalog entries from %s", len(catalog), path)
        return catalog

    def _validate_document(self, document: Mapping[str, JSONValue], *, path: Path) -> None:
        """Validate ``document`` against the catalog schema.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        if self._schemas is None:
            self._schemas = SchemaRepository.load(schema_root=self.schema_root)
        try:
            self._schemas.catalog_validator.validate(document)
        except JsonSchemaValidationError as exc:
            raise CatalogValidationError(f"{path}: {getattr(exc, 'message', exc)}") from exc


def load_catalog(path: Path, *, schema_root: Path | None = None) -> Catalog:
    """Load the catalog stored at ``path`` (``.toml`` or ``.json``)."""

    return CatalogLoader(schema_root=schema_root).load(path)


def load_toml_catalog(path: Path) -> Catalog:
    """Load a version-catalog TOML file."""

    return CatalogLoader().load_toml(path)


def load_json_catalog(path: Path, *, schema_root: Path | None = None) -> Catalog:
    """Load and schema-validate a JSON catalog document."""

    return CatalogLoader(schema_root=schema_root).load_json(path)


def _toml_payload(
    kind: NamespaceKind,
    value: JSONValue,
    context: str,
) -> DependencyCoordinate | VersionConstraint | BundleMembers | PluginReference:
    if kind is NamespaceKind.VERSION:
        if isinstance(value, str):
            return VersionConstraint.of(value)
        return _rich_version(expect_mapping(value, key="version", context=context), context)
    if kind is NamespaceKind.DEPENDENCY:
        return _toml_library(value, context)
    if kind is NamespaceKind.BUNDLE:
        members = string_array(value, key="bundle", context=context)
        return BundleMembers(members=tuple(normalize_alias(member) for member in members))
    return _toml_plugin(value, context)


def _toml_library(value: JSONValue, context: str) -> DependencyCoordinate:
    if isinstance(value, str):
        parts = value.split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise CatalogIntegrityError(f"{context}: expected 'group:name[:version]' notation, got '{value}'")
        version = VersionConstraint.of(parts[2]) if len(parts) == 3 else None
        return DependencyCoordinate(group=parts[0], name=parts[1], version=version)
    mapping = expect_mapping(value, key="library", context=context)
    _reject_unknown_keys(mapping, _LIBRARY_KEYS, context)
    module = optional_string(mapping.get("module"), key="module", context=context)
    if module is not None:
        group, separator, name = module.partition(":")
        if not separator or not group or not name or ":" in name:
            raise CatalogIntegrityError(f"{context}: expected 'module' to use 'group:name' notation")
    else:
        group = expect_string(mapping.get("group"), key="group", context=context)
        name = expect_string(mapping.get("name"), key="name", context=context)
    version_ref, version = _toml_version_field(mapping.get("version"), context)
    return DependencyCoordinate(group=group, name=name, version_ref=version_ref, version=version)


def _toml_plugin(value: JSONValue, context: str) -> PluginReference:
    if isinstance(value, str):
        plugin_id, separator, version = value.partition(":")
        if not plugin_id or (separator and not version):
            raise CatalogIntegrityError(f"{context}: expected 'id[:version]' notation, got '{value}'")
        return PluginReference(plugin_id=plugin_id, version=VersionConstraint.of(version) if version else None)
    mapping = expect_mapping(value, key="plugin", context=context)
    _reject_unknown_keys(mapping, _PLUGIN_KEYS, context)
    plugin_id = expect_string(mapping.get("id"), key="id", context=context)
    version_ref, version = _toml_version_field(mapping.get("version"), context)
    return PluginReference(plugin_id=plugin_id, version_ref=version_ref, version=version)


def _toml_version_field(value: JSONValue | None, context: str) -> tuple[str | None, VersionConstraint | None]:
    """Return ``(version_ref, inline_constraint)`` parsed from a ``version`` field."""

    if value is None:
        return None, None
    if isinstance(value, str):
        return None, VersionConstraint.of(value)
    mapping = expect_mapping(value, key="version", context=context)
    if "ref" in mapping:
        if len(mapping) != 1:
            raise CatalogIntegrityError(f"{context}: 'version.ref' cannot be combined with other version keys")
        return normalize_alias(expect_string(mapping["ref"], key="version.ref", context=context)), None
    return None, _rich_version(mapping, context)


def _rich_version(mapping: Mapping[str, JSONValue], context: str) -> VersionConstraint:
    _reject_unknown_keys(mapping, _RICH_VERSION_KEYS, context)
    return VersionConstraint(
        require=optional_string(mapping.get("require"), key="require", context=context),
        strictly=optional_string(mapping.get("strictly"), key="strictly", context=context),
        prefer=optional_string(mapping.get("prefer"), key="prefer", context=context),
        reject=string_array(mapping.get("reject"), key="reject", context=context),
    )


def _json_payload(
    kind: NamespaceKind,
    payload: Mapping[str, JSONValue],
    context: str,
) -> DependencyCoordinate | VersionConstraint | BundleMembers | PluginReference:
    if kind is NamespaceKind.VERSION:
        return _rich_version(payload, context)
    if kind is NamespaceKind.BUNDLE:
        return BundleMembers(members=string_array(payload.get("members"), key="members", context=context))
    version_ref = optional_string(payload.get("versionRef"), key="versionRef", context=context)
    raw_version = payload.get("version")
    version = (
        _rich_version(expect_mapping(raw_version, key="version", context=context), context)
        if raw_version is not None
        else None
    )
    if kind is NamespaceKind.DEPENDENCY:
        return DependencyCoordinate(
            group=expect_string(payload.get("group"), key="group", context=context),
            name=expect_string(payload.get("name"), key="name", context=context),
            version_ref=version_ref,
            version=version,
        )
    return PluginReference(
        plugin_id=expect_string(payload.get("id"), key="id", context=context),
        version_ref=version_ref,
        version=version,
    )


def _reject_unknown_keys(mapping: Mapping[str, JSONValue], allowed: frozenset[str], context: str) -> None:
    unknown = sorted(set(mapping) - allowed)
    if unknown:
        raise CatalogIntegrityError(f"{context}: unsupported keys {', '.join(unknown)}")


__all__ = [
    "TOML_SECTIONS",
    "CatalogLoader",
    "load_catalog",
    "load_json_catalog",
    "load_toml_catalog",
]
