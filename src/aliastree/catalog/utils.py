# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising raw catalog documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import CatalogIntegrityError
from .types import ALIAS_SEPARATOR, TOML_ALIAS_SEPARATORS, JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` coerced to ``str`` or raise a catalog error.

    Args:
        value: Raw value extracted from the catalog document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: Value coerced to a string.

    Raises:
        CatalogIntegrityError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value:
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a non-empty string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw value extracted from the catalog document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str | None: ``value`` when present, otherwise ``None``.

    Raises:
        CatalogIntegrityError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw value extracted from the catalog document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise CatalogIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping or raise an error.

    Args:
        value: Raw value extracted from the catalog document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, JSONValue]: Mapping derived from ``value``.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a table")
    return value


def optional_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping, treating ``None`` as an empty table."""

    if value is None:
        return {}
    return expect_mapping(value, key=key, context=context)


def normalize_alias(raw: str) -> str:
    """Return ``raw`` with version-catalog separators (``-`` and ``_``) folded into dots.

    Args:
        raw: Alias as written in a version catalog file.

    Returns:
        str: Dotted alias suitable for :meth:`aliastree.catalog.model.Alias.parse`.
    """

    normalised = raw
    for separator in TOML_ALIAS_SEPARATORS:
        normalised = normalised.replace(separator, ALIAS_SEPARATOR)
    return normalised


__all__ = [
    "expect_mapping",
    "expect_string",
    "normalize_alias",
    "optional_mapping",
    "optional_string",
    "string_array",
]
