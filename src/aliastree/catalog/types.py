# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the alias catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

CATALOG_SCHEMA_VERSION: Final[str] = "1.0.0"
ALIAS_SEPARATOR: Final[str] = "."
TOML_ALIAS_SEPARATORS: Final[tuple[str, ...]] = ("-", "_")
VERSION_RANGE_MARKERS: Final[frozenset[str]] = frozenset("[](),")

__all__ = [
    "ALIAS_SEPARATOR",
    "CATALOG_SCHEMA_VERSION",
    "TOML_ALIAS_SEPARATORS",
    "VERSION_RANGE_MARKERS",
    "JSONPrimitive",
    "JSONValue",
]
