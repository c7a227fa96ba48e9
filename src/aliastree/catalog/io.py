# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog documents and schemas."""

from __future__ import annotations

import json
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import cast

from .errors import CatalogIntegrityError
from .types import JSONValue


def load_json_object(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON document from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the JSON file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the file does not exist.
        CatalogIntegrityError: If the file is not UTF-8, cannot be parsed, or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse JSON: {exc.msg}") from exc
        except UnicodeDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    return _ensure_json_object(payload, context=str(path))


def load_toml_document(path: Path) -> Mapping[str, JSONValue]:
    """Load a TOML document from disk.

    Args:
        path: Filesystem path to the TOML file.

    Returns:
        Mapping[str, JSONValue]: Parsed top-level table, in document order.

    Raises:
        FileNotFoundError: If the file does not exist.
        CatalogIntegrityError: If the file is not UTF-8 or not valid TOML.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("rb") as stream:
        try:
            payload = tomllib.load(stream)
        except tomllib.TOMLDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse TOML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    return cast(Mapping[str, JSONValue], payload)


def _ensure_json_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    """Ensure ``value`` is a JSON object composed of JSON-compatible structures."""

    mapping = _ensure_json_value(value, context=context)
    if not isinstance(mapping, Mapping):
        raise CatalogIntegrityError(f"{context}: expected a JSON object")
    return mapping


def _ensure_json_value(value: JSONValue, *, context: str) -> JSONValue:
    """Ensure ``value`` is composed of JSON-compatible structures.

    Raises:
        CatalogIntegrityError: If ``value`` contains unsupported constructs.
    """

    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _ensure_json_value(item, context=f"{context}.{key}") for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_ensure_json_value(item, context=f"{context}[]") for item in value]
    raise CatalogIntegrityError(f"{context}: value is not valid JSON")


__all__ = ["load_json_object", "load_toml_document"]
