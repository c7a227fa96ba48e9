# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating JSON catalog documents."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Protocol, cast, runtime_checkable

from .io import load_json_object
from .types import JSONValue

CATALOG_SCHEMA_FILENAME: Final[str] = "catalog.schema.json"
BUNDLED_SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent / "schemas"


class SchemaValidationError(Protocol):
    """Represent schema validation errors surfaced by jsonschema."""

    @property
    def message(self) -> str:
        """Return the descriptive validation error message."""


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def validate(self, instance: JSONValue) -> None:
        """Validate ``instance`` against the bound schema.

        Args:
            instance: JSON payload to validate against the schema.

        Raises:
            Exception: Implementations raise jsonschema validation errors when invalid.
        """

    def iter_errors(self, instance: JSONValue) -> Iterable[SchemaValidationError]:
        """Iterate over validation errors for ``instance``."""


SchemaValidatorFactory = Callable[[JSONValue], SchemaValidator]


jsonschema_module = importlib.import_module("jsonschema")
Draft202012Validator = cast(SchemaValidatorFactory, jsonschema_module.Draft202012Validator)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the JSON Schema validator used for catalog documents."""

    schema_root: Path
    catalog_validator: SchemaValidator

    @classmethod
    def load(cls, *, schema_root: Path | None = None) -> SchemaRepository:
        """Load the catalog schema validator from disk.

        Args:
            schema_root: Optional override for the schema directory; defaults to the
                schemas shipped with the package.

        Returns:
            SchemaRepository: Repository configured with the catalog validator.
        """
        resolved_root = schema_root or BUNDLED_SCHEMA_ROOT
        schema = load_json_object(resolved_root / CATALOG_SCHEMA_FILENAME)
        return cls(
            schema_root=resolved_root,
            catalog_validator=Draft202012Validator(schema),
        )

    def errors(self, document: JSONValue) -> tuple[str, ...]:
        """Return every validation message for ``document`` without raising."""

        return tuple(error.message for error in self.catalog_validator.iter_errors(document))


__all__ = ["BUNDLED_SCHEMA_ROOT", "CATALOG_SCHEMA_FILENAME", "SchemaRepository", "SchemaValidator"]
