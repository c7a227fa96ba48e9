# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by catalog loading, tree navigation, and resolution."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .model import NamespaceKind


class CatalogIntegrityError(RuntimeError):
    """Raised when catalog metadata violates structural invariants."""

    def __init__(self, message: str | None = None) -> None:
        """Create the integrity error with an optional ``message``."""

        super().__init__(message or "catalog integrity violation")


class CatalogValidationError(RuntimeError):
    """Raised when a catalog document fails structural schema validation."""


class DuplicateAliasError(CatalogIntegrityError):
    """Raised when two catalog entries share the same ``(kind, alias)`` pair."""

    def __init__(self, kind: NamespaceKind, alias: str) -> None:
        """Record the colliding ``kind`` and ``alias``.

        Args:
            kind: Namespace in which the collision occurred.
            alias: Dotted alias declared more than once.
        """

        self.kind = kind
        self.alias = alias
        super().__init__(f"duplicate {kind.value} alias '{alias}'")


class MalformedAliasError(CatalogIntegrityError):
    """Raised when an alias contains empty segments or no segments at all."""

    def __init__(self, alias: str) -> None:
        """Record the offending ``alias`` in its raw textual form."""

        self.alias = alias
        super().__init__(f"malformed alias '{alias}'")


class ReservedSegmentError(CatalogIntegrityError):
    """Raised when an alias segment collides with a name the accessor facade reserves."""

    def __init__(self, kind: NamespaceKind, alias: str, segment: str) -> None:
        """Record the ``kind``, full ``alias`` and offending ``segment``."""

        self.kind = kind
        self.alias = alias
        self.segment = segment
        super().__init__(f"{kind.value} alias '{alias}' uses reserved segment '{segment}'")


class NotFoundError(LookupError):
    """Raised when navigation requests a child that does not exist."""

    def __init__(self, name: str, path: Sequence[str]) -> None:
        """Record the missing segment ``name`` and the ``path`` it was requested from.

        Args:
            name: Segment requested by the caller.
            path: Segments of the node that was queried (empty for a root).
        """

        self.name = name
        self.path = tuple(path)
        location = ".".join(self.path) or "<root>"
        super().__init__(f"no entry named '{name}' under {location}")


class DanglingAliasError(LookupError):
    """Raised when an entry references an alias missing from its target namespace."""

    def __init__(self, alias: str, referrer: str | None = None) -> None:
        """Record the missing ``alias`` and the entry that referenced it.

        Args:
            alias: Alias that could not be found.
            referrer: Alias of the entry holding the dangling reference.
        """

        self.alias = alias
        self.referrer = referrer
        suffix = f" (referenced by '{referrer}')" if referrer else ""
        super().__init__(f"unknown alias '{alias}'{suffix}")


__all__ = (
    "CatalogIntegrityError",
    "CatalogValidationError",
    "DanglingAliasError",
    "DuplicateAliasError",
    "MalformedAliasError",
    "NotFoundError",
    "ReservedSegmentError",
)
