# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Namespace tree construction and navigation."""

from __future__ import annotations

from typing import Final

from .builder import TreeBuilder, build_store
from .node import NamespaceNode, NodeShape, classify_node
from .store import AccessorStore

__all__: Final[tuple[str, ...]] = (
    "AccessorStore",
    "NamespaceNode",
    "NodeShape",
    "TreeBuilder",
    "build_store",
    "classify_node",
)
