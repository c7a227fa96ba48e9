# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Leaf resolution routing and the bundled static resolution engine."""

from __future__ import annotations

from typing import Final

from .engine import DependencyHandle, PluginHandle, StaticResolutionEngine, single_version_string
from .resolver import LeafResolver, ResolutionEngine, ResolvedLeaf

__all__: Final[tuple[str, ...]] = (
    "DependencyHandle",
    "LeafResolver",
    "PluginHandle",
    "ResolutionEngine",
    "ResolvedLeaf",
    "StaticResolutionEngine",
    "single_version_string",
)
