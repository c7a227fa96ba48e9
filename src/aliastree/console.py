# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by the CLI commands, keyed by presentation preset."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final

from rich.console import Console

from .config import AliasTreeConfig


@dataclass(frozen=True, slots=True)
class ConsolePreset:
    """Colour and emoji preferences after terminal detection."""

    color: bool
    emoji: bool

    @classmethod
    def from_config(cls, config: AliasTreeConfig) -> ConsolePreset:
        """Return the preset for ``config``; colour is dropped when stdout is not a terminal."""

        return cls(color=config.use_color and stdout_is_terminal(), emoji=config.use_emoji)

    @classmethod
    def from_flags(cls, *, color: bool | None, emoji: bool | None) -> ConsolePreset:
        """Return a preset from CLI flags alone, treating unset flags as enabled."""

        return cls(color=color is not False and stdout_is_terminal(), emoji=emoji is not False)


def stdout_is_terminal() -> bool:
    """Return ``True`` when stdout reports TTY support."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


_CONSOLES: Final[dict[ConsolePreset, Console]] = {}


def console_for(preset: ConsolePreset) -> Console:
    """Return the process-wide console rendering with ``preset``.

    Consoles write to whatever ``sys.stdout`` is at print time, so a cached
    instance keeps working when stdout is swapped by a test runner.
    """

    cached = _CONSOLES.get(preset)
    if cached is not None:
        return cached
    console = Console(
        color_system="auto" if preset.color else None,
        force_terminal=preset.color,
        no_color=not preset.color,
        emoji=preset.emoji,
        soft_wrap=True,
    )
    return _CONSOLES.setdefault(preset, console)


__all__ = ["ConsolePreset", "console_for", "stdout_is_terminal"]
