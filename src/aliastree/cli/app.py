# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .check import check_command
from .lookup import lookup_command
from .tree import tree_command

app = typer.Typer(
    help="Compile version-catalog aliases into a navigable accessor tree.",
    add_completion=False,
    no_args_is_help=True,
)
app.command("tree")(tree_command)
app.command("lookup")(lookup_command)
app.command("check")(check_command)

__all__ = ["app"]
