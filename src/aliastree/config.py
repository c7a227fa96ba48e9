# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for the aliastree CLI."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
TOOL_TABLE: Final[str] = "aliastree"
DEFAULT_CATALOG_PATH: Final[Path] = Path("gradle") / "libs.versions.toml"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class AliasTreeConfig(BaseModel):
    """Settings controlling catalog discovery, resolution, and console output."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    catalog_path: Path = Field(default=DEFAULT_CATALOG_PATH)
    catalog_name: str = Field(default="libs", min_length=1)
    memoize: bool = True
    use_color: bool = True
    use_emoji: bool = True

    @field_validator("catalog_name")
    @classmethod
    def validate_catalog_name(cls, value: str) -> str:
        """Ensure the accessor root name is a Python identifier."""

        if not value.isidentifier():
            raise ValueError("catalog_name must be a valid identifier")
        return value

    def resolve_paths(self, root: Path) -> AliasTreeConfig:
        """Return a copy whose ``catalog_path`` is anchored at ``root`` when relative."""

        if self.catalog_path.is_absolute():
            return self
        return self.model_copy(update={"catalog_path": (root / self.catalog_path).resolve()})


def load_config(root: Path, *, overrides: Mapping[str, Any] | None = None) -> AliasTreeConfig:
    """Load ``[tool.aliastree]`` from ``root/pyproject.toml`` and apply ``overrides``.

    Args:
        root: Project root directory.
        overrides: Values taking precedence over the file (``None`` values are ignored).

    Returns:
        AliasTreeConfig: Validated configuration with ``catalog_path`` resolved against ``root``.

    Raises:
        ConfigError: If the file cannot be parsed or the settings are invalid.
    """

    data: dict[str, Any] = dict(_read_tool_table(root / PYPROJECT_FILENAME))
    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        config = AliasTreeConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid [tool.{TOOL_TABLE}] configuration: {exc}") from exc
    return config.resolve_paths(root)


def _read_tool_table(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    tool = document.get("tool", {})
    if not isinstance(tool, Mapping):
        raise ConfigError(f"{path}: [tool] must be a table")
    table = tool.get(TOOL_TABLE, {})
    if not isinstance(table, Mapping):
        raise ConfigError(f"{path}: [tool.{TOOL_TABLE}] must be a table")
    return {key.replace("-", "_"): value for key, value in table.items()}


__all__ = ["DEFAULT_CATALOG_PATH", "AliasTreeConfig", "ConfigError", "load_config"]
