# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for ``[tool.aliastree]`` configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from aliastree.config import DEFAULT_CATALOG_PATH, AliasTreeConfig, ConfigError, load_config


def test_defaults_without_pyproject(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config.catalog_path == (tmp_path / DEFAULT_CATALOG_PATH).resolve()
    assert config.catalog_name == "libs"
    assert config.memoize is True
    assert config.use_color is True


def test_tool_table_is_read_with_kebab_keys(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.aliastree]\ncatalog-path = "catalogs/deps.toml"\ncatalog_name = "deps"\nuse-emoji = false\n',
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.catalog_path == (tmp_path / "catalogs" / "deps.toml").resolve()
    assert config.catalog_name == "deps"
    assert config.use_emoji is False


def test_overrides_take_precedence_and_none_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.aliastree]\nuse_color = false\n', encoding="utf-8")
    absolute = (tmp_path / "elsewhere.json").resolve()
    config = load_config(tmp_path, overrides={"catalog_path": absolute, "use_color": None, "memoize": False})
    assert config.catalog_path == absolute
    assert config.use_color is False
    assert config.memoize is False


@pytest.mark.parametrize(
    "table",
    [
        '[tool.aliastree]\ncatalog_name = "not an identifier"\n',
        '[tool.aliastree]\nunknown = 1\n',
        '[tool.aliastree]\nmemoize = "sometimes"\n',
        "[tool]\naliastree = 3\n",
    ],
)
def test_invalid_settings_raise_config_error(tmp_path: Path, table: str) -> None:
    (tmp_path / "pyproject.toml").write_text(table, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unparseable_pyproject_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.aliastree\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_non_utf8_pyproject_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_bytes(b"[tool.aliastree]\ncatalog_name = \"\xff\"\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_config_is_frozen() -> None:
    config = AliasTreeConfig()
    with pytest.raises(ValueError):
        config.catalog_name = "deps"  # type: ignore[misc]
