# topmark:header:start
#
#   project      : LogCompose
#   file         : test_config_loaders.py
#   file_relpath : tests/config/test_config_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading and config file discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from logcompose.config.loaders import (
    discover_config_file,
    extract_config_table,
    get_nested_table,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from logcompose.config.model import MutableFormatConfig

if TYPE_CHECKING:
    from pathlib import Path


def test_get_table_value_ignores_non_tables() -> None:
    """Missing keys and scalar values yield an empty table."""
    table = {"format": {"max_depth": 1}, "scalar": 3}
    assert get_table_value(table, "format") == {"max_depth": 1}
    assert get_table_value(table, "scalar") == {}
    assert get_table_value(table, "missing") == {}


def test_get_nested_table() -> None:
    """Dotted paths follow sub-tables and stop at the first miss."""
    data = {"tool": {"logcompose": {"format": {}}}}
    assert get_nested_table(data, "tool.logcompose") == {"format": {}}
    assert get_nested_table(data, "tool.other") == {}
    assert get_nested_table({"tool": 1}, "tool.logcompose") == {}


def test_defaults_dict_is_a_fresh_copy() -> None:
    """Callers may mutate the returned defaults."""
    first = load_defaults_dict()
    first["format"]["max_depth"] = 99
    assert load_defaults_dict()["format"]["max_depth"] == 0


def test_load_toml_dict(tmp_path: Path) -> None:
    """Valid documents are returned as plain dicts."""
    path: Path = tmp_path / "logcompose.toml"
    path.write_text("[format]\nmax_depth = 3\n", encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"format": {"max_depth": 3}}
    assert type(data["format"]) is dict


def test_load_toml_dict_errors_yield_empty(tmp_path: Path) -> None:
    """Unreadable or malformed files are logged and yield an empty dict."""
    broken: Path = tmp_path / "broken.toml"
    broken.write_text("[format\nmax_depth = ", encoding="utf-8")
    assert load_toml_dict(broken) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_extract_config_table(tmp_path: Path) -> None:
    """``pyproject.toml`` nests the table; ``logcompose.toml`` is the table."""
    data = {"tool": {"logcompose": {"format": {"max_depth": 1}}}}
    assert extract_config_table(tmp_path / "pyproject.toml", data) == {
        "format": {"max_depth": 1}
    }
    assert extract_config_table(tmp_path / "pyproject.toml", {"project": {}}) is None
    assert extract_config_table(tmp_path / "logcompose.toml", {}) is None
    assert extract_config_table(tmp_path / "logcompose.toml", {"format": {}}) == {"format": {}}


def test_discover_prefers_logcompose_toml(tmp_path: Path) -> None:
    """Within one directory ``logcompose.toml`` wins over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text(
        "[tool.logcompose.format]\nmax_depth = 1\n", encoding="utf-8"
    )
    (tmp_path / "logcompose.toml").write_text("[format]\nmax_depth = 2\n", encoding="utf-8")
    assert discover_config_file(tmp_path) == tmp_path / "logcompose.toml"


def test_discover_skips_pyproject_without_section(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.logcompose]`` does not stop the walk."""
    (tmp_path / "pyproject.toml").write_text(
        "[tool.logcompose.format]\nmax_depth = 1\n", encoding="utf-8"
    )
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert discover_config_file(child) == tmp_path / "pyproject.toml"


def test_discover_from_file_uses_its_directory(tmp_path: Path) -> None:
    """Starting from a file searches its parent directory."""
    (tmp_path / "logcompose.toml").write_text("[format]\n", encoding="utf-8")
    source: Path = tmp_path / "app.py"
    source.write_text("", encoding="utf-8")
    assert discover_config_file(source) == tmp_path / "logcompose.toml"


def test_from_toml_file_reads_pyproject(tmp_path: Path) -> None:
    """``[tool.logcompose]`` tables load like ``logcompose.toml`` root tables."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text(
        '[tool.logcompose.format]\nmax_elements = 4\nplaceholder_style = "square"\n',
        encoding="utf-8",
    )
    builder = MutableFormatConfig.from_toml_file(path)
    assert builder is not None
    assert builder.max_elements == 4


def test_from_toml_file_without_table(tmp_path: Path) -> None:
    """Files without a LogCompose table yield ``None``."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableFormatConfig.from_toml_file(path) is None
