# topmark:header:start
#
#   project      : LogCompose
#   file         : loaders.py
#   file_relpath : src/logcompose/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and locate TOML configuration sources.

This module provides I/O helpers for reading LogCompose configuration from
on-disk TOML files (`logcompose.toml` / `pyproject.toml`) and the runtime defaults
defined in code.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from logcompose.config.keys import Toml
from logcompose.config.logging import get_logger
from logcompose.constants import LOGCOMPOSE_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from logcompose.config.logging import LogcomposeLogger

TomlTable = dict[str, Any]

logger: LogcomposeLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_nested_table(table: TomlTable, dotted: str) -> TomlTable:
    """Follow a dotted path (``"tool.logcompose"``) of sub-tables; empty dict on any miss."""
    current: TomlTable = table
    for part in dotted.split("."):
        current = get_table_value(current, part)
    return current


def load_defaults_dict() -> TomlTable:
    """Return LogCompose's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. All limits default to ``0``
    (unlimited) so that rendering matches the uncapped contract unless configured.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_FORMAT: {
            Toml.KEY_MAX_DEPTH: 0,
            Toml.KEY_MAX_ELEMENTS: 0,
            Toml.KEY_MAX_DISPLAY_ELEMENTS: 0,
            Toml.KEY_PLACEHOLDER_STYLE: "angle",
            Toml.KEY_SHOW_MILLISECONDS: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``logcompose.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the LogCompose root table from a parsed document, or None if absent.

    ``logcompose.toml`` is the root table itself; ``pyproject.toml`` nests it under
    ``[tool.logcompose]``. Empty tables (including unreadable files) count as absent.
    """
    if path.name == PYPROJECT_TOML_NAME:
        data = get_nested_table(data, PYPROJECT_TOOL_SECTION)
    return data or None


def _has_logcompose_section(pyproject: Path) -> bool:
    data: TomlTable = load_toml_dict(pyproject)
    return bool(get_nested_table(data, PYPROJECT_TOOL_SECTION))


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file walking up from ``start``.

    In each directory ``logcompose.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.logcompose]`` table.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        Path | None: The config file, or ``None`` when none is found.
    """
    base: Path = start if start.is_dir() else start.parent
    for directory in (base, *base.parents):
        candidate: Path = directory / LOGCOMPOSE_TOML_NAME
        if candidate.is_file():
            logger.debug("Found config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and _has_logcompose_section(pyproject):
            logger.debug("Found [tool.logcompose] in %s", pyproject)
            return pyproject
    logger.trace("No config file found above %s", base)
    return None
