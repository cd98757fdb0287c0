# topmark:header:start
#
#   project      : LogCompose
#   file         : model.py
#   file_relpath : src/logcompose/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format configuration model and merge policy.

This module defines:
    - `FormatConfig`: an immutable snapshot consumed by the renderers.
    - `MutableFormatConfig`: a mutable builder used while loading/merging layers;
      it can be frozen into `FormatConfig` and thawed back for edits.

Layering:
    defaults → discovered/explicit TOML file → programmatic overrides (e.g. CLI flags).
    Unset fields (``None``) in a later layer never clobber an earlier value.

Normalization:
    Limits mirror the rules of the formatting environment: ``None`` keeps the
    default, NaN keeps the default, negative or infinite values become ``0``
    (unlimited), and floats are floored. Invalid values are logged, never raised.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from logcompose.config.keys import Toml
from logcompose.config.loaders import (
    discover_config_file,
    extract_config_table,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from logcompose.config.logging import get_logger
from logcompose.core.special import PlaceholderStyle

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from logcompose.config.loaders import TomlTable
    from logcompose.config.logging import LogcomposeLogger

logger: LogcomposeLogger = get_logger(__name__)


def normalize_limit(value: object, default: int, *, key: str = "limit") -> int:
    """Normalize a configured limit to a non-negative integer.

    Args:
        value (object): Raw value (from TOML, CLI or API).
        default (int): Value used when ``value`` is unset or NaN.
        key (str): Key name used in log messages.

    Returns:
        int: ``default`` for ``None``/NaN/wrong types, ``0`` for negative or infinite
        values, otherwise the floored value.
    """
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("Ignoring non-numeric value for %s: %r", key, value)
        return default
    if isinstance(value, float):
        if math.isnan(value):
            return default
        if math.isinf(value):
            return 0
    if value < 0:
        logger.warning("Negative value for %s (%r) treated as 0 (unlimited)", key, value)
        return 0
    return math.floor(value)


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatting options.

    Attributes:
        max_depth (int): Nesting depth at which non-empty containers collapse to
            ``[...]`` / ``{...}``; ``0`` means unlimited.
        max_elements (int): Entry count from which a container is truncated;
            ``0`` means never truncate.
        max_display_elements (int): Entries kept when truncating; ``0`` keeps all.
        placeholder_style (PlaceholderStyle): Brackets around opaque placeholders.
        show_milliseconds (bool): Whether log-line timestamps include ``.sss``.
    """

    max_depth: int = 0
    max_elements: int = 0
    max_display_elements: int = 0
    placeholder_style: PlaceholderStyle = PlaceholderStyle.ANGLE
    show_milliseconds: bool = False

    def __post_init__(self) -> None:
        for name in (Toml.KEY_MAX_DEPTH, Toml.KEY_MAX_ELEMENTS, Toml.KEY_MAX_DISPLAY_ELEMENTS):
            object.__setattr__(self, name, normalize_limit(getattr(self, name), 0, key=name))

    def thaw(self) -> MutableFormatConfig:
        """Return a mutable copy of this snapshot."""
        return MutableFormatConfig(
            max_depth=self.max_depth,
            max_elements=self.max_elements,
            max_display_elements=self.max_display_elements,
            placeholder_style=self.placeholder_style,
            show_milliseconds=self.show_milliseconds,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this snapshot as a ``{"format": {...}}`` TOML table."""
        return {
            Toml.SECTION_FORMAT: {
                Toml.KEY_MAX_DEPTH: self.max_depth,
                Toml.KEY_MAX_ELEMENTS: self.max_elements,
                Toml.KEY_MAX_DISPLAY_ELEMENTS: self.max_display_elements,
                Toml.KEY_PLACEHOLDER_STYLE: self.placeholder_style.key,
                Toml.KEY_SHOW_MILLISECONDS: self.show_milliseconds,
            }
        }


@dataclass
class MutableFormatConfig:
    """Mutable builder for [`FormatConfig`][logcompose.config.model.FormatConfig].

    ``None`` marks a field as unset for merge purposes.
    """

    max_depth: int | None = None
    max_elements: int | None = None
    max_display_elements: int | None = None
    placeholder_style: PlaceholderStyle | None = None
    show_milliseconds: bool | None = None

    def freeze(self) -> FormatConfig:
        """Return an immutable snapshot; unset fields take the built-in defaults."""
        base = FormatConfig()
        return FormatConfig(
            max_depth=normalize_limit(self.max_depth, base.max_depth, key=Toml.KEY_MAX_DEPTH),
            max_elements=normalize_limit(
                self.max_elements, base.max_elements, key=Toml.KEY_MAX_ELEMENTS
            ),
            max_display_elements=normalize_limit(
                self.max_display_elements,
                base.max_display_elements,
                key=Toml.KEY_MAX_DISPLAY_ELEMENTS,
            ),
            placeholder_style=self.placeholder_style or base.placeholder_style,
            show_milliseconds=(
                base.show_milliseconds if self.show_milliseconds is None else self.show_milliseconds
            ),
        )

    def merge_with(self, other: MutableFormatConfig) -> MutableFormatConfig:
        """Return a new builder where fields set in ``other`` override this one."""
        return MutableFormatConfig(
            max_depth=other.max_depth if other.max_depth is not None else self.max_depth,
            max_elements=(
                other.max_elements if other.max_elements is not None else self.max_elements
            ),
            max_display_elements=(
                other.max_display_elements
                if other.max_display_elements is not None
                else self.max_display_elements
            ),
            placeholder_style=other.placeholder_style or self.placeholder_style,
            show_milliseconds=(
                other.show_milliseconds
                if other.show_milliseconds is not None
                else self.show_milliseconds
            ),
        )

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableFormatConfig:
        """Merge programmatic overrides keyed by TOML key names (``None`` values ignored)."""
        return self.merge_with(MutableFormatConfig.from_toml_dict({Toml.SECTION_FORMAT: overrides}))

    @classmethod
    def from_defaults(cls) -> MutableFormatConfig:
        """Return a builder populated from the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableFormatConfig:
        """Build from a LogCompose root table (the one holding ``[format]``).

        Unknown keys are ignored; an unparsable ``placeholder_style`` is logged and
        left unset.
        """
        fmt: TomlTable = get_table_value(data, Toml.SECTION_FORMAT)

        style: PlaceholderStyle | None = None
        raw_style: Any = fmt.get(Toml.KEY_PLACEHOLDER_STYLE)
        if raw_style is not None:
            style = PlaceholderStyle.parse(str(raw_style))
            if style is None:
                logger.warning(
                    "Unknown %s %r; valid choices: %s",
                    Toml.KEY_PLACEHOLDER_STYLE,
                    raw_style,
                    ", ".join(s.key for s in PlaceholderStyle),
                )

        show_ms: Any = fmt.get(Toml.KEY_SHOW_MILLISECONDS)
        if show_ms is not None and not isinstance(show_ms, bool):
            logger.warning("Ignoring non-boolean %s: %r", Toml.KEY_SHOW_MILLISECONDS, show_ms)
            show_ms = None

        return cls(
            max_depth=fmt.get(Toml.KEY_MAX_DEPTH),
            max_elements=fmt.get(Toml.KEY_MAX_ELEMENTS),
            max_display_elements=fmt.get(Toml.KEY_MAX_DISPLAY_ELEMENTS),
            placeholder_style=style,
            show_milliseconds=show_ms,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableFormatConfig | None:
        """Build from a ``logcompose.toml`` or ``pyproject.toml`` file.

        Returns:
            MutableFormatConfig | None: ``None`` when the file holds no LogCompose table.
        """
        table: TomlTable | None = extract_config_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No LogCompose configuration in %s", path)
            return None
        logger.debug("Loaded LogCompose configuration from %s", path)
        return cls.from_toml_dict(table)


def load_format_config(
    *,
    config_path: Path | None = None,
    search_from: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> FormatConfig:
    """Resolve the effective configuration.

    Args:
        config_path (Path | None): Explicit config file; skips discovery when given.
        search_from (Path | None): Directory to start discovery from (no discovery if None).
        overrides (Mapping[str, Any] | None): Final layer keyed by TOML key names.

    Returns:
        FormatConfig: The frozen, normalized configuration.
    """
    builder: MutableFormatConfig = MutableFormatConfig.from_defaults()

    path: Path | None = config_path
    if path is None and search_from is not None:
        path = discover_config_file(search_from)
    if path is not None:
        layer: MutableFormatConfig | None = MutableFormatConfig.from_toml_file(path)
        if layer is not None:
            builder = builder.merge_with(layer)

    if overrides:
        builder = builder.apply_overrides(overrides)

    return builder.freeze()
