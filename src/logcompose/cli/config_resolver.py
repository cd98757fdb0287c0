# topmark:header:start
#
#   project      : LogCompose
#   file         : config_resolver.py
#   file_relpath : src/logcompose/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective [`FormatConfig`][logcompose.config.model.FormatConfig] for a command.

Layers, lowest to highest precedence:

1. built-in defaults;
2. the ``--config`` file, or else the nearest discovered ``logcompose.toml`` /
   ``pyproject.toml`` (skipped with ``--no-config``);
3. per-command option overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from logcompose.cli.errors import LogcomposeConfigError
from logcompose.config.loaders import discover_config_file
from logcompose.config.logging import get_logger
from logcompose.config.model import MutableFormatConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    import click

    from logcompose.config.logging import LogcomposeLogger
    from logcompose.config.model import FormatConfig

logger: LogcomposeLogger = get_logger(__name__)


def resolve_config_from_click(
    ctx: click.Context,
    overrides: Mapping[str, Any] | None = None,
) -> FormatConfig:
    """Build the frozen configuration for the current invocation.

    Args:
        ctx (click.Context): Context whose ``obj`` holds ``config_path`` and ``no_config``
            (set by the group).
        overrides (Mapping[str, Any] | None): Command options keyed by TOML key names.

    Returns:
        FormatConfig: The merged configuration.

    Raises:
        LogcomposeConfigError: If an explicit ``--config`` file holds no usable
            LogCompose configuration.
    """
    obj: dict[str, Any] = ctx.find_root().obj or {}
    explicit: Path | None = obj.get("config_path")
    no_config: bool = bool(obj.get("no_config", False))

    builder: MutableFormatConfig = MutableFormatConfig.from_defaults()

    if explicit is not None:
        layer: MutableFormatConfig | None = MutableFormatConfig.from_toml_file(explicit)
        if layer is None:
            raise LogcomposeConfigError(f"No LogCompose configuration found in {explicit}")
        builder = builder.merge_with(layer)
    elif not no_config:
        found: Path | None = discover_config_file(Path.cwd())
        if found is not None:
            discovered = MutableFormatConfig.from_toml_file(found)
            if discovered is not None:
                builder = builder.merge_with(discovered)

    if overrides:
        builder = builder.apply_overrides(overrides)

    config: FormatConfig = builder.freeze()
    logger.debug("Effective format config: %s", config)
    return config
