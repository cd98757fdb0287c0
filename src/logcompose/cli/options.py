# topmark:header:start
#
#   project      : LogCompose
#   file         : options.py
#   file_relpath : src/logcompose/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for LogCompose.

This module centralizes reusable options (verbosity, color, format overrides) and
their resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from logcompose.cli.cli_types import EnumChoiceParam
from logcompose.cli.errors import LogcomposeUsageError
from logcompose.config.keys import Toml
from logcompose.core.special import PlaceholderStyle

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count (max 2).

    Raises:
        LogcomposeUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LogcomposeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output (warnings about ignored input).",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and finally enables color only when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_format_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the ``[format]`` configuration for one invocation.

    Each option defaults to ``None`` so that unset flags never clobber values from
    the configuration file.
    """
    f = click.option(
        "--max-depth",
        "max_depth",
        type=int,
        default=None,
        help="Collapse containers nested this deep to [...] / {...} (0 = unlimited).",
    )(f)
    f = click.option(
        "--max-elements",
        "max_elements",
        type=int,
        default=None,
        help="Truncate containers with at least this many entries (0 = never).",
    )(f)
    f = click.option(
        "--max-display-elements",
        "max_display_elements",
        type=int,
        default=None,
        help="Entries kept when truncating (0 = all).",
    )(f)
    f = click.option(
        "--placeholder-style",
        "placeholder_style",
        type=EnumChoiceParam(PlaceholderStyle),
        default=None,
        help=(
            "Brackets around opaque placeholders "
            f"({', '.join(s.key for s in PlaceholderStyle)})."
        ),
    )(f)
    return f


def format_overrides(
    *,
    max_depth: int | None = None,
    max_elements: int | None = None,
    max_display_elements: int | None = None,
    placeholder_style: PlaceholderStyle | None = None,
    show_milliseconds: bool | None = None,
) -> dict[str, Any]:
    """Map CLI option values to ``[format]`` TOML keys, dropping unset ones."""
    raw: dict[str, Any] = {
        Toml.KEY_MAX_DEPTH: max_depth,
        Toml.KEY_MAX_ELEMENTS: max_elements,
        Toml.KEY_MAX_DISPLAY_ELEMENTS: max_display_elements,
        Toml.KEY_PLACEHOLDER_STYLE: placeholder_style.key if placeholder_style else None,
        Toml.KEY_SHOW_MILLISECONDS: show_milliseconds,
    }
    return {k: v for k, v in raw.items() if v is not None}
