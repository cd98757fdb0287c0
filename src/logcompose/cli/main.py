# topmark:header:start
#
#   project      : LogCompose
#   file         : main.py
#   file_relpath : src/logcompose/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``logcompose`` command.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Internal logging is configured from ``LOGCOMPOSE_LOG_LEVEL`` only; ``-v``/``-q``
  control program output, not diagnostics.
- Subcommands resolve their own configuration from ``ctx.obj`` on demand.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from logcompose.cli.commands.compose import compose_command
from logcompose.cli.commands.render import render_command
from logcompose.cli.commands.version import version_command
from logcompose.cli.console import ClickConsole
from logcompose.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from logcompose.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from logcompose.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config source) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit configuration file from ``--config``.
        no_config (bool): Whether configuration discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    if config_path is not None and no_config and ctx.obj["verbosity_level"] >= 0:
        console.warn("Warning: --no-config is ignored when --config is given.")
    ctx.obj["config_path"] = config_path
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="LogCompose: cycle-safe single-line rendering of values for log lines.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read [format] settings from this logcompose.toml or pyproject.toml.",
)
@click.option(
    "--no-config",
    "no_config",
    is_flag=True,
    help="Do not discover logcompose.toml / pyproject.toml from the working directory.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Entry point for the LogCompose CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'logcompose render JSON...' to render values.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(compose_command)

if __name__ == "__main__":
    cli()
