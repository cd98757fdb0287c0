# topmark:header:start
#
#   project      : LogCompose
#   file         : version.py
#   file_relpath : src/logcompose/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCompose `version` command.

Prints the current LogCompose version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import platform
from typing import TYPE_CHECKING

import click

from logcompose.cli.cli_types import EnumChoiceParam, OutputFormat
from logcompose.constants import LOGCOMPOSE_VERSION

if TYPE_CHECKING:
    from logcompose.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LogCompose.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of LogCompose.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps({"version": LOGCOMPOSE_VERSION, "python": platform.python_version()})
        )
    elif vlevel > 0:
        console.print(console.styled("LogCompose version:", bold=True, underline=True))
        console.print(f"    {console.styled(LOGCOMPOSE_VERSION, bold=True)}")
        console.print(f"    (Python {platform.python_version()})")
    else:
        console.print(console.styled(LOGCOMPOSE_VERSION, bold=True))
