# topmark:header:start
#
#   project      : LogCompose
#   file         : compose.py
#   file_relpath : src/logcompose/cli/commands/compose.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCompose `compose` command.

Builds one log line from a label and free-form arguments, the way a logger call
would. Each argument is decoded as JSON when possible (``42``, ``null``,
``{"id": 7}``) and kept as text otherwise.

Examples:
    ```bash
    logcompose compose info "user logged in" '{"id": 7}' --timestamp 2025-01-15T10:30:45Z
    # 2025-01-15T10:30:45Z INFO user logged in {"id": 7}
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from logcompose.cli.config_resolver import resolve_config_from_click
from logcompose.cli.errors import LogcomposeUsageError
from logcompose.cli.io import decode_log_argument
from logcompose.cli.options import common_format_options, format_overrides
from logcompose.compose.composer import create_log_message
from logcompose.compose.parser import parse_logger
from logcompose.compose.validators import parse_timestamp

if TYPE_CHECKING:
    from datetime import datetime

    from logcompose.cli.console import ConsoleLike
    from logcompose.compose.types import LogMessage
    from logcompose.config.model import FormatConfig
    from logcompose.core.special import PlaceholderStyle


@click.command(
    name="compose",
    help="Compose a log line from a LABEL and message/value ARGS.",
)
@click.argument("label")
@click.argument("args", nargs=-1)
@click.option(
    "--timestamp",
    "timestamp_text",
    default=None,
    help="Fixed timestamp (YYYY-MM-DDTHH:MM:SS[.sss]Z); defaults to now.",
)
@click.option(
    "--ms/--no-ms",
    "show_milliseconds",
    default=None,
    help="Show milliseconds in the timestamp (overrides show_milliseconds).",
)
@common_format_options
def compose_command(
    *,
    label: str,
    args: tuple[str, ...],
    timestamp_text: str | None,
    show_milliseconds: bool | None,
    max_depth: int | None,
    max_elements: int | None,
    max_display_elements: int | None,
    placeholder_style: PlaceholderStyle | None,
) -> None:
    """Compose and print one log line.

    Raises:
        LogcomposeUsageError: If the label is blank or ``--timestamp`` is malformed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if not label.strip():
        raise LogcomposeUsageError("LABEL must not be empty.")

    timestamp: datetime | None = None
    if timestamp_text is not None:
        timestamp = parse_timestamp(timestamp_text)
        if timestamp is None:
            raise LogcomposeUsageError(
                f"Invalid --timestamp '{timestamp_text}' "
                "(expected YYYY-MM-DDTHH:MM:SS[.sss]Z or YYYY-MM-DDTHH:MM:SS)."
            )

    config: FormatConfig = resolve_config_from_click(
        ctx,
        format_overrides(
            max_depth=max_depth,
            max_elements=max_elements,
            max_display_elements=max_display_elements,
            placeholder_style=placeholder_style,
            show_milliseconds=show_milliseconds,
        ),
    )

    message: LogMessage = parse_logger(
        label, [decode_log_argument(a) for a in args], timestamp=timestamp
    )
    console.print(create_log_message(message, config=config))
