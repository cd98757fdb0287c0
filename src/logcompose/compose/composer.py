# topmark:header:start
#
#   project      : LogCompose
#   file         : composer.py
#   file_relpath : src/logcompose/compose/composer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble a single log line from a parsed log message.

Output shape: ``<timestamp> <LABEL> <messages> <values>``; empty parts are dropped.

Examples:
    >>> from datetime import datetime, timezone
    >>> msg = LogMessage(
    ...     log_label="info",
    ...     timestamp=datetime(2025, 1, 15, 10, 30, 45, 123000, tzinfo=timezone.utc),
    ...     messages=("User logged in",),
    ...     values=({"userId": 123},),
    ... )
    >>> create_log_message(msg)
    '2025-01-15T10:30:45Z INFO User logged in {"userId": 123}'
    >>> create_log_message(msg, show_milliseconds=True)
    '2025-01-15T10:30:45.123Z INFO User logged in {"userId": 123}'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from logcompose.compose.types import LogMessage
from logcompose.stringify.environment import FormatEnvironment
from logcompose.stringify.formatters import stringify_timestamp
from logcompose.stringify.value import stringify_value

if TYPE_CHECKING:
    from collections.abc import Sequence

    from logcompose.config.model import FormatConfig


def format_messages(messages: Sequence[str]) -> str:
    """Join message parts with single spaces (``""`` for none)."""
    return " ".join(messages)


def format_values(values: Sequence[object], config: FormatConfig | None = None) -> str:
    """Render structured values for a log line.

    All values share one rendering environment, so a value referencing another
    value's container still renders as circular only when it is a true cycle.

    Returns:
        str: ``""`` for no values, the bare rendering for one value and
        ``{v1, v2, ...}`` for several.
    """
    if not values:
        return ""
    env = FormatEnvironment(config)
    if len(values) == 1:
        return stringify_value(values[0], env)
    return "{" + ", ".join(stringify_value(value, env) for value in values) + "}"


def create_log_message(
    message: LogMessage,
    *,
    show_milliseconds: bool | None = None,
    config: FormatConfig | None = None,
) -> str:
    """Return the formatted log line for ``message``.

    Args:
        message (LogMessage): Parsed log message.
        show_milliseconds (bool | None): Include ``.sss`` in the timestamp; ``None``
            defers to ``config.show_milliseconds`` (``False`` without a config).
        config (FormatConfig | None): Limits and placeholder style for the values.

    Returns:
        str: ``<timestamp> <LABEL> <messages> <values>`` with empty parts removed.
    """
    if show_milliseconds is None:
        show_milliseconds = config.show_milliseconds if config is not None else False
    parts: list[str] = [
        stringify_timestamp(message.timestamp, include_fractional=show_milliseconds),
        message.log_label.upper(),
        format_messages(message.messages),
        format_values(message.values, config),
    ]
    return " ".join(part for part in parts if part)
