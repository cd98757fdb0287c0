# topmark:header:start
#
#   project      : LogCompose
#   file         : parser.py
#   file_relpath : src/logcompose/compose/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split raw log-call arguments into message text and structured values."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from logcompose.compose.types import LogMessage
from logcompose.compose.validators import is_stringifiable
from logcompose.config.logging import get_logger
from logcompose.stringify.value import atomic_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from logcompose.config.logging import LogcomposeLogger

logger: LogcomposeLogger = get_logger(__name__)


def message_text(arg: object) -> str:
    """Return the free-text form of a stringifiable argument.

    Plain strings are used as-is (no quotes, no escaping); every other atomic value
    uses its literal text (``null``, ``true``, ``NaN``, ``42``, ``Color.RED``).
    """
    if isinstance(arg, str) and not isinstance(arg, Enum):
        return str.__str__(arg)
    return atomic_text(arg)


def parse_logger(
    label: str,
    args: Iterable[object],
    timestamp: datetime | None = None,
) -> LogMessage:
    """Build a [`LogMessage`][logcompose.compose.types.LogMessage] from log-call arguments.

    Every argument is kept: strings that look like timestamps are message text like
    any other string. The entry's instant is ``timestamp`` or, when omitted, the
    current UTC time.

    Args:
        label (str): Severity label.
        args (Iterable[object]): Raw arguments in call order.
        timestamp (datetime | None): Instant for the entry; defaults to now (UTC).

    Returns:
        LogMessage: Stringifiable arguments in ``messages`` (as text), all others in
        ``values`` (by identity), both in call order.
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    messages: list[str] = []
    values: list[object] = []
    for arg in args:
        if is_stringifiable(arg):
            messages.append(message_text(arg))
        else:
            values.append(arg)

    logger.trace("Parsed %d message part(s) and %d value(s)", len(messages), len(values))
    return LogMessage(
        log_label=label,
        timestamp=timestamp,
        messages=tuple(messages),
        values=tuple(values),
    )
