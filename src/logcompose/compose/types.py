# topmark:header:start
#
#   project      : LogCompose
#   file         : types.py
#   file_relpath : src/logcompose/compose/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured log message produced by the argument parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True)
class LogMessage:
    """One parsed log call.

    Attributes:
        log_label (str): Severity label as given by the caller (upper-cased on output).
        timestamp (datetime): Instant of the log entry.
        messages (tuple[str, ...]): Free-text parts, already converted to text.
        values (tuple[object, ...]): Structured arguments, kept by identity and
            rendered with `stringify` when the line is assembled.
    """

    log_label: str
    timestamp: datetime
    messages: tuple[str, ...] = ()
    values: tuple[object, ...] = ()
