# topmark:header:start
#
#   project      : LogCompose
#   file         : validators.py
#   file_relpath : src/logcompose/compose/validators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument predicates used when splitting log-call arguments.

A *stringifiable* argument is simple enough to be written into the free-text part of
a log line: text, numbers, booleans, enum members and ``None``. Everything else is a
*value* and goes through [`stringify`][logcompose.stringify.value.stringify].

Timestamp strings are recognized in two shapes, both interpreted as UTC:

- ISO with zone designator: ``YYYY-MM-DDTHH:MM:SS[.sss]Z``
- standard local form: ``YYYY-MM-DDTHH:MM:SS``
"""

from __future__ import annotations

import numbers
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Final, TypeGuard

ISO_TIMESTAMP_RE: Final[re.Pattern[str]] = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z", re.ASCII
)
STANDARD_TIMESTAMP_RE: Final[re.Pattern[str]] = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII
)


def is_stringifiable_type(arg: object) -> bool:
    """Return True for text, numbers, booleans and enum members."""
    return isinstance(arg, (str, bool, numbers.Number, Enum))


def is_stringifiable_value(arg: object) -> bool:
    """Return True for the absence value ``None``."""
    return arg is None


def is_stringifiable(arg: object) -> bool:
    """Return True when ``arg`` belongs in the message text rather than the values."""
    return is_stringifiable_type(arg) or is_stringifiable_value(arg)


def parse_timestamp(text: str) -> datetime | None:
    """Parse a timestamp string into an aware UTC datetime.

    Args:
        text (str): Candidate timestamp.

    Returns:
        datetime | None: The instant, or ``None`` when ``text`` has neither accepted
        shape or names an impossible date (``2025-02-30T00:00:00Z``).
    """
    iso = ISO_TIMESTAMP_RE.fullmatch(text)
    if iso is None and STANDARD_TIMESTAMP_RE.fullmatch(text) is None:
        return None
    fraction: str | None = iso.group(1) if iso is not None else None
    base: str = text[:19]
    try:
        instant: datetime = datetime.strptime(base, "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return None
    if fraction:
        instant = instant.replace(microsecond=int(fraction[1:]) * 1000)
    return instant.replace(tzinfo=timezone.utc)


def is_timestamp(arg: object) -> TypeGuard[str]:
    """Return True when ``arg`` is a string holding a valid timestamp."""
    return isinstance(arg, str) and parse_timestamp(arg) is not None
