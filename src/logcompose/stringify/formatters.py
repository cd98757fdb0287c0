# topmark:header:start
#
#   project      : LogCompose
#   file         : formatters.py
#   file_relpath : src/logcompose/stringify/formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unwrapped text renderers for callables and date/time instants.

These helpers return the bare text; the value renderer adds the ``[...]`` wrapper
for callables when they appear inside a value graph.
"""

from __future__ import annotations

import inspect
from datetime import datetime, timedelta, timezone
from typing import Any, Final

FUNCTION_PREFIX: Final[str] = "Function:"
METHOD_PREFIX: Final[str] = "Method:"

_LOCALS_MARKER: Final[str] = "<locals>"


def _is_method(func: Any, name: str) -> bool:
    if inspect.ismethod(func):
        return True
    qualname: object = getattr(func, "__qualname__", None)
    if not isinstance(qualname, str) or "." not in qualname:
        return False
    parts: list[str] = qualname.split(".")
    # "Outer.<locals>.inner" is a nested function, "Klass.name" a method.
    return parts[-1] == name and parts[-2] != _LOCALS_MARKER


def stringify_function(func: Any) -> str:
    """Return a short description of a callable.

    Args:
        func (Any): A function, method, lambda or builtin.

    Returns:
        str: ``"Function:"`` when the callable has no usable name (lambdas, names
        cleared to ``""``), ``"Method: <name>"`` for methods, otherwise
        ``"Function: <name>"``.
    """
    name: object = getattr(func, "__name__", "")
    if not isinstance(name, str) or not name.isidentifier():
        return FUNCTION_PREFIX
    if _is_method(func, name):
        return f"{METHOD_PREFIX} {name}"
    return f"{FUNCTION_PREFIX} {name}"


def _to_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None or instant.utcoffset() is None:
        # Naive values are taken to already be UTC.
        return instant
    try:
        return instant.astimezone(timezone.utc)
    except OverflowError:
        # Near datetime.min/max the conversion leaves the supported range: clamp.
        offset: timedelta | None = instant.utcoffset()
        ahead_of_utc: bool = offset is not None and offset > timedelta(0)
        bound: datetime = datetime.min if ahead_of_utc else datetime.max
        return bound.replace(tzinfo=timezone.utc)


def stringify_timestamp(instant: datetime, include_fractional: bool = False) -> str:
    """Render ``instant`` as an ISO-8601 UTC timestamp.

    Args:
        instant (datetime): Aware (converted to UTC) or naive (taken as UTC) instant.
        include_fractional (bool): Append milliseconds (``.sss``); microseconds are
            truncated, never rounded.

    Returns:
        str: ``YYYY-MM-DDTHH:MM:SSZ`` or ``YYYY-MM-DDTHH:MM:SS.sssZ``.
    """
    utc: datetime = _to_utc(instant)
    text: str = (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
    )
    if include_fractional:
        text += f".{utc.microsecond // 1000:03d}"
    return text + "Z"
