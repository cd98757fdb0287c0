# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/stringify/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cycle-safe, single-line stringification of runtime values.

Modules:

- ``escape``: quoted-string escaping.
- ``formatters``: unwrapped callable and timestamp text.
- ``environment``: per-call cycle guard and output limits.
- ``value``: the recursive renderer and the public `stringify` entry point.
"""

from __future__ import annotations

from logcompose.stringify.environment import CycleGuard, FormatEnvironment
from logcompose.stringify.escape import escape_string
from logcompose.stringify.formatters import stringify_function, stringify_timestamp
from logcompose.stringify.value import (
    atomic_text,
    stringify,
    stringify_array,
    stringify_object,
    stringify_record,
    stringify_value,
)

__all__ = [
    "CycleGuard",
    "FormatEnvironment",
    "atomic_text",
    "escape_string",
    "stringify",
    "stringify_array",
    "stringify_function",
    "stringify_object",
    "stringify_record",
    "stringify_timestamp",
    "stringify_value",
]
