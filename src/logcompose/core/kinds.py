# topmark:header:start
#
#   project      : LogCompose
#   file         : kinds.py
#   file_relpath : src/logcompose/core/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value classification for stringification.

Every runtime value handed to the renderers is sorted into a small closed set of
*kinds*, which group into *categories*:

| Kind          | Category      | Python values                                        |
|---------------|---------------|------------------------------------------------------|
| `PRIMITIVE`   | `ATOMIC`      | `None`, `str`, `bool`, numbers, `Enum` members       |
| `DATE`        | `SINGLE_VALUE`| `datetime.datetime`                                  |
| `ARRAY`       | `COLLECTION`  | `list` (and subclasses), exact `tuple`               |
| `JSON_OBJECT` | `COLLECTION`  | exact `dict`                                         |

Anything else (class instances, callables, sets, non-plain mappings, byte buffers...)
is *unclassified*: the detectors return ``None`` and the caller falls back to the
special-type resolver in [`logcompose.core.special`][logcompose.core.special].

Rules:
    - Classification is nominal. A value is a date only if it *is* a `datetime`;
      an object that merely exposes ``timestamp()`` is not.
    - A record is only an exact `dict`. Subclasses such as `OrderedDict` carry their own
      behavior and are treated as opaque mappings.
    - `None` is always atomic.
    - `bool` is tested before numbers since it subclasses `int`; `Enum` is tested before
      `str`/`int` since `StrEnum`/`IntEnum` members subclass them.

All functions here are pure, O(1) and never raise.
"""

from __future__ import annotations

import numbers
from datetime import datetime
from enum import Enum
from typing import Final, TypeGuard


class ValueKind(Enum):
    """Fine-grained kind of a classifiable value."""

    PRIMITIVE = "Primitive"
    DATE = "Date"
    ARRAY = "Array"
    JSON_OBJECT = "JSONObject"


class ValueCategory(Enum):
    """Category grouping for [`ValueKind`][logcompose.core.kinds.ValueKind].

    ``DEFINED_DATA`` is a forward-compatible tag for user-defined plain data. It is
    reported by [`is_defined_data`][logcompose.core.kinds.is_defined_data] for the same
    values that are ``COLLECTION`` records and carries no distinct rendering today.
    """

    ATOMIC = "Atomic"
    SINGLE_VALUE = "SingleValue"
    COLLECTION = "Collection"
    DEFINED_DATA = "DefinedData"


KIND_TO_CATEGORY: Final[dict[ValueKind, ValueCategory]] = {
    ValueKind.PRIMITIVE: ValueCategory.ATOMIC,
    ValueKind.DATE: ValueCategory.SINGLE_VALUE,
    ValueKind.ARRAY: ValueCategory.COLLECTION,
    ValueKind.JSON_OBJECT: ValueCategory.COLLECTION,
}


def is_atomic(value: object) -> bool:
    """Return True for indivisible values: ``None``, text, numbers, booleans and enum members.

    NaN and infinities are atomic numbers.
    """
    if value is None:
        return True
    # Enum members play the part of symbols; check them before their str/int mixins.
    return isinstance(value, (Enum, str, bool, numbers.Number))


def is_single_value(value: object) -> TypeGuard[datetime]:
    """Return True for date/time instants (``datetime`` instances, nominal check only)."""
    return isinstance(value, datetime)


def is_array(value: object) -> TypeGuard[list[object] | tuple[object, ...]]:
    """Return True for ordered sequences rendered as ``[...]``.

    Lists (and list subclasses) qualify; tuples only when exactly ``tuple``, so named
    tuples such as `urllib.parse.ParseResult` stay opaque.
    """
    return isinstance(value, list) or type(value) is tuple


def is_record(value: object) -> TypeGuard[dict[object, object]]:
    """Return True for bare key/value records (exact ``dict``) rendered as ``{...}``."""
    return type(value) is dict


def is_collection(value: object) -> bool:
    """Return True for arrays and records."""
    return is_array(value) or is_record(value)


def is_defined_data(value: object) -> bool:
    """Return True for plain structural data (currently the same values as records)."""
    return is_record(value)


def detect_value_kind(value: object) -> ValueKind | None:
    """Return the kind of ``value``, or ``None`` when it is unclassified.

    Checks run in order and the first match wins: atomic, date, array, record.

    Args:
        value (object): Any runtime value.

    Returns:
        ValueKind | None: The detected kind.
    """
    if is_atomic(value):
        return ValueKind.PRIMITIVE
    if is_single_value(value):
        return ValueKind.DATE
    if is_array(value):
        return ValueKind.ARRAY
    if is_record(value):
        return ValueKind.JSON_OBJECT
    return None


def detect_value_category(kind: ValueKind | None) -> ValueCategory | None:
    """Map a kind to its category; ``None`` passes through."""
    if kind is None:
        return None
    return KIND_TO_CATEGORY.get(kind)


def classify(value: object) -> ValueCategory | None:
    """Return the category of ``value``, or ``None`` when it is unclassified."""
    return detect_value_category(detect_value_kind(value))
