# topmark:header:start
#
#   project      : LogCompose
#   file         : special.py
#   file_relpath : src/logcompose/core/special.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Special type tags for opaque values.

Values that are neither atomic nor collections are rendered as a recognizable
placeholder instead of having their contents walked. This module resolves such a
value to a [`SpecialType`][logcompose.core.special.SpecialType] tag and owns the
placeholder bracket style.

Resolution order (first match wins):

1. `DATE`          - ``datetime.datetime``
2. `REGEXP`        - ``re.Pattern``
3. `ERROR`         - ``BaseException``
4. `URL`           - ``urllib.parse`` split/parse results
5. `MAP`           - any other ``collections.abc.Mapping``
6. `SET`           - ``collections.abc.Set``
7. `TYPED_ARRAY`   - ``array.array``
8. `ARRAY_BUFFER`  - ``bytes`` / ``bytearray``
9. `DATA_VIEW`     - ``memoryview``
10. `CUSTOM_CLASS` - any other instance (classes themselves are not instances here)

Only values the classifier leaves unclassified should be passed here; callers
check arrays and plain dicts first.
"""

from __future__ import annotations

import re
from array import array
from collections.abc import Mapping, Set
from datetime import datetime
from typing import Final
from urllib.parse import ParseResult, ParseResultBytes, SplitResult, SplitResultBytes

from logcompose.core.enum_mixins import KeyedStrEnum


class SpecialType(KeyedStrEnum):
    """Closed set of opaque value tags; `.value` is the placeholder text."""

    DATE = ("Date", "date/time instant")
    REGEXP = ("RegExp", "compiled regular expression")
    ERROR = ("Error", "exception instance")
    URL = ("URL", "parsed URL")
    MAP = ("Map", "non-plain mapping")
    SET = ("Set", "set-like container")
    TYPED_ARRAY = ("TypedArray", "typed numeric array")
    ARRAY_BUFFER = ("ArrayBuffer", "raw byte buffer")
    DATA_VIEW = ("DataView", "memory view over a buffer")
    CUSTOM_CLASS = ("CustomClass", "class instance")


class PlaceholderStyle(KeyedStrEnum):
    """Bracket pair used around opaque placeholders such as ``<Map>``."""

    ANGLE = ("angle", "Angle brackets: <Map>", ("<>", "angular"))
    SQUARE = ("square", "Square brackets: [Map]", ("[]", "brackets"))

    @property
    def brackets(self) -> tuple[str, str]:
        """Opening and closing bracket for this style."""
        return ("[", "]") if self is PlaceholderStyle.SQUARE else ("<", ">")

    def wrap(self, name: str) -> str:
        """Return ``name`` enclosed in this style's brackets."""
        opening, closing = self.brackets
        return f"{opening}{name}{closing}"


_URL_TYPES: Final[tuple[type, ...]] = (ParseResult, SplitResult, ParseResultBytes, SplitResultBytes)

_TAG_CHECKS: Final[tuple[tuple[SpecialType, tuple[type, ...]], ...]] = (
    (SpecialType.DATE, (datetime,)),
    (SpecialType.REGEXP, (re.Pattern,)),
    (SpecialType.ERROR, (BaseException,)),
    (SpecialType.URL, _URL_TYPES),
    (SpecialType.MAP, (Mapping,)),
    (SpecialType.SET, (Set,)),
    (SpecialType.TYPED_ARRAY, (array,)),
    (SpecialType.ARRAY_BUFFER, (bytes, bytearray)),
    (SpecialType.DATA_VIEW, (memoryview,)),
)


def is_custom_instance(value: object) -> bool:
    """Return True when ``value`` is an instance with an identifiable class name.

    Classes are excluded (they are instances of ``type``) so that they reach the
    generic text coercion and render as ``<class '...'>``.
    """
    if isinstance(value, type):
        return False
    return bool(getattr(type(value), "__name__", ""))


def special_type(value: object) -> SpecialType | None:
    """Resolve the special tag for an unclassified value.

    Args:
        value (object): A value the classifier did not claim.

    Returns:
        SpecialType | None: The tag, or ``None`` to request generic text coercion.
    """
    for tag, types in _TAG_CHECKS:
        if isinstance(value, types):
            return tag
    if is_custom_instance(value):
        return SpecialType.CUSTOM_CLASS
    return None


def placeholder_for(
    value: object,
    tag: SpecialType,
    style: PlaceholderStyle = PlaceholderStyle.ANGLE,
) -> str:
    """Return the placeholder text for ``value`` tagged ``tag``.

    ``CUSTOM_CLASS`` uses the instance's class name (``<Foo>``); every other tag uses
    its own name (``<Map>``). Dates are not placeholders and are handled by the caller.
    """
    if tag is SpecialType.CUSTOM_CLASS:
        return style.wrap(type(value).__name__)
    return style.wrap(tag.value)
