# topmark:header:start
#
#   project      : LogCompose
#   file         : enum_mixins.py
#   file_relpath : src/logcompose/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums for LogCompose (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: a ``str`` Enum whose ``.value`` is a stable key
      (used verbatim in rendered output or TOML), with a human label and
      parse aliases attached as attributes.

Example:
    ```python
    class PlaceholderStyle(KeyedStrEnum):
        ANGLE = ("angle", "Angle brackets: <Map>", ("<>", "angular"))
        SQUARE = ("square", "Square brackets: [Map]", ("[]", "brackets"))

    assert PlaceholderStyle.parse("Brackets") is PlaceholderStyle.SQUARE
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key, the member name and any configured alias.
        Matching is case-insensitive and normalizes '-', ' ' to '_'.

        Returns:
            _KS | None: The matching member, or ``None`` when nothing matches.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token == _norm_token(m.value):
                return m
            if token == _norm_token(m.name):
                return m
            for a in m.aliases:
                if token == _norm_token(a):
                    return m
        return None
