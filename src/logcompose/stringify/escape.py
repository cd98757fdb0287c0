# topmark:header:start
#
#   project      : LogCompose
#   file         : escape.py
#   file_relpath : src/logcompose/stringify/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Quoted-string rendering for text values."""

from __future__ import annotations

from typing import Final

# Order matters: backslashes first so later escapes are not doubled.
_ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


def escape_string(text: str) -> str:
    r"""Return ``text`` wrapped in double quotes with JSON-like escapes applied.

    Only backslash, double quote, LF, CR and TAB are escaped. Other control
    characters and non-ASCII text pass through unchanged, so the result is not
    guaranteed to be valid JSON.

    Examples:
        >>> escape_string('say "hi"\n')
        '"say \\"hi\\"\\n"'
        >>> escape_string("")
        '""'
    """
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return f'"{text}"'
