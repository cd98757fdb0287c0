# topmark:header:start
#
#   project      : LogCompose
#   file         : io.py
#   file_relpath : src/logcompose/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input decoding utilities for Click commands.

This module only turns command-line or STDIN text into Python values:

- `decode_json_document`: strict, raises an input error on malformed JSON.
- `decode_log_argument`: lenient, falls back to the raw text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from logcompose.cli.errors import LogcomposeInputError, LogcomposeUsageError
from logcompose.config.logging import get_logger

if TYPE_CHECKING:
    from logcompose.config.logging import LogcomposeLogger

logger: LogcomposeLogger = get_logger(__name__)


def read_stdin_text() -> str:
    """Read all of STDIN as text.

    Raises:
        LogcomposeUsageError: If STDIN is empty (or whitespace only).
    """
    text: str = click.get_text_stream("stdin").read()
    if not text.strip():
        raise LogcomposeUsageError("No input on STDIN.")
    return text


def decode_json_document(text: str, *, source: str = "argument") -> object:
    """Decode one JSON document.

    ``NaN``, ``Infinity`` and ``-Infinity`` are accepted as numbers.

    Args:
        text (str): JSON text.
        source (str): Where the text came from, used in the error message.

    Returns:
        object: The decoded value.

    Raises:
        LogcomposeInputError: If ``text`` is not valid JSON or nests too deeply.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise LogcomposeInputError(
            f"Invalid JSON in {source} (line {exc.lineno}, column {exc.colno}): {exc.msg}"
        ) from exc
    except RecursionError as exc:
        raise LogcomposeInputError(f"Invalid JSON in {source}: nested too deeply") from exc


def decode_log_argument(text: str) -> object:
    """Decode a log-call argument given on the command line.

    JSON literals become values (``42`` → int, ``{"a": 1}`` → dict, ``null`` → None);
    anything that is not valid JSON (or nests too deeply) is kept as the original text.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        logger.trace("Keeping %r as text", text)
        return text
