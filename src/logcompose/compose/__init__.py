# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/compose/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Log-line assembly on top of the stringifier.

Typical flow:

```python
from logcompose.compose import create_log_message, parse_logger

line = create_log_message(parse_logger("info", ["user", "logged in", {"id": 7}]))
# '2025-01-15T10:30:45Z INFO user logged in {"id": 7}'
```
"""

from __future__ import annotations

from logcompose.compose.composer import create_log_message, format_messages, format_values
from logcompose.compose.parser import message_text, parse_logger
from logcompose.compose.types import LogMessage
from logcompose.compose.validators import (
    is_stringifiable,
    is_stringifiable_type,
    is_stringifiable_value,
    is_timestamp,
    parse_timestamp,
)

__all__ = [
    "LogMessage",
    "create_log_message",
    "format_messages",
    "format_values",
    "is_stringifiable",
    "is_stringifiable_type",
    "is_stringifiable_value",
    "is_timestamp",
    "message_text",
    "parse_logger",
    "parse_timestamp",
]
