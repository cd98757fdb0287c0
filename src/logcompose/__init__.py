# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCompose package.

LogCompose turns arbitrary runtime values into deterministic, single-line,
JSON-like text for log lines. Rendering never raises, survives reference cycles
and renders opaque objects as recognizable placeholders.

Public API:

```python
from logcompose import stringify, parse_logger, create_log_message

stringify({"user": "ann", "tags": ("a", "b")})
# '{"user": "ann", "tags": ["a", "b"]}'
```
"""

from __future__ import annotations

from logcompose.compose import (
    LogMessage,
    create_log_message,
    format_messages,
    format_values,
    is_stringifiable,
    is_stringifiable_type,
    is_stringifiable_value,
    is_timestamp,
    parse_logger,
)
from logcompose.config.model import FormatConfig, MutableFormatConfig, load_format_config
from logcompose.constants import LOGCOMPOSE_VERSION
from logcompose.core.kinds import ValueCategory, ValueKind, classify
from logcompose.core.special import PlaceholderStyle, SpecialType
from logcompose.stringify import (
    escape_string,
    stringify,
    stringify_function,
    stringify_timestamp,
)

__version__: str = LOGCOMPOSE_VERSION

__all__ = [
    "FormatConfig",
    "LogMessage",
    "MutableFormatConfig",
    "PlaceholderStyle",
    "SpecialType",
    "ValueCategory",
    "ValueKind",
    "__version__",
    "classify",
    "create_log_message",
    "escape_string",
    "format_messages",
    "format_values",
    "is_stringifiable",
    "is_stringifiable_type",
    "is_stringifiable_value",
    "is_timestamp",
    "load_format_config",
    "parse_logger",
    "stringify",
    "stringify_function",
    "stringify_timestamp",
]
