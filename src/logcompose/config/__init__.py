# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for LogCompose.

This package defines the `FormatConfig` snapshot consumed by the renderers, its
mutable builder, the TOML loaders (``logcompose.toml`` / ``[tool.logcompose]`` in
``pyproject.toml``) and the logging setup shared by library and CLI.
"""

from __future__ import annotations

from logcompose.config.model import (
    FormatConfig,
    MutableFormatConfig,
    load_format_config,
    normalize_limit,
)

__all__ = [
    "FormatConfig",
    "MutableFormatConfig",
    "load_format_config",
    "normalize_limit",
]
