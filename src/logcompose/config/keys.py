# topmark:header:start
#
#   project      : LogCompose
#   file         : keys.py
#   file_relpath : src/logcompose/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for LogCompose configuration.

This module defines the authoritative string constants used when reading
LogCompose configuration from TOML sources (``logcompose.toml`` and
``[tool.logcompose]`` in ``pyproject.toml``).

Notes:
    - Values must match user-facing TOML keys exactly.
    - Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by LogCompose configuration."""

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_MAX_DEPTH: Final[str] = "max_depth"
    KEY_MAX_ELEMENTS: Final[str] = "max_elements"
    KEY_MAX_DISPLAY_ELEMENTS: Final[str] = "max_display_elements"
    KEY_PLACEHOLDER_STYLE: Final[str] = "placeholder_style"
    KEY_SHOW_MILLISECONDS: Final[str] = "show_milliseconds"
