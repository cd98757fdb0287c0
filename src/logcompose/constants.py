# topmark:header:start
#
#   project      : LogCompose
#   file         : constants.py
#   file_relpath : src/logcompose/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LogCompose Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    LOGCOMPOSE_VERSION: str = get_version("logcompose")
except PackageNotFoundError:  # running from a source checkout
    LOGCOMPOSE_VERSION = "0.0.0"

# Environment variable consulted by `logcompose.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: Final[str] = "LOGCOMPOSE_LOG_LEVEL"

# Configuration file names, in discovery order within one directory
LOGCOMPOSE_TOML_NAME: Final[str] = "logcompose.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.logcompose"

# Tokens emitted by the renderers
CIRCULAR_TOKEN: Final[str] = "<Circular>"
ELLIPSIS_TOKEN: Final[str] = "..."
