# topmark:header:start
#
#   project      : LogCompose
#   file         : exit_codes.py
#   file_relpath : src/logcompose/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the LogCompose CLI.

Values above 63 follow the BSD ``sysexits.h`` conventions so shell scripts can tell
usage mistakes apart from bad input or configuration.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LogCompose CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments (``EX_USAGE``).
        INPUT_ERROR (int): Input data could not be decoded (``EX_DATAERR``).
        CONFIG_ERROR (int): Missing or malformed configuration (``EX_CONFIG``).
        UNEXPECTED_ERROR (int): Last-resort code for unhandled errors.

    Usage:
        ```python
        import subprocess
        from logcompose.cli.exit_codes import ExitCode

        result = subprocess.run(["logcompose", "render", "[1, 2]"])
        if result.returncode == ExitCode.INPUT_ERROR:
            print("Input was not valid JSON.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    INPUT_ERROR = 65
    CONFIG_ERROR = 78
    UNEXPECTED_ERROR = 255
