# topmark:header:start
#
#   project      : LogCompose
#   file         : __main__.py
#   file_relpath : src/logcompose/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LogCompose via ``python -m logcompose``.

Delegates to `logcompose.cli.main.cli`, the single authoritative CLI entry point.
"""

from __future__ import annotations

from logcompose.cli.main import cli

if __name__ == "__main__":
    cli()
