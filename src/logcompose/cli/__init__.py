# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for LogCompose."""
