# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands registered on the ``logcompose`` group."""
