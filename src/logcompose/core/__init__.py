# topmark:header:start
#
#   project      : LogCompose
#   file         : __init__.py
#   file_relpath : src/logcompose/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across LogCompose.

The ``logcompose.core`` package holds the value-classification building blocks the
renderers dispatch on. It is safe to import from anywhere (stringify, compose, CLI,
tests) and pulls in no logging, configuration or CLI concerns.

Included modules:

- ``kinds``
  Value kinds/categories and the nominal predicates (`is_atomic`, `is_array`, ...).

- ``special``
  Special type tags for opaque values and the placeholder bracket style.

- ``enum_mixins``
  Keyed string enums with labels and parse aliases.
"""

from __future__ import annotations
