# topmark:header:start
#
#   project      : LogCompose
#   file         : environment.py
#   file_relpath : src/logcompose/stringify/environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-call rendering state: cycle guard and output limits.

A [`FormatEnvironment`][logcompose.stringify.environment.FormatEnvironment] is created
for every top-level rendering call and threaded through the recursion by parameter.
It owns:

- a [`CycleGuard`][logcompose.stringify.environment.CycleGuard], the set of containers
  currently on the traversal path (not every container ever visited, so shared but
  acyclic substructures render in full each time);
- the immutable [`FormatConfig`][logcompose.config.model.FormatConfig] limits.

Limit checks follow one rule: a configured limit of ``0`` means unlimited, and a
probe value that is negative, NaN or infinite always counts as *reached*.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from logcompose.config.model import FormatConfig

if TYPE_CHECKING:
    from logcompose.core.special import PlaceholderStyle


class CycleGuard:
    """Identity set of the containers on the current traversal path.

    Membership is by ``id()``; containers stay alive for the duration of the call
    because the caller holds a reference to the root value.
    """

    __slots__ = ("_ids",)

    def __init__(self) -> None:
        self._ids: set[int] = set()

    def __len__(self) -> int:
        return len(self._ids)

    def has(self, obj: object) -> bool:
        """Return True if ``obj`` is currently being rendered."""
        return id(obj) in self._ids

    def add(self, obj: object) -> None:
        """Mark ``obj`` as entered."""
        self._ids.add(id(obj))

    def discard(self, obj: object) -> None:
        """Mark ``obj`` as left (no-op if absent)."""
        self._ids.discard(id(obj))


def _is_invalid_probe(value: float) -> bool:
    return math.isnan(value) or math.isinf(value) or value < 0


class FormatEnvironment:
    """Rendering state for one top-level call.

    Args:
        config (FormatConfig | None): Limits and output options; defaults to an
            unlimited configuration.
    """

    __slots__ = ("config", "guard")

    def __init__(self, config: FormatConfig | None = None) -> None:
        self.config: FormatConfig = config if config is not None else FormatConfig()
        self.guard: CycleGuard = CycleGuard()

    @property
    def placeholder_style(self) -> PlaceholderStyle:
        """Bracket style for opaque placeholders."""
        return self.config.placeholder_style

    def is_max_depth_reached(self, depth: float) -> bool:
        """Return True when containers at ``depth`` must collapse."""
        if _is_invalid_probe(depth):
            return True
        if self.config.max_depth == 0:
            return False
        return depth >= self.config.max_depth

    def is_max_elements_reached(self, count: float) -> bool:
        """Return True when a container of ``count`` entries must be truncated."""
        if _is_invalid_probe(count):
            return True
        if self.config.max_elements == 0:
            return False
        return count >= self.config.max_elements

    def is_max_display_reached(self, nth: float) -> bool:
        """Return True when the 0-based entry ``nth`` falls beyond the display cap."""
        if _is_invalid_probe(nth):
            return True
        if self.config.max_display_elements == 0:
            return False
        return nth >= self.config.max_display_elements
