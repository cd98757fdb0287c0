# topmark:header:start
#
#   project      : LogCompose
#   file         : value.py
#   file_relpath : src/logcompose/stringify/value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive value rendering.

[`stringify`][logcompose.stringify.value.stringify] is the public entry point: it turns
any runtime value into a single-line, JSON-like string and never raises.

Dispatch (first match wins):

1. atomic values → literal text (`null`, `true`/`false`, `NaN`, `Infinity`, quoted
   strings, `Color.RED` for enum members, numbers via `str()`);
2. routines (functions, methods, builtins) → ``[Function: name]`` / ``[Method: name]``;
3. arrays (`list`, exact `tuple`) → ``[e1, e2]``;
4. records (exact `dict`) → ``{"k": v}``;
5. anything else → special placeholder (``<Map>``, ``<Foo>``), a timestamp for
   datetimes, or generic ``str()`` coercion as a last resort.

Containers are tracked on a per-call
[`CycleGuard`][logcompose.stringify.environment.CycleGuard]; re-entering a container
already on the traversal path renders ``[<Circular>]`` / ``{<Circular>}``.
"""

from __future__ import annotations

import inspect
import math
from enum import Enum
from typing import TYPE_CHECKING, cast

from logcompose.config.logging import get_logger
from logcompose.constants import CIRCULAR_TOKEN, ELLIPSIS_TOKEN
from logcompose.core.kinds import is_array, is_atomic, is_record, is_single_value
from logcompose.core.special import SpecialType, placeholder_for, special_type
from logcompose.stringify.environment import FormatEnvironment
from logcompose.stringify.escape import escape_string
from logcompose.stringify.formatters import stringify_function, stringify_timestamp

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from logcompose.config.logging import LogcomposeLogger
    from logcompose.config.model import FormatConfig

logger: LogcomposeLogger = get_logger(__name__)


def _safe_str(value: object, env: FormatEnvironment) -> str:
    """``str(value)``, degrading to the ``<TypeName>`` placeholder if coercion raises."""
    try:
        return str(value)
    except Exception as e:
        logger.debug("str() failed for %s: %s", type(value).__name__, e)
        return env.placeholder_style.wrap(type(value).__name__)


def atomic_text(value: object, env: FormatEnvironment | None = None) -> str:
    """Return the literal text of an atomic value.

    Args:
        value (object): A value for which [`is_atomic`][logcompose.core.kinds.is_atomic]
            holds.
        env (FormatEnvironment | None): Environment used for the coercion fallback.

    Returns:
        str: ``null``, ``true``/``false``, ``NaN``/``Infinity``/``-Infinity``, a quoted
        and escaped string, ``TypeName.MEMBER`` for enum members, or ``str(value)``.
    """
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return f"{type(value).__name__}.{value.name}"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return escape_string(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
    return _safe_str(value, env if env is not None else FormatEnvironment())


def _render_entries(
    container: object,
    entries: list[object],
    render_one: Callable[[object], str],
    env: FormatEnvironment,
) -> str:
    """Render the entries of an entered container, applying the element caps."""
    parts: list[str] = []
    truncated: bool = env.is_max_elements_reached(len(entries))
    for nth, entry in enumerate(entries):
        if truncated and env.is_max_display_reached(nth):
            break
        parts.append(render_one(entry))
    if truncated:
        parts.append(ELLIPSIS_TOKEN)
    logger.trace(
        "Rendered %d/%d entries of %s", len(parts), len(entries), type(container).__name__
    )
    return ", ".join(parts)


def _render_container(
    container: object,
    entries: Iterable[object],
    render_one: Callable[[object], str],
    brackets: tuple[str, str],
    env: FormatEnvironment,
    depth: int,
) -> str:
    opening, closing = brackets
    snapshot: list[object] = list(entries)
    if not snapshot:
        return f"{opening}{closing}"
    if env.guard.has(container):
        logger.trace("Circular reference to %s", type(container).__name__)
        return f"{opening}{CIRCULAR_TOKEN}{closing}"
    if env.is_max_depth_reached(depth):
        return f"{opening}{ELLIPSIS_TOKEN}{closing}"

    env.guard.add(container)
    try:
        body: str = _render_entries(container, snapshot, render_one, env)
    except RecursionError:
        # Nesting deeper than the interpreter allows collapses like a depth cap.
        logger.debug("Recursion limit hit while rendering %s", type(container).__name__)
        body = ELLIPSIS_TOKEN
    finally:
        env.guard.discard(container)
    return f"{opening}{body}{closing}"


def stringify_array(
    seq: list[object] | tuple[object, ...],
    env: FormatEnvironment | None = None,
    *,
    depth: int = 0,
) -> str:
    """Render an ordered sequence as ``[e1, e2, ...]``.

    Empty sequences render ``[]``; a sequence already being rendered higher up the
    path renders ``[<Circular>]``.
    """
    env = env if env is not None else FormatEnvironment()

    def render_one(item: object) -> str:
        return stringify_value(item, env, depth=depth + 1)

    # Iterate the builtin storage so overridden __iter__ methods never run.
    entries: Iterable[object] = list.__iter__(seq) if isinstance(seq, list) else tuple.__iter__(seq)
    return _render_container(seq, entries, render_one, ("[", "]"), env, depth)


def stringify_record(
    mapping: dict[object, object],
    env: FormatEnvironment | None = None,
    *,
    depth: int = 0,
) -> str:
    """Render a plain dict as ``{"k1": v1, "k2": v2}`` in insertion order.

    Keys are coerced with ``str()`` and quoted without escaping.
    """
    env = env if env is not None else FormatEnvironment()

    def render_one(item: object) -> str:
        key, value = cast("tuple[object, object]", item)
        return f'"{_safe_str(key, env)}": {stringify_value(value, env, depth=depth + 1)}'

    return _render_container(mapping, dict.items(mapping), render_one, ("{", "}"), env, depth)


def stringify_object(value: object, env: FormatEnvironment | None = None) -> str:
    """Render a value the classifier left unclassified (or a datetime).

    Datetimes render as a millisecond timestamp, tagged values as a placeholder and
    anything else through ``str()``.
    """
    env = env if env is not None else FormatEnvironment()
    if is_single_value(value):
        return stringify_timestamp(value, include_fractional=True)
    tag: SpecialType | None = special_type(value)
    if tag is None:
        return _safe_str(value, env)
    return placeholder_for(value, tag, env.placeholder_style)


def stringify_value(value: object, env: FormatEnvironment | None = None, *, depth: int = 0) -> str:
    """Render ``value`` using (and updating) the rendering state ``env``.

    Args:
        value (object): Any runtime value.
        env (FormatEnvironment | None): Shared state for one top-level call; a fresh
            one is created when omitted.
        depth (int): Nesting depth of ``value`` (0 for the root).

    Returns:
        str: The single-line rendering.
    """
    env = env if env is not None else FormatEnvironment()
    if is_atomic(value):
        return atomic_text(value, env)
    if inspect.isroutine(value):
        return f"[{stringify_function(value)}]"
    if is_array(value):
        return stringify_array(value, env, depth=depth)
    if is_record(value):
        return stringify_record(value, env, depth=depth)
    return stringify_object(value, env)


def stringify(value: object, config: FormatConfig | None = None) -> str:
    """Render any value as a single-line, JSON-like string.

    Each call owns a fresh cycle guard, so concurrent and repeated calls are
    independent.

    Args:
        value (object): Any runtime value, including cyclic graphs.
        config (FormatConfig | None): Optional limits and placeholder style.

    Returns:
        str: The rendering; this function never raises for any input.

    Examples:
        >>> a = [1]
        >>> a.append(a)
        >>> stringify(a)
        '[1, [<Circular>]]'
        >>> stringify({"timestamp": lambda: 0})
        '{"timestamp": [Function:]}'
    """
    return stringify_value(value, FormatEnvironment(config))
