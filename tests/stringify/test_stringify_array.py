# topmark:header:start
#
#   project      : LogCompose
#   file         : test_stringify_array.py
#   file_relpath : tests/stringify/test_stringify_array.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for array rendering, cycle detection and element caps."""

from __future__ import annotations

from typing import TYPE_CHECKING

from logcompose.config.model import FormatConfig
from logcompose.stringify.environment import FormatEnvironment
from logcompose.stringify.value import stringify, stringify_array
from tests.conftest import make_config

if TYPE_CHECKING:
    from collections.abc import Iterator


def test_empty_array() -> None:
    """Empty sequences render as ``[]``."""
    assert stringify([]) == "[]"
    assert stringify(()) == "[]"


def test_flat_and_nested_arrays() -> None:
    """Elements are rendered recursively and joined with a comma and a space."""
    assert stringify([1, "a", None, True]) == '[1, "a", null, true]'
    assert stringify([[1, 2], [3, [4]]]) == "[[1, 2], [3, [4]]]"
    assert stringify((1, (2,))) == "[1, [2]]"


def test_self_reference_is_circular() -> None:
    """An array containing itself renders the inner reference as circular."""
    a: list[object] = [1]
    a.append(a)
    assert stringify(a) == "[1, [<Circular>]]"


def test_indirect_cycle() -> None:
    """Cycles through several arrays are caught at the re-entered array."""
    a: list[object] = ["a"]
    b: list[object] = ["b", a]
    a.append(b)
    assert stringify(a) == '["a", ["b", [<Circular>]]]'


def test_shared_sibling_is_not_circular() -> None:
    """The same array appearing twice side by side is rendered twice."""
    shared = [1]
    assert stringify([shared, shared]) == "[[1], [1]]"


def test_empty_array_in_guard_still_renders_empty() -> None:
    """Emptiness wins over cycle state."""
    env = FormatEnvironment()
    empty: list[object] = []
    env.guard.add(empty)
    assert stringify_array(empty, env) == "[]"


def test_array_already_in_guard() -> None:
    """A non-empty array already being rendered is circular."""
    env = FormatEnvironment()
    seq = [1]
    env.guard.add(seq)
    assert stringify_array(seq, env) == "[<Circular>]"


def test_guard_is_left_clean() -> None:
    """Rendering removes every container it added."""
    env = FormatEnvironment()
    stringify_array([[1], [2, [3]]], env)
    assert len(env.guard) == 0


def test_top_level_element_count() -> None:
    """An acyclic array renders exactly one top-level entry per element."""
    value = [1, 2, 3, 4]
    rendered = stringify(value)
    assert rendered.count(", ") == len(value) - 1


def test_depth_cap_collapses_nested_arrays() -> None:
    """Non-empty containers at the depth cap collapse to ``[...]``."""
    config = make_config(max_depth=2)
    assert stringify([1, [2, [3]]], config) == "[1, [2, [...]]]"
    assert stringify([1, [2, []]], config) == "[1, [2, []]]"


def test_element_caps_truncate() -> None:
    """Containers at the element cap show the first entries and an ellipsis."""
    config = make_config(max_elements=3, max_display_elements=2)
    assert stringify([1, 2], config) == "[1, 2]"
    assert stringify([1, 2, 3], config) == "[1, 2, ...]"
    assert stringify([1, 2, 3, 4, 5], config) == "[1, 2, ...]"


def test_element_cap_without_display_cap() -> None:
    """Without a display cap all entries are kept before the ellipsis."""
    config = make_config(max_elements=2)
    assert stringify([1, 2], config) == "[1, 2, ...]"


def test_list_subclass_with_failing_iter() -> None:
    """A list subclass whose ``__iter__`` raises still renders its stored items."""

    class BadList(list[object]):
        def __iter__(self) -> Iterator[object]:
            raise RuntimeError("no iteration")

    assert stringify(BadList([1, 2])) == "[1, 2]"
    assert stringify([BadList(["x"])]) == '[["x"]]'


def test_negative_depth_limit_means_unlimited() -> None:
    """A directly built config with a negative depth limit does not collapse arrays."""
    assert stringify([1, [2]], FormatConfig(max_depth=-1)) == "[1, [2]]"
