# topmark:header:start
#
#   project      : LogCompose
#   file         : test_kinds.py
#   file_relpath : tests/core/test_kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for value kind/category classification."""

from __future__ import annotations

import enum
import math
import re
from collections import OrderedDict, namedtuple
from datetime import datetime, timezone
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType

import pytest

from logcompose.core.kinds import (
    KIND_TO_CATEGORY,
    ValueCategory,
    ValueKind,
    classify,
    detect_value_category,
    detect_value_kind,
    is_array,
    is_atomic,
    is_collection,
    is_defined_data,
    is_record,
    is_single_value,
)
from tests.conftest import parametrize


class Color(enum.Enum):
    RED = 1


class Empty:
    pass


class TimeLike:
    """Exposes the shape of a datetime without being one."""

    def timestamp(self) -> float:
        return 0.0

    def isoformat(self) -> str:
        return "1970-01-01T00:00:00"


Point = namedtuple("Point", "x y")


@parametrize(
    "value",
    [
        None,
        "",
        "text",
        0,
        -1,
        10**40,
        1.5,
        math.nan,
        math.inf,
        -math.inf,
        True,
        False,
        1j,
        Decimal("1.10"),
        Fraction(1, 3),
        Color.RED,
    ],
)
def test_atomic_values(value: object) -> None:
    """Primitives, numbers of every flavor and enum members are atomic."""
    assert is_atomic(value)
    assert detect_value_kind(value) is ValueKind.PRIMITIVE
    assert classify(value) is ValueCategory.ATOMIC


def test_none_is_never_a_record() -> None:
    """``None`` is atomic and nothing else."""
    assert not is_record(None)
    assert not is_collection(None)
    assert not is_defined_data(None)


def test_datetime_is_single_value() -> None:
    """A datetime (naive or aware) is a single value."""
    for value in (datetime(2025, 1, 1), datetime(2025, 1, 1, tzinfo=timezone.utc)):
        assert is_single_value(value)
        assert detect_value_kind(value) is ValueKind.DATE
        assert classify(value) is ValueCategory.SINGLE_VALUE


def test_date_lookalike_is_not_single_value() -> None:
    """Objects with datetime-like methods are not dates."""
    assert not is_single_value(TimeLike())
    assert classify(TimeLike()) is None


def test_dict_with_timestamp_callable_is_record() -> None:
    """A dict exposing a time accessor is still a plain record."""
    value = {"timestamp": lambda: 0}
    assert not is_single_value(value)
    assert is_record(value)
    assert classify(value) is ValueCategory.COLLECTION


@parametrize("value", [[], [1, 2], (), (1, "a")])
def test_arrays(value: object) -> None:
    """Lists and exact tuples are arrays."""
    assert is_array(value)
    assert is_collection(value)
    assert detect_value_kind(value) is ValueKind.ARRAY
    assert not is_record(value)


def test_named_tuple_is_not_an_array() -> None:
    """Named tuples carry their own behavior and stay unclassified."""
    assert not is_array(Point(1, 2))
    assert classify(Point(1, 2)) is None


def test_list_subclass_is_an_array() -> None:
    """List subclasses are still arrays."""

    class Items(list[int]):
        pass

    assert is_array(Items([1]))


@parametrize("value", [{}, {"a": 1}, {1: "x"}])
def test_records_are_collections_and_defined_data(value: object) -> None:
    """Plain dicts are records and defined data at the same time."""
    assert is_record(value)
    assert is_collection(value)
    assert is_defined_data(value)
    assert detect_value_kind(value) is ValueKind.JSON_OBJECT
    assert classify(value) is ValueCategory.COLLECTION


@parametrize(
    "value",
    [
        OrderedDict(a=1),
        MappingProxyType({"a": 1}),
        {1, 2},
        frozenset(),
        re.compile("x"),
        ValueError("boom"),
        Empty(),
        b"bytes",
        print,
        Empty,
    ],
)
def test_unclassified_values(value: object) -> None:
    """Everything else is left for the special-type resolver."""
    assert detect_value_kind(value) is None
    assert classify(value) is None
    assert not is_defined_data(value)


def test_kind_to_category_table() -> None:
    """Each kind maps to exactly one category."""
    assert KIND_TO_CATEGORY == {
        ValueKind.PRIMITIVE: ValueCategory.ATOMIC,
        ValueKind.DATE: ValueCategory.SINGLE_VALUE,
        ValueKind.ARRAY: ValueCategory.COLLECTION,
        ValueKind.JSON_OBJECT: ValueCategory.COLLECTION,
    }
    assert detect_value_category(None) is None
    assert detect_value_category(ValueKind.DATE) is ValueCategory.SINGLE_VALUE


@pytest.mark.parametrize("value", [[1], {"a": 1}, "x", 1, None, datetime(2025, 1, 1), Empty()])
def test_exactly_one_primary_path(value: object) -> None:
    """At most one of atomic/single-value/array/record holds for any value."""
    flags = [is_atomic(value), is_single_value(value), is_array(value), is_record(value)]
    assert sum(flags) <= 1
