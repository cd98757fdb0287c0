# topmark:header:start
#
#   project      : LogCompose
#   file         : test_formatters.py
#   file_relpath : tests/stringify/test_formatters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the callable and timestamp renderers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from logcompose.stringify.formatters import stringify_function, stringify_timestamp

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def named_function() -> None:
    pass


def multi_line_signature(
    first: int,
    second: int = 2,
) -> int:
    return first + second


class Service:
    def handle(self) -> None:
        pass

    @staticmethod
    def helper() -> None:
        pass

    @classmethod
    def build(cls) -> None:
        pass


def test_anonymous_callables() -> None:
    """Lambdas and callables with a cleared name have no usable name."""
    assert stringify_function(lambda: 0) == "Function:"

    def renamed() -> None:
        pass

    renamed.__name__ = ""
    assert stringify_function(renamed) == "Function:"


def test_named_functions() -> None:
    """Module-level, nested and builtin functions render with their name."""

    def inner() -> None:
        pass

    assert stringify_function(named_function) == "Function: named_function"
    assert stringify_function(multi_line_signature) == "Function: multi_line_signature"
    assert stringify_function(inner) == "Function: inner"
    assert stringify_function(len) == "Function: len"


def test_methods() -> None:
    """Bound, static, class and unbound methods render as methods."""
    assert stringify_function(Service().handle) == "Method: handle"
    assert stringify_function(Service.handle) == "Method: handle"
    assert stringify_function(Service.helper) == "Method: helper"
    assert stringify_function(Service.build) == "Method: build"
    assert stringify_function([].append) == "Method: append"


def test_method_in_local_class() -> None:
    """A method of a class defined inside a function is still a method."""

    class Local:
        def run(self) -> None:
            pass

    assert stringify_function(Local().run) == "Method: run"


def test_timestamp_with_and_without_fraction() -> None:
    """Milliseconds are included only on request."""
    one_second = EPOCH + timedelta(seconds=1)
    assert stringify_timestamp(one_second, True) == "1970-01-01T00:00:01.000Z"
    assert stringify_timestamp(one_second, False) == "1970-01-01T00:00:01Z"
    assert stringify_timestamp(one_second) == "1970-01-01T00:00:01Z"


def test_timestamp_truncates_microseconds() -> None:
    """Microseconds are truncated to milliseconds, never rounded."""
    instant = datetime(2025, 1, 15, 10, 30, 45, 123999, tzinfo=timezone.utc)
    assert stringify_timestamp(instant, True) == "2025-01-15T10:30:45.123Z"


def test_timestamp_converts_to_utc() -> None:
    """Aware datetimes are rendered in UTC."""
    plus_two = timezone(timedelta(hours=2))
    instant = datetime(2025, 1, 15, 12, 0, 0, tzinfo=plus_two)
    assert stringify_timestamp(instant) == "2025-01-15T10:00:00Z"


def test_naive_timestamp_is_taken_as_utc() -> None:
    """Naive datetimes are not shifted by the host time zone."""
    assert stringify_timestamp(datetime(2025, 1, 15, 10, 0, 0)) == "2025-01-15T10:00:00Z"


def test_timestamp_pads_small_years() -> None:
    """Years below 1000 are zero-padded to four digits."""
    assert stringify_timestamp(datetime(5, 3, 4, 1, 2, 3)) == "0005-03-04T01:02:03Z"


def test_timestamp_out_of_utc_range_is_clamped() -> None:
    """Instants whose UTC equivalent is out of range clamp to the nearest bound."""
    early = datetime.min.replace(tzinfo=timezone(timedelta(hours=1)))
    late = datetime.max.replace(tzinfo=timezone(timedelta(hours=-1)))
    assert stringify_timestamp(early) == "0001-01-01T00:00:00Z"
    assert stringify_timestamp(late) == "9999-12-31T23:59:59Z"
    assert stringify_timestamp(late, include_fractional=True) == "9999-12-31T23:59:59.999Z"
