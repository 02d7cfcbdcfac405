"""Inclusive comparisons between calendar points.

Every function works the same way for dates, date-times and times of day,
as long as both arguments are of the same kind.
"""

from datetime import date, datetime, time
from typing import TypeVar

Point = TypeVar("Point", date, datetime, time)


def is_before(a: Point, b: Point) -> bool:
    return a < b


def is_after(a: Point, b: Point) -> bool:
    return a > b


def is_after_or_equal(a: Point, b: Point) -> bool:
    """True if `a` is later than or the same as `b`."""
    return not is_before(a, b)


def is_before_or_equal(a: Point, b: Point) -> bool:
    """True if `a` is earlier than or the same as `b`."""
    return not is_after(a, b)


def is_between_inclusive(value: Point, low: Point, high: Point | None) -> bool:
    """True if `value` lies in [low, high], both bounds included.

    A `high` of None leaves the range open on the right. When `low > high`
    the range is empty and the result is False.
    """
    if high is None:
        return is_after_or_equal(value, low)
    return is_after_or_equal(value, low) and is_before_or_equal(value, high)
