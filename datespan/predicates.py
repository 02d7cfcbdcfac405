"""Containment and intersection tests between periods.

A period is a pair of points where the end may be None, meaning the period
never ends. All bounds are inclusive: two periods that share a single point
intersect.
"""

from collections.abc import Callable
from typing import TypeVar

from datespan.compare import Point, is_after, is_before, is_between_inclusive

Entity = TypeVar("Entity")


def intersects(
    a_start: Point, a_end: Point | None, b_start: Point, b_end: Point | None
) -> bool:
    """True if [a_start, a_end] and [b_start, b_end] share at least one point.

    Three ways to meet: `a` engulfs `b`, `a` starts inside `b`, or `a` ends
    inside `b`. A None end is treated as unbounded on either side, so the
    test gives the same answer when the two periods are swapped.
    """
    engulfs = is_before(a_start, b_start) and (
        a_end is None or (b_end is not None and is_after(a_end, b_end))
    )
    return (
        engulfs
        or is_between_inclusive(a_start, b_start, b_end)
        or (a_end is not None and is_between_inclusive(a_end, b_start, b_end))
    )


def not_contained(
    child_start: Point, child_end: Point | None
) -> Callable[[Point, Point | None], bool]:
    """Return a test that is True when the child period escapes a parent.

    The child escapes if it starts before the parent, or if the parent is
    bounded and the child ends after it or never ends.
    """

    def test(parent_start: Point, parent_end: Point | None) -> bool:
        return is_before(child_start, parent_start) or (
            parent_end is not None
            and (child_end is None or is_after(child_end, parent_end))
        )

    return test


def is_contained(
    child_start: Point,
    child_end: Point | None,
    parent_start: Point,
    parent_end: Point | None,
) -> bool:
    """True if the child period lies entirely inside the parent period.

    An unbounded parent accepts any child end, including an unbounded one.
    """
    return not not_contained(child_start, child_end)(parent_start, parent_end)


def dates_in_period(
    period_start: Point, period_end: Point
) -> Callable[[Point, Point | None], bool]:
    """Return a two-argument test for (start, end) pairs meeting the period.

    Example:
        >>> in_january = dates_in_period(date(2024, 1, 1), date(2024, 1, 31))
        >>> in_january(date(2023, 12, 20), None)
        True
    """

    def test(start: Point, end: Point | None) -> bool:
        return intersects(start, end, period_start, period_end)

    return test


def _check_order(start: Point, end: Point | None, what: str) -> None:
    if end is not None and is_after(start, end):
        raise ValueError(
            f"End of {what} must be greater than or equal to its start.\n"
            f"Got start={start!r}, end={end!r}"
        )


def entity_not_in_period(
    period_start: Point,
    period_end: Point,
    get_start: Callable[[Entity], Point],
    get_end: Callable[[Entity], Point | None],
) -> Callable[[Entity], bool]:
    """Return a test that is True when an entity lies wholly outside a period.

    The entity's own period is read through `get_start`/`get_end` each time
    the test runs. Ordering is checked then too: a period or an entity whose
    start comes after its end raises ValueError when evaluated, never when
    the test is built.

    Example:
        >>> outside = entity_not_in_period(
        ...     jan_1, jan_31, attrgetter("valid_from"), attrgetter("valid_to")
        ... )
        >>> stale = [skill for skill in skills if outside(skill)]
    """

    def test(entity: Entity) -> bool:
        start = get_start(entity)
        end = get_end(entity)
        _check_order(period_start, period_end, "period")
        _check_order(start, end, "entity period")
        return is_after(start, period_end) or (
            end is not None and is_before(end, period_start)
        )

    return test


def entity_in_period(
    period_start: Point,
    period_end: Point,
    get_start: Callable[[Entity], Point],
    get_end: Callable[[Entity], Point | None],
) -> Callable[[Entity], bool]:
    """Negation of `entity_not_in_period`: True when the entity meets the period."""
    outside = entity_not_in_period(period_start, period_end, get_start, get_end)

    def test(entity: Entity) -> bool:
        return not outside(entity)

    return test
