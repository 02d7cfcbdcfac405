"""Overlap validation for collections of periods.

Each element of the collection carries its own period, read through a pair
of accessor functions. Validation indexes the periods by start, sorts the
ends and checks that every end is immediately preceded by its own start.
A violation raises whatever the caller's error factory returns.
"""

import bisect
import logging
from collections.abc import Callable, Iterable
from datetime import date, datetime
from operator import attrgetter
from typing import Any, Generic, Literal, TypeVar

from typing_extensions import override

from datespan.compare import Point
from datespan.period import Period

logger = logging.getLogger(__name__)

Entity = TypeVar("Entity")

ErrorFactory = Callable[[], BaseException]


def _end_key(end: Any) -> tuple[bool, Any]:
    # Unbounded ends sort after every bounded one
    return end is None, end


def _lower_start(starts: list[Any], end: Any) -> Any:
    """Greatest start strictly less than `end`, or None if there is none."""
    if end is None:
        return starts[-1]
    idx = bisect.bisect_left(starts, end)
    return starts[idx - 1] if idx else None


class OverlapValidator(Generic[Point]):
    """Checks that no two periods in a collection overlap.

    Subclasses restrict the kind of point they accept by overriding
    `_check_point`; the algorithm itself is shared.
    """

    def _check_point(self, value: Any, edge: Literal["start", "end"]) -> None:
        pass

    def check(
        self,
        collection: Iterable[Entity],
        get_start: Callable[[Entity], Point],
        get_end: Callable[[Entity], Point | None],
        error_factory: ErrorFactory,
        *,
        strict: bool = False,
    ) -> None:
        """Raise `error_factory()` if any two periods in `collection` overlap.

        Algorithm:
        1. Index start -> end. A start seen twice is an overlap.
        2. Index end -> start. A repeated end replaces the earlier entry,
           unless `strict` is set, in which case it is an overlap.
        3. Walk the ends in ascending order (unbounded last). The greatest
           start strictly before each end must be that end's own start.

        Stops at the first violation. Returns None when none is found.
        """
        by_start: dict[Any, Any] = {}
        by_end: dict[Any, Any] = {}
        for item in collection:
            start = get_start(item)
            end = get_end(item)
            self._check_point(start, "start")
            if end is not None:
                self._check_point(end, "end")

            if start in by_start:
                logger.debug(f"check: duplicate start {start}")
                raise error_factory()
            if strict and end in by_end:
                logger.debug(f"check: duplicate end {end} (strict)")
                raise error_factory()
            by_start[start] = end
            by_end[end] = start

        starts = sorted(by_start)
        logger.debug(f"check: indexed {len(starts)} periods")

        for end in sorted(by_start.values(), key=_end_key):
            start = by_end[end]
            previous = _lower_start(starts, end)
            if previous is not None and previous != start:
                logger.debug(
                    f"check: end {end} of period starting {start} "
                    f"runs past start {previous}"
                )
                raise error_factory()


class DateOverlapValidator(OverlapValidator[date]):
    """Overlap validator for date-only periods."""

    @override
    def _check_point(self, value: Any, edge: Literal["start", "end"]) -> None:
        if isinstance(value, datetime) or not isinstance(value, date):
            raise TypeError(
                f"Period {edge} must be a date, got {type(value).__name__!r}: "
                f"{value!r}\n"
                f"Hint: use check_overlap_datetimes() for date-time periods,\n"
                f"      or convert with value.date()"
            )


class DateTimeOverlapValidator(OverlapValidator[datetime]):
    """Overlap validator for date-time periods."""

    @override
    def _check_point(self, value: Any, edge: Literal["start", "end"]) -> None:
        if not isinstance(value, datetime):
            raise TypeError(
                f"Period {edge} must be a datetime, got {type(value).__name__!r}: "
                f"{value!r}\n"
                f"Hint: use check_overlap_dates() for date-only periods,\n"
                f"      or combine with a time: datetime.combine(value, time.min)"
            )


_any_points: OverlapValidator[Any] = OverlapValidator()
_dates = DateOverlapValidator()
_datetimes = DateTimeOverlapValidator()


def check_overlap(
    collection: Iterable[Entity],
    get_start: Callable[[Entity], Point],
    get_end: Callable[[Entity], Point | None],
    error_factory: ErrorFactory,
    *,
    strict: bool = False,
) -> None:
    """Raise `error_factory()` if any two periods in `collection` overlap.

    Works for any mutually comparable points. See `OverlapValidator.check`.

    Example:
        >>> check_overlap(
        ...     shifts,
        ...     attrgetter("starts_at"),
        ...     attrgetter("ends_at"),
        ...     lambda: ShiftConflict("shifts overlap"),
        ... )
    """
    _any_points.check(collection, get_start, get_end, error_factory, strict=strict)


def check_overlap_dates(
    collection: Iterable[Entity],
    get_start: Callable[[Entity], date],
    get_end: Callable[[Entity], date | None],
    error_factory: ErrorFactory,
    *,
    strict: bool = False,
) -> None:
    """`check_overlap` restricted to date-only periods."""
    _dates.check(collection, get_start, get_end, error_factory, strict=strict)


def check_overlap_datetimes(
    collection: Iterable[Entity],
    get_start: Callable[[Entity], datetime],
    get_end: Callable[[Entity], datetime | None],
    error_factory: ErrorFactory,
    *,
    strict: bool = False,
) -> None:
    """`check_overlap` restricted to date-time periods."""
    _datetimes.check(collection, get_start, get_end, error_factory, strict=strict)


def check_periods(
    periods: Iterable[Period[Any]],
    error_factory: ErrorFactory,
    *,
    strict: bool = False,
) -> None:
    """Raise `error_factory()` if any two of the given periods overlap."""
    _any_points.check(
        periods,
        attrgetter("start"),
        attrgetter("end"),
        error_factory,
        strict=strict,
    )
