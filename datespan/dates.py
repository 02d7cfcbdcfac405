"""Calendar helpers for building and snapping dates.

Weeks run Monday to Sunday. Week numbers follow the "at least four days in
the first week" rule, with days before week 1 reported as week 52.
Month arithmetic and day ranges are delegated to python-dateutil.
"""

from datetime import date, datetime, time, timedelta
from typing import Literal, TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, rrule

from datespan.util import (
    DATETIME_FORMAT,
    DAYS_PER_WEEK,
    DEFAULT_TIMEZONE,
    FIRST_WEEKDAY,
    MILLIS_PER_DAY,
    MIN_DAYS_IN_FIRST_WEEK,
    WEEK_ZERO_AS,
)

Day: TypeAlias = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

# Mapping from day names to Python weekday integers
_DAY_MAP: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}


def date_range(start: date, end: date) -> list[date]:
    """Return every day from `start` to `end`, both included.

    The result always holds `start`, even when `end` comes before it.
    """
    until = max(start, end)
    days = rrule(
        DAILY,
        dtstart=datetime.combine(start, time.min),
        until=datetime.combine(until, time.min),
    )
    return [dt.date() for dt in days]


def combine(day: date, at: time) -> datetime:
    return datetime.combine(day, at)


def check_cross_day(start: datetime, end: datetime) -> datetime:
    """Return `end`, moved one day later if it does not come after `start`.

    Used for shifts that span midnight, where only the times are known:
    22:00 -> 06:00 on the same date really ends the next morning.
    """
    return end + timedelta(days=1) if end <= start else end


def time_from_millis(millis: int) -> time:
    """Time of day `millis` milliseconds after midnight, wrapping at 24h."""
    offset = timedelta(milliseconds=millis % MILLIS_PER_DAY)
    return (datetime.combine(date.min, time.min) + offset).time()


def default_timezone(tz: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except ZoneInfoNotFoundError as exc:
        raise ValueError(
            f"Unknown timezone {tz!r}.\n"
            f"Hint: use an IANA name such as 'UTC' or 'Europe/Rome'"
        ) from exc


def today(tz: str = DEFAULT_TIMEZONE) -> date:
    """Current date in the given zone."""
    return datetime.now(default_timezone(tz)).date()


def now(tz: str = DEFAULT_TIMEZONE) -> datetime:
    """Current wall-clock time in the given zone, as a naive datetime."""
    return datetime.now(default_timezone(tz)).replace(tzinfo=None)


def format_datetime(value: datetime, fmt: str = DATETIME_FORMAT) -> str:
    return value.strftime(fmt)


def parse_datetime(text: str, fmt: str = DATETIME_FORMAT) -> datetime:
    return datetime.strptime(text, fmt)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")


def first_day_of_month(month: int, year: int) -> date:
    _check_month(month)
    return date(year, month, 1)


def last_day_of_month(month: int, year: int) -> date:
    """Last day of the month, accounting for leap years."""
    # relativedelta clamps day=31 to the month's length
    return first_day_of_month(month, year) + relativedelta(day=31)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return (first, last) day of the month."""
    return first_day_of_month(month, year), last_day_of_month(month, year)


def _week_one_start(year: int) -> date:
    """Monday on which week 1 of `year` begins (possibly in December before)."""
    jan_first = date(year, 1, 1)
    first_monday = jan_first + timedelta(
        days=(FIRST_WEEKDAY - jan_first.weekday()) % DAYS_PER_WEEK
    )
    # A partial week long enough counts as week 1
    if (first_monday - jan_first).days >= MIN_DAYS_IN_FIRST_WEEK:
        return first_monday - timedelta(days=DAYS_PER_WEEK)
    return first_monday


def week_of_year(value: date) -> int:
    """Week of the year `value` falls in, counted within its own year.

    Days before week 1 belong to week 0, which is reported as week 52.
    Accepts dates and date-times.
    """
    if isinstance(value, datetime):
        value = value.date()
    week_one = _week_one_start(value.year)
    if value < week_one:
        return WEEK_ZERO_AS
    return (value - week_one).days // DAYS_PER_WEEK + 1


def monday_of_week_of_year(week: int, year: int) -> date:
    """Monday of the given week of the year (week 0 is the one before week 1)."""
    if not 0 <= week <= 53:
        raise ValueError(f"week must be 0-53, got {week}")
    return _week_one_start(year) + timedelta(days=(week - 1) * DAYS_PER_WEEK)


def sunday_of_week_of_year(week: int, year: int) -> date:
    return monday_of_week_of_year(week, year) + timedelta(days=DAYS_PER_WEEK - 1)


def _weekday_number(day: "Day | int") -> int:
    if isinstance(day, int):
        if not 0 <= day <= 6:
            raise ValueError(f"weekday must be 0-6 (Monday=0), got {day}")
        return day
    day_lower = day.lower()
    if day_lower not in _DAY_MAP:
        valid = ", ".join(_DAY_MAP.keys())
        raise ValueError(f"Invalid day '{day}'. Valid days: {valid}")
    return _DAY_MAP[day_lower]


def adjust_to_weekday(day: date, weekday: "Day | int") -> date:
    """Move `day` to the given weekday of the same Monday-Sunday week.

    Saturday moved to "sunday" goes one day forward; moved to "monday" it
    goes five days back.
    """
    return day + timedelta(days=_weekday_number(weekday) - day.weekday())


def monday_of_week(day: date) -> date:
    return adjust_to_weekday(day, "monday")


def sunday_of_week(day: date) -> date:
    return adjust_to_weekday(day, "sunday")
