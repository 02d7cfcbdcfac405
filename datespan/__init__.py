import logging

from .compare import (
    is_after,
    is_after_or_equal,
    is_before,
    is_before_or_equal,
    is_between_inclusive,
)
from .dates import (
    adjust_to_weekday,
    check_cross_day,
    combine,
    date_range,
    default_timezone,
    first_day_of_month,
    format_datetime,
    last_day_of_month,
    monday_of_week,
    monday_of_week_of_year,
    month_bounds,
    now,
    parse_datetime,
    sunday_of_week,
    sunday_of_week_of_year,
    time_from_millis,
    today,
    week_of_year,
)
from .iterables import generate, have_common_element, sub_map
from .overlap import (
    DateOverlapValidator,
    DateTimeOverlapValidator,
    OverlapValidator,
    check_overlap,
    check_overlap_dates,
    check_overlap_datetimes,
    check_periods,
)
from .period import Period
from .predicates import (
    dates_in_period,
    entity_in_period,
    entity_not_in_period,
    intersects,
    is_contained,
    not_contained,
)

# Library: leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Period",
    "is_before",
    "is_after",
    "is_after_or_equal",
    "is_before_or_equal",
    "is_between_inclusive",
    "intersects",
    "is_contained",
    "not_contained",
    "dates_in_period",
    "entity_in_period",
    "entity_not_in_period",
    "OverlapValidator",
    "DateOverlapValidator",
    "DateTimeOverlapValidator",
    "check_overlap",
    "check_overlap_dates",
    "check_overlap_datetimes",
    "check_periods",
    "date_range",
    "combine",
    "check_cross_day",
    "time_from_millis",
    "default_timezone",
    "today",
    "now",
    "format_datetime",
    "parse_datetime",
    "first_day_of_month",
    "last_day_of_month",
    "month_bounds",
    "week_of_year",
    "monday_of_week_of_year",
    "sunday_of_week_of_year",
    "adjust_to_weekday",
    "monday_of_week",
    "sunday_of_week",
    "generate",
    "sub_map",
    "have_common_element",
]
