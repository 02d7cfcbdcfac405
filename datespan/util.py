"""Configuration constants for datespan.

Defaults used by the calendar helpers. Functions that depend on one of
these accept a keyword argument to override it per call.
"""

# Timezone used by today() and now() when none is given
DEFAULT_TIMEZONE = "Europe/Rome"

# strftime/strptime pattern for date-times (yyyy-MM-dd HH:mm:ss)
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

# Weeks run Monday to Sunday; week 1 is the first with this many days
FIRST_WEEKDAY = 0
MIN_DAYS_IN_FIRST_WEEK = 4

# Week number reported for days that precede week 1 of their year
WEEK_ZERO_AS = 52

DAYS_PER_WEEK = 7
MILLIS_PER_DAY = 86_400_000
