"""Period module: calendar-relative and exact span values.

Public API:
    Period(years=0, months=0, days=0, hours=0, minutes=0, seconds=0)
        Calendar-relative span, each field a scalar or vector

    years(n), months(n), weeks(n), days(n), hours(n), minutes(n), seconds(n)
        Single-unit Period constructors

    Duration(seconds), duration(n)
        Exact span in seconds

    as_period(obj) -> Period | None
        Coerce relativedelta / DateOffset operands

Examples:
    >>> from calendarshift.period import months, years
    >>> years(1).month_delta()
    array([12])
    >>> (-months([1, 2])).month_delta()
    array([-1, -2])
"""

from calendarshift.period.periodtypes import (
    Period,
    Duration,
)
from calendarshift.period.periodapi import (
    years,
    months,
    weeks,
    days,
    hours,
    minutes,
    seconds,
    duration,
    as_period,
    is_duration,
)

__all__ = [
    "Period",
    "Duration",
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "duration",
    "as_period",
    "is_duration",
]
