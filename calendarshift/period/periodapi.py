"""Period and Duration API.

Constructors for Period and Duration values and coercion of the span types
other libraries provide (``dateutil.relativedelta``, ``pandas.DateOffset``,
``datetime.timedelta``) into them.
"""

from datetime import timedelta
from typing import Optional

import numpy as np
import pandas as pd

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from calendarshift.period.periodtypes import Duration, FieldValue, Period
from calendarshift.utils.errors import UsageError

# relativedelta / DateOffset attributes that set a calendar field outright
# instead of moving it
_ABSOLUTE_FIELDS = ("year", "month", "day", "weekday", "hour", "minute", "second",
                    "microsecond", "nanosecond")


# ---- Constructors ----

def years(n: FieldValue = 1) -> Period:
    """Period of n years. ``years(1)`` is equivalent to ``months(12)``."""
    return Period(years=n)


def months(n: FieldValue = 1) -> Period:
    """
    Period of n months.

    Examples:
        >>> months(1)
        Period(months=1)
        >>> months([1, 2, 3])
        Period(months=[1, 2, 3])
    """
    return Period(months=n)


def weeks(n: FieldValue = 1) -> Period:
    """Period of n weeks, stored as 7 * n days."""
    return Period(days=np.asarray(n) * 7)


def days(n: FieldValue = 1) -> Period:
    return Period(days=n)


def hours(n: FieldValue = 1) -> Period:
    return Period(hours=n)


def minutes(n: FieldValue = 1) -> Period:
    return Period(minutes=n)


def seconds(n: FieldValue = 1) -> Period:
    return Period(seconds=n)


def duration(n: float = 0.0) -> Duration:
    """Exact Duration of n seconds."""
    return Duration(float(n))


# ---- Coercion ----

def _from_relativedelta(rd: relativedelta) -> Period:
    absolute = [name for name in _ABSOLUTE_FIELDS if getattr(rd, name, None) is not None]
    if absolute or rd.leapdays:
        raise UsageError(
            f"relativedelta with absolute fields {absolute or ['leapdays']} "
            f"cannot be used as a Period"
        )
    return Period(
        years=rd.years,
        months=rd.months,
        days=rd.days,
        hours=rd.hours,
        minutes=rd.minutes,
        seconds=rd.seconds + rd.microseconds / 1e6,
    )


def _from_dateoffset(offset: pd.DateOffset) -> Period:
    kwds = dict(offset.kwds)
    absolute = [name for name in _ABSOLUTE_FIELDS if name in kwds]
    if absolute:
        raise UsageError(
            f"DateOffset with absolute fields {absolute} cannot be used as a Period"
        )
    n = offset.n
    if not kwds:
        # bare DateOffset() is one calendar day
        return Period(days=n)
    sub_seconds = (
        kwds.get("milliseconds", 0) / 1e3
        + kwds.get("microseconds", 0) / 1e6
        + kwds.get("nanoseconds", 0) / 1e9
    )
    return Period(
        years=n * kwds.get("years", 0),
        months=n * kwds.get("months", 0),
        days=n * (kwds.get("days", 0) + 7 * kwds.get("weeks", 0)),
        hours=n * kwds.get("hours", 0),
        minutes=n * kwds.get("minutes", 0),
        seconds=n * (kwds.get("seconds", 0) + sub_seconds),
    )


def as_period(obj) -> Optional[Period]:
    """
    Coerce obj to a Period if it is a calendar-relative span.

    Accepts Period, ``dateutil.relativedelta.relativedelta`` and plain
    ``pandas.DateOffset`` (not anchored offsets such as ``MonthEnd``).

    Args:
        obj: Candidate operand

    Returns:
        Period, or None if obj is not a calendar-relative span

    Raises:
        UsageError: If obj is a relativedelta/DateOffset with absolute fields

    Examples:
        >>> as_period(relativedelta(months=2))
        Period(months=2)
        >>> as_period(pd.DateOffset(years=1))
        Period(years=1)
        >>> as_period("2010-01-01") is None
        True
    """
    if isinstance(obj, Period):
        return obj
    if isinstance(obj, relativedelta):
        return _from_relativedelta(obj)
    if type(obj) is pd.DateOffset:
        return _from_dateoffset(obj)
    return None


def is_duration(obj) -> bool:
    """True for exact spans: Duration, timedelta, pandas Timedelta/Tick, numpy timedelta64."""
    if isinstance(obj, (Duration, timedelta, np.timedelta64, pd.TimedeltaIndex)):
        return True
    if isinstance(obj, pd.offsets.Tick):
        return True
    if isinstance(obj, (np.ndarray, pd.Series)) and obj.dtype.kind == "m":
        return True
    return False


__all__ = [
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
