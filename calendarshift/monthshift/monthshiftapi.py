"""Month arithmetic API.

Public operators for adding and subtracting month/year Periods to date-times
without rolling over into the following month:

    month_plus(e1, e2)    date + months, clamped to the end of the target month
    month_minus(e1, e2)   date - months, clamped to the end of the target month
    add_with_rollback(e1, e2, roll_to_first=False, preserve_hms=True)

One operand must be a month/year Period and the other a date-time; the order
does not matter. ``MonthShift`` wraps a Period so the same operations are
available through ``+`` and ``-``.

Examples:
    >>> jan = datetime(2010, 1, 31, 3, 4, 5)
    >>> month_plus(jan, months([1, 2, 3]))
    [datetime.datetime(2010, 2, 28, 3, 4, 5),
     datetime.datetime(2010, 3, 31, 3, 4, 5),
     datetime.datetime(2010, 4, 30, 3, 4, 5)]
    >>> month_plus(years(1), datetime(2012, 2, 29))
    datetime.datetime(2013, 2, 28, 0, 0)
    >>> datetime(2012, 2, 29) - MonthShift(years(1))
    datetime.datetime(2011, 2, 28, 0, 0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union

from calendarshift.dates.dateconvert import is_date_operand
from calendarshift.monthshift.monthshiftengine import shift
from calendarshift.period.periodapi import as_period, is_duration
from calendarshift.period.periodtypes import Period
from calendarshift.utils.errors import UsageError, operator_usage_message


# ---- Operand classification ----

@dataclass(frozen=True)
class DateOperand:
    value: Any


@dataclass(frozen=True)
class PeriodOperand:
    period: Period


@dataclass(frozen=True)
class DurationOperand:
    value: Any


@dataclass(frozen=True)
class OtherOperand:
    value: Any


Operand = Union[DateOperand, PeriodOperand, DurationOperand, OtherOperand]


def classify_operand(obj) -> Operand:
    """
    Tag an operand as a date, Period, Duration or anything else.

    Examples:
        >>> classify_operand(months(1))
        PeriodOperand(period=Period(months=1))
        >>> classify_operand(timedelta(days=1))
        DurationOperand(value=datetime.timedelta(days=1))
    """
    if isinstance(obj, MonthShift):
        return PeriodOperand(obj.period)
    period = as_period(obj)
    if period is not None:
        return PeriodOperand(period)
    if is_duration(obj):
        return DurationOperand(obj)
    if is_date_operand(obj):
        return DateOperand(obj)
    return OtherOperand(obj)


def resolve_operands(e1, e2, operator: str) -> Tuple[Any, Period]:
    """
    Pick the date and the month/year Period out of two operands.

    Args:
        e1: Either operand
        e2: The other operand
        operator: Operator name used in error messages

    Returns:
        (date, period)

    Raises:
        UsageError: Unless exactly one operand is a Period and the other a
            date-time, or if the Period has day, hour, minute or second units
    """
    left = classify_operand(e1)
    right = classify_operand(e2)

    if isinstance(left, DateOperand) and isinstance(right, PeriodOperand):
        date, period = left.value, right.period
    elif isinstance(left, PeriodOperand) and isinstance(right, DateOperand):
        date, period = right.value, left.period
    else:
        raise UsageError(operator_usage_message(operator))

    if not period.is_month_only():
        raise UsageError(
            f"{operator} only handles months and years. "
            f"Add other periods separately with '+'"
        )
    return date, period


# ---- Operators ----

def add_with_rollback(e1, e2, roll_to_first: bool = False, preserve_hms: bool = True):
    """
    Add a month/year Period to a date-time, rolling back dates that overflow.

    If the result would fall past the end of the target month, it is rolled
    back to the last day of that month (or, with roll_to_first, forward to
    the first day of the following month).

    Args:
        e1: A date-time or a month/year Period
        e2: The other operand
        roll_to_first: Use the first day of the following month for overflowed dates
        preserve_hms: Keep the time of day on overflowed dates

    Returns:
        Date-time of the same type and timezone as the date operand

    Raises:
        UsageError: See resolve_operands

    Examples:
        >>> add_with_rollback(datetime(2010, 1, 31), months(1))
        datetime.datetime(2010, 2, 28, 0, 0)
        >>> add_with_rollback(datetime(2010, 1, 31), months(1), roll_to_first=True)
        datetime.datetime(2010, 3, 1, 0, 0)
    """
    date, period = resolve_operands(e1, e2, "add_with_rollback")
    return shift(date, period.month_delta(), roll_to_first, preserve_hms)


def month_plus(e1, e2):
    """
    Add months to a date without exceeding the last day of the new month.

    ``date`` plus ``months(n)`` always returns a date in the nth month after
    ``date``. Days that do not exist in that month become its last day:
    January 31 plus one month is February 28 (29 in leap years), not March 3.

    Periods smaller than a month are not handled; add them separately with
    ordinary arithmetic. The operation is not one-to-one, so results depend on
    the order of operations.

    Args:
        e1: A date-time or a month/year Period
        e2: The other operand

    Returns:
        Date-time of the same type and timezone as the date operand

    Raises:
        UsageError: Unless exactly one operand is a month/year Period and the
            other a date-time
    """
    date, period = resolve_operands(e1, e2, "month_plus")
    return shift(date, period.month_delta())


def month_minus(e1, e2):
    """
    Subtract months from a date without exceeding the last day of the new month.

    ``date`` minus ``months(n)`` always returns a date in the nth month before
    ``date``. March 31 minus one month is February 28 (29 in leap years).

    Args:
        e1: A date-time or a month/year Period
        e2: The other operand

    Returns:
        Date-time of the same type and timezone as the date operand

    Raises:
        UsageError: Unless exactly one operand is a month/year Period and the
            other a date-time
    """
    date, period = resolve_operands(e1, e2, "month_minus")
    return shift(date, -period.month_delta())


# ---- Operator overloading ----

class MonthShift:
    """A month/year Period usable with ``+`` and ``-`` on date-times.

    ``date + MonthShift(p)`` and ``MonthShift(p) + date`` are month_plus;
    ``date - MonthShift(p)`` is month_minus.

    Examples:
        >>> datetime(2010, 1, 31) + MonthShift(months=1)
        datetime.datetime(2010, 2, 28, 0, 0)
        >>> datetime(2010, 3, 31) - MonthShift(months(1))
        datetime.datetime(2010, 2, 28, 0, 0)
    """

    # make numpy and pandas defer to __radd__ / __rsub__
    __array_ufunc__ = None
    __pandas_priority__ = 5000

    def __init__(self, period=None, *, years=0, months=0):
        if period is None:
            period = Period(years=years, months=months)
        coerced = as_period(period)
        if coerced is None:
            raise UsageError(operator_usage_message("MonthShift"))
        if not coerced.is_month_only():
            raise UsageError(
                "MonthShift only handles months and years. "
                "Add other periods separately with '+'"
            )
        self._period = coerced

    @property
    def period(self) -> Period:
        return self._period

    def __repr__(self):
        return f"MonthShift({self._period!r})"

    def __eq__(self, other):
        if not isinstance(other, MonthShift):
            return NotImplemented
        return self._period == other._period

    __hash__ = None

    def __neg__(self):
        return MonthShift(-self._period)

    def __add__(self, other):
        return month_plus(other, self._period)

    def __radd__(self, other):
        return month_plus(other, self._period)

    def __sub__(self, other):
        return month_minus(self._period, other)

    def __rsub__(self, other):
        return month_minus(other, self._period)


__all__ = [
    "month_plus",
    "month_minus",
    "add_with_rollback",
    "MonthShift",
    "classify_operand",
    "resolve_operands",
    "DateOperand",
    "PeriodOperand",
    "DurationOperand",
    "OtherOperand",
]
