"""Month-shift module: month/year arithmetic that never rolls past month end.

Public API:
    month_plus(e1, e2)
        Add a month/year Period to a date-time, clamping to month end

    month_minus(e1, e2)
        Subtract a month/year Period from a date-time, clamping to month end

    add_with_rollback(e1, e2, roll_to_first=False, preserve_hms=True)
        month_plus with control over where overflowed dates land

    MonthShift(period)
        Period wrapper supporting ``date + MonthShift(...)`` and ``date - MonthShift(...)``

    shift(dates, delta_months)
        Engine entry point taking an integer month delta

Examples:
    >>> from datetime import datetime
    >>> from calendarshift.monthshift import month_plus
    >>> from calendarshift.period import months
    >>> month_plus(datetime(2010, 1, 31, 3, 4, 5), months(1))
    datetime.datetime(2010, 2, 28, 3, 4, 5)
"""

from calendarshift.monthshift.monthshiftapi import (
    month_plus,
    month_minus,
    add_with_rollback,
    MonthShift,
    classify_operand,
    resolve_operands,
)
from calendarshift.monthshift.monthshiftengine import (
    shift,
    quick_month_add,
)

__all__ = [
    "month_plus",
    "month_minus",
    "add_with_rollback",
    "MonthShift",
    "classify_operand",
    "resolve_operands",
    "shift",
    "quick_month_add",
]
