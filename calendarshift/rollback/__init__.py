"""Rollback module.

Public API:
    rollback(dates, roll_to_first=False, preserve_hms=True)
        Roll dates to the last day of the previous month, or to the first
        day of their month

Examples:
    >>> from datetime import datetime
    >>> from calendarshift.rollback import rollback
    >>> rollback(datetime(2010, 3, 3))
    datetime.datetime(2010, 2, 28, 0, 0)
    >>> rollback([datetime(2010, 3, 3), datetime(2010, 4, 3), datetime(2010, 5, 3)])
    [datetime.datetime(2010, 2, 28, 0, 0), datetime.datetime(2010, 3, 31, 0, 0), datetime.datetime(2010, 4, 30, 0, 0)]
"""

from calendarshift.rollback.rollbackapi import (
    rollback,
    rollback_fields,
)

__all__ = [
    "rollback",
    "rollback_fields",
]
