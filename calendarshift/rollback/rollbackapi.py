"""Rollback API.

Moves dates to a month boundary: the first day of their own month, or the
last day of the previous month. Time of day is kept unless preserve_hms is
False, in which case the result is at midnight.
"""

import logging

import numpy as np
import pandas as pd

from calendarshift.dates.dateconvert import (
    dst_flags,
    from_batch,
    from_naive_utc_fields,
    to_batch,
    to_naive_utc_fields,
)

logger = logging.getLogger(__name__)

ONE_DAY = np.timedelta64(1, "D")


def rollback_fields(
    values: np.ndarray,
    roll_to_first: bool = False,
    preserve_hms: bool = True,
) -> np.ndarray:
    """
    Roll naive wall-clock values to a month boundary.

    Works on the fields directly, so subtracting the day is a calendar-day
    subtraction that always crosses into the previous month. NaT stays NaT.

    Args:
        values: Naive datetime64 values
        roll_to_first: Stop at the first day of the month
        preserve_hms: Keep hour, minute and second (and sub-second) fields

    Returns:
        datetime64[ns] array of the same length
    """
    values = values.astype("datetime64[ns]")
    first = values.astype("datetime64[M]").astype("datetime64[ns]")
    if preserve_hms:
        first = first + (values - values.astype("datetime64[D]"))
    if roll_to_first:
        return first
    return first - ONE_DAY


def rollback(dates, roll_to_first: bool = False, preserve_hms: bool = True):
    """
    Roll dates back to the last day of the previous month or the first of the month.

    Args:
        dates: Date-time operand (scalar, list, DatetimeIndex, Series, ndarray)
        roll_to_first: Roll to the first day of the month instead of the last
            day of the previous month
        preserve_hms: Keep the hour, minute and second. If False the result is
            at 00:00:00

    Returns:
        Value of the same type and timezone as dates

    Raises:
        TypeError: If dates is not a supported date-time operand

    Examples:
        >>> rollback(datetime(2010, 3, 3))
        datetime.datetime(2010, 2, 28, 0, 0)
        >>> rollback(datetime(2010, 3, 3, 12, 44, 22), roll_to_first=True)
        datetime.datetime(2010, 3, 1, 12, 44, 22)
        >>> rollback(datetime(2010, 3, 3, 12, 44, 22), preserve_hms=False)
        datetime.datetime(2010, 2, 28, 0, 0)
    """
    batch = to_batch(dates)
    if len(batch) == 0:
        return from_batch(batch, batch.index)

    naive, tz_label = to_naive_utc_fields(batch.index)
    rolled = pd.DatetimeIndex(rollback_fields(naive.values, roll_to_first, preserve_hms))
    logger.debug(
        f"Rolled back {len(batch)} dates (tz={tz_label}, roll_to_first={roll_to_first}, "
        f"preserve_hms={preserve_hms})"
    )
    result = from_naive_utc_fields(rolled, tz_label, dst=dst_flags(batch.index))
    return from_batch(batch, result)


__all__ = [
    "rollback",
    "rollback_fields",
]
