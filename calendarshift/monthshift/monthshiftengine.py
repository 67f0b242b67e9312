"""Month-Shift Engine
--------------------

Adds whole months to date-times without leaving the target month.

Algorithm:
  1. Strip the timezone, keeping wall-clock fields (naive UTC reinterpretation)
  2. Add the month delta to the month field, carrying into the year. A day
     that does not exist in the target month spills into the next month
     (Jan 31 + 1 month -> Mar 3), like ordinary calendar renormalization
  3. Any element whose day of month went down has spilled over; roll it back
     to the last day of the intended month, keeping the time of day
  4. Reassociate the original timezone. A wall time that occurs twice keeps
     the DST or standard-time reading of the date it came from

The same steps run for negative deltas: a spilled element still ends up with
a smaller day of month than it started with.

Shifting is not invertible. 2010-01-31 + 1 month is 2010-02-28, and
2010-02-28 - 1 month is 2010-01-28.
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
from calendarshift.period.periodtypes import Period
from calendarshift.rollback.rollbackapi import rollback_fields
from calendarshift.utils.recycle import recycle_positions, recycled_length

logger = logging.getLogger(__name__)


def quick_month_add(values: np.ndarray, delta_months: np.ndarray) -> np.ndarray:
    """
    Add months to naive values field by field, renormalizing overflow forward.

    The day-of-month and time of day are kept as an offset from the start of
    the month, so a day past the end of the target month carries into the
    following month. NaT stays NaT.

    Args:
        values: Naive datetime64 values
        delta_months: Integer month deltas, same length as values

    Returns:
        datetime64[ns] array

    Examples:
        >>> quick_month_add(np.array(["2010-01-31"], dtype="datetime64[ns]"), np.array([1]))
        array(['2010-03-03T00:00:00.000000000'], dtype='datetime64[ns]')
        >>> quick_month_add(np.array(["2010-12-15"], dtype="datetime64[ns]"), np.array([1]))
        array(['2011-01-15T00:00:00.000000000'], dtype='datetime64[ns]')
    """
    values = values.astype("datetime64[ns]")
    month_start = values.astype("datetime64[M]")
    offset_in_month = values - month_start.astype("datetime64[ns]")
    target = month_start + np.asarray(delta_months, dtype=np.int64).astype("timedelta64[M]")
    return target.astype("datetime64[ns]") + offset_in_month


def _day_of_month(values: np.ndarray) -> np.ndarray:
    """Day of month as float, NaN for NaT."""
    return np.asarray(pd.DatetimeIndex(values).day, dtype=np.float64)


def shift(
    dates,
    delta_months,
    roll_to_first: bool = False,
    preserve_hms: bool = True,
):
    """
    Shift dates by whole months, clamping overflow to the end of the target month.

    dates and delta_months are combined element by element; the shorter one
    is recycled against the longer one.

    Args:
        dates: Date-time operand (scalar, list, DatetimeIndex, Series, ndarray)
        delta_months: Integer or sequence of integers (negative to subtract)
        roll_to_first: Send overflowed elements to the first day of the month
            after the target month instead of the last day of the target month
        preserve_hms: Keep the time of day on overflowed elements

    Returns:
        Value of the same type and timezone as dates

    Raises:
        TypeError: If dates is not a supported date-time operand
        ValueError: If delta_months holds anything but whole numbers

    Examples:
        >>> shift(datetime(2010, 1, 31, 3, 4, 5), 1)
        datetime.datetime(2010, 2, 28, 3, 4, 5)
        >>> shift(datetime(2010, 1, 31, 3, 4, 5), [1, 2, 3])
        [datetime.datetime(2010, 2, 28, 3, 4, 5),
         datetime.datetime(2010, 3, 31, 3, 4, 5),
         datetime.datetime(2010, 4, 30, 3, 4, 5)]
        >>> shift(datetime(2012, 2, 29), -12)
        datetime.datetime(2011, 2, 28, 0, 0)
    """
    batch = to_batch(dates)
    delta = Period(months=delta_months).months

    length = recycled_length(len(batch), delta.size)
    if length == 0:
        return from_batch(batch, batch.index[:0])

    naive, tz_label = to_naive_utc_fields(batch.index)
    positions = recycle_positions(len(batch), length)
    original = naive.values.astype("datetime64[ns]")[positions]
    dst = dst_flags(batch.index)
    if dst is not None:
        dst = dst[positions]
    delta = delta[recycle_positions(delta.size, length)]

    shifted = quick_month_add(original, delta)
    roll = _day_of_month(shifted) < _day_of_month(original)
    if roll.any():
        shifted[roll] = rollback_fields(shifted[roll], roll_to_first, preserve_hms)

    logger.debug(
        f"Shifted {length} dates (tz={tz_label}), clamped {int(roll.sum())} "
        f"overflowed to month boundary"
    )
    result = from_naive_utc_fields(pd.DatetimeIndex(shifted), tz_label, dst=dst)
    return from_batch(batch, result)


__all__ = [
    "shift",
    "quick_month_add",
]
