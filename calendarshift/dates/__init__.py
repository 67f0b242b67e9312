"""Dates module: date-time operand conversion.

Public API:
    to_batch(obj) -> DateBatch
        Convert any supported date-time operand to a DatetimeIndex batch

    from_batch(batch, index)
        Convert a processed index back to the operand's original type

    to_naive_utc_fields(index) -> (naive_index, tz_label)
    from_naive_utc_fields(naive_index, tz_label, dst=None) -> index
        Strip and reassociate a timezone without moving wall-clock fields

    dst_flags(index) -> bool array
        Which values were observed in daylight saving time
"""

from calendarshift.dates.dateconvert import (
    DateBatch,
    is_date_operand,
    to_batch,
    from_batch,
    empty_like,
    to_naive_utc_fields,
    dst_flags,
    from_naive_utc_fields,
)

__all__ = [
    "DateBatch",
    "is_date_operand",
    "to_batch",
    "from_batch",
    "empty_like",
    "to_naive_utc_fields",
    "dst_flags",
    "from_naive_utc_fields",
]
