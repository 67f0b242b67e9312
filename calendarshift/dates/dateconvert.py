"""Date-time batch conversion.

Every supported date-time operand is converted to a ``pandas.DatetimeIndex``
for processing and converted back to the caller's type afterwards. The
timezone of the batch travels with the index; naive inputs stay naive.

Supported operands and what they come back as:
  - datetime.datetime          -> datetime.datetime
  - datetime.date              -> datetime.date
  - pandas.Timestamp           -> pandas.Timestamp
  - numpy.datetime64           -> numpy.datetime64
  - pandas.DatetimeIndex       -> pandas.DatetimeIndex
  - pandas.Series (datetime64) -> pandas.Series
  - numpy.ndarray (datetime64) -> numpy.ndarray
  - list / tuple of scalars    -> list

A scalar operand that grows to several elements (one date plus a vector of
months) comes back as a DatetimeIndex for Timestamps, an ndarray for
datetime64 and a list for datetime/date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Any, Optional

import numpy as np
import pandas as pd

from calendarshift.utils.config import Settings, get_settings

SCALAR_KINDS = ("timestamp", "datetime", "date", "datetime64")


@dataclass(frozen=True)
class DateBatch:
    """A date-time operand as a DatetimeIndex plus what is needed to rebuild it."""

    index: pd.DatetimeIndex
    kind: str
    element_kind: Optional[str] = None
    dtype: Optional[np.dtype] = None
    name: Any = None
    series_index: Optional[pd.Index] = None

    def __len__(self) -> int:
        return len(self.index)

    @property
    def tz(self) -> Optional[tzinfo]:
        return self.index.tz


def _scalar_kind(value) -> Optional[str]:
    """Scalar kind of value, or None if value is not a date-time scalar."""
    # Timestamp and NaT subclass datetime, and datetime subclasses date
    if value is pd.NaT or isinstance(value, pd.Timestamp):
        return "timestamp"
    if isinstance(value, datetime):
        return "datetime"
    if isinstance(value, date):
        return "date"
    if isinstance(value, np.datetime64):
        return "datetime64"
    return None


def _is_missing(value) -> bool:
    return value is None or value is pd.NaT or (isinstance(value, np.datetime64) and np.isnat(value))


def is_date_operand(obj) -> bool:
    """True if obj is a date-time operand that to_batch accepts."""
    if _scalar_kind(obj) is not None:
        return True
    if isinstance(obj, pd.DatetimeIndex):
        return True
    if isinstance(obj, pd.Series):
        return pd.api.types.is_datetime64_any_dtype(obj.dtype)
    if isinstance(obj, np.ndarray):
        return obj.dtype.kind == "M"
    if isinstance(obj, (list, tuple)):
        return all(_is_missing(v) or _scalar_kind(v) is not None for v in obj)
    return False


def to_batch(obj) -> DateBatch:
    """
    Convert a date-time operand to a DateBatch.

    Args:
        obj: Any supported date-time operand

    Returns:
        DateBatch whose index holds the values in their own timezone

    Raises:
        TypeError: If obj is not a supported date-time operand

    Examples:
        >>> batch = to_batch(datetime(2010, 1, 31, 3, 4, 5))
        >>> batch.kind, len(batch)
        ('datetime', 1)
    """
    kind = _scalar_kind(obj)
    if kind is not None:
        if kind == "datetime64":
            return DateBatch(index=pd.DatetimeIndex([obj]), kind=kind, dtype=obj.dtype)
        return DateBatch(index=pd.DatetimeIndex([obj]), kind=kind)

    if isinstance(obj, pd.DatetimeIndex):
        return DateBatch(index=obj, kind="index", name=obj.name)

    if isinstance(obj, pd.Series) and pd.api.types.is_datetime64_any_dtype(obj.dtype):
        return DateBatch(
            index=pd.DatetimeIndex(obj),
            kind="series",
            name=obj.name,
            series_index=obj.index,
        )

    if isinstance(obj, np.ndarray) and obj.dtype.kind == "M":
        if obj.ndim != 1:
            raise TypeError(f"datetime64 arrays must be 1-d, got {obj.ndim}-d")
        return DateBatch(index=pd.DatetimeIndex(obj), kind="ndarray", dtype=obj.dtype)

    if isinstance(obj, (list, tuple)) and is_date_operand(obj):
        present = [v for v in obj if not _is_missing(v)]
        element_kind = _scalar_kind(present[0]) if present else None
        values = [pd.NaT if _is_missing(v) else v for v in obj]
        index = pd.DatetimeIndex(values)
        return DateBatch(index=index, kind="list", element_kind=element_kind)

    raise TypeError(f"Unsupported date-time type: {type(obj).__name__}")


def _restore_scalar(value: pd.Timestamp, kind: Optional[str], dtype=None):
    if kind == "timestamp":
        return value
    if value is pd.NaT:
        if kind == "datetime64":
            return np.datetime64("NaT")
        return None
    if kind == "datetime":
        return value.to_pydatetime()
    if kind == "date":
        return value.date()
    if dtype is None:
        return value.to_datetime64()
    return value.to_datetime64().astype(dtype)


def from_batch(batch: DateBatch, index: pd.DatetimeIndex):
    """
    Rebuild the caller's type from a processed index ("reclassing").

    Args:
        batch: The DateBatch the input was converted to
        index: Processed values, same timezone as batch.index

    Returns:
        Value of the same type as the original operand (see module docstring
        for scalars that grew into several elements)
    """
    kind = batch.kind

    if kind in SCALAR_KINDS:
        if len(index) == 1:
            return _restore_scalar(index[0], kind, batch.dtype)
        if kind == "timestamp":
            return index
        if kind == "datetime64":
            return index.values.astype(batch.dtype)
        return [_restore_scalar(v, kind) for v in index]

    if kind == "index":
        return index.rename(batch.name)

    if kind == "series":
        series_index = batch.series_index if len(batch.series_index) == len(index) else None
        return pd.Series(index, index=series_index, name=batch.name)

    if kind == "ndarray":
        return index.values.astype(batch.dtype)

    return [_restore_scalar(v, batch.element_kind) for v in index]


def empty_like(obj):
    """Empty value of the same type as obj (and the same tz, name and dtype)."""
    batch = to_batch(obj)
    return from_batch(batch, batch.index[:0])


# ---- Naive UTC reinterpretation ----

def to_naive_utc_fields(index: pd.DatetimeIndex) -> tuple[pd.DatetimeIndex, Optional[tzinfo]]:
    """
    Reinterpret wall-clock fields as if they were UTC.

    The instant is not shifted: 2010-03-14 03:30 in America/New_York becomes
    naive 2010-03-14 03:30. Field arithmetic on the naive values is free of
    DST and offset discontinuities.

    Args:
        index: Values in their own timezone (or naive)

    Returns:
        (naive_index, tz_label) where tz_label is None for naive input
    """
    tz = index.tz
    if tz is None:
        return index, None
    return index.tz_localize(None), tz


def dst_flags(index: pd.DatetimeIndex) -> Optional[np.ndarray]:
    """
    Per-element flag telling whether a value was observed in daylight saving time.

    Passed back to from_naive_utc_fields so that a wall time inside a DST
    overlap keeps the reading its source value had.

    Args:
        index: Values in their own timezone (or naive)

    Returns:
        bool array of len(index), or None for naive input. NaT is False.
    """
    if index.tz is None:
        return None
    return np.array(
        [value is not pd.NaT and bool(value.dst()) for value in index],
        dtype=bool,
    )


def from_naive_utc_fields(
    naive: pd.DatetimeIndex,
    tz_label: Optional[tzinfo],
    settings: Optional[Settings] = None,
    dst: Optional[np.ndarray] = None,
) -> pd.DatetimeIndex:
    """
    Reassociate a timezone label with naive wall-clock fields.

    Inverse of to_naive_utc_fields. Wall-clock values that do not exist in
    tz_label (DST gap) follow the nonexistent setting. Values that exist twice
    (DST overlap) take the reading given by dst, element by element, unless
    the ambiguous setting names a fixed policy.

    Args:
        naive: Naive wall-clock values
        tz_label: Timezone to reassociate, or None to leave naive
        settings: Policies for gap/overlap times (default: get_settings())
        dst: Per-element DST flags (see dst_flags), same length as naive

    Returns:
        DatetimeIndex in tz_label with the same wall-clock fields
    """
    if tz_label is None:
        return naive
    if settings is None:
        settings = get_settings()

    ambiguous = settings.pandas_ambiguous
    if ambiguous is None:
        ambiguous = "NaT" if dst is None else np.asarray(dst, dtype=bool)
    return naive.tz_localize(
        tz_label,
        ambiguous=ambiguous,
        nonexistent=settings.nonexistent,
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
