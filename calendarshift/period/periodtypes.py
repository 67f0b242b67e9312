"""Period and Duration value types.

A Period is a calendar-relative span. Its fields are added to the matching
calendar fields of a date rather than as a fixed number of seconds, so
``months(1)`` is 28 to 31 days depending on where it is applied. Each field
holds one value or a vector of values; a vector Period applied to one date
produces one result per element.

A Duration is an exact span measured in seconds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

from calendarshift.utils.recycle import recycle_positions, recycled_length

FieldValue = Union[int, float, Sequence[int], np.ndarray]

PERIOD_FIELDS = ("years", "months", "days", "hours", "minutes", "seconds")
SUB_MONTH_FIELDS = ("days", "hours", "minutes", "seconds")


def _as_field_array(value: FieldValue, name: str) -> np.ndarray:
    """Coerce a field value to a read-only 1-d numpy array."""
    arr = np.array(value, dtype=np.float64 if name == "seconds" else None, ndmin=1)
    if arr.ndim != 1:
        raise ValueError(f"Period field {name!r} must be a scalar or 1-d sequence")
    if arr.dtype.kind not in "iubf":
        raise ValueError(f"Period field {name!r} must be numeric, got {arr.dtype}")
    if name != "seconds" and arr.dtype.kind != "i":
        if arr.dtype.kind == "f" and not np.all(np.isfinite(arr) & (arr == np.round(arr))):
            raise ValueError(f"Period field {name!r} must hold whole numbers")
        arr = arr.astype(np.int64)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Period:
    """Calendar-relative span with independent year to second fields."""

    years: FieldValue = 0
    months: FieldValue = 0
    days: FieldValue = 0
    hours: FieldValue = 0
    minutes: FieldValue = 0
    seconds: FieldValue = 0
    _length: int = field(init=False, repr=False)

    def __post_init__(self):
        arrays = {name: _as_field_array(getattr(self, name), name) for name in PERIOD_FIELDS}
        length = arrays["years"].size
        for arr in arrays.values():
            length = recycled_length(length, arr.size)
        for name, arr in arrays.items():
            object.__setattr__(self, name, arr)
        object.__setattr__(self, "_length", length)

    def __len__(self) -> int:
        return self._length

    def __neg__(self) -> Period:
        return Period(**{name: -getattr(self, name) for name in PERIOD_FIELDS})

    def __eq__(self, other) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            np.array_equal(self._field(name), other._field(name))
            for name in PERIOD_FIELDS
        )

    __hash__ = None

    def __repr__(self) -> str:
        parts = []
        for name in PERIOD_FIELDS:
            arr = getattr(self, name)
            if np.any(arr != 0):
                value = arr[0].item() if arr.size == 1 else arr.tolist()
                parts.append(f"{name}={value!r}")
        return f"Period({', '.join(parts)})"

    def _field(self, name: str) -> np.ndarray:
        """Field values recycled out to the Period's length."""
        arr = getattr(self, name)
        return arr[recycle_positions(arr.size, len(self))]

    def is_month_only(self) -> bool:
        """True when only the year and month fields may be non-zero."""
        return all(
            not np.any(getattr(self, name) != 0)
            for name in SUB_MONTH_FIELDS
        )

    def month_delta(self) -> np.ndarray:
        """
        Total months per element: 12 * years + months.

        Returns:
            int64 array of length len(self)

        Examples:
            >>> Period(years=1, months=2).month_delta()
            array([14])
            >>> Period(months=[1, 2, 3]).month_delta()
            array([1, 2, 3])
        """
        return 12 * self._field("years").astype(np.int64) + self._field("months").astype(np.int64)


@dataclass(frozen=True)
class Duration:
    """Exact span measured in seconds."""

    seconds: float = 0.0

    def __neg__(self) -> Duration:
        return Duration(-self.seconds)


__all__ = [
    "Period",
    "Duration",
    "PERIOD_FIELDS",
    "SUB_MONTH_FIELDS",
]
