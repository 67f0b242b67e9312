"""Tests for rollback.

These tests verify rollback across:
- The four flag combinations (roll_to_first x preserve_hms)
- Every supported operand type, including empty operands
- Timezones, DST changes and missing values

Run with: pytest tests/test_rollback.py -v
"""

from datetime import date, datetime, timedelta

import numpy as np
import pandas as pd
import pytest

from calendarshift.rollback import rollback, rollback_fields

NEW_YORK = "America/New_York"


# ============================================================================
# Flag Combinations
# ============================================================================

class TestRollbackFlags:
    """Test the four roll_to_first / preserve_hms combinations"""

    def test_default_rolls_to_last_day_of_previous_month(self):
        """Test rollback(2010-03-03) -> 2010-02-28"""
        assert rollback(datetime(2010, 3, 3)) == datetime(2010, 2, 28)

    def test_roll_to_first(self):
        """Test rollback(2010-03-03, roll_to_first=True) -> 2010-03-01"""
        assert rollback(datetime(2010, 3, 3), roll_to_first=True) == datetime(2010, 3, 1)

    def test_preserves_time_by_default(self):
        """Test that hour, minute and second survive the default rollback"""
        result = rollback(datetime(2010, 3, 3, 12, 44, 22))
        assert result == datetime(2010, 2, 28, 12, 44, 22)

    def test_preserve_hms_false(self):
        """Test rollback(2010-03-03 12:44:22, preserve_hms=False) -> 2010-02-28 00:00:00"""
        result = rollback(datetime(2010, 3, 3, 12, 44, 22), preserve_hms=False)
        assert result == datetime(2010, 2, 28, 0, 0, 0)

    def test_roll_to_first_preserving_time(self):
        """Test roll_to_first keeps the time of day"""
        result = rollback(datetime(2010, 3, 3, 12, 44, 22), roll_to_first=True)
        assert result == datetime(2010, 3, 1, 12, 44, 22)

    def test_roll_to_first_without_time(self):
        """Test roll_to_first with preserve_hms=False lands on midnight of the 1st"""
        result = rollback(datetime(2010, 3, 3, 12, 44, 22), roll_to_first=True, preserve_hms=False)
        assert result == datetime(2010, 3, 1)

    def test_preserve_hms_false_drops_microseconds(self):
        """Test that sub-second fields are zeroed with the time"""
        result = rollback(datetime(2010, 3, 3, 12, 44, 22, 500000), preserve_hms=False)
        assert result == datetime(2010, 2, 28)

    def test_preserve_hms_keeps_microseconds(self):
        """Test that sub-second fields are kept with the time"""
        result = rollback(datetime(2010, 3, 3, 12, 44, 22, 500000))
        assert result == datetime(2010, 2, 28, 12, 44, 22, 500000)


# ============================================================================
# Calendar Edge Cases
# ============================================================================

class TestRollbackCalendar:
    """Test month lengths and year boundaries"""

    def test_vector_of_months(self, march_dates):
        """Test that each element rolls to its own previous month end"""
        assert rollback(march_dates) == [
            datetime(2010, 2, 28),
            datetime(2010, 3, 31),
            datetime(2010, 4, 30),
        ]

    def test_leap_year_february(self):
        """Test rolling back into a leap February"""
        assert rollback(datetime(2012, 3, 15)) == datetime(2012, 2, 29)

    def test_january_crosses_year(self):
        """Test that January rolls back to December 31 of the previous year"""
        assert rollback(datetime(2011, 1, 20, 8)) == datetime(2010, 12, 31, 8)

    def test_first_of_month_still_rolls_back(self):
        """Test that a date already on the 1st goes to the previous month end"""
        assert rollback(datetime(2010, 5, 1)) == datetime(2010, 4, 30)

    def test_first_of_month_roll_to_first_is_identity(self):
        """Test that roll_to_first on the 1st returns the same value"""
        assert rollback(datetime(2010, 5, 1, 6), roll_to_first=True) == datetime(2010, 5, 1, 6)

    def test_every_day_of_two_years(self):
        """Test day/month properties for every day of 2011-2012"""
        dates = pd.date_range("2011-01-01 07:15", "2012-12-31 07:15", freq="D")

        first = rollback(dates, roll_to_first=True)
        assert (first.day == 1).all()
        assert (first.month == dates.month).all()

        last = rollback(dates)
        next_day = last + timedelta(days=1)
        assert (next_day.day == 1).all()
        assert (next_day.month == dates.month).all()
        assert (last.hour == 7).all()
        assert (last.minute == 15).all()

        midnight = rollback(dates, preserve_hms=False)
        assert (midnight.hour == 0).all()
        assert (midnight.minute == 0).all()
        assert (midnight.second == 0).all()


# ============================================================================
# Operand Types
# ============================================================================

class TestRollbackTypes:
    """Test that every operand type comes back as the same type"""

    def test_timestamp(self):
        """Test pandas Timestamp with timezone"""
        result = rollback(pd.Timestamp("2010-03-03 12:44:22", tz="UTC"))
        assert isinstance(result, pd.Timestamp)
        assert result == pd.Timestamp("2010-02-28 12:44:22", tz="UTC")

    def test_date(self):
        """Test datetime.date"""
        result = rollback(date(2010, 3, 3))
        assert type(result) is date
        assert result == date(2010, 2, 28)

    def test_datetime64_scalar(self):
        """Test numpy datetime64 scalar keeps its unit"""
        result = rollback(np.datetime64("2010-03-03"))
        assert isinstance(result, np.datetime64)
        assert result == np.datetime64("2010-02-28")

    def test_datetime_index_keeps_tz_and_name(self):
        """Test DatetimeIndex keeps tz and name"""
        index = pd.DatetimeIndex(["2010-03-03 12:44:22", "2010-08-20 01:00"], tz=NEW_YORK, name="due")
        result = rollback(index)
        assert isinstance(result, pd.DatetimeIndex)
        assert result.name == "due"
        assert str(result.tz) == NEW_YORK
        assert list(result) == [
            pd.Timestamp("2010-02-28 12:44:22", tz=NEW_YORK),
            pd.Timestamp("2010-07-31 01:00", tz=NEW_YORK),
        ]

    def test_series_keeps_index_and_name(self):
        """Test Series keeps its index and name"""
        series = pd.Series(pd.to_datetime(["2010-03-03", "2010-04-03"]), index=["a", "b"], name="due")
        result = rollback(series)
        assert isinstance(result, pd.Series)
        assert result.name == "due"
        assert result.index.tolist() == ["a", "b"]
        assert result.tolist() == [pd.Timestamp("2010-02-28"), pd.Timestamp("2010-03-31")]

    def test_ndarray(self):
        """Test datetime64 ndarray keeps its dtype"""
        values = np.array(["2010-03-03", "2010-04-03"], dtype="datetime64[D]")
        result = rollback(values)
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.dtype("datetime64[D]")
        assert result.tolist() == [date(2010, 2, 28), date(2010, 3, 31)]

    def test_tuple_returns_list(self):
        """Test tuple of datetimes comes back as a list"""
        assert rollback((datetime(2010, 3, 3),)) == [datetime(2010, 2, 28)]

    def test_unsupported_type_raises(self):
        """Test that strings are rejected (parsing is not rollback's job)"""
        with pytest.raises(TypeError):
            rollback("2010-03-03")


class TestRollbackEmpty:
    """Test zero-length operands"""

    def test_empty_list(self):
        """Test empty list -> empty list"""
        assert rollback([]) == []

    def test_empty_index_keeps_tz(self):
        """Test empty DatetimeIndex keeps its timezone"""
        result = rollback(pd.DatetimeIndex([], tz="UTC"))
        assert isinstance(result, pd.DatetimeIndex)
        assert len(result) == 0
        assert str(result.tz) == "UTC"

    def test_empty_series(self):
        """Test empty datetime Series"""
        result = rollback(pd.Series([], dtype="datetime64[ns]"))
        assert isinstance(result, pd.Series)
        assert len(result) == 0
        assert pd.api.types.is_datetime64_dtype(result.dtype)

    def test_empty_ndarray(self):
        """Test empty datetime64 array"""
        result = rollback(np.array([], dtype="datetime64[s]"))
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.dtype("datetime64[s]")
        assert result.size == 0


# ============================================================================
# Timezones and Missing Values
# ============================================================================

class TestRollbackTimezones:
    """Test wall-clock behavior across timezone offsets"""

    def test_keeps_wall_clock_across_dst_end(self):
        """Test rolling from EST back into EDT keeps 12:00 wall-clock time"""
        # DST ended 2010-11-07 in New York
        result = rollback(pd.Timestamp("2010-11-10 12:00", tz=NEW_YORK))
        assert result == pd.Timestamp("2010-10-31 12:00", tz=NEW_YORK)
        assert result.utcoffset() == timedelta(hours=-4)

    def test_roll_to_first_onto_dst_overlap(self):
        """Test rolling onto a wall time that occurs twice keeps the source reading"""
        # 2009-11-01 01:30 occurs twice in New York; 2009-11-15 is standard time
        result = rollback(pd.Timestamp("2009-11-15 01:30", tz=NEW_YORK), roll_to_first=True)
        assert result == pd.Timestamp("2009-11-01 01:30-05:00")
        assert result.hour == 1

    def test_roll_to_first_on_overlap_time_is_identity(self):
        """Test the daylight-time 01:30 on 2009-11-01 is returned unchanged"""
        start = pd.Timestamp("2009-11-01 01:30").tz_localize(NEW_YORK, ambiguous=True)
        result = rollback(start, roll_to_first=True)
        assert result == start
        assert result.utcoffset() == timedelta(hours=-4)

    def test_day_is_local_not_utc(self):
        """Test that the local calendar day is used, not the UTC one"""
        # 2010-03-01 02:00 in Tokyo is still February in UTC
        result = rollback(pd.Timestamp("2010-03-01 02:00", tz="Asia/Tokyo"))
        assert result == pd.Timestamp("2010-02-28 02:00", tz="Asia/Tokyo")

    def test_missing_values_propagate(self):
        """Test None stays None in lists"""
        assert rollback([datetime(2010, 3, 3), None]) == [datetime(2010, 2, 28), None]

    def test_nat_propagates_in_index(self):
        """Test NaT stays NaT in a DatetimeIndex"""
        result = rollback(pd.DatetimeIndex(["2010-03-03", None]))
        assert result[0] == pd.Timestamp("2010-02-28")
        assert result[1] is pd.NaT

    def test_input_not_mutated(self):
        """Test that the caller's values are untouched"""
        index = pd.DatetimeIndex(["2010-03-03 12:44:22"])
        before = index.copy()
        rollback(index, preserve_hms=False)
        assert index.equals(before)


class TestRollbackFields:
    """Test the field-level primitive on naive datetime64 values"""

    def test_rollback_fields(self):
        """Test the naive primitive directly"""
        values = np.array(["2010-03-03T12:44:22", "NaT"], dtype="datetime64[ns]")
        result = rollback_fields(values)
        assert result[0] == np.datetime64("2010-02-28T12:44:22")
        assert np.isnat(result[1])
