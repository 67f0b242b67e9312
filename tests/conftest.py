"""Shared test fixtures and utilities for calendarshift tests."""

from datetime import datetime

import pandas as pd
import pytest

from calendarshift.utils.config import clear_settings_cache


NEW_YORK = "America/New_York"


@pytest.fixture
def jan31():
    """2010-01-31 03:04:05, the classic month-overflow date."""
    return datetime(2010, 1, 31, 3, 4, 5)


@pytest.fixture
def leap_day():
    """2012-02-29, the leap day."""
    return datetime(2012, 2, 29)


@pytest.fixture
def march_dates():
    """Three dates on the 3rd of consecutive months (Mar-May 2010)."""
    return [datetime(2010, 3, 3), datetime(2010, 4, 3), datetime(2010, 5, 3)]


@pytest.fixture
def month_end_index():
    """Month ends of 2010 in New York, one per month, named 'due'."""
    return pd.date_range("2010-01-31 09:30", periods=12, freq="ME", tz=NEW_YORK, name="due")


@pytest.fixture
def reset_settings():
    """Clear cached settings before and after a test that changes the environment.

    Example:
        def test_env(monkeypatch, reset_settings):
            monkeypatch.setenv("CALENDARSHIFT_AMBIGUOUS", "raise")
            assert get_settings().ambiguous == "raise"
    """
    clear_settings_cache()
    yield
    clear_settings_cache()
