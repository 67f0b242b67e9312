"""Shared utilities for the calendarshift package."""

from calendarshift.utils.errors import (
    UsageError,
    RecyclingWarning,
    operator_usage_message,
)
from calendarshift.utils.config import (
    Settings,
    load_settings,
    get_settings,
    clear_settings_cache,
)
from calendarshift.utils.recycle import (
    recycled_length,
    recycle_positions,
)

__all__ = [
    # Errors
    "UsageError",
    "RecyclingWarning",
    "operator_usage_message",
    # Settings
    "Settings",
    "load_settings",
    "get_settings",
    "clear_settings_cache",
    # Recycling
    "recycled_length",
    "recycle_positions",
]
