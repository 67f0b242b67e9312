"""calendarshift - Calendar-aware month arithmetic

Public API for adding and subtracting months and years to date-times without
producing invalid or rolled-over dates, and for rolling dates back to month
boundaries.

Usage:
    from datetime import datetime
    from calendarshift import month_plus, month_minus, rollback, months, years

    # Clamp to the end of the target month
    month_plus(datetime(2010, 1, 31), months(1))   # Returns: datetime(2010, 2, 28)

    # Leap day minus a year
    month_minus(datetime(2012, 2, 29), years(1))   # Returns: datetime(2011, 2, 28)

    # Last day of the previous month, or first of the month
    rollback(datetime(2010, 3, 3))                     # Returns: datetime(2010, 2, 28)
    rollback(datetime(2010, 3, 3), roll_to_first=True) # Returns: datetime(2010, 3, 1)

Dates may be datetime/date/Timestamp/datetime64 scalars, lists, numpy
arrays, pandas DatetimeIndex or Series; results come back as the same type
and in the same timezone.
"""

__version__ = "0.1.0"

# ============================================================================
# Month Arithmetic API
# ============================================================================

from .monthshift.monthshiftapi import (
    month_plus,          # Primary API - add months/years, clamped to month end
    month_minus,         # Subtract months/years, clamped to month end
    add_with_rollback,   # month_plus with roll_to_first / preserve_hms control
    MonthShift,          # Period wrapper for + and - operators
)
from .monthshift.monthshiftengine import (
    shift,               # Engine entry point taking integer month deltas
)

# ============================================================================
# Rollback API
# ============================================================================

from .rollback.rollbackapi import (
    rollback,            # Roll to last day of previous month / first of month
)

# ============================================================================
# Period and Duration Values
# ============================================================================

from .period.periodtypes import (
    Period,              # Calendar-relative span
    Duration,            # Exact span in seconds
)
from .period.periodapi import (
    years,
    months,
    weeks,
    days,
    hours,
    minutes,
    seconds,
    duration,
)

# ============================================================================
# Errors and Settings
# ============================================================================

from .utils.errors import (
    UsageError,          # Operator called with unsupported operands
    RecyclingWarning,    # Operand lengths are not multiples
)
from .utils.config import (
    Settings,
    get_settings,
    clear_settings_cache,
)

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "month_plus",          # Add months/years without rolling over
    "month_minus",         # Subtract months/years without rolling over
    "rollback",            # Roll dates to month boundaries

    # ========================================================================
    # Month Arithmetic
    # ========================================================================
    "add_with_rollback",
    "MonthShift",
    "shift",

    # ========================================================================
    # Periods and Durations
    # ========================================================================
    "Period",
    "Duration",
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "duration",

    # ========================================================================
    # Errors and Settings
    # ========================================================================
    "UsageError",
    "RecyclingWarning",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
