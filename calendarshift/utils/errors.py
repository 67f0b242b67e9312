"""Error and warning types raised by calendarshift."""


class UsageError(ValueError):
    """Raised when an operator is called with operands it does not accept.

    Examples: a Period carrying days or hours passed to a month operator,
    two Periods, two dates, or a Duration. The whole call fails; no partial
    result is returned.
    """


class RecyclingWarning(UserWarning):
    """Longer operand length is not a multiple of the shorter one."""


def operator_usage_message(operator: str) -> str:
    """Standard message for an operator that only accepts month/year Periods."""
    return (
        f"{operator} only handles Period objects with month or year units; "
        f"exactly one operand must be a Period and the other a date-time"
    )


__all__ = [
    "UsageError",
    "RecyclingWarning",
    "operator_usage_message",
]
