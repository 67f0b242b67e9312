"""Runtime settings for calendarshift.

Settings are read from environment variables the first time they are needed
and cached for the life of the process.

Environment variables:
    CALENDARSHIFT_NONEXISTENT: How to localize wall-clock times that fall in a
        DST gap ("shift_forward", "shift_backward", "NaT", "raise").
    CALENDARSHIFT_AMBIGUOUS: How to localize wall-clock times that occur twice
        during a DST overlap ("keep", "NaT", "raise", "earliest", "latest").
        "keep" gives each result the reading (DST or standard time) of the
        value it was computed from.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

logger = logging.getLogger(__name__)

NONEXISTENT_ENV = "CALENDARSHIFT_NONEXISTENT"
AMBIGUOUS_ENV = "CALENDARSHIFT_AMBIGUOUS"

NONEXISTENT_CHOICES = ("shift_forward", "shift_backward", "NaT", "raise")
AMBIGUOUS_CHOICES = ("keep", "NaT", "raise", "earliest", "latest")


@dataclass(frozen=True)
class Settings:
    """Policies used when a timezone label is reassociated with wall-clock fields."""

    nonexistent: str = "shift_forward"
    ambiguous: str = "keep"

    def __post_init__(self):
        if self.nonexistent not in NONEXISTENT_CHOICES:
            raise ValueError(
                f"Invalid nonexistent policy {self.nonexistent!r}. "
                f"Use one of: {', '.join(NONEXISTENT_CHOICES)}"
            )
        if self.ambiguous not in AMBIGUOUS_CHOICES:
            raise ValueError(
                f"Invalid ambiguous policy {self.ambiguous!r}. "
                f"Use one of: {', '.join(AMBIGUOUS_CHOICES)}"
            )

    @property
    def pandas_ambiguous(self) -> Optional[Union[str, bool]]:
        """The ambiguous policy in the form ``tz_localize`` expects.

        pandas takes True for the DST (earlier) reading and False for the
        standard-time (later) reading. None for "keep", which needs per-element
        flags from the caller.
        """
        if self.ambiguous == "keep":
            return None
        if self.ambiguous == "earliest":
            return True
        if self.ambiguous == "latest":
            return False
        return self.ambiguous


def load_settings(environ=None) -> Settings:
    """Build Settings from an environment mapping (default: ``os.environ``).

    Args:
        environ: Mapping to read variables from

    Returns:
        Settings instance

    Raises:
        ValueError: If a variable holds an unsupported value
    """
    if environ is None:
        environ = os.environ

    defaults = Settings()
    settings = Settings(
        nonexistent=environ.get(NONEXISTENT_ENV, defaults.nonexistent).strip(),
        ambiguous=environ.get(AMBIGUOUS_ENV, defaults.ambiguous).strip(),
    )
    if settings != defaults:
        logger.info(
            f"Loaded settings from environment: nonexistent={settings.nonexistent}, "
            f"ambiguous={settings.ambiguous}"
        )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached process-wide Settings."""
    return load_settings()


def clear_settings_cache():
    """Clear the cached settings so the environment is read again.

    Useful for testing or after changing environment variables.
    """
    get_settings.cache_clear()
    logger.debug("Cleared settings cache")


__all__ = [
    "Settings",
    "load_settings",
    "get_settings",
    "clear_settings_cache",
]
