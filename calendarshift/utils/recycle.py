"""Operand recycling for element-wise batch operations.

Two operands of different lengths are combined element by element by
repeating the shorter one until it matches the longer one. A zero-length
operand makes the result empty.
"""

import logging
import warnings

import numpy as np

from calendarshift.utils.errors import RecyclingWarning

logger = logging.getLogger(__name__)


def recycled_length(n_left: int, n_right: int) -> int:
    """
    Length of the result of combining operands of length n_left and n_right.

    Examples:
        >>> recycled_length(3, 1)
        3
        >>> recycled_length(0, 4)
        0
    """
    if n_left == 0 or n_right == 0:
        return 0
    longest = max(n_left, n_right)
    if longest % n_left or longest % n_right:
        message = (
            f"Longer object length ({longest}) is not a multiple of "
            f"shorter object length ({min(n_left, n_right)})"
        )
        logger.warning(message)
        warnings.warn(message, RecyclingWarning, stacklevel=3)
    return longest


def recycle_positions(n: int, length: int) -> np.ndarray:
    """Positions into an operand of length n that repeat it out to length."""
    if length == 0:
        return np.array([], dtype=np.intp)
    return np.arange(length, dtype=np.intp) % n


__all__ = [
    "recycled_length",
    "recycle_positions",
]
