"""
Math modules для ach_utils

Округление float и длительностей, epsilon-сравнение float.
"""

from ach_utils.math.rounding import (
    # Epsilon constants
    FLOAT_EQUAL_EPSILON,
    # Duration units
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    # Functions
    approximately_equal,
    round_duration,
    round_timedelta,
    round_to_places,
)

__all__ = [
    # Rounding — Epsilon constants
    "FLOAT_EQUAL_EPSILON",
    # Rounding — Duration units
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    # Rounding — Functions
    "approximately_equal",
    "round_duration",
    "round_timedelta",
    "round_to_places",
]
