"""
Presentation helpers for ranks and values.
"""

from __future__ import annotations

import math
import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .percentiles.ordering import to_decimal

_CENTS = Decimal("0.01")


def add_ordinal(num: int) -> str:
    """Format a rank with its English ordinal suffix: 1st, 2nd, 3rd, 11th, 22nd."""
    magnitude = abs(num)

    if magnitude % 100 in (11, 12, 13):
        return f"{num}th"

    suffix = {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")
    return f"{num}{suffix}"


def format_two_decimal_places_if_they_exist(value: Any) -> str:
    """
    Format a number to two decimal places if they exist.

    100.2 becomes "100.20" and 100.00 becomes "100". Rounds half away from
    zero before deciding.
    """
    rounded = to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return f"{rounded:.2f}"


def nearly_equal(a: float, b: float, epsilon: float = 1e-7) -> bool:
    """
    Compare two floats using relative difference.

    Values at or near zero fall back to an absolute comparison scaled by the
    smallest normal float.
    """
    if a == b:
        # Shortcut, handles infinities
        return True

    if math.isnan(a) or math.isnan(b):
        return False

    diff = abs(a - b)
    if a == 0.0 or b == 0.0 or diff < sys.float_info.min:
        return diff < epsilon * sys.float_info.min

    return diff / min(abs(a) + abs(b), sys.float_info.max) < epsilon
