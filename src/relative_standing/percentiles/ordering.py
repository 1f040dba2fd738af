"""
Decimal coercion and the ordered view shared by every standing calculation.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from ..core.errors import InvalidObservationError


def to_decimal(value: Any) -> Decimal:
    """
    Convert one observation to a finite Decimal.

    Floats go through their shortest repr so 0.1 becomes Decimal("0.1")
    rather than its binary expansion.

    Raises:
        InvalidObservationError: For bools, non-numeric input and NaN/Infinity
    """
    if isinstance(value, bool):
        raise InvalidObservationError(value, "booleans are not observations")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise InvalidObservationError(value, "not a number") from None
    elif isinstance(value, float):
        result = Decimal(repr(value))
    else:
        raise InvalidObservationError(value, f"unsupported type {type(value).__name__}")

    if not result.is_finite():
        raise InvalidObservationError(value)
    return result


def coerce_sample(sample: Iterable[Any]) -> list[Decimal]:
    """Return a private Decimal copy of ``sample`` in the caller's order."""
    return [to_decimal(v) for v in sample]


def ordered_view(sample: Iterable[Any]) -> list[Decimal]:
    """
    Return a fresh ascending copy of ``sample``.

    The caller's sequence is never reordered. An empty sample yields an
    empty list; callers decide whether that is an error.
    """
    return sorted(coerce_sample(sample))
