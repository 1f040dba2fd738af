"""
Relative standing of a value within a numeric sample.

Three pure operations share one ordered view of the sample:
- percentile_of: integer percentile (0-100) of a value, interpolated between
  neighbouring observations when the value itself is not in the sample
- value_at_percentile: value at an arbitrary percentile (Excel-style
  exclusive linear interpolation between order statistics)
- rank_of: 1-based ordinal rank of a value that is in the sample

Direction:
- higher_is_better=True: the maximum is rank 1 / percentile 100
- higher_is_better=False: the minimum is rank 1 / percentile 100

All intermediate arithmetic uses Decimal at the configured precision, and
integer percentiles are rounded half away from zero.
"""

from __future__ import annotations

import logging
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Iterable, Optional

from ..core.config import get_settings
from ..core.errors import EmptySampleError, PercentileOutOfRangeError, ValueNotInSampleError
from .ordering import ordered_view, to_decimal

logger = logging.getLogger(__name__)

_ONE = Decimal(1)
_HUNDRED = Decimal(100)


def _precision(precision: Optional[int]) -> int:
    return precision if precision is not None else get_settings().decimal_precision


def _round_half_away(value: Decimal) -> int:
    return int(value.quantize(_ONE, rounding=ROUND_HALF_UP))


# =============================================================================
# Percentile of a value
# =============================================================================


def percentile_of(
    sample: Iterable[Any],
    value: Any,
    higher_is_better: bool = True,
    *,
    precision: Optional[int] = None,
) -> int:
    """
    Calculate the percentile standing of ``value`` relative to ``sample``.

    Each observation at ascending index i sits on the percentile
    100 / (N - 1) * i (or its mirror when lower is better). A value found in
    the sample takes its position's percentile; a value between two
    observations is linearly interpolated between theirs.

    Args:
        sample: Observations to compare against (not modified)
        value: The value to place within the sample
        higher_is_better: If False, lower values get higher percentiles
        precision: Decimal digits for the arithmetic (default from settings)

    Returns:
        Percentile as an integer in [0, 100]. A single-value sample and a
        value better than every observation both give 100; a value worse than
        every observation (or an empty sample) gives 0.
    """
    ordered = ordered_view(sample)
    target = to_decimal(value)
    size = len(ordered)

    logger.debug(
        "percentile_of: value=%s sample_size=%d higher_is_better=%s",
        target,
        size,
        higher_is_better,
    )

    # Nothing to compare against: best possible result
    if size == 1:
        return 100
    if size == 0:
        return 0

    with localcontext() as ctx:
        ctx.prec = _precision(precision)
        step = _HUNDRED / (size - 1)
        if higher_is_better:
            return _percentile_higher_better(ordered, target, step)
        return _percentile_lower_better(ordered, target, step)


def _percentile_higher_better(ordered: list[Decimal], target: Decimal, step: Decimal) -> int:
    """Walk from the maximum down until the target is found or passed."""
    last = len(ordered) - 1

    for i in range(last, -1, -1):
        current = ordered[i]
        if current == target:
            return _round_half_away(step * i)

        if current < target:
            # Better than the best observation
            if i == last:
                return 100

            lower_p = step * i
            higher_p = step * (i + 1)
            fraction = (target - current) / (ordered[i + 1] - current)
            return _round_half_away(lower_p + (higher_p - lower_p) * fraction)

    return 0


def _percentile_lower_better(ordered: list[Decimal], target: Decimal, step: Decimal) -> int:
    """Walk from the minimum up until the target is found or passed."""
    last = len(ordered) - 1

    for i, current in enumerate(ordered):
        if current == target:
            return _round_half_away(step * (last - i))

        if current > target:
            # Better than the best observation
            if i == 0:
                return 100

            lower_p = step * (last - i)
            higher_p = step * (last - i + 1)
            fraction = (current - target) / (current - ordered[i - 1])
            return _round_half_away(lower_p + (higher_p - lower_p) * fraction)

    return 0


# =============================================================================
# Value at a percentile
# =============================================================================


def value_at_percentile(
    sample: Iterable[Any],
    percentile: Any,
    higher_is_better: bool = True,
    *,
    precision: Optional[int] = None,
) -> Decimal:
    """
    Get the value at ``percentile`` using the alternative (Excel) method.

    See https://en.wikipedia.org/wiki/Percentile. The sample does not need
    to be sorted beforehand.

    Rank n = percentile / 100 * (N - 1) + 1 (mirrored as 100 - percentile
    when lower is better) is split into integer part k and fraction d, and
    the result blends the k-th and (k+1)-th order statistics.

    Args:
        sample: Observations (not modified)
        percentile: Percentile in [0, 100]
        higher_is_better: If True, percentile 100 is the maximum
        precision: Decimal digits for the arithmetic (default from settings)

    Returns:
        The interpolated value

    Raises:
        EmptySampleError: If the sample has no values
        PercentileOutOfRangeError: If the rank falls outside [1, N]
    """
    ordered = ordered_view(sample)
    if not ordered:
        raise EmptySampleError()

    size = len(ordered)
    pct = to_decimal(percentile)

    logger.debug(
        "value_at_percentile: percentile=%s sample_size=%d higher_is_better=%s",
        pct,
        size,
        higher_is_better,
    )

    with localcontext() as ctx:
        ctx.prec = _precision(precision)

        directed = pct if higher_is_better else _HUNDRED - pct
        n = directed / _HUNDRED * (size - 1) + 1
        if n < 1 or n > size:
            raise PercentileOutOfRangeError(percentile, size)

        k = int(n.to_integral_value(rounding=ROUND_FLOOR))
        d = n - k

        # n is 1-based, ordered is 0-indexed
        if n == 1:
            return ordered[0]
        if n == size:
            return ordered[-1]

        return ordered[k - 1] + d * (ordered[k] - ordered[k - 1])


# =============================================================================
# Rank of a value
# =============================================================================


def rank_of(sample: Iterable[Any], value: Any, higher_is_better: bool = True) -> int:
    """
    Get the 1-based rank of ``value`` within ``sample`` (1 = best).

    Tied values all share the rank of the first occurrence; ranks are not
    averaged.

    Raises:
        ValueNotInSampleError: If ``value`` is not exactly in the sample
    """
    ordered = ordered_view(sample)
    target = to_decimal(value)

    if target not in ordered:
        raise ValueNotInSampleError(value)

    if higher_is_better:
        ordered.reverse()

    rank = ordered.index(target) + 1
    logger.debug(
        "rank_of: value=%s rank=%d sample_size=%d higher_is_better=%s",
        target,
        rank,
        len(ordered),
        higher_is_better,
    )
    return rank
