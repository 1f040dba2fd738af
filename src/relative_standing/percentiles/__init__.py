"""
Percentile, value-at-percentile and rank calculations.
"""

from .calculator import percentile_of, rank_of, value_at_percentile
from .config import is_higher_better, is_lower_better_metric, resolve_direction
from .groups import StandingsCalculator
from .ordering import coerce_sample, ordered_view, to_decimal

__all__ = [
    "percentile_of",
    "value_at_percentile",
    "rank_of",
    "ordered_view",
    "coerce_sample",
    "to_decimal",
    "is_higher_better",
    "is_lower_better_metric",
    "resolve_direction",
    "StandingsCalculator",
]
