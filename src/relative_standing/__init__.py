"""
Relative Standing

Where does a value stand within a sample of observations? Given the
observations, a direction ("higher is better" or not) and a value, this
package answers three questions:

- percentile_of: the value's percentile (0-100), interpolated when the value
  itself was not observed
- value_at_percentile: the value found at any percentile (Excel-style
  interpolation between order statistics)
- rank_of: the value's 1-based rank (1 = best)

All arithmetic uses Decimal, and the caller's sample is never reordered.

Usage:
    from relative_standing import percentile_of, value_at_percentile, rank_of

    scores = [10, 20, 30, 40, 50]
    percentile_of(scores, 30)                 # 50
    value_at_percentile(scores, 75)           # Decimal('40')
    rank_of(scores, 20, higher_is_better=False)  # 2

    # Batch standings per comparison group
    from relative_standing import StandingsCalculator

    groups = StandingsCalculator().calculate_group_standings(
        [
            {"entity_id": 1, "value": 12, "comparison_group": "guards"},
            {"entity_id": 2, "value": 9, "comparison_group": "guards"},
        ]
    )
"""

from .core import (
    Settings,
    get_settings,
    StandingError,
    EmptySampleError,
    ValueNotInSampleError,
    PercentileOutOfRangeError,
    InvalidObservationError,
    Observation,
    Standing,
    GroupStandings,
    SampleSummary,
)
from .percentiles import (
    percentile_of,
    value_at_percentile,
    rank_of,
    ordered_view,
    is_higher_better,
    StandingsCalculator,
)
from .formatting import add_ordinal, format_two_decimal_places_if_they_exist, nearly_equal

__all__ = [
    # Calculations
    "percentile_of",
    "value_at_percentile",
    "rank_of",
    "ordered_view",
    "is_higher_better",
    "StandingsCalculator",
    # Formatting
    "add_ordinal",
    "format_two_decimal_places_if_they_exist",
    "nearly_equal",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "StandingError",
    "EmptySampleError",
    "ValueNotInSampleError",
    "PercentileOutOfRangeError",
    "InvalidObservationError",
    # Models
    "Observation",
    "Standing",
    "GroupStandings",
    "SampleSummary",
]
