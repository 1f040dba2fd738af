"""
Error taxonomy for standing calculations.

Every error carries a human-readable ``message`` and a machine ``code`` so
callers can present or branch on failures without parsing strings:

    try:
        rank_of(values, target)
    except ValueNotInSampleError as e:
        print(e.code, e.message)
"""

from typing import Any


class StandingError(Exception):
    """Base exception for standing calculation errors."""

    def __init__(self, message: str, code: str = "STANDING_ERROR"):
        super().__init__(message)
        self.message = message
        self.code = code


class EmptySampleError(StandingError, ValueError):
    """Raised when an operation needs at least one observation."""

    def __init__(self, message: str = "values cannot be an empty list"):
        super().__init__(message, code="EMPTY_SAMPLE")


class ValueNotInSampleError(StandingError, LookupError):
    """Raised when a rank is requested for a value that is not in the sample."""

    def __init__(self, value: Any):
        super().__init__(
            f"The value {value} was not found in the sample. Unable to calculate rank.",
            code="VALUE_NOT_IN_SAMPLE",
        )
        self.value = value


class PercentileOutOfRangeError(StandingError, ValueError):
    """Raised when a percentile would interpolate outside the ordered sample."""

    def __init__(self, percentile: Any, sample_size: int):
        super().__init__(
            f"Percentile {percentile} falls outside a sample of {sample_size} values",
            code="PERCENTILE_OUT_OF_RANGE",
        )
        self.percentile = percentile
        self.sample_size = sample_size


class InvalidObservationError(StandingError, ValueError):
    """Raised when an observation cannot be used as a finite decimal number."""

    def __init__(self, value: Any, reason: str = "not a finite number"):
        super().__init__(f"Invalid observation {value!r}: {reason}", code="INVALID_OBSERVATION")
        self.value = value
