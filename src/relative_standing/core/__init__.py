"""
Core module for Relative Standing.

This module provides the foundational components:
- Configuration management (config.py)
- Error taxonomy (errors.py)
- Result models (models.py)

Usage:
    from relative_standing.core import Settings, get_settings
    from relative_standing.core import EmptySampleError, ValueNotInSampleError
    from relative_standing.core import Observation, Standing, GroupStandings
"""

# Configuration
from .config import Settings, get_settings

# Errors
from .errors import (
    StandingError,
    EmptySampleError,
    ValueNotInSampleError,
    PercentileOutOfRangeError,
    InvalidObservationError,
)

# Models
from .models import (
    DEFAULT_COMPARISON_GROUP,
    Observation,
    Standing,
    GroupStandings,
    SampleSummary,
)

__all__ = [
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
    "DEFAULT_COMPARISON_GROUP",
    "Observation",
    "Standing",
    "GroupStandings",
    "SampleSummary",
]
