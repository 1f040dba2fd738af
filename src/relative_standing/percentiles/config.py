"""
Direction configuration for percentile calculations.

Most metrics rank higher values as better. Metrics listed in the
LOWER_IS_BETTER_METRICS setting (turnovers, lap times, error counts...)
are inverted.
"""

from __future__ import annotations

from typing import Optional

from ..core.config import Settings, get_settings


def is_lower_better_metric(metric: str, settings: Optional[Settings] = None) -> bool:
    """Check if lower values are better for a metric."""
    settings = settings or get_settings()
    return metric.strip().lower() in settings.lower_is_better_metrics


def is_higher_better(metric: Optional[str] = None, settings: Optional[Settings] = None) -> bool:
    """
    Resolve the ranking direction for a metric.

    Args:
        metric: Metric name; None or empty uses the configured default
        settings: Settings to read from (default: cached settings)

    Returns:
        True if higher values rank better
    """
    settings = settings or get_settings()
    if not metric or not metric.strip():
        return settings.default_higher_is_better
    return not is_lower_better_metric(metric, settings)


def resolve_direction(
    higher_is_better: Optional[bool] = None,
    metric: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> bool:
    """An explicit flag wins over the metric registry, which wins over the default."""
    if higher_is_better is not None:
        return higher_is_better
    return is_higher_better(metric, settings)
