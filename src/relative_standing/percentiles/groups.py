"""
Batch standings across comparison groups.

Given one metric's observations for many entities, every entity is ranked
only against the other members of its comparison group (a position, a
league, a cohort...). Observations without a value are left out, and zero
values can be left out as well for metrics where zero means "no data".

Output:
- One GroupStandings per comparison group, in first-seen order
- Each Standing carries percentile, rank and the group's sample size
- Groups below the configured size get small_sample_warning=True
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..core.config import Settings, get_settings
from ..core.models import GroupStandings, Observation, SampleSummary, Standing
from .calculator import percentile_of, rank_of, value_at_percentile
from .ordering import coerce_sample

logger = logging.getLogger(__name__)


class StandingsCalculator:
    """
    Computes standings for whole comparison groups.

    All per-value work is delegated to the pure functions in
    ``percentiles.calculator``; this class only filters, groups and
    packages results.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the calculator.

        Args:
            settings: Settings to use (default: cached settings)
        """
        self.settings = settings or get_settings()

    # =========================================================================
    # Group Standings
    # =========================================================================

    def calculate_group_standings(
        self,
        observations: Iterable[Observation | dict[str, Any]],
        higher_is_better: bool = True,
        skip_zero: bool = False,
    ) -> list[GroupStandings]:
        """
        Calculate percentile and rank for every observation within its group.

        Args:
            observations: Observations (or dicts with the same fields)
            higher_is_better: If False, lower values rank better
            skip_zero: If True, zero values are excluded like missing ones

        Returns:
            One GroupStandings per comparison group that has any values
        """
        groups: dict[str, list[tuple[Any, Decimal]]] = {}
        skipped = 0

        for raw in observations:
            observation = raw if isinstance(raw, Observation) else Observation.model_validate(raw)

            # Filter out None and (optionally) zero values
            if observation.value is None or (skip_zero and observation.value == 0):
                skipped += 1
                continue

            if observation.comparison_group not in groups:
                groups[observation.comparison_group] = []
            groups[observation.comparison_group].append(
                (observation.entity_id, observation.value)
            )

        results = []
        for group_name, members in groups.items():
            all_values = [v for _, v in members]
            sample_size = len(all_values)

            standings = [
                Standing(
                    entity_id=entity_id,
                    value=value,
                    percentile=percentile_of(
                        all_values,
                        value,
                        higher_is_better,
                        precision=self.settings.decimal_precision,
                    ),
                    rank=rank_of(all_values, value, higher_is_better),
                    sample_size=sample_size,
                    comparison_group=group_name,
                )
                for entity_id, value in members
            ]

            results.append(
                GroupStandings(
                    comparison_group=group_name,
                    higher_is_better=higher_is_better,
                    sample_size=sample_size,
                    small_sample_warning=sample_size < self.settings.small_sample_warning_threshold,
                    standings=standings,
                )
            )

        logger.info(
            "Calculated standings for %d groups (%d observations, %d skipped)",
            len(results),
            sum(g.sample_size for g in results),
            skipped,
        )
        return results

    # =========================================================================
    # Sample Summary
    # =========================================================================

    def summarize_sample(
        self,
        sample: Iterable[Any],
        higher_is_better: bool = True,
    ) -> SampleSummary:
        """
        Get the best, quartile and worst values of a sample.

        Raises:
            EmptySampleError: If the sample has no values
        """
        values = coerce_sample(sample)
        precision = self.settings.decimal_precision

        def at(percentile: int) -> Decimal:
            return value_at_percentile(values, percentile, higher_is_better, precision=precision)

        return SampleSummary(
            sample_size=len(values),
            higher_is_better=higher_is_better,
            best=at(100),
            p75=at(75),
            median=at(50),
            p25=at(25),
            worst=at(0),
        )
