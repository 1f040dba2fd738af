"""
Pydantic models for standing results.

These models are used for:
- Validating observations before they are grouped
- Type-safe results from batch standing calculations
- Serialization by callers (``model_dump`` / ``model_dump_json``)
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

from pydantic import BaseModel, Field, computed_field

DEFAULT_COMPARISON_GROUP = "all"


# =============================================================================
# Input Models
# =============================================================================


class Observation(BaseModel):
    """A single entity's value for one metric."""

    entity_id: Union[int, str]
    value: Optional[Decimal] = None
    comparison_group: str = DEFAULT_COMPARISON_GROUP


# =============================================================================
# Standing Models
# =============================================================================


class Standing(BaseModel):
    """Percentile and rank of one entity within its comparison group."""

    entity_id: Union[int, str]
    value: Decimal
    percentile: int = Field(ge=0, le=100)
    rank: int = Field(ge=1)
    sample_size: int
    comparison_group: str = DEFAULT_COMPARISON_GROUP


class GroupStandings(BaseModel):
    """All standings for one comparison group."""

    comparison_group: str
    higher_is_better: bool
    sample_size: int
    small_sample_warning: bool = False
    standings: list[Standing]

    @computed_field
    @property
    def percentile_map(self) -> dict[str, int]:
        """Get percentiles as a simple entity -> percentile map."""
        return {str(s.entity_id): s.percentile for s in self.standings}


class SampleSummary(BaseModel):
    """Values at the quartile percentiles of a sample, best first."""

    sample_size: int
    higher_is_better: bool
    best: Decimal
    p75: Decimal
    median: Decimal
    p25: Decimal
    worst: Decimal
