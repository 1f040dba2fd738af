"""
Tests for StandingsCalculator (group standings and sample summaries).
"""

from decimal import Decimal

import pytest

from relative_standing import (
    EmptySampleError,
    GroupStandings,
    Observation,
    Settings,
    StandingsCalculator,
)


@pytest.fixture
def observations():
    return [
        {"entity_id": "a", "value": 10, "comparison_group": "guards"},
        {"entity_id": "d", "value": 5, "comparison_group": "forwards"},
        {"entity_id": "b", "value": 20, "comparison_group": "guards"},
        {"entity_id": "e", "value": None, "comparison_group": "forwards"},
        {"entity_id": "c", "value": 30, "comparison_group": "guards"},
        {"entity_id": "f", "value": 0, "comparison_group": "forwards"},
    ]


def _by_group(results: list[GroupStandings]) -> dict[str, GroupStandings]:
    return {g.comparison_group: g for g in results}


class TestGroupStandings:
    def test_groups_in_first_seen_order(self, observations):
        results = StandingsCalculator().calculate_group_standings(observations)
        assert [g.comparison_group for g in results] == ["guards", "forwards"]

    def test_percentiles_and_ranks_within_group(self, observations):
        guards = _by_group(StandingsCalculator().calculate_group_standings(observations))["guards"]

        assert guards.sample_size == 3
        assert guards.percentile_map == {"a": 0, "b": 50, "c": 100}
        assert {s.entity_id: s.rank for s in guards.standings} == {"a": 3, "b": 2, "c": 1}
        assert all(s.sample_size == 3 for s in guards.standings)

    def test_lower_is_better(self, observations):
        results = StandingsCalculator().calculate_group_standings(
            observations, higher_is_better=False
        )
        guards = _by_group(results)["guards"]
        assert guards.higher_is_better is False
        assert guards.percentile_map == {"a": 100, "b": 50, "c": 0}

    def test_missing_values_are_skipped(self, observations):
        forwards = _by_group(StandingsCalculator().calculate_group_standings(observations))[
            "forwards"
        ]
        assert [s.entity_id for s in forwards.standings] == ["d", "f"]
        assert forwards.percentile_map == {"d": 100, "f": 0}

    def test_skip_zero(self, observations):
        results = StandingsCalculator().calculate_group_standings(observations, skip_zero=True)
        forwards = _by_group(results)["forwards"]
        assert forwards.sample_size == 1
        assert forwards.standings[0].percentile == 100
        assert forwards.standings[0].rank == 1

    def test_small_sample_warning_uses_threshold(self, observations):
        default = StandingsCalculator().calculate_group_standings(observations)
        assert all(g.small_sample_warning for g in default)

        calculator = StandingsCalculator(Settings(small_sample_warning_threshold=3))
        results = _by_group(calculator.calculate_group_standings(observations, skip_zero=True))
        assert results["guards"].small_sample_warning is False
        assert results["forwards"].small_sample_warning is True

    def test_accepts_observation_models(self):
        results = StandingsCalculator().calculate_group_standings(
            [Observation(entity_id=1, value=Decimal("1.5")), Observation(entity_id=2, value=3)]
        )
        assert len(results) == 1
        assert results[0].comparison_group == "all"
        assert results[0].percentile_map == {"1": 0, "2": 100}

    def test_no_values(self):
        assert StandingsCalculator().calculate_group_standings([]) == []


class TestSampleSummary:
    def test_higher_is_better(self, five_values):
        summary = StandingsCalculator().summarize_sample(five_values, True)
        assert summary.sample_size == 5
        assert (summary.best, summary.p75, summary.median, summary.p25, summary.worst) == (
            50,
            40,
            30,
            20,
            10,
        )

    def test_lower_is_better(self, five_values):
        summary = StandingsCalculator().summarize_sample(five_values, False)
        assert (summary.best, summary.p75, summary.median, summary.p25, summary.worst) == (
            10,
            20,
            30,
            40,
            50,
        )

    def test_interpolated_quartiles(self, four_values):
        summary = StandingsCalculator().summarize_sample(four_values, True)
        # n = 0.75 * 3 + 1 = 3.25
        assert summary.p75 == Decimal("32.5")
        assert summary.median == Decimal("25")

    def test_empty_sample(self):
        with pytest.raises(EmptySampleError):
            StandingsCalculator().summarize_sample([], True)
