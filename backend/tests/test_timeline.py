"""Tests for phase scheduling, cost allocation, and cash flow."""

from __future__ import annotations

from decimal import Decimal

import pytest

from griha.models.enums import (
    Complexity,
    FeatureFlag,
    LaborAvailability,
    Phase,
    QualityTier,
    Season,
    WeatherCondition,
)
from griha.models.estimate import Timeline
from griha.timeline import (
    allocate_phase_costs,
    derive_complexity,
    derive_weather,
    estimate_timeline,
    month_of_day,
    phase_duration,
    project_cash_flow,
    season_for_month,
)


@pytest.fixture()
def baseline() -> Timeline:
    """1800 sq.ft, simple build, favorable weather, normal labor."""
    return estimate_timeline(
        1800.0, Complexity.SIMPLE, WeatherCondition.FAVORABLE, LaborAvailability.NORMAL
    )


def _spans(timeline: Timeline) -> dict[Phase, tuple[int, int]]:
    return {p.phase: (p.start_day, p.end_day) for p in timeline.phases}


# ---------------------------------------------------------------------------
# Durations and layout
# ---------------------------------------------------------------------------


class TestPhaseDuration:
    def test_planning_is_fixed(self) -> None:
        for complexity in Complexity:
            days = phase_duration(
                Phase.PLANNING, 5000.0, complexity,
                WeatherCondition.EXTREME, LaborAvailability.SCARCE,
            )
            assert days == 30

    def test_area_phase_rounds_up(self) -> None:
        days = phase_duration(
            Phase.STRUCTURE, 1800.0, Complexity.SIMPLE,
            WeatherCondition.FAVORABLE, LaborAvailability.NORMAL,
        )
        assert days == 52

    def test_at_least_one_day(self) -> None:
        days = phase_duration(
            Phase.FINISHING, 10.0, Complexity.SIMPLE,
            WeatherCondition.FAVORABLE, LaborAvailability.ABUNDANT,
        )
        assert days == 1

    def test_factors_lengthen_phases(self) -> None:
        easy = phase_duration(
            Phase.FOUNDATION, 1800.0, Complexity.SIMPLE,
            WeatherCondition.FAVORABLE, LaborAvailability.NORMAL,
        )
        hard = phase_duration(
            Phase.FOUNDATION, 1800.0, Complexity.MEDIUM,
            WeatherCondition.MONSOON, LaborAvailability.SCARCE,
        )
        assert easy == 45
        assert hard == 92


class TestEstimateTimeline:
    def test_phase_boundaries(self, baseline: Timeline) -> None:
        assert _spans(baseline) == {
            Phase.PLANNING: (1, 30),
            Phase.FOUNDATION: (31, 75),
            Phase.STRUCTURE: (76, 127),
            Phase.MASONRY: (128, 157),
            Phase.ROOFING: (158, 180),
            Phase.MEP: (158, 202),
            Phase.PLASTERING: (181, 198),
            Phase.FLOORING: (199, 222),
            Phase.FINISHING: (223, 237),
        }
        assert baseline.total_duration_days == 237

    def test_critical_path_is_contiguous(self, baseline: Timeline) -> None:
        critical = baseline.critical_path
        assert critical[0].start_day == 1
        for prev, nxt in zip(critical, critical[1:]):
            assert nxt.start_day == prev.end_day + 1

    def test_mep_runs_in_parallel(self, baseline: Timeline) -> None:
        mep = next(p for p in baseline.phases if p.phase == Phase.MEP)
        assert not mep.on_critical_path
        assert Phase.MEP not in [p.phase for p in baseline.critical_path]

    def test_canonical_order(self, baseline: Timeline) -> None:
        assert [p.phase for p in baseline.phases] == list(Phase)

    def test_duration_matches_span(self, baseline: Timeline) -> None:
        for p in baseline.phases:
            assert p.end_day - p.start_day + 1 == p.duration_days

    def test_small_house_mep_sets_total(self) -> None:
        timeline = estimate_timeline(
            70.0, Complexity.SIMPLE, WeatherCondition.FAVORABLE, LaborAvailability.NORMAL
        )
        mep = next(p for p in timeline.phases if p.phase == Phase.MEP)
        assert mep.end_day == 81
        assert timeline.total_duration_days == 81

    def test_total_months(self, baseline: Timeline) -> None:
        assert baseline.total_months == 7.9


# ---------------------------------------------------------------------------
# Derivations
# ---------------------------------------------------------------------------


class TestDerivations:
    def test_simple(self) -> None:
        assert derive_complexity(1, QualityTier.STANDARD) == Complexity.SIMPLE

    def test_medium(self) -> None:
        assert derive_complexity(2, QualityTier.STANDARD) == Complexity.MEDIUM
        assert derive_complexity(1, QualityTier.PREMIUM) == Complexity.MEDIUM
        assert (
            derive_complexity(1, QualityTier.BASIC, frozenset({FeatureFlag.BOREWELL}))
            == Complexity.MEDIUM
        )

    def test_complex(self) -> None:
        assert derive_complexity(3, QualityTier.BASIC) == Complexity.COMPLEX
        assert derive_complexity(1, QualityTier.LUXURY) == Complexity.COMPLEX
        features = frozenset(
            {
                FeatureFlag.BOREWELL,
                FeatureFlag.FALSE_CEILING,
                FeatureFlag.RAINWATER_HARVESTING,
            }
        )
        assert derive_complexity(2, QualityTier.STANDARD, features) == Complexity.COMPLEX

    def test_weather_from_start_month(self) -> None:
        assert derive_weather(7) == WeatherCondition.MONSOON
        assert derive_weather(1) == WeatherCondition.FAVORABLE
        assert derive_weather(None) == WeatherCondition.FAVORABLE

    def test_weather_override_wins(self) -> None:
        assert derive_weather(7, WeatherCondition.EXTREME) == WeatherCondition.EXTREME

    @pytest.mark.parametrize(
        ("month", "season"),
        [
            (1, Season.WINTER),
            (4, Season.SUMMER),
            (6, Season.MONSOON),
            (9, Season.MONSOON),
            (10, Season.POST_MONSOON),
            (12, Season.WINTER),
        ],
    )
    def test_season_for_month(self, month: int, season: Season) -> None:
        assert season_for_month(month) == season


# ---------------------------------------------------------------------------
# Cost allocation and cash flow
# ---------------------------------------------------------------------------


class TestAllocatePhaseCosts:
    def test_allocations_sum_to_total(self, baseline: Timeline) -> None:
        timeline = allocate_phase_costs(baseline, Decimal("1000000.00"))
        by_phase = {p.phase: p.cost_allocated for p in timeline.phases}
        assert by_phase[Phase.PLANNING] == Decimal("30000.00")
        assert by_phase[Phase.STRUCTURE] == Decimal("250000.00")
        assert sum(by_phase.values()) == Decimal("1000000.00")

    def test_remainder_goes_to_structure(self, baseline: Timeline) -> None:
        timeline = allocate_phase_costs(baseline, Decimal("1000.01"))
        by_phase = {p.phase: p.cost_allocated for p in timeline.phases}
        assert by_phase[Phase.STRUCTURE] == Decimal("250.01")
        assert sum(by_phase.values()) == Decimal("1000.01")

    def test_original_timeline_unchanged(self, baseline: Timeline) -> None:
        allocate_phase_costs(baseline, Decimal("1000.00"))
        assert all(p.cost_allocated == 0 for p in baseline.phases)


class TestCashFlow:
    def test_month_of_day(self) -> None:
        assert month_of_day(1) == 1
        assert month_of_day(30) == 1
        assert month_of_day(31) == 2

    def test_cash_flow_covers_project(self, baseline: Timeline) -> None:
        timeline = allocate_phase_costs(baseline, Decimal("1000000.00"))
        rows = project_cash_flow(timeline)
        assert [r.month for r in rows] == list(range(1, 9))
        assert rows[-1].cumulative == Decimal("1000000.00")
        assert sum(r.amount for r in rows) == Decimal("1000000.00")

    def test_planning_month(self, baseline: Timeline) -> None:
        timeline = allocate_phase_costs(baseline, Decimal("1000000.00"))
        rows = project_cash_flow(timeline)
        assert rows[0].amount == Decimal("30000.00")

    def test_cumulative_is_non_decreasing(self, baseline: Timeline) -> None:
        timeline = allocate_phase_costs(baseline, Decimal("777777.77"))
        rows = project_cash_flow(timeline)
        cumulative = [r.cumulative for r in rows]
        assert cumulative == sorted(cumulative)
        assert cumulative[-1] == Decimal("777777.77")
