"""Timeline estimator: phase durations, cost allocation, and cash flow.

Area-driven phases take ``built-up area / daily throughput`` days, scaled by
complexity, weather, and labor-availability factors and rounded up to whole
days. Planning is a fixed duration. MEP work has a fixed base duration and
runs alongside the critical path: it starts with roofing and does not push
later phases back.
"""

from __future__ import annotations

import logging
from decimal import ROUND_DOWN, Decimal
from typing import TYPE_CHECKING

from griha.costing import CENT, ZERO, round_money
from griha.data.standards import (
    COMPLEXITY_FACTOR,
    DAYS_PER_MONTH,
    LABOR_AVAILABILITY_FACTOR,
    PARALLEL_PHASES,
    PHASE_COST_SHARES,
    PHASE_DURATIONS,
    SEASON_BY_MONTH,
    UNSCALED_PHASES,
    WEATHER_FACTOR,
)
from griha.formulas import evaluate
from griha.models.enums import (
    Complexity,
    LaborAvailability,
    Phase,
    QualityTier,
    Season,
    WeatherCondition,
)
from griha.models.estimate import CashFlowMonth, Timeline, TimelinePhase
from griha.quantities import ceil_units

if TYPE_CHECKING:
    from griha.models.enums import FeatureFlag

logger = logging.getLogger(__name__)


def season_for_month(month: int) -> Season:
    return SEASON_BY_MONTH[month]


def derive_complexity(
    floors: int,
    quality_tier: QualityTier,
    features: frozenset[FeatureFlag] = frozenset(),
) -> Complexity:
    """Classify build complexity from size, finish level, and add-ons."""
    if floors >= 3 or quality_tier == QualityTier.LUXURY or len(features) >= 3:
        return Complexity.COMPLEX
    if (
        floors == 1
        and quality_tier in (QualityTier.BASIC, QualityTier.STANDARD)
        and not features
    ):
        return Complexity.SIMPLE
    return Complexity.MEDIUM


def derive_weather(
    start_month: int | None,
    override: WeatherCondition | None = None,
) -> WeatherCondition:
    if override is not None:
        return override
    if start_month is not None and season_for_month(start_month) == Season.MONSOON:
        return WeatherCondition.MONSOON
    return WeatherCondition.FAVORABLE


def phase_duration(
    phase: Phase,
    built_up_area: float,
    complexity: Complexity,
    weather: WeatherCondition,
    labor_availability: LaborAvailability,
) -> int:
    """Adjusted duration of one phase in whole days (at least 1)."""
    days = evaluate(PHASE_DURATIONS[phase], built_up_area)
    if phase not in UNSCALED_PHASES:
        days *= (
            evaluate(COMPLEXITY_FACTOR, complexity.value)
            * evaluate(WEATHER_FACTOR, weather.value)
            * evaluate(LABOR_AVAILABILITY_FACTOR, labor_availability.value)
        )
    return max(1, ceil_units(days))


def estimate_timeline(
    built_up_area: float,
    complexity: Complexity,
    weather: WeatherCondition,
    labor_availability: LaborAvailability,
) -> Timeline:
    """Lay phases out contiguously in canonical order.

    Critical-path phases satisfy ``start[i + 1] == end[i] + 1`` starting at
    day 1. Parallel phases start with their anchor phase and are excluded
    from that chain; the project duration is the latest end day overall.
    """
    durations = {
        phase: phase_duration(phase, built_up_area, complexity, weather, labor_availability)
        for phase in Phase
    }

    spans: dict[Phase, tuple[int, int]] = {}
    day = 1
    for phase in Phase:
        if phase in PARALLEL_PHASES:
            continue
        end = day + durations[phase] - 1
        spans[phase] = (day, end)
        day = end + 1

    for phase, anchor in PARALLEL_PHASES.items():
        start = spans[anchor][0]
        spans[phase] = (start, start + durations[phase] - 1)

    phases = [
        TimelinePhase(
            phase=phase,
            duration_days=durations[phase],
            start_day=spans[phase][0],
            end_day=spans[phase][1],
            on_critical_path=phase not in PARALLEL_PHASES,
        )
        for phase in Phase
    ]
    total = max(p.end_day for p in phases)
    logger.debug(
        "Timeline: %d days (%s, %s, %s labor)",
        total, complexity, weather, labor_availability,
    )
    return Timeline(
        phases=phases,
        total_duration_days=total,
        complexity=complexity,
        weather=weather,
        labor_availability=labor_availability,
    )


def allocate_phase_costs(timeline: Timeline, grand_total: Decimal) -> Timeline:
    """Return a copy of ``timeline`` with phase cost allocations.

    Each phase gets its fixed share of the grand total; the rounding
    remainder goes to the phase with the largest share so allocations sum
    to the grand total exactly.
    """
    allocations = {
        phase: round_money(grand_total * PHASE_COST_SHARES[phase] / Decimal(100))
        for phase in Phase
    }
    largest = max(PHASE_COST_SHARES, key=lambda p: PHASE_COST_SHARES[p])
    allocations[largest] += grand_total - sum(allocations.values(), ZERO)

    phases = [
        p.model_copy(update={"cost_allocated": allocations[p.phase]})
        for p in timeline.phases
    ]
    return timeline.model_copy(update={"phases": phases})


def month_of_day(day: int) -> int:
    return (day - 1) // DAYS_PER_MONTH + 1


def project_cash_flow(timeline: Timeline) -> list[CashFlowMonth]:
    """Spread each phase's cost evenly over the months it spans."""
    last_month = month_of_day(timeline.total_duration_days)
    by_month: dict[int, Decimal] = {m: ZERO for m in range(1, last_month + 1)}

    for phase in timeline.phases:
        first = month_of_day(phase.start_day)
        last = month_of_day(phase.end_day)
        count = last - first + 1
        share = (phase.cost_allocated / count).quantize(CENT, rounding=ROUND_DOWN)
        for month in range(first, last):
            by_month[month] += share
        by_month[last] += phase.cost_allocated - share * (count - 1)

    rows: list[CashFlowMonth] = []
    cumulative = ZERO
    for month in sorted(by_month):
        cumulative += by_month[month]
        rows.append(CashFlowMonth(month=month, amount=by_month[month], cumulative=cumulative))
    return rows
