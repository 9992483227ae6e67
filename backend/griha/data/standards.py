"""Construction standards used by the estimation stages.

These are engineering rules of thumb for residential RCC-frame construction,
expressed as typed formulas where they are tunable tables and as plain
constants where they are fixed conversion or geometry factors.
"""

from __future__ import annotations

from griha.formulas import (
    FixedFormula,
    LookupFormula,
    RatioFormula,
    Step,
    SteppedFormula,
)
from griha.models.enums import Phase, Season

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

SQFT_PER_SQM = 10.7639
SQFT_PER_SQYD = 9.0
CFT_PER_CUM = 35.3147

MIN_PLOT_AREA_SQFT = 100.0
MAX_PLOT_AREA_SQFT = 50_000.0
MIN_FLOORS = 1
MAX_FLOORS = 4

# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

# Plot area (sqft) -> ground coverage. 1000 and 2000 both fall in the
# middle bracket.
UTILIZATION_FACTOR = SteppedFormula(
    steps=(
        Step(upper=1000.0, inclusive=False, value=0.70),
        Step(upper=2000.0, inclusive=True, value=0.75),
        Step(upper=None, value=0.80),
    )
)

CARPET_AREA_RATIO = 0.80

# Soil category -> foundation depth (ft)
FOUNDATION_DEPTH = LookupFormula(table={"good": 1.5, "medium": 2.0, "poor": 2.5})

FOUNDATION_VOLUME_FACTOR = 0.3
COLUMN_VOLUME_FACTOR = 0.04
BEAM_VOLUME_FACTOR = 0.03
SLAB_VOLUME_FACTOR = 0.15

# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------

# Cement bags per m3 of concrete, by grade
CEMENT_BAGS_PER_CUM = LookupFormula(table={"M15": 7.5, "M20": 8.0, "M25": 8.5})
CEMENT_BAGS_PER_CUM_MORTAR = 5.5

# Reinforcement kg per m3 of concrete, by structural element
STEEL_KG_PER_CUM: dict[str, float] = {
    "foundation": 80.0,
    "columns": 160.0,
    "beams": 130.0,
    "slabs": 90.0,
}

SEISMIC_STEEL_MULTIPLIER = LookupFormula(
    table={"I": 1.0, "II": 1.1, "III": 1.2, "IV": 1.3, "V": 1.4}
)

WALL_HEIGHT_FT = 10.0
OPENING_FRACTION = 0.20
EXTERNAL_WALL_SHARE = 0.60
EXTERNAL_WALL_THICKNESS_M = 0.23
INTERNAL_WALL_THICKNESS_M = 0.115
EXTERNAL_BRICKS_PER_SQM = 115.0
INTERNAL_BRICKS_PER_SQM = 58.0

MORTAR_PER_CUM_MASONRY = 0.25
SAND_PER_CUM_MASONRY = 0.30
AGGREGATE_PER_CUM_CONCRETE = 0.90

PAINT_COVERAGE_SQFT_PER_LITRE = 50.0
PLUMBING_POINTS_PER_BATHROOM = 6
PLUMBING_POINTS_PER_KITCHEN = 3

# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------

# Phase -> base duration in days from built-up area (sqft)
PHASE_DURATIONS: dict[Phase, FixedFormula | RatioFormula] = {
    Phase.PLANNING: FixedFormula(value=30),
    Phase.FOUNDATION: RatioFormula(divisor=40),
    Phase.STRUCTURE: RatioFormula(divisor=35),
    Phase.MASONRY: RatioFormula(divisor=60),
    Phase.ROOFING: RatioFormula(divisor=80),
    Phase.MEP: FixedFormula(value=45),
    Phase.PLASTERING: RatioFormula(divisor=100),
    Phase.FLOORING: RatioFormula(divisor=75),
    Phase.FINISHING: RatioFormula(divisor=120),
}

# Phases whose duration is not scaled by complexity/weather/labor factors
UNSCALED_PHASES = frozenset({Phase.PLANNING})

# MEP runs alongside the critical path, starting with roofing
PARALLEL_PHASES: dict[Phase, Phase] = {Phase.MEP: Phase.ROOFING}

COMPLEXITY_FACTOR = LookupFormula(table={"simple": 1.0, "medium": 1.2, "complex": 1.4})
WEATHER_FACTOR = LookupFormula(table={"favorable": 1.0, "monsoon": 1.3, "extreme": 1.5})
LABOR_AVAILABILITY_FACTOR = LookupFormula(
    table={"abundant": 0.9, "normal": 1.0, "scarce": 1.3}
)

# Share of the grand total allocated to each phase (percent, sums to 100)
PHASE_COST_SHARES: dict[Phase, int] = {
    Phase.PLANNING: 3,
    Phase.FOUNDATION: 12,
    Phase.STRUCTURE: 25,
    Phase.MASONRY: 12,
    Phase.ROOFING: 8,
    Phase.MEP: 15,
    Phase.PLASTERING: 7,
    Phase.FLOORING: 10,
    Phase.FINISHING: 8,
}

DAYS_PER_MONTH = 30

# Calendar month (1-12) -> season
SEASON_BY_MONTH: dict[int, Season] = {
    12: Season.WINTER,
    1: Season.WINTER,
    2: Season.WINTER,
    3: Season.SUMMER,
    4: Season.SUMMER,
    5: Season.SUMMER,
    6: Season.MONSOON,
    7: Season.MONSOON,
    8: Season.MONSOON,
    9: Season.MONSOON,
    10: Season.POST_MONSOON,
    11: Season.POST_MONSOON,
}

# ---------------------------------------------------------------------------
# Confidence
# ---------------------------------------------------------------------------

CONFIDENCE_WEIGHTS: dict[str, float] = {
    "input_completeness": 0.4,
    "regional_data_quality": 0.3,
    "market_stability": 0.3,
}

MIN_CONFIDENCE = 40
MAX_CONFIDENCE = 95
HIGH_RELIABILITY_THRESHOLD = 80
MEDIUM_RELIABILITY_THRESHOLD = 65

FRESH_DATA_DAYS = 30
FRESH_DATA_QUALITY = 1.0
AGING_DATA_QUALITY = 0.8
STALE_DATA_QUALITY = 0.5
