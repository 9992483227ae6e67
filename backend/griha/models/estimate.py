"""Derived and output models for the Griha estimation engine."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from griha.models.enums import (
    Complexity,
    Confidence,
    LaborAvailability,
    MaterialCategory,
    Phase,
    QualityTier,
    Reliability,
    WeatherCondition,
)


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Stage records
# ---------------------------------------------------------------------------


class StructuralVolumes(_Frozen):
    """Concrete volumes (cubic feet) per structural element category."""

    foundation: float = Field(ge=0)
    columns: float = Field(ge=0)
    beams: float = Field(ge=0)
    slabs: float = Field(ge=0)

    @property
    def total(self) -> float:
        return self.foundation + self.columns + self.beams + self.slabs

    def by_element(self) -> dict[str, float]:
        return {
            "foundation": self.foundation,
            "columns": self.columns,
            "beams": self.beams,
            "slabs": self.slabs,
        }


class GeometryResult(_Frozen):
    plot_area_sqft: float
    floors: int
    utilization_factor: float
    built_up_area: float
    carpet_area: float
    volumes: StructuralVolumes


class WallConfig(_Frozen):
    """Wall layout assumptions feeding the brick estimate."""

    built_up_area: float = Field(gt=0)
    floors: int = Field(ge=1)
    wall_height_ft: float = Field(gt=0)
    opening_fraction: float = Field(ge=0, lt=1)
    external_share: float = Field(ge=0, le=1)


class MaterialQuantities(_Frozen):
    """Structural and masonry quantities."""

    concrete_m3: float
    masonry_m3: float
    mortar_m3: float
    cement_bags: int
    steel_kg: int
    steel_kg_by_element: dict[str, float]
    external_wall_area_sqft: float
    internal_wall_area_sqft: float
    external_bricks: int
    internal_bricks: int
    sand_m3: float
    aggregate_m3: float

    @property
    def bricks(self) -> int:
        return self.external_bricks + self.internal_bricks

    @property
    def net_wall_area_sqft(self) -> float:
        return self.external_wall_area_sqft + self.internal_wall_area_sqft


class FinishingQuantities(_Frozen):
    flooring_sqft: float
    paint_area_sqft: float
    paint_litres: int
    electrical_sqft: float
    plumbing_points: int


class BillItem(_Frozen):
    """One billable material quantity keyed by snapshot material id."""

    material_id: str
    quantity: float = Field(ge=0)


# ---------------------------------------------------------------------------
# Costs
# ---------------------------------------------------------------------------


class PriceAdjustment(_Frozen):
    """Unit price after each adjustment, applied in order.

    base -> location -> quality -> season -> demand. Each ``*_adjustment``
    field is the marginal change contributed by that step.
    """

    base: Decimal
    after_location: Decimal
    after_quality: Decimal
    after_season: Decimal
    final: Decimal

    @computed_field  # type: ignore[prop-decorator]
    @property
    def location_adjustment(self) -> Decimal:
        return self.after_location - self.base

    @computed_field  # type: ignore[prop-decorator]
    @property
    def quality_premium(self) -> Decimal:
        return self.after_quality - self.after_location

    @computed_field  # type: ignore[prop-decorator]
    @property
    def seasonal_variation(self) -> Decimal:
        return self.after_season - self.after_quality

    @computed_field  # type: ignore[prop-decorator]
    @property
    def demand_adjustment(self) -> Decimal:
        return self.final - self.after_season


class CostLine(_Frozen):
    """A priced line: a material or a labor skill tier."""

    item_id: str
    category: str
    subcategory: str
    quantity: float
    unit: str
    unit_price: PriceAdjustment
    amount: Decimal


class CostBreakdown(_Frozen):
    """Nested category -> subcategory -> amount mapping plus the grand total.

    Categories are ``materials``, ``labor``, ``equipment``, ``overhead`` and,
    when requested, ``contingency``.
    """

    categories: dict[str, dict[str, Decimal]]
    lines: list[CostLine]
    equipment_pct: float
    overhead_pct: float
    contingency_pct: float | None = None
    grand_total: Decimal

    def category_total(self, category: str) -> Decimal:
        return sum(self.categories.get(category, {}).values(), Decimal("0"))

    def leaf_total(self) -> Decimal:
        return sum(
            (amount for sub in self.categories.values() for amount in sub.values()),
            Decimal("0"),
        )


class MaterialLine(_Frozen):
    """A material row in the estimate's bill of materials."""

    material_id: str
    name: str
    category: MaterialCategory
    quantity: float
    billable_quantity: float
    unit: str
    quality: QualityTier
    specification: str
    unit_price: Decimal
    amount: Decimal


# ---------------------------------------------------------------------------
# Timeline and cash flow
# ---------------------------------------------------------------------------


class TimelinePhase(_Frozen):
    phase: Phase
    duration_days: int = Field(ge=1)
    start_day: int = Field(ge=1)
    end_day: int = Field(ge=1)
    cost_allocated: Decimal = Decimal("0")
    on_critical_path: bool = True


class Timeline(_Frozen):
    phases: list[TimelinePhase]
    total_duration_days: int
    complexity: Complexity
    weather: WeatherCondition
    labor_availability: LaborAvailability

    @property
    def critical_path(self) -> list[TimelinePhase]:
        return [p for p in self.phases if p.on_critical_path]

    @property
    def total_months(self) -> float:
        return round(self.total_duration_days / 30, 1)


class CashFlowMonth(_Frozen):
    month: int = Field(ge=1)
    amount: Decimal
    cumulative: Decimal


# ---------------------------------------------------------------------------
# Confidence
# ---------------------------------------------------------------------------


class ConfidenceFactor(_Frozen):
    """One input to the confidence score, on a 0-1 scale."""

    name: str
    value: float = Field(ge=0, le=1)
    weight: float
    explanation: str


class ConfidenceScore(_Frozen):
    score: int = Field(ge=40, le=95)
    reliability: Reliability
    variance: float = Field(ge=0, lt=1)
    factors: list[ConfidenceFactor]


class CostRange(_Frozen):
    """A cost range with low, expected, and high values."""

    low: Decimal
    expected: Decimal
    high: Decimal

    @model_validator(mode="after")
    def low_le_expected_le_high(self) -> CostRange:
        if not (self.low <= self.expected <= self.high):
            msg = (
                f"Must satisfy low <= expected <= high, "
                f"got {self.low} <= {self.expected} <= {self.high}"
            )
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Estimate
# ---------------------------------------------------------------------------


class Assumption(_Frozen):
    """A documented assumption made during estimation."""

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class ProjectSummary(_Frozen):
    plot_area_sqft: float
    built_up_area_sqft: float
    carpet_area_sqft: float
    floors: int
    quality_tier: str
    location: str
    construction_type: str | None = None
    roof_type: str | None = None


class EstimateMetadata(BaseModel):
    """Side-band data about the run; never feeds the numbers."""

    engine_version: str
    config_version: str
    generated_at: datetime
    valid_until: datetime
    calculation_id: str | None = None


DISCLAIMER = (
    "This is a preliminary estimate based on standard construction norms and "
    "current regional price data. Actual costs vary with site conditions, "
    "design changes, and market movements. Obtain detailed quotations from "
    "licensed contractors before committing to construction."
)


class Estimate(BaseModel):
    """Complete estimate output from the Griha engine."""

    summary: ProjectSummary
    total_cost: Decimal
    cost_per_sqft: Decimal
    cost_range: CostRange
    breakdown: CostBreakdown
    materials: list[MaterialLine]
    timeline: Timeline
    cash_flow: list[CashFlowMonth]
    confidence: ConfidenceScore
    assumptions: list[Assumption]
    metadata: EstimateMetadata
    disclaimer: str = DISCLAIMER

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from griha.formatting import format_cost_range, format_inr, format_inr_short

        categories = {
            name: self.breakdown.category_total(name)
            for name in self.breakdown.categories
        }
        return {
            "location": self.summary.location,
            "built_up_area_formatted": f"{self.summary.built_up_area_sqft:,.0f} sq.ft",
            "total_cost_formatted": format_inr(self.total_cost),
            "total_cost_short": format_inr_short(self.total_cost),
            "cost_range_formatted": format_cost_range(self.cost_range),
            "cost_per_sqft_formatted": f"{format_inr(self.cost_per_sqft)} / sq.ft",
            "category_totals": {k: format_inr(v) for k, v in categories.items()},
            "duration_days": self.timeline.total_duration_days,
            "duration_months": self.timeline.total_months,
            "confidence_score": self.confidence.score,
            "reliability": self.confidence.reliability.value,
            "num_assumptions": len(self.assumptions),
            "generated_at_formatted": self.metadata.generated_at.strftime("%Y-%m-%d %H:%M"),
        }

    def to_export_dict(self) -> dict[str, Any]:
        """Produce a detailed JSON-compatible dict for reports and audit."""
        return self.model_dump(mode="json")
