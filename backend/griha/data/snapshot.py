"""Schema for the versioned configuration snapshot.

A snapshot is owned by the admin side of the product and is read-only to
the engine: every model here is frozen, and publishing new prices means
publishing a new snapshot version.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from griha.models.enums import (
    LaborAvailability,
    MaterialCategory,
    QualityTier,
    Season,
    SeismicZone,
    SkillTier,
)


def _at_least_two_grades(v: dict[QualityTier, float]) -> dict[QualityTier, float]:
    if len(v) < 2:
        msg = "grade multiplier sets must contain at least two grades"
        raise ValueError(msg)
    return v


class MaterialPrice(BaseModel):
    """Base price and grade table for one material."""

    model_config = ConfigDict(frozen=True)

    name: str
    unit: str
    base_price: Decimal = Field(gt=0)
    wastage_pct: float = Field(default=0.0, ge=0, le=50)
    category: MaterialCategory
    grade_multipliers: dict[QualityTier, float]
    specifications: dict[QualityTier, str] = Field(default_factory=dict)

    @field_validator("grade_multipliers")
    @classmethod
    def grades_present(cls, v: dict[QualityTier, float]) -> dict[QualityTier, float]:
        return _at_least_two_grades(v)


class LaborRate(BaseModel):
    """Base labor rate per square foot of built-up area for a skill tier."""

    model_config = ConfigDict(frozen=True)

    rate_per_sqft: Decimal = Field(gt=0)
    grade_multipliers: dict[QualityTier, float]

    @field_validator("grade_multipliers")
    @classmethod
    def grades_present(cls, v: dict[QualityTier, float]) -> dict[QualityTier, float]:
        return _at_least_two_grades(v)


class RegionalIndex(BaseModel):
    """Regional multipliers and market data for one (state, city)."""

    model_config = ConfigDict(frozen=True)

    state: str
    city: str
    material_multipliers: dict[str, float]
    labor_multipliers: dict[SkillTier, float]
    demand_index: float = 1.0
    market_volatility: float = Field(default=0.2, ge=0, le=1)
    seismic_zone: SeismicZone = SeismicZone.III
    labor_availability: LaborAvailability = LaborAvailability.NORMAL
    last_updated: date

    @property
    def key(self) -> tuple[str, str]:
        return self.state.lower().strip(), self.city.lower().strip()


class ConfigurationSnapshot(BaseModel):
    """Point-in-time prices and multipliers used for one calculation."""

    model_config = ConfigDict(frozen=True)

    version: str
    published_at: date
    materials: dict[str, MaterialPrice]
    regions: tuple[RegionalIndex, ...]
    labor_rates: dict[SkillTier, LaborRate]
    seasonal_multipliers: dict[Season, float]
