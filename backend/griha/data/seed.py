"""Seed configuration snapshot for the Griha estimation engine.

Prices are early-2025 Indian market averages in INR for individual
home construction. Regional multipliers are relative to the national
average (1.00).
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from griha.data.snapshot import (
    ConfigurationSnapshot,
    LaborRate,
    MaterialPrice,
    RegionalIndex,
)
from griha.models.enums import (
    LaborAvailability,
    MaterialCategory,
    QualityTier,
    Season,
    SeismicZone,
    SkillTier,
)

_B, _S, _P, _L = (
    QualityTier.BASIC,
    QualityTier.STANDARD,
    QualityTier.PREMIUM,
    QualityTier.LUXURY,
)

SEED_MATERIALS: dict[str, MaterialPrice] = {
    # --- Structural ---
    "cement": MaterialPrice(
        name="Portland cement (50 kg bag)",
        unit="bag",
        base_price=Decimal("400"),
        wastage_pct=2.0,
        category=MaterialCategory.STRUCTURAL,
        grade_multipliers={_B: 0.95, _S: 1.0, _P: 1.08, _L: 1.15},
        specifications={
            _B: "PPC, local brand",
            _S: "OPC 43 grade",
            _P: "OPC 53 grade, national brand",
            _L: "OPC 53 grade, premium brand",
        },
    ),
    "steel": MaterialPrice(
        name="TMT reinforcement bars",
        unit="kg",
        base_price=Decimal("65"),
        wastage_pct=3.0,
        category=MaterialCategory.STRUCTURAL,
        grade_multipliers={_B: 0.95, _S: 1.0, _P: 1.1, _L: 1.2},
        specifications={
            _B: "Fe 415",
            _S: "Fe 500",
            _P: "Fe 500D",
            _L: "Fe 550D, corrosion resistant",
        },
    ),
    "aggregate": MaterialPrice(
        name="Coarse aggregate 20 mm",
        unit="m3",
        base_price=Decimal("1800"),
        wastage_pct=3.0,
        category=MaterialCategory.STRUCTURAL,
        grade_multipliers={_B: 0.95, _S: 1.0, _P: 1.05, _L: 1.1},
    ),
    # --- Masonry ---
    "bricks": MaterialPrice(
        name="Burnt clay bricks",
        unit="piece",
        base_price=Decimal("9"),
        wastage_pct=5.0,
        category=MaterialCategory.MASONRY,
        grade_multipliers={_B: 0.9, _S: 1.0, _P: 1.2, _L: 1.45},
        specifications={
            _B: "Country bricks",
            _S: "First class bricks",
            _P: "Wire-cut bricks",
            _L: "Engineered clay blocks",
        },
    ),
    "sand": MaterialPrice(
        name="River / M-sand",
        unit="m3",
        base_price=Decimal("2200"),
        wastage_pct=5.0,
        category=MaterialCategory.MASONRY,
        grade_multipliers={_B: 0.9, _S: 1.0, _P: 1.1, _L: 1.2},
    ),
    # --- Finishing ---
    "flooring_tiles": MaterialPrice(
        name="Floor tiles",
        unit="sqft",
        base_price=Decimal("55"),
        wastage_pct=8.0,
        category=MaterialCategory.FINISHING,
        grade_multipliers={_B: 0.7, _S: 1.0, _P: 1.8, _L: 3.0},
        specifications={
            _B: "Ceramic tiles",
            _S: "Vitrified tiles 600x600",
            _P: "Large format vitrified tiles",
            _L: "Italian marble",
        },
    ),
    "paint": MaterialPrice(
        name="Interior / exterior emulsion",
        unit="litre",
        base_price=Decimal("350"),
        wastage_pct=5.0,
        category=MaterialCategory.FINISHING,
        grade_multipliers={_B: 0.8, _S: 1.0, _P: 1.5, _L: 2.2},
    ),
    "modular_kitchen": MaterialPrice(
        name="Modular kitchen",
        unit="lump sum",
        base_price=Decimal("250000"),
        category=MaterialCategory.FINISHING,
        grade_multipliers={_B: 0.7, _S: 1.0, _P: 1.6, _L: 2.5},
    ),
    "false_ceiling": MaterialPrice(
        name="Gypsum false ceiling",
        unit="lump sum",
        base_price=Decimal("120000"),
        category=MaterialCategory.FINISHING,
        grade_multipliers={_B: 0.8, _S: 1.0, _P: 1.4, _L: 2.0},
    ),
    # --- MEP ---
    "electrical": MaterialPrice(
        name="Electrical wiring and fittings",
        unit="sqft",
        base_price=Decimal("110"),
        category=MaterialCategory.MEP,
        grade_multipliers={_B: 0.85, _S: 1.0, _P: 1.4, _L: 2.0},
    ),
    "plumbing": MaterialPrice(
        name="Plumbing and sanitary point",
        unit="point",
        base_price=Decimal("3500"),
        category=MaterialCategory.MEP,
        grade_multipliers={_B: 0.8, _S: 1.0, _P: 1.5, _L: 2.5},
    ),
    "solar_water_heater": MaterialPrice(
        name="Solar water heater (200 L)",
        unit="lump sum",
        base_price=Decimal("45000"),
        category=MaterialCategory.MEP,
        grade_multipliers={_B: 0.85, _S: 1.0, _P: 1.3, _L: 1.5},
    ),
    "rainwater_harvesting": MaterialPrice(
        name="Rainwater harvesting pit",
        unit="lump sum",
        base_price=Decimal("40000"),
        category=MaterialCategory.MEP,
        grade_multipliers={_B: 0.9, _S: 1.0, _P: 1.2, _L: 1.4},
    ),
    "borewell": MaterialPrice(
        name="Borewell with pump",
        unit="lump sum",
        base_price=Decimal("90000"),
        category=MaterialCategory.MEP,
        grade_multipliers={_B: 1.0, _S: 1.0, _P: 1.1, _L: 1.2},
    ),
}

SEED_LABOR_RATES: dict[SkillTier, LaborRate] = {
    SkillTier.SKILLED: LaborRate(
        rate_per_sqft=Decimal("85"),
        grade_multipliers={_B: 0.9, _S: 1.0, _P: 1.15, _L: 1.3},
    ),
    SkillTier.SEMI_SKILLED: LaborRate(
        rate_per_sqft=Decimal("55"),
        grade_multipliers={_B: 0.9, _S: 1.0, _P: 1.1, _L: 1.2},
    ),
    SkillTier.UNSKILLED: LaborRate(
        rate_per_sqft=Decimal("40"),
        grade_multipliers={_B: 0.95, _S: 1.0, _P: 1.05, _L: 1.1},
    ),
}

SEED_SEASONAL_MULTIPLIERS: dict[Season, float] = {
    Season.WINTER: 1.03,
    Season.SUMMER: 1.0,
    Season.MONSOON: 0.98,
    Season.POST_MONSOON: 1.02,
}


def _multipliers(level: float, **overrides: float) -> dict[str, float]:
    """Material multipliers at ``level`` for every seed material."""
    values = {material_id: level for material_id in SEED_MATERIALS}
    values.update(overrides)
    return values


def _labor(skilled: float, semi_skilled: float, unskilled: float) -> dict[SkillTier, float]:
    return {
        SkillTier.SKILLED: skilled,
        SkillTier.SEMI_SKILLED: semi_skilled,
        SkillTier.UNSKILLED: unskilled,
    }


SEED_REGIONS: tuple[RegionalIndex, ...] = (
    # West
    RegionalIndex(
        state="MH",
        city="Mumbai",
        material_multipliers=_multipliers(1.15, sand=1.35, bricks=1.2),
        labor_multipliers=_labor(1.3, 1.25, 1.2),
        demand_index=1.08,
        market_volatility=0.25,
        seismic_zone=SeismicZone.III,
        labor_availability=LaborAvailability.NORMAL,
        last_updated=date(2025, 1, 5),
    ),
    RegionalIndex(
        state="MH",
        city="Pune",
        material_multipliers=_multipliers(1.05, sand=1.2),
        labor_multipliers=_labor(1.15, 1.1, 1.1),
        demand_index=1.04,
        market_volatility=0.2,
        seismic_zone=SeismicZone.III,
        last_updated=date(2024, 12, 20),
    ),
    RegionalIndex(
        state="GJ",
        city="Ahmedabad",
        material_multipliers=_multipliers(0.95, cement=0.92),
        labor_multipliers=_labor(0.95, 0.95, 0.9),
        demand_index=1.0,
        market_volatility=0.15,
        seismic_zone=SeismicZone.III,
        labor_availability=LaborAvailability.ABUNDANT,
        last_updated=date(2024, 12, 28),
    ),
    RegionalIndex(
        state="RJ",
        city="Jaipur",
        material_multipliers=_multipliers(0.95),
        labor_multipliers=_labor(0.9, 0.9, 0.85),
        demand_index=0.98,
        market_volatility=0.2,
        seismic_zone=SeismicZone.II,
        last_updated=date(2024, 8, 30),
    ),
    # North
    RegionalIndex(
        state="DL",
        city="New Delhi",
        material_multipliers=_multipliers(1.1, sand=1.25),
        labor_multipliers=_labor(1.2, 1.15, 1.1),
        demand_index=1.06,
        market_volatility=0.3,
        seismic_zone=SeismicZone.IV,
        last_updated=date(2025, 1, 2),
    ),
    RegionalIndex(
        state="UP",
        city="Lucknow",
        material_multipliers=_multipliers(0.92, bricks=0.85),
        labor_multipliers=_labor(0.85, 0.85, 0.8),
        demand_index=0.97,
        market_volatility=0.2,
        seismic_zone=SeismicZone.III,
        labor_availability=LaborAvailability.ABUNDANT,
        last_updated=date(2024, 9, 15),
    ),
    # South
    RegionalIndex(
        state="KA",
        city="Bengaluru",
        material_multipliers=_multipliers(1.08, sand=1.3),
        labor_multipliers=_labor(1.2, 1.15, 1.1),
        demand_index=1.05,
        market_volatility=0.25,
        seismic_zone=SeismicZone.II,
        labor_availability=LaborAvailability.SCARCE,
        last_updated=date(2025, 1, 10),
    ),
    RegionalIndex(
        state="TN",
        city="Chennai",
        material_multipliers=_multipliers(1.05),
        labor_multipliers=_labor(1.1, 1.05, 1.05),
        demand_index=1.02,
        market_volatility=0.2,
        seismic_zone=SeismicZone.III,
        last_updated=date(2024, 12, 1),
    ),
    RegionalIndex(
        state="TG",
        city="Hyderabad",
        material_multipliers=_multipliers(1.0),
        labor_multipliers=_labor(1.05, 1.0, 1.0),
        demand_index=1.03,
        market_volatility=0.2,
        seismic_zone=SeismicZone.II,
        last_updated=date(2025, 1, 8),
    ),
    RegionalIndex(
        state="KL",
        city="Kochi",
        material_multipliers=_multipliers(1.1, aggregate=1.2),
        labor_multipliers=_labor(1.35, 1.3, 1.25),
        demand_index=1.0,
        market_volatility=0.15,
        seismic_zone=SeismicZone.III,
        labor_availability=LaborAvailability.SCARCE,
        last_updated=date(2024, 11, 20),
    ),
    # East
    RegionalIndex(
        state="WB",
        city="Kolkata",
        material_multipliers=_multipliers(0.98, bricks=0.9),
        labor_multipliers=_labor(0.9, 0.9, 0.85),
        demand_index=0.99,
        market_volatility=0.2,
        seismic_zone=SeismicZone.III,
        labor_availability=LaborAvailability.ABUNDANT,
        last_updated=date(2024, 12, 15),
    ),
    RegionalIndex(
        state="AS",
        city="Guwahati",
        material_multipliers=_multipliers(1.12, cement=1.18, steel=1.1),
        labor_multipliers=_labor(0.95, 0.9, 0.9),
        demand_index=0.98,
        market_volatility=0.35,
        seismic_zone=SeismicZone.V,
        last_updated=date(2024, 7, 1),
    ),
)

SEED_SNAPSHOT = ConfigurationSnapshot(
    version="2025.01",
    published_at=date(2025, 1, 15),
    materials=SEED_MATERIALS,
    regions=SEED_REGIONS,
    labor_rates=SEED_LABOR_RATES,
    seasonal_multipliers=SEED_SEASONAL_MULTIPLIERS,
)
