"""Quantity estimator: material quantities from structural volumes.

Discrete items (cement bags, bricks, steel kg, paint litres, plumbing
points) are always rounded up to a whole unit. Bulk volumes (m3) and areas
(sq.ft) are rounded up to 0.01, so nothing is ever under-ordered.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from griha.data.standards import (
    AGGREGATE_PER_CUM_CONCRETE,
    CEMENT_BAGS_PER_CUM,
    CEMENT_BAGS_PER_CUM_MORTAR,
    CFT_PER_CUM,
    EXTERNAL_BRICKS_PER_SQM,
    EXTERNAL_WALL_SHARE,
    EXTERNAL_WALL_THICKNESS_M,
    INTERNAL_BRICKS_PER_SQM,
    INTERNAL_WALL_THICKNESS_M,
    MORTAR_PER_CUM_MASONRY,
    OPENING_FRACTION,
    PAINT_COVERAGE_SQFT_PER_LITRE,
    PLUMBING_POINTS_PER_BATHROOM,
    PLUMBING_POINTS_PER_KITCHEN,
    SAND_PER_CUM_MASONRY,
    SEISMIC_STEEL_MULTIPLIER,
    SQFT_PER_SQM,
    STEEL_KG_PER_CUM,
    WALL_HEIGHT_FT,
)
from griha.exceptions import InvalidGeometry
from griha.formulas import evaluate
from griha.models.estimate import (
    BillItem,
    FinishingQuantities,
    MaterialQuantities,
    WallConfig,
)

if TYPE_CHECKING:
    from griha.models.enums import ConcreteGrade, FeatureFlag, SeismicZone
    from griha.models.estimate import GeometryResult, StructuralVolumes
    from griha.models.project import RoomComposition

logger = logging.getLogger(__name__)

# Digits kept before rounding up, so float noise such as 510.0000000001
# does not add a whole unit.
_NOISE_DIGITS = 6


def ceil_units(value: float) -> int:
    """Round a continuous quantity up to a whole unit."""
    return math.ceil(round(value, _NOISE_DIGITS))


def ceil_hundredths(value: float) -> float:
    """Round a bulk volume or area up to the next 0.01 of its unit."""
    return math.ceil(round(value * 100, _NOISE_DIGITS)) / 100


def cft_to_cum(cubic_feet: float) -> float:
    return cubic_feet / CFT_PER_CUM


def cement_bags(concrete_m3: float, mortar_m3: float, grade: ConcreteGrade) -> int:
    """ceil(concrete x grade factor + mortar x 5.5)."""
    factor = evaluate(CEMENT_BAGS_PER_CUM, grade.value)
    return ceil_units(concrete_m3 * factor + mortar_m3 * CEMENT_BAGS_PER_CUM_MORTAR)


def steel_by_element(
    volumes: StructuralVolumes, zone: SeismicZone
) -> dict[str, float]:
    """Reinforcement kg per element, including the seismic multiplier."""
    multiplier = evaluate(SEISMIC_STEEL_MULTIPLIER, zone.value)
    return {
        element: cft_to_cum(volume) * STEEL_KG_PER_CUM[element] * multiplier
        for element, volume in volumes.by_element().items()
    }


def wall_config_for(geometry: GeometryResult) -> WallConfig:
    """Standard wall layout for a resolved geometry."""
    return WallConfig(
        built_up_area=geometry.built_up_area,
        floors=geometry.floors,
        wall_height_ft=WALL_HEIGHT_FT,
        opening_fraction=OPENING_FRACTION,
        external_share=EXTERNAL_WALL_SHARE,
    )


def wall_areas(config: WallConfig) -> tuple[float, float]:
    """Net (external, internal) wall areas in sq.ft.

    The perimeter is approximated as 4 x sqrt(built-up area).
    """
    perimeter = 4 * math.sqrt(config.built_up_area)
    gross = perimeter * config.wall_height_ft * config.floors
    net = gross * (1 - config.opening_fraction)
    external = net * config.external_share
    return external, net - external


def estimate_quantities(
    volumes: StructuralVolumes,
    concrete_grade: ConcreteGrade,
    seismic_zone: SeismicZone,
    wall_config: WallConfig,
) -> MaterialQuantities:
    """Derive structural and masonry material quantities.

    Raises:
        InvalidGeometry: If the structural volumes are empty.
    """
    if volumes.total <= 0:
        msg = f"Structural volumes must be positive, got {volumes.total}"
        raise InvalidGeometry(msg)

    concrete_m3 = cft_to_cum(volumes.total)

    external_sqft, internal_sqft = wall_areas(wall_config)
    external_sqm = external_sqft / SQFT_PER_SQM
    internal_sqm = internal_sqft / SQFT_PER_SQM
    masonry_m3 = (
        external_sqm * EXTERNAL_WALL_THICKNESS_M
        + internal_sqm * INTERNAL_WALL_THICKNESS_M
    )
    mortar_m3 = masonry_m3 * MORTAR_PER_CUM_MASONRY

    steel = steel_by_element(volumes, seismic_zone)

    quantities = MaterialQuantities(
        concrete_m3=ceil_hundredths(concrete_m3),
        masonry_m3=ceil_hundredths(masonry_m3),
        mortar_m3=ceil_hundredths(mortar_m3),
        cement_bags=cement_bags(concrete_m3, mortar_m3, concrete_grade),
        steel_kg=ceil_units(sum(steel.values())),
        steel_kg_by_element={k: round(v, 2) for k, v in steel.items()},
        external_wall_area_sqft=external_sqft,
        internal_wall_area_sqft=internal_sqft,
        external_bricks=ceil_units(external_sqm * EXTERNAL_BRICKS_PER_SQM),
        internal_bricks=ceil_units(internal_sqm * INTERNAL_BRICKS_PER_SQM),
        sand_m3=ceil_hundredths(masonry_m3 * SAND_PER_CUM_MASONRY),
        aggregate_m3=ceil_hundredths(concrete_m3 * AGGREGATE_PER_CUM_CONCRETE),
    )
    logger.debug(
        "Quantities: cement=%d bags steel=%d kg bricks=%d",
        quantities.cement_bags, quantities.steel_kg, quantities.bricks,
    )
    return quantities


def estimate_finishing_quantities(
    geometry: GeometryResult,
    rooms: RoomComposition,
    net_wall_area_sqft: float,
) -> FinishingQuantities:
    """Flooring, paint, and MEP quantities."""
    paint_area = 2 * net_wall_area_sqft + geometry.carpet_area
    points = (
        rooms.bathrooms * PLUMBING_POINTS_PER_BATHROOM
        + rooms.kitchens * PLUMBING_POINTS_PER_KITCHEN
    )
    return FinishingQuantities(
        flooring_sqft=ceil_hundredths(geometry.carpet_area),
        paint_area_sqft=paint_area,
        paint_litres=ceil_units(paint_area / PAINT_COVERAGE_SQFT_PER_LITRE),
        electrical_sqft=ceil_hundredths(geometry.built_up_area),
        plumbing_points=points,
    )


def build_bill(
    quantities: MaterialQuantities,
    finishing: FinishingQuantities,
    features: frozenset[FeatureFlag] = frozenset(),
) -> list[BillItem]:
    """Map quantities onto snapshot material ids, in a stable order."""
    items = [
        BillItem(material_id="cement", quantity=quantities.cement_bags),
        BillItem(material_id="steel", quantity=quantities.steel_kg),
        BillItem(material_id="aggregate", quantity=quantities.aggregate_m3),
        BillItem(material_id="bricks", quantity=quantities.bricks),
        BillItem(material_id="sand", quantity=quantities.sand_m3),
        BillItem(material_id="flooring_tiles", quantity=finishing.flooring_sqft),
        BillItem(material_id="paint", quantity=finishing.paint_litres),
        BillItem(material_id="electrical", quantity=finishing.electrical_sqft),
    ]
    if finishing.plumbing_points:
        items.append(BillItem(material_id="plumbing", quantity=finishing.plumbing_points))
    for feature in sorted(features):
        items.append(BillItem(material_id=feature.value, quantity=1))
    return items


def billable_quantity(quantity: float, wastage_pct: float, discrete: bool) -> float:
    """Quantity to order including wastage, rounded up like the base quantity."""
    with_wastage = quantity * (1 + wastage_pct / 100)
    if discrete:
        return float(ceil_units(with_wastage))
    return ceil_hundredths(with_wastage)
