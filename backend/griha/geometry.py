"""Geometry resolver: built-up area and structural concrete volumes.

Built-up area is the plot area scaled by a ground-coverage factor that
steps with plot size (0.70 below 1000 sq.ft, 0.75 from 1000 to 2000 sq.ft
inclusive, 0.80 above) and multiplied by the floor count. Structural
volumes (cubic feet) are fixed fractions of the built-up area.
"""

from __future__ import annotations

import logging

from griha.data.standards import (
    BEAM_VOLUME_FACTOR,
    CARPET_AREA_RATIO,
    COLUMN_VOLUME_FACTOR,
    FOUNDATION_DEPTH,
    FOUNDATION_VOLUME_FACTOR,
    MAX_FLOORS,
    MAX_PLOT_AREA_SQFT,
    MIN_FLOORS,
    MIN_PLOT_AREA_SQFT,
    SLAB_VOLUME_FACTOR,
    UTILIZATION_FACTOR,
)
from griha.exceptions import InvalidGeometry
from griha.formulas import evaluate
from griha.models.enums import SoilCategory
from griha.models.estimate import GeometryResult, StructuralVolumes

logger = logging.getLogger(__name__)


def utilization_factor(plot_area_sqft: float) -> float:
    return evaluate(UTILIZATION_FACTOR, plot_area_sqft)


def calculate_builtup_area(plot_area_sqft: float, floors: int) -> float:
    """Plot area x utilization factor x floors."""
    return plot_area_sqft * utilization_factor(plot_area_sqft) * floors


def foundation_depth(soil: SoilCategory) -> float:
    return evaluate(FOUNDATION_DEPTH, soil.value)


def structural_volumes(
    built_up_area: float, floors: int, soil: SoilCategory
) -> StructuralVolumes:
    return StructuralVolumes(
        foundation=built_up_area * foundation_depth(soil) * FOUNDATION_VOLUME_FACTOR,
        columns=built_up_area * COLUMN_VOLUME_FACTOR * floors,
        beams=built_up_area * BEAM_VOLUME_FACTOR * floors,
        slabs=built_up_area * SLAB_VOLUME_FACTOR * floors,
    )


def resolve_geometry(
    plot_area_sqft: float,
    floors: int,
    soil: SoilCategory = SoilCategory.MEDIUM,
) -> GeometryResult:
    """Derive built-up/carpet area and structural volumes.

    Raises:
        InvalidGeometry: If plot area or floors are outside the supported range.
    """
    if not (MIN_PLOT_AREA_SQFT <= plot_area_sqft <= MAX_PLOT_AREA_SQFT):
        msg = (
            f"Plot area {plot_area_sqft} sq.ft outside "
            f"[{MIN_PLOT_AREA_SQFT}, {MAX_PLOT_AREA_SQFT}]"
        )
        raise InvalidGeometry(msg)
    if not (MIN_FLOORS <= floors <= MAX_FLOORS):
        msg = f"Floor count {floors} outside [{MIN_FLOORS}, {MAX_FLOORS}]"
        raise InvalidGeometry(msg)

    factor = utilization_factor(plot_area_sqft)
    built_up = plot_area_sqft * factor * floors
    volumes = structural_volumes(built_up, floors, soil)

    logger.debug(
        "Geometry: plot=%.1f factor=%.2f floors=%d built_up=%.1f concrete=%.1f cft",
        plot_area_sqft, factor, floors, built_up, volumes.total,
    )
    return GeometryResult(
        plot_area_sqft=plot_area_sqft,
        floors=floors,
        utilization_factor=factor,
        built_up_area=built_up,
        carpet_area=built_up * CARPET_AREA_RATIO,
        volumes=volumes,
    )
