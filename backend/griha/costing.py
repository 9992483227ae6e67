"""Cost composer: price the bill of quantities and labor.

Every unit price goes through the same adjustment chain, applied to the
running price in a fixed order::

    base -> location -> quality -> season -> demand

and each intermediate price is kept so the breakdown can show the marginal
contribution of every factor. Prices are exact ``Decimal`` products; line
amounts are rounded to the paisa and every total is a plain sum of rounded
lines, so the grand total always equals the sum of its parts.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from griha.exceptions import EstimateInvariantError
from griha.models.enums import MaterialCategory, SkillTier
from griha.models.estimate import CostBreakdown, CostLine, MaterialLine, PriceAdjustment
from griha.quantities import billable_quantity

if TYPE_CHECKING:
    from griha.config import EngineSettings
    from griha.data.repository import SnapshotRepository
    from griha.models.enums import QualityTier
    from griha.models.estimate import BillItem

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0")

# Units that are ordered in whole pieces
DISCRETE_UNITS = frozenset({"bag", "kg", "piece", "litre", "point", "lump sum"})


def to_decimal(value: float) -> Decimal:
    """Convert a float factor to Decimal through its shortest repr."""
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def apply_adjustments(
    base: Decimal,
    location: float,
    quality: float,
    season: float,
    demand: float,
) -> PriceAdjustment:
    """Apply the factors to ``base`` in order, keeping every step."""
    after_location = base * to_decimal(location)
    after_quality = after_location * to_decimal(quality)
    after_season = after_quality * to_decimal(season)
    final = after_season * to_decimal(demand)
    return PriceAdjustment(
        base=base,
        after_location=after_location,
        after_quality=after_quality,
        after_season=after_season,
        final=final,
    )


def percentage_of(subtotal: Decimal, pct: float) -> Decimal:
    return round_money(subtotal * to_decimal(pct) / Decimal(100))


def compose_costs(
    bill: list[BillItem],
    work_area_sqft: float,
    repository: SnapshotRepository,
    quality_tier: QualityTier,
    region_key: tuple[str, str],
    season_factor: float,
    demand_index: float,
    settings: EngineSettings,
    include_contingency: bool = False,
) -> CostBreakdown:
    """Price materials and labor and add equipment, overhead, contingency.

    Raises:
        InvalidConfiguration: If a price or multiplier is missing.
        OutOfRangeMultiplier: If a multiplier is outside the sane band.
        EstimateInvariantError: If the totals do not reconcile.
    """
    region = repository.get_region(*region_key)
    season = repository.checked("season_factor", season_factor)
    demand = repository.checked("demand_index", demand_index)

    lines: list[CostLine] = []
    materials: dict[str, Decimal] = {c.value: ZERO for c in MaterialCategory}

    for item in bill:
        material = repository.get_material(item.material_id)
        price = apply_adjustments(
            material.base_price,
            location=repository.get_material_location_multiplier(region, item.material_id),
            quality=repository.get_material_grade_multiplier(item.material_id, quality_tier),
            season=season,
            demand=demand,
        )
        quantity = billable_quantity(
            item.quantity, material.wastage_pct, discrete=material.unit in DISCRETE_UNITS
        )
        amount = round_money(price.final * to_decimal(quantity))
        lines.append(
            CostLine(
                item_id=item.material_id,
                category="materials",
                subcategory=material.category.value,
                quantity=quantity,
                unit=material.unit,
                unit_price=price,
                amount=amount,
            )
        )
        materials[material.category.value] += amount

    labor: dict[str, Decimal] = {}
    area = to_decimal(round(work_area_sqft, 2))
    for tier in SkillTier:
        rate = repository.get_labor_rate(tier)
        price = apply_adjustments(
            rate.rate_per_sqft,
            location=repository.get_labor_location_multiplier(region, tier),
            quality=repository.get_labor_grade_multiplier(tier, quality_tier),
            season=season,
            demand=demand,
        )
        amount = round_money(price.final * area)
        lines.append(
            CostLine(
                item_id=tier.value,
                category="labor",
                subcategory=tier.value,
                quantity=float(area),
                unit="sqft",
                unit_price=price,
                amount=amount,
            )
        )
        labor[tier.value] = amount

    subtotal = sum(materials.values(), ZERO) + sum(labor.values(), ZERO)
    categories: dict[str, dict[str, Decimal]] = {
        "materials": materials,
        "labor": labor,
        "equipment": {"equipment": percentage_of(subtotal, settings.equipment_pct)},
        "overhead": {"overhead": percentage_of(subtotal, settings.overhead_pct)},
    }
    if include_contingency:
        categories["contingency"] = {
            "contingency": percentage_of(subtotal, settings.contingency_pct)
        }

    grand_total = sum(
        (sum(sub.values(), ZERO) for sub in categories.values()), ZERO
    )
    breakdown = CostBreakdown(
        categories=categories,
        lines=lines,
        equipment_pct=settings.equipment_pct,
        overhead_pct=settings.overhead_pct,
        contingency_pct=settings.contingency_pct if include_contingency else None,
        grand_total=grand_total,
    )
    check_breakdown(breakdown)
    logger.debug("Costs: subtotal=%s grand_total=%s", subtotal, grand_total)
    return breakdown


def check_breakdown(breakdown: CostBreakdown) -> None:
    """Raise if amounts are negative or the grand total does not reconcile."""
    for category, sub in breakdown.categories.items():
        for name, amount in sub.items():
            if amount < 0:
                msg = f"Negative amount {amount} for {category}.{name}"
                raise EstimateInvariantError(msg)
    if breakdown.leaf_total() != breakdown.grand_total:
        msg = (
            f"Grand total {breakdown.grand_total} does not equal the sum of "
            f"categories {breakdown.leaf_total()}"
        )
        raise EstimateInvariantError(msg)
    line_total = sum(
        (line.amount for line in breakdown.lines), ZERO
    )
    priced = breakdown.category_total("materials") + breakdown.category_total("labor")
    if line_total != priced:
        msg = f"Line amounts {line_total} do not equal materials + labor {priced}"
        raise EstimateInvariantError(msg)


def material_lines(
    breakdown: CostBreakdown,
    bill: list[BillItem],
    repository: SnapshotRepository,
    quality_tier: QualityTier,
) -> list[MaterialLine]:
    """Bill-of-materials rows for the estimate output."""
    net = {item.material_id: item.quantity for item in bill}
    rows: list[MaterialLine] = []
    for line in breakdown.lines:
        if line.category != "materials":
            continue
        material = repository.get_material(line.item_id)
        rows.append(
            MaterialLine(
                material_id=line.item_id,
                name=material.name,
                category=material.category,
                quantity=net[line.item_id],
                billable_quantity=line.quantity,
                unit=material.unit,
                quality=quality_tier,
                specification=material.specifications.get(quality_tier, material.name),
                unit_price=round_money(line.unit_price.final),
                amount=line.amount,
            )
        )
    return rows
