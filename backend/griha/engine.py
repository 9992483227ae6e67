"""Core estimation engine for the Griha construction cost estimator.

The EstimationEngine runs a fixed pipeline over a validated project and one
configuration snapshot:

1. **Validation**: parse the input and check plot range and location;
   every problem is reported at once and nothing is computed on failure.
2. **Geometry**: built-up and carpet area, structural concrete volumes.
3. **Quantities**: cement, steel, bricks, sand, aggregate, finishing and
   MEP quantities, plus lump-sum feature items.
4. **Costs**: price every item through base -> location -> quality ->
   season -> demand, add labor, equipment, overhead and contingency.
5. **Timeline**: phase durations, cost allocation, monthly cash flow.
6. **Confidence**: score, reliability, and the variance band.

The same project and snapshot always give the same numbers; only the
metadata timestamps and calculation id differ between runs.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from griha.config import EngineSettings
from griha.confidence import (
    data_age_days,
    estimate_confidence,
    input_completeness,
    regional_data_quality,
)
from griha.costing import compose_costs, material_lines, round_money, to_decimal
from griha.data.repository import SnapshotRepository
from griha.data.store import CalculationRecord, CalculationStore
from griha.exceptions import EstimateInvariantError
from griha.geometry import resolve_geometry
from griha.models.enums import Confidence
from griha.models.estimate import (
    Assumption,
    CostRange,
    Estimate,
    EstimateMetadata,
    ProjectSummary,
)
from griha.quantities import (
    build_bill,
    estimate_finishing_quantities,
    estimate_quantities,
    wall_config_for,
)
from griha.timeline import (
    allocate_phase_costs,
    derive_complexity,
    derive_weather,
    estimate_timeline,
    project_cash_flow,
    season_for_month,
)
from griha.validation import validate_project_input

if TYPE_CHECKING:
    from griha.data.snapshot import ConfigurationSnapshot, RegionalIndex
    from griha.models.estimate import CashFlowMonth, ConfidenceScore, Timeline
    from griha.models.project import ProjectInput

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class EstimationEngine:
    """Converts a ProjectInput into an Estimate against a snapshot.

    Args:
        snapshot: The configuration snapshot used when ``estimate`` is not
            given one explicitly.
        settings: Percentages and thresholds; defaults to ``EngineSettings()``.
        store: Optional calculation history store that receives an audit
            record for every successful estimate.

    Example::

        from griha.data.seed import SEED_SNAPSHOT

        engine = EstimationEngine(SEED_SNAPSHOT)
        estimate = engine.estimate(project)
    """

    def __init__(
        self,
        snapshot: ConfigurationSnapshot,
        settings: EngineSettings | None = None,
        store: CalculationStore | None = None,
    ) -> None:
        self._snapshot = snapshot
        self._settings = settings or EngineSettings()
        self._store = store

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def snapshot(self) -> ConfigurationSnapshot:
        return self._snapshot

    def estimate(
        self,
        project: ProjectInput | Mapping[str, Any],
        snapshot: ConfigurationSnapshot | None = None,
    ) -> Estimate:
        """Produce an estimate for ``project``.

        Args:
            project: A ProjectInput or a mapping that validates into one.
            snapshot: Overrides the engine's snapshot for this call only.

        Raises:
            InputValidationError: If the project input is invalid.
            ConfigurationError: If the snapshot lacks data or holds an
                out-of-band multiplier.
            EstimateInvariantError: If the computed totals do not reconcile.
        """
        snapshot = snapshot or self._snapshot
        repository = SnapshotRepository(snapshot, self._settings.multiplier_band)
        project = validate_project_input(project, repository)
        assumptions: list[Assumption] = []

        region = repository.get_region(project.location.state, project.location.city)

        # 1. Geometry
        if project.soil_category is None:
            assumptions.append(
                Assumption(
                    parameter="soil_category",
                    assumed_value=project.effective_soil.value,
                    reasoning="Soil category not given; medium soil foundation depth used",
                    confidence=Confidence.MEDIUM,
                )
            )
        geometry = resolve_geometry(
            project.plot_area_sqft, project.floors, project.effective_soil
        )

        # 2. Quantities
        quantities = estimate_quantities(
            geometry.volumes,
            project.concrete_grade,
            region.seismic_zone,
            wall_config_for(geometry),
        )
        finishing = estimate_finishing_quantities(
            geometry, project.rooms, quantities.net_wall_area_sqft
        )
        bill = build_bill(quantities, finishing, project.features)

        # 3. Costs
        season_factor = self._season_factor(project, repository, assumptions)
        breakdown = compose_costs(
            bill,
            work_area_sqft=geometry.built_up_area,
            repository=repository,
            quality_tier=project.quality_tier,
            region_key=region.key,
            season_factor=season_factor,
            demand_index=repository.get_demand_index(region),
            settings=self._settings,
            include_contingency=project.include_contingency,
        )
        total = breakdown.grand_total

        # 4. Timeline
        timeline = estimate_timeline(
            geometry.built_up_area,
            derive_complexity(project.floors, project.quality_tier, project.features),
            derive_weather(project.start_month, project.weather),
            region.labor_availability,
        )
        timeline = allocate_phase_costs(timeline, total)
        cash_flow = project_cash_flow(timeline)
        self._check_timeline(timeline, cash_flow, total)

        # 5. Confidence
        confidence = self._confidence(project, region, snapshot, assumptions)
        delta = to_decimal(confidence.variance)
        cost_range = CostRange(
            low=round_money(total * (1 - delta)),
            expected=total,
            high=round_money(total * (1 + delta)),
        )

        generated_at = datetime.now(UTC)
        estimate = Estimate(
            summary=ProjectSummary(
                plot_area_sqft=geometry.plot_area_sqft,
                built_up_area_sqft=geometry.built_up_area,
                carpet_area_sqft=geometry.carpet_area,
                floors=geometry.floors,
                quality_tier=project.quality_tier.value,
                location=f"{project.location.city}, {project.location.state}",
                construction_type=(
                    project.construction_type.value if project.construction_type else None
                ),
                roof_type=project.roof_type.value if project.roof_type else None,
            ),
            total_cost=total,
            cost_per_sqft=round_money(total / to_decimal(round(geometry.built_up_area, 2))),
            cost_range=cost_range,
            breakdown=breakdown,
            materials=material_lines(breakdown, bill, repository, project.quality_tier),
            timeline=timeline,
            cash_flow=cash_flow,
            confidence=confidence,
            assumptions=assumptions,
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                config_version=snapshot.version,
                generated_at=generated_at,
                valid_until=generated_at + timedelta(days=self._settings.estimate_validity_days),
            ),
        )

        if self._store is not None:
            self._record(self._store, project, estimate, snapshot.version)

        logger.info(
            "Estimated %s (%.0f sq.ft, %s) with config %s: total=%s score=%d",
            estimate.summary.location,
            geometry.built_up_area,
            project.quality_tier,
            snapshot.version,
            total,
            confidence.score,
        )
        return estimate

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _season_factor(
        project: ProjectInput,
        repository: SnapshotRepository,
        assumptions: list[Assumption],
    ) -> float:
        if project.start_month is None:
            assumptions.append(
                Assumption(
                    parameter="start_month",
                    assumed_value="unspecified",
                    reasoning="No start month given; no seasonal price adjustment applied",
                    confidence=Confidence.MEDIUM,
                )
            )
            return 1.0
        return repository.get_seasonal_multiplier(season_for_month(project.start_month))

    def _confidence(
        self,
        project: ProjectInput,
        region: RegionalIndex,
        snapshot: ConfigurationSnapshot,
        assumptions: list[Assumption],
    ) -> ConfidenceScore:
        completeness, missing = input_completeness(project)
        age = data_age_days(region.last_updated, snapshot.published_at)
        quality = regional_data_quality(age, self._settings.stale_after_days)
        if age > self._settings.stale_after_days:
            logger.warning(
                "Regional data for %s, %s is %d days old (snapshot %s)",
                region.city, region.state, age, snapshot.version,
            )
            assumptions.append(
                Assumption(
                    parameter="regional_prices",
                    assumed_value=region.last_updated.isoformat(),
                    reasoning=(
                        f"Regional price data is {age} days old; "
                        f"current rates may differ"
                    ),
                    confidence=Confidence.LOW,
                )
            )
        if missing:
            logger.debug("Optional inputs missing: %s", ", ".join(missing))
        return estimate_confidence(completeness, quality, region.market_volatility)

    @staticmethod
    def _check_timeline(
        timeline: Timeline,
        cash_flow: list[CashFlowMonth],
        total: Decimal,
    ) -> None:
        critical = timeline.critical_path
        for prev, nxt in zip(critical, critical[1:]):
            if nxt.start_day != prev.end_day + 1:
                msg = f"Phase {nxt.phase} does not follow {prev.phase} contiguously"
                raise EstimateInvariantError(msg)
        allocated = sum((p.cost_allocated for p in timeline.phases), Decimal("0"))
        if allocated != total:
            msg = f"Phase allocations {allocated} do not equal grand total {total}"
            raise EstimateInvariantError(msg)
        if cash_flow and cash_flow[-1].cumulative != total:
            msg = f"Cash flow {cash_flow[-1].cumulative} does not equal grand total {total}"
            raise EstimateInvariantError(msg)

    @staticmethod
    def _record(
        store: CalculationStore,
        project: ProjectInput,
        estimate: Estimate,
        version: str,
    ) -> None:
        calculation_id = store.new_id()
        estimate.metadata.calculation_id = calculation_id
        store.save(
            CalculationRecord(
                calculation_id=calculation_id,
                project=project,
                estimate=estimate.model_copy(deep=True),
                confidence_score=estimate.confidence.score,
                config_version=version,
            )
        )
