"""Snapshot repository for looking up prices and multipliers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

from griha.exceptions import InvalidConfiguration, OutOfRangeMultiplier

if TYPE_CHECKING:
    from griha.data.snapshot import (
        ConfigurationSnapshot,
        LaborRate,
        MaterialPrice,
        RegionalIndex,
    )
    from griha.models.enums import QualityTier, Season, SkillTier

logger = logging.getLogger(__name__)

DEFAULT_MULTIPLIER_BAND = (0.5, 3.0)


class SnapshotRepository:
    """Read-only lookups over one configuration snapshot.

    Missing entries raise :class:`InvalidConfiguration` and multipliers
    outside the sane band raise :class:`OutOfRangeMultiplier`. Both are
    logged with the offending key so the data gap can be traced back to
    the snapshot version.
    """

    def __init__(
        self,
        snapshot: ConfigurationSnapshot,
        multiplier_band: tuple[float, float] = DEFAULT_MULTIPLIER_BAND,
    ) -> None:
        self._snapshot = snapshot
        self._band = multiplier_band
        self._regions: dict[tuple[str, str], RegionalIndex] = {
            region.key: region for region in snapshot.regions
        }

    @property
    def version(self) -> str:
        return self._snapshot.version

    @property
    def snapshot(self) -> ConfigurationSnapshot:
        return self._snapshot

    # ------------------------------------------------------------------
    # Regions
    # ------------------------------------------------------------------

    def has_region(self, state: str, city: str) -> bool:
        return (state.lower().strip(), city.lower().strip()) in self._regions

    def get_region(self, state: str, city: str) -> RegionalIndex:
        """Return the regional index for an exact (state, city) match."""
        key = (state.lower().strip(), city.lower().strip())
        region = self._regions.get(key)
        if region is None:
            self._missing(f"regions.{key[0]}.{key[1]}")
        return region

    def list_regions(self) -> list[tuple[str, str]]:
        return sorted(self._regions)

    # ------------------------------------------------------------------
    # Materials
    # ------------------------------------------------------------------

    def get_material(self, material_id: str) -> MaterialPrice:
        material = self._snapshot.materials.get(material_id)
        if material is None:
            self._missing(f"materials.{material_id}")
        return material

    def get_material_grade_multiplier(
        self, material_id: str, tier: QualityTier
    ) -> float:
        material = self.get_material(material_id)
        value = material.grade_multipliers.get(tier)
        if value is None:
            self._missing(f"materials.{material_id}.grade_multipliers.{tier}")
        return self.checked(f"materials.{material_id}.grade_multipliers.{tier}", value)

    def get_material_location_multiplier(
        self, region: RegionalIndex, material_id: str
    ) -> float:
        key = f"regions.{region.key[0]}.{region.key[1]}.material_multipliers.{material_id}"
        value = region.material_multipliers.get(material_id)
        if value is None:
            self._missing(key)
        return self.checked(key, value)

    # ------------------------------------------------------------------
    # Labor
    # ------------------------------------------------------------------

    def get_labor_rate(self, tier: SkillTier) -> LaborRate:
        rate = self._snapshot.labor_rates.get(tier)
        if rate is None:
            self._missing(f"labor_rates.{tier}")
        return rate

    def get_labor_grade_multiplier(self, tier: SkillTier, quality: QualityTier) -> float:
        rate = self.get_labor_rate(tier)
        value = rate.grade_multipliers.get(quality)
        if value is None:
            self._missing(f"labor_rates.{tier}.grade_multipliers.{quality}")
        return self.checked(f"labor_rates.{tier}.grade_multipliers.{quality}", value)

    def get_labor_location_multiplier(
        self, region: RegionalIndex, tier: SkillTier
    ) -> float:
        key = f"regions.{region.key[0]}.{region.key[1]}.labor_multipliers.{tier}"
        value = region.labor_multipliers.get(tier)
        if value is None:
            self._missing(key)
        return self.checked(key, value)

    # ------------------------------------------------------------------
    # Market factors
    # ------------------------------------------------------------------

    def get_seasonal_multiplier(self, season: Season) -> float:
        value = self._snapshot.seasonal_multipliers.get(season)
        if value is None:
            self._missing(f"seasonal_multipliers.{season}")
        return self.checked(f"seasonal_multipliers.{season}", value)

    def get_demand_index(self, region: RegionalIndex) -> float:
        return self.checked(
            f"regions.{region.key[0]}.{region.key[1]}.demand_index",
            region.demand_index,
        )

    # ------------------------------------------------------------------
    # Integrity
    # ------------------------------------------------------------------

    def checked(self, key: str, value: float) -> float:
        """Return ``value`` if it lies in the multiplier band, else raise."""
        low, high = self._band
        if not (low <= value <= high):
            logger.error(
                "Snapshot %s: multiplier %s=%s outside [%s, %s]",
                self.version, key, value, low, high,
            )
            raise OutOfRangeMultiplier(key, value, low, high)
        return value

    def _missing(self, key: str) -> NoReturn:
        logger.error("Snapshot %s: missing entry %s", self.version, key)
        raise InvalidConfiguration(key, f"snapshot version {self.version}")
