"""Tests for the geometry resolver."""

from __future__ import annotations

import pytest

from griha.exceptions import InvalidGeometry
from griha.geometry import (
    calculate_builtup_area,
    foundation_depth,
    resolve_geometry,
    utilization_factor,
)
from griha.models.enums import SoilCategory


class TestUtilizationBrackets:
    @pytest.mark.parametrize(
        ("plot_area", "expected"),
        [
            (100.0, 0.70),
            (999.0, 0.70),
            (1000.0, 0.75),
            (1500.0, 0.75),
            (2000.0, 0.75),
            (2001.0, 0.80),
            (50_000.0, 0.80),
        ],
    )
    def test_factor(self, plot_area: float, expected: float) -> None:
        assert utilization_factor(plot_area) == expected

    def test_step_change_at_1000(self) -> None:
        below = calculate_builtup_area(999.0, 1)
        at = calculate_builtup_area(1000.0, 1)
        assert below == pytest.approx(699.3)
        assert at == pytest.approx(750.0)

    def test_step_change_at_2000(self) -> None:
        at = calculate_builtup_area(2000.0, 1)
        above = calculate_builtup_area(2000.5, 1)
        assert at == pytest.approx(1500.0)
        assert above == pytest.approx(1600.4)

    def test_non_decreasing_within_brackets(self) -> None:
        for low, high in ((100, 999), (1000, 2000), (2001, 50_000)):
            areas = [calculate_builtup_area(float(a), 2) for a in range(low, high + 1, 50)]
            assert areas == sorted(areas)


class TestResolveGeometry:
    def test_built_up_area(self) -> None:
        geometry = resolve_geometry(1200.0, 2, SoilCategory.MEDIUM)
        assert geometry.utilization_factor == 0.75
        assert geometry.built_up_area == pytest.approx(1800.0)
        assert geometry.carpet_area == pytest.approx(1440.0)

    def test_structural_volumes(self) -> None:
        volumes = resolve_geometry(1200.0, 2, SoilCategory.MEDIUM).volumes
        assert volumes.foundation == pytest.approx(1080.0)
        assert volumes.columns == pytest.approx(144.0)
        assert volumes.beams == pytest.approx(108.0)
        assert volumes.slabs == pytest.approx(540.0)
        assert volumes.total == pytest.approx(1872.0)

    @pytest.mark.parametrize(
        ("soil", "depth", "foundation"),
        [
            (SoilCategory.GOOD, 1.5, 810.0),
            (SoilCategory.MEDIUM, 2.0, 1080.0),
            (SoilCategory.POOR, 2.5, 1350.0),
        ],
    )
    def test_soil_drives_foundation(
        self, soil: SoilCategory, depth: float, foundation: float
    ) -> None:
        assert foundation_depth(soil) == depth
        volumes = resolve_geometry(1200.0, 2, soil).volumes
        assert volumes.foundation == pytest.approx(foundation)

    def test_soil_does_not_change_superstructure(self) -> None:
        good = resolve_geometry(1200.0, 2, SoilCategory.GOOD).volumes
        poor = resolve_geometry(1200.0, 2, SoilCategory.POOR).volumes
        assert good.slabs == poor.slabs
        assert good.columns == poor.columns

    @pytest.mark.parametrize("plot_area", [0.0, -100.0, 99.9, 50_000.1])
    def test_rejects_plot_area_out_of_range(self, plot_area: float) -> None:
        with pytest.raises(InvalidGeometry):
            resolve_geometry(plot_area, 1)

    @pytest.mark.parametrize("floors", [0, 5])
    def test_rejects_floors_out_of_range(self, floors: int) -> None:
        with pytest.raises(InvalidGeometry):
            resolve_geometry(1200.0, floors)
