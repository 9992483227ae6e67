"""Tests for ProjectInput and the estimate output models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from griha.models import (
    AreaUnit,
    CostRange,
    FeatureFlag,
    Location,
    PlotArea,
    ProjectInput,
    QualityTier,
    RoomComposition,
    SoilCategory,
    StructuralVolumes,
)


def _make_project(**overrides: object) -> ProjectInput:
    """Helper to build a valid ProjectInput with sensible defaults."""
    defaults: dict[str, object] = {
        "plot_area": PlotArea(value=1200),
        "floors": 2,
        "location": Location(state="KA", city="Bengaluru"),
    }
    defaults.update(overrides)
    return ProjectInput(**defaults)  # type: ignore[arg-type]


class TestPlotArea:
    @pytest.mark.parametrize(
        ("unit", "sqft"),
        [(AreaUnit.SQFT, 100.0), (AreaUnit.SQYD, 900.0), (AreaUnit.SQM, 1076.39)],
    )
    def test_to_sqft(self, unit: AreaUnit, sqft: float) -> None:
        assert PlotArea(value=100, unit=unit).to_sqft() == pytest.approx(sqft)

    def test_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PlotArea(value=0)


class TestLocation:
    def test_strips_whitespace(self) -> None:
        location = Location(state=" KA ", city="Bengaluru ")
        assert location.state == "KA"
        assert location.key == ("ka", "bengaluru")

    def test_blank_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Location(state="KA", city="   ")


class TestProjectInput:
    def test_defaults(self) -> None:
        project = _make_project()
        assert project.quality_tier == QualityTier.STANDARD
        assert project.include_contingency is False
        assert project.features == frozenset()
        assert project.rooms.total == 0

    def test_effective_soil(self) -> None:
        assert _make_project().effective_soil == SoilCategory.MEDIUM
        poor = _make_project(soil_category=SoilCategory.POOR)
        assert poor.effective_soil == SoilCategory.POOR

    def test_frozen(self) -> None:
        project = _make_project()
        with pytest.raises(ValidationError):
            project.floors = 3  # type: ignore[misc]

    def test_features_deduplicated(self) -> None:
        project = ProjectInput.model_validate(
            {
                "plot_area": {"value": 1200},
                "floors": 1,
                "location": {"state": "KA", "city": "Bengaluru"},
                "features": ["borewell", "borewell"],
            }
        )
        assert project.features == frozenset({FeatureFlag.BOREWELL})

    def test_room_total(self) -> None:
        rooms = RoomComposition(bedrooms=3, bathrooms=2, kitchens=1, living=1, other=1)
        assert rooms.total == 8


class TestOutputModels:
    def test_structural_volume_total(self) -> None:
        volumes = StructuralVolumes(foundation=10, columns=2, beams=1.5, slabs=5)
        assert volumes.total == pytest.approx(18.5)
        assert list(volumes.by_element()) == ["foundation", "columns", "beams", "slabs"]

    def test_cost_range_ordering(self) -> None:
        with pytest.raises(ValidationError, match="low <= expected <= high"):
            CostRange(low=Decimal("5"), expected=Decimal("4"), high=Decimal("6"))
