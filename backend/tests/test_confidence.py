"""Tests for the confidence estimator."""

from __future__ import annotations

from datetime import date

import pytest

from griha.confidence import (
    data_age_days,
    estimate_confidence,
    input_completeness,
    regional_data_quality,
    reliability_for,
    variance_for,
)
from griha.models.enums import ConstructionType, Reliability, RoofType, SoilCategory
from griha.models.project import Location, PlotArea, ProjectInput, RoomComposition


def _project(**overrides: object) -> ProjectInput:
    fields: dict[str, object] = {
        "plot_area": PlotArea(value=1200),
        "floors": 2,
        "location": Location(state="KA", city="Bengaluru"),
    }
    fields.update(overrides)
    return ProjectInput(**fields)  # type: ignore[arg-type]


class TestEstimateConfidence:
    def test_upper_clamp(self) -> None:
        result = estimate_confidence(1.0, 1.0, 0.0)
        assert result.score == 95
        assert result.reliability == Reliability.HIGH
        assert result.variance == pytest.approx(0.025)

    def test_lower_clamp(self) -> None:
        result = estimate_confidence(0.0, 0.0, 1.0)
        assert result.score == 40
        assert result.reliability == Reliability.LOW
        assert result.variance == pytest.approx(0.3)

    @pytest.mark.parametrize(
        ("completeness", "quality", "volatility", "score", "reliability"),
        [
            (1.0, 0.8, 0.2, 88, Reliability.HIGH),
            (0.6, 0.8, 0.2, 72, Reliability.MEDIUM),
            (0.2, 0.5, 0.3, 44, Reliability.LOW),
            (1.0, 1.0, 0.25, 93, Reliability.HIGH),
        ],
    )
    def test_weighted_score(
        self,
        completeness: float,
        quality: float,
        volatility: float,
        score: int,
        reliability: Reliability,
    ) -> None:
        result = estimate_confidence(completeness, quality, volatility)
        assert result.score == score
        assert result.reliability == reliability

    def test_score_always_in_bounds(self) -> None:
        steps = [i / 4 for i in range(5)]
        for c in steps:
            for q in steps:
                for v in steps:
                    assert 40 <= estimate_confidence(c, q, v).score <= 95

    def test_factors_reported(self) -> None:
        result = estimate_confidence(0.6, 0.8, 0.2)
        names = [f.name for f in result.factors]
        assert names == ["input_completeness", "regional_data_quality", "market_stability"]
        assert sum(f.weight for f in result.factors) == pytest.approx(1.0)
        assert result.factors[2].value == pytest.approx(0.8)

    def test_rejects_out_of_range_factor(self) -> None:
        with pytest.raises(ValueError, match="market_volatility"):
            estimate_confidence(1.0, 1.0, 1.5)


class TestReliability:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (95, Reliability.HIGH),
            (80, Reliability.HIGH),
            (79, Reliability.MEDIUM),
            (65, Reliability.MEDIUM),
            (64, Reliability.LOW),
            (40, Reliability.LOW),
        ],
    )
    def test_thresholds(self, score: int, expected: Reliability) -> None:
        assert reliability_for(score) == expected

    def test_variance_narrows_with_score(self) -> None:
        assert variance_for(40) == pytest.approx(0.30)
        assert variance_for(80) == pytest.approx(0.10)
        assert variance_for(95) == pytest.approx(0.025)


class TestInputs:
    def test_bare_project(self) -> None:
        completeness, missing = input_completeness(_project())
        assert completeness == 0.0
        assert missing == [
            "construction_type",
            "roof_type",
            "soil_category",
            "start_month",
            "rooms",
        ]

    def test_full_project(self) -> None:
        project = _project(
            construction_type=ConstructionType.RCC_FRAME,
            roof_type=RoofType.RCC_SLAB,
            soil_category=SoilCategory.GOOD,
            start_month=11,
            rooms=RoomComposition(bedrooms=3, bathrooms=2, kitchens=1),
        )
        assert input_completeness(project) == (1.0, [])

    def test_partial_project(self) -> None:
        completeness, missing = input_completeness(
            _project(soil_category=SoilCategory.POOR, start_month=3)
        )
        assert completeness == pytest.approx(0.4)
        assert "soil_category" not in missing

    def test_data_age(self) -> None:
        assert data_age_days(date(2025, 1, 10), date(2025, 1, 15)) == 5
        assert data_age_days(date(2025, 2, 1), date(2025, 1, 15)) == 0

    @pytest.mark.parametrize(
        ("age", "quality"),
        [(0, 1.0), (30, 1.0), (31, 0.8), (90, 0.8), (91, 0.5), (400, 0.5)],
    )
    def test_regional_data_quality(self, age: int, quality: float) -> None:
        assert regional_data_quality(age, 90) == quality
