"""Confidence estimator.

The score lives on a single 0-100 integer scale:

    score = 100 * (0.4 * completeness + 0.3 * data_quality + 0.3 * (1 - volatility))

rounded half-up and clamped to [40, 95]. Reliability is High at 80 and
above, Medium at 65 and above, Low otherwise. The estimate's variance band
is ``(100 - score) / 200`` either side of the total.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from griha.data.standards import (
    AGING_DATA_QUALITY,
    CONFIDENCE_WEIGHTS,
    FRESH_DATA_DAYS,
    FRESH_DATA_QUALITY,
    HIGH_RELIABILITY_THRESHOLD,
    MAX_CONFIDENCE,
    MEDIUM_RELIABILITY_THRESHOLD,
    MIN_CONFIDENCE,
    STALE_DATA_QUALITY,
)
from griha.models.enums import Reliability
from griha.models.estimate import ConfidenceFactor, ConfidenceScore

if TYPE_CHECKING:
    from datetime import date

    from griha.models.project import ProjectInput


def input_completeness(project: ProjectInput) -> tuple[float, list[str]]:
    """Share of optional descriptors supplied, and the names of those missing."""
    provided = {
        "construction_type": project.construction_type is not None,
        "roof_type": project.roof_type is not None,
        "soil_category": project.soil_category is not None,
        "start_month": project.start_month is not None,
        "rooms": project.rooms.total > 0,
    }
    missing = [name for name, ok in provided.items() if not ok]
    return (len(provided) - len(missing)) / len(provided), missing


def data_age_days(last_updated: date, reference: date) -> int:
    return max(0, (reference - last_updated).days)


def regional_data_quality(age_days: int, stale_after_days: int) -> float:
    if age_days <= FRESH_DATA_DAYS:
        return FRESH_DATA_QUALITY
    if age_days <= stale_after_days:
        return AGING_DATA_QUALITY
    return STALE_DATA_QUALITY


def reliability_for(score: int) -> Reliability:
    if score >= HIGH_RELIABILITY_THRESHOLD:
        return Reliability.HIGH
    if score >= MEDIUM_RELIABILITY_THRESHOLD:
        return Reliability.MEDIUM
    return Reliability.LOW


def variance_for(score: int) -> float:
    return (100 - score) / 200


def estimate_confidence(
    input_completeness: float,
    regional_data_quality: float,
    market_volatility: float,
) -> ConfidenceScore:
    """Combine the three factors (each 0-1) into a clamped 0-100 score."""
    for name, value in (
        ("input_completeness", input_completeness),
        ("regional_data_quality", regional_data_quality),
        ("market_volatility", market_volatility),
    ):
        if not (0.0 <= value <= 1.0):
            msg = f"{name} must be within [0, 1], got {value}"
            raise ValueError(msg)

    stability = 1.0 - market_volatility
    weighted = (
        CONFIDENCE_WEIGHTS["input_completeness"] * input_completeness
        + CONFIDENCE_WEIGHTS["regional_data_quality"] * regional_data_quality
        + CONFIDENCE_WEIGHTS["market_stability"] * stability
    )
    raw = Decimal(str(round(weighted * 100, 6))).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    score = min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, int(raw)))

    factors = [
        ConfidenceFactor(
            name="input_completeness",
            value=input_completeness,
            weight=CONFIDENCE_WEIGHTS["input_completeness"],
            explanation=f"{input_completeness:.0%} of optional project details supplied",
        ),
        ConfidenceFactor(
            name="regional_data_quality",
            value=regional_data_quality,
            weight=CONFIDENCE_WEIGHTS["regional_data_quality"],
            explanation=_quality_explanation(regional_data_quality),
        ),
        ConfidenceFactor(
            name="market_stability",
            value=stability,
            weight=CONFIDENCE_WEIGHTS["market_stability"],
            explanation=f"Regional market volatility {market_volatility:.0%}",
        ),
    ]
    return ConfidenceScore(
        score=score,
        reliability=reliability_for(score),
        variance=variance_for(score),
        factors=factors,
    )


def _quality_explanation(quality: float) -> str:
    if quality >= FRESH_DATA_QUALITY:
        return "Regional prices updated within the last month"
    if quality >= AGING_DATA_QUALITY:
        return "Regional prices are more than a month old"
    return "Regional prices are stale; verify current market rates"
