"""Griha construction cost estimation engine.

Usage::

    from griha import create_default_engine

    engine = create_default_engine()
    estimate = engine.estimate({
        "plot_area": {"value": 1200, "unit": "sqft"},
        "floors": 2,
        "location": {"state": "KA", "city": "Bengaluru"},
        "quality_tier": "standard",
    })
"""

from griha.config import EngineSettings
from griha.data.snapshot import ConfigurationSnapshot
from griha.data.store import CalculationRecord, CalculationStore, InMemoryCalculationStore
from griha.engine import EstimationEngine
from griha.exceptions import (
    CalculationError,
    ConfigurationError,
    EstimateInvariantError,
    GrihaError,
    InputValidationError,
    InvalidConfiguration,
    InvalidGeometry,
    OutOfRangeMultiplier,
)
from griha.factory import create_default_engine
from griha.models.enums import (
    AreaUnit,
    ConstructionType,
    FeatureFlag,
    QualityTier,
    Reliability,
    RoofType,
    SoilCategory,
)
from griha.models.estimate import CostBreakdown, Estimate, Timeline, TimelinePhase
from griha.models.project import Location, PlotArea, ProjectInput, RoomComposition
from griha.validation import FieldError

__all__ = [
    "AreaUnit",
    "CalculationError",
    "CalculationRecord",
    "CalculationStore",
    "ConfigurationError",
    "ConfigurationSnapshot",
    "ConstructionType",
    "CostBreakdown",
    "EngineSettings",
    "Estimate",
    "EstimateInvariantError",
    "EstimationEngine",
    "FeatureFlag",
    "FieldError",
    "GrihaError",
    "InMemoryCalculationStore",
    "InputValidationError",
    "InvalidConfiguration",
    "InvalidGeometry",
    "Location",
    "OutOfRangeMultiplier",
    "PlotArea",
    "ProjectInput",
    "QualityTier",
    "Reliability",
    "RoofType",
    "RoomComposition",
    "SoilCategory",
    "Timeline",
    "TimelinePhase",
    "create_default_engine",
]
