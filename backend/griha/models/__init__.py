"""Domain models for the Griha estimation engine."""

from griha.models.enums import (
    AreaUnit,
    Complexity,
    ConcreteGrade,
    Confidence,
    ConstructionType,
    FeatureFlag,
    LaborAvailability,
    MaterialCategory,
    Phase,
    QualityTier,
    Reliability,
    RoofType,
    Season,
    SeismicZone,
    SkillTier,
    SoilCategory,
    WeatherCondition,
)
from griha.models.estimate import (
    Assumption,
    BillItem,
    CashFlowMonth,
    ConfidenceFactor,
    ConfidenceScore,
    CostBreakdown,
    CostLine,
    CostRange,
    Estimate,
    EstimateMetadata,
    FinishingQuantities,
    GeometryResult,
    MaterialLine,
    MaterialQuantities,
    PriceAdjustment,
    ProjectSummary,
    StructuralVolumes,
    Timeline,
    TimelinePhase,
    WallConfig,
)
from griha.models.project import Location, PlotArea, ProjectInput, RoomComposition

__all__ = [
    "AreaUnit",
    "Assumption",
    "BillItem",
    "CashFlowMonth",
    "Complexity",
    "ConcreteGrade",
    "Confidence",
    "ConfidenceFactor",
    "ConfidenceScore",
    "ConstructionType",
    "CostBreakdown",
    "CostLine",
    "CostRange",
    "Estimate",
    "EstimateMetadata",
    "FeatureFlag",
    "FinishingQuantities",
    "GeometryResult",
    "LaborAvailability",
    "Location",
    "MaterialCategory",
    "MaterialLine",
    "MaterialQuantities",
    "Phase",
    "PlotArea",
    "PriceAdjustment",
    "ProjectInput",
    "ProjectSummary",
    "QualityTier",
    "Reliability",
    "RoofType",
    "RoomComposition",
    "Season",
    "SeismicZone",
    "SkillTier",
    "SoilCategory",
    "StructuralVolumes",
    "Timeline",
    "TimelinePhase",
    "WallConfig",
    "WeatherCondition",
]
