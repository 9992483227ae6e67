"""Project input models for the Griha estimation engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from griha.data.standards import SQFT_PER_SQM, SQFT_PER_SQYD
from griha.models.enums import (
    AreaUnit,
    ConcreteGrade,
    ConstructionType,
    FeatureFlag,
    QualityTier,
    RoofType,
    SoilCategory,
    WeatherCondition,
)

_SQFT_PER_UNIT: dict[AreaUnit, float] = {
    AreaUnit.SQFT: 1.0,
    AreaUnit.SQM: SQFT_PER_SQM,
    AreaUnit.SQYD: SQFT_PER_SQYD,
}


class PlotArea(BaseModel):
    """A unit-tagged plot area."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(gt=0)
    unit: AreaUnit = AreaUnit.SQFT

    def to_sqft(self) -> float:
        return self.value * _SQFT_PER_UNIT[self.unit]


class Location(BaseModel):
    """State code + city; must resolve against the configuration snapshot."""

    model_config = ConfigDict(frozen=True)

    state: str = Field(min_length=1)
    city: str = Field(min_length=1)

    @field_validator("state", "city")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v.strip()

    @property
    def key(self) -> tuple[str, str]:
        """Normalised (state, city) lookup key."""
        return self.state.lower(), self.city.lower()


class RoomComposition(BaseModel):
    """Room counts for the house."""

    model_config = ConfigDict(frozen=True)

    bedrooms: int = Field(default=0, ge=0)
    bathrooms: int = Field(default=0, ge=0)
    kitchens: int = Field(default=0, ge=0)
    living: int = Field(default=0, ge=0)
    other: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.bedrooms + self.bathrooms + self.kitchens + self.living + self.other


class ProjectInput(BaseModel):
    """Input model describing the house to be estimated.

    Optional descriptors (construction type, roof type, soil category,
    start month, rooms) refine the estimate; leaving them out lowers the
    confidence score rather than failing the request.
    """

    model_config = ConfigDict(frozen=True)

    plot_area: PlotArea
    floors: int = Field(ge=1, le=4)
    location: Location
    quality_tier: QualityTier = QualityTier.STANDARD
    rooms: RoomComposition = Field(default_factory=RoomComposition)
    construction_type: ConstructionType | None = None
    roof_type: RoofType | None = None
    soil_category: SoilCategory | None = None
    concrete_grade: ConcreteGrade = ConcreteGrade.M20
    start_month: int | None = Field(default=None, ge=1, le=12)
    weather: WeatherCondition | None = None
    features: frozenset[FeatureFlag] = Field(default_factory=frozenset)
    include_contingency: bool = False

    @property
    def plot_area_sqft(self) -> float:
        return self.plot_area.to_sqft()

    @property
    def effective_soil(self) -> SoilCategory:
        """Soil category used for the foundation; medium when unspecified."""
        return self.soil_category or SoilCategory.MEDIUM
