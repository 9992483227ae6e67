"""Enums for the Griha domain models."""

from enum import StrEnum


class AreaUnit(StrEnum):
    """Units accepted for plot area."""

    SQFT = "sqft"
    SQM = "sqm"
    SQYD = "sqyd"


class QualityTier(StrEnum):
    """Construction grade levels affecting material and labor prices."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class ConstructionType(StrEnum):
    """Primary structural approach."""

    RCC_FRAME = "rcc_frame"
    LOAD_BEARING = "load_bearing"
    STEEL_FRAME = "steel_frame"


class RoofType(StrEnum):
    RCC_SLAB = "rcc_slab"
    SLOPED_TILE = "sloped_tile"
    METAL_SHEET = "metal_sheet"


class SoilCategory(StrEnum):
    """Soil bearing classes; drive the foundation depth."""

    GOOD = "good"
    MEDIUM = "medium"
    POOR = "poor"


class ConcreteGrade(StrEnum):
    M15 = "M15"
    M20 = "M20"
    M25 = "M25"


class SeismicZone(StrEnum):
    """Seismic zones, ordered from least to most severe."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"


class Season(StrEnum):
    WINTER = "winter"
    SUMMER = "summer"
    MONSOON = "monsoon"
    POST_MONSOON = "post_monsoon"


class WeatherCondition(StrEnum):
    FAVORABLE = "favorable"
    MONSOON = "monsoon"
    EXTREME = "extreme"


class Complexity(StrEnum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


class LaborAvailability(StrEnum):
    ABUNDANT = "abundant"
    NORMAL = "normal"
    SCARCE = "scarce"


class SkillTier(StrEnum):
    """Labor skill categories priced per square foot of built-up area."""

    SKILLED = "skilled"
    SEMI_SKILLED = "semi_skilled"
    UNSKILLED = "unskilled"


class MaterialCategory(StrEnum):
    """Material subcategories in the cost breakdown."""

    STRUCTURAL = "structural"
    MASONRY = "masonry"
    FINISHING = "finishing"
    MEP = "mep"


class Phase(StrEnum):
    """Construction phases in canonical order."""

    PLANNING = "planning"
    FOUNDATION = "foundation"
    STRUCTURE = "structure"
    MASONRY = "masonry"
    ROOFING = "roofing"
    MEP = "mep"
    PLASTERING = "plastering"
    FLOORING = "flooring"
    FINISHING = "finishing"


class FeatureFlag(StrEnum):
    """Optional add-ons billed as lump-sum snapshot items."""

    MODULAR_KITCHEN = "modular_kitchen"
    FALSE_CEILING = "false_ceiling"
    SOLAR_WATER_HEATER = "solar_water_heater"
    RAINWATER_HARVESTING = "rainwater_harvesting"
    BOREWELL = "borewell"


class Reliability(StrEnum):
    """Qualitative reliability label derived from the confidence score."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Confidence(StrEnum):
    """Confidence level for assumed values."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
