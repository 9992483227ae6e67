"""Configuration data layer for the Griha estimation engine."""

from griha.data.repository import SnapshotRepository
from griha.data.snapshot import (
    ConfigurationSnapshot,
    LaborRate,
    MaterialPrice,
    RegionalIndex,
)

__all__ = [
    "ConfigurationSnapshot",
    "LaborRate",
    "MaterialPrice",
    "RegionalIndex",
    "SnapshotRepository",
]
