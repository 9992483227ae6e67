"""Calculation history store interface and in-memory implementation."""

from __future__ import annotations

import abc
import logging
import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from griha.models.estimate import Estimate  # noqa: TCH001 (pydantic resolves at runtime)
from griha.models.project import ProjectInput  # noqa: TCH001

logger = logging.getLogger(__name__)


class CalculationRecord(BaseModel):
    """The audit tuple handed to the history store for every estimate."""

    model_config = ConfigDict(frozen=True)

    calculation_id: str
    project: ProjectInput
    estimate: Estimate
    confidence_score: int
    config_version: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class CalculationStore(abc.ABC):
    """Abstract calculation history store."""

    @abc.abstractmethod
    def save(self, record: CalculationRecord) -> str:
        """Persist ``record`` and return its calculation id."""

    @abc.abstractmethod
    def get(self, calculation_id: str) -> CalculationRecord | None:
        """Return the record for ``calculation_id``, or None if unknown."""

    @staticmethod
    def new_id() -> str:
        return uuid.uuid4().hex


class InMemoryCalculationStore(CalculationStore):
    """Keeps records in a dict.  Suitable for tests and embedding callers."""

    def __init__(self) -> None:
        self._records: dict[str, CalculationRecord] = {}

    def save(self, record: CalculationRecord) -> str:
        if record.calculation_id in self._records:
            msg = f"Calculation '{record.calculation_id}' is already stored"
            raise ValueError(msg)
        self._records[record.calculation_id] = record
        logger.debug("Stored calculation %s", record.calculation_id)
        return record.calculation_id

    def get(self, calculation_id: str) -> CalculationRecord | None:
        return self._records.get(calculation_id)

    def list_ids(self) -> list[str]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
