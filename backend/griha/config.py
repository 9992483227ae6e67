"""Engine settings, loaded from the environment or a ``.env`` file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

_ENV_PREFIX = "GRIHA_"


class EngineSettings(BaseModel):
    """Tunable percentages and thresholds for the engine.

    Equipment, overhead, and contingency are percentages of the
    materials + labor subtotal and must stay inside their bands.
    """

    model_config = ConfigDict(frozen=True)

    equipment_pct: float = Field(default=4.0, ge=3.0, le=5.0)
    overhead_pct: float = Field(default=10.0, ge=8.0, le=12.0)
    contingency_pct: float = Field(default=12.0, ge=10.0, le=15.0)
    stale_after_days: int = Field(default=90, gt=0)
    estimate_validity_days: int = Field(default=30, gt=0)
    multiplier_min: float = Field(default=0.5, gt=0)
    multiplier_max: float = Field(default=3.0, gt=0)

    @model_validator(mode="after")
    def band_is_ordered(self) -> EngineSettings:
        if self.multiplier_min >= self.multiplier_max:
            msg = "multiplier_min must be below multiplier_max"
            raise ValueError(msg)
        return self

    @property
    def multiplier_band(self) -> tuple[float, float]:
        return self.multiplier_min, self.multiplier_max

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> EngineSettings:
        """Build settings from ``GRIHA_*`` environment variables.

        Values from ``env_file`` (or a ``.env`` in the working directory)
        are loaded first; variables already set in the environment win.
        """
        load_dotenv(env_file if env_file is not None else Path.cwd() / ".env")

        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{_ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip()

        if values:
            logger.debug("Engine settings overridden from environment: %s", sorted(values))
        return cls.model_validate(values)
