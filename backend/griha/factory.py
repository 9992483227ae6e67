"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from griha.config import EngineSettings
from griha.data.seed import SEED_SNAPSHOT
from griha.engine import EstimationEngine

if TYPE_CHECKING:
    from griha.data.store import CalculationStore


def create_default_engine(store: CalculationStore | None = None) -> EstimationEngine:
    """Create an EstimationEngine wired up with the seed snapshot.

    Settings come from ``GRIHA_*`` environment variables (and a ``.env``
    file if present), falling back to the built-in defaults.

    Example::

        from griha import create_default_engine

        engine = create_default_engine()
        estimate = engine.estimate(project)
    """
    return EstimationEngine(SEED_SNAPSHOT, EngineSettings.from_env(), store=store)
