"""Custom exception hierarchy for the Griha estimation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from griha.validation import FieldError


class GrihaError(Exception):
    """Base exception for all Griha errors."""


class InputValidationError(GrihaError):
    """Raised when a project input fails validation.

    Carries every field problem found, so callers can report them all at
    once. No partial estimate is ever produced alongside this error.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors) or "<input>"
        super().__init__(f"Invalid project input: {fields}")


class CalculationError(GrihaError):
    """Raised when the engine cannot produce an estimate."""


class InvalidGeometry(CalculationError):
    """Raised when plot area, floors, or derived volumes are unusable."""


class ConfigurationError(CalculationError):
    """Base for problems with the configuration snapshot data."""


class InvalidConfiguration(ConfigurationError):
    """Raised when a required snapshot entry is missing."""

    def __init__(self, key: str, detail: str = "") -> None:
        self.key = key
        msg = f"Missing configuration entry '{key}'"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class OutOfRangeMultiplier(ConfigurationError):
    """Raised when a snapshot multiplier lies outside the sane band."""

    def __init__(self, key: str, value: float, low: float, high: float) -> None:
        self.key = key
        self.value = value
        super().__init__(
            f"Multiplier '{key}' = {value} is outside the allowed band "
            f"[{low}, {high}]"
        )


class EstimateInvariantError(CalculationError, AssertionError):
    """Raised when a computed estimate breaks an arithmetic invariant.

    This signals a formula bug, never a user or data problem.
    """
