"""Boundary validation for project input.

Validation is all-or-nothing: every problem is collected into a list of
:class:`FieldError` and raised together as :class:`InputValidationError`
before any estimation stage runs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from griha.data.standards import MAX_PLOT_AREA_SQFT, MIN_PLOT_AREA_SQFT
from griha.exceptions import InputValidationError
from griha.models.project import ProjectInput

if TYPE_CHECKING:
    from griha.data.repository import SnapshotRepository


class FieldError(BaseModel):
    """One input problem: dotted field path, human message, machine code."""

    field: str
    message: str
    code: str


def _from_pydantic(exc: ValidationError) -> list[FieldError]:
    errors: list[FieldError] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<input>"
        errors.append(FieldError(field=loc, message=err["msg"], code=err["type"]))
    return errors


def _unknown_location(state: str, city: str) -> FieldError:
    return FieldError(
        field="location",
        message=f"No price data for {city}, {state}; choose a supported city",
        code="unknown_location",
    )


def _check_raw_location(
    data: Mapping[str, Any],
    errors: list[FieldError],
    repository: SnapshotRepository,
) -> list[FieldError]:
    """Location check for input that failed parsing elsewhere.

    Skipped when the location itself is malformed, since that is already
    reported.
    """
    if any(e.field == "location" or e.field.startswith("location.") for e in errors):
        return []
    location = data.get("location")
    if not isinstance(location, Mapping):
        return []
    state, city = location.get("state"), location.get("city")
    if not isinstance(state, str) or not isinstance(city, str):
        return []
    if repository.has_region(state, city):
        return []
    return [_unknown_location(state.strip(), city.strip())]


def check_project(
    project: ProjectInput, repository: SnapshotRepository
) -> list[FieldError]:
    """Semantic checks that need unit conversion or the snapshot."""
    errors: list[FieldError] = []

    sqft = project.plot_area_sqft
    if not (MIN_PLOT_AREA_SQFT <= sqft <= MAX_PLOT_AREA_SQFT):
        errors.append(
            FieldError(
                field="plot_area.value",
                message=(
                    f"Plot area must be between {MIN_PLOT_AREA_SQFT:,.0f} and "
                    f"{MAX_PLOT_AREA_SQFT:,.0f} sq.ft, got {sqft:,.1f} sq.ft"
                ),
                code="out_of_range",
            )
        )

    location = project.location
    if not repository.has_region(location.state, location.city):
        errors.append(_unknown_location(location.state, location.city))

    return errors


def validate_project_input(
    data: ProjectInput | Mapping[str, Any],
    repository: SnapshotRepository,
) -> ProjectInput:
    """Parse and check ``data``, returning a valid :class:`ProjectInput`.

    Raises:
        InputValidationError: With every field problem found.
    """
    if isinstance(data, ProjectInput):
        project = data
    else:
        try:
            project = ProjectInput.model_validate(data)
        except ValidationError as exc:
            errors = _from_pydantic(exc)
            errors.extend(_check_raw_location(data, errors, repository))
            raise InputValidationError(errors) from exc

    errors = check_project(project, repository)
    if errors:
        raise InputValidationError(errors)
    return project
