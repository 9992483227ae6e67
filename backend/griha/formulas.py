"""Typed formula variants for construction standards.

Every tunable rule in the engine is one of a small closed set of formula
shapes rather than a free-form expression string:

* ``fixed``: a constant, ignoring the input.
* ``linear``: ``coefficient * x + intercept``.
* ``ratio``: ``x / divisor`` (daily-throughput style rules).
* ``stepped``: a bracket table; the first step whose bound admits ``x`` wins.
* ``lookup``: a keyed table (soil class, concrete grade, seismic zone...).

Formulas are pydantic models discriminated on ``kind``, so an admin layer
can publish them as JSON and :func:`parse_formula` turns that back into a
checked value before it ever reaches the engine.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class _FormulaBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class FixedFormula(_FormulaBase):
    kind: Literal["fixed"] = "fixed"
    value: float


class LinearFormula(_FormulaBase):
    kind: Literal["linear"] = "linear"
    coefficient: float
    intercept: float = 0.0


class RatioFormula(_FormulaBase):
    kind: Literal["ratio"] = "ratio"
    divisor: float = Field(gt=0)


class Step(_FormulaBase):
    """One bracket of a stepped formula.

    ``upper`` is the bracket's upper bound (``None`` means unbounded) and
    ``inclusive`` says whether ``x == upper`` still falls in this bracket.
    """

    upper: float | None = None
    inclusive: bool = False
    value: float


class SteppedFormula(_FormulaBase):
    kind: Literal["stepped"] = "stepped"
    steps: tuple[Step, ...]

    @model_validator(mode="after")
    def steps_are_ordered(self) -> SteppedFormula:
        if not self.steps:
            msg = "A stepped formula needs at least one step"
            raise ValueError(msg)
        bounds = [s.upper for s in self.steps]
        if bounds[-1] is not None:
            msg = "The last step of a stepped formula must be unbounded"
            raise ValueError(msg)
        finite = [b for b in bounds[:-1] if b is not None]
        if len(finite) != len(bounds) - 1 or finite != sorted(finite):
            msg = "Step bounds must be finite and ascending"
            raise ValueError(msg)
        return self


class LookupFormula(_FormulaBase):
    kind: Literal["lookup"] = "lookup"
    table: dict[str, float]
    default: float | None = None


Formula = Annotated[
    FixedFormula | LinearFormula | RatioFormula | SteppedFormula | LookupFormula,
    Field(discriminator="kind"),
]

_FORMULA_ADAPTER: TypeAdapter[Formula] = TypeAdapter(Formula)


def parse_formula(data: object) -> Formula:
    """Validate a JSON-like mapping into one of the typed formula variants."""
    return _FORMULA_ADAPTER.validate_python(data)


def evaluate(formula: Formula, x: float | str) -> float:
    """Evaluate ``formula`` for input ``x``.

    Lookup formulas take a string key; every other variant takes a number.

    Raises:
        KeyError: If a lookup key is absent and the formula has no default.
        TypeError: If ``x`` has the wrong type for the formula variant.
    """
    if isinstance(formula, LookupFormula):
        key = str(x)
        if key in formula.table:
            return formula.table[key]
        if formula.default is not None:
            return formula.default
        raise KeyError(key)

    if isinstance(x, str):
        msg = f"{formula.kind} formula expects a number, got {x!r}"
        raise TypeError(msg)

    if isinstance(formula, FixedFormula):
        return formula.value
    if isinstance(formula, LinearFormula):
        return formula.coefficient * x + formula.intercept
    if isinstance(formula, RatioFormula):
        return x / formula.divisor
    if isinstance(formula, SteppedFormula):
        for step in formula.steps:
            if step.upper is None:
                return step.value
            if x < step.upper or (step.inclusive and x == step.upper):
                return step.value
    msg = f"Unsupported formula: {formula!r}"
    raise TypeError(msg)
