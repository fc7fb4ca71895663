"""Strict propositional formulas.

``TRUE``, ``FALSE``, ``Variable``, ``Conjunction``, ``Disjunction`` and
``Negation`` form the Boolean node family that SAT and logic tooling
understand. Two variables denote the same proposition iff their names are
equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from cppcondition.logic.non_boolean import Literal, Macro, NonBooleanOperator


@dataclass(frozen=True)
class TrueFormula:
    def __str__(self) -> str:
        return "1"


@dataclass(frozen=True)
class FalseFormula:
    def __str__(self) -> str:
        return "0"


TRUE = TrueFormula()
FALSE = FalseFormula()


@dataclass(frozen=True)
class Variable:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Conjunction:
    left: "Formula"
    right: "Formula"

    def __str__(self) -> str:
        return f"({self.left}) && ({self.right})"


@dataclass(frozen=True)
class Disjunction:
    left: "Formula"
    right: "Formula"

    def __str__(self) -> str:
        return f"({self.left}) || ({self.right})"


@dataclass(frozen=True)
class Negation:
    formula: "Formula"

    def __str__(self) -> str:
        return f"!({self.formula})"


BooleanFormula = Union[TrueFormula, FalseFormula, Variable, Conjunction, Disjunction, Negation]
Formula = Union[BooleanFormula, "Literal", "Macro", "NonBooleanOperator"]

BOOLEAN_TYPES = (TrueFormula, FalseFormula, Variable, Conjunction, Disjunction, Negation)

FormulaLike = Union[str, "Formula"]


def _coerce(value: FormulaLike) -> "Formula":
    return Variable(value) if isinstance(value, str) else value


def and_(first: FormulaLike, second: FormulaLike, *rest: FormulaLike) -> Conjunction:
    """Left-folded conjunction; strings become variables."""
    operands = [_coerce(op) for op in (first, second, *rest)]
    return reduce(Conjunction, operands)


def or_(first: FormulaLike, second: FormulaLike, *rest: FormulaLike) -> Disjunction:
    """Left-folded disjunction; strings become variables."""
    operands = [_coerce(op) for op in (first, second, *rest)]
    return reduce(Disjunction, operands)


def not_(operand: FormulaLike) -> Negation:
    return Negation(_coerce(operand))
