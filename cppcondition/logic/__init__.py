"""Propositional formula model and its non-Boolean extension."""

from .formula import (
    FALSE,
    TRUE,
    BooleanFormula,
    Conjunction,
    Disjunction,
    FalseFormula,
    Formula,
    Negation,
    TrueFormula,
    Variable,
    and_,
    not_,
    or_,
)
from .non_boolean import Literal, Macro, NonBooleanOperator
from .traversal import evaluate, find_variables, is_boolean, to_text

__all__ = [
    "FALSE",
    "TRUE",
    "BooleanFormula",
    "Conjunction",
    "Disjunction",
    "FalseFormula",
    "Formula",
    "Literal",
    "Macro",
    "Negation",
    "NonBooleanOperator",
    "TrueFormula",
    "Variable",
    "and_",
    "evaluate",
    "find_variables",
    "is_boolean",
    "not_",
    "or_",
    "to_text",
]
