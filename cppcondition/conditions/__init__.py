"""Interpreters from resolved expression trees to formulas."""

from .boolean import ERROR_VARIABLE, CppConditionParser
from .non_boolean import CppNonBooleanConditionParser

__all__ = [
    "ERROR_VARIABLE",
    "CppConditionParser",
    "CppNonBooleanConditionParser",
]
