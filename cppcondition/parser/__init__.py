"""Parsing pipeline for C preprocessor conditions.

lexer -> structural parser -> call detection -> precedence resolution
"""

from .ast import (
    CppExpression,
    ExpressionList,
    FunctionCall,
    NumberLiteral,
    Operator,
    Variable,
)
from .facade import CppParser
from .lexer import lex
from .operators import CppOperator

__all__ = [
    "CppExpression",
    "CppOperator",
    "CppParser",
    "ExpressionList",
    "FunctionCall",
    "NumberLiteral",
    "Operator",
    "Variable",
    "lex",
]
