"""Operator catalog for C preprocessor conditions.

Each operator carries its source symbol, a precedence number and its arity.
Lower precedence numbers bind looser and are resolved last, so the operator
with the lowest number in a list becomes the root of that list's subtree.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List


class CppOperator(Enum):
    """All operators recognized in ``#if``/``#elif`` conditions.

    Values are ``(symbol, precedence, unary)`` triples.
    """

    BOOL_OR = ("||", 1, False)
    BOOL_AND = ("&&", 2, False)

    BIN_OR = ("|", 3, False)
    BIN_XOR = ("^", 4, False)
    BIN_AND = ("&", 5, False)

    CMP_EQ = ("==", 6, False)
    CMP_NE = ("!=", 6, False)

    CMP_LT = ("<", 7, False)
    CMP_LE = ("<=", 7, False)
    CMP_GT = (">", 7, False)
    CMP_GE = (">=", 7, False)

    BIN_SHL = ("<<", 8, False)
    BIN_SHR = (">>", 8, False)

    INT_ADD = ("+", 9, False)
    INT_SUB = ("-", 9, False)

    INT_MUL = ("*", 10, False)
    INT_DIV = ("/", 10, False)
    INT_MOD = ("%", 10, False)

    BOOL_NOT = ("!", 11, True)
    BIN_INV = ("~", 11, True)
    INT_ADD_UNARY = ("+", 11, True)
    INT_SUB_UNARY = ("-", 11, True)
    INT_INC = ("++", 11, True)
    INT_DEC = ("--", 11, True)

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def precedence(self) -> int:
        return self.value[1]

    @property
    def is_unary(self) -> bool:
        return self.value[2]

    @property
    def is_postfix_capable(self) -> bool:
        """Only increment and decrement may follow their operand."""
        return self in (CppOperator.INT_INC, CppOperator.INT_DEC)

    @property
    def is_comparison(self) -> bool:
        return self in COMPARISON_OPERATORS

    def __str__(self) -> str:
        return self.name


COMPARISON_OPERATORS = frozenset(
    {
        CppOperator.CMP_EQ,
        CppOperator.CMP_NE,
        CppOperator.CMP_LT,
        CppOperator.CMP_LE,
        CppOperator.CMP_GT,
        CppOperator.CMP_GE,
    }
)

# Lexer lookup tables; two-character symbols are matched before one-character ones.
TWO_CHAR_OPERATORS: Dict[str, CppOperator] = {
    "&&": CppOperator.BOOL_AND,
    "||": CppOperator.BOOL_OR,
    "++": CppOperator.INT_INC,
    "--": CppOperator.INT_DEC,
    "==": CppOperator.CMP_EQ,
    "!=": CppOperator.CMP_NE,
    "<=": CppOperator.CMP_LE,
    ">=": CppOperator.CMP_GE,
    ">>": CppOperator.BIN_SHR,
    "<<": CppOperator.BIN_SHL,
}

ONE_CHAR_OPERATORS: Dict[str, CppOperator] = {
    "!": CppOperator.BOOL_NOT,
    "*": CppOperator.INT_MUL,
    "/": CppOperator.INT_DIV,
    "%": CppOperator.INT_MOD,
    "<": CppOperator.CMP_LT,
    ">": CppOperator.CMP_GT,
    "&": CppOperator.BIN_AND,
    "|": CppOperator.BIN_OR,
    "^": CppOperator.BIN_XOR,
    "~": CppOperator.BIN_INV,
}

# "+" and "-" depend on the previous token: (binary, unary)
SIGN_OPERATORS: Dict[str, List[CppOperator]] = {
    "+": [CppOperator.INT_ADD, CppOperator.INT_ADD_UNARY],
    "-": [CppOperator.INT_SUB, CppOperator.INT_SUB_UNARY],
}
