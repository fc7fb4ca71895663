"""Extended formula nodes that keep non-Boolean parts of a condition.

These nodes only come out of the non-Boolean interpreter. Consumers of
strict Boolean formulas reject them (see ``cppcondition.logic.traversal``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from cppcondition.logic.formula import Formula
from cppcondition.parser.operators import CppOperator


@dataclass(frozen=True)
class Literal:
    """Numeric literal in its textual form, e.g. ``"2"`` or ``"-4.2"``."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Macro:
    """Call of a macro the interpreter does not translate, e.g. ``func(A)``."""

    name: str
    argument: Optional[Formula] = None

    def __str__(self) -> str:
        return f"{self.name}({self.argument if self.argument is not None else ''})"


@dataclass(frozen=True)
class NonBooleanOperator:
    """Arithmetic, bitwise or comparison operator kept as-is.

    Equality and hashing consider the operands only; two nodes that differ
    only in ``operator`` compare equal.
    """

    left: Formula
    operator: CppOperator = field(compare=False)
    right: Formula

    def __str__(self) -> str:
        return f"({self.left}) {self.operator.symbol} ({self.right})"
