"""Expression tree for parsed conditions.

All nodes are immutable. ``pos`` records the source offset of the token a
node was built from; it is used for error markers only and never takes part
in equality.

``ExpressionList`` only exists between the structural parser and the
precedence resolver. A resolved tree never contains one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from cppcondition.parser.operators import CppOperator
from cppcondition.utils.numbers import Number, format_number


@dataclass(frozen=True)
class Variable:
    name: str
    pos: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NumberLiteral:
    value: Number
    pos: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Operator:
    """An operator node.

    Unary operators keep their single operand in ``left``. Before resolution
    an operator is a placeholder with neither side set.
    """

    operator: CppOperator
    left: Optional["CppExpression"] = None
    right: Optional["CppExpression"] = None
    pos: Optional[int] = field(default=None, compare=False, repr=False)

    @property
    def is_placeholder(self) -> bool:
        return self.left is None and self.right is None

    def __str__(self) -> str:
        if self.is_placeholder:
            return self.operator.symbol
        if self.right is None:
            return f"{self.operator.symbol}({self.left})"
        return f"({self.left}) {self.operator.symbol} ({self.right})"


@dataclass(frozen=True)
class FunctionCall:
    """Call syntax ``name(arg)``; ``argument`` is None for ``name()``."""

    name: str
    argument: Optional["CppExpression"] = None
    pos: Optional[int] = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.name}({self.argument if self.argument is not None else ''})"


@dataclass(frozen=True)
class ExpressionList:
    """Bracket-level grouping used before precedence resolution."""

    items: Tuple["CppExpression", ...] = ()
    pos: Optional[int] = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"


CppExpression = Union[Variable, NumberLiteral, Operator, FunctionCall, ExpressionList]


def contains_expression_list(expression: CppExpression) -> bool:
    """Return True if any intermediate list node is left in ``expression``."""
    pending = [expression]
    while pending:
        node = pending.pop()
        if isinstance(node, ExpressionList):
            return True
        if isinstance(node, Operator):
            pending.extend(side for side in (node.left, node.right) if side is not None)
        elif isinstance(node, FunctionCall) and node.argument is not None:
            pending.append(node.argument)
    return False
