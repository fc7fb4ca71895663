"""Function-call detection on the nested list structure.

A name directly followed by a bracketed list is a call: ``name(...)``.
``defined NAME`` without brackets is accepted as ``defined(NAME)``.
"""

from __future__ import annotations

from typing import List, Optional

from cppcondition.parser.ast import (
    CppExpression,
    ExpressionList,
    FunctionCall,
    Variable,
)

DEFINED = "defined"


def _call_argument(arguments: ExpressionList) -> Optional[CppExpression]:
    """Unwrap a call's argument list.

    An empty list means no argument, a single element is the argument
    itself. Longer lists are kept for the resolver, which either reduces
    them to one expression or rejects them.
    """
    if len(arguments) == 0:
        return None
    if len(arguments) == 1:
        return arguments.items[0]
    return arguments


def detect_calls(expression: CppExpression) -> CppExpression:
    """Return a copy of ``expression`` with calls merged into ``FunctionCall`` nodes.

    Nested lists are processed before their parent is scanned.
    """
    if not isinstance(expression, ExpressionList):
        return expression

    items = [detect_calls(item) for item in expression.items]
    merged: List[CppExpression] = []
    i = 0
    while i < len(items):
        current = items[i]
        following = items[i + 1] if i + 1 < len(items) else None

        if isinstance(current, Variable) and isinstance(following, ExpressionList):
            merged.append(FunctionCall(current.name, _call_argument(following), pos=current.pos))
            i += 2
        elif (
            isinstance(current, Variable)
            and current.name == DEFINED
            and isinstance(following, Variable)
        ):
            merged.append(FunctionCall(DEFINED, following, pos=current.pos))
            i += 2
        else:
            merged.append(current)
            i += 1

    return ExpressionList(tuple(merged), pos=expression.pos)
