"""Structural parser: token sequence to nested expression lists."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from cppcondition.errors import StructureError
from cppcondition.parser.ast import (
    CppExpression,
    ExpressionList,
    NumberLiteral,
    Operator,
    Variable,
)
from cppcondition.parser.tokens import (
    BracketToken,
    CppToken,
    IdentifierToken,
    LiteralToken,
    OperatorToken,
)


def _to_node(token: CppToken) -> CppExpression:
    if isinstance(token, IdentifierToken):
        return Variable(token.name, pos=token.pos)
    if isinstance(token, OperatorToken):
        return Operator(token.operator, pos=token.pos)
    if isinstance(token, LiteralToken):
        return NumberLiteral(token.value, pos=token.pos)
    raise TypeError(f"Unexpected token: {token!r}")


def build_structure(tokens: Sequence[CppToken], expression: str) -> CppExpression:
    """Group tokens into nested lists following the bracket structure.

    Args:
        tokens: Lexer output.
        expression: Original text, used for error rendering.

    Returns:
        The root ``ExpressionList``, or its only element if it has exactly one.

    Raises:
        StructureError: If brackets are unbalanced.
    """
    # Each frame holds the opening bracket position and the items collected so far.
    stack: List[Tuple[int, List[CppExpression]]] = [(0, [])]

    for token in tokens:
        if isinstance(token, BracketToken):
            if token.is_opening:
                stack.append((token.pos, []))
                continue

            if len(stack) == 1:
                raise StructureError(
                    "Unbalanced brackets (too many closing)", expression, [token.pos]
                )
            start, items = stack.pop()
            stack[-1][1].append(ExpressionList(tuple(items), pos=start))
            continue

        stack[-1][1].append(_to_node(token))

    if len(stack) != 1:
        last = tokens[-1]
        raise StructureError(
            "Unbalanced brackets (missing closing)", expression, [last.pos + last.length]
        )

    root_items = stack[0][1]
    if len(root_items) == 1:
        return root_items[0]
    return ExpressionList(tuple(root_items), pos=0)
