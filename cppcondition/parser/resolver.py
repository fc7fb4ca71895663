"""Operator-precedence resolution.

Turns the call-resolved list structure into a single expression tree. For
every list, the operator with the loosest binding becomes the root and the
elements on either side are resolved recursively.

Ties between operators of equal precedence go to the rightmost one, which
makes chains like ``A - B - C`` bind as ``(A - B) - C``. The same rule holds
for unary operators, so stacked prefixes such as ``!!A`` are rejected and
need brackets: ``!(!A)``.

A chain of binary operators sharing the loosest precedence is split at all
of them at once and folded from the left. This yields the same tree as
resolving the rightmost operator first, without one level of recursion per
operator.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, cast

from cppcondition.errors import ResolutionError
from cppcondition.parser.ast import (
    CppExpression,
    ExpressionList,
    FunctionCall,
    Operator,
)


class PrecedenceResolver:
    """Resolves nested expression lists into one operator tree.

    Args:
        expression: Original condition text, used for error rendering.
    """

    def __init__(self, expression: str = "") -> None:
        self.expression = expression

    def _error(self, message: str, pos: Optional[int] = None) -> ResolutionError:
        return ResolutionError(message, self.expression, [] if pos is None else [pos])

    def resolve(self, node: CppExpression) -> CppExpression:
        """Resolve ``node`` and everything below it.

        Raises:
            ResolutionError: If an operand is missing, no operator joins the
                elements of a list, or a unary operator is misplaced.
        """
        if isinstance(node, ExpressionList):
            return self._resolve_list(node.items, node.pos)

        if isinstance(node, FunctionCall):
            if node.argument is None:
                return node
            return FunctionCall(node.name, self.resolve(node.argument), pos=node.pos)

        if isinstance(node, Operator) and node.is_placeholder:
            raise self._error(f"Missing operand for operator {node.operator.symbol}", node.pos)

        return node

    def _resolve_list(self, items: Sequence[CppExpression], pos: Optional[int]) -> CppExpression:
        if not items:
            raise self._error("Expected expression", pos)
        if len(items) == 1:
            return self.resolve(items[0])

        index = self._find_root_operator(items)
        if index == -1:
            raise self._error("Couldn't find operator", items[1].pos)

        root = cast(Operator, items[index])
        if root.operator.is_unary:
            return self._bind_unary(items, index, root)
        return self._bind_binary(items, root.operator.precedence)

    @staticmethod
    def _find_root_operator(items: Sequence[CppExpression]) -> int:
        best_index = -1
        best_precedence = None

        for i, item in enumerate(items):
            if not isinstance(item, Operator):
                continue
            precedence = item.operator.precedence
            if best_precedence is None or precedence <= best_precedence:
                best_index, best_precedence = i, precedence

        return best_index

    def _bind_unary(
        self, items: Sequence[CppExpression], index: int, root: Operator
    ) -> Operator:
        if index == 0:
            operand = items[1:]
        elif root.operator.is_postfix_capable and index == len(items) - 1:
            operand = items[:-1]
        else:
            raise self._error("Found elements on wrong side of unary operator", root.pos)

        return Operator(root.operator, self._resolve_list(operand, root.pos), pos=root.pos)

    def _bind_binary(self, items: Sequence[CppExpression], precedence: int) -> Operator:
        splits: List[int] = [
            i for i, item in enumerate(items)
            if isinstance(item, Operator) and item.operator.precedence == precedence
        ]
        bounds = [-1, *splits, len(items)]
        parts = [items[start + 1:end] for start, end in zip(bounds, bounds[1:])]

        for n, part in enumerate(parts):
            if not part:
                # part n is the right side of operator n - 1, or the left side of operator 0
                blamed = cast(Operator, items[splits[max(n - 1, 0)]])
                raise self._error(
                    "Didn't find elements on both sides of binary operator", blamed.pos
                )

        first = cast(Operator, items[splits[0]])
        result: CppExpression = self._resolve_list(parts[0], first.pos)
        for split, part in zip(splits, parts[1:]):
            root = cast(Operator, items[split])
            result = Operator(
                root.operator, result, self._resolve_list(part, root.pos), pos=root.pos
            )
        return cast(Operator, result)
