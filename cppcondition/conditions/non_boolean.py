"""Non-Boolean interpreter: keeps literals, macros and raw operators.

The Boolean skeleton (``&&``, ``||``, ``!``, ``defined()`` and the Linux
macros) is translated like the Boolean interpreter does. Everything else
that is syntactically valid is preserved: variables stay variables,
numbers become ``Literal`` nodes, comparisons and arithmetic become
``NonBooleanOperator`` nodes and unknown calls become ``Macro`` nodes.
"""

from __future__ import annotations

from typing import Optional

from cppcondition.config.schema import CppParsingSettings
from cppcondition.conditions.macros import is_known_macro, translate_macro
from cppcondition.errors import SemanticError
from cppcondition.logic.formula import (
    Conjunction,
    Disjunction,
    Formula,
    Negation,
    Variable,
)
from cppcondition.logic.non_boolean import Literal, Macro, NonBooleanOperator
from cppcondition.parser import ast
from cppcondition.parser.facade import CppParser
from cppcondition.parser.operators import CppOperator
from cppcondition.utils.numbers import format_number


class CppNonBooleanConditionParser:
    """Parses conditions into extended formulas.

    Args:
        handle_linux_macros: Translate IS_ENABLED, IS_MODULE and IS_BUILTIN;
            when off they are kept as ``Macro`` nodes.

    Invalid conditions always raise; there is no substitution policy.
    """

    def __init__(self, handle_linux_macros: bool = False) -> None:
        self.handle_linux_macros = handle_linux_macros
        self._parser = CppParser()
        self._expression: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: CppParsingSettings) -> "CppNonBooleanConditionParser":
        return cls(handle_linux_macros=settings.handle_linux_macros)

    def parse(self, expression: str) -> Formula:
        """Parse ``expression`` into an extended formula.

        Raises:
            ExpressionFormatError: If the condition is invalid.
        """
        self._expression = expression
        try:
            tree = self._parser.parse(expression)
            try:
                return self.translate(tree)
            except RecursionError as exc:
                raise SemanticError("Condition is nested too deeply", expression) from exc
        finally:
            self._expression = None

    def translate(self, node: ast.CppExpression) -> Formula:
        if isinstance(node, ast.FunctionCall):
            return self._translate_call(node)
        if isinstance(node, ast.Variable):
            return Variable(node.name)
        if isinstance(node, ast.NumberLiteral):
            return Literal(format_number(node.value))
        if isinstance(node, ast.Operator):
            return self._translate_operator(node)
        raise self._error(f"Unexpected expression: {node}", node)

    def _error(self, message: str, node: ast.CppExpression) -> SemanticError:
        markers = [node.pos] if node.pos is not None else []
        return SemanticError(message, self._expression, markers)

    def _translate_call(self, call: ast.FunctionCall) -> Formula:
        if is_known_macro(call.name, self.handle_linux_macros):
            return translate_macro(call, self.handle_linux_macros, self._expression)

        argument = self.translate(call.argument) if call.argument is not None else None
        return Macro(call.name, argument)

    def _translate_operator(self, node: ast.Operator) -> Formula:
        op = node.operator

        if op == CppOperator.BOOL_NOT:
            return Negation(self.translate(node.left))
        if op == CppOperator.INT_SUB_UNARY and isinstance(node.left, ast.NumberLiteral):
            return Literal("-" + format_number(node.left.value))
        if node.right is not None:
            return self._translate_binary(node)

        raise self._error(f"Unsupported operator: {op}", node)

    def _translate_binary(self, node: ast.Operator) -> Formula:
        """Translate a chain of binary operators, walking its left spine in a loop."""
        spine = []
        current: ast.CppExpression = node
        while isinstance(current, ast.Operator) and current.right is not None:
            spine.append(current)
            current = current.left

        result = self.translate(current)
        for parent in reversed(spine):
            right = self.translate(parent.right)
            if parent.operator == CppOperator.BOOL_AND:
                result = Conjunction(result, right)
            elif parent.operator == CppOperator.BOOL_OR:
                result = Disjunction(result, right)
            else:
                result = NonBooleanOperator(result, parent.operator, right)
        return result
