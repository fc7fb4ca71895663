"""Boolean interpreter: C preprocessor conditions to propositional formulas.

Only the Boolean part of a condition is supported directly: ``defined()``,
``&&``, ``||``, ``!`` and numeric literals. With fuzzy parsing enabled,
comparisons of a variable with a literal or another variable, and bare
variables, are encoded as synthesized variables such as ``A_eq_2`` or
``A_ne_0``.
"""

from __future__ import annotations

import logging
from typing import Optional

from cppcondition.config.schema import CppParsingSettings, InvalidConditionHandling
from cppcondition.conditions.macros import translate_macro
from cppcondition.errors import ExpressionFormatError, SemanticError
from cppcondition.logic.formula import (
    FALSE,
    TRUE,
    BooleanFormula,
    Conjunction,
    Disjunction,
    Negation,
    Variable,
)
from cppcondition.parser import ast
from cppcondition.parser.facade import CppParser
from cppcondition.parser.operators import CppOperator
from cppcondition.utils.numbers import format_number

logger = logging.getLogger("cppcondition.conditions.boolean")

ERROR_VARIABLE = Variable("PARSING_ERROR")

_CONNECTIVES = {
    CppOperator.BOOL_AND: Conjunction,
    CppOperator.BOOL_OR: Disjunction,
}

# Relation names for "variable <op> value"; the second entry is used when the
# literal stands on the left and the relation has to be mirrored.
_COMPARISON_NAMES = {
    CppOperator.CMP_EQ: ("_eq_", "_eq_"),
    CppOperator.CMP_NE: ("_ne_", "_ne_"),
    CppOperator.CMP_LT: ("_lt_", "_gt_"),
    CppOperator.CMP_LE: ("_le_", "_ge_"),
    CppOperator.CMP_GT: ("_gt_", "_lt_"),
    CppOperator.CMP_GE: ("_ge_", "_le_"),
}


class CppConditionParser:
    """Parses conditions into strict Boolean formulas.

    Args:
        handle_linux_macros: Translate IS_ENABLED, IS_MODULE and IS_BUILTIN.
        fuzzy_parsing: Encode comparisons and bare variables as variables.
        invalid_condition: What to return for conditions that can't be parsed.

    Instances keep the condition being parsed for error messages and must
    not be shared between threads.
    """

    def __init__(
        self,
        handle_linux_macros: bool = False,
        fuzzy_parsing: bool = False,
        invalid_condition: InvalidConditionHandling = InvalidConditionHandling.EXCEPTION,
    ) -> None:
        self.handle_linux_macros = handle_linux_macros
        self.fuzzy_parsing = fuzzy_parsing
        self.invalid_condition = invalid_condition
        self._parser = CppParser()
        self._expression: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: CppParsingSettings) -> "CppConditionParser":
        return cls(
            handle_linux_macros=settings.handle_linux_macros,
            fuzzy_parsing=settings.fuzzy_parsing,
            invalid_condition=settings.invalid_condition,
        )

    def parse(self, expression: str) -> BooleanFormula:
        """Parse ``expression`` into a Boolean formula.

        Args:
            expression: Condition text after ``#if``/``#elif``.

        Returns:
            The formula; for invalid conditions ``TRUE`` or ``ERROR_VARIABLE``
            when the configured handling says so.

        Raises:
            ExpressionFormatError: If the condition is invalid and the handling
                is ``EXCEPTION``.
        """
        self._expression = expression
        try:
            return self._interpret(expression)
        except ExpressionFormatError as exc:
            if self.invalid_condition == InvalidConditionHandling.TRUE:
                logger.warning("Replacing invalid condition %r with true: %s", expression, exc.message)
                return TRUE
            if self.invalid_condition == InvalidConditionHandling.ERROR_VARIABLE:
                logger.warning(
                    "Replacing invalid condition %r with %s: %s",
                    expression, ERROR_VARIABLE.name, exc.message,
                )
                return ERROR_VARIABLE
            raise
        finally:
            self._expression = None

    def _interpret(self, expression: str) -> BooleanFormula:
        tree = self._parser.parse(expression)
        try:
            return self.translate(tree)
        except RecursionError as exc:
            raise SemanticError("Condition is nested too deeply", expression) from exc

    def translate(self, node: ast.CppExpression) -> BooleanFormula:
        """Translate a resolved expression tree.

        Raises:
            SemanticError: If the tree uses a construct this interpreter
                does not support with the current settings.
        """
        if isinstance(node, ast.FunctionCall):
            return self._translate_call(node)
        if isinstance(node, ast.Variable):
            if self.fuzzy_parsing:
                return Variable(node.name + "_ne_0")
            raise self._error(f"Found variable outside of defined() call: {node.name}", node)
        if isinstance(node, ast.NumberLiteral):
            return TRUE if node.value != 0 else FALSE
        if isinstance(node, ast.Operator):
            return self._translate_operator(node)
        raise self._error(f"Unexpected expression: {node}", node)

    def _error(self, message: str, node: ast.CppExpression) -> SemanticError:
        markers = [node.pos] if node.pos is not None else []
        return SemanticError(message, self._expression, markers)

    def _translate_call(self, call: ast.FunctionCall) -> BooleanFormula:
        result = translate_macro(call, self.handle_linux_macros, self._expression)
        if result is None:
            raise self._error(f"Unsupported function/macro: {call.name}", call)
        return result

    def _translate_operator(self, node: ast.Operator) -> BooleanFormula:
        op = node.operator

        if op in _CONNECTIVES:
            return self._translate_connectives(node)
        if op == CppOperator.BOOL_NOT:
            return Negation(self.translate(node.left))
        if op.is_comparison:
            return self._fuzzy_comparison(node)
        if op == CppOperator.INT_SUB_UNARY and isinstance(node.left, ast.NumberLiteral):
            # -LITERAL; everything != 0 is true
            return TRUE if -node.left.value != 0 else FALSE

        raise self._error(f"Unsupported operator: {op}", node)

    def _translate_connectives(self, node: ast.Operator) -> BooleanFormula:
        """Translate a ``&&``/``||`` chain, walking its left spine in a loop."""
        spine = []
        current: ast.CppExpression = node
        while isinstance(current, ast.Operator) and current.operator in _CONNECTIVES:
            spine.append(current)
            current = current.left

        result = self.translate(current)
        for parent in reversed(spine):
            result = _CONNECTIVES[parent.operator](result, self.translate(parent.right))
        return result

    def _fuzzy_comparison(self, node: ast.Operator) -> Variable:
        op = node.operator
        if not self.fuzzy_parsing:
            raise self._error(f"{op} is only supported if fuzzy parsing is enabled", node)

        left, right = node.left, node.right
        names = _COMPARISON_NAMES[op]

        if isinstance(left, ast.Variable) and isinstance(right, ast.NumberLiteral):
            name = left.name + names[0] + _value_suffix(right)
        elif isinstance(left, ast.NumberLiteral) and isinstance(right, ast.Variable):
            name = right.name + names[1] + _value_suffix(left)
        elif isinstance(left, ast.Variable) and isinstance(right, ast.Variable):
            name = left.name + names[0] + right.name
        else:
            raise self._error(
                "Can only fuzzy-parse variables compared with integer literals or other variables",
                node,
            )
        return Variable(name)


def _value_suffix(literal: ast.NumberLiteral) -> str:
    return format_number(literal.value).replace(".", "_")
