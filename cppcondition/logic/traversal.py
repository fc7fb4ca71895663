"""Traversals over formula trees.

``find_variables`` and ``to_text`` accept both node families.
``evaluate`` only understands strict Boolean formulas and fails fast on
extended nodes.

Long ``&&``/``||`` chains produce trees as deep as the chain is long, so
traversals keep their own stacks instead of recursing per node.
"""

from __future__ import annotations

from typing import List, Mapping, Set, Tuple

from cppcondition.errors import UnsupportedFormulaError
from cppcondition.logic.formula import (
    BOOLEAN_TYPES,
    Conjunction,
    Disjunction,
    FalseFormula,
    Formula,
    Negation,
    TrueFormula,
    Variable,
)
from cppcondition.logic.non_boolean import Literal, Macro, NonBooleanOperator
from cppcondition.parser.operators import CppOperator

_ATOM_PRECEDENCE = 100

_BINARY_TYPES = (Conjunction, Disjunction, NonBooleanOperator)


def is_boolean(formula: Formula) -> bool:
    """Return True if ``formula`` only uses strict Boolean node kinds."""
    pending = [formula]
    while pending:
        node = pending.pop()
        if not isinstance(node, BOOLEAN_TYPES):
            return False
        if isinstance(node, (Conjunction, Disjunction)):
            pending.extend((node.left, node.right))
        elif isinstance(node, Negation):
            pending.append(node.formula)
    return True


def evaluate(formula: Formula, assignment: Mapping[str, bool]) -> bool:
    """Evaluate a strict Boolean formula.

    Every node is visited, so an extended node anywhere in the tree is
    reported even where short-circuiting would have skipped it.

    Args:
        formula: Formula built from strict node kinds only.
        assignment: Variable name to truth value; missing names are False.

    Raises:
        UnsupportedFormulaError: If an extended node is encountered.
    """
    values: List[bool] = []
    # (node, children_done)
    pending: List[Tuple[Formula, bool]] = [(formula, False)]

    while pending:
        node, children_done = pending.pop()
        if isinstance(node, TrueFormula):
            values.append(True)
        elif isinstance(node, FalseFormula):
            values.append(False)
        elif isinstance(node, Variable):
            values.append(bool(assignment.get(node.name, False)))
        elif isinstance(node, (Conjunction, Disjunction)):
            if not children_done:
                pending.extend(((node, True), (node.right, False), (node.left, False)))
                continue
            right = values.pop()
            left = values.pop()
            values.append(left and right if isinstance(node, Conjunction) else left or right)
        elif isinstance(node, Negation):
            if not children_done:
                pending.extend(((node, True), (node.formula, False)))
                continue
            values.append(not values.pop())
        else:
            raise UnsupportedFormulaError(
                f"{type(node).__name__} is not a Boolean formula and cannot be evaluated"
            )

    return values.pop()


def find_variables(formula: Formula) -> Set[str]:
    """Collect the names of all variables in ``formula``.

    Operands of non-Boolean operators and macro arguments are searched too;
    literals hold no variables.
    """
    found: Set[str] = set()
    pending = [formula]
    while pending:
        node = pending.pop()
        if isinstance(node, Variable):
            found.add(node.name)
        elif isinstance(node, _BINARY_TYPES):
            pending.extend((node.left, node.right))
        elif isinstance(node, Negation):
            pending.append(node.formula)
        elif isinstance(node, Macro):
            if node.argument is not None:
                pending.append(node.argument)
        elif not isinstance(node, (TrueFormula, FalseFormula, Literal)):
            raise TypeError(f"Unknown formula node: {node!r}")
    return found


def _precedence(formula: Formula) -> int:
    if isinstance(formula, Disjunction):
        return CppOperator.BOOL_OR.precedence
    if isinstance(formula, Conjunction):
        return CppOperator.BOOL_AND.precedence
    if isinstance(formula, NonBooleanOperator):
        return formula.operator.precedence
    if isinstance(formula, Negation):
        return CppOperator.BOOL_NOT.precedence
    return _ATOM_PRECEDENCE


def _symbol(formula: Formula) -> str:
    if isinstance(formula, Conjunction):
        return CppOperator.BOOL_AND.symbol
    if isinstance(formula, Disjunction):
        return CppOperator.BOOL_OR.symbol
    return formula.operator.symbol


def _is_prefixed(formula: Formula) -> bool:
    """True for operands whose text starts with a unary operator."""
    return isinstance(formula, Negation) or (
        isinstance(formula, Literal) and formula.text.startswith("-")
    )


def _wrap(formula: Formula, parenthesize: bool) -> str:
    text = to_text(formula)
    return f"({text})" if parenthesize else text


def to_text(formula: Formula) -> str:
    """Render ``formula`` as a C preprocessor condition.

    Parentheses are only added where precedence or left associativity
    require them, and around a unary operand that starts with a unary
    operator itself (``!(!A)``, ``!(-1)``), so the output parses back into
    an equal tree.
    """
    if isinstance(formula, TrueFormula):
        return "1"
    if isinstance(formula, FalseFormula):
        return "0"
    if isinstance(formula, Variable):
        return formula.name
    if isinstance(formula, Literal):
        return formula.text
    if isinstance(formula, Macro):
        argument = to_text(formula.argument) if formula.argument is not None else ""
        return f"{formula.name}({argument})"
    if isinstance(formula, Negation):
        inner = formula.formula
        parenthesize = _precedence(inner) < CppOperator.BOOL_NOT.precedence or _is_prefixed(inner)
        return "!" + _wrap(inner, parenthesize)
    if not isinstance(formula, _BINARY_TYPES):
        raise TypeError(f"Unknown formula node: {formula!r}")

    # Left operands that need no brackets are collected in a loop, so long
    # left-nested chains render without deep recursion.
    spine = [formula]
    current = formula.left
    while isinstance(current, _BINARY_TYPES) and _precedence(current) >= _precedence(spine[-1]):
        spine.append(current)
        current = current.left

    text = _wrap(current, _precedence(current) < _precedence(spine[-1]))
    for node in reversed(spine):
        right = _wrap(node.right, _precedence(node.right) <= _precedence(node))
        text = f"{text} {_symbol(node)} {right}"
    return text
