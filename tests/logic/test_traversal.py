"""Tests for formula traversals."""

from __future__ import annotations

import pytest

from cppcondition.errors import UnsupportedFormulaError
from cppcondition.logic import (
    FALSE,
    TRUE,
    Literal,
    Macro,
    NonBooleanOperator,
    Variable,
    and_,
    evaluate,
    find_variables,
    is_boolean,
    not_,
    or_,
    to_text,
)
from cppcondition.parser.operators import CppOperator


def test_evaluate_boolean_formula() -> None:
    """Missing variables evaluate to False."""
    formula = and_("A", or_(not_("B"), "C"))

    assert evaluate(formula, {"A": True})
    assert not evaluate(formula, {"A": True, "B": True})
    assert evaluate(formula, {"A": True, "B": True, "C": True})
    assert not evaluate(formula, {})
    assert evaluate(TRUE, {})
    assert not evaluate(FALSE, {})


def test_evaluate_rejects_extended_nodes() -> None:
    """Consumers of strict formulas fail fast on extended nodes."""
    formula = and_("A", NonBooleanOperator(Variable("B"), CppOperator.CMP_GT, Literal("2")))

    with pytest.raises(UnsupportedFormulaError):
        evaluate(formula, {"A": True})
    with pytest.raises(TypeError):
        evaluate(Macro("func"), {})


def test_is_boolean() -> None:
    """Any extended node makes the formula non-Boolean."""
    assert is_boolean(and_("A", not_(TRUE)))
    assert not is_boolean(or_("A", not_(Literal("1"))))
    assert not is_boolean(Macro("func", Variable("A")))


def test_find_variables_in_all_node_kinds() -> None:
    """Variables below operators, macros and negations are found."""
    formula = and_(
        or_("A", not_("B")),
        NonBooleanOperator(Macro("func", Variable("C")), CppOperator.CMP_EQ, Literal("1")),
        Macro("bare"),
    )

    assert find_variables(formula) == {"A", "B", "C"}


def test_find_variables_without_variables() -> None:
    """Constants and literals contain no variables."""
    assert find_variables(TRUE) == set()
    assert find_variables(Literal("3")) == set()


@pytest.mark.parametrize(
    ("formula", "expected"),
    [
        (and_("A", "B", "C"), "A && B && C"),
        (and_("A", or_("B", "C")), "A && (B || C)"),
        (or_(and_("A", "B"), "C"), "A && B || C"),
        (not_(and_("A", "B")), "!(A && B)"),
        (not_(not_("A")), "!(!A)"),
        (not_(Literal("-2")), "!(-2)"),
        (not_(Literal("2")), "!2"),
        (and_(TRUE, FALSE), "1 && 0"),
        (Macro("func"), "func()"),
        (
            NonBooleanOperator(
                Variable("A"),
                CppOperator.INT_SUB,
                NonBooleanOperator(Variable("B"), CppOperator.INT_SUB, Variable("C")),
            ),
            "A - (B - C)",
        ),
        (
            NonBooleanOperator(
                NonBooleanOperator(Variable("A"), CppOperator.INT_ADD, Variable("B")),
                CppOperator.INT_MUL,
                Literal("2"),
            ),
            "(A + B) * 2",
        ),
    ],
)
def test_to_text(formula, expected: str) -> None:
    """Parentheses only where precedence or associativity need them."""
    assert to_text(formula) == expected


def test_long_chains() -> None:
    """Traversals handle chains far longer than the recursion limit."""
    names = [f"A{i}" for i in range(3000)]
    formula = and_(*names)

    assert to_text(formula) == " && ".join(names)
    assert find_variables(formula) == set(names)
    assert is_boolean(formula)
    assert evaluate(formula, dict.fromkeys(names, True))
    assert not evaluate(formula, {"A0": True})
