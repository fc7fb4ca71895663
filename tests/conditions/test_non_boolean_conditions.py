"""Tests for the non-Boolean condition interpreter."""

from __future__ import annotations

import pytest

from cppcondition.conditions import CppNonBooleanConditionParser
from cppcondition.config import CppParsingSettings
from cppcondition.errors import ExpressionFormatError, SemanticError
from cppcondition.logic import (
    Literal,
    Macro,
    NonBooleanOperator,
    Variable,
    and_,
    is_boolean,
    not_,
    or_,
    to_text,
)
from cppcondition.parser.operators import CppOperator as Op


@pytest.fixture
def parser() -> CppNonBooleanConditionParser:
    return CppNonBooleanConditionParser()


def test_boolean_skeleton(parser: CppNonBooleanConditionParser) -> None:
    """defined(), &&, || and ! translate like in the Boolean interpreter."""
    result = parser.parse("(defined(A) && (!defined(B) || defined(C)))")

    assert result == and_("A", or_(not_("B"), "C"))
    assert is_boolean(result)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("0", "0"),
        ("-0", "-0"),
        ("1", "1"),
        ("2", "2"),
        ("-2", "-2"),
        ("0.0", "0"),
        ("-0.0", "-0"),
        ("-4.2", "-4.2"),
        ("5.2", "5.2"),
        ("7UL", "7"),
    ],
)
def test_literals(parser: CppNonBooleanConditionParser, text: str, expected: str) -> None:
    """Numbers keep their (normalized) textual value."""
    assert parser.parse(text) == Literal(expected)


def test_bare_variable(parser: CppNonBooleanConditionParser) -> None:
    """Variables outside defined() are kept."""
    assert parser.parse("A") == Variable("A")


def test_linux_macros_enabled() -> None:
    """Linux macros translate when enabled."""
    parser = CppNonBooleanConditionParser(handle_linux_macros=True)

    assert parser.parse("IS_ENABLED(A)") == or_("A", "A_MODULE")
    assert parser.parse("IS_BUILTIN(A)") == Variable("A")
    assert parser.parse("IS_MODULE(A)") == Variable("A_MODULE")


@pytest.mark.parametrize("name", ["IS_ENABLED", "IS_BUILTIN", "IS_MODULE"])
def test_linux_macros_disabled_become_macros(
    parser: CppNonBooleanConditionParser, name: str
) -> None:
    """Without Linux macro handling the macros are kept as calls."""
    assert parser.parse(f"{name}(A)") == Macro(name, Variable("A"))


@pytest.mark.parametrize("linux", [True, False])
def test_unknown_function(linux: bool) -> None:
    """Unknown calls become Macro nodes."""
    parser = CppNonBooleanConditionParser(handle_linux_macros=linux)

    assert parser.parse("func(A)") == Macro("func", Variable("A"))


def test_macro_without_argument(parser: CppNonBooleanConditionParser) -> None:
    """func() has no argument."""
    result = parser.parse("func() || defined(A)")

    assert result == or_(Macro("func"), "A")
    assert result.left.argument is None


def test_macro_with_compound_argument(parser: CppNonBooleanConditionParser) -> None:
    """Macro arguments are interpreted recursively."""
    result = parser.parse("func(A + 1)")

    assert result == Macro("func", NonBooleanOperator(Variable("A"), Op.INT_ADD, Literal("1")))


def test_comparisons_with_literals(parser: CppNonBooleanConditionParser) -> None:
    """Comparisons keep their operands in source order."""
    result = parser.parse("A >= 2")

    assert result == NonBooleanOperator(Variable("A"), Op.CMP_GE, Literal("2"))
    assert result.operator == Op.CMP_GE

    reversed_result = parser.parse("2 <= A")
    assert reversed_result == NonBooleanOperator(Literal("2"), Op.CMP_LE, Variable("A"))
    assert reversed_result.operator == Op.CMP_LE


@pytest.mark.parametrize(
    ("text", "operator"),
    [
        ("A == B", Op.CMP_EQ),
        ("A != B", Op.CMP_NE),
        ("A < B", Op.CMP_LT),
        ("A > B", Op.CMP_GT),
        ("A ^ B", Op.BIN_XOR),
        ("A << B", Op.BIN_SHL),
        ("A % B", Op.INT_MOD),
    ],
)
def test_binary_operators(parser: CppNonBooleanConditionParser, text: str, operator: Op) -> None:
    """Every binary operator becomes a NonBooleanOperator."""
    result = parser.parse(text)

    assert isinstance(result, NonBooleanOperator)
    assert result.operator == operator
    assert (result.left, result.right) == (Variable("A"), Variable("B"))


def test_float_comparisons(parser: CppNonBooleanConditionParser) -> None:
    """Float literals keep their decimal text; integral ones drop the fraction."""
    assert parser.parse("A == 2.26") == NonBooleanOperator(Variable("A"), Op.CMP_EQ, Literal("2.26"))
    assert parser.parse("A != 0.0") == NonBooleanOperator(Variable("A"), Op.CMP_NE, Literal("0"))
    assert parser.parse("2.214 <= A") == NonBooleanOperator(
        Literal("2.214"), Op.CMP_LE, Variable("A")
    )


def test_nested_arithmetic(parser: CppNonBooleanConditionParser) -> None:
    """5 > (A + 1)"""
    result = parser.parse("5 > (A + 1)")

    assert result == NonBooleanOperator(
        Literal("5"), Op.CMP_GT, NonBooleanOperator(Variable("A"), Op.INT_ADD, Literal("1"))
    )
    assert not is_boolean(result)


def test_mixed_condition(parser: CppNonBooleanConditionParser) -> None:
    """Boolean and non-Boolean parts mix freely."""
    result = parser.parse("defined(A) && (B > 2 || !C)")

    assert result == and_(
        "A",
        or_(NonBooleanOperator(Variable("B"), Op.CMP_GT, Literal("2")), not_("C")),
    )


@pytest.mark.parametrize("text", ["-A", "~A", "+A", "A++"])
def test_unsupported_unary_operators(parser: CppNonBooleanConditionParser, text: str) -> None:
    """Unary operators other than ! and -LITERAL have no representation."""
    with pytest.raises(SemanticError) as excinfo:
        parser.parse(text)

    assert "Unsupported operator" in excinfo.value.message


@pytest.mark.parametrize("text", ["defined()", "defined(1)", "defined(a, b)", "myMacro(a, b)"])
def test_invalid_calls(parser: CppNonBooleanConditionParser, text: str) -> None:
    """defined() needs one variable; argument lists are not supported."""
    with pytest.raises(ExpressionFormatError):
        parser.parse(text)


def test_malformed_condition_always_raises() -> None:
    """There is no substitution policy for the non-Boolean interpreter."""
    settings = CppParsingSettings(invalid_condition="TRUE")
    parser = CppNonBooleanConditionParser.from_settings(settings)

    with pytest.raises(ExpressionFormatError):
        parser.parse("defined(A) || ")


@pytest.mark.parametrize(
    "text",
    [
        "defined(A) && (B > 2 || !C)",
        "(A + B) * C == 4",
        "A - (B - C)",
        "func(A * 2) != -3",
        "!(A == 1) || B << 2",
        "defined(A) && defined(B) || defined(C)",
        "!(!A)",
        "!(-2)",
        "A % B / C * D",
        "A | B ^ C & D",
    ],
)
def test_text_reparses_to_equal_tree(parser: CppNonBooleanConditionParser, text: str) -> None:
    """to_text output parses back into the same formula and the same text."""
    formula = parser.parse(text)
    reparsed = parser.parse(to_text(formula))

    assert reparsed == formula
    assert to_text(reparsed) == to_text(formula)


@pytest.mark.parametrize(
    "operator",
    [op for op in Op if not op.is_unary and op not in (Op.BOOL_AND, Op.BOOL_OR)],
    ids=lambda op: op.name,
)
def test_operator_kind_survives_text(parser: CppNonBooleanConditionParser, operator: Op) -> None:
    """Rendering and reparsing keeps the operator, not just the operands."""
    formula = parser.parse(f"A {operator.symbol} B")
    reparsed = parser.parse(to_text(formula))

    assert formula.operator == operator
    assert to_text(formula) == f"A {operator.symbol} B"
    assert reparsed.operator == operator


def test_long_arithmetic_chain(parser: CppNonBooleanConditionParser) -> None:
    """Thousands of terms translate and render without running out of stack."""
    text = " + ".join(f"A{i}" for i in range(3000))
    result = parser.parse(text)

    assert isinstance(result, NonBooleanOperator)
    assert result.operator == Op.INT_ADD
    assert result.right == Variable("A2999")
    assert to_text(result) == text
