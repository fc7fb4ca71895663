"""Lexer for C preprocessor conditions.

Splits a condition string into brackets, operators, identifiers and numeric
literals. Every token records its source offset so that later stages can
point at the offending column when they reject the input.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from cppcondition.errors import LexError
from cppcondition.parser.operators import (
    ONE_CHAR_OPERATORS,
    SIGN_OPERATORS,
    TWO_CHAR_OPERATORS,
    CppOperator,
)
from cppcondition.parser.tokens import (
    BracketToken,
    CppToken,
    IdentifierToken,
    LiteralToken,
    OperatorToken,
)
from cppcondition.utils.numbers import convert_to_number

logger = logging.getLogger("cppcondition.parser.lexer")


def _is_identifier_char(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9") or char in "_."


def _is_unary_position(previous: Optional[CppToken]) -> bool:
    """``+``/``-`` are unary at the start, after an operator or after ``(``."""
    return (
        previous is None
        or isinstance(previous, OperatorToken)
        or (isinstance(previous, BracketToken) and previous.is_opening)
    )


def _match_operator(
    expression: str, pos: int, previous: Optional[CppToken]
) -> Optional[CppOperator]:
    two_chars = expression[pos:pos + 2]
    if two_chars in TWO_CHAR_OPERATORS:
        return TWO_CHAR_OPERATORS[two_chars]

    char = expression[pos]
    if char in SIGN_OPERATORS:
        binary, unary = SIGN_OPERATORS[char]
        return unary if _is_unary_position(previous) else binary
    return ONE_CHAR_OPERATORS.get(char)


def _finish_identifier(expression: str, pos: int, name: str) -> CppToken:
    """Turn accumulated identifier text into an identifier or literal token.

    Args:
        expression: The full condition, for error rendering.
        pos: Source offset of the first identifier character.
        name: Accumulated identifier characters.

    Returns:
        A ``LiteralToken`` if ``name`` starts with a digit, otherwise an
        ``IdentifierToken``.

    Raises:
        LexError: If a numeral cannot be parsed or a name contains a dot.
    """
    if name[0].isdigit():
        literal = name.lower().rstrip("l")
        if literal.endswith("u"):
            literal = literal[:-1]

        value = convert_to_number(literal)
        if value is None:
            raise LexError(f"Cannot parse literal {name}", expression, [pos])
        return LiteralToken(pos, len(name), value)

    dot_index = name.find(".")
    if dot_index != -1:
        raise LexError(
            "Literal contains invalid character: '.'", expression, [pos + dot_index]
        )
    return IdentifierToken(pos, name)


def lex(expression: str) -> List[CppToken]:
    """Split ``expression`` into tokens.

    Args:
        expression: Raw condition text (the part after ``#if``).

    Returns:
        Tokens in source order.

    Raises:
        LexError: On an invalid character or an unparsable literal.
    """
    tokens: List[CppToken] = []
    identifier_start = -1

    def flush_identifier(end: int) -> None:
        nonlocal identifier_start
        if identifier_start != -1:
            tokens.append(
                _finish_identifier(expression, identifier_start, expression[identifier_start:end])
            )
            identifier_start = -1

    pos = 0
    while pos < len(expression):
        char = expression[pos]

        if char.isspace():
            flush_identifier(pos)
            pos += 1
            continue

        if char in "()":
            flush_identifier(pos)
            tokens.append(BracketToken(pos, char == "("))
            pos += 1
            continue

        if _is_identifier_char(char):
            if identifier_start == -1:
                identifier_start = pos
            pos += 1
            continue

        flush_identifier(pos)
        previous = tokens[-1] if tokens else None
        operator = _match_operator(expression, pos, previous)
        if operator is None:
            raise LexError(f"Invalid character in expression: '{char}'", expression, [pos])

        tokens.append(OperatorToken(pos, operator))
        pos += len(operator.symbol)

    flush_identifier(pos)

    logger.debug("Lexed %d token(s) from %r", len(tokens), expression)
    return tokens
