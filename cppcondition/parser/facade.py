"""Parser facade: condition text to resolved expression tree."""

from __future__ import annotations

import logging

from cppcondition.errors import ExpressionFormatError, ResolutionError
from cppcondition.parser.ast import CppExpression, contains_expression_list
from cppcondition.parser.calls import detect_calls
from cppcondition.parser.lexer import lex
from cppcondition.parser.resolver import PrecedenceResolver
from cppcondition.parser.structure import build_structure

logger = logging.getLogger("cppcondition.parser.facade")


class CppParser:
    """Parses C preprocessor conditions into ``CppExpression`` trees.

    The parser keeps the text of the condition currently being parsed for
    error rendering. An instance must not be shared between threads.
    """

    def __init__(self) -> None:
        self._resolver = PrecedenceResolver()

    def parse(self, expression: str) -> CppExpression:
        """Run lexer, structural parser, call detection and precedence resolution.

        Args:
            expression: Condition text, e.g. ``defined(A) && B > 2``.

        Returns:
            The resolved expression tree.

        Raises:
            ExpressionFormatError: If any stage rejects the input.
        """
        tokens = lex(expression)
        structure = build_structure(tokens, expression)

        self._resolver.expression = expression
        try:
            result = self._resolver.resolve(detect_calls(structure))
        except RecursionError as exc:
            # only reachable through very deeply nested brackets
            raise ResolutionError("Expression is nested too deeply", expression) from exc

        if contains_expression_list(result):
            raise ExpressionFormatError("Unresolved expression list", expression)

        logger.debug("Parsed %r from %d token(s)", expression, len(tokens))
        return result
