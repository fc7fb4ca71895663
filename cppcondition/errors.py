"""Exception hierarchy for condition parsing.

Every stage of the pipeline raises a subclass of ``ExpressionFormatError``.
Callers that only care about "the condition is malformed" catch the base
class; the subclasses tell which stage rejected the input.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

_FORMULA_PREFIX = "In formula: "


class ExpressionFormatError(Exception):
    """A condition could not be parsed or interpreted.

    Attributes:
        message: Human readable description of the problem.
        expression: The original condition text, if known.
        markers: Source offsets into ``expression`` to point at.
    """

    def __init__(
        self,
        message: str,
        expression: Optional[str] = None,
        markers: Iterable[int] = (),
    ) -> None:
        self.message = message
        self.expression = expression
        self.markers: Tuple[int, ...] = tuple(sorted(set(markers)))
        super().__init__(render_message(message, expression, self.markers))


class LexError(ExpressionFormatError):
    """Invalid character or unparsable numeric literal."""


class StructureError(ExpressionFormatError):
    """Unbalanced brackets."""


class ResolutionError(ExpressionFormatError):
    """Missing operands, misplaced unary operators or no operator found."""


class SemanticError(ExpressionFormatError):
    """Syntactically valid input that an interpreter does not support."""


class UnsupportedFormulaError(TypeError):
    """A consumer of strict Boolean formulas received an extended node."""


def render_message(
    message: str, expression: Optional[str], markers: Tuple[int, ...] = ()
) -> str:
    """Build the full error text with an optional caret line.

    Args:
        message: Error description.
        expression: Original condition text; omitted from output when None.
        markers: Sorted source offsets to mark with ``^``.

    Returns:
        The message, followed by the formula and a caret line aligned
        under each marked column.
    """
    if expression is None:
        return message

    lines = [message, _FORMULA_PREFIX + expression]
    if markers:
        width = markers[-1] + 1
        carets = "".join("^" if i in markers else " " for i in range(width))
        lines.append(" " * len(_FORMULA_PREFIX) + carets)
    return "\n".join(lines)
