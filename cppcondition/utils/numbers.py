"""Numeric-string conversion helpers.

Only plain decimal notation is accepted: integers such as ``42`` and floats
such as ``4.2``, ``.5``, ``1.`` or ``1e3``. Integral floats collapse to
``int`` so that ``0.0`` and ``0`` produce the same literal.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Union

Number = Union[int, float]

_INT_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")


def convert_to_number(text: str) -> Optional[Number]:
    """Convert a decimal numeral to ``int`` or ``float``.

    Args:
        text: Numeral without type suffixes.

    Returns:
        The numeric value, or None if ``text`` is not a decimal numeral.
    """
    if _INT_RE.fullmatch(text):
        return int(text)
    if not _FLOAT_RE.fullmatch(text):
        return None

    value = float(text)
    if value != value or value in (float("inf"), float("-inf")):
        return None
    if value.is_integer():
        return int(value)
    return value


def format_number(value: Number) -> str:
    """Render a numeric value without exponent notation.

    The result only contains digits and at most one ``.``, so it can be fed
    back through the lexer unchanged.
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
