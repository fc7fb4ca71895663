"""Token types produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from cppcondition.parser.operators import CppOperator


@dataclass(frozen=True)
class BracketToken:
    pos: int
    is_opening: bool

    @property
    def length(self) -> int:
        return 1


@dataclass(frozen=True)
class IdentifierToken:
    pos: int
    name: str

    @property
    def length(self) -> int:
        return len(self.name)


@dataclass(frozen=True)
class OperatorToken:
    pos: int
    operator: CppOperator

    @property
    def length(self) -> int:
        return len(self.operator.symbol)


@dataclass(frozen=True)
class LiteralToken:
    """Numeric literal; ``length`` covers the original text including suffixes."""

    pos: int
    length: int
    value: Union[int, float]


CppToken = Union[BracketToken, IdentifierToken, OperatorToken, LiteralToken]
