"""Tokens of the propositional formula language."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operator(Enum):
    """Logical connectives with their symbol, priority and arity.

    Higher priority binds tighter.
    """
    NEGATION = ('-', 5, 1)
    CONJUNCTION = ('&', 4, 2)
    DISJUNCTION = ('|', 3, 2)
    IMPLICATION = ('>', 2, 2)
    EQUIVALENCE = ('~', 1, 2)

    def __init__(self, symbol: str, priority: int, arity: int):
        self.symbol = symbol
        self.priority = priority
        self.arity = arity

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional['Operator']:
        return _OPERATORS.get(symbol)

    def apply(self, *operands: bool) -> bool:
        """Compute the connective on boolean operands."""
        if len(operands) != self.arity:
            raise TypeError(f"Expected {self.arity} operands, got {len(operands)}")
        if self is Operator.NEGATION:
            return not operands[0]
        left, right = operands
        if self is Operator.CONJUNCTION:
            return left and right
        if self is Operator.DISJUNCTION:
            return left or right
        if self is Operator.IMPLICATION:
            return not left or right
        return left == right


_OPERATORS = {op.symbol: op for op in Operator}

TRUE = '1'
FALSE = '0'
OPENING_PARENTHESIS = '('
CLOSING_PARENTHESIS = ')'


@dataclass(frozen=True, order=True)
class Token:
    """A single symbol of a formula.

    Any character can be wrapped; classification happens through the
    ``is_*`` properties so that unknown symbols survive until the parser.
    """
    symbol: str

    def __post_init__(self):
        if len(self.symbol) != 1:
            raise TypeError(f"Expected a single character, got {self.symbol!r}")

    @property
    def is_constant(self) -> bool:
        return self.symbol in (TRUE, FALSE)

    @property
    def is_variable(self) -> bool:
        return 'A' <= self.symbol <= 'Z' or 'a' <= self.symbol <= 'z'

    @property
    def is_operator(self) -> bool:
        return self.symbol in _OPERATORS

    @property
    def is_opening(self) -> bool:
        return self.symbol == OPENING_PARENTHESIS

    @property
    def is_closing(self) -> bool:
        return self.symbol == CLOSING_PARENTHESIS

    @property
    def operator(self) -> Optional[Operator]:
        return Operator.from_symbol(self.symbol)

    @property
    def value(self) -> bool:
        """Boolean value of a constant token."""
        if not self.is_constant:
            raise TypeError(f"Expected constant, got {self.symbol}")
        return self.symbol == TRUE

    @classmethod
    def constant(cls, value: bool) -> 'Token':
        return cls(TRUE if value else FALSE)

    def __str__(self):
        return self.symbol

    def __repr__(self):
        return f"Token({self.symbol!r})"


def join(tokens) -> str:
    """Render a token sequence as compact text."""
    return ''.join(token.symbol for token in tokens)
