"""Parsed propositional formulas."""

from typing import Iterable, List, Tuple

from .evaluator import Assignment, bind, evaluate, substitute
from .lexer import tokenize
from .parser import to_postfix
from .tokens import Token, join


def get_variables(tokens: Iterable[Token]) -> Tuple[Token, ...]:
    """Return the distinct variables of a token sequence in ascending order."""
    return tuple(sorted({token for token in tokens if token.is_variable}))


class Formula:
    """A formula held as its infix tokens, postfix tokens and variable order.

    The variable order is fixed at construction and defines the position of
    every variable in assignment and clause vectors derived from the formula.
    """

    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Tuple[Token, ...] = tuple(tokens)
        self.postfix: Tuple[Token, ...] = tuple(to_postfix(self.tokens))
        self.variables: Tuple[Token, ...] = get_variables(self.postfix)

    @classmethod
    def parse(cls, text: str) -> 'Formula':
        return cls(tokenize(text))

    @property
    def variable_names(self) -> List[str]:
        return [variable.symbol for variable in self.variables]

    def evaluate(self, assignment: Assignment = ()) -> bool:
        """Evaluate the formula under a positional or named assignment."""
        values = bind(self.variables, assignment)
        return evaluate(substitute(self.postfix, values)).value

    def __eq__(self, other):
        if not isinstance(other, Formula):
            return False
        return self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def __str__(self):
        return join(self.tokens)

    def __repr__(self):
        return f"Formula({join(self.tokens)!r})"
