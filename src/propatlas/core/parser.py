"""Infix to postfix conversion (Dijkstra's shunting-yard algorithm)."""

from typing import List, Sequence

from .exceptions import (
    UnknownSymbolError, MissingOpeningParenthesisError, UnclosedParenthesisError
)
from .tokens import Token


def to_postfix(tokens: Sequence[Token]) -> List[Token]:
    """Convert an infix token sequence to postfix (RPN) order.

    Operators of equal priority associate left to right, so ``A>B>C``
    becomes ``AB>C>``.

    Raises:
        UnknownSymbolError: A token is not a constant, variable, operator
            or parenthesis.
        MissingOpeningParenthesisError: A ``)`` has no matching ``(``.
        UnclosedParenthesisError: A ``(`` is never closed.
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.is_constant or token.is_variable:
            output.append(token)
        elif token.is_operator:
            priority = token.operator.priority
            while stack and stack[-1].is_operator and stack[-1].operator.priority >= priority:
                output.append(stack.pop())
            stack.append(token)
        elif token.is_opening:
            stack.append(token)
        elif token.is_closing:
            while stack and not stack[-1].is_opening:
                output.append(stack.pop())
            if not stack:
                raise MissingOpeningParenthesisError()
            stack.pop()
        else:
            raise UnknownSymbolError(token.symbol)

    while stack:
        token = stack.pop()
        if token.is_opening:
            raise UnclosedParenthesisError()
        output.append(token)

    return output
