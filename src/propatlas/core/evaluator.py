"""Stack-based evaluation of postfix formulas."""

from typing import Dict, List, Mapping, Sequence, Union

from .exceptions import InvalidExpressionError
from .tokens import Token


def evaluate(postfix: Sequence[Token]) -> Token:
    """Evaluate a postfix sequence made only of constants and operators.

    Returns:
        The resulting constant token.

    Raises:
        InvalidExpressionError: An operator lacks operands, an operand is not
            a constant, or more than one value is left on the stack.
    """
    stack: List[Token] = []
    for token in postfix:
        if token.is_constant:
            stack.append(token)
        elif token.is_operator:
            _apply(token, stack)
        else:
            raise InvalidExpressionError(f"unexpected token '{token.symbol}'")

    if len(stack) != 1:
        raise InvalidExpressionError(f"{len(stack)} values left on the stack")
    return stack[0]


def _apply(token: Token, stack: List[Token]) -> None:
    operator = token.operator
    if len(stack) < operator.arity:
        raise InvalidExpressionError(f"missing operand for '{token.symbol}'")
    # The right operand sits on top.
    operands = [stack.pop() for _ in range(operator.arity)][::-1]
    stack.append(Token.constant(operator.apply(*(operand.value for operand in operands))))


Assignment = Union[Sequence[bool], Mapping[str, bool]]


def bind(variables: Sequence[Token], assignment: Assignment) -> Dict[str, bool]:
    """Turn a positional or named assignment into a name-to-value mapping."""
    if isinstance(assignment, Mapping):
        return {str(name).upper(): bool(value) for name, value in assignment.items()}
    if len(assignment) != len(variables):
        raise InvalidExpressionError(
            f"expected {len(variables)} values, got {len(assignment)}"
        )
    return {variable.symbol: bool(value) for variable, value in zip(variables, assignment)}


def substitute(postfix: Sequence[Token], values: Mapping[str, bool]) -> List[Token]:
    """Replace every variable token with the constant it is bound to."""
    result = []
    for token in postfix:
        if token.is_variable:
            if token.symbol not in values:
                raise InvalidExpressionError(f"no value for variable '{token.symbol}'")
            result.append(Token.constant(values[token.symbol]))
        else:
            result.append(token)
    return result
