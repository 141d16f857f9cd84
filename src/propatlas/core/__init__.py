"""Core propositional logic data structures."""

from .tokens import Token, Operator
from .exceptions import (
    FormulaError, UnknownSymbolError, MissingOpeningParenthesisError,
    UnclosedParenthesisError, InvalidExpressionError, FormulaTooLargeError,
    ProblemFormatError
)
from .lexer import tokenize
from .parser import to_postfix
from .evaluator import evaluate, substitute
from .formula import Formula, get_variables
from .clause import Polarity, Clause, ClauseSet
from .cnf import extract_clauses, consequences
from .problem import Problem, parse_conjunction
from .serialization import (
    clause_set_to_json, clause_set_from_json,
    save_problem, load_problem
)

__all__ = [
    # Tokens
    'Token', 'Operator',
    # Errors
    'FormulaError', 'UnknownSymbolError', 'MissingOpeningParenthesisError',
    'UnclosedParenthesisError', 'InvalidExpressionError', 'FormulaTooLargeError',
    'ProblemFormatError',
    # Parsing and evaluation
    'tokenize', 'to_postfix', 'evaluate', 'substitute',
    'Formula', 'get_variables',
    # Clauses
    'Polarity', 'Clause', 'ClauseSet', 'extract_clauses', 'consequences',
    # Problems
    'Problem', 'parse_conjunction',
    # Serialization
    'clause_set_to_json', 'clause_set_from_json',
    'save_problem', 'load_problem'
]
