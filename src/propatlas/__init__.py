"""
propatlas: A resolution prover for propositional logic.

propatlas proves a conclusion from premises by refutation. It provides:

- An infix formula language with five connectives
- Shunting-yard parsing and stack-based evaluation
- CNF extraction by truth-table enumeration
- A round-based resolution closure with a time budget
- Streaming, human-readable proof reports
- A ``.prop`` problem file format

Basic usage:
    >>> from propatlas import prove
    >>> proof = prove(["A>B", "A"], "B")
    Set of clauses:
    {(A | B), (A | -B), (-A | B), (-A | -B)}
    Resolve (A | B) and (A | -B): (A)
    Resolve (A | B) and (-A | B): (B)
    Resolve (A | B) and (-A | -B): empty resolvent
    An empty resolvent has been obtained; the theorem is proven
    >>> proof.is_complete
    True
"""

__version__ = "0.1.0"

from typing import Iterator, Optional, Sequence, Union

# Core logic structures
from propatlas.core import (
    Token, Operator,
    FormulaError, UnknownSymbolError, MissingOpeningParenthesisError,
    UnclosedParenthesisError, InvalidExpressionError, FormulaTooLargeError,
    ProblemFormatError,
    tokenize, to_postfix, evaluate, substitute,
    Formula, get_variables,
    Polarity, Clause, ClauseSet, extract_clauses, consequences,
    Problem, parse_conjunction, save_problem, load_problem
)

# Truth tables
from propatlas.core.truth import assignments, truth_table, is_valid, is_satisfiable, models

# Proof structures
from propatlas.proofs import (
    Proof, ResolutionStep, Verdict,
    proof_to_json, proof_from_json,
    save_proof, load_proof
)

# Resolution rules and loop
from propatlas.rules import (
    Rule, RuleApplication,
    PositionalResolutionRule, ClassicalResolutionRule, get_rule
)
from propatlas.loops import ResolutionLoop

# Reporting
from propatlas.reporting import ProofReporter, format_clause, format_clause_set, format_conjunction

# File formats
from propatlas.fileformats import get_format_handler

# Configuration
from propatlas.utils.config import Config, DEFAULTS, get_config


_QUIET = object()


def refute(formula: Union[Formula, str],
           strict: Optional[bool] = None,
           timeout: Optional[float] = None,
           max_clauses: Optional[int] = None,
           max_variables: Optional[int] = None,
           reporter: Optional[ProofReporter] = _QUIET,
           config: Optional[Config] = None) -> Proof:
    """
    Try to derive the empty clause from the CNF of a formula.

    Args:
        formula: Formula (or its text) expected to be contradictory
        strict: Use classical resolution instead of the positional rule
        timeout: Time budget in seconds
        max_clauses: Clause set size at which the search gives up
        max_variables: Largest variable count accepted by CNF extraction
        reporter: Receives the clause set and every step while the search
            runs; None or omitted for no output
        config: Configuration supplying defaults for unset options

    Returns:
        Proof object containing the trace and the verdict
    """
    config = config or get_config()
    if isinstance(formula, str):
        formula = Formula.parse(formula)
    if strict is None:
        strict = bool(config.get("prover.strict", False))
    if timeout is None:
        timeout = config.get_number("prover.timeout", DEFAULTS["prover"]["timeout"])
    if max_clauses is None:
        max_clauses = config.get_number("prover.max_clauses", kind=int)
    if max_variables is None:
        max_variables = config.get_number("cnf.max_variables", DEFAULTS["cnf"]["max_variables"], kind=int)
    if reporter is _QUIET:
        reporter = None

    clauses = extract_clauses(formula, max_variables=max_variables)
    if reporter is not None:
        reporter.start(clauses)

    loop = ResolutionLoop(
        rule="classical" if strict else "positional",
        timeout=timeout,
        max_clauses=max_clauses
    )
    proof = loop.run(clauses, on_step=reporter.step if reporter is not None else None)
    proof.metadata["formula"] = str(formula)

    if reporter is not None:
        reporter.finish(proof)
    return proof


def prove_problem(problem: Problem, **kwargs) -> Proof:
    """Prove a Problem's conclusion from its premises by refutation.

    Keyword arguments are passed to :func:`refute`.
    """
    proof = refute(problem.to_formula(), **kwargs)
    if problem.name:
        proof.metadata["problem"] = problem.name
    return proof


def prove(premises: Sequence[str], conclusion: str, **kwargs) -> Proof:
    """
    Attempt to prove ``conclusion`` from ``premises``.

    The report is printed to stdout unless ``reporter`` is given.
    Keyword arguments are passed to :func:`refute`.
    """
    kwargs.setdefault("reporter", ProofReporter())
    return prove_problem(Problem(premises=list(premises), conclusion=conclusion), **kwargs)


def list_consequences(premises: Sequence[str],
                      max_variables: Optional[int] = None,
                      config: Optional[Config] = None) -> Iterator[ClauseSet]:
    """Enumerate conjunctions of clauses that follow from ``premises``.

    Each result is a subset of the CNF clauses of the premises' conjunction;
    see :func:`propatlas.core.cnf.consequences` for the order.
    """
    config = config or get_config()
    if max_variables is None:
        max_variables = config.get_number("cnf.max_variables", DEFAULTS["cnf"]["max_variables"], kind=int)
    return consequences(parse_conjunction(list(premises)), max_variables=max_variables)


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Token", "Operator",
    "FormulaError", "UnknownSymbolError", "MissingOpeningParenthesisError",
    "UnclosedParenthesisError", "InvalidExpressionError", "FormulaTooLargeError",
    "ProblemFormatError",
    "tokenize", "to_postfix", "evaluate", "substitute",
    "Formula", "get_variables",
    "Polarity", "Clause", "ClauseSet", "extract_clauses", "consequences",
    "Problem", "parse_conjunction", "save_problem", "load_problem",

    # Truth tables
    "assignments", "truth_table", "is_valid", "is_satisfiable", "models",

    # Proofs
    "Proof", "ResolutionStep", "Verdict",
    "proof_to_json", "proof_from_json",
    "save_proof", "load_proof",

    # Rules and loop
    "Rule", "RuleApplication",
    "PositionalResolutionRule", "ClassicalResolutionRule", "get_rule",
    "ResolutionLoop",

    # Reporting
    "ProofReporter", "format_clause", "format_clause_set", "format_conjunction",

    # File formats
    "get_format_handler",

    # Configuration
    "Config", "get_config",

    # High-level API
    "refute", "prove_problem", "prove", "list_consequences"
]
