"""Human-readable rendering of clauses and resolution traces."""

import sys
from typing import Iterable, Optional, Sequence, TextIO

from propatlas.core.clause import Clause, ClauseSet
from propatlas.core.tokens import Operator, Token
from propatlas.proofs.proof import Proof, ResolutionStep, Verdict

EMPTY_CLAUSE = "()"

DEFAULT_STREAM = object()

VERDICT_MESSAGES = {
    Verdict.PROVEN: "An empty resolvent has been obtained; the theorem is proven",
    Verdict.SATURATED: "It is impossible to obtain an empty resolvent; the theorem is disproven",
    Verdict.BUDGET_EXCEEDED: "No empty resolvent within the time budget; the theorem is unproven",
}


def format_clause(clause: Clause, variables: Sequence[Token]) -> str:
    """Render a clause as ``(A | -B)``."""
    literals = clause.literals(variables)
    if not literals:
        return EMPTY_CLAUSE
    return f"({f' {Operator.DISJUNCTION.symbol} '.join(literals)})"


def format_clause_set(clauses: Iterable[Clause], variables: Sequence[Token]) -> str:
    """Render clauses as ``{(A | B), (-A | B)}``."""
    return "{" + ", ".join(format_clause(clause, variables) for clause in clauses) + "}"


def format_conjunction(clauses: Iterable[Clause], variables: Sequence[Token]) -> str:
    """Render clauses as the formula ``(A | B) & (-A | B)``."""
    return f" {Operator.CONJUNCTION.symbol} ".join(format_clause(clause, variables) for clause in clauses)


def format_step(step: ResolutionStep, clauses: Sequence[Clause], variables: Sequence[Token]) -> str:
    left, right = (format_clause(clauses[idx], variables) for idx in step.parents)
    if step.is_empty:
        return f"Resolve {left} and {right}: empty resolvent"
    return f"Resolve {left} and {right}: {format_clause(step.resolvent, variables)}"


def format_verdict(verdict: Verdict) -> str:
    return VERDICT_MESSAGES[verdict]


class ProofReporter:
    """Streams a proof attempt to a text stream while it runs.

    Pass ``stream=None`` to silence output.
    """

    def __init__(self, stream: Optional[TextIO] = DEFAULT_STREAM):
        self.stream = sys.stdout if stream is DEFAULT_STREAM else stream

    def start(self, clauses: ClauseSet) -> None:
        """Print the initial clause set."""
        self._write("Set of clauses:")
        self._write(format_clause_set(clauses, clauses.variables))

    def step(self, proof: Proof, step: ResolutionStep) -> None:
        """Print one trace record; usable as the loop's step callback."""
        self._write(format_step(step, proof.clauses, proof.variables))

    def finish(self, proof: Proof) -> None:
        self._write(format_verdict(proof.verdict))

    def _write(self, line: str) -> None:
        if self.stream is not None:
            print(line, file=self.stream, flush=True)
