"""Round-based resolution closure.

This module searches for the empty clause by combining every pair of
clauses below a frontier, round after round:

1. The frontier is the size of the clause set when the round starts
2. Pairs ``(i, j)`` with ``i < j < frontier`` are combined in ascending order
3. An empty resolvent ends the search with a proof
4. Other resolvents are appended unless an equal clause is present
5. The next round moves the frontier past everything appended

The search stops without a proof when a round appends nothing (saturation)
or when the time or clause budget runs out. Clauses appended during a round
only take part from the next round on, which keeps traces reproducible.
"""

import logging
import time
from typing import Callable, Optional, Union

from propatlas.core.clause import ClauseSet
from propatlas.proofs.proof import Proof, ResolutionStep, Verdict
from propatlas.rules import Rule, get_rule

logger = logging.getLogger(__name__)

StepCallback = Callable[[Proof, ResolutionStep], None]


class _RoundResult:
    PROVEN = "proven"
    GREW = "grew"
    SATURATED = "saturated"
    OUT_OF_BUDGET = "out_of_budget"


class ResolutionLoop:
    """Pairwise resolution closure with deduplication and a time budget."""

    def __init__(self,
                 rule: Union[str, Rule] = "positional",
                 timeout: Optional[float] = 100,
                 max_clauses: Optional[int] = None,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the loop.

        Args:
            rule: Rule instance or registered rule name
            timeout: Wall-clock budget in seconds; None means unlimited
            max_clauses: Largest clause set size before giving up; None means unlimited
            clock: Source of the current time in seconds
        """
        self.rule = get_rule(rule) if isinstance(rule, str) else rule
        self.timeout = timeout
        self.max_clauses = max_clauses
        self.clock = clock

    def run(self, clauses: ClauseSet, on_step: Optional[StepCallback] = None) -> Proof:
        """
        Search for the empty clause.

        Args:
            clauses: Input clause set; the run extends its own copy
            on_step: Called with the proof and each trace record as soon as it is produced

        Returns:
            Proof holding the extended clause set, the trace and the verdict
        """
        proof = Proof(clauses=clauses.copy(), initial_size=len(clauses),
                      metadata={"rule": self.rule.name})
        start = self.clock()

        if proof.clauses.contains_empty_clause:
            logger.info("Input clause set already contains the empty clause")
            proof.verdict = Verdict.PROVEN
            return proof

        while proof.verdict is None:
            if self._out_of_time(start):
                logger.info("Time budget of %ss exhausted after %d rounds", self.timeout, proof.rounds)
                proof.verdict = Verdict.BUDGET_EXCEEDED
                break

            frontier = len(proof.clauses)
            logger.debug("Round %d: frontier at %d clauses", proof.rounds + 1, frontier)
            result = self._round(proof, frontier, start, on_step)
            proof.rounds += 1

            if result == _RoundResult.PROVEN:
                proof.verdict = Verdict.PROVEN
            elif result == _RoundResult.SATURATED:
                logger.info("Clause set saturated at %d clauses", len(proof.clauses))
                proof.verdict = Verdict.SATURATED
            elif result == _RoundResult.OUT_OF_BUDGET:
                proof.verdict = Verdict.BUDGET_EXCEEDED

        proof.elapsed = self.clock() - start
        logger.info("Resolution finished: %s after %d rounds, %d clauses, %.3fs",
                    proof.verdict.value, proof.rounds, len(proof.clauses), proof.elapsed)
        return proof

    def _round(self, proof: Proof, frontier: int, start: float,
               on_step: Optional[StepCallback]) -> str:
        clauses = proof.clauses
        round_number = proof.rounds + 1
        added = 0

        for i in range(frontier - 1):
            if i > 0 and self._out_of_time(start):
                logger.info("Time budget of %ss exhausted in round %d", self.timeout, round_number)
                return _RoundResult.OUT_OF_BUDGET

            for j in range(i + 1, frontier):
                application = self.rule.apply(clauses, [i, j])
                if application is None:
                    continue
                resolvent = application.resolvent

                if resolvent.is_empty:
                    self._record(proof, ResolutionStep(
                        parents=[i, j], resolvent=resolvent, resolvent_index=None,
                        round=round_number, rule_name=self.rule.name
                    ), on_step)
                    return _RoundResult.PROVEN

                if clauses.add(resolvent):
                    added += 1
                    self._record(proof, ResolutionStep(
                        parents=[i, j], resolvent=resolvent, resolvent_index=len(clauses) - 1,
                        round=round_number, rule_name=self.rule.name
                    ), on_step)
                    if self.max_clauses is not None and len(clauses) >= self.max_clauses:
                        logger.info("Clause limit of %d reached", self.max_clauses)
                        return _RoundResult.OUT_OF_BUDGET

        logger.debug("Round %d appended %d clauses", round_number, added)
        return _RoundResult.GREW if added else _RoundResult.SATURATED

    def _record(self, proof: Proof, step: ResolutionStep, on_step: Optional[StepCallback]):
        proof.add_step(step)
        if on_step is not None:
            on_step(proof, step)

    def _out_of_time(self, start: float) -> bool:
        return self.timeout is not None and self.clock() - start >= self.timeout
