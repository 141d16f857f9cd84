"""Proof trace of a resolution run."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

import networkx as nx

from propatlas.core.clause import Clause, ClauseSet


EMPTY_NODE = "empty"


class Verdict(Enum):
    """Outcome of a resolution run."""
    PROVEN = "proven"
    SATURATED = "saturated"
    BUDGET_EXCEEDED = "budget_exceeded"


@dataclass
class ResolutionStep:
    """A single combination recorded in the trace.

    ``resolvent_index`` is the position the resolvent took in the clause
    set, or None for the terminal empty-clause event.
    """
    parents: List[int]
    resolvent: Clause
    resolvent_index: Optional[int] = None
    round: int = 0
    rule_name: str = "positional"

    @property
    def is_empty(self) -> bool:
        return self.resolvent.is_empty


@dataclass
class Proof:
    """Clause set, trace and verdict of one proof attempt.

    The clause set is the one the run extended; its first
    ``initial_size`` clauses are the input clauses.
    """
    clauses: ClauseSet
    initial_size: int
    steps: List[ResolutionStep] = field(default_factory=list)
    verdict: Optional[Verdict] = None
    rounds: int = 0
    elapsed: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """Check if the empty clause was derived."""
        return self.verdict is Verdict.PROVEN

    @property
    def is_saturated(self) -> bool:
        return self.verdict is Verdict.SATURATED

    @property
    def variables(self):
        return self.clauses.variables

    @property
    def initial_clauses(self) -> List[Clause]:
        return self.clauses.clauses[:self.initial_size]

    @property
    def derived_clauses(self) -> List[Clause]:
        return self.clauses.clauses[self.initial_size:]

    @property
    def length(self) -> int:
        """Number of recorded steps."""
        return len(self.steps)

    def add_step(self, step: ResolutionStep) -> 'Proof':
        self.steps.append(step)
        return self

    def derivation_graph(self) -> nx.DiGraph:
        """Directed graph with an edge from each parent to its resolvent.

        Nodes are clause-set indices; a terminal empty clause is the node
        ``"empty"``.
        """
        graph = nx.DiGraph()
        for idx, clause in enumerate(self.clauses):
            graph.add_node(idx, clause=clause, initial=idx < self.initial_size)
        for step in self.steps:
            node = EMPTY_NODE if step.resolvent_index is None else step.resolvent_index
            if node == EMPTY_NODE:
                graph.add_node(node, clause=step.resolvent, initial=False)
            for parent in step.parents:
                graph.add_edge(parent, node, round=step.round)
        return graph

    def used_steps(self) -> List[ResolutionStep]:
        """Steps the empty clause depends on, in trace order."""
        if not self.is_complete or not self.steps:
            return []
        graph = self.derivation_graph()
        if EMPTY_NODE not in graph:
            return []
        needed = nx.ancestors(graph, EMPTY_NODE) | {EMPTY_NODE}
        return [step for step in self.steps
                if (EMPTY_NODE if step.resolvent_index is None else step.resolvent_index) in needed]

    def used_clauses(self) -> List[int]:
        """Indices of the input clauses the empty clause depends on."""
        if not self.is_complete:
            return []
        graph = self.derivation_graph()
        if EMPTY_NODE not in graph:
            return [idx for idx, clause in enumerate(self.initial_clauses) if clause.is_empty]
        return sorted(idx for idx in nx.ancestors(graph, EMPTY_NODE)
                      if isinstance(idx, int) and idx < self.initial_size)

    def __repr__(self) -> str:
        verdict = self.verdict.value if self.verdict else None
        return f"Proof(steps={len(self.steps)}, verdict={verdict})"
