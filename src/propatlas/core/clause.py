"""Positional clause representation.

A clause is a fixed-width vector over the variable order of one formula.
Each position records whether the variable occurs positively, negatively,
or not at all.
"""

from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .tokens import Operator, Token


class Polarity(Enum):
    ABSENT = 0
    POSITIVE = 1
    NEGATIVE = -1

    def complements(self, other: 'Polarity') -> bool:
        """True for a positive/negative pair."""
        return self is not Polarity.ABSENT and other is not Polarity.ABSENT and self is not other


class Clause:
    @staticmethod
    def check(polarities):
        for polarity in polarities:
            if not isinstance(polarity, Polarity):
                raise TypeError(f"Expected Polarity, got {polarity}")

    def __init__(self, *polarities: Polarity):
        Clause.check(polarities)
        self.polarities: Tuple[Polarity, ...] = tuple(polarities)

    @classmethod
    def empty(cls, width: int) -> 'Clause':
        return cls(*[Polarity.ABSENT] * width)

    @classmethod
    def from_literals(cls, variables: Sequence[Token], literals: Iterable[str]) -> 'Clause':
        """Build a clause from literal strings such as ``"A"`` or ``"-B"``."""
        positions = {variable.symbol: i for i, variable in enumerate(variables)}
        polarities = [Polarity.ABSENT] * len(variables)
        negation = Operator.NEGATION.symbol
        for literal in literals:
            literal = literal.strip().upper()
            polarity = Polarity.POSITIVE
            if literal.startswith(negation):
                polarity = Polarity.NEGATIVE
                literal = literal[len(negation):]
            if literal not in positions:
                raise ValueError(f"Unknown variable '{literal}'")
            polarities[positions[literal]] = polarity
        return cls(*polarities)

    @property
    def width(self) -> int:
        return len(self.polarities)

    @property
    def is_empty(self) -> bool:
        return all(polarity is Polarity.ABSENT for polarity in self.polarities)

    def literals(self, variables: Sequence[Token]) -> List[str]:
        """Literal strings of the clause, in variable order."""
        negation = Operator.NEGATION.symbol
        result = []
        for variable, polarity in zip(variables, self.polarities):
            if polarity is Polarity.POSITIVE:
                result.append(variable.symbol)
            elif polarity is Polarity.NEGATIVE:
                result.append(negation + variable.symbol)
        return result

    def satisfied_by(self, assignment: Sequence[bool]) -> bool:
        """Evaluate the clause as a disjunction under a positional assignment."""
        for polarity, value in zip(self.polarities, assignment):
            if polarity is Polarity.POSITIVE and value:
                return True
            if polarity is Polarity.NEGATIVE and not value:
                return True
        return False

    def __len__(self):
        return len(self.polarities)

    def __iter__(self) -> Iterator[Polarity]:
        return iter(self.polarities)

    def __getitem__(self, index):
        return self.polarities[index]

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return False
        return self.polarities == other.polarities

    def __hash__(self):
        if not hasattr(self, 'hash'):
            self.hash = hash(self.polarities)
        return self.hash

    def __repr__(self):
        symbols = {Polarity.ABSENT: '.', Polarity.POSITIVE: '+', Polarity.NEGATIVE: '-'}
        return f"Clause({''.join(symbols[p] for p in self.polarities)})"


class ClauseSet:
    """Ordered, append-only collection of distinct clauses.

    All clauses share the width of the variable order the set is bound to.
    """

    def __init__(self, variables: Sequence[Token], clauses: Iterable[Clause] = ()):
        self.variables: Tuple[Token, ...] = tuple(variables)
        self.clauses: List[Clause] = []
        self._index: Dict[Clause, int] = {}
        for clause in clauses:
            self.add(clause)

    @property
    def width(self) -> int:
        return len(self.variables)

    def add(self, clause: Clause) -> bool:
        """Append a clause unless an equal one is present.

        Returns:
            True if the clause was appended.
        """
        if clause.width != self.width:
            raise ValueError(f"Expected clause of width {self.width}, got {clause.width}")
        if clause in self._index:
            return False
        self._index[clause] = len(self.clauses)
        self.clauses.append(clause)
        return True

    def index(self, clause: Clause) -> Optional[int]:
        return self._index.get(clause)

    @property
    def contains_empty_clause(self) -> bool:
        return any(clause.is_empty for clause in self.clauses)

    def satisfied_by(self, assignment: Sequence[bool]) -> bool:
        """Evaluate the set as a conjunction of clauses."""
        return all(clause.satisfied_by(assignment) for clause in self.clauses)

    def copy(self) -> 'ClauseSet':
        return ClauseSet(self.variables, self.clauses)

    def __contains__(self, clause):
        return clause in self._index

    def __len__(self):
        return len(self.clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)

    def __getitem__(self, index):
        return self.clauses[index]

    def __eq__(self, other):
        if not isinstance(other, ClauseSet):
            return False
        return self.variables == other.variables and self.clauses == other.clauses

    def __repr__(self):
        return f"ClauseSet(variables={''.join(map(str, self.variables))}, size={len(self)})"
