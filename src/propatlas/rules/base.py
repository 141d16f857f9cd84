"""Base interface for clause combination rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from propatlas.core.clause import Clause, ClauseSet, Polarity


@dataclass
class RuleApplication:
    """Result of applying a rule to a pair of clauses."""
    rule_name: str
    parents: List[int]  # Indices of parent clauses in the clause set
    resolvent: Clause
    metadata: Dict[str, Any] = field(default_factory=dict)


def merge(left: Polarity, right: Polarity) -> Polarity:
    """Combine one position of two clauses.

    Complementary literals cancel. Otherwise the position keeps the literal
    that either clause has there, or stays absent when neither has one.
    """
    if left.complements(right):
        return Polarity.ABSENT
    if Polarity.POSITIVE in (left, right):
        return Polarity.POSITIVE
    if Polarity.NEGATIVE in (left, right):
        return Polarity.NEGATIVE
    return Polarity.ABSENT


class Rule(ABC):
    """Abstract base class for rules combining two clauses."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the rule."""
        pass

    @abstractmethod
    def combine(self, left: Clause, right: Clause) -> Optional[Clause]:
        """
        Combine two clauses of equal width.

        Returns:
            The resolvent, or None if the rule does not apply to the pair
        """
        pass

    def apply(self, clauses: ClauseSet, clause_indices: List[int]) -> Optional[RuleApplication]:
        """
        Apply the rule to two clauses of a clause set.

        Args:
            clauses: Clause set holding the parents
            clause_indices: Indices of the two parent clauses

        Returns:
            RuleApplication if the rule applies, None otherwise
        """
        if len(clause_indices) != 2:
            return None

        i, j = clause_indices
        if not (0 <= i < len(clauses) and 0 <= j < len(clauses)):
            return None

        resolvent = self.combine(clauses[i], clauses[j])
        if resolvent is None:
            return None

        return RuleApplication(
            rule_name=self.name,
            parents=[i, j],
            resolvent=resolvent
        )
