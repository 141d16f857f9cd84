"""Propositional resolution rules over positional clauses."""

from typing import Optional

from propatlas.core.clause import Clause
from .base import Rule, merge
from .registry import register_rule


@register_rule
class PositionalResolutionRule(Rule):
    """Combine two clauses position by position.

    Every complementary position cancels at once, and the pair is combined
    even when no position is complementary. This is more permissive than
    classical resolution: two clauses complementary at several positions
    yield the empty clause, although their disjunctions are not contradictory.
    """

    @property
    def name(self) -> str:
        return "positional"

    def combine(self, left: Clause, right: Clause) -> Optional[Clause]:
        if left.width != right.width:
            raise ValueError(f"Clause widths differ: {left.width} and {right.width}")
        return Clause(*[merge(a, b) for a, b in zip(left, right)])


@register_rule
class ClassicalResolutionRule(Rule):
    """Binary resolution: the parents must clash on exactly one variable."""

    @property
    def name(self) -> str:
        return "classical"

    def combine(self, left: Clause, right: Clause) -> Optional[Clause]:
        if left.width != right.width:
            raise ValueError(f"Clause widths differ: {left.width} and {right.width}")
        clashes = sum(1 for a, b in zip(left, right) if a.complements(b))
        if clashes != 1:
            return None
        return Clause(*[merge(a, b) for a, b in zip(left, right)])
