"""Entailment problems: premises and a conclusion."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .formula import Formula
from .tokens import Operator


@dataclass
class Problem:
    """A set of premise formulas and the conclusion to prove from them.

    The prover refutes the negation of "premises imply conclusion", so the
    formula handed to the CNF extractor is ``-(((P1)&...&(Pn))>(C))``.
    """
    premises: List[str]
    conclusion: str
    name: Optional[str] = None
    premise_names: List[Optional[str]] = field(default_factory=list)

    def __post_init__(self):
        self.premises = list(self.premises)
        if not self.premise_names:
            self.premise_names = [None] * len(self.premises)
        if len(self.premise_names) != len(self.premises):
            raise ValueError(
                f"Expected {len(self.premises)} premise names, got {len(self.premise_names)}"
            )

    @property
    def goal(self) -> str:
        """Text of the formula whose contradiction proves the conclusion."""
        negation = Operator.NEGATION.symbol
        conclusion = f"({self.conclusion})"
        if not self.premises:
            return f"{negation}({conclusion})"
        return f"{negation}(({conjoin(self.premises)}){Operator.IMPLICATION.symbol}{conclusion})"

    def premise_formula(self) -> Formula:
        """Conjunction of the premises, ``(P1)&...&(Pn)``."""
        return parse_conjunction(self.premises)

    def to_formula(self) -> Formula:
        # Each part must parse alone; parentheses could otherwise balance across parts.
        for text in self.premises + [self.conclusion]:
            Formula.parse(text)
        return Formula.parse(self.goal)

    def __repr__(self):
        lines = [f"premise: {p}" for p in self.premises]
        lines.append(f"conclusion: {self.conclusion}")
        return '\n'.join(lines)


def conjoin(texts: Sequence[str]) -> str:
    return Operator.CONJUNCTION.symbol.join(f"({text})" for text in texts)


def parse_conjunction(texts: Sequence[str]) -> Formula:
    """Parse formulas one by one and return their conjunction.

    Raises:
        ValueError: ``texts`` is empty.
    """
    if not texts:
        raise ValueError("Expected at least one premise")
    for text in texts:
        Formula.parse(text)
    return Formula.parse(conjoin(texts))
