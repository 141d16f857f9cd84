"""CNF extraction by truth-table enumeration.

Every assignment that falsifies the formula contributes the clause that
excludes exactly that assignment. The conjunction of these clauses is
equivalent to the formula. The cost is exponential in the number of
variables, so a size limit is enforced before enumerating.
"""

import itertools
import logging
from typing import Iterator, Optional, Sequence, Union

from .clause import Clause, ClauseSet, Polarity
from .formula import Formula
from .truth import truth_table

logger = logging.getLogger(__name__)

DEFAULT_MAX_VARIABLES = 20


def falsifying_clause(assignment: Sequence[bool]) -> Clause:
    """Clause that is false exactly under ``assignment``."""
    return Clause(*[Polarity.NEGATIVE if value else Polarity.POSITIVE for value in assignment])


def extract_clauses(formula: Union[Formula, str],
                    max_variables: Optional[int] = DEFAULT_MAX_VARIABLES) -> ClauseSet:
    """Build the CNF clause set of a formula.

    Args:
        formula: Parsed formula, or formula text
        max_variables: Largest variable count to enumerate; None disables the check

    Returns:
        ClauseSet bound to the formula's variable order, one clause per
        falsifying assignment in counter order

    Raises:
        FormulaTooLargeError: The formula has more than ``max_variables`` variables
    """
    if isinstance(formula, str):
        formula = Formula.parse(formula)

    rows, values = truth_table(formula, max_variables)
    clauses = ClauseSet(formula.variables)
    for row, value in zip(rows, values):
        if not value:
            clauses.add(falsifying_clause(row.tolist()))

    logger.debug("Extracted %d clauses over %d variables from %s",
                 len(clauses), len(formula.variables), formula)
    return clauses


def consequences(formula: Union[Formula, str],
                 max_variables: Optional[int] = DEFAULT_MAX_VARIABLES) -> Iterator[ClauseSet]:
    """Enumerate the consequences of a formula built from its CNF clauses.

    Every non-empty subset of the extracted clauses is a conjunction implied
    by the formula. Subsets are produced lazily in binary counter order, with
    the most significant bit on the first clause, so the first consequence
    is the last clause alone and the final one is the whole clause set.

    Raises:
        FormulaTooLargeError: The formula has more than ``max_variables`` variables
    """
    clauses = extract_clauses(formula, max_variables)
    return _subsets(clauses)


def _subsets(clauses: ClauseSet) -> Iterator[ClauseSet]:
    for mask in itertools.product((False, True), repeat=len(clauses)):
        if any(mask):
            yield ClauseSet(clauses.variables,
                            [clause for clause, chosen in zip(clauses, mask) if chosen])
