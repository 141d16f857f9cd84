"""Truth-table enumeration.

Assignments are enumerated as successive values of a binary counter whose
most significant bit belongs to the first variable in the formula's order.
"""

from typing import List, Optional, Tuple

import numpy as np

from .exceptions import FormulaTooLargeError
from .formula import Formula


def assignments(count: int, limit: Optional[int] = None) -> np.ndarray:
    """Return every assignment of ``count`` variables as a boolean matrix.

    Row ``i`` is the binary expansion of ``i``, most significant bit first,
    so the result has shape ``(2 ** count, count)``.

    Raises:
        FormulaTooLargeError: ``count`` exceeds ``limit``.
    """
    if limit is not None and count > limit:
        raise FormulaTooLargeError(count, limit)
    shifts = np.arange(count - 1, -1, -1)
    counter = np.arange(2 ** count)[:, np.newaxis]
    return ((counter >> shifts) & 1).astype(bool)


def truth_table(formula: Formula, limit: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Evaluate a formula on every assignment.

    Returns:
        ``(rows, values)`` where ``rows`` is the assignment matrix and
        ``values[i]`` is the formula's value on ``rows[i]``.
    """
    rows = assignments(len(formula.variables), limit)
    values = np.array([formula.evaluate(row.tolist()) for row in rows], dtype=bool)
    return rows, values


def is_valid(formula: Formula, limit: Optional[int] = None) -> bool:
    """True iff the formula holds under every interpretation."""
    _, values = truth_table(formula, limit)
    return bool(values.all())


def is_satisfiable(formula: Formula, limit: Optional[int] = None) -> bool:
    _, values = truth_table(formula, limit)
    return bool(values.any())


def models(formula: Formula, limit: Optional[int] = None) -> List[Tuple[bool, ...]]:
    """All assignments under which the formula is true, in counter order."""
    rows, values = truth_table(formula, limit)
    return [tuple(row.tolist()) for row in rows[values]]
