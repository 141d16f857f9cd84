"""Proof reporting."""

from .reporter import (
    ProofReporter, format_clause, format_clause_set, format_conjunction,
    format_step, format_verdict, EMPTY_CLAUSE
)

__all__ = [
    'ProofReporter', 'format_clause', 'format_clause_set', 'format_conjunction',
    'format_step', 'format_verdict', 'EMPTY_CLAUSE'
]
