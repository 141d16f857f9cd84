"""Clause combination rules."""

from .base import Rule, RuleApplication, merge
from .resolution import PositionalResolutionRule, ClassicalResolutionRule
from .registry import get_rule, list_rules, register_rule

__all__ = [
    'Rule', 'RuleApplication', 'merge',
    'PositionalResolutionRule', 'ClassicalResolutionRule',
    'get_rule', 'list_rules', 'register_rule'
]
