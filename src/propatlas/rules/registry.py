"""Lookup of resolution rules by name."""

from typing import Dict, List, Type

from .base import Rule

_rules: Dict[str, Type[Rule]] = {}


def register_rule(rule_class: Type[Rule]) -> Type[Rule]:
    """Class decorator registering a rule under its ``name``."""
    _rules[rule_class().name.lower()] = rule_class
    return rule_class


def get_rule(name: str) -> Rule:
    """Create the rule registered as ``name``.

    Raises:
        ValueError: No rule has that name.
    """
    try:
        return _rules[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown rule: {name}") from None


def list_rules() -> List[str]:
    return list(_rules)
