"""
Rule registry: rule name -> rule class, in reporting order.
"""

from __future__ import annotations

from typing import Dict, List, Type

from .base import Rule
from .multiline import MultilineRule
from .whitespace import WhitespaceRule
from ..types import TwlintConfig

_RULES: Dict[str, Type[Rule]] = {}


def register_rule(rule_cls: Type[Rule]) -> Type[Rule]:
    if rule_cls.name in _RULES:
        raise RuntimeError(f"Rule {rule_cls.name} already registered")
    _RULES[rule_cls.name] = rule_cls
    return rule_cls


def list_rules() -> List[str]:
    return list(_RULES)


def build_rules(cfg: TwlintConfig) -> List[Rule]:
    """Instantiate every enabled rule for a run."""
    return [rule for rule in (cls(cfg) for cls in _RULES.values()) if rule.enabled]


register_rule(MultilineRule)
register_rule(WhitespaceRule)

__all__ = ["register_rule", "list_rules", "build_rules"]
