from .base import Diagnostic, Rule
from .multiline import MultilineRule
from .registry import build_rules, list_rules, register_rule
from .whitespace import WhitespaceRule

__all__ = [
    "Rule",
    "Diagnostic",
    "MultilineRule",
    "WhitespaceRule",
    "build_rules",
    "list_rules",
    "register_rule",
]
