"""
Lint and fix entry points over source text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .range_edits import RangeEditor
from .rules import Diagnostic, Rule, build_rules
from .source import TreeSitterDocument, find_class_literals
from .types import TwlintConfig

logger = logging.getLogger(__name__)

MAX_FIX_PASSES = 10


@dataclass
class FixOutcome:
    text: str
    changed: bool
    passes: int
    fixes_applied: Dict[str, int] = field(default_factory=dict)
    remaining: List[Diagnostic] = field(default_factory=list)


def _rules_for(cfg: TwlintConfig, rules: Optional[Sequence[Rule]]) -> Sequence[Rule]:
    return rules if rules is not None else build_rules(cfg)


def lint_text(
    text: str,
    ext: str,
    cfg: Optional[TwlintConfig] = None,
    *,
    rules: Optional[Sequence[Rule]] = None,
) -> List[Diagnostic]:
    """Run every enabled rule over the class literals of one source text."""
    cfg = cfg or TwlintConfig()
    doc = TreeSitterDocument(text, ext)
    if doc.has_error():
        logger.debug("syntax errors in .%s source; linting what parsed", ext)

    literals = find_class_literals(doc, cfg.class_attributes, cfg.callees)
    logger.debug("found %d class literal(s)", len(literals))

    out: List[Diagnostic] = []
    for rule in _rules_for(cfg, rules):
        out.extend(rule.check(doc, literals))
    out.sort(key=lambda d: (d.start_char, d.rule))
    return out


def fix_text(text: str, ext: str, cfg: Optional[TwlintConfig] = None) -> FixOutcome:
    """
    Apply fixes until the text is stable.

    Overlapping fixes of one pass are resolved by the range editor and
    picked up again on the next pass.
    """
    cfg = cfg or TwlintConfig()
    rules = _rules_for(cfg, None)
    current = text
    applied: Dict[str, int] = {}

    for passes in range(1, MAX_FIX_PASSES + 1):
        diagnostics = lint_text(current, ext, cfg, rules=rules)
        editor = RangeEditor(current)
        for diag in diagnostics:
            if diag.replacement is not None:
                editor.add_replacement(diag.start_char, diag.end_char, diag.replacement, diag.rule)

        if not editor.edits:
            return FixOutcome(current, current != text, passes, applied, diagnostics)

        updated, stats = editor.apply_edits()
        for rule_name, count in stats["by_type"].items():
            applied[rule_name] = applied.get(rule_name, 0) + count
        logger.debug("fix pass %d: %d edit(s)", passes, stats["edits_applied"])

        if updated == current:
            return FixOutcome(current, current != text, passes, applied, diagnostics)
        current = updated

    logger.warning("fixes did not converge after %d passes", MAX_FIX_PASSES)
    remaining = lint_text(current, ext, cfg, rules=rules)
    return FixOutcome(current, current != text, MAX_FIX_PASSES, applied, remaining)


__all__ = ["lint_text", "fix_text", "FixOutcome", "MAX_FIX_PASSES"]
