"""
Removal of unnecessary whitespace inside class literals.
"""

from __future__ import annotations

from typing import List, Sequence

from .base import Diagnostic, Rule
from ..reflow import normalize_whitespace
from ..source.tree_sitter_support import TreeSitterDocument
from ..types import ClassLiteral


class WhitespaceRule(Rule):
    name = "no-unnecessary-whitespace"
    description = "Disallow unnecessary whitespace in tailwind classes."

    @property
    def enabled(self) -> bool:
        return self.cfg.whitespace.enabled

    def check(self, doc: TreeSitterDocument, literals: Sequence[ClassLiteral]) -> List[Diagnostic]:
        allow_multiline = self.cfg.whitespace.allow_multiline
        out: List[Diagnostic] = []
        for literal in literals:
            result = normalize_whitespace(
                literal.content,
                allow_multiline,
                keep_leading=literal.closing_braces is not None,
                keep_trailing=literal.opening_braces is not None,
            )
            if not result.changed:
                continue

            head = literal.raw[:literal.content_offset]
            tail = literal.raw[literal.content_offset + len(literal.content):]
            out.append(self.report(
                doc, literal, "unnecessary_whitespace",
                f"Unnecessary whitespace: {literal.content}.",
                f"{head}{result.text}{tail}",
            ))
        return out


__all__ = ["WhitespaceRule"]
