"""
Consistent line wrapping of class literals.
"""

from __future__ import annotations

from typing import List, Sequence

from .base import Diagnostic, Rule
from ..reflow import reflow
from ..source.literals import TEMPLATE_QUOTE
from ..source.tree_sitter_support import TreeSitterDocument
from ..types import BoundaryMeta, ClassLiteral


class MultilineRule(Rule):
    name = "multiline"
    description = "Enforce consistent line wrapping for tailwind classes."

    @property
    def enabled(self) -> bool:
        return self.cfg.multiline.enabled

    def boundary_meta(self, literal: ClassLiteral) -> BoundaryMeta:
        opts = self.cfg.multiline
        start_column = literal.anchor_indent + opts.indent_width

        # line breaks need a template literal
        if literal.kind == "string":
            return BoundaryMeta(
                start_column=start_column,
                opening_quote=TEMPLATE_QUOTE,
                closing_quote=TEMPLATE_QUOTE,
            )

        return BoundaryMeta(
            start_column=start_column,
            opening_quote=literal.opening_quote,
            closing_quote=literal.closing_quote,
            closing_braces=literal.closing_braces,
            opening_braces=literal.opening_braces,
        )

    def check(self, doc: TreeSitterDocument, literals: Sequence[ClassLiteral]) -> List[Diagnostic]:
        out: List[Diagnostic] = []
        for literal in literals:
            result = reflow(literal.content, self.boundary_meta(literal), self.cfg.multiline, raw=literal.raw)
            if not result.changed:
                continue

            if literal.kind == "string":
                if TEMPLATE_QUOTE in literal.content or "${" in literal.content:
                    # would change meaning inside a template literal
                    continue
                if literal.attribute_name is not None:
                    out.append(self.report(
                        doc, literal, "literal_kind",
                        f"Invalid jsx attribute quotes: {literal.attribute_name}={literal.raw}.",
                        f"{{{result.text}}}",
                    ))
                else:
                    out.append(self.report(
                        doc, literal, "literal_kind",
                        f"Invalid literal string: {literal.raw}.",
                        result.text,
                    ))
                continue

            out.append(self.report(
                doc, literal, "line_wrapping",
                f"Invalid line wrapping: {literal.content}.",
                result.text,
            ))
        return out


__all__ = ["MultilineRule"]
