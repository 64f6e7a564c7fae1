"""
Attaching literal delimiters to the first and last lines of a layout.
"""

from __future__ import annotations

from .lines import Document
from ..types import BoundaryMeta, MultilineOptions


def attach_leading(document: Document, meta: BoundaryMeta) -> None:
    """Opening quote and the closing brace of a preceding expression go on the first line."""
    first = document.first
    if meta.opening_quote is not None:
        first.opening_quote = meta.opening_quote
    if meta.closing_braces is not None:
        first.closing_braces = meta.closing_braces


def attach_trailing(document: Document, meta: BoundaryMeta, options: MultilineOptions) -> None:
    """
    Opening brace of a following expression gets its own indented line; the
    closing quote goes one indent level left of the content.
    """
    if meta.opening_braces is not None:
        document.add_line()
        document.line.indent()
        document.line.opening_braces = meta.opening_braces

    if meta.closing_quote is not None:
        document.add_line()
        document.line.indent(meta.start_column - options.indent_width)
        document.line.closing_quote = meta.closing_quote


__all__ = ["attach_leading", "attach_trailing"]
