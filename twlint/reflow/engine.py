"""
Reflow pipeline: tokens -> groups -> packed lines -> delimited document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .boundaries import attach_leading, attach_trailing
from .grouping import group_classes
from .lines import Document
from .packer import pack_group
from .tokens import split_classes
from ..types import BoundaryMeta, MultilineOptions

CANONICAL_LINE_COUNT = 3


@dataclass(frozen=True)
class ReflowResult:
    text: str
    changed: bool
    line_count: int


def build_document(content: str, meta: BoundaryMeta, options: MultilineOptions) -> Document:
    """Lay out the classes of one literal as a multi-line document."""
    document = Document(meta.start_column, options.indent_char)
    attach_leading(document, meta)

    groups = group_classes(split_classes(content), options.group)
    if groups is not None:
        for group in groups:
            pack_group(document, group, options)

    attach_trailing(document, meta, options)
    return document


def is_canonical(line_count: int, meta: BoundaryMeta) -> bool:
    """
    Quote line, one content line, quote line: the minimal multi-line shape,
    left alone whatever the current text looks like.
    """
    return line_count == CANONICAL_LINE_COUNT and not meta.has_braces


def default_raw(content: str, meta: BoundaryMeta) -> str:
    """Raw text of a template segment with the given content and markers."""
    return "".join(part for part in (
        meta.opening_quote,
        meta.closing_braces,
        content,
        meta.opening_braces,
        meta.closing_quote,
    ) if part is not None)


def reflow(
    content: str,
    meta: BoundaryMeta,
    options: Optional[MultilineOptions] = None,
    *,
    raw: Optional[str] = None,
) -> ReflowResult:
    """
    Re-serialize literal content as a multi-line class layout.

    Args:
        content: Literal content between its delimiters
        meta: Delimiters and indentation baseline of the literal
        options: Packing limits and grouping policy
        raw: Current source text of the literal; rebuilt from content and
             meta when omitted

    Returns:
        ReflowResult; changed is False for canonical layouts and for text
        identical to raw
    """
    options = options or MultilineOptions()
    document = build_document(content, meta, options)
    text = document.to_string()

    if is_canonical(len(document), meta):
        return ReflowResult(text=text, changed=False, line_count=len(document))

    current = default_raw(content, meta) if raw is None else raw
    return ReflowResult(text=text, changed=text != current, line_count=len(document))


__all__ = ["ReflowResult", "build_document", "is_canonical", "reflow", "CANONICAL_LINE_COUNT"]
