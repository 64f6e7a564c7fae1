"""
Extraction of class literals from JSX attributes and helper-function calls.

Only the literal boundaries are taken from the syntax tree; the class text
itself is handed to the reflow engine untouched.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .tree_sitter_support import Node, TreeSitterDocument
from ..types import ClassLiteral

logger = logging.getLogger(__name__)

TEMPLATE_QUOTE = "`"
OPENING_BRACES = "${"
CLOSING_BRACES = "}"


def string_literal(
    doc: TreeSitterDocument,
    node: Node,
    anchor: Node,
    attribute_name: Optional[str] = None,
) -> Optional[ClassLiteral]:
    """Plain quoted string ("..." or '...')."""
    raw = doc.get_node_text(node)
    if len(raw) < 2:
        return None
    quote = raw[0]
    start, end = doc.get_node_range(node)
    return ClassLiteral(
        kind="string",
        content=raw[1:-1],
        raw=raw,
        start_char=start,
        end_char=end,
        anchor_indent=doc.line_indent(anchor.start_point[0]),
        opening_quote=quote,
        closing_quote=raw[-1],
        attribute_name=attribute_name,
    )


def template_literals(doc: TreeSitterDocument, node: Node, anchor: Node) -> List[ClassLiteral]:
    """
    One ClassLiteral per static segment of a template string.

    `a ${x} b ${y} c` yields "`a ${", "} b ${" and "} c`".
    """
    start, end = doc.get_node_range(node)
    subs = [doc.get_node_range(child) for child in node.children if child.type == "template_substitution"]

    # segment i spans from the closing brace of substitution i-1 to the "${" of substitution i
    starts = [start] + [sub_end - len(CLOSING_BRACES) for _, sub_end in subs]
    ends = [sub_start + len(OPENING_BRACES) for sub_start, _ in subs] + [end]
    anchor_indent = doc.line_indent(anchor.start_point[0])

    out: List[ClassLiteral] = []
    last_index = len(subs)
    for index, (seg_start, seg_end) in enumerate(zip(starts, ends)):
        is_first = index == 0
        is_last = index == last_index
        raw = doc.text[seg_start:seg_end]
        head = len(TEMPLATE_QUOTE) if is_first else len(CLOSING_BRACES)
        tail = len(TEMPLATE_QUOTE) if is_last else len(OPENING_BRACES)
        out.append(ClassLiteral(
            kind="template",
            content=raw[head:len(raw) - tail],
            raw=raw,
            start_char=seg_start,
            end_char=seg_end,
            anchor_indent=anchor_indent,
            opening_quote=TEMPLATE_QUOTE if is_first else None,
            closing_quote=TEMPLATE_QUOTE if is_last else None,
            closing_braces=None if is_first else CLOSING_BRACES,
            opening_braces=None if is_last else OPENING_BRACES,
        ))
    return out


def expression_literals(doc: TreeSitterDocument, node: Node, anchor: Optional[Node] = None) -> List[ClassLiteral]:
    """
    Literals reachable from a call argument.

    Descends into arrays, object keys, ternary branches, logical operands
    and parentheses; nested calls are matched on their own.
    """
    kind = node.type

    if kind == "string":
        lit = string_literal(doc, node, anchor or node)
        return [lit] if lit else []

    if kind == "template_string":
        return template_literals(doc, node, anchor or node)

    if kind in ("array", "parenthesized_expression"):
        return _collect(doc, node.named_children, anchor)

    if kind == "object":
        keys = [pair.child_by_field_name("key") for pair in node.named_children if pair.type == "pair"]
        return _collect(doc, (k for k in keys if k is not None), anchor)

    if kind == "ternary_expression":
        branches = [node.child_by_field_name("consequence"), node.child_by_field_name("alternative")]
        return _collect(doc, (b for b in branches if b is not None), anchor)

    if kind == "binary_expression":
        operator = node.child_by_field_name("operator")
        op = doc.get_node_text(operator) if operator is not None else ""
        right = node.child_by_field_name("right")
        left = node.child_by_field_name("left")
        if op == "&&":
            return _collect(doc, [right] if right is not None else [], anchor)
        if op in ("||", "??"):
            return _collect(doc, (n for n in (left, right) if n is not None), anchor)

    return []


def _collect(doc: TreeSitterDocument, nodes: Iterable[Node], anchor: Optional[Node]) -> List[ClassLiteral]:
    out: List[ClassLiteral] = []
    for child in nodes:
        out.extend(expression_literals(doc, child, anchor))
    return out


def attribute_literals(doc: TreeSitterDocument, attr: Node, name: str) -> List[ClassLiteral]:
    """Literals of one class attribute; the attribute line is the indentation anchor."""
    named = attr.named_children
    if len(named) < 2:
        logger.debug("attribute %s without value at %s", name, attr.start_point)
        return []

    value = named[-1]
    if value.type == "string":
        lit = string_literal(doc, value, attr, attribute_name=name)
        return [lit] if lit else []

    if value.type == "jsx_expression":
        inner = value.named_children
        if not inner:
            return []
        expr = inner[0]
        if expr.type == "string":
            lit = string_literal(doc, expr, attr)
            return [lit] if lit else []
        if expr.type == "template_string":
            return template_literals(doc, expr, attr)

    logger.debug("skipping %s value of type %s at %s", name, value.type, value.start_point)
    return []


def call_literals(doc: TreeSitterDocument, args: Node) -> List[ClassLiteral]:
    out: List[ClassLiteral] = []
    for arg in args.named_children:
        out.extend(expression_literals(doc, arg))
    return out


def find_class_literals(
    doc: TreeSitterDocument,
    class_attributes: Sequence[str],
    callees: Sequence[str],
) -> List[ClassLiteral]:
    """All class literals of a document, ordered by position."""
    found: List[ClassLiteral] = []

    for match in doc.query_opt("attributes"):
        attr, name_node = match.get("attr"), match.get("name")
        if attr is None or name_node is None:
            continue
        name = doc.get_node_text(name_node)
        if name in class_attributes:
            found.extend(attribute_literals(doc, attr, name))

    for match in doc.query("calls"):
        callee, args = match.get("callee"), match.get("args")
        if callee is None or args is None:
            continue
        if doc.get_node_text(callee) in callees:
            found.extend(call_literals(doc, args))

    found.sort(key=lambda lit: lit.start_char)
    return found


__all__ = [
    "find_class_literals",
    "attribute_literals",
    "call_literals",
    "expression_literals",
    "template_literals",
    "string_literal",
]
