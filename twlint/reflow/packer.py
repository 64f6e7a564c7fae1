"""
Greedy line packing of one class group.
"""

from __future__ import annotations

from .grouping import Group
from .lines import Document
from ..types import MultilineOptions


def needs_break(document: Document, class_name: str, options: MultilineOptions) -> bool:
    """
    Whether class_name has to go on a fresh line.

    Width is measured after the append, so a class wider than print_width
    leaves the current (possibly empty) indented line behind.
    """
    line = document.line
    if line.class_count >= options.classes_per_line:
        return True
    return line.measure_with(class_name) > options.print_width


def pack_group(document: Document, group: Group, options: MultilineOptions) -> None:
    """Append the lines for one group to the document."""
    document.add_line()

    # blank separator row
    if group.class_count == 0:
        return

    document.line.indent()

    for class_name in group.classes:
        if needs_break(document, class_name, options):
            document.add_line()
            document.line.indent()
        document.line.add_class(class_name)


__all__ = ["pack_group", "needs_break"]
