"""
Line and document builders for multi-line class layouts.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional


def _join(parts: Iterable[Optional[str]], separator: str = " ") -> str:
    return separator.join(part for part in parts if part is not None)


class Line:
    """
    One physical output row: indentation, optional delimiter markers and
    class tokens.
    """

    def __init__(self, start_column: int = 0, indent_char: str = " "):
        self.start_column = start_column
        self.indent_char = indent_char
        self.classes: List[str] = []
        self.indentation: Optional[str] = None
        self.opening_quote: Optional[str] = None
        self.closing_quote: Optional[str] = None
        self.opening_braces: Optional[str] = None
        self.closing_braces: Optional[str] = None

    @property
    def class_count(self) -> int:
        return len(self.classes)

    def indent(self, start: Optional[int] = None) -> Line:
        """Indent the line to `start` units (defaults to the document column)."""
        column = self.start_column if start is None else start
        self.indentation = self.indent_char * max(column, 0)
        return self

    def add_class(self, class_name: str) -> Line:
        self.classes.append(class_name)
        return self

    def _render(self, classes: List[str]) -> str:
        return _join([
            self.indentation,
            self.opening_quote,
            _join([self.closing_braces, *classes, self.opening_braces]),
            self.closing_quote,
        ], "")

    def measure_with(self, class_name: str) -> int:
        """Serialized length the line would have after appending class_name."""
        return len(self._render([*self.classes, class_name]))

    def to_string(self) -> str:
        return self._render(self.classes)

    def __len__(self) -> int:
        return len(self.to_string())

    def __repr__(self) -> str:
        return f"Line({self.to_string()!r})"


class Document:
    """Ordered lines of one literal's replacement text; never empty."""

    def __init__(self, start_column: int = 0, indent_char: str = " "):
        self.start_column = start_column
        self.indent_char = indent_char
        self.lines: List[Line] = []
        self._current: Optional[Line] = None
        self.add_line()

    @property
    def line(self) -> Line:
        assert self._current is not None
        return self._current

    @property
    def first(self) -> Line:
        return self.lines[0]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def add_line(self) -> Document:
        line = Line(self.start_column, self.indent_char)
        self.lines.append(line)
        self._current = line
        return self

    def to_string(self) -> str:
        return "\n".join(line.to_string() for line in self.lines)


__all__ = ["Line", "Document"]
