"""
Tree-sitter infrastructure for source files.
Provides grammar selection, named queries and node/text helpers.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree

from ..errors import UnsupportedFileError

# JSX-capable grammar for everything except plain .ts
_GRAMMAR_BY_EXT: Dict[str, str] = {
    "tsx": "tsx",
    "jsx": "tsx",
    "js": "tsx",
    "mjs": "tsx",
    "cjs": "tsx",
    "ts": "typescript",
    "mts": "typescript",
    "cts": "typescript",
}

_CALL_QUERY = """
(call_expression
  function: (identifier) @callee
  arguments: (arguments) @args) @call
"""

_ATTRIBUTE_QUERY = """
(jsx_attribute
  (property_identifier) @name) @attr
"""

_QUERIES: Dict[str, Dict[str, str]] = {
    "tsx": {"calls": _CALL_QUERY, "attributes": _ATTRIBUTE_QUERY},
    "typescript": {"calls": _CALL_QUERY},
}

_LANGUAGES: Dict[str, Language] = {}


def grammar_for(ext: str) -> str:
    grammar = _GRAMMAR_BY_EXT.get(ext.lower().lstrip("."))
    if grammar is None:
        raise UnsupportedFileError(f"Unsupported file extension: {ext!r}")
    return grammar


def _language(grammar: str) -> Language:
    lang = _LANGUAGES.get(grammar)
    if lang is None:
        # TS and TSX are two grammars shipped in one package
        raw = tsts.language_tsx() if grammar == "tsx" else tsts.language_typescript()
        lang = _LANGUAGES[grammar] = Language(raw)
    return lang


class TreeSitterDocument:
    """
    Parsed source file with a small named-query system.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext.lower().lstrip(".")
        self.grammar = grammar_for(self.ext)
        self._text_bytes = text.encode("utf-8")
        self._lines = text.split("\n")
        self._query_cache: Dict[str, Query] = {}
        self.tree: Tree = Parser(self.get_language()).parse(self._text_bytes)

    def get_language(self) -> Language:
        return _language(self.grammar)

    def get_query_definitions(self) -> Dict[str, str]:
        return _QUERIES[self.grammar]

    @property
    def root_node(self) -> Node:
        return self.tree.root_node

    def has_query(self, query_name: str) -> bool:
        return query_name in self.get_query_definitions()

    def query(self, query_name: str) -> List[Dict[str, Node]]:
        """
        Execute a named query; one dict per match mapping capture names to nodes.

        Raises:
            ValueError: If the query is not defined for this grammar
        """
        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])
        results: List[Dict[str, Node]] = []
        for _pattern_index, captures in cursor.matches(self.root_node):
            results.append({name: nodes[0] for name, nodes in captures.items() if nodes})
        # matches come back in document order per pattern; keep them sorted for stable reports
        results.sort(key=lambda m: min(n.start_byte for n in m.values()))
        return results

    def query_opt(self, query_name: str) -> List[Dict[str, Node]]:
        """Like query(), but an empty list for queries the grammar lacks."""
        if not self.has_query(query_name):
            return []
        return self.query(query_name)

    def get_node_text(self, node: Node) -> str:
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Char range for a node."""
        return self.byte_to_char_position(node.start_byte), self.byte_to_char_position(node.end_byte)

    def line_indent(self, row: int) -> int:
        """Width of the leading whitespace of a 0-based line."""
        if row < 0 or row >= len(self._lines):
            return 0
        line = self._lines[row]
        return len(line) - len(line.lstrip(" \t"))

    def line_col(self, char_offset: int) -> Tuple[int, int]:
        """1-based line and column of a char offset."""
        before = self.text[:char_offset]
        line = before.count("\n") + 1
        col = char_offset - (before.rfind("\n") + 1) + 1
        return line, col

    def has_error(self) -> bool:
        return self.root_node.has_error

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Convert a byte position to a character position in the text.
        A position inside a multi-byte character maps to the start of that character.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)
        return len(self._text_bytes[:byte_pos].decode("utf-8", errors="ignore"))


__all__ = ["TreeSitterDocument", "grammar_for", "Node"]
