"""
Common rule infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Sequence

from ..source.tree_sitter_support import TreeSitterDocument
from ..types import ClassLiteral, TwlintConfig


@dataclass(frozen=True)
class Diagnostic:
    """One finding with its automatic fix."""
    rule: str
    message_id: str
    message: str
    start_char: int
    end_char: int
    line: int
    column: int
    replacement: Optional[str] = None


class Rule(ABC):
    """
    A check over the class literals of one document.

    Rules are built once per run from the resolved config and hold no
    per-document state.
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""

    def __init__(self, cfg: TwlintConfig):
        self.cfg = cfg

    @property
    def enabled(self) -> bool:
        return True

    @abstractmethod
    def check(self, doc: TreeSitterDocument, literals: Sequence[ClassLiteral]) -> List[Diagnostic]:
        pass

    def report(
        self,
        doc: TreeSitterDocument,
        literal: ClassLiteral,
        message_id: str,
        message: str,
        replacement: Optional[str],
    ) -> Diagnostic:
        line, column = doc.line_col(literal.start_char)
        return Diagnostic(
            rule=self.name,
            message_id=message_id,
            message=message,
            start_char=literal.start_char,
            end_char=literal.end_char,
            line=line,
            column=column,
            replacement=replacement,
        )


__all__ = ["Rule", "Diagnostic"]
