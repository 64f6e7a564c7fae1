"""
Range-based text editing for applying rule fixes.
Edits are collected by character range and applied back to front.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class TextRange:
    """Represents a range in text by character positions."""
    start_char: int
    end_char: int

    def __post_init__(self):
        if self.start_char > self.end_char:
            raise ValueError(f"Invalid range: start_char ({self.start_char}) > end_char ({self.end_char})")

    @property
    def length(self) -> int:
        return self.end_char - self.start_char

    def overlaps(self, other: TextRange) -> bool:
        """Check if this range overlaps with another."""
        return not (self.end_char <= other.start_char or other.end_char <= self.start_char)


@dataclass
class Edit:
    """A single replacement using character positions."""
    range: TextRange
    replacement: str
    type: Optional[str]  # rule name, for stats


class RangeEditor:
    """
    Collects replacements over one text and applies them in a single pass.
    """

    def __init__(self, original_text: str):
        self.original_text = original_text
        self.edits: List[Edit] = []

    def add_replacement(self, start_char: int, end_char: int, replacement: str, edit_type: Optional[str]) -> bool:
        """
        Add a replacement; returns False if it was dropped.

        Overlap policy: wider edits win; on equal width the first one wins.
        """
        char_range = TextRange(start_char, end_char)
        new_width = char_range.length

        edits_to_remove = []
        for i, existing in enumerate(self.edits):
            if char_range.overlaps(existing.range):
                if new_width > existing.range.length:
                    edits_to_remove.append(i)
                else:
                    return False

        # reverse order keeps indices valid
        for i in reversed(edits_to_remove):
            del self.edits[i]

        self.edits.append(Edit(char_range, replacement, edit_type))
        return True

    def validate_edits(self) -> List[str]:
        """Bounds check; overlaps are already filtered at add time."""
        errors = []
        for i, edit in enumerate(self.edits):
            if edit.range.start_char < 0:
                errors.append(f"Edit {i}: start_char ({edit.range.start_char}) is negative")
            if edit.range.end_char > len(self.original_text):
                errors.append(f"Edit {i}: end_char ({edit.range.end_char}) exceeds text length ({len(self.original_text)})")
        return errors

    def apply_edits(self) -> Tuple[str, Dict[str, Any]]:
        """
        Apply all edits and return the modified text and statistics.
        """
        validation_errors = self.validate_edits()
        if validation_errors:
            raise ValueError(f"Edit validation failed: {'; '.join(validation_errors)}")

        stats: Dict[str, Any] = {"edits_applied": len(self.edits), "by_type": {}}
        if not self.edits:
            return self.original_text, stats

        result_text = self.original_text
        for edit in sorted(self.edits, key=lambda e: e.range.start_char, reverse=True):
            result_text = result_text[:edit.range.start_char] + edit.replacement + result_text[edit.range.end_char:]
            if edit.type:
                stats["by_type"][edit.type] = stats["by_type"].get(edit.type, 0) + 1

        return result_text, stats


__all__ = ["RangeEditor", "TextRange", "Edit"]
