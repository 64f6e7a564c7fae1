"""
twlint: line wrapping and whitespace cleanup for tailwind class literals.
"""

from .engine import fix_text, lint_text
from .reflow import normalize_whitespace, reflow
from .types import BoundaryMeta, MultilineOptions, TwlintConfig, WhitespaceOptions

__all__ = [
    "reflow",
    "normalize_whitespace",
    "lint_text",
    "fix_text",
    "BoundaryMeta",
    "MultilineOptions",
    "WhitespaceOptions",
    "TwlintConfig",
]
