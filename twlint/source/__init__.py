from .literals import find_class_literals
from .tree_sitter_support import TreeSitterDocument, grammar_for

__all__ = ["TreeSitterDocument", "grammar_for", "find_class_literals"]
