"""
Class literal reflow: grouping, line packing and whitespace cleanup.
"""

from .engine import ReflowResult, build_document, is_canonical, reflow
from .grouping import Group, Groups, group_classes
from .lines import Document, Line
from .packer import pack_group
from .tokens import split_classes, variant_prefix
from .whitespace import NormalizeResult, normalize_whitespace

__all__ = [
    "reflow",
    "ReflowResult",
    "build_document",
    "is_canonical",
    "normalize_whitespace",
    "NormalizeResult",
    "split_classes",
    "variant_prefix",
    "group_classes",
    "Group",
    "Groups",
    "Line",
    "Document",
    "pack_group",
]
