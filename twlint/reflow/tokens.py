"""
Class token helpers: splitting literal content and classifying variants.
"""

from __future__ import annotations

import re
from typing import List, Optional

_WS_RE = re.compile(r"\s+")
_VARIANT_RE = re.compile(r"^.*?:")


def split_classes(content: str) -> List[str]:
    """Split literal content into class tokens on any whitespace."""
    return [chunk for chunk in _WS_RE.split(content) if chunk]


def variant_prefix(class_name: Optional[str]) -> Optional[str]:
    """
    Leading variant prefix of a class, up to and including the first colon.

    >>> variant_prefix("hover:md:underline")
    'hover:'
    >>> variant_prefix("underline") is None
    True
    """
    if not class_name:
        return None
    m = _VARIANT_RE.match(class_name)
    return m.group(0) if m else None


__all__ = ["split_classes", "variant_prefix"]
