"""
Whitespace cleanup inside class literals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

_SPLIT_RE = re.compile(r"(\s+)")
# horizontal whitespace between a class and the following line break
_TRAILING_HSPACE_RE = re.compile(r"^[^\S\r\n]+(?=\r?\n)")


@dataclass(frozen=True)
class NormalizeResult:
    text: str
    changed: bool


def _normalize_run(run: str, *, edge: bool, keep: bool, allow_multiline: bool) -> str:
    if allow_multiline and "\n" in run:
        # line breaks stay, together with the indentation that follows them
        return _TRAILING_HSPACE_RE.sub("", run, count=1)
    if edge:
        return " " if keep else ""
    return " "


def normalize_whitespace(
    content: str,
    allow_multiline: bool = True,
    *,
    keep_leading: bool = False,
    keep_trailing: bool = False,
) -> NormalizeResult:
    """
    Collapse redundant whitespace in literal content.

    Args:
        content: Literal content between its delimiters
        allow_multiline: Keep line breaks (and their indentation)
        keep_leading: Content follows an interpolation; leading whitespace
                      collapses to one space instead of being removed
        keep_trailing: Content precedes an interpolation; same for trailing

    Returns:
        NormalizeResult with the cleaned text
    """
    chunks = [c for c in _SPLIT_RE.split(content) if c]
    out: List[str] = []
    last = len(chunks) - 1

    for index, chunk in enumerate(chunks):
        if not chunk.isspace():
            out.append(chunk)
            continue

        is_leading = index == 0
        is_trailing = index == last
        if is_leading and is_trailing:
            keep = keep_leading or keep_trailing
        elif is_leading:
            keep = keep_leading
        else:
            keep = keep_trailing

        out.append(_normalize_run(
            chunk,
            edge=is_leading or is_trailing,
            keep=keep,
            allow_multiline=allow_multiline,
        ))

    text = "".join(out)
    return NormalizeResult(text=text, changed=text != content)


__all__ = ["NormalizeResult", "normalize_whitespace"]
