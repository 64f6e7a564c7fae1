"""
Grouping of class tokens by variant prefix.

A group is a run of classes kept together before line packing splits it
further. Empty groups are blank separator rows.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from .tokens import variant_prefix
from ..types import GroupPolicy


class Group:

    def __init__(self) -> None:
        self.classes: List[str] = []

    @property
    def class_count(self) -> int:
        return len(self.classes)

    def last(self) -> Optional[str]:
        return self.classes[-1] if self.classes else None

    def add_class(self, class_name: str) -> Group:
        self.classes.append(class_name)
        return self

    def __repr__(self) -> str:
        return f"Group({self.classes!r})"


class Groups:
    """Append-only list of groups with a pointer to the current one."""

    def __init__(self) -> None:
        self.groups: List[Group] = []
        self._current: Optional[Group] = None
        self.add_group()

    @property
    def group(self) -> Group:
        assert self._current is not None
        return self._current

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[Group]:
        return iter(self.groups)

    def add_group(self) -> Groups:
        group = Group()
        self.groups.append(group)
        self._current = group
        return self

    def last_class(self) -> Optional[str]:
        """Last class of the last non-empty group."""
        for group in reversed(self.groups):
            if group.class_count:
                return group.last()
        return None


def group_classes(classes: Sequence[str], policy: GroupPolicy) -> Optional[Groups]:
    """
    Partition classes into groups according to the separation policy.

    Returns None for an empty class list.
    """
    if not classes:
        return None

    groups = Groups()

    for index, class_name in enumerate(classes):
        is_first_class = index == 0
        is_first_group = len(groups) == 1

        last_modifier = variant_prefix(groups.last_class())
        modifier = variant_prefix(class_name)

        if last_modifier != modifier and not (is_first_class and is_first_group):
            if policy == "emptyLine":
                groups.add_group()
                groups.add_group()
            elif policy == "newLine":
                groups.add_group()

        groups.group.add_class(class_name)

    return groups


__all__ = ["Group", "Groups", "group_classes"]
