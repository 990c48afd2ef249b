"""Merging two binary search trees into one balanced tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass
class Node:
    """A binary tree node."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def inorder(root: Optional[Node]) -> list[Any]:
    """Return the values of a tree in inorder."""
    values: list[Any] = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.data)
        node = node.right
    return values


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences; on ties the element of ``second`` comes first."""
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def sorted_to_bst(values: Sequence[Any]) -> Optional[Node]:
    """Build a balanced search tree from sorted values."""

    def build(start: int, end: int) -> Optional[Node]:
        if start > end:
            return None
        mid = (start + end) // 2
        return Node(values[mid], build(start, mid - 1), build(mid + 1, end))

    return build(0, len(values) - 1)


def merge_trees(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Merge two search trees into a new balanced search tree."""
    return sorted_to_bst(merge_sorted(inorder(first), inorder(second)))