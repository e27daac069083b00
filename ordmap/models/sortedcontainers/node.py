"""
Node record and color helpers for the left-leaning red-black tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """Color of the link from a node's parent to the node."""

    RED = 0
    BLACK = 1

    def flipped(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED


@dataclass(eq=False)
class Node:
    """Node in the left-leaning red-black tree."""

    key: Any
    value: Any
    color: Color = Color.RED
    size: int = 1
    left: "Node | None" = None
    right: "Node | None" = None

    def deep_equals(self, other: "Node | None") -> bool:
        """
        Compare this subtree with another one field by field.

        Key, value, color and size must match at every position, and both
        subtrees must have the same shape.
        """
        if other is None:
            return False
        if self is other:
            return True
        if (
            self.key != other.key
            or self.value != other.value
            or self.color != other.color
            or self.size != other.size
        ):
            return False
        return _subtree_equals(self.left, other.left) and _subtree_equals(
            self.right, other.right
        )


def _subtree_equals(a: Node | None, b: Node | None) -> bool:
    if a is None:
        return b is None
    return a.deep_equals(b)


def is_red(node: Node | None) -> bool:
    """Empty links count as black."""
    if node is None:
        return False
    return node.color == Color.RED


def size_of(node: Node | None) -> int:
    if node is None:
        return 0
    return node.size
