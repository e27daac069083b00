"""
Local rebalancing primitives for the left-leaning red-black tree.

Each function rewires a node and its immediate children and returns the
root of the resulting subtree. Callers must rebind their link to the
returned node. Preconditions are established by the calling mutation
routine and are not checked here.
"""

from ordmap.models.sortedcontainers.node import Color, Node, is_red, size_of


def rotate_left(h: Node) -> Node:
    """
    Make a right-leaning red link lean left.

    Requires h.right to be red. The right child takes h's color and
    position, and h becomes its red left child.
    """
    x = h.right
    h.right = x.left
    x.left = h
    x.color = h.color
    h.color = Color.RED
    x.size = h.size
    h.size = size_of(h.left) + size_of(h.right) + 1
    return x


def rotate_right(h: Node) -> Node:
    """Mirror of rotate_left. Requires h.left to be red."""
    x = h.left
    h.left = x.right
    x.right = h
    x.color = h.color
    h.color = Color.RED
    x.size = h.size
    h.size = size_of(h.left) + size_of(h.right) + 1
    return x


def flip_colors(h: Node) -> None:
    """
    Toggle the color of h and both of its children.

    h must have two children whose colors are opposite to its own.
    """
    h.color = h.color.flipped()
    h.left.color = h.left.color.flipped()
    h.right.color = h.right.color.flipped()


def move_red_left(h: Node) -> Node:
    """
    Make h.left or one of its children red.

    Assumes h is red and both h.left and h.left.left are black.
    """
    flip_colors(h)
    if is_red(h.right.left):
        h.right = rotate_right(h.right)
        h = rotate_left(h)
        flip_colors(h)
    return h


def move_red_right(h: Node) -> Node:
    """
    Make h.right or one of its children red.

    Assumes h is red and both h.right and h.right.left are black.
    """
    flip_colors(h)
    if is_red(h.left.left):
        h = rotate_right(h)
        flip_colors(h)
    return h


def balance(h: Node) -> Node:
    """Restore the 2-3 shape at h on the way back up a deletion path."""
    if is_red(h.right):
        h = rotate_left(h)
    if is_red(h.left) and is_red(h.left.left):
        h = rotate_right(h)
    if is_red(h.left) and is_red(h.right):
        flip_colors(h)
    h.size = size_of(h.left) + size_of(h.right) + 1
    return h
