"""
Ordered key-value map backed by a left-leaning red-black tree.

Guarantees O(log N) worst-case search, insert, delete, rank and select.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any

from ordmap.interfaces.sorted_container import SortedContainer
from ordmap.models.exceptions import InvalidArgumentError, UnderflowError
from ordmap.models.sortedcontainers.balance import (
    balance,
    flip_colors,
    move_red_left,
    move_red_right,
    rotate_left,
    rotate_right,
)
from ordmap.models.sortedcontainers.invariants import InvariantChecker
from ordmap.models.sortedcontainers.node import Color, Node, is_red, size_of
from ordmap.models.sortedcontainers.range_iterator import (
    KeyRange,
    _AsyncRangeIterator,
    _RangeIterator,
)

logger = logging.getLogger(__name__)

# Omitted range bound; distinct from an explicit None.
_UNSET: Any = object()


class OrderedMap(SortedContainer):
    """
    Left-leaning red-black tree implementation of SortedContainer.

    Properties maintained after every public call:
    1. BST order on keys
    2. Every node's size equals 1 + size(left) + size(right)
    3. No red right links and no two red links in a row
    4. Every path from root to an empty link has the same number of black links
    5. Root is always black

    None is never stored as a value: put(key, None) deletes key.
    """

    def __init__(self, items: Iterable[tuple[Any, Any]] | None = None) -> None:
        self._root: Node | None = None

        if items is not None:
            for key, value in items:
                self.put(key, value)
            logger.debug(f"Bulk-loaded OrderedMap with {self.size()} entries")

    # ------------------------------------------------------------------
    # Size

    def size(self, lo: Any = _UNSET, hi: Any = _UNSET) -> int:
        """
        Return the number of keys, or the number of keys in [lo, hi].

        Args:
            lo: Lower bound (inclusive). Must be given together with hi.
            hi: Upper bound (inclusive).

        Returns:
            The count of matching entries. 0 when lo > hi.
        """
        if lo is _UNSET and hi is _UNSET:
            return size_of(self._root)
        if lo is _UNSET or lo is None:
            raise InvalidArgumentError("size", "lo")
        if hi is _UNSET or hi is None:
            raise InvalidArgumentError("size", "hi")

        if lo > hi:
            return 0
        if self.contains(hi):
            return self.rank(hi) - self.rank(lo) + 1
        return self.rank(hi) - self.rank(lo)

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return size_of(self._root)

    # ------------------------------------------------------------------
    # Search

    def get(self, key: Any) -> Any | None:
        """Retrieve value by key. O(log N)"""
        if key is None:
            raise InvalidArgumentError("get")
        x = self._root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                x = x.right
            else:
                return x.value
        return None

    def contains(self, key: Any) -> bool:
        if key is None:
            raise InvalidArgumentError("contains")
        return self.get(key) is not None

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    # ------------------------------------------------------------------
    # Insertion

    def put(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair. O(log N)

        A None value removes the key instead.
        """
        if key is None:
            raise InvalidArgumentError("put")
        if value is None:
            self.delete(key)
            return

        self._root = self._put(self._root, key, value)
        self._root.color = Color.BLACK

    def _put(self, h: Node | None, key: Any, value: Any) -> Node:
        if h is None:
            return Node(key=key, value=value, color=Color.RED, size=1)

        if key < h.key:
            h.left = self._put(h.left, key, value)
        elif key > h.key:
            h.right = self._put(h.right, key, value)
        else:
            h.value = value

        # Fix any right-leaning links on the way up
        if is_red(h.right) and not is_red(h.left):
            h = rotate_left(h)
        if is_red(h.left) and is_red(h.left.left):
            h = rotate_right(h)
        if is_red(h.left) and is_red(h.right):
            flip_colors(h)
        h.size = size_of(h.left) + size_of(h.right) + 1
        return h

    # ------------------------------------------------------------------
    # Deletion

    def delete_min(self) -> None:
        """Remove the smallest key and its value. O(log N)"""
        if self.is_empty():
            raise UnderflowError("delete_min")

        # If both children of root are black, set root to red
        if not is_red(self._root.left) and not is_red(self._root.right):
            self._root.color = Color.RED

        self._root = self._delete_min(self._root)
        if self._root is not None:
            self._root.color = Color.BLACK

    def _delete_min(self, h: Node) -> Node | None:
        if h.left is None:
            return None

        if not is_red(h.left) and not is_red(h.left.left):
            h = move_red_left(h)

        h.left = self._delete_min(h.left)
        return balance(h)

    def delete_max(self) -> None:
        """Remove the largest key and its value. O(log N)"""
        if self.is_empty():
            raise UnderflowError("delete_max")

        if not is_red(self._root.left) and not is_red(self._root.right):
            self._root.color = Color.RED

        self._root = self._delete_max(self._root)
        if self._root is not None:
            self._root.color = Color.BLACK

    def _delete_max(self, h: Node) -> Node | None:
        if is_red(h.left):
            h = rotate_right(h)

        if h.right is None:
            return None

        if not is_red(h.right) and not is_red(h.right.left):
            h = move_red_right(h)

        h.right = self._delete_max(h.right)
        return balance(h)

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(log N)"""
        if key is None:
            raise InvalidArgumentError("delete")
        if not self.contains(key):
            logger.debug(f"delete: key {key!r} not present, nothing to do")
            return False

        if not is_red(self._root.left) and not is_red(self._root.right):
            self._root.color = Color.RED

        self._root = self._delete(self._root, key)
        if self._root is not None:
            self._root.color = Color.BLACK
        return True

    def _delete(self, h: Node, key: Any) -> Node | None:
        # key is known to be present below h
        if key < h.key:
            if not is_red(h.left) and not is_red(h.left.left):
                h = move_red_left(h)
            h.left = self._delete(h.left, key)
        else:
            if is_red(h.left):
                h = rotate_right(h)
            if key == h.key and h.right is None:
                return None
            if not is_red(h.right) and not is_red(h.right.left):
                h = move_red_right(h)
            if key == h.key:
                successor = self._min_node(h.right)
                h.key = successor.key
                h.value = successor.value
                h.right = self._delete_min(h.right)
            else:
                h.right = self._delete(h.right, key)
        return balance(h)

    # ------------------------------------------------------------------
    # Ordered queries

    def height(self) -> int:
        """Number of links on the longest root-to-leaf path; -1 when empty."""
        return self._height(self._root)

    def _height(self, x: Node | None) -> int:
        if x is None:
            return -1
        return 1 + max(self._height(x.left), self._height(x.right))

    def min(self) -> Any:
        """Return the smallest key."""
        if self.is_empty():
            raise UnderflowError("min")
        return self._min_node(self._root).key

    def _min_node(self, x: Node) -> Node:
        while x.left is not None:
            x = x.left
        return x

    def max(self) -> Any:
        """Return the largest key."""
        if self.is_empty():
            raise UnderflowError("max")
        x = self._root
        while x.right is not None:
            x = x.right
        return x.key

    def floor(self, key: Any) -> Any | None:
        """
        Return the largest key less than or equal to key.

        Returns:
            The floor key, or None if every key is greater than key.
        """
        if key is None:
            raise InvalidArgumentError("floor")
        if self.is_empty():
            raise UnderflowError("floor")

        best: Node | None = None
        x = self._root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                # x qualifies; a closer candidate can only be on the right
                best = x
                x = x.right
            else:
                return x.key
        return best.key if best is not None else None

    def ceiling(self, key: Any) -> Any | None:
        """
        Return the smallest key greater than or equal to key.

        Returns:
            The ceiling key, or None if every key is less than key.
        """
        if key is None:
            raise InvalidArgumentError("ceiling")
        if self.is_empty():
            raise UnderflowError("ceiling")

        best: Node | None = None
        x = self._root
        while x is not None:
            if key > x.key:
                x = x.right
            elif key < x.key:
                best = x
                x = x.left
            else:
                return x.key
        return best.key if best is not None else None

    def select(self, k: int) -> Any:
        """
        Return the key of rank k, i.e. the (k+1)-th smallest key.

        Raises:
            UnderflowError: If k is outside [0, size()).
        """
        n = self.size()
        if k < 0 or k >= n:
            raise UnderflowError("select", f"index {k} outside [0, {n})")

        x = self._root
        while True:
            t = size_of(x.left)
            if t > k:
                x = x.left
            elif t < k:
                k -= t + 1
                x = x.right
            else:
                return x.key

    def rank(self, key: Any) -> int:
        """Return the number of keys strictly less than key."""
        if key is None:
            raise InvalidArgumentError("rank")

        result = 0
        x = self._root
        while x is not None:
            if key < x.key:
                x = x.left
            elif key > x.key:
                result += 1 + size_of(x.left)
                x = x.right
            else:
                return result + size_of(x.left)
        return result

    def keys(self, lo: Any = _UNSET, hi: Any = _UNSET) -> KeyRange:
        """
        Return the keys in [lo, hi] in ascending order.

        With no bounds, every key is included. The result is a lazy view
        that can be iterated more than once.
        """
        if lo is _UNSET and hi is _UNSET:
            return KeyRange(self)
        if lo is _UNSET or lo is None:
            raise InvalidArgumentError("keys", "lo")
        if hi is _UNSET or hi is None:
            raise InvalidArgumentError("keys", "hi")
        return KeyRange(self, lo, hi)

    # ------------------------------------------------------------------
    # Iteration

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self._root, start, end)

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> AsyncIterator[tuple[Any, Any]]:
        return _AsyncRangeIterator(self._root, start, end)

    # ------------------------------------------------------------------
    # Diagnostics

    def check(self) -> bool:
        """Return True if every red-black tree invariant holds."""
        return InvariantChecker(self).check()

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return f"OrderedMap({{{items}}})"
