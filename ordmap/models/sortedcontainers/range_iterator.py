"""
Lazy in-order range iterators over a left-leaning red-black tree.
"""

from collections.abc import AsyncIterator, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from ordmap.models.sortedcontainers.node import Node

if TYPE_CHECKING:
    from ordmap.models.sortedcontainers.ordered_map import OrderedMap


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """
    Iterator for inclusive range queries on the tree.

    Holds at most one node per level on its stack. A None bound leaves
    that side of the range open.
    """

    def __init__(self, root: Node | None, lo: Any | None, hi: Any | None) -> None:
        self._stack: list[Node] = []
        self._hi = hi

        # Initialize stack with nodes >= lo
        self._push_left_path(root, lo)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check hi bound
        if self._hi is not None and node.key > self._hi:
            self._stack.clear()
            raise StopIteration

        result = (node.key, node.value)

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return result

    def _push_left_path(self, node: Node | None, lo: Any | None) -> None:
        """Push leftmost path to stack, respecting lo bound."""
        while node:
            if lo is not None and node.key < lo:
                # Whole left subtree is below lo
                node = node.right
            else:
                self._stack.append(node)
                node = node.left


class _AsyncRangeIterator(AsyncIterator[tuple[Any, Any]]):
    """Async iterator for range queries on the tree (in-memory, no I/O)."""

    def __init__(self, root: Node | None, lo: Any | None, hi: Any | None) -> None:
        self._inner = _RangeIterator(root, lo, hi)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[Any, Any]:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None


class KeyRange(Iterable[Any]):
    """
    Restartable view of the keys of an OrderedMap within [lo, hi].

    Every call to iter() starts a fresh walk over the map's current root,
    so the view can be consumed any number of times.
    """

    def __init__(
        self, table: "OrderedMap", lo: Any | None = None, hi: Any | None = None
    ) -> None:
        self._table = table
        self._lo = lo
        self._hi = hi

    def __iter__(self) -> Iterator[Any]:
        for key, _ in _RangeIterator(self._table._root, self._lo, self._hi):
            yield key

    def __repr__(self) -> str:
        return f"KeyRange(lo={self._lo!r}, hi={self._hi!r})"
