"""
Invariant checks for the left-leaning red-black tree.

Verification only: these walks cost O(N log N) and are meant for tests and
debugging, never for the mutation paths.
"""

import logging
from typing import TYPE_CHECKING, Any

from ordmap.models.sortedcontainers.node import Node, is_red, size_of

if TYPE_CHECKING:
    from ordmap.models.sortedcontainers.ordered_map import OrderedMap

logger = logging.getLogger(__name__)


class InvariantChecker:
    """
    Read-only verifier for an OrderedMap.

    Sub-checks run in a fixed order and stop at the first failure, so the
    rank check only ever walks a tree whose order and sizes are sound.
    """

    def __init__(self, table: "OrderedMap") -> None:
        self._table = table

    @property
    def _root(self) -> Node | None:
        return self._table._root

    def check(self) -> bool:
        checks = (
            ("BST order", self.is_bst),
            ("size consistency", self.is_size_consistent),
            ("rank consistency", self.is_rank_consistent),
            ("2-3 shape", self.is_23),
            ("black balance", self.is_balanced),
        )
        for name, predicate in checks:
            if not predicate():
                logger.warning(f"OrderedMap invariant violated: {name}")
                return False
        return True

    def is_bst(self) -> bool:
        """Every key is strictly between the bounds inherited from its ancestors."""
        return self._is_bst(self._root, None, None)

    def _is_bst(self, x: Node | None, lo: Any | None, hi: Any | None) -> bool:
        if x is None:
            return True
        if lo is not None and x.key <= lo:
            return False
        if hi is not None and x.key >= hi:
            return False
        return self._is_bst(x.left, lo, x.key) and self._is_bst(x.right, x.key, hi)

    def is_size_consistent(self) -> bool:
        return self._is_size_consistent(self._root)

    def _is_size_consistent(self, x: Node | None) -> bool:
        if x is None:
            return True
        if x.size != size_of(x.left) + size_of(x.right) + 1:
            return False
        return self._is_size_consistent(x.left) and self._is_size_consistent(x.right)

    def is_rank_consistent(self) -> bool:
        table = self._table
        for i in range(table.size()):
            if i != table.rank(table.select(i)):
                return False
        for key in table.keys():
            if key != table.select(table.rank(key)):
                return False
        return True

    def is_23(self) -> bool:
        """No red right links, and no node with a red link in and a red link out to the left."""
        return self._is_23(self._root)

    def _is_23(self, x: Node | None) -> bool:
        if x is None:
            return True
        if is_red(x.right):
            return False
        if x is not self._root and is_red(x) and is_red(x.left):
            return False
        return self._is_23(x.left) and self._is_23(x.right)

    def is_balanced(self) -> bool:
        """Every path from the root to an empty link has the same number of black links."""
        black = 0
        x = self._root
        while x is not None:
            if not is_red(x):
                black += 1
            x = x.left
        return self._is_balanced(self._root, black)

    def _is_balanced(self, x: Node | None, black: int) -> bool:
        if x is None:
            return black == 0
        if not is_red(x):
            black -= 1
        return self._is_balanced(x.left, black) and self._is_balanced(x.right, black)
