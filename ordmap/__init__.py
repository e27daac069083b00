"""
Ordered key-value map backed by a left-leaning red-black tree.

This package provides a sorted container with:
- put(key, value) / get(key) / delete(key) - O(log N)
- min() / max() / floor(key) / ceiling(key) - O(log N)
- rank(key) / select(k) - order statistics in O(log N)
- keys(lo, hi) / iterator(start, end) - lazy range queries
- delete_min() / delete_max() - O(log N)
"""

from ordmap.models.exceptions import (
    InvalidArgumentError,
    OrderedMapError,
    UnderflowError,
)
from ordmap.models.sortedcontainers import KeyRange, OrderedMap

__all__ = [
    "InvalidArgumentError",
    "KeyRange",
    "OrderedMap",
    "OrderedMapError",
    "UnderflowError",
]
