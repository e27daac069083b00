"""
Sorted container implementations.
"""

from ordmap.models.sortedcontainers.ordered_map import OrderedMap
from ordmap.models.sortedcontainers.range_iterator import KeyRange

__all__ = ["KeyRange", "OrderedMap"]
