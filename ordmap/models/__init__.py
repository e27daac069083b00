"""
Data models for the ordered map.
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
