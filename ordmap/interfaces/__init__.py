"""
Abstract base classes and protocols for sorted containers.
"""

from ordmap.interfaces.range_iterable import RangeIterable
from ordmap.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
