"""
Shared pytest fixtures for ordered map tests.
"""

import random

import pytest

from ordmap import OrderedMap


@pytest.fixture
def empty_map():
    """Provide a fresh, empty OrderedMap instance."""
    return OrderedMap()


@pytest.fixture
def small_map():
    """Provide a map built from [5, 3, 8, 1, 4, 7, 9] with value = key."""
    table = OrderedMap()
    for key in [5, 3, 8, 1, 4, 7, 9]:
        table.put(key, key)
    return table


@pytest.fixture
def string_map():
    """Provide a map of zero-padded string keys key00..key19."""
    return OrderedMap((f"key{i:02d}", f"value{i}") for i in range(20))


@pytest.fixture
def shuffled_keys():
    """Provide 500 distinct integer keys in a reproducible random order."""
    keys = list(range(500))
    random.Random(1234).shuffle(keys)
    return keys
