"""
Tests for the read-only ordered queries of OrderedMap.
"""

import pytest

from ordmap import InvalidArgumentError, KeyRange, OrderedMap, UnderflowError


class TestMinMax:
    """Tests for min and max."""

    def test_min_max(self, small_map):
        assert small_map.min() == 1
        assert small_map.max() == 9

    def test_single_key(self):
        table = OrderedMap([("only", 1)])
        assert table.min() == table.max() == "only"

    def test_empty(self, empty_map):
        """Both fail with an underflow on an empty map."""
        with pytest.raises(UnderflowError) as excinfo:
            empty_map.max()
        assert excinfo.value.operation == "max"
        assert isinstance(excinfo.value, LookupError)


class TestFloorCeiling:
    """Tests for floor and ceiling."""

    def test_floor(self, small_map):
        """Largest key less than or equal to the argument."""
        assert small_map.floor(5) == 5
        assert small_map.floor(6) == 5
        assert small_map.floor(2) == 1
        assert small_map.floor(100) == 9

    def test_floor_below_min(self, small_map):
        """No key qualifies below the minimum."""
        assert small_map.floor(0) is None

    def test_ceiling(self, small_map):
        """Smallest key greater than or equal to the argument."""
        assert small_map.ceiling(5) == 5
        assert small_map.ceiling(6) == 7
        assert small_map.ceiling(0) == 1
        assert small_map.ceiling(2) == 3

    def test_ceiling_above_max(self, small_map):
        """No key qualifies above the maximum."""
        assert small_map.ceiling(10) is None

    def test_string_keys(self, string_map):
        assert string_map.floor("key05x") == "key05"
        assert string_map.ceiling("key05x") == "key06"

    def test_none_key_checked_first(self, empty_map):
        """A None key is reported even when the map is empty."""
        with pytest.raises(InvalidArgumentError):
            empty_map.floor(None)
        with pytest.raises(InvalidArgumentError):
            empty_map.ceiling(None)

    def test_empty(self, empty_map):
        with pytest.raises(UnderflowError):
            empty_map.floor(1)
        with pytest.raises(UnderflowError):
            empty_map.ceiling(1)


class TestRankSelect:
    """Tests for rank and select."""

    def test_select(self, small_map):
        """select(k) is the key at sorted position k."""
        assert [small_map.select(i) for i in range(7)] == [1, 3, 4, 5, 7, 8, 9]

    def test_select_out_of_range(self, small_map):
        """Indices outside [0, size()) fail with an underflow."""
        with pytest.raises(UnderflowError):
            small_map.select(7)
        with pytest.raises(UnderflowError):
            small_map.select(-1)

    def test_rank_present_keys(self, small_map):
        assert small_map.rank(1) == 0
        assert small_map.rank(5) == 3
        assert small_map.rank(9) == 6

    def test_rank_absent_keys(self, small_map):
        """Absent keys are ranked by how many keys are smaller."""
        assert small_map.rank(0) == 0
        assert small_map.rank(2) == 1
        assert small_map.rank(6) == 4
        assert small_map.rank(100) == 7

    def test_rank_none(self, small_map):
        with pytest.raises(InvalidArgumentError):
            small_map.rank(None)

    def test_rank_on_empty(self, empty_map):
        assert empty_map.rank(5) == 0

    def test_duality(self, shuffled_keys):
        """rank and select are inverse on a large tree."""
        table = OrderedMap((k, k) for k in shuffled_keys)

        for i in range(table.size()):
            assert table.rank(table.select(i)) == i
        for key in shuffled_keys:
            assert table.select(table.rank(key)) == key


class TestKeys:
    """Tests for keys() and its ranged form."""

    def test_all_keys(self, small_map):
        assert list(small_map.keys()) == [1, 3, 4, 5, 7, 8, 9]

    def test_all_keys_empty(self, empty_map):
        assert list(empty_map.keys()) == []

    def test_range_inclusive(self, small_map):
        """Both bounds are inclusive when present."""
        assert list(small_map.keys(3, 8)) == [3, 4, 5, 7, 8]

    def test_range_bounds_absent(self, small_map):
        """Bounds that are not keys still select the keys between them."""
        assert list(small_map.keys(2, 6)) == [3, 4, 5]
        assert list(small_map.keys(0, 100)) == [1, 3, 4, 5, 7, 8, 9]
        assert list(small_map.keys(10, 20)) == []

    def test_inverted_range_is_empty(self, small_map):
        """lo > hi is not an error."""
        assert list(small_map.keys(8, 3)) == []

    def test_restartable(self, small_map):
        """The same view can be iterated more than once."""
        view = small_map.keys(3, 7)

        assert isinstance(view, KeyRange)
        assert list(view) == [3, 4, 5, 7]
        assert list(view) == [3, 4, 5, 7]

    def test_view_sees_current_tree(self, small_map):
        """A fresh iteration reflects later mutations."""
        view = small_map.keys(3, 7)
        small_map.put(6, 6)
        small_map.delete(4)

        assert list(view) == [3, 5, 6, 7]

    def test_lazy(self, small_map):
        """Keys are produced one at a time."""
        it = iter(small_map.keys())
        assert next(it) == 1
        assert next(it) == 3

    def test_none_bounds(self, small_map):
        with pytest.raises(InvalidArgumentError) as excinfo:
            small_map.keys(None, 5)
        assert excinfo.value.argument == "lo"

        with pytest.raises(InvalidArgumentError) as excinfo:
            small_map.keys(1, None)
        assert excinfo.value.argument == "hi"

    def test_single_bound_rejected(self, small_map):
        with pytest.raises(InvalidArgumentError):
            small_map.keys(1)

    def test_strictly_ascending(self, shuffled_keys):
        table = OrderedMap((k, k) for k in shuffled_keys)
        keys = list(table.keys())

        assert all(a < b for a, b in zip(keys, keys[1:]))
        assert len(keys) == table.size() == len(list(table.keys(table.min(), table.max())))


class TestSize:
    """Tests for size, len and is_empty."""

    def test_empty(self, empty_map):
        assert empty_map.size() == 0
        assert len(empty_map) == 0
        assert empty_map.is_empty()

    def test_range_size(self, small_map):
        assert small_map.size(3, 8) == 5
        assert small_map.size(2, 6) == 3
        assert small_map.size(1, 9) == 7
        assert small_map.size(5, 5) == 1

    def test_range_size_inverted(self, small_map):
        assert small_map.size(8, 3) == 0

    def test_range_size_matches_keys(self, string_map):
        assert string_map.size("key03", "key11") == len(list(string_map.keys("key03", "key11")))

    def test_range_size_none(self, small_map):
        with pytest.raises(InvalidArgumentError):
            small_map.size(None, 3)
        with pytest.raises(InvalidArgumentError):
            small_map.size(3, None)
        with pytest.raises(InvalidArgumentError):
            small_map.size(3)


class TestHeight:
    """Tests for height."""

    def test_empty(self, empty_map):
        assert empty_map.height() == -1

    def test_single(self):
        assert OrderedMap([(1, 1)]).height() == 0

    def test_three_keys(self):
        """Three keys always form one black node with two children."""
        table = OrderedMap([(1, 1), (2, 2), (3, 3)])
        assert table.height() == 1
