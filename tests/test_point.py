"""Tests for the Point data structure and point orderings."""

import numpy as np
import pytest

from front_metrics import Point, dimension_key, lexicographic_key


class TestPointConstruction:
    """Tests for Point construction."""

    def test_size_constructor_zero_fills(self) -> None:
        """Point(n) holds n zeros."""
        p = Point(3)
        assert p.n_dimensions == 3
        assert list(p) == [0.0, 0.0, 0.0]

    def test_from_values_copies_input(self) -> None:
        """Changing the source array does not change the point."""
        values = np.array([1.0, 2.0])
        p = Point.from_values(values)
        values[0] = 99.0
        assert p.get(0) == 1.0

    def test_copy_of_is_independent(self) -> None:
        """A copied point does not share storage with the original."""
        original = Point.from_values([1.0, 2.0])
        clone = Point.copy_of(original)
        clone.set(0, 5.0)
        assert original.get(0) == 1.0
        assert clone == Point.from_values([5.0, 2.0])

    def test_rejects_negative_size(self) -> None:
        """Negative dimensionality is rejected."""
        with pytest.raises(ValueError, match="n_dimensions must be non-negative"):
            Point(-1)

    def test_rejects_2d_values(self) -> None:
        """from_values requires a flat sequence."""
        with pytest.raises(ValueError, match="point values must be 1D"):
            Point.from_values([[1.0, 2.0]])


class TestPointAccess:
    """Tests for get/set and out-of-range access."""

    def test_set_then_get(self) -> None:
        """set stores a value that get returns."""
        p = Point(2)
        p.set(1, 4.25)
        assert p.get(1) == 4.25
        assert p[1] == 4.25

    def test_item_assignment(self) -> None:
        """Item assignment is an alias for set."""
        p = Point(2)
        p[0] = -1.5
        assert p.get(0) == -1.5

    @pytest.mark.parametrize("dimension", [2, 10, -1])
    def test_get_out_of_range_raises(self, dimension: int) -> None:
        """Access outside [0, n_dimensions) raises IndexError."""
        with pytest.raises(IndexError, match="out of range for point with 2 dimensions"):
            Point(2).get(dimension)

    def test_set_out_of_range_raises(self) -> None:
        """Setting outside the point's dimensions raises IndexError."""
        with pytest.raises(IndexError):
            Point(2).set(2, 1.0)

    def test_values_view_is_read_only(self) -> None:
        """The values view cannot be used to mutate the point."""
        p = Point.from_values([1.0, 2.0])
        with pytest.raises(ValueError):
            p.values[0] = 3.0

    def test_equality_is_by_value(self) -> None:
        """Points with the same values are equal."""
        assert Point.from_values([1.0, 2.0]) == Point.from_values([1.0, 2.0])
        assert Point.from_values([1.0, 2.0]) != Point.from_values([1.0, 2.0, 0.0])


class TestOrderings:
    """Tests for dimension_key and lexicographic_key."""

    def test_dimension_key_sorts_ascending(self) -> None:
        """Points are ordered by the chosen dimension."""
        pts = [Point.from_values([3.0, 0.0]), Point.from_values([1.0, 2.0]), Point.from_values([2.0, 1.0])]
        ordered = sorted(pts, key=dimension_key(1))
        assert [p.get(1) for p in ordered] == [0.0, 1.0, 2.0]

    def test_dimension_key_is_stable_on_ties(self) -> None:
        """Tied points keep their original relative order."""
        a = Point.from_values([1.0, 0.2])
        b = Point.from_values([1.0, 0.1])
        c = Point.from_values([0.0, 0.3])
        ordered = sorted([a, b, c], key=dimension_key(0))
        assert ordered[1] is a
        assert ordered[2] is b

    def test_lexicographic_key_breaks_ties_on_next_dimension(self) -> None:
        """Ties on dimension 0 are resolved by dimension 1."""
        pts = [Point.from_values([1.0, 2.0]), Point.from_values([0.0, 5.0]), Point.from_values([1.0, 1.0])]
        ordered = sorted(pts, key=lexicographic_key)
        assert [tuple(p) for p in ordered] == [(0.0, 5.0), (1.0, 1.0), (1.0, 2.0)]
