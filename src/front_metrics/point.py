"""Point in objective space.

A Point is a fixed-size vector of float64 values, one per objective. Its
dimensionality is set at creation; individual values can be changed with
``set``. Points are the elements of a Front.
"""

from collections.abc import Iterable, Iterator

import numpy as np


class Point:
    """Fixed-dimension real vector holding one solution's objective values.

    Args:
        n_dimensions: Number of dimensions. Values start at zero.

    Raises:
        TypeError: If n_dimensions is not an integer.
        ValueError: If n_dimensions is negative.

    Example:
        >>> p = Point(2)
        >>> p.set(1, 3.5)
        >>> p.get(1)
        3.5
        >>> p.n_dimensions
        2
    """

    __slots__ = ("_values",)

    def __init__(self, n_dimensions: int) -> None:
        if not isinstance(n_dimensions, (int, np.integer)):
            raise TypeError(f"n_dimensions must be an integer, got {type(n_dimensions).__name__}")
        if n_dimensions < 0:
            raise ValueError(f"n_dimensions must be non-negative, got {n_dimensions}")
        self._values = np.zeros(int(n_dimensions), dtype=np.float64)

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "Point":
        """Create a point holding a copy of the given values.

        Args:
            values: Sequence or 1D array of reals.

        Returns:
            A new Point with len(values) dimensions.

        Raises:
            ValueError: If values is not one-dimensional.
        """
        array = np.array(values, dtype=np.float64)
        if array.ndim != 1:
            raise ValueError(f"point values must be 1D, got shape {array.shape}")
        point = cls(array.shape[0])
        point._values = array
        return point

    @classmethod
    def copy_of(cls, other: "Point") -> "Point":
        """Create a point with the same values as ``other``."""
        return cls.from_values(other._values)

    def copy(self) -> "Point":
        return Point.copy_of(self)

    @property
    def n_dimensions(self) -> int:
        """Return the number of dimensions of this point."""
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        """Return a read-only view of the point's values."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def _check_dimension(self, dimension: int) -> int:
        if not isinstance(dimension, (int, np.integer)):
            raise TypeError(f"dimension must be an integer, got {type(dimension).__name__}")
        if dimension < 0 or dimension >= self.n_dimensions:
            raise IndexError(f"dimension {dimension} is out of range for point with {self.n_dimensions} dimensions")
        return int(dimension)

    def get(self, dimension: int) -> float:
        """Return the value stored in ``dimension``.

        Raises:
            IndexError: If dimension is not in [0, n_dimensions).
        """
        return float(self._values[self._check_dimension(dimension)])

    def set(self, dimension: int, value: float) -> None:
        """Store ``value`` in ``dimension``.

        Raises:
            IndexError: If dimension is not in [0, n_dimensions).
        """
        self._values[self._check_dimension(dimension)] = value

    def __getitem__(self, dimension: int) -> float:
        return self.get(dimension)

    def __setitem__(self, dimension: int, value: float) -> None:
        self.set(dimension, value)

    def __len__(self) -> int:
        return self.n_dimensions

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.n_dimensions == other.n_dimensions and bool(np.array_equal(self._values, other._values))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Point({self._values.tolist()})"
