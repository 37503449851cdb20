"""Orderings over points.

Orderings are key functions, so they plug straight into Python's stable
``sorted``/``list.sort`` and into ``Front.sort``/``Front.sorted``.
"""

from collections.abc import Callable

from front_metrics.point import Point

PointKey = Callable[[Point], object]


def dimension_key(dimension: int) -> PointKey:
    """Create a key ordering points ascending by one dimension.

    Points tied on ``dimension`` keep their prior relative order under a
    stable sort.

    Args:
        dimension: Index of the dimension to sort by.

    Returns:
        Key function mapping a point to its value in ``dimension``.

    Example:
        >>> pts = [Point.from_values([2.0, 0.0]), Point.from_values([1.0, 5.0])]
        >>> [p.get(0) for p in sorted(pts, key=dimension_key(0))]
        [1.0, 2.0]
    """

    def key(point: Point) -> float:
        return point.get(dimension)

    return key


def lexicographic_key(point: Point) -> tuple[float, ...]:
    """Order points by dimension 0, then dimension 1 on ties, and so on."""
    return tuple(point)
