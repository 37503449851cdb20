"""Pure functions over fronts and points.

This module provides the geometric building blocks of the indicators:
- get_maximum_values / get_minimum_values: per-dimension extrema of a front
- get_normalized_front: min-max normalization against given bounds
- distance_to_nearest_point: nearest *other* member of a front
- distance_to_closest_point: nearest member of a front to an external point
"""

import numpy as np

from front_metrics.distance import euclidean_distance
from front_metrics.errors import DimensionMismatchError, InsufficientPointsError
from front_metrics.front import Front
from front_metrics.point import Point
from front_metrics.protocols import DistanceMetric


def _require_points(front: Front, required: int) -> None:
    if front.n_points < required:
        raise InsufficientPointsError(required, front.n_points)


def get_maximum_values(front: Front) -> np.ndarray:
    """Return the per-dimension maximum over all points of a front.

    Args:
        front: Non-empty front.

    Returns:
        Array of shape (n_dimensions,).

    Raises:
        InsufficientPointsError: If the front is empty.

    Example:
        >>> get_maximum_values(Front([[0.0, 3.0], [2.0, 1.0]]))
        array([2., 3.])
    """
    _require_points(front, 1)
    return front.to_array().max(axis=0)


def get_minimum_values(front: Front) -> np.ndarray:
    """Return the per-dimension minimum over all points of a front.

    Raises:
        InsufficientPointsError: If the front is empty.
    """
    _require_points(front, 1)
    return front.to_array().min(axis=0)


def get_normalized_front(front: Front, maximum: np.ndarray, minimum: np.ndarray) -> Front:
    """Rescale every dimension of a front onto [0, 1] using the given bounds.

    Value ``v`` on dimension ``j`` becomes ``(v - minimum[j]) / (maximum[j] - minimum[j])``.
    Points outside the bounds map outside [0, 1]. A dimension with
    ``maximum[j] == minimum[j]`` has no spread to measure against and maps to 0.

    Args:
        front: Non-empty front to normalize. Not modified.
        maximum: Upper bounds, shape (n_dimensions,).
        minimum: Lower bounds, shape (n_dimensions,).

    Returns:
        A new normalized front in the same point order.

    Raises:
        InsufficientPointsError: If the front is empty.
        DimensionMismatchError: If a bound vector's length differs from the
            front's dimensionality.

    Example:
        >>> f = Front([[0.0, 5.0], [10.0, 5.0]])
        >>> get_normalized_front(f, np.array([10.0, 5.0]), np.array([0.0, 5.0])).to_array()
        array([[0., 0.],
               [1., 0.]])
    """
    _require_points(front, 1)
    maximum = np.asarray(maximum, dtype=np.float64)
    minimum = np.asarray(minimum, dtype=np.float64)
    n_dim = front.n_dimensions
    for name, bound in (("maximum", maximum), ("minimum", minimum)):
        if bound.shape != (n_dim,):
            raise DimensionMismatchError(
                n_dim, bound.size, f"{name} bounds have shape {bound.shape}, expected ({n_dim},)"
            )

    values = front.to_array()
    span = maximum - minimum
    degenerate = span == 0.0
    safe_span = np.where(degenerate, 1.0, span)
    normalized = (values - minimum) / safe_span
    normalized[:, degenerate] = 0.0

    return Front(normalized)


def distance_to_nearest_point(
    point: Point,
    front: Front,
    index: int | None = None,
    distance: DistanceMetric = euclidean_distance,
) -> float:
    """Return the distance from a front member to the nearest other member.

    The point itself is excluded by position, never by value: duplicates of
    ``point`` stored at other positions are legitimate neighbors at distance 0.
    The position is ``index`` when given, otherwise the position holding this
    very object (``front.get_point(i) is point``). A point that is not a member
    of the front is compared against every point.

    Args:
        point: Point whose neighbor is sought.
        front: Front with at least two points.
        index: Position of ``point`` in ``front``, if known.
        distance: Distance metric.

    Returns:
        The smallest distance to another point of the front.

    Raises:
        InsufficientPointsError: If the front has fewer than two points.
        IndexError: If index is out of range.

    Example:
        >>> f = Front([[0.0, 0.0], [0.0, 0.0], [3.0, 4.0]])
        >>> distance_to_nearest_point(f.get_point(0), f)
        0.0
        >>> distance_to_nearest_point(f.get_point(2), f)
        5.0
    """
    _require_points(front, 2)
    if index is not None:
        front.get_point(index)

    best = np.inf
    for i, other in enumerate(front):
        if i == index or (index is None and other is point):
            continue
        best = min(best, distance(point, other))
    return float(best)


def distance_to_closest_point(
    point: Point,
    front: Front,
    distance: DistanceMetric = euclidean_distance,
) -> float:
    """Return the distance from an external point to the closest front member.

    Args:
        point: Point not belonging to ``front`` (e.g. an extreme point).
        front: Non-empty front.
        distance: Distance metric.

    Raises:
        InsufficientPointsError: If the front is empty.

    Example:
        >>> distance_to_closest_point(Point.from_values([0.0, 0.0]), Front([[3.0, 4.0], [6.0, 8.0]]))
        5.0
    """
    _require_points(front, 1)
    return float(min(distance(point, other) for other in front))
