"""Point-to-point distance metrics."""

import math

from front_metrics.errors import DimensionMismatchError
from front_metrics.point import Point


def euclidean_distance(a: Point, b: Point) -> float:
    """Compute the Euclidean distance between two points.

    Squared differences are accumulated in dimension order, so the result is
    reproducible across platforms for the same inputs.

    Args:
        a: First point.
        b: Second point.

    Returns:
        Non-negative distance.

    Raises:
        DimensionMismatchError: If the points differ in dimensionality.

    Example:
        >>> euclidean_distance(Point.from_values([0.0, 0.0]), Point.from_values([3.0, 4.0]))
        5.0
    """
    if a.n_dimensions != b.n_dimensions:
        raise DimensionMismatchError(
            a.n_dimensions,
            b.n_dimensions,
            f"cannot compute distance between points with {a.n_dimensions} and {b.n_dimensions} dimensions",
        )

    total = 0.0
    for x, y in zip(a.values, b.values):
        diff = float(x) - float(y)
        total += diff * diff
    return math.sqrt(total)
