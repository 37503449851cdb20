"""Generalized spread quality indicator.

Implements the generalized spread metric for two or more objectives from:

    A. Zhou, Y. Jin, Q. Zhang, B. Sendhoff, and E. Tsang. Combining model-based
    and genetics-based offspring generation for multi-objective optimization
    using a convergence criterion. 2006 IEEE Congress on Evolutionary
    Computation, pp. 3234-3241.

The metric combines how far the candidate front is from the extreme points of
the reference front with how uneven the nearest-neighbor distances inside the
candidate front are. Both fronts are first normalized against the reference
front's bounding box. 0 is an ideal, uniformly spread front reaching every
extreme; larger is worse.
"""

import logging
from collections.abc import Iterable
from os import PathLike

from front_metrics.comparators import dimension_key, lexicographic_key
from front_metrics.distance import euclidean_distance
from front_metrics.errors import DimensionMismatchError, InsufficientPointsError, ReferenceFrontError
from front_metrics.front import Front
from front_metrics.front_utils import (
    distance_to_closest_point,
    distance_to_nearest_point,
    get_maximum_values,
    get_minimum_values,
    get_normalized_front,
)
from front_metrics.point import Point
from front_metrics.protocols import DistanceMetric, HasObjectives

logger = logging.getLogger(__name__)


def extreme_points(front: Front) -> list[Point]:
    """Return one extreme point per dimension of a front.

    A private copy of the front is stably sorted ascending by dimension 0,
    then by dimension 1, and so on; the extreme point of dimension ``i`` is the
    full point that comes last right after the sort by dimension ``i``. Ties at
    the maximum of dimension ``i`` are therefore broken by the order left by
    the previous sorts (for two objectives: largest value on the other axis),
    not by the order of the front.

    Args:
        front: Non-empty front. Not modified.

    Returns:
        List of ``front.n_dimensions`` independent point copies.
    """
    ordered = front.copy()
    extremes = []
    for i in range(front.n_dimensions):
        ordered.sort(dimension_key(i))
        extremes.append(ordered.get_point(ordered.n_points - 1).copy())
    return extremes


def generalized_spread(
    front: Front,
    reference_front: Front,
    distance: DistanceMetric = euclidean_distance,
) -> float:
    """Compute the generalized spread of a front against a reference front.

    Neither front is modified; all sorting happens on fresh copies, so the
    function is safe to call concurrently with shared arguments.

    Args:
        front: Candidate front, non-empty.
        reference_front: Reference front, non-empty, same dimensionality.
        distance: Metric used for nearest-neighbor and extreme-point distances.

    Returns:
        The spread value, non-negative. Exactly 1.0 when all candidate points
        coincide. NaN when the value is 0/0: every candidate point has a
        duplicate and every extreme point lies exactly on the front.

    Raises:
        InsufficientPointsError: If either front is empty.
        DimensionMismatchError: If the fronts differ in dimensionality.

    Example:
        >>> ref = Front([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])
        >>> round(generalized_spread(ref, ref), 12)
        0.0
    """
    if front.n_points == 0:
        raise InsufficientPointsError(1, 0, "cannot compute generalized spread of an empty front")
    if reference_front.n_points == 0:
        raise InsufficientPointsError(1, 0, "reference front is empty")
    n_obj = front.n_dimensions
    if reference_front.n_dimensions != n_obj:
        raise DimensionMismatchError(
            reference_front.n_dimensions,
            n_obj,
            f"front has {n_obj} objectives, reference front has {reference_front.n_dimensions}",
        )

    maximum = get_maximum_values(reference_front)
    minimum = get_minimum_values(reference_front)
    normalized_front = get_normalized_front(front, maximum, minimum)
    normalized_reference = get_normalized_front(reference_front, maximum, minimum)

    extremes = extreme_points(normalized_reference)

    ordered = normalized_front.sorted(lexicographic_key)
    if euclidean_distance(ordered.get_point(0), ordered.get_point(ordered.n_points - 1)) == 0.0:
        logger.debug("All %d points of the front coincide; spread is 1.0", ordered.n_points)
        return 1.0

    n_points = normalized_front.n_points
    nearest = [
        distance_to_nearest_point(point, normalized_front, index=i, distance=distance)
        for i, point in enumerate(normalized_front)
    ]

    dmean = 0.0
    for d in nearest:
        dmean += d
    dmean = dmean / n_points

    d_extremes = 0.0
    for extreme in extremes:
        d_extremes += distance_to_closest_point(extreme, normalized_front, distance=distance)

    mean_abs_deviation = 0.0
    for d in nearest:
        mean_abs_deviation += abs(d - dmean)

    denominator = d_extremes + n_points * dmean
    if denominator == 0.0:
        # every point is duplicated and the extremes are all covered
        logger.debug("Generalized spread undefined: zero neighbor and extreme distances")
        return float("nan")
    return (d_extremes + mean_abs_deviation) / denominator


class GeneralizedSpread:
    """Generalized spread indicator bound to a reference front.

    Args:
        reference_front: Path to a front file, or an in-memory Front. The
            indicator keeps its own copy.
        distance: Metric used for nearest-neighbor and extreme-point distances.

    Raises:
        ReferenceFrontError: If reference_front is None or empty.
        FileNotFoundError: If the reference file does not exist.
        FrontParseError: If the reference file is malformed.

    Example:
        >>> from front_metrics import Solution
        >>> ind = GeneralizedSpread(Front([[0.0, 1.0], [1.0, 0.0]]))
        >>> ind.evaluate([Solution(objectives=[0.5, 0.5])])
        1.0
    """

    name = "GSPREAD"
    description = "Generalized SPREAD quality indicator"
    normalize = True

    def __init__(
        self,
        reference_front: Front | str | PathLike,
        distance: DistanceMetric = euclidean_distance,
    ) -> None:
        if reference_front is None:
            raise ReferenceFrontError("The reference front is None")
        if isinstance(reference_front, Front):
            reference = reference_front.copy()
        else:
            reference = Front.from_file(reference_front)
        if reference.n_points == 0:
            raise ReferenceFrontError("The reference front is empty")

        self._reference_front = reference
        self._distance = distance
        logger.debug(
            "%s: reference front with %d points in %d dimensions",
            self.name,
            reference.n_points,
            reference.n_dimensions,
        )

    @property
    def reference_front(self) -> Front:
        """Return a copy of the reference front."""
        return self._reference_front.copy()

    def evaluate(self, solutions: Iterable[HasObjectives]) -> float:
        """Compute the generalized spread of a candidate solution list.

        Args:
            solutions: Evaluated solutions, each exposing ``objectives``.

        Returns:
            The spread value (lower is better).

        Raises:
            InsufficientPointsError: If the solution list is empty.
            DimensionMismatchError: If the objective count differs from the
                reference front's dimensionality.
        """
        return generalized_spread(Front.from_solutions(solutions), self._reference_front, self._distance)

    def __repr__(self) -> str:
        return f"GeneralizedSpread(reference_front={self._reference_front!r})"
