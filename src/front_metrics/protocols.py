"""Protocol definitions for the quality-indicator family.

This module defines the interfaces that let indicators, distance metrics and
solution producers be swapped without changing the code that uses them:

1. **HasObjectives**: anything exposing an ``objectives`` vector. Evolutionary
   algorithms hand indicators lists of such objects; the indicator never looks
   at decision variables.

2. **DistanceMetric**: a callable computing a non-negative distance between two
   points. Euclidean distance is the default everywhere a metric is accepted.

3. **QualityIndicator**: a scalar scoring function of a candidate solution list
   against a reference front held by the indicator. ``normalize`` tells generic
   tooling whether candidate and reference are rescaled onto a common
   [0, 1]-per-dimension box before scoring.

Example usage:
    ```python
    def report(indicators: list[QualityIndicator], solutions) -> dict[str, float]:
        return {ind.name: ind.evaluate(solutions) for ind in indicators}
    ```
"""

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from front_metrics.point import Point


@runtime_checkable
class HasObjectives(Protocol):
    """Protocol for evaluated solutions.

    Attributes:
        objectives: Objective values of the solution, one real per objective.
            All solutions in one list share the same length.
    """

    @property
    def objectives(self) -> Sequence[float]: ...


@runtime_checkable
class DistanceMetric(Protocol):
    """Protocol for point-to-point distance functions.

    Parameters:
        a: First point.
        b: Second point, same dimensionality as ``a``.

    Returns:
        A non-negative real. Implementations raise DimensionMismatchError when
        the points differ in dimensionality.
    """

    def __call__(self, a: Point, b: Point) -> float: ...


@runtime_checkable
class QualityIndicator(Protocol):
    """Protocol for quality indicators.

    Concrete indicators are constructed with a reference front (a file path or
    an in-memory Front) and fail at construction if it is missing. Each call to
    ``evaluate`` scores one candidate solution list.

    Attributes:
        name: Short identifier, e.g. ``"GSPREAD"``.
        description: Human-readable description.
        normalize: True if candidate and reference fronts are normalized
            against the reference front's bounds before scoring.
    """

    name: str
    description: str
    normalize: bool

    def evaluate(self, solutions: Iterable[HasObjectives]) -> float:
        """Score a candidate solution list.

        Args:
            solutions: Evaluated solutions forming the candidate front.

        Returns:
            The indicator value.
        """
        ...
