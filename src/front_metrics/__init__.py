"""front-metrics: Quality indicators for multi-objective optimization.

Computes scalar metrics that score how well a candidate front approximates a
reference Pareto front, built on a small numpy-backed front geometry layer.

Example (generalized spread against an in-memory reference front):
    >>> from front_metrics import Front, GeneralizedSpread, SolutionSet
    >>> import numpy as np
    >>> reference = Front([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])
    >>> indicator = GeneralizedSpread(reference)
    >>> round(indicator.evaluate(SolutionSet(objectives=np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]]))), 12)
    0.0

Example (reference front from a file, indicator picked by name):
    ```python
    from front_metrics import IndicatorRegistry

    indicator = IndicatorRegistry.get("GSPREAD", reference_front="ZDT1.pf")
    assert indicator.normalize
    value = indicator.evaluate(final_population)
    ```
"""

from front_metrics.batch import evaluate_many
from front_metrics.comparators import dimension_key, lexicographic_key
from front_metrics.distance import euclidean_distance
from front_metrics.errors import (
    DimensionMismatchError,
    FrontMetricsError,
    FrontParseError,
    InsufficientPointsError,
    ReferenceFrontError,
)
from front_metrics.front import Front
from front_metrics.front_utils import (
    distance_to_closest_point,
    distance_to_nearest_point,
    get_maximum_values,
    get_minimum_values,
    get_normalized_front,
)
from front_metrics.indicators import GeneralizedSpread, extreme_points, generalized_spread
from front_metrics.point import Point
from front_metrics.protocols import DistanceMetric, HasObjectives, QualityIndicator
from front_metrics.registry import IndicatorRegistry, list_indicators
from front_metrics.solution import Solution, SolutionSet

__all__ = [
    # Indicators
    "GeneralizedSpread",
    "generalized_spread",
    "extreme_points",
    "evaluate_many",
    # Front utilities
    "get_maximum_values",
    "get_minimum_values",
    "get_normalized_front",
    "distance_to_nearest_point",
    "distance_to_closest_point",
    # Distances and orderings
    "euclidean_distance",
    "dimension_key",
    "lexicographic_key",
    # Registry system
    "IndicatorRegistry",
    "list_indicators",
    # Protocols
    "QualityIndicator",
    "DistanceMetric",
    "HasObjectives",
    # Data structures
    "Point",
    "Front",
    "Solution",
    "SolutionSet",
    # Errors
    "FrontMetricsError",
    "ReferenceFrontError",
    "FrontParseError",
    "DimensionMismatchError",
    "InsufficientPointsError",
]
