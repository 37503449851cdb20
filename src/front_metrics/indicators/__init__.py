"""Quality indicators."""

from front_metrics.indicators.generalized_spread import GeneralizedSpread, extreme_points, generalized_spread
from front_metrics.registry import IndicatorRegistry

# Register built-in indicators
IndicatorRegistry.register(GeneralizedSpread.name, GeneralizedSpread)

__all__ = ["GeneralizedSpread", "generalized_spread", "extreme_points"]
