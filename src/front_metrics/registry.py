"""Registry of quality indicators.

Indicators are registered by name as factories and created on demand with a
reference front and any extra configuration. This lets experiment scripts pick
indicators from configuration files by string name, and lets generic tooling
discover what is available.

Basic usage:
    ```python
    from front_metrics.registry import IndicatorRegistry, list_indicators

    indicator = IndicatorRegistry.get("GSPREAD", reference_front="ZDT1.pf")
    value = indicator.evaluate(solutions)

    available = list_indicators()  # ["GSPREAD", ...]
    ```

Registering a custom indicator:
    ```python
    class MaxObjective:
        name = "MAXOBJ"
        description = "Largest objective value"
        normalize = False

        def __init__(self, reference_front):
            ...

        def evaluate(self, solutions):
            return max(max(s.objectives) for s in solutions)

    IndicatorRegistry.register("MAXOBJ", MaxObjective)
    ```
"""

from collections.abc import Callable

from front_metrics.protocols import QualityIndicator


class IndicatorRegistry:
    """Registry for quality indicator factories.

    Factories are callables (usually the indicator class itself) that accept
    the reference front plus keyword configuration and return a
    QualityIndicator.

    Class Attributes:
        _registry: Dictionary mapping indicator names to factories.
    """

    _registry: dict[str, Callable[..., QualityIndicator]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., QualityIndicator]) -> None:
        """Register an indicator factory.

        Args:
            name: Unique name for the indicator. Will overwrite if already exists.
            factory: Callable returning a QualityIndicator.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> QualityIndicator:
        """Create a configured indicator by name.

        Args:
            name: Name of the registered indicator.
            **kwargs: Passed to the factory, e.g. ``reference_front``.

        Returns:
            A QualityIndicator instance.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available indicators.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Quality indicator '{name}' not found. Available indicators: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted list of registered indicator names."""
        return sorted(cls._registry.keys())


def list_indicators() -> list[str]:
    """List all registered quality indicators.

    Convenience function that returns IndicatorRegistry.list().
    """
    return IndicatorRegistry.list()
