"""Exception hierarchy for front-metrics.

Every exception derives from FrontMetricsError and from the builtin it
specializes, so callers that only know about ValueError or IndexError keep
working:

- ReferenceFrontError: missing or empty reference front (configuration error)
- FrontParseError: malformed front file
- DimensionMismatchError: points or bounds of different dimensionality
- InsufficientPointsError: a front too small for the requested computation
"""

from os import PathLike


class FrontMetricsError(Exception):
    """Base class for all package-specific exceptions."""


class ReferenceFrontError(FrontMetricsError, ValueError):
    """The reference front handed to an indicator is missing or unusable."""


class FrontParseError(FrontMetricsError, ValueError):
    """A front file line could not be parsed into a point.

    Attributes:
        path: Path of the offending file.
        line_number: 1-based line number of the offending line.
    """

    def __init__(self, path: str | PathLike, line_number: int, message: str) -> None:
        super().__init__(f"{path}:{line_number}: {message}")
        self.path = path
        self.line_number = line_number


class DimensionMismatchError(FrontMetricsError, ValueError):
    """Two points, or a point and a bound vector, differ in dimensionality.

    Attributes:
        expected: Expected number of dimensions.
        got: Actual number of dimensions.
    """

    def __init__(self, expected: int, got: int, message: str | None = None) -> None:
        message = message or f"dimension mismatch: expected {expected}, got {got}"
        super().__init__(message)
        self.expected = expected
        self.got = got


class InsufficientPointsError(FrontMetricsError, IndexError):
    """A front does not hold enough points for the requested computation.

    Attributes:
        required: Minimum number of points needed.
        got: Number of points in the front.
    """

    def __init__(self, required: int, got: int, message: str | None = None) -> None:
        message = message or f"front has {got} points, at least {required} required"
        super().__init__(message)
        self.required = required
        self.got = got


__all__ = [
    "FrontMetricsError",
    "ReferenceFrontError",
    "FrontParseError",
    "DimensionMismatchError",
    "InsufficientPointsError",
]
