"""Front data structure.

A Front is an ordered collection of Points sharing one dimensionality. Fronts
are built from solution lists, from rows of numbers, or from plain-text front
files (one point per line, whitespace-separated reals). Apart from explicit
in-place sorting, a Front is never modified by the library.
"""

import logging
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from os import PathLike
from pathlib import Path

import numpy as np

from front_metrics.errors import DimensionMismatchError, FrontParseError
from front_metrics.point import Point
from front_metrics.protocols import HasObjectives

logger = logging.getLogger(__name__)


def _parse_real(token: str) -> float:
    """Parse a decimal or scientific-notation token into a finite float.

    Raises:
        ValueError: For anything else, including ``nan``, ``inf`` and
            underscore digit grouping, which ``float`` would accept.
    """
    if "_" in token:
        raise ValueError(f"digit grouping is not allowed: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {token!r}")
    return value


class Front:
    """Ordered collection of points with uniform dimensionality.

    Points are copied on construction, so the front owns its points and
    ``get_point`` returns the same object on every call.

    Args:
        points: Iterable of Points or numeric sequences, one per point.

    Raises:
        DimensionMismatchError: If the points do not all share one dimensionality.

    Example:
        >>> front = Front([[0.0, 1.0], [1.0, 0.0]])
        >>> front.n_points, front.n_dimensions
        (2, 2)
        >>> front.get_point(1).get(0)
        1.0
    """

    def __init__(self, points: Iterable[Point | Sequence[float] | np.ndarray] = ()) -> None:
        self._points: list[Point] = []
        for item in points:
            point = item.copy() if isinstance(item, Point) else Point.from_values(item)
            if self._points and point.n_dimensions != self._points[0].n_dimensions:
                raise DimensionMismatchError(
                    self._points[0].n_dimensions,
                    point.n_dimensions,
                    f"point {len(self._points)} has {point.n_dimensions} dimensions, "
                    f"expected {self._points[0].n_dimensions}",
                )
            self._points.append(point)

    @classmethod
    def from_solutions(cls, solutions: Iterable[HasObjectives]) -> "Front":
        """Build a front from the objective vectors of a solution list.

        Points appear in the iteration order of ``solutions``.

        Raises:
            TypeError: If a solution does not expose ``objectives``.
            DimensionMismatchError: If objective vectors differ in length.
        """
        rows = []
        for i, solution in enumerate(solutions):
            if not isinstance(solution, HasObjectives):
                raise TypeError(f"solution {i} has no 'objectives' attribute: {type(solution).__name__}")
            rows.append(np.asarray(solution.objectives, dtype=np.float64))
        return cls(rows)

    @classmethod
    def from_file(cls, path: str | PathLike) -> "Front":
        """Read a front from a plain-text file.

        Each non-blank line holds one point as whitespace-separated reals in
        decimal or scientific notation. There is no header and no comments.

        Args:
            path: Path to the front file.

        Returns:
            The front, in file order.

        Raises:
            FileNotFoundError: If the file does not exist.
            FrontParseError: If a line is not UTF-8 text, a token is not a finite
                real number, or a line's token count differs from the first
                point's.
        """
        path = Path(path)
        rows: list[list[float]] = []
        with path.open("rb") as fh:
            for line_number, raw in enumerate(fh, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise FrontParseError(path, line_number, "line is not valid UTF-8 text") from e
                tokens = line.split()
                if not tokens:
                    continue
                try:
                    row = [_parse_real(token) for token in tokens]
                except ValueError as e:
                    raise FrontParseError(path, line_number, f"cannot parse {line.strip()!r} as reals") from e
                if rows and len(row) != len(rows[0]):
                    raise FrontParseError(
                        path, line_number, f"expected {len(rows[0])} values, got {len(row)}"
                    )
                rows.append(row)

        logger.debug("Read %d points from %s", len(rows), path)
        return cls(rows)

    def write(self, path: str | PathLike, separator: str = " ") -> None:
        """Write the front in the format read by ``from_file``.

        Args:
            path: Destination file. Overwritten if it exists.
            separator: Token separator; must be whitespace to round-trip.
        """
        lines = [separator.join(repr(v) for v in point) for point in self._points]
        Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        logger.debug("Wrote %d points to %s", len(lines), path)

    @property
    def n_points(self) -> int:
        """Return the number of points in the front."""
        return len(self._points)

    @property
    def n_dimensions(self) -> int:
        """Return the dimensionality of the points, or 0 for an empty front."""
        if not self._points:
            return 0
        return self._points[0].n_dimensions

    def get_point(self, index: int) -> Point:
        """Return the point at ``index``.

        Raises:
            IndexError: If index is not in [0, n_points).
        """
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(index).__name__}")
        if index < 0 or index >= len(self._points):
            raise IndexError(f"index {index} is out of bounds for front with {len(self._points)} points")
        return self._points[index]

    def sort(self, key: Callable[[Point], object]) -> None:
        """Reorder the points in place.

        The sort is stable: points with equal keys keep their relative order.

        Args:
            key: Key function, e.g. ``dimension_key(0)`` or ``lexicographic_key``.
        """
        self._points.sort(key=key)

    def sorted(self, key: Callable[[Point], object]) -> "Front":
        """Return a new front with the points in stable sorted order.

        This front is left untouched.
        """
        return Front(sorted(self._points, key=key))

    def copy(self) -> "Front":
        return Front(self._points)

    def to_array(self) -> np.ndarray:
        """Return the points as a float64 array of shape (n_points, n_dimensions)."""
        if not self._points:
            return np.empty((0, 0), dtype=np.float64)
        return np.stack([point.values for point in self._points])

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self.get_point(index)

    def __repr__(self) -> str:
        return f"Front(n_points={self.n_points}, n_dimensions={self.n_dimensions})"
