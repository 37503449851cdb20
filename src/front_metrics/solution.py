"""Solution containers handed to quality indicators.

Optimization algorithms produce evaluated solutions; indicators only read
their objective vectors. This module provides two ready-made shapes:

- Solution: a single evaluated solution (objectives plus optional variables)
- SolutionSet: a struct-of-arrays collection yielding Solutions

Both are immutable (frozen dataclasses). Any other object exposing an
``objectives`` attribute is accepted by indicators as well.
"""

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from front_metrics.front import Front


@dataclass(frozen=True)
class Solution:
    """A single evaluated solution.

    Attributes:
        objectives: Objective values, shape (n_obj,).
        variables: Decision variables, shape (n_vars,), or None.

    Example:
        >>> s = Solution(objectives=np.array([0.5, 0.5]))
        >>> s.objectives
        array([0.5, 0.5])
    """

    objectives: np.ndarray
    variables: np.ndarray | None = None

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            ValueError: If objectives or variables are not 1D.
        """
        objectives = np.array(self.objectives, dtype=np.float64)
        if objectives.ndim != 1:
            raise ValueError(f"objectives must be 1D, got shape {objectives.shape}")
        object.__setattr__(self, "objectives", objectives)

        if self.variables is not None:
            variables = np.array(self.variables)
            if variables.ndim != 1:
                raise ValueError(f"variables must be 1D, got shape {variables.shape}")
            object.__setattr__(self, "variables", variables)


@dataclass(frozen=True)
class SolutionSet:
    """Immutable struct-of-arrays collection of evaluated solutions.

    Attributes:
        objectives: Objective values, shape (n, n_obj).
        variables: Decision variables, shape (n, n_vars), or None.

    Example:
        >>> sols = SolutionSet(objectives=np.array([[0.0, 1.0], [1.0, 0.0]]))
        >>> len(sols)
        2
        >>> sols[1].objectives
        array([1., 0.])
    """

    objectives: np.ndarray
    variables: np.ndarray | None = None

    def __post_init__(self) -> None:
        """Validate shapes and copy arrays for immutability.

        Raises:
            TypeError: If objectives is not a numpy array.
            ValueError: If array shapes are inconsistent.
        """
        if not isinstance(self.objectives, np.ndarray):
            raise TypeError(f"objectives must be a numpy array, got {type(self.objectives).__name__}")
        if self.objectives.ndim != 2:
            raise ValueError(f"objectives must be 2D, got shape {self.objectives.shape}")
        object.__setattr__(self, "objectives", self.objectives.astype(np.float64))

        if self.variables is not None:
            if not isinstance(self.variables, np.ndarray):
                raise TypeError(f"variables must be a numpy array, got {type(self.variables).__name__}")
            if self.variables.ndim != 2:
                raise ValueError(f"variables must be 2D, got shape {self.variables.shape}")
            n = self.objectives.shape[0]
            if self.variables.shape[0] != n:
                raise ValueError(f"variables has {self.variables.shape[0]} solutions, expected {n} to match objectives")
            object.__setattr__(self, "variables", self.variables.copy())

    @classmethod
    def from_front(cls, front: Front) -> "SolutionSet":
        """Wrap the points of a front as objective-only solutions."""
        return cls(objectives=front.to_array())

    def to_front(self) -> Front:
        return Front(self.objectives)

    def __len__(self) -> int:
        return self.objectives.shape[0]

    def __getitem__(self, idx: int) -> Solution:
        """Return the solution at ``idx`` (supports negative indexing).

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")

        n = len(self)
        original_idx = idx
        if idx < 0:
            idx = n + idx
        if idx < 0 or idx >= n:
            raise IndexError(f"index {original_idx} is out of bounds for solution set with {n} solutions")

        return Solution(
            objectives=self.objectives[idx],
            variables=self.variables[idx] if self.variables is not None else None,
        )

    def __iter__(self) -> Iterator[Solution]:
        for i in range(len(self)):
            yield self[i]

    @property
    def n_obj(self) -> int:
        """Return the number of objectives."""
        return self.objectives.shape[1]
