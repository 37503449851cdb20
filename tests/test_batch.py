"""Tests for evaluating many fronts with one indicator."""

import numpy as np
import pytest

from front_metrics import Front, GeneralizedSpread, SolutionSet, evaluate_many


@pytest.fixture
def runs(rng: np.random.Generator) -> list[SolutionSet]:
    """Final fronts of eight hypothetical independent runs."""
    return [SolutionSet(objectives=rng.uniform(size=(int(rng.integers(3, 20)), 2))) for _ in range(8)]


class TestEvaluateMany:
    """Tests for evaluate_many."""

    def test_matches_individual_evaluation(self, zdt1_reference: Front, runs) -> None:
        """Each entry equals evaluating that front alone."""
        indicator = GeneralizedSpread(zdt1_reference)
        values = evaluate_many(indicator, runs)
        expected = np.array([indicator.evaluate(run) for run in runs])
        np.testing.assert_array_equal(values, expected)

    def test_parallel_matches_sequential(self, zdt1_reference: Front, runs) -> None:
        """Sharing one indicator across threads gives the sequential results."""
        indicator = GeneralizedSpread(zdt1_reference)
        sequential = evaluate_many(indicator, runs, n_workers=1)
        parallel = evaluate_many(indicator, runs, n_workers=4)
        np.testing.assert_array_equal(parallel, sequential)

    def test_reference_untouched_by_parallel_runs(self, zdt1_reference: Front, runs) -> None:
        """Concurrent evaluations do not reorder the shared reference front."""
        indicator = GeneralizedSpread(zdt1_reference)
        before = indicator.reference_front.to_array()
        evaluate_many(indicator, runs, n_workers=4)
        np.testing.assert_array_equal(indicator.reference_front.to_array(), before)

    def test_returns_float_array_in_order(self, three_point_reference: Front) -> None:
        """Results come back as float64 in input order."""
        indicator = GeneralizedSpread(three_point_reference)
        fronts = [
            SolutionSet(objectives=np.array([[0.5, 0.5], [0.5, 0.5]])),
            SolutionSet(objectives=np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0]])),
        ]
        values = evaluate_many(indicator, fronts)
        assert values.dtype == np.float64
        assert values.shape == (2,)
        assert values[0] == 1.0
        assert values[1] == pytest.approx(0.0, abs=1e-12)

    def test_no_fronts(self, three_point_reference: Front) -> None:
        """An empty batch yields an empty array."""
        values = evaluate_many(GeneralizedSpread(three_point_reference), [])
        assert values.shape == (0,)
