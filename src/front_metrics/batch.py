"""Evaluate many candidate fronts against one indicator."""

import logging
from collections.abc import Iterable, Sequence

import numpy as np
from joblib import Parallel, delayed

from front_metrics.protocols import HasObjectives, QualityIndicator

logger = logging.getLogger(__name__)


def evaluate_many(
    indicator: QualityIndicator,
    fronts: Sequence[Iterable[HasObjectives]],
    n_workers: int = 1,
) -> np.ndarray:
    """Score several candidate solution lists with one indicator.

    Typical use is scoring the final fronts of independent runs of an
    algorithm. Indicators do not mutate their reference front during
    ``evaluate``, so one instance is shared across worker threads.

    Args:
        indicator: A constructed quality indicator.
        fronts: Candidate solution lists, one per run.
        n_workers: Number of worker threads. Use -1 for all CPU cores.

    Returns:
        Array of shape (len(fronts),) with the indicator values in input order.

    Example:
        ```python
        from front_metrics import GeneralizedSpread, evaluate_many

        indicator = GeneralizedSpread("ZDT1.pf")
        values = evaluate_many(indicator, [run1_front, run2_front, run3_front], n_workers=-1)
        print(values.mean())
        ```
    """
    logger.info("Evaluating %d fronts with %s on %d worker(s)", len(fronts), indicator.name, n_workers)
    if n_workers == 1:
        values = [indicator.evaluate(front) for front in fronts]
    else:
        values = Parallel(n_jobs=n_workers, prefer="threads")(
            delayed(indicator.evaluate)(front) for front in fronts
        )
    return np.array(values, dtype=np.float64)
