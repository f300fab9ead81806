"""Numeric helpers over trait samples.

All functions are *pure* and never mutate their input.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ocean_core.errors import EmptyInputError


def _as_array(values: Sequence[float], what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise EmptyInputError(f"cannot compute {what} of an empty sample")
    return arr


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean.

    Raises:
        EmptyInputError: If *values* is empty.
    """
    return float(np.mean(_as_array(values, "mean")))


def variance(values: Sequence[float]) -> float:
    """Population variance (mean of squared deviations from the mean).

    Raises:
        EmptyInputError: If *values* is empty.
    """
    return float(np.var(_as_array(values, "variance"), ddof=0))


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation."""
    return float(np.sqrt(variance(values)))


def value_range(values: Sequence[float]) -> float:
    """Spread between the largest and smallest value."""
    arr = _as_array(values, "range")
    return float(arr.max() - arr.min())


def percentile(score: float, population: Sequence[float]) -> float:
    """Percentile rank of *score* within *population*, in [0, 100].

    The rank is the share of population values strictly below *score*,
    measured on a sorted copy. A score above every value ranks 100, a score
    at or below the minimum ranks 0.

    Raises:
        EmptyInputError: If *population* is empty.
    """
    ordered = np.sort(_as_array(population, "percentile"))
    if score > ordered[-1]:
        return 100.0
    below = int(np.searchsorted(ordered, score, side="left"))
    return below / ordered.size * 100.0
