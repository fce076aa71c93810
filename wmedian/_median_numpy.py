# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
Sort-based weighted median on NumPy arrays.

O(n log n) reference for the selection code in `median` and
`_median_numba`:

- Merge equal values, summing their weights
- Walk the distinct values in order accumulating weight
- Median is at the first value where cumulative weight >= midpoint
- If cumulative weight == midpoint exactly, average with the next
  distinct value, whatever its weight
"""

import numpy as np

from .util import EmptyInputError, NonPositiveTotalWeightError


def weighted_median_sorted(values, weights):
    """
    Weighted median of parallel value and weight arrays, by sorting.

    Uses NumPy vectorized operations for sorting and the cumulative
    weight search.
    """
    values = np.asarray(values, dtype=np.float64).ravel()
    weights = np.asarray(weights, dtype=np.float64).ravel()
    if values.shape[0] != weights.shape[0]:
        raise ValueError("values and weights must have same length")

    if values.shape[0] == 0:
        raise EmptyInputError()

    # Equal values are one point of the distribution, so the order of
    # weightless duplicates cannot move an exact-half tie.
    sorted_values, inverse = np.unique(values, return_inverse=True)
    sorted_weights = np.bincount(
        inverse.ravel(), weights=weights, minlength=sorted_values.shape[0]
    )
    n = sorted_values.shape[0]

    cumsum = np.cumsum(sorted_weights)
    total = cumsum[-1]
    if not total > 0:
        raise NonPositiveTotalWeightError(float(total))

    # Compare 2 * cumsum against the total rather than cumsum against
    # total / 2, the same test the selection loop makes.
    twice = 2.0 * cumsum
    idx = int(np.searchsorted(twice, total, side='left'))
    if idx >= n:
        idx = n - 1

    mu = sorted_values[idx]
    if twice[idx] == total and idx + 1 < n:
        mu = (mu + sorted_values[idx + 1]) * 0.5

    return float(mu)
