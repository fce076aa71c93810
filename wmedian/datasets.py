# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
Synthetic record sets used by the benchmarks and tests.
"""

import random

import numpy as np

from .record import Record


def generate_test_data(func, count=100):
    """
    Build *count* records from ``func(i) -> (weight, value)``.
    """
    data = []
    for i in range(count):
        weight, value = func(i)
        data.append(Record(float(value), float(weight)))
    return data


def unsorted_data(count=100):
    """Values in scrambled order, weights cycling through 0..18."""
    return generate_test_data(lambda i: (i % 19, (i * 119) % 129), count)


def sorted_data(count=100):
    """Strictly ascending values, weights alternating 0 and 1."""
    return generate_test_data(lambda i: (i % 2, i), count)


def shuffled(data, seed=0):
    """Return a shuffled copy of *data*."""
    data = list(data)
    random.Random(seed).shuffle(data)
    return data


def random_arrays(n, seed=42, max_weight=5):
    """
    Reproducible value and integer-valued weight arrays of size n.

    Values are drawn from a small range so duplicates are common;
    weights are whole numbers so sums are exact in float64.
    """
    rng = np.random.RandomState(seed)
    values = rng.randint(0, max(2, n // 2), size=n).astype(np.float64)
    weights = rng.randint(1, max_weight + 1, size=n).astype(np.float64)
    return values, weights
