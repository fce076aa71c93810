# Licensed under a 3-clause BSD style license - see LICENSE.rst

# Weighted median of parallel float64 arrays:
#
#    weighted_median_arrays(values, weights)
#
# This is a numba-compiled copy of the selection loop in `median.py`,
# specialised to arrays so that the whole loop stays in compiled code.

import numba as nb
import numpy as np

from .console import log
from .util import EmptyInputError, InvalidValueError, NonPositiveTotalWeightError

_FORWARD = 1
_BACKWARD = -1
_NOT_SORTED = 0


@nb.njit(cache=True)
def _swap(values, weights, i, j):
    values[i], values[j] = values[j], values[i]
    weights[i], weights[j] = weights[j], weights[i]


@nb.njit(cache=True)
def _weight_sum(weights, lo, hi):
    total = 0.0
    for i in range(lo, hi):
        total += weights[i]
    return total


@nb.njit(cache=True)
def _is_sorted(values, lo, hi):
    forward = True
    backward = True
    for i in range(lo, hi - 1):
        forward = forward and values[i] < values[i + 1]
        backward = backward and values[i] > values[i + 1]
        if not forward and not backward:
            return _NOT_SORTED
    if forward:
        return _FORWARD
    return _BACKWARD


@nb.njit(cache=True)
def _partition(values, weights, lo, hi, target):
    """Partition values[lo:hi] around values[target], collapsing duplicates."""
    _swap(values, weights, lo, target)
    pivot_value = values[lo]

    extra_weight = 0.0
    end = hi
    i = lo + 1
    while i < end:
        if values[i] == pivot_value:
            extra_weight += weights[i]
            end -= 1
            _swap(values, weights, i, end)
        else:
            i += 1

    front = lo + 1
    back = end - 1
    while front <= back:
        if values[front] < pivot_value:
            front += 1
        elif values[back] > pivot_value:
            back -= 1
        else:
            _swap(values, weights, front, back)
            front += 1
            back -= 1

    pivot_index = front - 1
    _swap(values, weights, lo, pivot_index)
    return pivot_index, end, extra_weight


@nb.njit(cache=True)
def _scan_sorted(values, weights, lo, hi, lower, higher, order):
    total = lower + _weight_sum(weights, lo, hi) + higher
    n = hi - lo
    cumulative = lower
    for k in range(n):
        if order == _FORWARD:
            i = lo + k
            following = i + 1
        else:
            i = hi - 1 - k
            following = i - 1
        cumulative += weights[i]
        twice = 2.0 * cumulative
        if twice == total and k + 1 < n:
            return (values[i] + values[following]) / 2.0, False
        if twice >= total:
            return values[i], False
    if order == _FORWARD:
        return values[hi - 1], True
    return values[lo], True


@nb.njit(cache=True)
def _half_below(values, weights, lo, hi, pivot_value):
    """Average of the largest weighted value in [lo, hi) and the next one up."""
    reached = pivot_value
    found = False
    for i in range(lo, hi):
        if weights[i] > 0.0 and (not found or values[i] > reached):
            reached = values[i]
            found = True
    following = pivot_value
    for i in range(lo, hi):
        if reached < values[i] < following:
            following = values[i]
    return (reached + following) / 2.0


@nb.njit(cache=True)
def _select(values, weights):
    """Return the weighted median and whether rounding cut the search short."""
    lo = 0
    hi = values.shape[0]
    lower = 0.0
    higher = 0.0

    while True:
        size = hi - lo
        if size == 1:
            return values[lo], False
        if size == 2:
            a = lo
            b = lo + 1
            if values[b] < values[a]:
                a, b = b, a
            below = lower + weights[a]
            above = weights[b] + higher
            if below == above:
                return (values[a] + values[b]) / 2.0, False
            elif below > above:
                return values[a], False
            else:
                return values[b], False

        order = _is_sorted(values, lo, hi)
        if order != _NOT_SORTED:
            return _scan_sorted(values, weights, lo, hi, lower, higher, order)

        pivot_index, end, extra_weight = _partition(
            values, weights, lo, hi, lo + size // 2
        )
        pivot_value = values[pivot_index]
        pivot_weight = weights[pivot_index] + extra_weight

        below = _weight_sum(weights, lo, pivot_index)
        above = _weight_sum(weights, pivot_index + 1, end)
        lower_sum = lower + below
        higher_sum = higher + above
        total = lower_sum + pivot_weight + higher_sum

        twice_lower = 2.0 * lower_sum
        twice_higher = 2.0 * higher_sum

        if twice_lower < total and twice_higher < total:
            return pivot_value, False

        if twice_lower >= total:
            if pivot_index == lo:
                return pivot_value, True
            if twice_lower == total:
                return _half_below(values, weights, lo, pivot_index, pivot_value), False
            hi = pivot_index
            higher = higher + pivot_weight + above
        else:
            if end == pivot_index + 1:
                return pivot_value, True
            if twice_higher == total:
                return (pivot_value + values[pivot_index + 1:end].min()) / 2.0, False
            lo = pivot_index + 1
            hi = end
            lower = lower + below + pivot_weight


def weighted_median_arrays(values, weights, validate=True):
    """
    Weighted median of parallel value and weight arrays.

    The inputs are copied to float64 arrays; the caller's arrays are
    never reordered.

    Parameters
    ----------
    values : array_like of float
        Data values.
    weights : array_like of float
        Data weights, non-negative.
    validate : bool, optional
        Reject non-finite values and non-finite or negative weights.

    Returns
    -------
    median : float
    """
    values = np.array(values, dtype=np.float64).ravel()
    weights = np.array(weights, dtype=np.float64).ravel()
    if values.shape[0] != weights.shape[0]:
        raise ValueError("values and weights must have same length")
    if values.shape[0] == 0:
        raise EmptyInputError()

    if validate:
        bad = np.flatnonzero(~np.isfinite(values))
        if bad.size:
            raise InvalidValueError(
                int(bad[0]), f"value must be finite, got {values[bad[0]]!r}"
            )
        bad = np.flatnonzero(~np.isfinite(weights) | (weights < 0))
        if bad.size:
            raise InvalidValueError(
                int(bad[0]), f"weight must be finite and non-negative, got {weights[bad[0]]!r}"
            )

    total = weights.sum()
    if not total > 0:
        raise NonPositiveTotalWeightError(float(total))

    median, rounded = _select(values, weights)
    if rounded:
        log.warning("rounding cut the array search short at %r", median)
    return float(median)


def warmup():
    """Trigger JIT compilation of the selection loop."""
    log.info("compiling weighted median kernel")
    values = np.array([3.0, 1.0, 2.0, 2.0, 5.0])
    weights = np.ones(5)
    _select(values, weights)
