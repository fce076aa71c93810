# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
Weighted median by partition-based selection.

The weighted median of a multiset of (value, weight) records is the
value at which the cumulative weight, taken in increasing order of
value, first reaches half of the total weight.  When the cumulative
weight lands exactly on half, the result is the average of that value
and the next one in sorted order, whatever that one weighs.

Instead of sorting, the input is narrowed in place the way quickselect
narrows toward a rank: partition the current window around a pivot,
decide which side holds the half-weight point and carry the weight of
the discarded side along as a `Deltas` pair.
"""

import collections.abc

from .console import log
from .is_sorted import SortOrder, is_sorted
from .partition import partition
from .record import accessors
from .util import (
    EmptyInputError,
    InvalidValueError,
    NonPositiveTotalWeightError,
    is_finite,
    midpoint,
)
from .weights import Deltas, Step, check_conservation, weight_sum


def _validate(data, value_of, weight_of):
    for i, item in enumerate(data):
        value = value_of(item)
        if not is_finite(value):
            raise InvalidValueError(i, f"value must be finite, got {value!r}")
        weight = weight_of(item)
        if not is_finite(weight):
            raise InvalidValueError(i, f"weight must be finite, got {weight!r}")
        if weight < 0:
            raise InvalidValueError(i, f"weight must be non-negative, got {weight!r}")


def _resolve_pair(data, lo, deltas, value_of, weight_of):
    a, b = data[lo], data[lo + 1]
    if value_of(b) < value_of(a):
        a, b = b, a

    below = deltas.lower + weight_of(a)
    above = weight_of(b) + deltas.higher
    if below == above:
        return midpoint(value_of(a), value_of(b))
    elif below > above:
        return value_of(a)
    else:
        return value_of(b)


def _scan_sorted(data, lo, hi, deltas, order, value_of, weight_of):
    total = deltas.total(weight_sum(data, lo, hi, weight_of))

    if order is SortOrder.FORWARD:
        indices = range(lo, hi)
    else:
        indices = range(hi - 1, lo - 1, -1)

    cumulative = deltas.lower
    for k, i in enumerate(indices):
        cumulative += weight_of(data[i])
        twice = 2 * cumulative
        if twice == total and k + 1 < len(indices):
            return midpoint(value_of(data[i]), value_of(data[indices[k + 1]]))
        if twice >= total:
            return value_of(data[i])

    log.warning(
        "rounding kept window [%d, %d) short of half its weight, taking the last value",
        lo, hi,
    )
    return value_of(data[indices[-1]])


def _half_below(data, lo, hi, pivot_value, value_of, weight_of):
    """
    Resolve a window whose records below the pivot, ``data[lo:hi]``,
    bring the cumulative weight to exactly half.

    The half is reached at the largest value that carries weight.  The
    value after it is the next one up, which may be a weightless
    record still below the pivot.
    """
    # Only empty through rounding.
    reached = max(
        (value_of(data[i]) for i in range(lo, hi) if weight_of(data[i]) > 0),
        default=pivot_value,
    )
    following = pivot_value
    for i in range(lo, hi):
        value = value_of(data[i])
        if reached < value < following:
            following = value
    return midpoint(reached, following)


def _min_value(data, lo, hi, value_of):
    return min(value_of(data[i]) for i in range(lo, hi))


def _select(data, lo, hi, deltas, value_of, weight_of, on_step=None, grand_total=None):
    while True:
        size = hi - lo
        if size == 1:
            return value_of(data[lo])
        if size == 2:
            return _resolve_pair(data, lo, deltas, value_of, weight_of)

        order = is_sorted(data, lo, hi, value_of)
        if order is not SortOrder.NOT_SORTED:
            log.debug("window [%d, %d) is sorted (%s), scanning", lo, hi, order.value)
            return _scan_sorted(data, lo, hi, deltas, order, value_of, weight_of)

        pivot_index, end, extra_weight = partition(
            data, lo, hi, lo + size // 2, value_of, weight_of
        )
        pivot_value = value_of(data[pivot_index])
        pivot_weight = weight_of(data[pivot_index]) + extra_weight

        below = weight_sum(data, lo, pivot_index, weight_of)
        above = weight_sum(data, pivot_index + 1, end, weight_of)
        lower_sum = deltas.lower + below
        higher_sum = deltas.higher + above
        total = lower_sum + pivot_weight + higher_sum

        if on_step is not None or grand_total is not None:
            step = Step(lo, hi, pivot_value, lower_sum, pivot_weight, higher_sum, total)
            if grand_total is not None:
                check_conservation(step, grand_total)
            if on_step is not None:
                on_step(step)

        twice_lower = 2 * lower_sum
        twice_higher = 2 * higher_sum

        if twice_lower < total and twice_higher < total:
            return pivot_value

        if twice_lower >= total:
            if pivot_index == lo:
                log.warning(
                    "rounding put the half-weight point below pivot %r in window [%d, %d)",
                    pivot_value, lo, hi,
                )
                return pivot_value
            if twice_lower == total:
                return _half_below(data, lo, pivot_index, pivot_value, value_of, weight_of)
            hi = pivot_index
            deltas = deltas.exclude_higher(pivot_weight + above)
        else:
            if end == pivot_index + 1:
                log.warning(
                    "rounding put the half-weight point above pivot %r in window [%d, %d)",
                    pivot_value, lo, hi,
                )
                return pivot_value
            if twice_higher == total:
                return midpoint(pivot_value, _min_value(data, pivot_index + 1, end, value_of))
            lo = pivot_index + 1
            hi = end
            deltas = deltas.exclude_lower(below + pivot_weight)


def weighted_median(data, validate=True, on_step=None):
    """
    Return the weighted median of a collection of records.

    Parameters
    ----------
    data : list or iterable
        Either `Data` instances or ``(value, weight)`` pairs, not
        mixed.  A mutable sequence is reordered in place (its records
        are left untouched); any other iterable is copied first.
    validate : bool, optional
        Reject non-finite values and non-finite or negative weights
        with `InvalidValueError`.  When False these are preconditions
        and are not checked.
    on_step : callable, optional
        Called with a `Step` after every partition step.

    Returns
    -------
    median : number
        A value from *data*, or the average of two adjacent values
        when the cumulative weight reaches exactly half.

    Raises
    ------
    EmptyInputError
        If *data* is empty.
    NonPositiveTotalWeightError
        If the weights do not sum to a positive number.
    InvalidValueError
        If *validate* is set and a record is unusable.
    """
    if not isinstance(data, collections.abc.MutableSequence):
        data = list(data)

    n = len(data)
    if n == 0:
        raise EmptyInputError()

    value_of, weight_of = accessors(data[0])
    if validate:
        _validate(data, value_of, weight_of)

    total = weight_sum(data, 0, n, weight_of)
    if not total > 0:
        raise NonPositiveTotalWeightError(total)

    log.debug("weighted median of %d records, total weight %r", n, total)
    grand_total = total if log.is_debug_enabled() else None
    return _select(data, 0, n, Deltas(0, 0), value_of, weight_of, on_step, grand_total)
