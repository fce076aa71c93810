# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
In-place partitioning of a window around a pivot, with the elements
equal to the pivot collapsed out of the way.

After ``partition(data, lo, hi, target, ...)`` returns
``(pivot_index, end, extra_weight)``:

    data[lo:pivot_index]       values < pivot
    data[pivot_index]          the pivot representative
    data[pivot_index + 1:end]  values > pivot
    data[end:hi]               values == pivot, weight in extra_weight

Callers only look at ``data[lo:end]`` afterwards.  Pushing the
duplicates out means the window shrinks on every step even when most
of it shares one value.
"""


def _swap(data, i, j):
    data[i], data[j] = data[j], data[i]


def collapse_duplicates(data, lo, hi, value_of, weight_of):
    """
    Move every element of ``data[lo + 1:hi]`` whose value equals that
    of ``data[lo]`` to the tail of the window.

    Returns ``(end, extra_weight)``: the new logical end of the window
    and the summed weight of the moved elements.
    """
    pivot_value = value_of(data[lo])
    extra_weight = 0
    end = hi
    i = lo + 1
    while i < end:
        if value_of(data[i]) == pivot_value:
            extra_weight += weight_of(data[i])
            end -= 1
            _swap(data, i, end)
        else:
            i += 1
    return end, extra_weight


def partition(data, lo, hi, target, value_of, weight_of):
    """
    Partition ``data[lo:hi]`` around the value found at index *target*.

    Parameters
    ----------
    data : list
        Sequence reordered in place.
    lo, hi : int
        Window bounds, ``hi`` exclusive.  At least one element.
    target : int
        Absolute index, within the window, of the pivot element.
    value_of, weight_of : callable
        Accessors for an element's value and weight.

    Returns
    -------
    pivot_index : int
        Absolute index of the pivot representative.
    end : int
        Exclusive end of the window once the duplicates are removed.
    extra_weight : number
        Weight of the removed duplicates, not including the
        representative's own weight.
    """
    _swap(data, lo, target)
    pivot_value = value_of(data[lo])

    end, extra_weight = collapse_duplicates(data, lo, hi, value_of, weight_of)

    # No element in (lo, end) equals the pivot any more, so each one is
    # strictly below or strictly above it.
    front = lo + 1
    back = end - 1
    while front <= back:
        if value_of(data[front]) < pivot_value:
            front += 1
        elif value_of(data[back]) > pivot_value:
            back -= 1
        else:
            _swap(data, front, back)
            front += 1
            back -= 1

    pivot_index = front - 1
    _swap(data, lo, pivot_index)

    return pivot_index, end, extra_weight
