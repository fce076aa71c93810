# Licensed under a 3-clause BSD style license - see LICENSE.rst

import enum


class SortOrder(enum.Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'
    NOT_SORTED = 'not-sorted'


def is_sorted(data, lo, hi, value_of):
    """
    Classify the values of ``data[lo:hi]`` in one pass.

    Only strict orders count: a window with two equal neighbours is
    `SortOrder.NOT_SORTED`.  The scan stops as soon as both orders
    have been ruled out.
    """
    forward = backward = True

    if hi - lo > 1:
        current = value_of(data[lo])
        for i in range(lo + 1, hi):
            following = value_of(data[i])
            forward = forward and current < following
            backward = backward and current > following
            if not forward and not backward:
                break
            current = following

    if forward:
        return SortOrder.FORWARD
    elif backward:
        return SortOrder.BACKWARD
    else:
        return SortOrder.NOT_SORTED
