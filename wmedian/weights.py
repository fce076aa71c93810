# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
Weight bookkeeping for the selection loop.

The loop never re-sums the whole input.  Mass that has been resolved
as lying entirely below or above the current window is carried in a
`Deltas` pair, so that at every step

    deltas.lower + weight_sum(window) + deltas.higher == total

holds for the original total weight.
"""

import collections
import math

from .util import ConservationError, is_exact


def weight_sum(data, lo, hi, weight_of):
    """
    Sum the weights of ``data[lo:hi]``.

    Starts from integer zero so that int, Fraction and Decimal weights
    keep their type.
    """
    total = 0
    for i in range(lo, hi):
        total += weight_of(data[i])
    return total


class Deltas(collections.namedtuple('Deltas', ['lower', 'higher'])):
    """
    Weight known to lie below (``lower``) and above (``higher``) every
    value in the current window.
    """

    __slots__ = ()

    def exclude_lower(self, mass):
        return self._replace(lower=self.lower + mass)

    def exclude_higher(self, mass):
        return self._replace(higher=self.higher + mass)

    def total(self, window_weight):
        return self.lower + window_weight + self.higher


Step = collections.namedtuple(
    'Step',
    ['lo', 'hi', 'pivot_value', 'lower_sum', 'pivot_weight', 'higher_sum', 'total'],
)


def check_conservation(step, total, rel_tol=1e-9):
    """
    Raise `ConservationError` if *step* does not account for *total*.

    Exact weight types must match exactly; anything else is compared
    with a relative tolerance to allow for summation order.
    """
    found = step.lower_sum + step.pivot_weight + step.higher_sum
    if is_exact(found) and is_exact(total):
        ok = found == total
    else:
        ok = math.isclose(found, total, rel_tol=rel_tol)
    if not ok:
        raise ConservationError(
            f"weight not conserved in window [{step.lo}, {step.hi}): "
            f"{step.lower_sum!r} + {step.pivot_weight!r} + {step.higher_sum!r} != {total!r}"
        )
