# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
Various low-level utilities.
"""

import math
import numbers


class UserError(Exception):
    pass


class EmptyInputError(UserError, ValueError):
    """
    Raised when the weighted median of zero records is requested.
    """

    def __init__(self, message="weighted median of an empty sequence"):
        super().__init__(message)


class NonPositiveTotalWeightError(UserError, ValueError):
    """
    Raised when the weights sum to zero or less, which leaves the
    half-weight point undefined.
    """

    def __init__(self, total):
        self.total = total
        super().__init__(f"total weight must be positive, got {total!r}")


class InvalidValueError(UserError, ValueError):
    """
    Raised for a record whose value or weight cannot take part in the
    computation: non-finite values, non-finite or negative weights.
    """

    def __init__(self, index, message):
        self.index = index
        super().__init__(f"record {index}: {message}")


class ConservationError(AssertionError):
    pass


def is_nan(x):
    """
    Returns `True` if x is a NaN value.
    """
    return x != x


def is_finite(x):
    """
    Returns `True` if x is a finite number.

    Exact types (int, Fraction) are always finite.  Everything else
    that converts to float is checked through ``math.isfinite``.
    """
    if isinstance(x, numbers.Rational):
        return True
    if is_nan(x):
        return False
    return math.isfinite(x)


def is_exact(x):
    """
    Returns `True` if arithmetic on x carries no rounding error worth
    tolerating (int, Fraction).
    """
    return isinstance(x, numbers.Rational)


def midpoint(a, b):
    """
    Average of two values, kept exact for Fraction and Decimal inputs.
    """
    return (a + b) / 2
