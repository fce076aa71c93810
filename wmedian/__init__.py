# Licensed under a 3-clause BSD style license - see LICENSE.rst

from .median import weighted_median
from .record import Data, Record, records
from .util import (
    EmptyInputError,
    InvalidValueError,
    NonPositiveTotalWeightError,
    UserError,
)
from .weights import Step

__version__ = "0.1.0"

__all__ = [
    "Data",
    "EmptyInputError",
    "InvalidValueError",
    "NonPositiveTotalWeightError",
    "Record",
    "Step",
    "UserError",
    "records",
    "weighted_median",
    "weighted_median_arrays",
]


def __getattr__(name):
    # numba is only loaded once the array kernel is asked for.
    if name == "weighted_median_arrays":
        from ._median_numba import weighted_median_arrays

        return weighted_median_arrays
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
