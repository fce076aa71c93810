# Licensed under a 3-clause BSD style license - see LICENSE.rst

import abc
import operator


class Data(abc.ABC):
    """
    Capability required from anything whose weighted median is taken.

    Subclasses expose a value, used for ordering, and a non-negative
    weight.  Both accessors are read-only: the algorithm reorders the
    containing sequence but never writes back into a record.
    """

    __slots__ = ()

    @abc.abstractmethod
    def get_value(self):
        """
        Return the value used to order this record.
        """

    @abc.abstractmethod
    def get_weight(self):
        """
        Return the weight carried by this record.
        """


class Record(Data):
    """
    Plain immutable (value, weight) record.
    """

    __slots__ = ('_value', '_weight')

    def __init__(self, value, weight=1):
        self._value = value
        self._weight = weight

    @property
    def value(self):
        return self._value

    @property
    def weight(self):
        return self._weight

    def get_value(self):
        return self._value

    def get_weight(self):
        return self._weight

    def __eq__(self, other):
        if not isinstance(other, Record):
            return NotImplemented
        return (self._value, self._weight) == (other._value, other._weight)

    def __hash__(self):
        return hash((self._value, self._weight))

    def __repr__(self):
        return f"Record(value={self._value!r}, weight={self._weight!r})"


_DATA_ACCESSORS = (operator.methodcaller('get_value'), operator.methodcaller('get_weight'))
_PAIR_ACCESSORS = (operator.itemgetter(0), operator.itemgetter(1))


def accessors(item):
    """
    Return ``(value_of, weight_of)`` callables able to read *item*.

    `Data` instances are read through their accessor methods; anything
    else is treated as a ``(value, weight)`` pair.
    """
    if isinstance(item, Data):
        return _DATA_ACCESSORS
    return _PAIR_ACCESSORS


def records(values, weights=None):
    """
    Build a list of `Record` from parallel value and weight sequences.
    Missing weights default to 1.
    """
    if weights is None:
        return [Record(v) for v in values]
    values = list(values)
    weights = list(weights)
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")
    return [Record(v, w) for v, w in zip(values, weights)]
