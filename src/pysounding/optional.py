"""A numeric quantity that may be missing.

Missing observations are the normal case for sounding data, so every profile
and surface value is carried as an :class:`OptionalValue`.  An instance is
either present, wrapping a number, or the singleton :data:`MISSING`.

Arithmetic and ordering are lifted pointwise and any operation that touches a
missing operand yields :data:`MISSING`::

    >>> present(10.0) + 2
    present(12.0)
    >>> present(10.0) + MISSING
    MISSING
    >>> present(850.0) < 1000
    present(True)

Equality is structural, so ``MISSING == MISSING`` is true.  This is what lets
rows and profiles be compared in tests and containers.
"""

import math
import operator

import numpy as np

from pysounding.exceptions import MissingValueError
from pysounding.reference import MISSING_FLAG


class OptionalValue:
    """Either a present number or a missing value."""

    __slots__ = ("_value",)

    def __init__(self, value=None):
        """Constructor, use :func:`present`, :func:`optional` or MISSING."""
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        """Instances are immutable."""
        raise AttributeError("OptionalValue is immutable")

    @property
    def is_present(self) -> bool:
        """Is there a value."""
        return self._value is not None

    @property
    def is_missing(self) -> bool:
        """Is the value missing."""
        return self._value is None

    @property
    def value(self):
        """The wrapped value.

        Raises:
          MissingValueError: when the value is missing
        """
        if self._value is None:
            raise MissingValueError("attempt to read a missing value")
        return self._value

    def unwrap_or(self, default):
        """Return the wrapped value or ``default`` when missing."""
        return default if self._value is None else self._value

    def as_option(self):
        """Return the wrapped value or None."""
        return self._value

    def map(self, func):
        """Apply ``func`` to a present value, MISSING stays MISSING."""
        if self._value is None:
            return MISSING
        res = func(self._value)
        if res is None:
            return MISSING
        return OptionalValue(res)

    def and_then(self, func):
        """Apply ``func``, which itself returns an OptionalValue."""
        if self._value is None:
            return MISSING
        res = func(self._value)
        if not isinstance(res, OptionalValue):
            raise TypeError("and_then function must return an OptionalValue")
        return res

    def _lift(self, other, func):
        """Apply a binary function with missing propagation."""
        if isinstance(other, OptionalValue):
            other = other._value
        elif not isinstance(other, (int, float, np.number)):
            return NotImplemented
        if self._value is None or other is None:
            return MISSING
        return OptionalValue(func(self._value, other))

    def _rlift(self, other, func):
        """Reflected version of _lift."""
        return self._lift(other, lambda a, b: func(b, a))

    def __add__(self, other):
        return self._lift(other, operator.add)

    def __radd__(self, other):
        return self._rlift(other, operator.add)

    def __sub__(self, other):
        return self._lift(other, operator.sub)

    def __rsub__(self, other):
        return self._rlift(other, operator.sub)

    def __mul__(self, other):
        return self._lift(other, operator.mul)

    def __rmul__(self, other):
        return self._rlift(other, operator.mul)

    def __truediv__(self, other):
        return self._lift(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._rlift(other, operator.truediv)

    def __floordiv__(self, other):
        return self._lift(other, operator.floordiv)

    def __rfloordiv__(self, other):
        return self._rlift(other, operator.floordiv)

    def __mod__(self, other):
        return self._lift(other, operator.mod)

    def __rmod__(self, other):
        return self._rlift(other, operator.mod)

    def __pow__(self, other):
        return self._lift(other, operator.pow)

    def __rpow__(self, other):
        return self._rlift(other, operator.pow)

    def __neg__(self):
        return self.map(operator.neg)

    def __pos__(self):
        return self

    def __abs__(self):
        return self.map(abs)

    # Ordering gives an OptionalValue of a bool
    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def _compare(self, other, func):
        """Lifted comparison."""
        if isinstance(other, OptionalValue):
            other = other._value
        elif not isinstance(other, (int, float, np.number)):
            return NotImplemented
        if self._value is None or other is None:
            return MISSING
        return OptionalValue(bool(func(self._value, other)))

    def __eq__(self, other):
        """Structural equality."""
        if isinstance(other, OptionalValue):
            return self._value == other._value
        if other is None:
            return self._value is None
        if isinstance(other, (int, float, np.number)):
            return self._value is not None and self._value == other
        return NotImplemented

    def __ne__(self, other):
        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        """Missing is falsy, present follows the value."""
        return self._value is not None and bool(self._value)

    def __float__(self):
        """Missing becomes NaN when forced to a float."""
        return math.nan if self._value is None else float(self._value)

    def __repr__(self):
        if self._value is None:
            return "MISSING"
        return f"present({self._value!r})"

    def __str__(self):
        if self._value is None:
            return "missing"
        return str(self._value)

    def __reduce__(self):
        """Keep MISSING a singleton through copy and pickle."""
        if self._value is None:
            return (_missing, ())
        return (OptionalValue, (self._value,))


MISSING = OptionalValue()


def _missing():
    """Used by pickle to restore the singleton."""
    return MISSING


def present(value) -> OptionalValue:
    """Wrap a present number.

    Args:
      value (number): the value, may not be None

    Returns:
      OptionalValue
    """
    if value is None:
        raise ValueError("present() requires a value, use MISSING instead")
    return OptionalValue(value)


def optional(value) -> OptionalValue:
    """Coerce loose input into an OptionalValue.

    None, NaN, masked values and the legacy -9999 flag are all missing.

    Args:
      value: a number, None, np.ma.masked or an OptionalValue

    Returns:
      OptionalValue
    """
    if isinstance(value, OptionalValue):
        return value
    if value is None or value is np.ma.masked or np.ma.is_masked(value):
        return MISSING
    if isinstance(value, (bool, np.bool_)):
        return OptionalValue(bool(value))
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and (
        math.isnan(value) or value == MISSING_FLAG
    ):
        return MISSING
    if isinstance(value, int) and value == MISSING_FLAG:
        return MISSING
    if not isinstance(value, (int, float)):
        raise TypeError(f"can not make an OptionalValue from {value!r}")
    return OptionalValue(value)
