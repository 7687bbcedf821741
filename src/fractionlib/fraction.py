# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Fractions with fixed-width integral numerator and denominator."""

from __future__ import annotations

from copy import copy
from decimal import Decimal, localcontext
import math
import operator
from numbers import Integral, Real
import struct
from typing import Any, Callable, Optional, Tuple, Union

from .converter import DBL_EPSILON, approximate
from .storage import Storage, get_dflt_storage


__all__ = ['Fraction', 'to_fraction']


# binary128 carries 34 significant decimal digits
LONG_DOUBLE_DIGITS = 34

Operand = Union['Fraction', int, float]


def _get_storage(storage: Optional[Storage]) -> Storage:
    if storage is None:
        return get_dflt_storage()
    if not isinstance(storage, Storage):
        raise TypeError(f"Illegal storage type: {storage!r}")
    return storage


def _is_non_finite(value: Any) -> bool:
    return (isinstance(value, Real) and not isinstance(value, Integral)
            and not math.isfinite(value))


def _to_single(value: float) -> float:
    """Return `value` rounded to IEEE 754 binary32."""
    return struct.unpack('f', struct.pack('f', value))[0]


def _lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def _operators(method: Callable[[Fraction, Fraction], Fraction]) \
        -> Tuple[Callable, Callable, Callable]:
    """Return in-place, forward and reverse operator based on `method`.

    `method` mutates its first argument and returns it. The forward and
    reverse operators apply it to a copy, so their operands stay untouched.
    Scalars are lifted into the storage of the fraction operand, so a float
    whose convergent has a denominator wrapping to zero in that storage
    raises ValueError.
    """

    def inplace(self: Fraction, other: Any) -> Fraction:
        operand = self._lift(other)
        if operand is None:
            return NotImplemented
        return method(self, operand)

    def forward(self: Fraction, other: Any) -> Fraction:
        operand = self._lift(other)
        if operand is None:
            return NotImplemented
        return method(copy(self), operand)

    def reverse(self: Fraction, other: Any) -> Fraction:
        operand = self._lift(other)
        if operand is None:
            return NotImplemented
        return method(copy(operand), self)

    inplace.__name__ = f"__i{method.__name__.strip('_')}__"
    forward.__name__ = f"__{method.__name__.strip('_')}__"
    reverse.__name__ = f"__r{method.__name__.strip('_')}__"
    return inplace, forward, reverse


class Fraction:
    """Quotient of two integers held in a fixed-width storage type.

    Args:
        numerator (numbers.Integral): numerator (default: 0)
        denominator (numbers.Integral): denominator (default: 1)
        storage (Storage): integral type used to hold numerator and
            denominator (default: the context's default storage)

    Both values are wrapped to the range of `storage` and kept as given,
    i.e. a fraction is not reduced to lowest terms unless :meth:`simplify`
    is called.

    Equality is structural: two fractions are equal only if their
    numerators and their denominators are equal, so ``Fraction(1, 2) !=
    Fraction(2, 4)``. Ordering compares the values, so ``Fraction(1, 2) <=
    Fraction(2, 4)`` and ``Fraction(1, 2) >= Fraction(2, 4)`` both hold.
    Integral and float operands are compared as ``value / 1`` resp. their
    convergent, without wrapping them to `storage`.

    Arithmetic results are wrapped to the storage of the left operand in
    place operations and of the fraction operand otherwise, like machine
    integers do. Overflow is not detected, except when it would leave the
    denominator zero.

    Raises:
        TypeError: `numerator` or `denominator` is not integral or
            `storage` is not a :class:`Storage`
        ValueError: `denominator` is zero (after wrapping)
    """

    __slots__ = ('_numerator', '_denominator', '_storage')

    def __init__(self, numerator: Integral = 0, denominator: Integral = 1,
                 *, storage: Optional[Storage] = None) -> None:
        storage = _get_storage(storage)
        num = storage.coerce(numerator)
        den = storage.coerce(denominator)
        if den == 0:
            raise ValueError("Denominator must not be zero.")
        self._storage = storage
        self._numerator = num
        self._denominator = den

    @classmethod
    def from_float(cls, value: Real, tolerance: Real = DBL_EPSILON, *,
                   storage: Optional[Storage] = None,
                   max_iterations: Optional[int] = None) -> Fraction:
        """Return the convergent of `value` within relative `tolerance`.

        Args:
            value (numbers.Real): number to be converted
            tolerance (numbers.Real): relative error bound, must be > 0
                (default: machine epsilon of float)
            storage (Storage): storage type of the resulting fraction
            max_iterations (int): limit of continued fraction terms

        Raises:
            TypeError: `value` is not a real number
            ValueError: `tolerance` <= 0, `value` is not finite or the
                denominator wraps to zero in `storage`
            NonConvergenceError: `tolerance` not reached
        """
        num, den = approximate(value, tolerance, max_iterations)
        return cls(num, den, storage=storage)

    @property
    def numerator(self) -> int:
        """Numerator of `self`."""
        return self._numerator

    @numerator.setter
    def numerator(self, value: Integral) -> None:
        self._numerator = self._storage.coerce(value)

    @property
    def denominator(self) -> int:
        """Denominator of `self`."""
        return self._denominator

    @denominator.setter
    def denominator(self, value: Integral) -> None:
        den = self._storage.coerce(value)
        if den == 0:
            raise ValueError("Denominator must not be zero.")
        self._denominator = den

    @property
    def storage(self) -> Storage:
        """Storage type of numerator and denominator."""
        return self._storage

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator (not reduced)."""
        return self._numerator, self._denominator

    def _set(self, numerator: int, denominator: int) -> Fraction:
        storage = self._storage
        den = storage.wrap(denominator)
        if den == 0:
            raise OverflowError(f"Denominator {denominator} wraps to zero "
                                f"in {storage.name}.")
        self._numerator = storage.wrap(numerator)
        self._denominator = den
        return self

    def _lift(self, other: Any) -> Optional[Fraction]:
        if isinstance(other, Fraction):
            return other
        if isinstance(other, Integral):
            return Fraction(other, storage=self._storage)
        if isinstance(other, Real):
            return Fraction.from_float(other, storage=self._storage)
        return None

    @staticmethod
    def _ratio(other: Any) -> Optional[Tuple[int, int]]:
        # exact, unwrapped pair for comparisons
        if isinstance(other, Fraction):
            return other._numerator, other._denominator
        if isinstance(other, Integral):
            return int(other), 1
        if isinstance(other, Real):
            return approximate(other)
        return None

    def _operand(self, other: Any) -> Fraction:
        operand = self._lift(other)
        if operand is None:
            raise TypeError(f"Unsupported operand: {other!r}")
        return operand

    # GCD / LCM

    def gcd(self) -> int:
        """Return the greatest common divisor of numerator and denominator.

        The result is never negative; gcd(0, d) is ``abs(d)``.
        """
        return math.gcd(self._numerator, self._denominator)

    def lcm(self, other: Fraction) -> int:
        """Return the least common multiple of both denominators."""
        return self._storage.wrap(_lcm(self._denominator,
                                       other._denominator))

    def simplify(self) -> Fraction:
        """Reduce `self` to lowest terms in place and return it.

        With a signed storage type a negative sign ends up in the
        numerator, unless numerator or denominator is the storage's
        minimum, which has no positive counterpart. ``0 / d`` becomes
        ``0 / 1``.
        """
        storage = self._storage
        div = self.gcd()
        num = self._numerator // div
        den = self._denominator // div
        if den < 0 and storage.min not in (num, den):
            num, den = -num, -den
        return self._set(num, den)

    # arithmetic

    def _add(self, other: Fraction) -> Fraction:
        if self._denominator == other._denominator:
            return self._set(self._numerator + other._numerator,
                             self._denominator)
        lcm = _lcm(self._denominator, other._denominator)
        return self._set(self._numerator * (lcm // self._denominator) +
                         other._numerator * (lcm // other._denominator),
                         lcm)

    def _sub(self, other: Fraction) -> Fraction:
        if self._denominator == other._denominator:
            return self._set(self._numerator - other._numerator,
                             self._denominator)
        lcm = _lcm(self._denominator, other._denominator)
        return self._set(self._numerator * (lcm // self._denominator) -
                         other._numerator * (lcm // other._denominator),
                         lcm)

    def _mul(self, other: Fraction) -> Fraction:
        return self._set(self._numerator * other._numerator,
                         self._denominator * other._denominator)

    def _truediv(self, other: Fraction) -> Fraction:
        if other._numerator == 0:
            raise ZeroDivisionError(f"Division by zero-valued {other!r}.")
        return self._set(self._numerator * other._denominator,
                         self._denominator * other._numerator)

    def add(self, other: Operand) -> Fraction:
        """Add `other` to `self` in place and return `self`.

        `other` may be a fraction, an integral number or a float; floats
        are converted by :meth:`from_float` with default tolerance.

        Raises:
            TypeError: `other` is not a supported operand
            ValueError: the denominator of converted `other` wraps to zero
        """
        return self._add(self._operand(other))

    def subtract(self, other: Operand) -> Fraction:
        """Subtract `other` from `self` in place and return `self`."""
        return self._sub(self._operand(other))

    def multiply(self, other: Operand) -> Fraction:
        """Multiply `self` by `other` in place and return `self`."""
        return self._mul(self._operand(other))

    def divide(self, other: Operand) -> Fraction:
        """Divide `self` by `other` in place and return `self`.

        Raises:
            ZeroDivisionError: `other` equals zero
        """
        return self._truediv(self._operand(other))

    __iadd__, __add__, __radd__ = _operators(_add)
    __isub__, __sub__, __rsub__ = _operators(_sub)
    __imul__, __mul__, __rmul__ = _operators(_mul)
    __itruediv__, __truediv__, __rtruediv__ = _operators(_truediv)

    def __neg__(self) -> Fraction:
        """-self"""
        num, den = self._numerator, self._denominator
        # the signed minimum negates to itself
        if self._storage.signed and num == self._storage.min:
            den = -den
        else:
            num = -num
        return Fraction(num, den, storage=self._storage)

    def __pos__(self) -> Fraction:
        """+self"""
        return copy(self)

    def __abs__(self) -> Fraction:
        """abs(self)"""
        num, den = self._numerator, self._denominator
        if num == 0 or (num < 0) == (den < 0):
            return copy(self)
        storage = self._storage
        if num < 0 and num != storage.min or den == storage.min:
            num = -num
        else:
            den = -den
        return Fraction(num, den, storage=storage)

    # comparison

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if _is_non_finite(other):
            return False
        ratio = self._ratio(other)
        if ratio is None:
            return NotImplemented
        return (self._numerator, self._denominator) == ratio

    # mutable, so not hashable
    __hash__ = None

    def _compare(self, other: Any, cmp: Callable[[Any, Any], bool]) -> bool:
        if _is_non_finite(other):
            return cmp(self.to_double(), float(other))
        ratio = self._ratio(other)
        if ratio is None:
            return NotImplemented
        num, den = self._numerator, self._denominator
        if den < 0:
            num, den = -num, -den
        other_num, other_den = ratio
        if other_den < 0:
            other_num, other_den = -other_num, -other_den
        return cmp(num * other_den, other_num * den)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        return self._compare(other, operator.ge)

    # conversion

    def to_double(self) -> float:
        """Return `self` as double precision float."""
        return self._numerator / self._denominator

    def to_float(self) -> float:
        """Return `self` as single precision float.

        Numerator, denominator and quotient are rounded to IEEE 754
        binary32; the result is returned as Python float.
        """
        return _to_single(_to_single(self._numerator) /
                          _to_single(self._denominator))

    def to_long_double(self) -> Decimal:
        """Return `self` as Decimal with 34 significant digits."""
        with localcontext() as ctx:
            ctx.prec = LONG_DOUBLE_DIGITS
            return Decimal(self._numerator) / Decimal(self._denominator)

    __float__ = to_double

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __copy__(self) -> Fraction:
        """Return an independent copy of `self`."""
        return self.__class__(self._numerator, self._denominator,
                              storage=self._storage)

    def __deepcopy__(self, memo: Any) -> Fraction:
        """Return an independent copy of `self`."""
        return self.__copy__()

    def __str__(self) -> str:
        """str(self)"""
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        """repr(self)"""
        return (f"{self.__class__.__name__}({self._numerator}, "
                f"{self._denominator}, storage=Storage.{self._storage.name})")


def to_fraction(value: Real, tolerance: Real = DBL_EPSILON, *,
                storage: Optional[Storage] = None,
                max_iterations: Optional[int] = None) -> Fraction:
    """Return a fraction approximating `value` within relative `tolerance`.

    See :meth:`Fraction.from_float`.
    """
    return Fraction.from_float(value, tolerance, storage=storage,
                               max_iterations=max_iterations)
