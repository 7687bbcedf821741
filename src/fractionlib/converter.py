# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Approximation of floating point numbers by continued fractions."""

from __future__ import annotations

from contextvars import ContextVar, Token
import math
from numbers import Real
import sys
from typing import Optional, Tuple


__all__ = [
    'DBL_EPSILON',
    'FLT_EPSILON',
    'NonConvergenceError',
    'approximate',
    'get_dflt_max_iterations',
    'set_dflt_max_iterations',
]


# machine epsilon of IEEE 754 binary64 and binary32
DBL_EPSILON = sys.float_info.epsilon
FLT_EPSILON = 2.0 ** -23


class NonConvergenceError(ArithmeticError):
    """Continued fraction expansion did not reach the requested tolerance."""


_dflt_max_iterations: ContextVar[int] = \
    ContextVar("dflt_max_iterations", default=100)


def get_dflt_max_iterations() -> int:
    """Return default limit of continued fraction terms."""
    return _dflt_max_iterations.get()


def set_dflt_max_iterations(max_iterations: int) -> Token:
    """Set default limit of continued fraction terms.

    Args:
        max_iterations (int): number of terms to be set as default

    Raises:
        TypeError: given 'max_iterations' is not an int
        ValueError: given 'max_iterations' is less than 1
    """
    if not isinstance(max_iterations, int):
        raise TypeError(f"Illegal iteration limit: {max_iterations!r}")
    if max_iterations < 1:
        raise ValueError(f"Iteration limit must be positive: "
                         f"{max_iterations!r}")
    return _dflt_max_iterations.set(max_iterations)


def approximate(value: Real, tolerance: Real = DBL_EPSILON,
                max_iterations: Optional[int] = None) -> Tuple[int, int]:
    """Return numerator and denominator of a rational approximating `value`.

    The continued fraction expansion of `value` is evaluated term by term
    until the relative error of the current convergent drops below
    `tolerance`. Values whose magnitude is less than `tolerance` are
    approximated as 0 / 1.

    Args:
        value (numbers.Real): number to be approximated
        tolerance (numbers.Real): relative error bound, must be > 0
        max_iterations (int): maximal number of terms to evaluate; the
            context's default if None

    Returns:
        tuple (numerator, denominator) of ints, denominator > 0

    Raises:
        TypeError: `value` or `tolerance` is not a real number
        ValueError: `tolerance` is not positive or `value` is not finite
        NonConvergenceError: tolerance not reached within `max_iterations`
            terms
    """
    if not isinstance(value, Real):
        raise TypeError(f"Can't approximate {value!r}.")
    if not isinstance(tolerance, Real):
        raise TypeError(f"Illegal tolerance: {tolerance!r}")
    # 'not >' to catch NaN too
    if not tolerance > 0:
        raise ValueError(f"Tolerance must be greater than zero: "
                         f"{tolerance!r}")
    value = float(value)
    tolerance = float(tolerance)
    if not math.isfinite(value):
        raise ValueError(f"Can't approximate {value!r}.")
    if max_iterations is None:
        max_iterations = get_dflt_max_iterations()

    if -tolerance < value < tolerance:
        return 0, 1

    sign = -1 if value < 0 else 1
    target = abs(value)
    bound = target * tolerance
    h1, h2 = 1, 0
    k1, k2 = 0, 1
    x = target
    for _ in range(max_iterations):
        a = math.floor(x)
        h1, h2 = a * h1 + h2, h1
        k1, k2 = a * k1 + k2, k1
        if abs(h1 / k1 - target) < bound:
            return sign * h1, k1
        rem = x - a
        if rem == 0:
            break
        x = 1.0 / rem
        if math.isinf(x):
            break
    raise NonConvergenceError(f"Can't approximate {value!r} with relative "
                              f"tolerance {tolerance!r} within "
                              f"{max_iterations} terms.")
