# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Test driver for package 'fractionlib' (conversions)."""

from decimal import Decimal
from fractions import Fraction as StdFraction
import struct

import pytest

from fractionlib import Fraction, Storage


def single(value):
    return struct.unpack('f', struct.pack('f', value))[0]


@pytest.mark.parametrize("value", ((3, 4), (-11, 8), (1, 0xffff)),
                         ids=lambda p: str(p))
def test_true(value):
    f = Fraction(*value)
    assert f


@pytest.mark.parametrize("value", ((), (0, 17), (0, -999999999)),
                         ids=("no value", "0/17", "0/-999999999"))
def test_false(value):
    f = Fraction(*value)
    assert not f


@pytest.mark.parametrize(("num", "den"),
                         ((11, 8),
                          (17, 1),
                          (-190, 400000),
                          (1, 3),
                          (Storage.INT64.max, 7)),
                         ids=("11/8", "17", "fraction", "1/3", "large"))
def test_to_double(num, den):
    f = Fraction(num, den, storage=Storage.INT64)
    assert f.to_double() == float(StdFraction(num, den))
    assert float(f) == f.to_double()


def test_to_double_1_375():
    assert Fraction(11, 8).to_double() == 1.375


@pytest.mark.parametrize(("num", "den"),
                         ((11, 8),
                          (1, 3),
                          (-2, 7),
                          (16777217, 1)),
                         ids=("11/8", "1/3", "-2/7", "2**24+1"))
def test_to_float(num, den):
    f = Fraction(num, den)
    res = f.to_float()
    assert res == single(res)
    assert res == single(single(num) / single(den))
    assert abs(res - num / den) <= abs(num / den) * 2 ** -23


def test_to_float_differs_from_double():
    f = Fraction(1, 3)
    assert f.to_float() != f.to_double()
    assert f.to_float() == single(1 / 3)


@pytest.mark.parametrize(("num", "den", "quot"),
                         ((11, 8, Decimal("1.375")),
                          (1, 3, Decimal("0." + "3" * 34)),
                          (-2, 3, Decimal("-0." + "6" * 33 + "7")),
                          (Storage.INT64.max, 1,
                           Decimal(Storage.INT64.max))),
                         ids=("11/8", "1/3", "-2/3", "large"))
def test_to_long_double(num, den, quot):
    f = Fraction(num, den, storage=Storage.INT64)
    assert f.to_long_double() == quot


def test_as_integer_ratio():
    f = Fraction(6, 20)
    assert f.as_integer_ratio() == (6, 20)


@pytest.mark.parametrize(("value", "str_"),
                         (((), "0"),
                          ((15,), "15"),
                          ((6, 20), "6/20"),
                          ((-287, 8290), "-287/8290"),
                          ((1, -2), "1/-2")),
                         ids=lambda p: str(p))
def test_str(value, str_):
    f = Fraction(*value)
    assert str(f) == str_


@pytest.mark.parametrize(("value", "storage", "repr_"),
                         (((), None, "Fraction(0, 1, storage=Storage.INT32)"),
                          ((6, 20), Storage.INT8,
                           "Fraction(6, 20, storage=Storage.INT8)"),
                          ((-287, 8290), Storage.INT64,
                           "Fraction(-287, 8290, storage=Storage.INT64)")),
                         ids=lambda p: str(p))
def test_repr(value, storage, repr_):
    f = Fraction(*value, storage=storage)
    assert repr(f) == repr_
