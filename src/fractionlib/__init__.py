# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Fraction arithmetic on fixed-width integers."""

from .converter import (
    DBL_EPSILON, FLT_EPSILON, NonConvergenceError, approximate,
    get_dflt_max_iterations, set_dflt_max_iterations)
from .fraction import Fraction, to_fraction
from .storage import Storage, get_dflt_storage, set_dflt_storage
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'DBL_EPSILON',
    'FLT_EPSILON',
    'Fraction',
    'NonConvergenceError',
    'Storage',
    'approximate',
    'get_dflt_max_iterations',
    'get_dflt_storage',
    'set_dflt_max_iterations',
    'set_dflt_storage',
    'to_fraction',
]
