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


"""Shared pytest fixtures.."""

import pytest

from fractionlib import (
    Storage, get_dflt_max_iterations, get_dflt_storage,
    set_dflt_max_iterations, set_dflt_storage)


@pytest.fixture(scope="session",
                params=[st.name for st in Storage],
                ids=[st.name for st in Storage])
def storage(request) -> Storage:
    return Storage[request.param]


@pytest.fixture(scope="session",
                params=[st.name for st in Storage if st.signed],
                ids=[st.name for st in Storage if st.signed])
def signed_storage(request) -> Storage:
    return Storage[request.param]


def dflt_storage(storage):
    @pytest.fixture()
    def closure():
        prev_storage = get_dflt_storage()
        set_dflt_storage(storage)
        yield
        set_dflt_storage(prev_storage)
    return closure


with_int8 = dflt_storage(Storage.INT8)


@pytest.fixture()
def with_few_iterations():
    prev = get_dflt_max_iterations()
    set_dflt_max_iterations(3)
    yield
    set_dflt_max_iterations(prev)
