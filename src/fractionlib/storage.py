# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Fixed-width integral storage types for fractions."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique
from numbers import Integral
from typing import Any


__all__ = ['Storage', 'get_dflt_storage', 'set_dflt_storage']


@unique
class Storage(Enum):
    """Enumeration of integral storage types."""

    def __new__(cls, bits: int, signed: bool, doc: str) -> Storage:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = (bits, signed)
        member.__doc__ = doc
        return member

    INT8 = (8, True, 'Signed 8-bit integer.')
    INT16 = (16, True, 'Signed 16-bit integer.')
    INT32 = (32, True, 'Signed 32-bit integer.')
    INT64 = (64, True, 'Signed 64-bit integer.')
    UINT8 = (8, False, 'Unsigned 8-bit integer.')
    UINT16 = (16, False, 'Unsigned 16-bit integer.')
    UINT32 = (32, False, 'Unsigned 32-bit integer.')
    UINT64 = (64, False, 'Unsigned 64-bit integer.')

    @property
    def bits(self) -> int:
        """Number of bits."""
        return self._value_[0]

    @property
    def signed(self) -> bool:
        """True if the type can hold negative values."""
        return self._value_[1]

    @property
    def min(self) -> int:
        """Smallest representable value."""
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        """Largest representable value."""
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        """Return `value` reduced to the range of `self`.

        Values outside the range wrap around modulo 2 ** bits, like
        two's-complement machine integers do.
        """
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value

    def coerce(self, value: Any) -> int:
        """Return `value` as int wrapped to the range of `self`.

        Raises:
            TypeError: `value` is not an integral number
        """
        if not isinstance(value, Integral):
            raise TypeError(f"Can't store {value!r} as {self.name}.")
        return self.wrap(int(value))


_dflt_storage: ContextVar[Storage] = \
    ContextVar("dflt_storage", default=Storage.INT32)


def get_dflt_storage() -> Storage:
    """Return default storage type."""
    return _dflt_storage.get()


def set_dflt_storage(storage: Storage) -> Token:
    """Set default storage type.

    Args:
        storage (Storage): storage type to be set as default

    Raises:
        TypeError: given 'storage' is not a valid storage type
    """
    if not isinstance(storage, Storage):
        raise TypeError(f"Illegal storage type: {storage!r}")
    return _dflt_storage.set(storage)
