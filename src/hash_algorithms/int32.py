"""Signed 32-bit two's-complement arithmetic on Python ints."""

from __future__ import annotations

from .models import MinValuePolicy

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def to_int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    value &= _MASK
    if value & _SIGN_BIT:
        return value - (1 << 32)
    return value


def to_signed_byte(value: int) -> int:
    """Sign-extend an unsigned byte (0..255) to -128..127."""
    return value - 256 if value > 127 else value


def absolute(value: int, policy: MinValuePolicy = MinValuePolicy.SATURATE) -> int:
    """Absolute value of an int32, defined for ``INT32_MIN`` by *policy*."""
    if value == INT32_MIN:
        if policy is MinValuePolicy.ZERO:
            return 0
        return INT32_MAX
    return abs(value)
