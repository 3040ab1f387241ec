"""Enumerations shared by the algorithms, the registry and the config."""

from __future__ import annotations

import enum


class HashAlgorithmName(str, enum.Enum):
    """The closed set of algorithms shipped with the library."""

    NATIVE = "native"
    KETAMA = "ketama"
    DJB = "djb"
    CONSISTENT = "consistent"
    SIMPLE = "simple"


class MinValuePolicy(str, enum.Enum):
    """What ``abs(INT32_MIN)`` resolves to, since it has no int32 form."""

    SATURATE = "saturate"
    """Clamp to ``INT32_MAX``."""

    ZERO = "zero"
    """Treat as ``0``."""
