"""Polynomial rolling string hash (``h = 31*h + c``)."""

from __future__ import annotations

from ..int32 import to_int32
from ..keys import Key, as_text
from ..models import HashAlgorithmName
from .base import HashAlgorithm


class NativeHash(HashAlgorithm):
    """The classic string hash used by JVM-style runtimes.

    Iterates Unicode code points, so values match those runtimes for text
    inside the Basic Multilingual Plane only.
    """

    __slots__ = ()

    name = HashAlgorithmName.NATIVE

    def hash(self, key: Key) -> int:
        h = 0
        for ch in as_text(key):
            h = to_int32(31 * h + ord(ch))
        return h
