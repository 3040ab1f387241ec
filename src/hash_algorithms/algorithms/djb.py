"""DJB2 hash, a.k.a. 'Times33'."""

from __future__ import annotations

from ..int32 import to_int32
from ..keys import Key, as_text
from ..models import HashAlgorithmName
from .base import HashAlgorithm

DJB_SEED = 5381


class DJBHash(HashAlgorithm):
    """Daniel J. Bernstein's multiply-by-33 hash over code points.

    Wraps to 32 bits after every step, reproducing signed-overflow
    semantics bit for bit.
    """

    __slots__ = ()

    name = HashAlgorithmName.DJB

    def hash(self, key: Key) -> int:
        h = DJB_SEED
        for ch in as_text(key):
            h = to_int32((h << 5) + h + ord(ch))
        return h
