"""FNV-style multiply-then-xor byte hash."""

from __future__ import annotations

from typing import Optional

from ..int32 import to_int32, to_signed_byte
from ..keys import DEFAULT_ENCODING, Key, as_bytes, text_encoding_name
from ..models import HashAlgorithmName
from .base import HashAlgorithm

FNV_PRIME_32 = 16777619


class SimpleHash(HashAlgorithm):
    """Multiply by the 32-bit FNV prime, then xor the sign-extended byte.

    The order (multiply before xor) and the signed byte range must be
    preserved for compatibility with existing consumers.

    Parameters:
        encoding: Codec used to turn text keys into bytes.

    Raises:
        KeyEncodingError: On construction, if *encoding* is unknown or is
            not a text encoding.
    """

    __slots__ = ("_encoding",)

    name = HashAlgorithmName.SIMPLE

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self._encoding = text_encoding_name(encoding)

    @property
    def encoding(self) -> str:
        return self._encoding

    def hash(self, key: Optional[Key]) -> int:
        if key is None:
            return 0
        h = 0
        for b in as_bytes(key, self._encoding):
            h = to_int32(h * FNV_PRIME_32)
            h ^= to_signed_byte(b)
        return h

    def __repr__(self) -> str:
        return f"SimpleHash(encoding={self._encoding!r})"
