"""Ketama hash: MD5 digest folded to a little-endian int32."""

from __future__ import annotations

import hashlib

from loguru import logger

from ..exceptions import UnsupportedDigestError
from ..keys import Key, as_bytes
from ..models import HashAlgorithmName
from .base import HashAlgorithm

DIGEST_NAME = "md5"


def _new_md5():
    # MD5 here is a distribution hash, not a security primitive.
    return hashlib.new(DIGEST_NAME, usedforsecurity=False)


class KetamaHash(HashAlgorithm):
    """Hash used by memcached-style consistent hashing clients.

    The key is UTF-8 encoded and digested with MD5. Digest bytes 0..3 are
    read little-endian (byte 3 most significant) as a *signed* int32.

    Each call works on its own copy of a digest context created at
    construction, so concurrent callers never share mutable digest state
    and need no lock.

    Raises:
        UnsupportedDigestError: On construction, if MD5 is unavailable
            (e.g. a FIPS-restricted OpenSSL build).
    """

    __slots__ = ("_template",)

    name = HashAlgorithmName.KETAMA

    def __init__(self) -> None:
        try:
            self._template = _new_md5()
        except ValueError as exc:
            raise UnsupportedDigestError(DIGEST_NAME, str(exc)) from exc
        logger.debug("KetamaHash initialized with digest '{}'", DIGEST_NAME)

    def digest(self, key: Key) -> bytes:
        """Return the full 16-byte MD5 digest of *key*."""
        md5 = self._template.copy()
        md5.update(as_bytes(key))
        return md5.digest()

    def hash(self, key: Key) -> int:
        return int.from_bytes(self.digest(key)[:4], byteorder="little", signed=True)
