"""Coercion of hash keys to text or bytes.

Algorithms that iterate characters call :func:`as_text`; algorithms that
iterate bytes call :func:`as_bytes`. Conversion failures are surfaced as
:class:`KeyEncodingError` and never hashed as an empty payload.
"""

from __future__ import annotations

import codecs
from typing import Union

from .exceptions import KeyEncodingError

Key = Union[str, bytes, bytearray, memoryview]

DEFAULT_ENCODING = "utf-8"


def text_encoding_name(encoding: str) -> str:
    """Return the canonical name of *encoding* if it converts str <-> bytes.

    Raises:
        KeyEncodingError: If the codec is unknown or is not a text
            encoding (e.g. ``rot13``, ``hex``, ``base64``).
    """
    try:
        name = codecs.lookup(encoding).name
        "".encode(name)
        b"".decode(name)
    except LookupError as exc:
        raise KeyEncodingError(encoding, str(exc)) from exc
    return name


def as_text(key: Key, encoding: str = DEFAULT_ENCODING) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray, memoryview)):
        try:
            return bytes(key).decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise KeyEncodingError(encoding, str(exc)) from exc
    raise TypeError(f"key must be str or bytes, not {type(key).__name__}")


def as_bytes(key: Key, encoding: str = DEFAULT_ENCODING) -> bytes:
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        try:
            return key.encode(encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise KeyEncodingError(encoding, str(exc)) from exc
    raise TypeError(f"key must be str or bytes, not {type(key).__name__}")
