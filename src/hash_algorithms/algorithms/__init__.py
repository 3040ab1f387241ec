"""Concrete hash strategies."""

from .base import HashAlgorithm
from .consistent import ConsistentHash
from .djb import DJBHash
from .ketama import KetamaHash
from .native import NativeHash
from .simple import SimpleHash

__all__ = [
    "HashAlgorithm",
    "ConsistentHash",
    "DJBHash",
    "KetamaHash",
    "NativeHash",
    "SimpleHash",
]
