"""Non-negative wrapper around another hash strategy."""

from __future__ import annotations

from typing import Optional

from ..int32 import absolute
from ..keys import Key
from ..models import HashAlgorithmName, MinValuePolicy
from .base import HashAlgorithm
from .ketama import KetamaHash


class ConsistentHash(HashAlgorithm):
    """Absolute value of a delegate's hash, for rings that need ``[0, 2**31 - 1]``.

    The delegate can be swapped without touching ring logic; only the
    distribution changes, never the non-negativity.

    Parameters:
        delegate: Wrapped strategy. Defaults to a new :class:`KetamaHash`.
        min_value_policy: Result when the delegate yields ``INT32_MIN``,
            whose absolute value does not fit in an int32.
    """

    __slots__ = ("_delegate", "_policy")

    name = HashAlgorithmName.CONSISTENT

    def __init__(
        self,
        delegate: Optional[HashAlgorithm] = None,
        min_value_policy: MinValuePolicy = MinValuePolicy.SATURATE,
    ) -> None:
        self._delegate = delegate if delegate is not None else KetamaHash()
        self._policy = MinValuePolicy(min_value_policy)

    @property
    def delegate(self) -> HashAlgorithm:
        return self._delegate

    @property
    def min_value_policy(self) -> MinValuePolicy:
        return self._policy

    def hash(self, key: Key) -> int:
        return absolute(self._delegate.hash(key), self._policy)

    def __repr__(self) -> str:
        return (
            f"ConsistentHash(delegate={self._delegate!r}, "
            f"min_value_policy={self._policy.value!r})"
        )
