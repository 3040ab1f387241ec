"""Abstract base class for hash strategies.

Every strategy maps a key to a signed 32-bit integer. Strategies are
immutable and hold no per-call state, so a single instance may be shared
freely between threads.
"""

from __future__ import annotations

import abc

from ..keys import Key
from ..models import HashAlgorithmName


class HashAlgorithm(abc.ABC):
    """Interface implemented by every hash strategy.

    Subclasses set :attr:`name` and implement :meth:`hash`. Consumers
    such as a consistent-hashing ring depend only on determinism per key
    and on the documented sign convention of the chosen strategy.
    """

    __slots__ = ()

    name: HashAlgorithmName

    @abc.abstractmethod
    def hash(self, key: Key) -> int:
        """Return the hash of *key* as a signed 32-bit integer.

        Args:
            key: Text or raw bytes. Empty keys are valid.

        Returns:
            An int in ``[-2**31, 2**31 - 1]``.

        Raises:
            KeyEncodingError: If the key cannot be converted to the
                representation the algorithm iterates over.
            TypeError: If the key is neither text nor bytes.
        """
        ...

    def __call__(self, key: Key) -> int:
        return self.hash(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
