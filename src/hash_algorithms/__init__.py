"""Pluggable string-to-int32 hashing strategies.

Five algorithms share the :class:`HashAlgorithm` interface: ``native``,
``ketama``, ``djb``, ``consistent`` (non-negative, wraps ``ketama`` by
default) and ``simple``. Consumers such as consistent-hashing rings or
shard tables pick one by name and rely only on its determinism and sign
convention.

Quick Start::

    from hash_algorithms import CONSISTENT_HASH, get_algorithm

    CONSISTENT_HASH.hash("user:42")        # always >= 0
    get_algorithm("djb").hash("hello")     # 261238937

    # Fresh instances from configuration
    from hash_algorithms import HashingConfig, build_algorithm

    algo = build_algorithm(HashingConfig(default_algorithm="simple"))
    algo(b"\\x00\\xff")
"""

from importlib.metadata import version, PackageNotFoundError

from .algorithms import (
    ConsistentHash,
    DJBHash,
    HashAlgorithm,
    KetamaHash,
    NativeHash,
    SimpleHash,
)
from .config import HashingConfig, dump_config, load_config
from .exceptions import (
    ConfigError,
    HashingError,
    KeyEncodingError,
    UnknownAlgorithmError,
    UnsupportedDigestError,
)
from .int32 import INT32_MAX, INT32_MIN
from .logging import init_logging
from .models import HashAlgorithmName, MinValuePolicy
from .registry import (
    CONSISTENT_HASH,
    DJB_HASH,
    KETAMA_HASH,
    NATIVE_HASH,
    SIMPLE_HASH,
    available_algorithms,
    build_algorithm,
    create_algorithm,
    get_algorithm,
)

try:
    __version__ = version("hash-algorithms")
except PackageNotFoundError:  # pragma: no cover - during editable installs
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    # Interface & strategies
    "HashAlgorithm",
    "ConsistentHash",
    "DJBHash",
    "KetamaHash",
    "NativeHash",
    "SimpleHash",
    # Registry
    "CONSISTENT_HASH",
    "DJB_HASH",
    "KETAMA_HASH",
    "NATIVE_HASH",
    "SIMPLE_HASH",
    "available_algorithms",
    "build_algorithm",
    "create_algorithm",
    "get_algorithm",
    # Models & config
    "HashAlgorithmName",
    "MinValuePolicy",
    "HashingConfig",
    "load_config",
    "dump_config",
    "INT32_MAX",
    "INT32_MIN",
    # Logging
    "init_logging",
    # Exceptions
    "ConfigError",
    "HashingError",
    "KeyEncodingError",
    "UnknownAlgorithmError",
    "UnsupportedDigestError",
]
