"""Named default instances and config-driven construction.

The default instances are built eagerly at import time and are plain
immutable values; callers that need different settings construct their
own through :func:`create_algorithm`.
"""

from __future__ import annotations

from typing import Optional, Union

from loguru import logger

from .algorithms import (
    ConsistentHash,
    DJBHash,
    HashAlgorithm,
    KetamaHash,
    NativeHash,
    SimpleHash,
)
from .config import HashingConfig
from .exceptions import UnknownAlgorithmError
from .models import HashAlgorithmName

NATIVE_HASH: HashAlgorithm = NativeHash()
KETAMA_HASH: HashAlgorithm = KetamaHash()
DJB_HASH: HashAlgorithm = DJBHash()
CONSISTENT_HASH: HashAlgorithm = ConsistentHash(KETAMA_HASH)
SIMPLE_HASH: HashAlgorithm = SimpleHash()

_DEFAULTS: dict[HashAlgorithmName, HashAlgorithm] = {
    HashAlgorithmName.NATIVE: NATIVE_HASH,
    HashAlgorithmName.KETAMA: KETAMA_HASH,
    HashAlgorithmName.DJB: DJB_HASH,
    HashAlgorithmName.CONSISTENT: CONSISTENT_HASH,
    HashAlgorithmName.SIMPLE: SIMPLE_HASH,
}


def resolve_name(name: Union[str, HashAlgorithmName]) -> HashAlgorithmName:
    """Normalize *name* (case-insensitive) to a :class:`HashAlgorithmName`."""
    if isinstance(name, HashAlgorithmName):
        return name
    try:
        return HashAlgorithmName(str(name).strip().lower())
    except ValueError:
        logger.warning("Requested unknown hash algorithm '{}'", name)
        raise UnknownAlgorithmError(str(name)) from None


def get_algorithm(name: Union[str, HashAlgorithmName]) -> HashAlgorithm:
    """Return the shared default instance registered under *name*.

    Raises:
        UnknownAlgorithmError: If *name* is not one of
            :func:`available_algorithms`.
    """
    return _DEFAULTS[resolve_name(name)]


def available_algorithms() -> list[str]:
    return [member.value for member in HashAlgorithmName]


def create_algorithm(
    name: Union[str, HashAlgorithmName],
    config: Optional[HashingConfig] = None,
) -> HashAlgorithm:
    """Build a fresh, independent instance of *name* honouring *config*."""
    cfg = config or HashingConfig()
    resolved = resolve_name(name)
    logger.debug("Creating hash algorithm '{}'", resolved.value)
    if resolved is HashAlgorithmName.NATIVE:
        return NativeHash()
    if resolved is HashAlgorithmName.KETAMA:
        return KetamaHash()
    if resolved is HashAlgorithmName.DJB:
        return DJBHash()
    if resolved is HashAlgorithmName.SIMPLE:
        return SimpleHash(encoding=cfg.text_encoding)
    delegate = create_algorithm(cfg.consistent_delegate, cfg)
    return ConsistentHash(delegate, min_value_policy=cfg.min_value_policy)


def build_algorithm(config: HashingConfig) -> HashAlgorithm:
    """Build the configured default algorithm."""
    return create_algorithm(config.default_algorithm, config)
