"""Exception hierarchy for the hashing strategies."""

from __future__ import annotations


class HashingError(Exception):
    """Base exception for all hashing errors."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class UnsupportedDigestError(HashingError):
    """Raised when a digest primitive is unavailable in this runtime."""

    def __init__(self, digest_name: str, reason: str = "") -> None:
        self.digest_name = digest_name
        msg = f"Digest '{digest_name}' is not supported."
        if reason:
            msg += f" Reason: {reason}"
        super().__init__(msg)


class KeyEncodingError(HashingError):
    """Raised when a key cannot be converted between text and bytes."""

    def __init__(self, encoding: str, reason: str = "") -> None:
        self.encoding = encoding
        msg = f"Key cannot be converted using encoding '{encoding}'."
        if reason:
            msg += f" Reason: {reason}"
        super().__init__(msg)


class UnknownAlgorithmError(HashingError):
    """Raised when a hash algorithm name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown hash algorithm: '{name}'.")


class ConfigError(HashingError):
    """Raised when a configuration file cannot be loaded."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        msg = f"Invalid hashing configuration '{path}'."
        if reason:
            msg += f" Reason: {reason}"
        super().__init__(msg)
