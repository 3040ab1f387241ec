"""Configuration model and YAML helpers for the hashing strategies."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError, KeyEncodingError
from .keys import text_encoding_name
from .models import HashAlgorithmName, MinValuePolicy


class HashingConfig(BaseModel):
    """Settings used when building algorithm instances."""

    default_algorithm: HashAlgorithmName = Field(
        default=HashAlgorithmName.CONSISTENT,
        description="Algorithm returned by build_algorithm().",
    )
    text_encoding: str = Field(
        default="utf-8",
        description="Codec SimpleHash uses to turn text keys into bytes.",
    )
    consistent_delegate: HashAlgorithmName = Field(
        default=HashAlgorithmName.KETAMA,
        description="Algorithm wrapped by ConsistentHash.",
    )
    min_value_policy: MinValuePolicy = Field(
        default=MinValuePolicy.SATURATE,
        description="Result of ConsistentHash when the delegate yields INT32_MIN.",
    )

    @field_validator("default_algorithm", "consistent_delegate", mode="before")
    @classmethod
    def _normalize_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("text_encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return text_encoding_name(value)
        except KeyEncodingError as exc:
            raise ValueError(f"'{value}' is not a usable text encoding") from exc

    @field_validator("consistent_delegate")
    @classmethod
    def _check_delegate(cls, value: HashAlgorithmName) -> HashAlgorithmName:
        if value is HashAlgorithmName.CONSISTENT:
            raise ValueError("consistent hash cannot wrap itself")
        return value


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_config(path: Optional[Path]) -> HashingConfig:
    """Load a :class:`HashingConfig` from YAML, or the defaults if *path* is None."""

    if path is None:
        return HashingConfig()
    resolved = Path(path).expanduser().resolve()
    logger.debug("Loading hashing config from {}", resolved)
    try:
        data = _read_yaml(resolved)
        return HashingConfig(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as exc:
        raise ConfigError(str(resolved), str(exc)) from exc


def dump_config(config: HashingConfig, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = config.model_dump(mode="json")
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, sort_keys=False)
