"""Logging helpers for applications embedding the hashing library."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger


def init_logging(log_file: Optional[Path] = None, level: str = "INFO") -> None:
    """Configure loguru for console + optional file logging."""

    logger.remove()
    logger.add(
        lambda msg: print(msg, end=""),
        colorize=True,
        level=level.upper(),
        enqueue=True,
    )

    if log_file is not None:
        target = Path(log_file).expanduser().resolve()
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.add(target, level=level.upper(), rotation="10 MB", retention="7 days")
