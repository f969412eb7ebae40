"""Central logging configuration utilities for unitypackage_extractor.

Progress notices are plain log records; the CLI routes them to stdout so a
successful run reads like a transcript, while fatal errors go to stderr.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Optional

ENV_LOG_LEVEL = "UPE_LOG_LEVEL"

_LEVEL_MAP = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def configure_logging(
    level: str | int | None = None,
    *,
    stream: Optional[IO[str]] = None,
    fmt: str = "%(message)s",
    force: bool = False,
) -> logging.Logger:
    """Configure root logger and return the project logger.

    Order of precedence for level:
    1. Explicit `level` argument if given
    2. Environment variable `UPE_LOG_LEVEL`
    3. Fallback to `INFO`
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL) or "INFO"

    invalid_level = None
    if isinstance(level, str):
        name = level.upper()
        if name in _LEVEL_MAP:
            level = _LEVEL_MAP[name]
        else:
            invalid_level = name
            level = logging.INFO

    logging.basicConfig(level=level, format=fmt, stream=stream, force=force)
    logger = logging.getLogger("unitypackage_extractor")
    if invalid_level:
        logger.warning(
            "Invalid %s %r; falling back to INFO. Valid values: %s.",
            ENV_LOG_LEVEL,
            invalid_level,
            ", ".join(sorted(_LEVEL_MAP)),
        )
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a project logger."""
    return logging.getLogger(name or "unitypackage_extractor")


__all__ = ["configure_logging", "get_logger", "ENV_LOG_LEVEL"]
