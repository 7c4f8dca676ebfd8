# -*- coding: utf-8 -*-
"""Logger setup for console + optional file logging."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"
PACKAGE_LOGGER = "imgdiff"


def resolve_level(level: str | int) -> int:
    """Translate a level name such as "info" to its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: str | int = logging.WARNING, log_file: str | Path | None = None) -> logging.Logger:
    """Configure the package logger once; later calls only adjust the level.

    Messages go to stderr so batch output on stdout stays a single line.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    if getattr(logger, "_imgdiff_logging_configured", False):
        for handler in logger.handlers:
            handler.setLevel(numeric_level)
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(numeric_level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug("Logging to file: %s", path)

    logger._imgdiff_logging_configured = True  # type: ignore[attr-defined]
    return logger
