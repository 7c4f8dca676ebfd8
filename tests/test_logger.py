# -*- coding: utf-8 -*-
"""Tests for logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from imgdiff.utils.logger import PACKAGE_LOGGER, resolve_level, setup_logging


def test_resolve_level_accepts_names_and_numbers() -> None:
    assert resolve_level("info") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_resolve_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = list(package_logger.handlers)
    for handler in saved:
        package_logger.removeHandler(handler)
    flag = getattr(package_logger, "_imgdiff_logging_configured", False)
    package_logger._imgdiff_logging_configured = False  # type: ignore[attr-defined]
    log_file = tmp_path / "logs" / "imgdiff.log"
    try:
        logger = setup_logging("DEBUG", log_file)
        logging.getLogger("imgdiff.core.engine").debug("hello from the engine")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello from the engine" in log_file.read_text(encoding="utf-8")

        again = setup_logging("ERROR")
        assert again is logger
        assert logger.level == logging.ERROR
    finally:
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        for handler in saved:
            package_logger.addHandler(handler)
        package_logger._imgdiff_logging_configured = flag  # type: ignore[attr-defined]
