# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)


@pytest.fixture
def solid():
    from imgdiff.core.normalize import RGBAImage

    def _solid(width: int, height: int, color=BLACK, origin=(0, 0)):
        return RGBAImage.solid(width, height, color, origin)

    return _solid


@pytest.fixture
def write_png(tmp_path: Path):
    from PIL import Image

    def _write(name: str, size: tuple[int, int], color=BLACK, mode: str = "RGBA") -> Path:
        path = tmp_path / name
        Image.new(mode, size, color).save(path)
        return path

    return _write


@pytest.fixture
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
