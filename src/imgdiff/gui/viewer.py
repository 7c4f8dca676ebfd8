# -*- coding: utf-8 -*-
"""Window showing both inputs, the difference map and its histogram."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import numpy as np
from PIL import Image
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QImage, QKeyEvent, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from imgdiff.constants import APP_NAME, DEFAULT_SCREENSHOT_FILE, DEFAULT_WINDOW_SIZE
from imgdiff.core.engine import DiffResult
from imgdiff.core.normalize import RGBAImage, normalize
from imgdiff.io.report import format_stats

logger = logging.getLogger(__name__)

MARGIN = 10
SIDE_PADDING = 100


def rgba_to_qimage(image: RGBAImage) -> QImage:
    """Copy an RGBA buffer into a QImage."""
    pixels = np.ascontiguousarray(image.pixels)
    height, width = pixels.shape[:2]
    qimage = QImage(pixels.data, width, height, 4 * width, QImage.Format.Format_RGBA8888_Premultiplied)
    return qimage.copy()


def diff_to_qimage(result: DiffResult) -> QImage:
    """Copy the 16-bit difference map into a grayscale QImage."""
    gray = np.ascontiguousarray(result.diff)
    height, width = gray.shape
    qimage = QImage(gray.data, width, height, 2 * width, QImage.Format.Format_Grayscale16)
    return qimage.copy()


class ImagePanel(QFrame):
    """Bordered label displaying one image scaled to a target width."""

    def __init__(self, image: QImage, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.Box)
        self.setLineWidth(2)
        self._pixmap = QPixmap.fromImage(image)
        self.label = QLabel()
        self.label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.addWidget(self.label)

    def set_target_width(self, width: int) -> None:
        if self._pixmap.isNull() or width <= 0:
            self.label.clear()
            return
        self.label.setPixmap(
            self._pixmap.scaledToWidth(width, Qt.TransformationMode.SmoothTransformation)
        )


class DiffViewer(QMainWindow):
    """Two input images on top, statistics in the middle, diff and histogram below.

    Keys: Q / Escape close the window, F11 saves a screenshot.
    """

    def __init__(
        self,
        first: RGBAImage,
        second: RGBAImage,
        result: DiffResult,
        histogram_image: Image.Image | None = None,
        size: tuple[int, int] = DEFAULT_WINDOW_SIZE,
        screenshot_path: str | Path = DEFAULT_SCREENSHOT_FILE,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(APP_NAME)
        self.resize(*size)
        self.result = result
        self.screenshot_path = Path(screenshot_path)

        self.panels = [ImagePanel(rgba_to_qimage(first)), ImagePanel(rgba_to_qimage(second))]
        lower = [ImagePanel(diff_to_qimage(result))]
        if histogram_image is not None:
            lower.append(ImagePanel(rgba_to_qimage(normalize(histogram_image))))
        self.panels.extend(lower)

        self.stats_label = QLabel(format_stats(result.dmin, result.dmax))
        self.stats_label.setObjectName("statsLabel")
        font = QFont("Monospace")
        font.setStyleHint(QFont.StyleHint.Monospace)
        font.setPointSize(12)
        self.stats_label.setFont(font)
        self.stats_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)
        layout.addLayout(self._row(self.panels[:2]))
        layout.addWidget(self.stats_label)
        layout.addLayout(self._row(lower))
        layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)
        self._rescale()

    @staticmethod
    def _row(panels: list[ImagePanel]) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addStretch(1)
        for panel in panels:
            row.addWidget(panel)
        row.addStretch(1)
        return row

    def panel_width(self) -> int:
        """Each image gets half of the window width minus padding."""
        return max(1, int(0.5 * (self.width() - SIDE_PADDING)) - 2 * MARGIN)

    def _rescale(self) -> None:
        width = self.panel_width()
        for panel in self.panels:
            panel.set_target_width(width)

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        self._rescale()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        key = event.key()
        if key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
            return
        if key == Qt.Key.Key_F11:
            try:
                self.save_screenshot()
            except OSError as exc:
                logger.error("Could not take screenshot: %s", exc)
            return
        super().keyPressEvent(event)

    def save_screenshot(self, path: str | Path | None = None) -> Path:
        """Grab the window contents and save them as PNG."""
        target = Path(path or self.screenshot_path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if not self.grab().save(str(target), "PNG"):
            raise OSError(f"could not save screenshot to {target}")
        logger.info("Screenshot saved to: %s", target)
        return target


def run_viewer(
    first: RGBAImage,
    second: RGBAImage,
    result: DiffResult,
    histogram_image: Image.Image | None = None,
    size: tuple[int, int] = DEFAULT_WINDOW_SIZE,
    screenshot_path: str | Path = DEFAULT_SCREENSHOT_FILE,
) -> int:
    """Show the viewer and block until it is closed."""
    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = DiffViewer(
        first,
        second,
        result,
        histogram_image=histogram_image,
        size=size,
        screenshot_path=screenshot_path,
    )
    window.show()
    return app.exec()
