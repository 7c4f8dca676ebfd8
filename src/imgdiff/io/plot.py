# -*- coding: utf-8 -*-
"""Render the difference histogram with matplotlib."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # non-interactive backend, the viewer embeds the PNG
import matplotlib.pyplot as plt
import numpy as np
from PIL import Image

from imgdiff.core.histogram import Histogram
from imgdiff.utils.file_utils import ensure_parent

logger = logging.getLogger(__name__)

PLOT_TITLE = "YIQ distribution"
PLOT_XLABEL = "delta(YIQ)"
PLOT_DPI = 100
MIN_PLOT_SIZE = 200


def _figure_size(size: tuple[int, int]) -> tuple[float, float]:
    width, height = (max(MIN_PLOT_SIZE, int(v)) for v in size)
    return width / PLOT_DPI, height / PLOT_DPI


def render_histogram(
    histogram: Histogram,
    size: tuple[int, int],
    log_scale: bool = True,
) -> Image.Image | None:
    """Plot `histogram` into an RGBA image about `size` pixels large.

    Returns None if plotting fails; the error is logged.
    """
    fig = plt.figure(figsize=_figure_size(size), dpi=PLOT_DPI)
    try:
        ax = fig.add_subplot(1, 1, 1)
        counts = np.asarray(histogram.counts, dtype=np.float64)
        if log_scale:
            # empty bins have no place on a log axis
            counts = np.where(counts > 0, counts, np.nan)
        ax.step(histogram.edges, np.append(counts, counts[-1]), where="post", color="blue")
        if log_scale and np.any(histogram.counts > 0):
            ax.set_yscale("log")
        ax.set_xlim(histogram.low, histogram.high)
        ax.set_title(PLOT_TITLE)
        ax.set_xlabel(PLOT_XLABEL)
        ax.grid(True)

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=PLOT_DPI)
        buf.seek(0)
        with Image.open(buf) as img:
            img.load()
            return img.convert("RGBA")
    except (ValueError, RuntimeError, OSError) as exc:
        logger.error("Could not render histogram plot: %s", exc)
        return None
    finally:
        plt.close(fig)


def save_histogram(
    histogram: Histogram,
    path: str | Path,
    size: tuple[int, int],
    log_scale: bool = True,
) -> Path | None:
    """Render `histogram` and save it as PNG; returns None when rendering failed."""
    image = render_histogram(histogram, size, log_scale=log_scale)
    if image is None:
        return None
    target = ensure_parent(path)
    image.save(target, format="PNG")
    logger.info("Histogram plot written to: %s", target)
    return target
