# -*- coding: utf-8 -*-
"""Per-pixel YIQ difference of two images."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from PIL import Image

from imgdiff.constants import DIFF_MAX_VALUE, DIFF_SENTINEL
from imgdiff.core.color_metric import yiq_diff_array
from imgdiff.core.geometry import Rect
from imgdiff.core.histogram import Histogram
from imgdiff.core.normalize import normalize

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class DiffResult:
    """Difference map and statistics of one comparison.

    `diff` is laid out over `bounds` (the union of both inputs). Pixels where
    `mask` is False lie outside `intersection` and hold DIFF_SENTINEL.
    A computed difference close to the maximum (red against cyan, for
    instance) also rounds to 65535, so only `mask` tells the two apart.
    `dmin` is the smallest positive difference (+inf when none was seen) and
    `dmax` the largest difference (-inf when the images do not overlap).
    """

    diff: np.ndarray
    mask: np.ndarray
    bounds: Rect
    intersection: Rect
    dmin: float
    dmax: float
    histogram: Histogram

    @property
    def has_overlap(self) -> bool:
        return not self.intersection.empty

    @property
    def pixel_count(self) -> int:
        """Number of compared pixels."""
        return self.intersection.area

    def value_at(self, x: int, y: int) -> int:
        """Return the difference-map value at absolute coordinates (x, y)."""
        return int(self.diff[y - self.bounds.min_y, x - self.bounds.min_x])

    def to_image(self) -> Image.Image:
        """Return the difference map as a 16-bit grayscale Pillow image."""
        return Image.fromarray(self.diff.astype("<u2"))

    def mask_image(self) -> Image.Image:
        """Return `mask` as an 8-bit image: 255 for compared pixels, 0 elsewhere."""
        return Image.fromarray(np.where(self.mask, 255, 0).astype(np.uint8))

    def to_dict(self) -> dict[str, Any]:
        return {
            "dmin": self.dmin,
            "dmax": self.dmax,
            "bounds": self.bounds.to_dict(),
            "intersection": self.intersection.to_dict(),
            "pixel_count": self.pixel_count,
            "histogram": self.histogram.to_dict(),
        }


def image_diff(first: Any, second: Any) -> DiffResult:
    """Compare two images pixel by pixel over their overlapping region.

    Both inputs go through `normalize` first. The overlap is swept in one
    pass: every value feeds the histogram and the running extremes, and
    `round(value * 65535)` lands in the difference map.
    """
    img1 = normalize(first)
    img2 = normalize(second)

    union = img1.bounds.union(img2.bounds)
    bnd = img1.bounds.intersect(img2.bounds)
    logger.debug("Diffing %s against %s (union=%s, overlap=%s)", img1.bounds, img2.bounds, union, bnd)

    diff = np.full((union.dy, union.dx), DIFF_SENTINEL, dtype=np.uint16)
    mask = np.zeros((union.dy, union.dx), dtype=bool)
    hist = Histogram()
    dmin = math.inf
    dmax = -math.inf

    if not bnd.empty:
        values = yiq_diff_array(img1.region(bnd), img2.region(bnd))
        hist.observe_many(values)

        positive = values[values > 0]
        if positive.size:
            dmin = float(positive.min())
        dmax = float(values.max())

        rows, cols = bnd.slices_in(union)
        diff[rows, cols] = np.rint(values * DIFF_MAX_VALUE).astype(np.uint16)
        mask[rows, cols] = True
    else:
        logger.debug("Images do not overlap; statistics stay undefined")

    hist.freeze()
    logger.debug("Diff done: dmin=%s dmax=%s pixels=%d", dmin, dmax, bnd.area)
    return DiffResult(
        diff=diff,
        mask=mask,
        bounds=union,
        intersection=bnd,
        dmin=dmin,
        dmax=dmax,
        histogram=hist,
    )
