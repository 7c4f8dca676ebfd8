# -*- coding: utf-8 -*-
"""Perceptual color difference in the NTSC YIQ color space.

The metric follows:

    Measuring perceived color difference using YIQ NTSC
    transmission color space in mobile applications.
    Yuriy Kotsarenko, Fernando Ramos.

Luminance and the two chrominance deltas are weighted unevenly and the result
is divided by the raw delta of the two most distant colors, which keeps every
value inside [0, 1].
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from imgdiff.constants import YIQ_MAX_DELTA

Y_WEIGHT = 0.5053
I_WEIGHT = 0.299
Q_WEIGHT = 0.1957


def rgb_to_yiq(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert one RGB triple (0..255 per channel) to YIQ coordinates."""
    y = r * 0.29889531 + g * 0.58662247 + b * 0.11448223
    i = r * 0.59597799 - g * 0.27417610 - b * 0.32180189
    q = r * 0.21147017 - g * 0.52261711 + b * 0.31114694
    return y, i, q


def yiq_diff(c1: Sequence[int], c2: Sequence[int]) -> float:
    """Return the normalized YIQ difference of two colors.

    Only the first three channels are read, so RGBA tuples can be passed
    directly; alpha is ignored.
    """
    y1, i1, q1 = rgb_to_yiq(float(c1[0]), float(c1[1]), float(c1[2]))
    y2, i2, q2 = rgb_to_yiq(float(c2[0]), float(c2[1]), float(c2[2]))
    y = y1 - y2
    i = i1 - i2
    q = q1 - q2
    raw = Y_WEIGHT * y * y + I_WEIGHT * i * i + Q_WEIGHT * q * q
    return raw / YIQ_MAX_DELTA


def yiq_diff_array(rgb1: np.ndarray, rgb2: np.ndarray) -> np.ndarray:
    """Elementwise `yiq_diff` over two (..., >=3) channel arrays.

    Every element goes through the same float64 operations in the same order
    as the scalar version, so both agree bit for bit.
    """
    a = np.asarray(rgb1)[..., :3].astype(np.float64)
    b = np.asarray(rgb2)[..., :3].astype(np.float64)
    y1, i1, q1 = rgb_to_yiq(a[..., 0], a[..., 1], a[..., 2])
    y2, i2, q2 = rgb_to_yiq(b[..., 0], b[..., 1], b[..., 2])
    y = y1 - y2
    i = i1 - i2
    q = q1 - q2
    raw = Y_WEIGHT * y * y + I_WEIGHT * i * i + Q_WEIGHT * q * q
    return raw / YIQ_MAX_DELTA
