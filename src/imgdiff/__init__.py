# -*- coding: utf-8 -*-
"""Perceptual image comparison in the YIQ color space."""

from __future__ import annotations

from imgdiff.constants import APP_VERSION
from imgdiff.core.color_metric import yiq_diff
from imgdiff.core.decision import Verdict, decide
from imgdiff.core.engine import DiffResult, image_diff
from imgdiff.core.histogram import Histogram
from imgdiff.core.normalize import RGBAImage, normalize

__version__ = APP_VERSION

__all__ = [
    "DiffResult",
    "Histogram",
    "RGBAImage",
    "Verdict",
    "decide",
    "image_diff",
    "normalize",
    "yiq_diff",
]
