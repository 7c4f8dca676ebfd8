# -*- coding: utf-8 -*-
"""Conversion of decoded images into the canonical RGBA buffer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from PIL import Image

from imgdiff.core.geometry import Rect

logger = logging.getLogger(__name__)

# Modes whose samples are wider than 8 bits; the high byte is kept.
_WIDE_GRAY_MODES = {"I;16", "I;16L", "I;16B", "I;16N"}

_WIDEN = 0x101
_MAX_16 = 0xFFFF


class InvalidPixelFormat(ValueError):
    """Raised when a source cannot be expressed as 8-bit RGBA."""


@dataclass(frozen=True, eq=False)
class RGBAImage:
    """8-bit alpha-premultiplied RGBA pixels anchored at `origin` (x, y).

    The pixels are taken as they are: building an RGBAImage directly means
    the color channels are already premultiplied. `normalize` premultiplies
    straight-alpha sources (Pillow images, numpy arrays) on the way in.
    """

    pixels: np.ndarray
    origin: tuple[int, int] = (0, 0)
    bounds: Rect = field(init=False)

    def __post_init__(self) -> None:
        pixels = self.pixels
        if not isinstance(pixels, np.ndarray) or pixels.dtype != np.uint8:
            raise InvalidPixelFormat("RGBAImage pixels must be a uint8 numpy array")
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidPixelFormat(f"RGBAImage pixels must have shape (H, W, 4), got {pixels.shape}")
        height, width = pixels.shape[:2]
        object.__setattr__(self, "origin", (int(self.origin[0]), int(self.origin[1])))
        object.__setattr__(self, "bounds", Rect.from_size(width, height, self.origin))

    @property
    def width(self) -> int:
        return self.bounds.dx

    @property
    def height(self) -> int:
        return self.bounds.dy

    def rgba_at(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the pixel at absolute coordinates (x, y)."""
        ox, oy = self.origin
        r, g, b, a = self.pixels[y - oy, x - ox]
        return int(r), int(g), int(b), int(a)

    def region(self, rect: Rect) -> np.ndarray:
        """Return a read-only view of the pixels inside `rect` (absolute coordinates)."""
        rows, cols = rect.slices_in(self.bounds)
        view = self.pixels[rows, cols]
        view.flags.writeable = False
        return view

    @classmethod
    def solid(cls, width: int, height: int, color: tuple[int, ...], origin: tuple[int, int] = (0, 0)) -> RGBAImage:
        """Return an image filled with a single color; a missing alpha means opaque."""
        rgba = tuple(color) + (255,) * (4 - len(color))
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[...] = rgba
        return cls(pixels, origin)


def premultiply(pixels: np.ndarray) -> np.ndarray:
    """Return straight-alpha RGBA pixels with color scaled by alpha.

    Each channel is widened to 16 bits, scaled, and narrowed back to its high
    byte. Opaque pixels come out unchanged, fully transparent ones as zero.
    """
    wide = pixels.astype(np.int64) * _WIDEN
    out = pixels.copy()
    alpha = wide[..., 3:4]
    out[..., :3] = ((wide[..., :3] * alpha // _MAX_16) >> 8).astype(np.uint8)
    return out


def _from_array(array: np.ndarray) -> np.ndarray:
    if array.dtype != np.uint8:
        raise InvalidPixelFormat(f"expected uint8 pixels, got {array.dtype}")
    if array.ndim == 2:
        gray = array[..., np.newaxis]
        alpha = np.full(gray.shape, 255, dtype=np.uint8)
        return np.concatenate([gray, gray, gray, alpha], axis=2)
    if array.ndim == 3 and array.shape[2] == 3:
        alpha = np.full(array.shape[:2] + (1,), 255, dtype=np.uint8)
        return np.concatenate([array, alpha], axis=2)
    if array.ndim == 3 and array.shape[2] == 4:
        return premultiply(array)
    raise InvalidPixelFormat(f"unsupported pixel array shape {array.shape}")


def _from_pil(image: Image.Image) -> np.ndarray:
    mode = image.mode
    if mode == "RGBA":
        return premultiply(np.asarray(image, dtype=np.uint8))
    if mode in _WIDE_GRAY_MODES or mode == "I":
        wide = np.asarray(image).astype(np.int64)
        if mode == "I":
            wide = np.clip(wide, 0, 0xFFFF)
        return _from_array((wide >> 8).astype(np.uint8))
    logger.debug("Converting %s image to RGBA", mode)
    try:
        converted = image.convert("RGBA", dither=Image.Dither.NONE)
    except ValueError as exc:
        raise InvalidPixelFormat(f"cannot convert {mode} image to RGBA") from exc
    return premultiply(np.asarray(converted, dtype=np.uint8))


def normalize(source: Any, origin: tuple[int, int] | None = None) -> RGBAImage:
    """Return `source` as an RGBAImage.

    Accepts an RGBAImage (returned as is), a Pillow image or a uint8 numpy
    array shaped (H, W), (H, W, 3) or (H, W, 4). Pillow and numpy alpha is
    straight and gets premultiplied, so transparent pixels compare as
    transparent black. `origin` anchors the result; it defaults to the
    source's own origin, or (0, 0).
    """
    if isinstance(source, RGBAImage):
        if origin is None or tuple(origin) == source.origin:
            return source
        return RGBAImage(source.pixels, tuple(origin))

    if isinstance(source, Image.Image):
        pixels = _from_pil(source)
    elif isinstance(source, np.ndarray):
        pixels = _from_array(source)
    else:
        raise InvalidPixelFormat(f"unsupported image source: {type(source).__name__}")

    return RGBAImage(pixels, tuple(origin) if origin is not None else (0, 0))
