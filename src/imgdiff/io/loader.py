# -*- coding: utf-8 -*-
"""Image file decoding."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from imgdiff.constants import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)


class ImageLoadError(RuntimeError):
    """Raised when an image file cannot be opened or decoded."""


def load_image(path: str | Path) -> Image.Image:
    """Decode an image file, choosing the decoder from its extension.

    The whole file is read before returning, so the file handle is closed.
    """
    file_path = Path(path)
    ext = file_path.suffix.lower()
    image_format = SUPPORTED_EXTENSIONS.get(ext)
    if image_format is None:
        raise ImageLoadError(f"unknown image file extension {ext!r}")

    logger.info("Loading %s image: %s", image_format, file_path)
    try:
        with Image.open(file_path, formats=[image_format]) as img:
            # multi-frame files (GIF, TIFF) yield their first frame
            img.load()
            loaded = img.copy()
    except FileNotFoundError as exc:
        raise ImageLoadError(f"could not open image file {str(file_path)!r}: {exc}") from exc
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as exc:
        raise ImageLoadError(f"could not decode {image_format} image file {str(file_path)!r}: {exc}") from exc

    logger.debug("Loaded %s: mode=%s size=%s", file_path, loaded.mode, loaded.size)
    return loaded
