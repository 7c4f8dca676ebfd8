# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "img-diff"
APP_VERSION = "0.1.0"

# Difference between the two most distant RGB colors in raw YIQ units.
YIQ_MAX_DELTA = 35215.0

DIFF_MAX_VALUE = 65535
# Fill value for difference-map pixels outside the compared region.
DIFF_SENTINEL = DIFF_MAX_VALUE

HISTOGRAM_BINS = 100
HISTOGRAM_RANGE = (0.0, 1.0)

DEFAULT_MAX_DIFF = 0.1
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_WINDOW_SIZE = (800, 800)
DEFAULT_SCREENSHOT_FILE = "out.png"

SUPPORTED_EXTENSIONS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".gif": "GIF",
    ".tif": "TIFF",
    ".tiff": "TIFF",
}
