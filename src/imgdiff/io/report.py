# -*- coding: utf-8 -*-
"""Text and JSON reports of a diff result."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from pathlib import Path
from typing import Any

from imgdiff.core.decision import Verdict
from imgdiff.core.engine import DiffResult
from imgdiff.utils.file_utils import ensure_parent, write_json_file

logger = logging.getLogger(__name__)

# Shortest-form %g switches to exponent notation outside [1e-4, 1e6).
_MIN_DECIMAL_EXP = -4
_MAX_DECIMAL_EXP = 6


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return (digits, decimal point position) of the shortest round-trip form."""
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    if not digits:
        return "0", 1
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, len(stripped) + int(exponent)


def format_float(value: float) -> str:
    """Format a float the way Go's `%g` verb does.

    Shortest digits that round-trip, `e+XX` exponents with at least two
    digits, and `+Inf`, `-Inf`, `NaN` for non-finite values.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return sign + "0"

    digits, point = _shortest_digits(abs(value))
    exp = point - 1
    if exp < _MIN_DECIMAL_EXP or exp >= _MAX_DECIMAL_EXP:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "-" if exp < 0 else "+"
        return f"{sign}{mantissa}e{exp_sign}{abs(exp):02d}"

    if point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return sign + digits + "0" * (point - len(digits))
    return f"{sign}{digits[:point]}.{digits[point:]}"


def format_report(dmin: float, dmax: float) -> str:
    """Return the batch report line `diff=[<dmin>, <dmax>]`."""
    return f"diff=[{format_float(dmin)}, {format_float(dmax)}]"


def format_stats(dmin: float, dmax: float) -> str:
    """Return the multi-line statistics label shown by the viewer."""
    return f"Diff:\n - min= {format_float(dmin)}\n - max= {format_float(dmax)}"


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def build_report(result: DiffResult, threshold: float | None = None, verdict: Verdict | None = None) -> dict[str, Any]:
    """Return a JSON-serializable summary of a diff result.

    Undefined statistics (no positive difference, no overlap) become null.
    """
    report: dict[str, Any] = {
        "summary": format_report(result.dmin, result.dmax),
        "dmin": _finite_or_none(result.dmin),
        "dmax": _finite_or_none(result.dmax),
        "overlap": result.has_overlap,
        "pixel_count": result.pixel_count,
        "bounds": result.bounds.to_dict(),
        "intersection": result.intersection.to_dict(),
        "histogram": result.histogram.to_dict(),
    }
    if threshold is not None:
        report["threshold"] = threshold
    if verdict is not None:
        report["verdict"] = verdict.value
    return report


def write_json_report(
    path: str | Path,
    result: DiffResult,
    threshold: float | None = None,
    verdict: Verdict | None = None,
) -> Path:
    """Write the JSON summary of `result` to `path`."""
    target = write_json_file(path, build_report(result, threshold, verdict))
    logger.info("JSON report written to: %s", target)
    return target


def save_diff_image(result: DiffResult, path: str | Path) -> Path:
    """Save the difference map as a 16-bit grayscale PNG.

    The PNG carries no mask: 65535 can be either the sentinel or a computed
    value. Use `save_mask_image` to keep the distinction.
    """
    if result.bounds.empty:
        raise ValueError("cannot save an empty difference map")
    target = ensure_parent(path)
    result.to_image().save(target, format="PNG")
    logger.info("Difference map written to: %s", target)
    return target


def save_mask_image(result: DiffResult, path: str | Path) -> Path:
    """Save the compared-pixel mask as an 8-bit PNG (255 compared, 0 sentinel)."""
    if result.bounds.empty:
        raise ValueError("cannot save an empty difference mask")
    target = ensure_parent(path)
    result.mask_image().save(target, format="PNG")
    logger.info("Difference mask written to: %s", target)
    return target
