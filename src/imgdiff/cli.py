# -*- coding: utf-8 -*-
"""Command line entry point: `imgdiff IMG1 IMG2 [--batch] [--max 0.1]`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from imgdiff.constants import APP_NAME, DEFAULT_LOG_LEVEL, DEFAULT_MAX_DIFF
from imgdiff.core.decision import decide
from imgdiff.core.engine import image_diff
from imgdiff.core.normalize import InvalidPixelFormat, normalize
from imgdiff.io.loader import ImageLoadError, load_image
from imgdiff.io.plot import render_histogram, save_histogram
from imgdiff.io.report import format_report, save_diff_image, save_mask_image, write_json_report
from imgdiff.utils.logger import setup_logging

app = typer.Typer(help="Compare two images in the YIQ color space", add_completion=False)
logger = logging.getLogger(__name__)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"{APP_NAME}: {message}", err=True)
    return typer.Exit(1)


@app.command()
def main(
    image1: Path = typer.Argument(..., help="Reference image (PNG, JPEG, GIF or TIFF)"),
    image2: Path = typer.Argument(..., help="Image to compare against the reference"),
    batch: bool = typer.Option(False, "--batch", help="Enable batch mode"),
    max_diff: float = typer.Option(DEFAULT_MAX_DIFF, "--max", help="Maximum allowed difference in batch mode"),
    diff_out: Optional[Path] = typer.Option(None, help="Write the difference map as 16-bit PNG"),
    mask_out: Optional[Path] = typer.Option(None, help="Write the compared-pixel mask as 8-bit PNG"),
    hist_out: Optional[Path] = typer.Option(None, help="Write the histogram plot as PNG"),
    json_out: Optional[Path] = typer.Option(None, help="Write a JSON report"),
    log_file: Optional[Path] = typer.Option(None, help="Also write log messages to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Compare IMAGE1 and IMAGE2.

    In batch mode print `diff=[<min>, <max>]` and exit with status 1 when the
    largest difference exceeds --max; otherwise open the viewer window.
    """
    setup_logging("DEBUG" if verbose else DEFAULT_LOG_LEVEL, log_file)

    images = []
    for path in (image1, image2):
        try:
            images.append(normalize(load_image(path)))
        except (ImageLoadError, InvalidPixelFormat) as exc:
            raise _fail(f'could not load image "{path}": {exc}')
    first, second = images

    result = image_diff(first, second)
    if not result.has_overlap:
        logger.warning("Images %s and %s do not overlap; no pixels were compared", image1, image2)

    verdict = decide(result.dmax, max_diff)
    plot_size = result.bounds.size
    if not result.bounds.empty:
        if diff_out is not None:
            save_diff_image(result, diff_out)
        if mask_out is not None:
            save_mask_image(result, mask_out)
    if hist_out is not None:
        save_histogram(result.histogram, hist_out, plot_size)
    if json_out is not None:
        write_json_report(json_out, result, max_diff, verdict)

    if batch:
        typer.echo(format_report(result.dmin, result.dmax))
        logger.info("Verdict: %s (threshold=%s)", verdict.value, max_diff)
        raise typer.Exit(verdict.exit_code)

    from imgdiff.gui.viewer import run_viewer

    histogram_image = render_histogram(result.histogram, plot_size)
    code = run_viewer(first, second, result, histogram_image=histogram_image)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
