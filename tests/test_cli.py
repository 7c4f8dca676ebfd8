# -*- coding: utf-8 -*-
"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from imgdiff.cli import app

runner = CliRunner()


def test_batch_identical_images_pass(write_png) -> None:
    a = write_png("a.png", (10, 10), (255, 0, 0, 255))
    b = write_png("b.png", (10, 10), (255, 0, 0, 255))
    result = runner.invoke(app, [str(a), str(b), "--batch"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "diff=[+Inf, 0]"


def test_batch_black_white_fails_default_threshold(write_png) -> None:
    a = write_png("black.png", (10, 10), (0, 0, 0, 255))
    b = write_png("white.png", (10, 10), (255, 255, 255, 255))
    result = runner.invoke(app, [str(a), str(b), "--batch"])
    assert result.exit_code == 1
    assert result.stdout.startswith("diff=[0.93")


def test_batch_threshold_option(write_png) -> None:
    a = write_png("black.png", (10, 10), (0, 0, 0, 255))
    b = write_png("white.png", (10, 10), (255, 255, 255, 255))
    result = runner.invoke(app, [str(a), str(b), "--batch", "--max", "0.95"])
    assert result.exit_code == 0


def test_batch_threshold_ignores_environment(write_png, monkeypatch) -> None:
    monkeypatch.setenv("IMGDIFF_MAX_DIFF", "0.95")
    a = write_png("black.png", (10, 10), (0, 0, 0, 255))
    b = write_png("white.png", (10, 10), (255, 255, 255, 255))
    result = runner.invoke(app, [str(a), str(b), "--batch"])
    assert result.exit_code == 1


def test_batch_transparent_images_pass(write_png) -> None:
    a = write_png("a.png", (6, 6), (255, 0, 0, 0))
    b = write_png("b.png", (6, 6), (0, 255, 255, 0))
    result = runner.invoke(app, [str(a), str(b), "--batch"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "diff=[+Inf, 0]"


def test_batch_with_different_formats(write_png) -> None:
    a = write_png("a.png", (8, 8), (10, 20, 30, 255))
    b = write_png("b.jpg", (8, 8), (10, 20, 30), mode="RGB")
    result = runner.invoke(app, [str(a), str(b), "--batch", "--max", "0.5"])
    assert result.exit_code == 0
    assert result.stdout.startswith("diff=[")


def test_batch_writes_artifacts(write_png, tmp_path: Path) -> None:
    a = write_png("a.png", (10, 10), (0, 0, 0, 255))
    b = write_png("b.png", (5, 5), (255, 255, 255, 255))
    diff_out = tmp_path / "out" / "diff.png"
    mask_out = tmp_path / "out" / "mask.png"
    hist_out = tmp_path / "out" / "hist.png"
    json_out = tmp_path / "out" / "report.json"
    result = runner.invoke(
        app,
        [
            str(a),
            str(b),
            "--batch",
            "--diff-out",
            str(diff_out),
            "--mask-out",
            str(mask_out),
            "--hist-out",
            str(hist_out),
            "--json-out",
            str(json_out),
        ],
    )
    assert result.exit_code == 1
    assert diff_out.exists()
    assert mask_out.exists()
    assert hist_out.exists()
    report = json.loads(json_out.read_text(encoding="utf-8"))
    assert report["verdict"] == "fail"
    assert report["pixel_count"] == 25


def test_missing_image_reports_error(write_png, tmp_path: Path) -> None:
    a = write_png("a.png", (2, 2))
    missing = tmp_path / "nope.png"
    result = runner.invoke(app, [str(a), str(missing), "--batch"])
    assert result.exit_code == 1
    assert "could not load image" in result.output


def test_unknown_extension_reports_error(write_png, tmp_path: Path) -> None:
    a = write_png("a.png", (2, 2))
    other = tmp_path / "b.webp"
    other.write_bytes(b"xx")
    result = runner.invoke(app, [str(a), str(other), "--batch"])
    assert result.exit_code == 1
    assert "unknown image file extension" in result.output


def test_missing_arguments_show_usage() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code != 0


def test_interactive_mode_opens_viewer(write_png, monkeypatch) -> None:
    pytest.importorskip("PyQt6")
    import imgdiff.gui.viewer as viewer_module

    calls = []

    def _fake_run_viewer(first, second, result, **kwargs) -> int:
        calls.append((result.dmax, kwargs))
        return 0

    monkeypatch.setattr(viewer_module, "run_viewer", _fake_run_viewer)
    a = write_png("a.png", (4, 4), (0, 0, 0, 255))
    b = write_png("b.png", (4, 4), (0, 0, 0, 255))
    result = runner.invoke(app, [str(a), str(b)])
    assert result.exit_code == 0
    assert len(calls) == 1
    dmax, kwargs = calls[0]
    assert dmax == 0.0
    assert set(kwargs) == {"histogram_image"}
    assert kwargs["histogram_image"] is not None
