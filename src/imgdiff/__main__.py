# -*- coding: utf-8 -*-
"""Module entry point for `python -m imgdiff`."""

from __future__ import annotations

from imgdiff.cli import app


if __name__ == "__main__":
    app(prog_name="imgdiff")
