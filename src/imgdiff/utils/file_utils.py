# -*- coding: utf-8 -*-
"""File helpers with UTF-8 defaults."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def ensure_parent(path: str | Path) -> Path:
    """Create the parent directory of `path` and return `path`."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    return file_path


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write JSON to a file with indentation."""
    file_path = ensure_parent(path)
    with file_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=True)
        handle.write("\n")
    return file_path

